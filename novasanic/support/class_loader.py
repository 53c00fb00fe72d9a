"""
Class Loader
Dynamic class loading utility for importing classes from dotted paths or source files
"""
import importlib.util
import inspect
from pathlib import Path
from types import ModuleType
from typing import Optional, Type, Union


class ClassLoader:
    """
    Utility for dynamically loading classes from string paths and files

    Example:
        # Load a class from an importable module
        cls = ClassLoader.load('novasanic.routing.controller.Controller')

        # Load a class from a controller file
        cls = ClassLoader.load_from_file(
            'app/Controllers/Blog.py', 'App.Controllers.Blog', 'Blog'
        )
    """

    @staticmethod
    def load(class_path: str) -> Type:
        """
        Load a class from a dotted path string

        Raises:
            ImportError: If module cannot be imported
            AttributeError: If class doesn't exist in module
        """
        module_path, class_name = class_path.rsplit('.', 1)

        module = __import__(module_path, fromlist=[class_name])

        return getattr(module, class_name)

    @staticmethod
    def load_module(file_path: Union[str, Path], module_name: str) -> ModuleType:
        """
        Execute a Python source file as a module named `module_name`

        The module is not added to sys.modules; each call runs the file again.

        Raises:
            ImportError: If no loader can be created for the file
        """
        spec = importlib.util.spec_from_file_location(module_name, str(file_path))
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load module '{module_name}' from {file_path}")

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    @staticmethod
    def load_from_file(
        file_path: Union[str, Path],
        module_name: str,
        class_name: str
    ) -> Optional[Type]:
        """
        Load a class defined in a Python source file

        Returns:
            The class, or None if the module defines no class of that name
        """
        module = ClassLoader.load_module(file_path, module_name)
        candidate = getattr(module, class_name, None)

        if inspect.isclass(candidate):
            return candidate
        return None
