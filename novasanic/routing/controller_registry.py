"""
Controller Registry
Snapshot of the application's controller tree, taken once at boot
"""
from pathlib import Path
from typing import Dict, Optional, Set, Type, Union

from novasanic.exceptions import ControllerLoadException
from novasanic.logging import getLogger
from novasanic.support import ClassLoader

logger = getLogger('routing')


class ControllerRegistry:
    """
    Registry of controller classes keyed by qualified name

    Layout scanned under the app path:
        Controllers/<Dirs>/<Name>.py
        Modules/<Module>/Controllers/<Dirs>/<Name>.py

    Each controller file must define a class named after the file. The class
    is registered as '<Namespace>.<relative path with dots>', e.g.
    'App.Controllers.Admin.Users' or 'App.Modules.Clients.Controllers.Clients'.

    Paths are kept relative to the app path, with '/' separators and without
    the '.py' extension, so the auto-dispatcher can ask about files and
    directories without touching the filesystem.

    Usage:
        registry = ControllerRegistry(Storage.app(), 'App').scan()
        registry.has_module('Clients')
        registry.get('App.Controllers.Blog')
    """

    def __init__(self, app_path: Union[str, Path, None] = None, namespace: str = 'App'):
        self.app_path = Path(app_path) if app_path is not None else None
        self.namespace = namespace
        self._modules: Set[str] = set()
        self._files: Set[str] = set()
        self._directories: Set[str] = set()
        self._controllers: Dict[str, Type] = {}

    # =========================================================================
    # Scanning
    # =========================================================================

    def scan(self) -> 'ControllerRegistry':
        """
        Walk the controller roots and load every controller class

        Raises:
            ControllerLoadException: If a controller file fails to import
        """
        if self.app_path is None or not self.app_path.is_dir():
            logger.warning(f"Controller scan skipped, app path not found: {self.app_path}")
            return self

        self._scan_root(self.app_path / 'Controllers')

        modules_path = self.app_path / 'Modules'
        if modules_path.is_dir():
            for module_dir in sorted(modules_path.iterdir()):
                if not module_dir.is_dir() or self._is_hidden(module_dir.name):
                    continue

                self._modules.add(module_dir.name)
                self._scan_root(module_dir / 'Controllers')

        logger.debug(
            f"Scanned {len(self._controllers)} controllers in {len(self._modules)} modules",
            extra={'app_path': str(self.app_path)}
        )
        return self

    def _scan_root(self, root: Path):
        if not root.is_dir():
            return

        self._directories.add(self._relative(root))

        for path in sorted(root.rglob('*')):
            relative_parts = path.relative_to(root).parts
            if any(self._is_hidden(part) for part in relative_parts):
                continue

            if path.is_dir():
                self._directories.add(self._relative(path))
            elif path.suffix == '.py':
                self._load_controller(path)

    def _load_controller(self, path: Path):
        relative = self._relative(path.with_suffix(''))
        self._files.add(relative)

        qualified = self.qualify(relative)
        try:
            controller = ClassLoader.load_from_file(path, qualified, path.stem)
        except Exception as e:
            logger.error(f"Could not load controller '{qualified}'", extra={'file': str(path)})
            raise ControllerLoadException(f"Could not load controller '{qualified}': {e}") from e

        if controller is None:
            logger.warning(f"Controller file defines no class '{path.stem}'", extra={'file': str(path)})
            return

        self._controllers[qualified] = controller

    def _relative(self, path: Path) -> str:
        return path.relative_to(self.app_path).as_posix()

    @staticmethod
    def _is_hidden(name: str) -> bool:
        return name.startswith('_') or name.startswith('.')

    # =========================================================================
    # Registration
    # =========================================================================

    def register(self, relative_path: str, controller: Type) -> str:
        """
        Register a controller class under a relative path

        Records the file and all of its parent directories, the same way a
        scan does.

        Args:
            relative_path: e.g. 'Controllers/Admin/Users'
            controller: Controller class

        Returns:
            The qualified name
        """
        relative_path = relative_path.strip('/')
        self._files.add(relative_path)

        parts = relative_path.split('/')
        for depth in range(1, len(parts)):
            self._directories.add('/'.join(parts[:depth]))

        if len(parts) > 1 and parts[0] == 'Modules':
            self._modules.add(parts[1])

        qualified = self.qualify(relative_path)
        self._controllers[qualified] = controller
        return qualified

    # =========================================================================
    # Lookups
    # =========================================================================

    def qualify(self, relative_path: str) -> str:
        """Turn 'Controllers/Admin/Users' into 'App.Controllers.Admin.Users'"""
        parts = [part for part in relative_path.split('/') if part]
        return '.'.join([self.namespace] + parts)

    def has_module(self, name: str) -> bool:
        """Check if Modules/<name> exists"""
        return name in self._modules

    def has_file(self, relative_path: str) -> bool:
        """Check if <relative_path>.py is a controller file"""
        return relative_path.strip('/') in self._files

    def has_directory(self, relative_path: str) -> bool:
        """Check if <relative_path> is a directory of the controller tree"""
        return relative_path.strip('/') in self._directories

    def get(self, qualified: str) -> Optional[Type]:
        """Get the controller class registered under a qualified name"""
        return self._controllers.get(qualified)

    def has(self, qualified: str) -> bool:
        """Check if a controller class is registered under a qualified name"""
        return qualified in self._controllers

    def all(self) -> Dict[str, Type]:
        """Get all registered controllers"""
        return dict(self._controllers)

    def __len__(self):
        return len(self._controllers)

    def __repr__(self):
        return f"<ControllerRegistry ({len(self._controllers)} controllers)>"
