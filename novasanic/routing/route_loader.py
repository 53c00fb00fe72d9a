"""
Route File Loader
Loads the application's route definitions into a Router
"""
from pathlib import Path
from typing import Union

from novasanic.logging import getLogger
from novasanic.support import ClassLoader

logger = getLogger('routing')


class RouteFileLoader:
    """
    Loads a routes file and hands it the router

    The file defines a `register(router)` function:

        # routes/web.py
        def register(router):
            router.get('/', 'welcome/index')
            router.any('blog/(:num)', 'blog/show/$1')
    """

    def __init__(self, router):
        self.router = router

    def load(self, file_path: Union[str, Path]) -> int:
        """
        Load a route file

        Returns:
            Number of routes the file registered (0 if the file is missing)
        """
        file_path = Path(file_path)
        if not file_path.is_file():
            logger.debug(f"Route file not found: {file_path}")
            return 0

        routes_before = len(self.router.routes)

        module = ClassLoader.load_module(file_path, f"routes.{file_path.stem}")

        register = getattr(module, 'register', None)
        if not callable(register):
            raise AttributeError(f"Route file {file_path} must define register(router)")

        register(self.router)

        added = len(self.router.routes) - routes_before
        logger.debug(f"Loaded {added} routes from {file_path.name}")
        return added
