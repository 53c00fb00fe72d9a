"""
Storage - Centralized path management (Laravel-style)
Provides consistent path resolution across the application
"""

import os
from pathlib import Path
from typing import Union


class Storage:
    """
    Centralized path management helper (Laravel-style)

    Directory structure:
    /
    ├── app/                # Application code
    │   ├── Controllers/    # Auto-dispatched controllers
    │   ├── Modules/        # Modules, each with its own Controllers/
    │   └── Language/       # Language files (<Code>/<name>.json)
    ├── config/             # Configuration files
    ├── public/             # Public assets, served as-is
    ├── routes/             # Route definitions (web.py)
    ├── storage/            # File storage
    │   ├── sessions/       # Session storage
    │   └── logs/           # Log files
    └── main.py             # Application entry point
    """

    _base_path: Path = None

    @classmethod
    def initialize(cls, base_path: Union[str, Path] = None):
        """
        Initialize paths (should be called during app startup)

        Args:
            base_path: Application base directory (defaults to current working directory)
        """
        if base_path is None:
            base_path = os.getcwd()

        cls._base_path = Path(base_path).resolve()

    @classmethod
    def base(cls, *paths: str) -> Path:
        """
        Get application base path

        Example:
            Storage.base('app', 'Controllers')  # /project/app/Controllers
        """
        if cls._base_path is None:
            cls.initialize()

        if paths:
            clean_paths = [p.lstrip('/') for p in paths]
            return cls._base_path.joinpath(*clean_paths)
        return cls._base_path

    @classmethod
    def framework(cls, *paths: str) -> Path:
        """
        Get framework installation path (where the novasanic package is installed)

        Example:
            Storage.framework('console', 'commands')
        """
        framework_path = Path(__file__).resolve().parent.parent

        if paths:
            return framework_path.joinpath(*paths)
        return framework_path

    @classmethod
    def app(cls, *paths: str) -> Path:
        """Get app path (app/)"""
        return cls.base('app', *paths)

    @classmethod
    def language(cls, *paths: str) -> Path:
        """Get language files path (app/Language/)"""
        return cls.app('Language', *paths)

    @classmethod
    def public(cls, *paths: str) -> Path:
        """Get public assets path (public/)"""
        return cls.base('public', *paths)

    @classmethod
    def routes(cls, *paths: str) -> Path:
        """Get routes path (routes/)"""
        return cls.base('routes', *paths)

    @classmethod
    def storage(cls, *paths: str) -> Path:
        """Get storage path (storage/)"""
        return cls.base('storage', *paths)

    @classmethod
    def sessions(cls, *paths: str) -> Path:
        """Get session storage path (storage/sessions/)"""
        return cls.storage('sessions', *paths)

    @classmethod
    def logs(cls, *paths: str) -> Path:
        """Get logs path (storage/logs/)"""
        return cls.storage('logs', *paths)

    @classmethod
    def ensure_directory(cls, path: Union[str, Path]) -> Path:
        """
        Create a directory (and parents) if it doesn't exist

        Returns:
            The directory path
        """
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path
