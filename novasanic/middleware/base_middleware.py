"""
Base Middleware Class
Abstract base class for all middlewares
"""
from abc import ABC, abstractmethod
from sanic import Request
from typing import Optional, Dict, Any


class Middleware(ABC):
    """
    Base middleware class

    Middlewares can:
    - Inspect/modify requests before they reach the router
    - Inspect/modify responses before they're sent
    - Short-circuit requests (return response early)

    Configuration:
    Subclasses can set these class variables for automatic configuration:
    - ENABLED_CONFIG_KEY: Config key to check if middleware is enabled
    - CONFIG_MAPPING: Dict mapping constructor params to (config key, default)
    - DEFAULT_ENABLED: Default enabled state if config key not found
    """

    ENABLED_CONFIG_KEY: str = None
    CONFIG_MAPPING: Dict[str, tuple] = {}
    DEFAULT_ENABLED: bool = True

    @classmethod
    def _is_enabled(cls) -> bool:
        """
        Hook for custom enabled check logic

        By default, checks ENABLED_CONFIG_KEY from config.
        """
        from novasanic.support import Config

        if cls.ENABLED_CONFIG_KEY:
            return Config.get(cls.ENABLED_CONFIG_KEY, cls.DEFAULT_ENABLED)

        return cls.DEFAULT_ENABLED

    @classmethod
    def from_config(cls) -> Optional['Middleware']:
        """
        Create a middleware instance from configuration

        Returns:
            Middleware instance if enabled, None otherwise
        """
        from novasanic.support import Config

        if not cls._is_enabled():
            return None

        params: Dict[str, Any] = {}
        for param_name, (config_key, default_value) in cls.CONFIG_MAPPING.items():
            params[param_name] = Config.get(config_key, default_value)

        return cls(**params)

    @abstractmethod
    async def before_request(self, request: Request):
        """
        Called before the request reaches the router

        Returns:
            None: Continue to next middleware/route
            HTTPResponse: Short-circuit and return response immediately
        """

    async def after_response(self, request: Request, response):
        """
        Called after the router, before sending response

        Returns:
            response: Modified or original response
        """
        return response
