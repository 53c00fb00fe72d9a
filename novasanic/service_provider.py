"""
Service Provider Base Class
Laravel-style service providers for registering services and bootstrapping the framework
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from novasanic.application import Application


class ServiceProvider(ABC):
    """
    Base Service Provider class

    Service providers are the central place for application bootstrapping.
    They handle:
    - Registering services in the container
    - Registering middlewares
    - Loading route files
    """

    def __init__(self, app: 'Application'):
        self.app = app

    def register(self):
        """
        Register services in the container
        Called when the provider is registered (before booting)

        Returning False drops the provider before boot.

        Example:
            self.app.singleton('router', lambda app: Router(...))
        """
        pass

    def boot(self):
        """
        Bootstrap services (after all providers are registered)

        Example:
            self.app.make('middleware_manager').add(SessionMiddleware.from_config())
        """
        pass
