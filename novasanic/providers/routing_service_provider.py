"""
Routing Service Provider
"""
from novasanic.defaults import (
    DEFAULT_CONTROLLER,
    DEFAULT_METHOD,
    DEFAULT_NAMESPACE,
    DEFAULT_ROUTE_FILE,
    HTTP_METHODS,
)
from novasanic.service_provider import ServiceProvider
from novasanic.routing import AutoDispatcher, ControllerRegistry, RouteFileLoader, Router
from novasanic.support import Config, Storage


class RoutingServiceProvider(ServiceProvider):
    def register(self):
        """Register routing services"""
        self.app.singleton('controller_registry', lambda app: ControllerRegistry(
            Storage.app(),
            namespace=Config.get('app.NAMESPACE', DEFAULT_NAMESPACE)
        ).scan())

        self.app.singleton('auto_dispatcher', lambda app: AutoDispatcher(
            app.make('controller_registry'),
            default_controller=Config.get('app.DEFAULT_CONTROLLER', DEFAULT_CONTROLLER),
            default_method=Config.get('app.DEFAULT_METHOD', DEFAULT_METHOD)
        ))

        self.app.singleton('router', lambda app: Router(
            app.make('auto_dispatcher'),
            asset_path=Storage.public(),
            methods=Config.get('app.HTTP_METHODS', HTTP_METHODS)
        ))

    def boot(self):
        """Scan controllers and load the route file before serving"""
        router = self.app.make('router')
        RouteFileLoader(router).load(Storage.routes(DEFAULT_ROUTE_FILE))
