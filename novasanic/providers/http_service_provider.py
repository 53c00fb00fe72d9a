"""
HTTP Service Provider
Registers the middleware manager and the catch-all dispatch routes
"""
from novasanic.service_provider import ServiceProvider
from novasanic.service_middleware import ServiceMiddleware


class HttpServiceProvider(ServiceProvider):
    """HTTP layer service provider"""

    def register(self):
        """Register HTTP services"""
        self.app.singleton('middleware_manager', ServiceMiddleware(self.app))

    def boot(self):
        """Bootstrap HTTP services"""
        self.app.make('middleware_manager').register_with_sanic()
        self.register_dispatch_routes()

    def register_dispatch_routes(self):
        """
        Hand every request to the framework router

        Sanic only sees two catch-all routes; matching, rewriting, asset
        serving and auto-dispatch all happen inside Router.dispatch().
        """
        from novasanic.defaults import HTTP_METHODS
        from novasanic.support import Config

        methods = [m.upper() for m in Config.get('app.HTTP_METHODS', HTTP_METHODS)]

        async def dispatch(request, path=''):
            router = self.app.make('router')
            result = await router.dispatch(request)
            return result.response

        sanic_app = self.app.sanic_app
        sanic_app.add_route(dispatch, '/', methods=methods, name='novasanic_root')
        sanic_app.add_route(dispatch, '/<path:path>', methods=methods, name='novasanic_dispatch')
