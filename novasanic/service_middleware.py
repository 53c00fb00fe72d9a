from sanic import Request
from novasanic.middleware import Middleware
from typing import List, Tuple


class ServiceMiddleware:
    """Manages middleware registration and execution"""

    def __init__(self, app):
        self.app = app
        self.middlewares: List[Tuple[Middleware, str]] = []

    def add(self, middleware_instance: Middleware, name: str = None):
        """
        Add a middleware to the stack

        Middlewares run in insertion order before the router and in
        reverse order after it.
        """
        if middleware_instance is None:
            return
        self.middlewares.append((middleware_instance, name))

    def names(self) -> List[str]:
        return [name or type(m).__name__ for m, name in self.middlewares]

    async def run_before(self, request: Request):
        """Run before_request hooks, stopping at the first short-circuit response"""
        request.ctx.executed_middlewares = []

        for middleware_instance, _ in self.middlewares:
            request.ctx.executed_middlewares.append(middleware_instance)

            result = await middleware_instance.before_request(request)
            if result is not None:
                return result
        return None

    async def run_after(self, request: Request, resp):
        """Run after_response hooks for the middlewares that actually ran"""
        executed = getattr(request.ctx, 'executed_middlewares', [])

        for middleware in reversed(executed):
            resp = await middleware.after_response(request, resp)
        return resp

    def register_with_sanic(self):
        from novasanic.support import Config
        from novasanic.exceptions import ErrorHandler

        error_handler = ErrorHandler(debug=Config.get('app.APP_DEBUG', False))

        @self.app.sanic_app.exception(Exception)
        async def handle_exception(request, exception):
            """Handle all exceptions through centralized error handler"""
            return await error_handler.handle_error(request, exception)

        @self.app.sanic_app.middleware('request')
        async def process_request(request):
            return await self.run_before(request)

        @self.app.sanic_app.middleware('response')
        async def process_response(request, resp):
            return await self.run_after(request, resp)
