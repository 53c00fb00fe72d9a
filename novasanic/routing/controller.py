"""
Base Controller
Optional base class for auto-dispatched controllers
"""
from typing import Any, List, Optional


class Controller:
    """
    Base controller with request context and before/after hooks

    Auto-dispatch creates a fresh instance per request, calls initialize(),
    then before(). A response returned from before() short-circuits the
    action. The action's result goes through after() before it is sent.

    Usage:
        class Blog(Controller):
            async def before(self):
                if not self.request.ctx.session.has('user_id'):
                    return redirect('/login')

            async def show(self, request, post_id):
                return f'<h1>Post {post_id}</h1>'
    """

    request = None
    module: Optional[str] = None
    method: Optional[str] = None
    params: Optional[List[str]] = None

    def initialize(self, request, method: str, params: List[str], module: Optional[str] = None):
        """Store the dispatch context on the instance"""
        self.request = request
        self.method = method
        self.params = list(params)
        self.module = module

    async def before(self) -> Any:
        """Runs before the action; return a response to skip the action"""
        return None

    async def after(self, result: Any) -> Any:
        """Runs after the action; returns the (possibly replaced) result"""
        return result
