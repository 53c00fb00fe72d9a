"""
Router
Classic-style routing: registered routes first, then auto-dispatch, then 404
"""
import inspect
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from sanic.response import HTTPResponse

from novasanic.defaults import HTTP_METHODS
from novasanic.http import ResponseHelper, Url
from novasanic.logging import getLogger
from novasanic.routing.auto_dispatcher import AutoDispatcher, fit_params
from novasanic.routing.route import DirectAction, Route
from novasanic.routing.route_collection import RouteCollection

logger = getLogger('routing')


@dataclass
class DispatchResult:
    """Outcome of one dispatch: whether a handler ran, and the response to send"""
    handled: bool
    response: HTTPResponse


class Router:
    """
    Router for classic-style applications

    Usage:
        router = Router(AutoDispatcher(registry), asset_path=Storage.public())

        router.get('/', home)
        router.any('blog/(:num)', 'blog/show/$1')
        router.register(['get', 'post'], 'contact', contact)

        result = await router.dispatch(request)
    """

    def __init__(
        self,
        auto_dispatcher: AutoDispatcher,
        asset_path: Union[str, Path, None] = None,
        methods: Optional[List[str]] = None
    ):
        """
        Initialize the Router

        Args:
            auto_dispatcher: Fallback resolver for URIs no route handles
            asset_path: Directory of static files served for GET requests
            methods: Known HTTP verbs (defaults to HTTP_METHODS)
        """
        self.routes = RouteCollection()
        self.auto_dispatcher = auto_dispatcher
        self.asset_path = Path(asset_path).resolve() if asset_path is not None else None
        self.methods: List[str] = [m.upper() for m in (methods or HTTP_METHODS)]
        self.matched_route: Optional[Route] = None
        self._group_stack: List[Dict] = []

    # =========================================================================
    # Route Registration Methods
    # =========================================================================

    def register(
        self,
        method: Union[str, List[str]],
        pattern: str,
        callback: Union[Callable, str, None] = None
    ) -> Route:
        """
        Map HTTP method(s) and a URL pattern to a callback

        Args:
            method: 'any' (any case), a verb, or a list of verbs
            pattern: URL pattern
            callback: Handler callable or rewrite target string

        Unknown verbs are dropped; if none are left the route accepts
        every known verb.
        """
        if isinstance(method, str) and method.lower() == 'any':
            methods = list(self.methods)
        else:
            requested = [method] if isinstance(method, str) else list(method)
            requested = [m.upper() for m in requested]
            methods = [m for m in self.methods if m in requested]

        if not methods:
            methods = list(self.methods)

        route = Route(methods, self._apply_group_prefix(pattern), callback)

        logger.debug(f"Registered route {route!r}")
        return self.routes.add(route)

    def get(self, pattern: str, callback: Union[Callable, str, None] = None) -> Route:
        """Register a GET route"""
        return self.register('GET', pattern, callback)

    def post(self, pattern: str, callback: Union[Callable, str, None] = None) -> Route:
        """Register a POST route"""
        return self.register('POST', pattern, callback)

    def put(self, pattern: str, callback: Union[Callable, str, None] = None) -> Route:
        """Register a PUT route"""
        return self.register('PUT', pattern, callback)

    def patch(self, pattern: str, callback: Union[Callable, str, None] = None) -> Route:
        """Register a PATCH route"""
        return self.register('PATCH', pattern, callback)

    def delete(self, pattern: str, callback: Union[Callable, str, None] = None) -> Route:
        """Register a DELETE route"""
        return self.register('DELETE', pattern, callback)

    def options(self, pattern: str, callback: Union[Callable, str, None] = None) -> Route:
        """Register an OPTIONS route"""
        return self.register('OPTIONS', pattern, callback)

    def any(self, pattern: str, callback: Union[Callable, str, None] = None) -> Route:
        """Register a route for all HTTP methods"""
        return self.register('any', pattern, callback)

    def match(self, methods: List[str], pattern: str, callback: Union[Callable, str, None] = None) -> Route:
        """Register a route for specific HTTP methods"""
        return self.register(methods, pattern, callback)

    # =========================================================================
    # Route Grouping
    # =========================================================================

    def group(self, attributes: Dict, routes: Callable):
        """
        Register routes sharing a URL prefix

        Usage:
            router.group({'prefix': 'admin'}, lambda: [
                router.get('users', 'admin/users/index'),
            ])
        """
        self._group_stack.append(attributes)
        try:
            routes()
        finally:
            self._group_stack.pop()

    def _apply_group_prefix(self, pattern: str) -> str:
        prefixes = [
            group['prefix'].strip('/')
            for group in self._group_stack
            if group.get('prefix', '').strip('/')
        ]
        if not prefixes:
            return pattern

        pattern = pattern[1:] if pattern.startswith('/') else pattern
        return '/'.join(prefixes + ([pattern] if pattern else []))

    # =========================================================================
    # Dispatching
    # =========================================================================

    async def dispatch(self, request) -> DispatchResult:
        """
        Dispatch a request

        Tries, in order: a static asset (GET only), the registered routes,
        auto-dispatch, and finally a 404 page. Exactly one response is
        produced; `handled` tells whether a handler was found and run.
        """
        uri = Url.detect_uri(request)
        method = request.method.upper()

        if method == 'GET':
            response = await self.dispatch_file(uri)
            if response is not None:
                return DispatchResult(True, response)

        found = self.routes.first_match(uri, method)
        if found is not None:
            route, params = found
            self.matched_route = route
            request.ctx.route = route

            if isinstance(route.action, DirectAction):
                handler = route.action.handler
                accepted = fit_params(handler, request, params)
                result = handler(request, *(params if accepted is None else accepted))
                if inspect.isawaitable(result):
                    result = await result
                return DispatchResult(True, ResponseHelper.make(result))

            uri = route.action.rewrite(uri, route.regex)

        response = await self.auto_dispatch(request, uri)
        if response is not None:
            return DispatchResult(True, response)

        logger.debug("No route or controller for URI", extra={'uri': uri, 'method': method})
        return DispatchResult(False, ResponseHelper.not_found(uri))

    async def auto_dispatch(self, request, uri: str) -> Optional[HTTPResponse]:
        """Invoke the controller method a URI maps onto, if any"""
        return await self.auto_dispatcher.dispatch(request, uri)

    async def dispatch_file(self, uri: str) -> Optional[HTTPResponse]:
        """
        Serve a static asset for the URI

        Returns:
            A file response, or None if the URI is not a readable file
            inside the asset directory
        """
        if not uri or self.asset_path is None:
            return None

        # NUL bytes and over-long names raise instead of missing
        try:
            path = (self.asset_path / uri).resolve()

            if path != self.asset_path and self.asset_path not in path.parents:
                return None

            if not path.is_file() or not os.access(path, os.R_OK):
                return None
        except (OSError, ValueError):
            return None

        return await ResponseHelper.file(path)

    # =========================================================================
    # Route Inspection
    # =========================================================================

    def get_routes(self) -> List[Route]:
        """Get all routes as a list"""
        return self.routes.get_routes()
