"""
Route Collection
Ordered collection of routes; registration order is match priority
"""
from typing import Any, Dict, List, Optional
from novasanic.routing.route import Route, DirectAction


class RouteCollection:
    """
    Ordered list of routes with first-match lookup

    No de-duplication is done: a later route with the same pattern is
    simply never reached when an earlier one matches first.
    """

    def __init__(self):
        """Initialize an empty route collection"""
        self._routes: List[Route] = []

    def add(self, route: Route) -> Route:
        """
        Append a route to the collection

        Returns:
            The added route
        """
        self._routes.append(route)
        return route

    def get_routes(self) -> List[Route]:
        """Get all routes in registration order"""
        return self._routes

    def first_match(self, uri: str, method: str) -> Optional[tuple]:
        """
        Find the first route that matches the URI and method

        Returns:
            (route, params) or None
        """
        for route in self._routes:
            params = route.match(uri, method)
            if params is not None:
                return route, params
        return None

    def count(self) -> int:
        """Get total number of routes"""
        return len(self._routes)

    def __iter__(self):
        """Make collection iterable"""
        return iter(self._routes)

    def __len__(self):
        """Get number of routes"""
        return len(self._routes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert route collection to a dictionary representation

        Returns:
            Dict with route information and per-method counts
        """
        routes_list = []
        by_method: Dict[str, int] = {}

        for route in self._routes:
            route_dict = {
                'uri': route.pattern or '/',
                'methods': route.get_methods(),
                'action': route.get_action_name(),
                'type': 'closure' if isinstance(route.action, DirectAction) else 'rewrite',
                'parameters': route.get_parameter_names(),
            }

            if route.get_wheres():
                route_dict['constraints'] = route.get_wheres()

            routes_list.append(route_dict)

            for method in route.get_methods():
                by_method[method] = by_method.get(method, 0) + 1

        return {
            'total': len(self._routes),
            'routes': routes_list,
            'by_method': by_method,
        }

    def __repr__(self):
        """String representation"""
        return f"<RouteCollection ({len(self._routes)} routes)>"
