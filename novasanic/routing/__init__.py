"""
Routing Package
Classic-style router, auto-dispatch and controller registry
"""
from novasanic.routing.route import Route, DirectAction, RewriteAction
from novasanic.routing.route_collection import RouteCollection
from novasanic.routing.controller import Controller
from novasanic.routing.controller_registry import ControllerRegistry
from novasanic.routing.auto_dispatcher import AutoDispatcher, DispatchTarget
from novasanic.routing.router import Router, DispatchResult
from novasanic.routing.route_loader import RouteFileLoader

__all__ = [
    'Route',
    'DirectAction',
    'RewriteAction',
    'RouteCollection',
    'Controller',
    'ControllerRegistry',
    'AutoDispatcher',
    'DispatchTarget',
    'Router',
    'DispatchResult',
    'RouteFileLoader',
]
