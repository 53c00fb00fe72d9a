"""
Auto Dispatcher
Maps URI segments straight onto controller classes and methods
"""
import inspect
from dataclasses import dataclass, field
from typing import List, Optional

from sanic.response import HTTPResponse

from novasanic.http import ResponseHelper
from novasanic.logging import getLogger
from novasanic.routing.controller import Controller
from novasanic.routing.controller_registry import ControllerRegistry
from novasanic.support import Str

logger = getLogger('routing')


def fit_params(handler, request, params: List[str]) -> Optional[List[str]]:
    """
    Trim trailing URI parameters a handler does not accept

    Surplus segments are dropped, so 'blog/index/extra' still reaches
    Blog.index(request).

    Returns:
        The parameters to pass, or None if the handler cannot be called
        with the request and any prefix of them
    """
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        return list(params)

    accepted = list(params)
    while True:
        try:
            signature.bind(request, *accepted)
            return accepted
        except TypeError:
            if not accepted:
                return None
            accepted.pop()


@dataclass(frozen=True)
class DispatchTarget:
    """Controller, method and parameters resolved from a URI"""
    controller: str
    method: str
    params: List[str] = field(default_factory=list)
    module: Optional[str] = None


class AutoDispatcher:
    """
    Resolves URIs in the styles:
        <controller>/<method>/<params>
        <directory>/<controller>/<method>/<params>
        <module>/<directory>/<controller>/<method>/<params>

    Sub-directories are descended shallow-first: descent stops at the first
    segment that names a controller file, even when a directory of the same
    name also exists.

    Usage:
        dispatcher = AutoDispatcher(registry)
        dispatcher.resolve('blog/show/5')
        # DispatchTarget('App.Controllers.Blog', 'show', ['5'])
    """

    def __init__(
        self,
        registry: ControllerRegistry,
        default_controller: str = 'Welcome',
        default_method: str = 'index'
    ):
        self.registry = registry
        self.default_controller = default_controller
        self.default_method = default_method

    def resolve(self, uri: str) -> DispatchTarget:
        """
        Work out controller, method and parameters for a URI

        Resolution only; whether the target can be invoked is decided by
        dispatch().
        """
        parts = [part for part in uri.split('/') if part]

        controller = Str.classify(parts.pop(0)) if parts else ''

        if controller and self.registry.has_module(controller):
            module = controller
            base_path = f'Modules/{controller}/Controllers/'

            # 'clients' alone maps onto Modules/Clients/Controllers/Clients
            if parts:
                controller = Str.classify(parts.pop(0))
        else:
            module = None
            base_path = 'Controllers/'

        directory = ''

        while parts:
            test_path = base_path + directory + controller

            if not self.registry.has_file(test_path) and self.registry.has_directory(test_path):
                directory += controller + '/'
                controller = Str.classify(parts.pop(0))
                continue

            break

        if not controller:
            controller = module or self.default_controller

        method = parts.pop(0) if parts else self.default_method

        return DispatchTarget(
            controller=self.registry.qualify(base_path + directory + controller),
            method=method,
            params=parts,
            module=module,
        )

    async def dispatch(self, request, uri: str) -> Optional[HTTPResponse]:
        """
        Resolve a URI and invoke the controller method

        Returns:
            The response, or None when the URI maps to nothing invokable
        """
        target = self.resolve(uri)

        # Underscore methods are internal and never routable
        if target.method.startswith('_'):
            logger.debug(f"Refusing internal method '{target.method}'", extra={'uri': uri})
            return None

        controller_class = self.registry.get(target.controller)
        if controller_class is None:
            logger.debug(f"No controller '{target.controller}'", extra={'uri': uri})
            return None

        return await self.invoke(request, controller_class, target)

    async def invoke(self, request, controller_class, target: DispatchTarget) -> Optional[HTTPResponse]:
        """
        Call a method on a fresh controller instance

        Returns:
            The response, or None if the controller has no such method
        """
        # Hooks and attributes of the base controller are not actions
        if issubclass(controller_class, Controller) and target.method in vars(Controller):
            logger.debug(f"Refusing controller hook '{target.method}'", extra={'controller': target.controller})
            return None

        instance = controller_class()

        action = getattr(instance, target.method, None)
        if action is None or not callable(action) or inspect.isclass(action):
            logger.debug(
                f"Controller '{target.controller}' has no method '{target.method}'",
                extra={'controller': target.controller}
            )
            return None

        params = fit_params(action, request, target.params)
        if params is None:
            logger.debug(
                f"Method '{target.method}' cannot take {len(target.params)} parameter(s)",
                extra={'controller': target.controller}
            )
            return None

        if isinstance(instance, Controller):
            instance.initialize(request, target.method, params, target.module)

            early = await instance.before()
            if early is not None:
                return ResponseHelper.make(early)

        result = action(request, *params)
        if inspect.isawaitable(result):
            result = await result

        if isinstance(instance, Controller):
            result = await instance.after(result)

        return ResponseHelper.make(result)
