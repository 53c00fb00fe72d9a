"""
Framework Application Class
"""
from sanic import Sanic
from typing import Dict, List, Any, Optional
import inspect
import sys

# Bootstrapped in this order; session must boot before language
DEFAULT_PROVIDERS = [
    'novasanic.providers.LoggingServiceProvider',
    'novasanic.providers.HttpServiceProvider',
    'novasanic.providers.SessionServiceProvider',
    'novasanic.providers.LanguageServiceProvider',
    'novasanic.providers.RoutingServiceProvider',
]


class Application:
    """Main application class - manages the entire framework lifecycle"""

    def __init__(self, base_path: str, providers: Optional[List[str]] = None):
        self.base_path = str(base_path)

        # Add base path to Python path so config/ can be imported
        if self.base_path not in sys.path:
            sys.path.insert(0, self.base_path)

        from novasanic.defaults import DEFAULT_APP_NAME
        from novasanic.support import Config, EnvHelper, Storage, Str

        Storage.initialize(self.base_path)
        EnvHelper.initialize(Storage.base('.env'))
        EnvHelper.load()

        self.sanic_app = Sanic(Str.snake(Config.get('app.APP_NAME', DEFAULT_APP_NAME)))
        # Disable sanic-ext auto-loading since we have our own middleware system
        self.sanic_app.config.AUTO_EXTEND = False

        self.providers: List[Any] = []
        self.booted = False
        self.bindings: Dict[str, Any] = {}

        provider_paths = providers if providers is not None else Config.get('app.PROVIDERS', DEFAULT_PROVIDERS)
        self.register_providers(provider_paths)

    def singleton(self, key: str, factory_or_instance):
        """
        Register a singleton binding (Laravel-style container)
        If factory: Will be called once and cached
        If instance: Will be stored directly
        """
        if inspect.isfunction(factory_or_instance) or inspect.ismethod(factory_or_instance):
            self.bindings[key] = {'type': 'singleton', 'factory': factory_or_instance, 'instance': None}
        else:
            self.bindings[key] = {'type': 'singleton', 'factory': None, 'instance': factory_or_instance}

    def bind(self, key: str, factory: callable):
        """Register a factory binding (called every time)"""
        self.bindings[key] = {'type': 'factory', 'factory': factory}

    def make(self, key: str) -> Any:
        """Resolve a binding from the container"""
        if key not in self.bindings:
            raise KeyError(f"Binding '{key}' not found in container")

        binding = self.bindings[key]

        if binding['type'] == 'singleton':
            if binding['instance'] is None:
                binding['instance'] = binding['factory'](self)
            return binding['instance']

        return binding['factory'](self)

    def has(self, key: str) -> bool:
        """
        Check if a binding exists in the container
        """
        return key in self.bindings

    def register_providers(self, provider_paths: List[str]):
        """Register service providers from dotted class paths"""
        from novasanic.support import ClassLoader

        for provider_path in provider_paths:
            self.register_provider(ClassLoader.load(provider_path))

    def register_provider(self, provider_class):
        """Register a service provider"""
        provider = provider_class(self)
        register = provider.register()
        if register is not False:
            self.providers.append(provider)
        return provider

    def boot(self):
        """Boot all service providers"""
        if self.booted:
            return

        for provider in self.providers:
            provider.boot()

        self.booted = True

    def run(self, host=None, port=None, **kwargs):
        """Run the Sanic server"""
        from novasanic.defaults import DEFAULT_HOST, DEFAULT_PORT
        host = host or DEFAULT_HOST
        port = port or DEFAULT_PORT
        self.boot()
        self.sanic_app.run(host=host, port=port, **kwargs)
