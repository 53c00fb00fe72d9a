"""
Language Service Provider
"""
from novasanic.service_provider import ServiceProvider
from novasanic.middleware.language_middleware import LanguageMiddleware


class LanguageServiceProvider(ServiceProvider):
    """Registers the language middleware (after the session middleware)"""

    def boot(self):
        self.app.make('middleware_manager').add(LanguageMiddleware.from_config(), name='language')
