"""
Session Service Provider
Registers session middleware and services
"""
from novasanic.service_provider import ServiceProvider
from novasanic.middleware.session_middleware import SessionMiddleware


class SessionServiceProvider(ServiceProvider):
    """Service provider for session management"""

    def boot(self):
        """Bootstrap session services"""
        self.app.make('middleware_manager').add(SessionMiddleware.from_config(), name='session')
