"""
Session Middleware
Starts and saves sessions automatically
"""
import asyncio
import random
from sanic import Request
from novasanic.defaults import (
    DEFAULT_SESSION_COOKIE_NAME,
    DEFAULT_SESSION_ID_LENGTH,
    DEFAULT_SESSION_LIFETIME,
    DEFAULT_SESSION_LOTTERY,
)
from novasanic.middleware.base_middleware import Middleware
from novasanic.session import SessionManager, FileSessionStore, CookieSessionStore, ArraySessionStore
from novasanic.support import Config, Crypto, Storage


class SessionMiddleware(Middleware):
    """Session management middleware"""

    ENABLED_CONFIG_KEY = 'session.ENABLED'
    CONFIG_MAPPING = {
        'driver': ('session.DRIVER', 'file'),
        'lifetime': ('session.LIFETIME', DEFAULT_SESSION_LIFETIME),
        'cookie_name': ('session.COOKIE_NAME', DEFAULT_SESSION_COOKIE_NAME),
        'cookie_path': ('session.COOKIE_PATH', '/'),
        'cookie_domain': ('session.COOKIE_DOMAIN', None),
        'cookie_secure': ('session.COOKIE_SECURE', False),
        'cookie_http_only': ('session.COOKIE_HTTP_ONLY', True),
        'cookie_same_site': ('session.COOKIE_SAME_SITE', 'Lax'),
        'lottery': ('session.SESSION_LOTTERY', DEFAULT_SESSION_LOTTERY),
    }

    def __init__(self, driver='file', lifetime=None, cookie_name=None,
                 cookie_path='/', cookie_domain=None, cookie_secure=False,
                 cookie_http_only=True, cookie_same_site='Lax', lottery=None,
                 store=None):
        """Initialize session middleware"""
        self.config = {
            'driver': driver,
            'lifetime': lifetime or DEFAULT_SESSION_LIFETIME,
            'cookie_name': cookie_name or DEFAULT_SESSION_COOKIE_NAME,
            'cookie_path': cookie_path,
            'cookie_domain': cookie_domain,
            'cookie_secure': cookie_secure,
            'cookie_http_only': cookie_http_only,
            'cookie_same_site': cookie_same_site,
            'lottery': lottery or DEFAULT_SESSION_LOTTERY,
        }
        self.store = store or self._create_store()

    def _create_store(self):
        """Create session store based on driver"""
        driver = self.config['driver']

        if driver == 'file':
            return FileSessionStore(Storage.sessions(), self.config['lifetime'])

        if driver == 'cookie':
            secret = Config.get('app.APP_SECRET_KEY')
            if not secret:
                raise ValueError(
                    "APP_SECRET_KEY is required for cookie session driver!\n"
                    "Set APP_SECRET_KEY in the .env file"
                )
            return CookieSessionStore(secret)

        return ArraySessionStore()

    def _get_session_id(self, request: Request) -> str:
        """Get session ID from cookie or generate new one"""
        session_id = request.cookies.get(self.config['cookie_name'])

        if not session_id:
            session_id = Crypto.generate_token(DEFAULT_SESSION_ID_LENGTH)

        return session_id

    async def before_request(self, request: Request):
        """Start session before request"""
        session = SessionManager(
            store=self.store,
            session_id=self._get_session_id(request),
            lifetime=self.config['lifetime']
        )

        await session.start()

        request.ctx.session = session
        return None

    async def after_response(self, request: Request, response):
        """Save session after response"""
        session = getattr(request.ctx, 'session', None)
        if session is None or response is None:
            return response

        await session.save()

        self._set_session_cookie(response, session)
        self._maybe_run_gc()

        return response

    def _set_session_cookie(self, response, session: SessionManager):
        """Set session cookie on response"""
        if isinstance(self.store, CookieSessionStore):
            cookie_value = self.store.serialize(session.all())
        else:
            cookie_value = session.get_id()

        response.add_cookie(
            self.config['cookie_name'],
            cookie_value,
            path=self.config['cookie_path'],
            domain=self.config['cookie_domain'],
            secure=self.config['cookie_secure'],
            httponly=self.config['cookie_http_only'],
            samesite=self.config['cookie_same_site'],
            max_age=self.config['lifetime'],
        )

    def _maybe_run_gc(self):
        """Maybe run garbage collection based on lottery"""
        chances, out_of = self.config['lottery']
        if random.randint(1, out_of) <= chances:
            asyncio.create_task(self.store.gc(self.config['lifetime']))
