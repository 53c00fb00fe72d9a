"""
Language Middleware
Attaches a Language instance to every request
"""
from sanic import Request
from novasanic.language import Language
from novasanic.middleware.base_middleware import Middleware


class LanguageMiddleware(Middleware):
    """
    Picks the request language from the session or the language cookie

    Must run after SessionMiddleware so request.ctx.session exists.
    """

    ENABLED_CONFIG_KEY = 'app.LANGUAGE_ENABLED'

    async def before_request(self, request: Request):
        language = Language(
            session=getattr(request.ctx, 'session', None),
            cookies=request.cookies,
        )
        language.init()

        request.ctx.language = language
        return None
