"""
Language
Loads key -> string translations from per-language JSON files
"""
import json
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from novasanic.defaults import (
    DEFAULT_COOKIE_PREFIX,
    DEFAULT_LANGUAGE_CODE,
    DEFAULT_LANGUAGE_FILE_EXTENSION,
    LANGUAGE_CODES,
)
from novasanic.exceptions import LanguageLoadException
from novasanic.logging import getLogger
from novasanic.support import Config, Storage, Str

logger = getLogger('language')


class Language:
    """
    Language handler

    Files live at <app>/Language/<Code>/<name>.json and hold a flat
    object of key -> string. Codes are capitalized on disk ('En', 'Fr').

    The language is picked from the session key 'language', which init()
    copies from the '<prefix>language' cookie when the session has none.

    Usage:
        language = Language(session=request.ctx.session, cookies=request.cookies)
        language.init()
        language.load('welcome')
        language.get('welcome_message')
    """

    codes = LANGUAGE_CODES

    def __init__(
        self,
        session=None,
        cookies: Optional[Mapping[str, str]] = None,
        path: Union[str, Path, None] = None,
        default_code: Optional[str] = None,
        cookie_prefix: Optional[str] = None
    ):
        """
        Args:
            session: Session manager (anything with has/get/put)
            cookies: Request cookies
            path: Language directory (defaults to Storage.language())
            default_code: Default language code (defaults to app.LANGUAGE_CODE)
            cookie_prefix: Cookie name prefix (defaults to app.COOKIE_PREFIX)
        """
        self.session = session
        self.cookies = cookies if cookies is not None else {}
        self.path = Path(path) if path is not None else Storage.language()
        self.default_code = default_code or Config.get('app.LANGUAGE_CODE', DEFAULT_LANGUAGE_CODE)
        self.cookie_prefix = cookie_prefix if cookie_prefix is not None else \
            Config.get('app.COOKIE_PREFIX', DEFAULT_COOKIE_PREFIX)
        self._cache: Dict[str, Dict[str, str]] = {}

    def init(self):
        """
        Pick the session language from the language cookie

        Does nothing when the session already has a language.
        """
        if self.session is None or self.session.has('language'):
            return

        cookie = self.cookies.get(self.cookie_prefix + 'language')
        if not cookie:
            return

        if any(char.islower() for char in cookie) and cookie in self.codes:
            self.session.put('language', Str.ucfirst(cookie))

    def current_code(self, code: Optional[str] = None) -> str:
        """
        Resolve the effective language directory name

        An explicit code other than the default wins; otherwise the
        session language applies, falling back to the default.
        """
        code = code or self.default_code

        if code == self.default_code and self.session is not None and self.session.has('language'):
            return self.session.get('language')

        return Str.ucfirst(code)

    def load(self, name: str, code: Optional[str] = None) -> Dict[str, str]:
        """
        Load a language file into the cache

        Raises:
            LanguageLoadException: If the file is missing, unreadable or malformed
        """
        code = self.current_code(code)
        self._cache[code] = self.read_file(self.path, code, name)
        return self._cache[code]

    def get(self, key: str, code: Optional[str] = None) -> str:
        """
        Look up a translation

        Falls back to the default language, then to the key itself.
        """
        code = self.current_code(code)

        value = self._cache.get(code, {}).get(key)
        if value:
            return value

        value = self._cache.get(Str.ucfirst(self.default_code), {}).get(key)
        if value:
            return value

        return key

    @classmethod
    def show(
        cls,
        key: str,
        name: str,
        code: Optional[str] = None,
        session=None,
        path: Union[str, Path, None] = None
    ) -> str:
        """
        One-off lookup for views, read straight from the file (not cached)

        Raises:
            LanguageLoadException: If the file is missing, unreadable or malformed
        """
        language = cls(session=session, path=path)
        strings = cls.read_file(language.path, language.current_code(code), name)

        return strings.get(key) or key

    @staticmethod
    def read_file(path: Path, code: str, name: str) -> Dict[str, str]:
        """Read and parse <path>/<code>/<name>.json"""
        relative = f"{code}/{name}{DEFAULT_LANGUAGE_FILE_EXTENSION}"
        file_path = path / code / f"{name}{DEFAULT_LANGUAGE_FILE_EXTENSION}"

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                strings = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Could not load language file '{relative}'", extra={'file': str(file_path)})
            raise LanguageLoadException(
                f"Could not load language file '{relative}'", code=code, name=name
            ) from e

        if not isinstance(strings, dict):
            logger.error(f"Language file '{relative}' is not a key/value object")
            raise LanguageLoadException(
                f"Language file '{relative}' is not a key/value object", code=code, name=name
            )

        return strings
