"""
Route Class
Represents a single classic-style route: methods, URL pattern and callback
"""
from typing import Callable, Dict, List, Optional, Union
import re


# Classic placeholders and the expression each one captures
PLACEHOLDERS = {
    '(:any)': r'([^/]+)',
    '(:num)': r'(-?[0-9]+)',
    '(:all)': r'(.*)',
}

TOKEN_PATTERN = re.compile(r'\(:any\)|\(:num\)|\(:all\)|/?\{\w+\??\}')


class DirectAction:
    """Route action that calls a handler with the request and route parameters"""

    def __init__(self, handler: Callable):
        self.handler = handler

    def __repr__(self) -> str:
        return f"<DirectAction {getattr(self.handler, '__name__', 'Closure')}>"


class RewriteAction:
    """
    Route action that rewrites the URI for auto-dispatch

    The target is a URI template; '$1'-style references pick the
    route's captured parameters.

    Usage:
        RewriteAction('blog/show/$1')
    """

    def __init__(self, target: str):
        self.target = target

    def rewrite(self, uri: str, regex: Optional[str]) -> str:
        """
        Build the auto-dispatch URI

        With a regex the matched URI is rewritten through the target
        template, otherwise the target itself becomes the URI.
        """
        if not regex:
            return self.target

        template = re.sub(r'\$(\d+)', r'\\g<\1>', self.target)
        return re.sub('^' + regex + '$', template, uri, flags=re.IGNORECASE)

    def __repr__(self) -> str:
        return f"<RewriteAction {self.target}>"


class Route:
    """
    Route with methods, pattern and action

    Pattern grammar:
        (:any)   one segment
        (:num)   an integer segment
        (:all)   the rest of the URI
        {name}   one segment, or the expression given with where()
        {name?}  optional trailing segment

    Usage:
        route = Route(['GET'], 'blog/(:num)', 'blog/show/$1')
        route.match('blog/5', 'GET')  # ['5']
    """

    def __init__(
        self,
        methods: List[str],
        pattern: str,
        callback: Union[Callable, str, None] = None
    ):
        """
        Initialize a Route instance

        Args:
            methods: HTTP methods (already normalized by the router)
            pattern: URL pattern, one leading slash is dropped
            callback: Handler callable, or a rewrite target string
        """
        self.methods = list(methods)
        self.pattern = pattern[1:] if pattern.startswith('/') else pattern
        self.callback = callback
        self.action = self._make_action(callback)
        self._wheres: Dict[str, str] = {}
        self._regex: Optional[str] = None
        self._compiled: Optional[re.Pattern] = None

    @staticmethod
    def _make_action(callback: Union[Callable, str, None]) -> Union[DirectAction, RewriteAction]:
        if callable(callback):
            return DirectAction(callback)

        return RewriteAction(callback or '')

    def where(self, parameter: Union[str, Dict[str, str]], pattern: Optional[str] = None) -> 'Route':
        """
        Add parameter constraints for {name} placeholders

        Usage:
            route.where('id', '[0-9]+')
            route.where({'id': '[0-9]+', 'slug': '[a-z-]+'})
        """
        if isinstance(parameter, dict):
            self._wheres.update(parameter)
        elif pattern is not None:
            self._wheres[parameter] = pattern

        # Constraints change the expression; compile again on next match
        self._regex = None
        self._compiled = None
        return self

    def get_wheres(self) -> Dict[str, str]:
        """Get parameter constraints"""
        return self._wheres

    def get_methods(self) -> List[str]:
        """Get HTTP methods"""
        return self.methods

    def get_parameter_names(self) -> List[str]:
        """Get the {name} parameter names in pattern order"""
        return re.findall(r'\{(\w+)\??\}', self.pattern)

    def has_placeholders(self) -> bool:
        """Check if the pattern contains any placeholder"""
        return TOKEN_PATTERN.search(self.pattern) is not None

    @property
    def regex(self) -> Optional[str]:
        """
        The capture expression of the pattern (unanchored)

        None for literal patterns, which only match exactly.
        """
        if not self.has_placeholders():
            return None

        if self._regex is None:
            self._regex = self._compile_pattern()
        return self._regex

    def _compile_pattern(self) -> str:
        """Translate the pattern into a regular expression"""
        parts = []
        position = 0

        for token in TOKEN_PATTERN.finditer(self.pattern):
            parts.append(re.escape(self.pattern[position:token.start()]))
            parts.append(self._token_expression(token.group(0)))
            position = token.end()

        parts.append(re.escape(self.pattern[position:]))
        return ''.join(parts)

    def _token_expression(self, token: str) -> str:
        if token in PLACEHOLDERS:
            return PLACEHOLDERS[token]

        slash = '/' if token.startswith('/') else ''
        name = token.strip('/{}?')
        expression = self._wheres.get(name, r'[^/]+')

        if token.endswith('?}'):
            return f'(?:{slash}({expression}))?'

        return f'{slash}({expression})'

    def match(self, uri: str, method: str) -> Optional[List[str]]:
        """
        Check the route against a request

        Args:
            uri: Request URI without surrounding slashes
            method: HTTP method

        Returns:
            The positional parameters when the route applies, otherwise None
        """
        if method.upper() not in self.methods:
            return None

        if self.pattern.lower() == uri.lower():
            return []

        regex = self.regex
        if regex is None:
            return None

        if self._compiled is None:
            self._compiled = re.compile('^' + regex + '$', re.IGNORECASE)

        matched = self._compiled.match(uri)
        if matched is None:
            return None

        return [value for value in matched.groups() if value is not None]

    def get_action_name(self) -> str:
        """Get the action name (for display)"""
        if isinstance(self.action, DirectAction):
            return getattr(self.action.handler, '__qualname__', 'Closure')
        return self.action.target or '-'

    def __repr__(self) -> str:
        """String representation of route"""
        methods_str = '|'.join(self.methods)
        return f"<Route [{methods_str}] {self.pattern or '/'}>"
