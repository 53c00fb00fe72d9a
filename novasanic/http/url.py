"""
URL Helpers
Request URI detection for the router
"""
from urllib.parse import unquote


class Url:
    """
    Usage:
        uri = Url.detect_uri(request)  # 'blog/show/5'
    """

    @staticmethod
    def detect_uri(request) -> str:
        """
        Get the request path without surrounding slashes

        The root path yields an empty string. Percent-escapes left in the
        path are decoded.
        """
        path = request.path or '/'

        if '%' in path:
            path = unquote(path)

        return path.strip('/')
