"""
Response Helpers
Standardized response utilities built on sanic.response
"""
import html as html_lib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from sanic.response import (
    HTTPResponse,
    empty as sanic_empty,
    file as sanic_file,
    html as sanic_html,
    json as sanic_json,
    raw as sanic_raw,
)


ERROR_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{status} - {title}</title>
</head>
<body>
<h1>{status}</h1>
<p>{title}</p>
{detail}
</body>
</html>
"""

ERROR_TITLES = {
    400: 'Bad Request',
    401: 'Unauthorized',
    403: 'Forbidden',
    404: 'Page not found',
    405: 'Method Not Allowed',
    500: 'Internal Server Error',
    503: 'Service Unavailable',
}


class ResponseHelper:
    """
    Response helper for consistent HTML, JSON and file responses

    Example:
        # Turn whatever a controller returned into a response
        return ResponseHelper.make('<h1>Hello</h1>')

        # Error page with an escaped detail line
        return ResponseHelper.not_found('blog/<script>')

        # Serve a static asset
        return await ResponseHelper.file(Path('public/css/app.css'))
    """

    @staticmethod
    def make(content: Any = None, status: int = 200) -> HTTPResponse:
        """
        Coerce a handler's return value into an HTTP response

        - HTTPResponse: returned untouched
        - None: 204 No Content
        - str: HTML body
        - bytes: raw body
        - dict / list: JSON body
        - anything else: its str() as HTML
        """
        if isinstance(content, HTTPResponse):
            return content

        if content is None:
            return sanic_empty()

        if isinstance(content, str):
            return sanic_html(content, status=status)

        if isinstance(content, (bytes, bytearray)):
            return sanic_raw(bytes(content), status=status)

        if isinstance(content, (dict, list)):
            return sanic_json(content, status=status)

        return sanic_html(str(content), status=status)

    @staticmethod
    def escape(value: str) -> str:
        """
        HTML-escape a value for display

        Double quotes are escaped, single quotes are left alone and
        existing entities are encoded again.
        """
        return html_lib.escape(value, quote=False).replace('"', '&quot;')

    @staticmethod
    def error_page(
        status: int,
        detail: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> HTTPResponse:
        """
        Return an HTML error page

        Args:
            status: HTTP status code
            detail: Text shown under the title (escaped here)
            headers: Additional headers

        Example:
            return ResponseHelper.error_page(403, 'Admins only')
        """
        detail_html = ''
        if detail:
            detail_html = f'<p class="error">{ResponseHelper.escape(detail)}</p>'

        body = ERROR_PAGE_TEMPLATE.format(
            status=status,
            title=ERROR_TITLES.get(status, 'Error'),
            detail=detail_html,
        )
        return sanic_html(body, status=status, headers=headers)

    @staticmethod
    def not_found(uri: str) -> HTTPResponse:
        """
        Return the 404 page for a URI no route or controller handled

        Example:
            return ResponseHelper.not_found('blog/missing')
        """
        return ResponseHelper.error_page(404, uri)

    @staticmethod
    async def file(path: Union[str, Path], headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
        """
        Return a file response (mime type guessed from the extension)

        Example:
            return await ResponseHelper.file(Storage.public('robots.txt'))
        """
        return await sanic_file(path, headers=headers)
