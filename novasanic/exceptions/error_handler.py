"""
Centralized Error Handler
"""
from novasanic.logging import getLogger
from novasanic.http import ResponseHelper
from sanic import Request
from sanic.exceptions import SanicException
from sanic.response import HTTPResponse


class ErrorHandler:
    """
    Renders uncaught exceptions as HTML error pages and reports them
    """
    def __init__(self, debug: bool = False):
        """
        Initialize error handler
        Args:
            debug: Enable debug mode (exception type and message shown on the page)
        """
        self.debug = debug
        self.logger = getLogger('application')

    async def handle_error(self, request: Request, error: Exception) -> HTTPResponse:
        """
        Handle error and return an HTML error page
        """
        status_code = self._get_status_code(error)

        self._log_error(error, request, status_code)

        return ResponseHelper.error_page(status_code, self._get_error_message(error))

    def _get_error_message(self, error: Exception) -> str:
        """
        Get user-friendly error message
        """
        if self.debug:
            return f"{error.__class__.__name__}: {error}"

        # For Sanic exceptions, use their message
        if isinstance(error, SanicException):
            return str(error)

        # Framework exceptions carry a safe message
        if hasattr(error, 'message'):
            return error.message

        # Default message in production (don't expose internals)
        return "An error occurred while processing your request"

    def _get_status_code(self, error: Exception) -> int:
        """
        Determine HTTP status code from error
        """
        if isinstance(error, SanicException):
            return error.status_code

        status_code = getattr(error, 'status_code', None)
        if isinstance(status_code, int):
            return status_code

        return 500

    def _log_error(
        self,
        error: Exception,
        request: Request,
        status_code: int
    ):
        """
        Log error with context
        """
        log_data = {
            'error_type': error.__class__.__name__,
            'error_message': str(error),
            'status_code': status_code,
            'method': request.method,
            'path': request.path,
        }

        if status_code >= 500:
            self.logger.error(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data,
                exc_info=error
            )
        elif status_code >= 400:
            self.logger.warning(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data
            )
        else:
            self.logger.info(
                f"{status_code} Response",
                extra=log_data
            )
