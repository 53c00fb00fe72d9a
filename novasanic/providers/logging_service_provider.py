"""
Logging Service Provider
Initializes application-wide structured logging
"""
import logging
from novasanic.service_provider import ServiceProvider
from novasanic.logging.logger_config import LoggerConfig
from novasanic.support import Config

DEFAULT_LOGGING_HANDLERS = {
    'application': {'name': 'application', 'filter_sensitive': True},
    'routing': {'name': 'routing', 'filter_sensitive': True},
    'language': {'name': 'language', 'filter_sensitive': True},
}


class LoggingServiceProvider(ServiceProvider):
    """Logging service provider - sets up structured logging"""

    def register(self):
        """Register logging services"""
        self.setup_application_logger()

    def setup_application_logger(self):
        """
        Setup application-wide structured logger from config
        """
        allowed_handlers = Config.get('app.ALLOWED_LOGGING_HANDLERS', DEFAULT_LOGGING_HANDLERS)

        for handler_config in allowed_handlers.values():
            LoggerConfig.setup_logger(
                name=handler_config.get('name'),
                filter_sensitive=handler_config.get('filter_sensitive', True),
                file_name=handler_config.get('file_name')
            )

        # Keep Sanic's console output out of our JSON files
        sanic_loggers = ['sanic.root', 'sanic.error', 'sanic.access', 'sanic.server']
        for logger_name in sanic_loggers:
            logging.getLogger(logger_name).propagate = False
