"""
Service Providers
"""
from novasanic.providers.logging_service_provider import LoggingServiceProvider
from novasanic.providers.http_service_provider import HttpServiceProvider
from novasanic.providers.session_service_provider import SessionServiceProvider
from novasanic.providers.language_service_provider import LanguageServiceProvider
from novasanic.providers.routing_service_provider import RoutingServiceProvider

__all__ = [
    'LoggingServiceProvider',
    'HttpServiceProvider',
    'SessionServiceProvider',
    'LanguageServiceProvider',
    'RoutingServiceProvider',
]
