"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
This file contains sensible defaults that can be overridden in .env or other config files
"""

# ============================================================================
# APPLICATION DEFAULTS
# ============================================================================

DEFAULT_APP_NAME = 'Novasanic'

# Root namespace of the application's controllers (App.Controllers.Blog)
DEFAULT_NAMESPACE = 'App'

# ============================================================================
# NETWORK DEFAULTS
# ============================================================================

DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 8000

# ============================================================================
# ROUTING DEFAULTS
# ============================================================================

DEFAULT_CONTROLLER = 'Welcome'
DEFAULT_METHOD = 'index'

# Known HTTP verbs, in registration order
HTTP_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']

# Route file loaded at boot (relative to the routes directory)
DEFAULT_ROUTE_FILE = 'web.py'

# ============================================================================
# LANGUAGE DEFAULTS
# ============================================================================

DEFAULT_LANGUAGE_CODE = 'en'
LANGUAGE_CODES = ['cs', 'de', 'en', 'es', 'fa', 'fr', 'it', 'ja', 'nl', 'pl', 'ro', 'ru']
DEFAULT_LANGUAGE_FILE_EXTENSION = '.json'

# ============================================================================
# SESSION / COOKIE DEFAULTS
# ============================================================================

DEFAULT_COOKIE_PREFIX = 'nova_'
DEFAULT_SESSION_LIFETIME = 7200  # seconds (2 hours)
DEFAULT_SESSION_COOKIE_NAME = 'novasanic_session'
DEFAULT_SESSION_ID_LENGTH = 40
DEFAULT_SESSION_LOTTERY = [2, 100]  # [chances, out_of] for garbage collection

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
