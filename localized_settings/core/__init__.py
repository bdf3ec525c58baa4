"""
Core Package

Configuration, error handling, logging and locale context for localized-settings.
"""

# ruff: noqa: F401  # All imports are re-exported via __all__

from .config import Settings, settings  # noqa: F401
from .error_codes import (  # noqa: F401
    ERROR_CODE_MAP,
    APIErrorCode,
    ConfigurationErrorCode,
    DatabaseErrorCode,
    ValidationErrorCode,
    get_error_info,
    get_http_status_code,
)
from .exceptions import (  # noqa: F401
    ApplicationException,
    ConfigurationException,
    DatabaseException,
    NotFoundException,
    ValidationException,
)
from .locale import (  # noqa: F401
    get_active_language,
    normalize_language,
    reset_active_language,
    set_active_language,
    use_language,
)
from .logger import get_logger  # noqa: F401

__all__ = [
    # Configuration
    "Settings",
    "settings",
    # Error handling
    "APIErrorCode",
    "ConfigurationErrorCode",
    "DatabaseErrorCode",
    "ValidationErrorCode",
    "ERROR_CODE_MAP",
    "get_http_status_code",
    "get_error_info",
    # Exceptions
    "ApplicationException",
    "ConfigurationException",
    "DatabaseException",
    "NotFoundException",
    "ValidationException",
    # Locale
    "get_active_language",
    "set_active_language",
    "reset_active_language",
    "use_language",
    "normalize_language",
    # Logger
    "get_logger",
]
