"""
Error handling for i18n-audit:
- Structured error hierarchy
- Error collection across a validation run
- Error logging decorator
"""

from .exceptions import (
    TranslationAuditError,
    ConfigurationError,
    DocumentError,
    DocumentNotFound,
    DocumentUnreadable,
    MalformedDocument,
    categorize_error,
)

from .handlers import ErrorCollector

from .decorators import log_errors

__all__ = [
    # Exceptions
    "TranslationAuditError",
    "ConfigurationError",
    "DocumentError",
    "DocumentNotFound",
    "DocumentUnreadable",
    "MalformedDocument",
    "categorize_error",

    # Handlers
    "ErrorCollector",

    # Decorators
    "log_errors",
]
