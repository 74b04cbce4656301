"""
Error hierarchy for i18n-audit.

Errors carry a machine-readable code and a context dict so a validation run
can collect them and report every failure at the end instead of aborting on
the first one.
"""

from typing import Any, Dict, Optional
from datetime import datetime, timezone


class TranslationAuditError(Exception):
    """
    Base exception for all i18n-audit errors.

    Provides error context and categorization so failures can be logged,
    collected and serialized into the final report.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        previous_error: Optional[Exception] = None,
    ):
        super().__init__(message)

        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.previous_error = previous_error
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "previous_error": str(self.previous_error) if self.previous_error else None,
        }


class ConfigurationError(TranslationAuditError):
    """Configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(message, context={"config_key": config_key}, **kwargs)


class DocumentError(TranslationAuditError):
    """Base class for errors raised while loading a translation document."""

    def __init__(
        self,
        message: str,
        locale: Optional[str] = None,
        source: Optional[str] = None,
        is_base: bool = False,
        **kwargs
    ):
        super().__init__(
            message,
            context={"locale": locale, "source": source, "is_base": is_base},
            **kwargs
        )
        self.locale = locale
        self.source = source


class DocumentNotFound(DocumentError):
    """No translation document exists for the requested locale."""

    def __init__(self, locale: str, source: Optional[str] = None, **kwargs):
        super().__init__(
            f"Translation document not found for locale '{locale}'",
            locale=locale,
            source=source,
            error_code="DOCUMENT_NOT_FOUND",
            **kwargs
        )


class DocumentUnreadable(DocumentError):
    """The document exists but the file cannot be read."""

    def __init__(self, locale: str, os_error: OSError, source: Optional[str] = None, **kwargs):
        super().__init__(
            f"Cannot read translation document for locale '{locale}': {os_error.strerror or os_error}",
            locale=locale,
            source=source,
            error_code="DOCUMENT_UNREADABLE",
            previous_error=os_error,
            **kwargs
        )


class MalformedDocument(DocumentError):
    """Document content cannot be parsed as a tree of string-keyed objects."""

    def __init__(self, locale: str, reason: str, source: Optional[str] = None, **kwargs):
        super().__init__(
            f"Malformed translation document for locale '{locale}': {reason}",
            locale=locale,
            source=source,
            error_code="MALFORMED_DOCUMENT",
            **kwargs
        )
        self.reason = reason
        self.context["reason"] = reason


def categorize_error(error: Exception) -> str:
    """Categorize an unknown error into our error hierarchy."""
    if isinstance(error, TranslationAuditError):
        return error.__class__.__name__

    if isinstance(error, (FileNotFoundError, IsADirectoryError)):
        return "DocumentNotFound"
    if isinstance(error, (ValueError, UnicodeDecodeError)):
        return "MalformedDocument"
    if isinstance(error, OSError):
        return "DocumentUnreadable"
    return "TranslationAuditError"
