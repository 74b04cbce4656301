"""
Error collection for validation runs.

A run never stops at the first broken locale: every error is recorded here
with its context and summarized when the report is built.
"""

from typing import Any, Dict, List, Optional
import structlog

from .exceptions import TranslationAuditError, categorize_error

logger = structlog.get_logger(__name__)


class ErrorCollector:
    """
    Collects errors raised during a validation run.

    Tracks each error with its context and keeps per-type counts so the
    reporter can present the complete picture at the end of the run.
    """

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []
        self.error_counts: Dict[str, int] = {}

    def record_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Record an error occurrence with context."""
        error_type = categorize_error(error)
        if isinstance(error, TranslationAuditError):
            message = error.message
            error_context = {**error.context, **(context or {})}
        else:
            message = str(error)
            error_context = dict(context or {})

        error_record = {
            "error_type": error_type,
            "message": message,
            "context": error_context,
            "locale": error_context.get("locale"),
        }
        self.errors.append(error_record)
        self.error_counts[error_type] = self.error_counts.get(error_type, 0) + 1

        logger.error(
            "Error recorded",
            error_type=error_type,
            message=message,
            context=error_context,
            total_count=self.error_counts[error_type]
        )
        return error_record

    def errors_for(self, locale: str) -> List[Dict[str, Any]]:
        """Get every error recorded for one locale."""
        return [e for e in self.errors if e["locale"] == locale]

    def has_errors(self) -> bool:
        return bool(self.errors)

    def get_error_stats(self) -> Dict[str, Any]:
        """Get error statistics for the run."""
        return {
            "total_errors": len(self.errors),
            "error_counts": self.error_counts.copy(),
            "failed_locales": sorted({e["locale"] for e in self.errors if e["locale"]}),
        }
