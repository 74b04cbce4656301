"""Translation document validation."""

from .comparator import compare_documents, completeness
from .keys import extract_keys, iter_leaves, resolve_key_path
from .models import (
    AuditReport,
    InterpolationMismatch,
    IssueKind,
    PlaceholderHit,
    Severity,
    ValidationResult,
)
from .placeholders import PlaceholderScanner, extract_variables
from .reporter import render_json, render_text
from .store import DirectoryLocaleStore, LocaleStore, MappingLocaleStore
from .validator import validate_translations

__all__ = [
    "AuditReport",
    "DirectoryLocaleStore",
    "InterpolationMismatch",
    "IssueKind",
    "LocaleStore",
    "MappingLocaleStore",
    "PlaceholderHit",
    "PlaceholderScanner",
    "Severity",
    "ValidationResult",
    "compare_documents",
    "completeness",
    "extract_keys",
    "extract_variables",
    "iter_leaves",
    "render_json",
    "render_text",
    "resolve_key_path",
    "validate_translations",
]
