"""Result types for translation validation runs."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueKind(str, Enum):
    """Kinds of findings a validation run can produce."""

    MISSING_KEY = "missing_key"
    EXTRA_KEY = "extra_key"
    PLACEHOLDER_DETECTED = "placeholder_detected"
    INTERPOLATION_MISMATCH = "interpolation_mismatch"
    EMPTY_VALUE = "empty_value"
    UNTRANSLATED_VALUE = "untranslated_value"

    def severity(self, strict: bool = False) -> Severity:
        if self in (IssueKind.MISSING_KEY, IssueKind.PLACEHOLDER_DETECTED):
            return Severity.ERROR
        if self in (IssueKind.INTERPOLATION_MISMATCH, IssueKind.EMPTY_VALUE):
            return Severity.ERROR if strict else Severity.WARNING
        if self is IssueKind.EXTRA_KEY:
            return Severity.WARNING
        return Severity.INFO


@dataclass(frozen=True)
class PlaceholderHit:
    key: str
    value: str
    pattern: str


@dataclass(frozen=True)
class InterpolationMismatch:
    key: str
    expected: List[str]
    found: List[str]


@dataclass
class ValidationResult:
    """Outcome of validating one target locale against the base locale."""

    locale: str
    key_count: int = 0
    missing_keys: Set[str] = field(default_factory=set)
    extra_keys: Set[str] = field(default_factory=set)
    placeholder_hits: List[PlaceholderHit] = field(default_factory=list)
    interpolation_mismatches: List[InterpolationMismatch] = field(default_factory=list)
    empty_values: Set[str] = field(default_factory=set)
    untranslated_keys: Set[str] = field(default_factory=set)
    completeness: Optional[float] = None
    load_error: Optional[str] = None

    @property
    def failed_to_load(self) -> bool:
        return self.load_error is not None

    def issue_counts(self) -> Dict[IssueKind, int]:
        return {
            IssueKind.MISSING_KEY: len(self.missing_keys),
            IssueKind.EXTRA_KEY: len(self.extra_keys),
            IssueKind.PLACEHOLDER_DETECTED: len(self.placeholder_hits),
            IssueKind.INTERPOLATION_MISMATCH: len(self.interpolation_mismatches),
            IssueKind.EMPTY_VALUE: len(self.empty_values),
            IssueKind.UNTRANSLATED_VALUE: len(self.untranslated_keys),
        }

    def is_failure(self, strict: bool = False) -> bool:
        """Whether this locale fails the run.

        Missing keys, placeholder hits and load errors always fail; extra
        keys never do.
        """
        if self.failed_to_load:
            return True
        return any(
            count and kind.severity(strict) is Severity.ERROR
            for kind, count in self.issue_counts().items()
        )

    def has_warnings(self, strict: bool = False) -> bool:
        return any(
            count and kind.severity(strict) is Severity.WARNING
            for kind, count in self.issue_counts().items()
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "locale": self.locale,
            "key_count": self.key_count,
            "completeness": self.completeness,
            "load_error": self.load_error,
            "missing_keys": sorted(self.missing_keys),
            "extra_keys": sorted(self.extra_keys),
            "placeholder_hits": [
                {"key": h.key, "value": h.value, "pattern": h.pattern} for h in self.placeholder_hits
            ],
            "interpolation_mismatches": [
                {"key": m.key, "expected": m.expected, "found": m.found}
                for m in self.interpolation_mismatches
            ],
            "empty_values": sorted(self.empty_values),
            "untranslated_keys": sorted(self.untranslated_keys),
        }


@dataclass
class AuditReport:
    """All per-locale results of one validation run."""

    base_locale: str
    base_key_count: int
    results: List[ValidationResult] = field(default_factory=list)
    missing_namespaces: List[str] = field(default_factory=list)
    strict: bool = False

    @property
    def passed(self) -> bool:
        if self.missing_namespaces:
            return False
        return not any(r.is_failure(self.strict) for r in self.results)

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def result_for(self, locale: str) -> Optional[ValidationResult]:
        for result in self.results:
            if result.locale == locale:
                return result
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_locale": self.base_locale,
            "base_key_count": self.base_key_count,
            "strict": self.strict,
            "passed": self.passed,
            "missing_namespaces": list(self.missing_namespaces),
            "locales": [r.to_dict() for r in self.results],
        }
