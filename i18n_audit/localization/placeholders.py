"""Placeholder text detection and interpolation token helpers."""

import re
from typing import Iterable, List, Optional, Set

from i18n_audit.config.settings import DEFAULT_PLACEHOLDER_PATTERNS

INTERPOLATION_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def extract_variables(text: str) -> Set[str]:
    """Get interpolation variable names, e.g. ``"{{count}} items"`` -> ``{"count"}``."""
    return set(INTERPOLATION_PATTERN.findall(text))


class PlaceholderScanner:
    """Detects untranslated placeholder markers in translation strings.

    Interpolation tokens naming an allowed variable are removed before the
    patterns run, so the token itself never triggers a hit. Banned words
    elsewhere in the string are still flagged.
    """

    def __init__(
        self,
        patterns: Optional[Iterable[str]] = None,
        allowed_interpolations: Iterable[str] = ("year",),
    ):
        self.patterns: List[re.Pattern] = [
            re.compile(p, re.IGNORECASE)
            for p in (DEFAULT_PLACEHOLDER_PATTERNS if patterns is None else patterns)
        ]
        self.allowed_interpolations = set(allowed_interpolations)

    def _strip_allowed(self, text: str) -> str:
        return INTERPOLATION_PATTERN.sub(
            lambda m: " " if m.group(1) in self.allowed_interpolations else m.group(0),
            text,
        )

    def match(self, text: str) -> Optional[str]:
        """Return the first pattern found in ``text``, or None when clean."""
        candidate = self._strip_allowed(text)
        for pattern in self.patterns:
            if pattern.search(candidate):
                return pattern.pattern
        return None
