"""Comparison of a target locale document against the base locale."""

from typing import Any, Mapping, Optional, Set

from .keys import extract_keys, iter_leaves
from .models import InterpolationMismatch, PlaceholderHit, ValidationResult
from .placeholders import PlaceholderScanner, extract_variables


def completeness(base_keys: Set[str], target_keys: Set[str]) -> Optional[float]:
    """Percentage of base keys present in the target.

    Extra target keys do not count. Returns None when the base has no keys.
    """
    if not base_keys:
        return None
    extra = target_keys - base_keys
    return (len(target_keys) - len(extra)) / len(base_keys) * 100


def compare_documents(
    locale: str,
    base: Mapping[str, Any],
    target: Mapping[str, Any],
    scanner: Optional[PlaceholderScanner] = None,
    base_keys: Optional[Set[str]] = None,
) -> ValidationResult:
    """Validate one target document against the base document.

    Args:
        locale: Target locale identifier
        base: Base locale document
        target: Target locale document
        scanner: Placeholder scanner, defaults to the standard patterns
        base_keys: Precomputed key set of ``base``

    Returns:
        ValidationResult with key diffs, placeholder hits and value findings
    """
    scanner = scanner or PlaceholderScanner()
    if base_keys is None:
        base_keys = extract_keys(base)

    base_leaves = dict(iter_leaves(base))
    target_leaves = dict(iter_leaves(target))
    target_keys = set(target_leaves)

    result = ValidationResult(
        locale=locale,
        key_count=len(target_keys),
        missing_keys=base_keys - target_keys,
        extra_keys=target_keys - base_keys,
        completeness=completeness(base_keys, target_keys),
    )

    for key, value in target_leaves.items():
        if value is None:
            result.empty_values.add(key)
            continue
        if not isinstance(value, str):
            continue
        if not value.strip():
            result.empty_values.add(key)
            continue

        pattern = scanner.match(value)
        if pattern is not None:
            result.placeholder_hits.append(PlaceholderHit(key=key, value=value, pattern=pattern))

        base_value = base_leaves.get(key)
        if not isinstance(base_value, str):
            continue
        if value == base_value:
            result.untranslated_keys.add(key)
        expected = extract_variables(base_value)
        found = extract_variables(value)
        if expected != found:
            result.interpolation_mismatches.append(
                InterpolationMismatch(key=key, expected=sorted(expected), found=sorted(found))
            )

    return result
