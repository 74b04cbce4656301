"""Human-readable and JSON rendering of audit reports."""

import json
from typing import List, Optional

from .models import AuditReport, ValidationResult


def format_completeness(value: Optional[float]) -> str:
    if value is None:
        return "n/a"
    return f"{value:.2f}%"


def _key_list(lines: List[str], title: str, keys) -> None:
    keys = sorted(keys)
    if not keys:
        return
    lines.append(f"  {title} ({len(keys)}):")
    lines.extend(f"    - {key}" for key in keys)


def render_locale(result: ValidationResult, strict: bool = False) -> List[str]:
    """Render the block of report lines for one locale."""
    if result.failed_to_load:
        return [f"❌ {result.locale}: failed to load", f"  {result.load_error}"]

    if result.is_failure(strict):
        marker = "❌"
    elif result.has_warnings(strict):
        marker = "⚠️ "
    else:
        marker = "✅"

    lines = [
        f"{marker} {result.locale}:",
        f"  Total keys: {result.key_count}",
        f"  Completeness: {format_completeness(result.completeness)}",
    ]
    _key_list(lines, "Missing keys", result.missing_keys)
    _key_list(lines, "Extra keys (may be outdated)", result.extra_keys)

    if result.placeholder_hits:
        lines.append(f"  Placeholders ({len(result.placeholder_hits)}):")
        for hit in sorted(result.placeholder_hits, key=lambda h: h.key):
            lines.append(f'    - {hit.key} contains placeholder: "{hit.value}"')

    if result.interpolation_mismatches:
        lines.append(f"  Interpolation mismatches ({len(result.interpolation_mismatches)}):")
        for mismatch in sorted(result.interpolation_mismatches, key=lambda m: m.key):
            expected = ", ".join(mismatch.expected) or "none"
            found = ", ".join(mismatch.found) or "none"
            lines.append(f"    - {mismatch.key}: expected variables [{expected}], found [{found}]")

    _key_list(lines, "Empty values", result.empty_values)
    if result.untranslated_keys:
        lines.append(f"  Identical to base: {len(result.untranslated_keys)} keys")
    return lines


def render_text(report: AuditReport) -> str:
    """Render the full report as text."""
    lines = [
        f"📋 Validating translations against base language ({report.base_locale})",
        f"Base language has {report.base_key_count} translation keys",
        "",
    ]

    if report.missing_namespaces:
        lines.append(
            f"❌ {report.base_locale}: missing required namespaces: "
            + ", ".join(report.missing_namespaces)
        )
        lines.append("")

    if not report.results:
        lines.append("⚠️  No target locales found")
        lines.append("")

    for result in report.results:
        lines.extend(render_locale(result, report.strict))
        lines.append("")

    if report.passed:
        lines.append("✅ All translations are complete")
    else:
        failed = [r.locale for r in report.results if r.is_failure(report.strict)]
        detail = f" ({', '.join(failed)})" if failed else ""
        lines.append(f"❌ Translation validation failed{detail}")
    return "\n".join(lines)


def render_json(report: AuditReport) -> str:
    """Render the full report as a JSON document."""
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
