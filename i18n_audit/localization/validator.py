"""Validation run over a base locale and its target locales."""

from typing import Iterable, List, Optional

import structlog

from i18n_audit.config.settings import Settings
from i18n_audit.errors import DocumentError, ErrorCollector

from .comparator import compare_documents
from .keys import extract_keys
from .models import AuditReport, ValidationResult
from .placeholders import PlaceholderScanner
from .store import LocaleStore

logger = structlog.get_logger()


def validate_translations(
    store: LocaleStore,
    base_locale: Optional[str] = None,
    locales: Optional[Iterable[str]] = None,
    settings: Optional[Settings] = None,
    collector: Optional[ErrorCollector] = None,
) -> AuditReport:
    """Validate every target locale against the base locale.

    Target locales are ``locales`` when given, else the configured
    supported locales, else the locales the store declares, else every
    locale the store offers. A target that cannot be loaded is recorded as
    failed and the run continues.

    Raises:
        DocumentError: If the base document itself cannot be loaded
    """
    settings = settings or Settings()
    base_locale = base_locale or settings.base_locale
    collector = collector if collector is not None else ErrorCollector()

    try:
        base = store.load(base_locale)
    except DocumentError as e:
        e.context["is_base"] = True
        raise
    base_keys = extract_keys(base)
    logger.info("Base locale loaded", locale=base_locale, keys=len(base_keys))

    if locales is not None:
        targets: List[str] = list(locales)
    elif settings.supported_locales:
        targets = list(settings.supported_locales)
    else:
        targets = store.declared_locales() or store.available_locales()
    targets = [loc for loc in dict.fromkeys(targets) if loc != base_locale]

    scanner = PlaceholderScanner(settings.placeholder_patterns, settings.allowed_interpolations)
    report = AuditReport(
        base_locale=base_locale,
        base_key_count=len(base_keys),
        missing_namespaces=[ns for ns in settings.required_namespaces if ns not in base],
        strict=settings.strict,
    )

    for locale in targets:
        try:
            target = store.load(locale)
        except DocumentError as e:
            collector.record_error(e, {"locale": locale})
            load_error = collector.errors_for(locale)[-1]["message"]
            report.results.append(ValidationResult(locale=locale, load_error=load_error))
            continue

        result = compare_documents(locale, base, target, scanner=scanner, base_keys=base_keys)
        logger.info(
            "Locale validated",
            locale=locale,
            keys=result.key_count,
            missing=len(result.missing_keys),
            extra=len(result.extra_keys),
            placeholders=len(result.placeholder_hits),
        )
        report.results.append(result)

    logger.info(
        "Validation finished",
        base_locale=base_locale,
        locales=len(report.results),
        passed=report.passed,
        **collector.get_error_stats(),
    )
    return report
