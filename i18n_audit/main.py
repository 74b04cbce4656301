"""Main entry point for the translation validator."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from i18n_audit import __version__
from i18n_audit.config import load_config
from i18n_audit.errors import ConfigurationError, DocumentError, ErrorCollector, TranslationAuditError
from i18n_audit.localization import DirectoryLocaleStore, render_json, render_text, validate_translations


def setup_logging(debug: bool = False) -> None:
    """Configure structured logging.

    Logs go to stderr so stdout only carries the report.
    """
    level = logging.DEBUG if debug else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.dev.ConsoleRenderer(colors=True)
                if debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="i18n-audit",
        description="Validate translation files for missing keys and placeholder text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"i18n-audit {__version__}")

    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging")

    parser.add_argument("--config-file", type=Path, help="Path to YAML configuration file")

    parser.add_argument("--locales-dir", type=Path, help="Directory of <locale>.json translation files")

    parser.add_argument("--base-locale", help="Locale the others are compared against (default: en-US)")

    parser.add_argument(
        "--locale",
        dest="locales",
        action="append",
        metavar="LOCALE",
        help="Target locale to validate; repeat for several (default: all found)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on interpolation mismatches and empty values too",
    )

    parser.add_argument("--format", dest="output_format", choices=["text", "json"], help="Report format")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run one validation and return the process exit status."""
    args = parse_args(argv)

    try:
        config = load_config(
            config_file=args.config_file,
            locales_dir=args.locales_dir,
            base_locale=args.base_locale,
            supported_locales=args.locales,
            strict=args.strict,
            output_format=args.output_format,
            debug=args.debug,
        )
    except ConfigurationError as e:
        setup_logging(debug=bool(args.debug))
        structlog.get_logger().error("Configuration error", error=str(e))
        print(f"❌ {e}", file=sys.stderr)
        return 1

    setup_logging(debug=config.debug)
    logger = structlog.get_logger()
    logger.debug("Starting translation validation", version=__version__, locales_dir=str(config.locales_dir))

    store = DirectoryLocaleStore(config.locales_dir)
    collector = ErrorCollector()

    try:
        report = validate_translations(store, settings=config, collector=collector)
    except DocumentError as e:
        logger.error("Base locale could not be loaded", **e.to_dict())
        print(f"❌ Failed to load base locale file: {e}", file=sys.stderr)
        return 1
    except TranslationAuditError as e:
        logger.error("Validation error", **e.to_dict())
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if collector.has_errors():
        logger.warning("Some locales could not be loaded", **collector.get_error_stats())

    if config.output_format == "json":
        print(render_json(report))
    else:
        print(render_text(report))

    return report.exit_code


def run() -> None:
    """Synchronous entry point for setuptools."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nShutdown requested by user")
        sys.exit(1)


if __name__ == "__main__":
    run()
