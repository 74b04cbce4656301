"""Loading translation documents by locale identifier."""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import structlog
import yaml

from i18n_audit.errors import ConfigurationError, DocumentNotFound, DocumentUnreadable, MalformedDocument, log_errors

logger = structlog.get_logger()

MANIFEST_NAME = "locales.yml"

TranslationDocument = Dict[str, Any]


def _check_tree(locale: str, document: Any, source: str) -> None:
    """Ensure the document is a string-keyed object tree."""
    if not isinstance(document, Mapping):
        raise MalformedDocument(
            locale, f"top-level value must be an object, got {type(document).__name__}", source=source
        )

    stack = [(None, document)]
    while stack:
        prefix, node = stack.pop()
        for key, value in node.items():
            if not isinstance(key, str):
                raise MalformedDocument(locale, f"non-string key {key!r} under '{prefix or ''}'", source=source)
            if isinstance(value, Mapping):
                stack.append((key if prefix is None else f"{prefix}.{key}", value))


class LocaleStore:
    """Base class for sources of translation documents."""

    def available_locales(self) -> List[str]:
        raise NotImplementedError

    def declared_locales(self) -> Optional[List[str]]:
        """Locales the store promises to provide, or None if it makes no promise."""
        return None

    def load(self, locale: str) -> TranslationDocument:
        raise NotImplementedError


class DirectoryLocaleStore(LocaleStore):
    """Reads ``<locale>.json`` files from a directory."""

    def __init__(self, locales_dir: Union[str, Path]):
        """Initialize the store.

        Args:
            locales_dir: Directory containing translation files
        """
        self.locales_dir = Path(locales_dir)

    def path_for(self, locale: str) -> Path:
        return self.locales_dir / f"{locale}.json"

    def available_locales(self) -> List[str]:
        """Get locale identifiers of every translation file, sorted."""
        if not self.locales_dir.is_dir():
            logger.warning("Translations directory not found", dir=str(self.locales_dir))
            return []
        return sorted(p.stem for p in self.locales_dir.glob("*.json") if p.is_file())

    def declared_locales(self) -> Optional[List[str]]:
        """Read the supported locale list from the directory's ``locales.yml``.

        Raises:
            ConfigurationError: If the manifest is unreadable or not a list of locales
        """
        manifest = self.locales_dir / MANIFEST_NAME
        if not manifest.is_file():
            return None

        try:
            with open(manifest, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Cannot read locale manifest {manifest}: {e}", config_key="supported_locales", previous_error=e
            ) from e

        locales = data.get("supported_locales") if isinstance(data, dict) else None
        if not isinstance(locales, list) or not all(isinstance(loc, str) for loc in locales):
            raise ConfigurationError(
                f"Locale manifest {manifest} must define supported_locales as a list of strings",
                config_key="supported_locales",
            )

        logger.debug("Loaded locale manifest", file=str(manifest), locales=locales)
        return locales

    @log_errors(level="warning", operation_name="load_translation_document")
    def load(self, locale: str) -> TranslationDocument:
        """Load and parse one locale's document.

        Raises:
            DocumentNotFound: If the file does not exist
            DocumentUnreadable: If the file exists but cannot be read
            MalformedDocument: If the file is not a valid UTF-8 JSON object tree
        """
        path = self.path_for(locale)
        source = str(path)

        if not path.is_file():
            raise DocumentNotFound(locale, source=source)

        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except UnicodeDecodeError as e:
            raise MalformedDocument(locale, f"not valid UTF-8: {e}", source=source, previous_error=e) from e
        except json.JSONDecodeError as e:
            raise MalformedDocument(
                locale, f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}",
                source=source, previous_error=e,
            ) from e
        except RecursionError as e:
            raise MalformedDocument(locale, "nesting too deep to parse", source=source, previous_error=e) from e
        except ValueError as e:
            # e.g. integer literals beyond the interpreter's digit limit
            raise MalformedDocument(locale, f"unparseable value: {e}", source=source, previous_error=e) from e
        except OSError as e:
            raise DocumentUnreadable(locale, e, source=source) from e

        _check_tree(locale, document, source)
        logger.debug("Loaded translations", locale=locale, file=source)
        return document


class MappingLocaleStore(LocaleStore):
    """Serves documents from an in-memory mapping of locale to document."""

    def __init__(self, documents: Mapping[str, Any]):
        self.documents = dict(documents)

    def available_locales(self) -> List[str]:
        return sorted(self.documents)

    @log_errors(level="warning", operation_name="load_translation_document")
    def load(self, locale: str) -> TranslationDocument:
        if locale not in self.documents:
            raise DocumentNotFound(locale, source="<memory>")
        document = self.documents[locale]
        _check_tree(locale, document, "<memory>")
        return document
