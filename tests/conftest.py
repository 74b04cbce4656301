"""
Pytest configuration and fixtures for i18n-audit tests.
"""

import json
import pytest
from pathlib import Path
from typing import Any, Callable, Dict

from i18n_audit.config import Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep I18N_AUDIT_* variables from the outer shell out of the tests."""
    import os

    for name in list(os.environ):
        if name.startswith("I18N_AUDIT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_document() -> Dict[str, Any]:
    """Small base locale document."""
    return {
        "common": {
            "search": "Search",
            "loading": "Loading...",
        },
        "footer": {
            "copyright": "© {{year}} Example Store",
        },
        "products": {
            "title": "Products",
            "search": {
                "resultsCount_one": "{{count}} result",
                "resultsCount_other": "{{count}} results",
            },
        },
    }


@pytest.fixture
def translated_document() -> Dict[str, Any]:
    """Complete translation of ``base_document``."""
    return {
        "common": {
            "search": "Buscar",
            "loading": "Cargando...",
        },
        "footer": {
            "copyright": "© {{year}} Example Store",
        },
        "products": {
            "title": "Productos",
            "search": {
                "resultsCount_one": "{{count}} resultado",
                "resultsCount_other": "{{count}} resultados",
            },
        },
    }


@pytest.fixture
def write_locale(tmp_path: Path) -> Callable[..., Path]:
    """Helper to write ``<locale>.json`` files into a temporary directory."""
    def _write(locale: str, content: Any, raw: bool = False) -> Path:
        file_path = tmp_path / f"{locale}.json"
        if raw:
            file_path.write_bytes(content if isinstance(content, bytes) else content.encode("utf-8"))
        else:
            file_path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
        return file_path
    return _write


@pytest.fixture
def locales_dir(tmp_path: Path, write_locale, base_document, translated_document) -> Path:
    """Directory holding a valid en-US base and es-ES translation."""
    write_locale("en-US", base_document)
    write_locale("es-ES", translated_document)
    return tmp_path


@pytest.fixture
def test_settings(locales_dir: Path) -> Settings:
    """Settings pointing at the temporary locales directory."""
    return Settings(locales_dir=locales_dir, base_locale="en-US")


@pytest.fixture
def deny_read(monkeypatch) -> Callable[[str], None]:
    """Make opening the named locale files raise PermissionError.

    File modes are not enforced for root, so ``open`` in the store module is
    patched instead.
    """
    import builtins

    denied = set()

    def _open(file, *args, **kwargs):
        if Path(file).name in denied:
            raise PermissionError(13, "Permission denied", str(file))
        return builtins.open(file, *args, **kwargs)

    monkeypatch.setattr("i18n_audit.localization.store.open", _open, raising=False)
    return denied.add
