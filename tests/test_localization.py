#!/usr/bin/env python3
"""
Bundled Locale Tests
Checks the translation files shipped with the package stay complete and clean
"""

import json
import pytest
from pathlib import Path

from i18n_audit.config import DEFAULT_LOCALES_DIR, Settings
from i18n_audit.localization import (
    DirectoryLocaleStore,
    PlaceholderScanner,
    extract_keys,
    iter_leaves,
    validate_translations,
)

SUPPORTED_LOCALES = ["en-US", "es-ES", "fr-FR", "de-DE", "ja-JP", "ar-SA"]
BASE_LOCALE = "en-US"


class TestBundledLocales:
    """Test suite for the bundled translation files"""

    @pytest.fixture
    def translations_dir(self):
        """Get bundled translations directory"""
        return Path(DEFAULT_LOCALES_DIR)

    @pytest.fixture
    def translations(self, translations_dir):
        """Load all translation files"""
        translations = {}
        for file_path in translations_dir.glob("*.json"):
            with open(file_path, 'r', encoding='utf-8') as f:
                translations[file_path.stem] = json.load(f)
        return translations

    def test_translation_files_exist(self, translations_dir):
        """Test that every supported locale has a translation file"""
        assert translations_dir.exists(), "Translations directory must exist"

        for locale in SUPPORTED_LOCALES:
            assert (translations_dir / f"{locale}.json").exists(), f"Translation file for {locale} must exist"

    def test_manifest_lists_supported_locales(self, translations_dir):
        """Test that the bundled manifest pins every supported locale"""
        assert DirectoryLocaleStore(translations_dir).declared_locales() == SUPPORTED_LOCALES

    def test_translation_files_are_objects(self, translations):
        """Test that all translation files contain a JSON object"""
        for locale, content in translations.items():
            assert isinstance(content, dict), f"Translation file {locale}.json must contain a JSON object"

    def test_required_namespaces(self, translations):
        """Test that the base language has the namespaces the UI reads"""
        for namespace in ("common", "product", "products"):
            assert namespace in translations[BASE_LOCALE], f"Base language missing namespace {namespace}"

    def test_translation_key_consistency(self, translations):
        """Test that all translation files have the base language keys"""
        base_keys = extract_keys(translations[BASE_LOCALE])

        for locale, content in translations.items():
            locale_keys = extract_keys(content)
            assert not base_keys - locale_keys, f"Language {locale} missing keys: {base_keys - locale_keys}"
            assert not locale_keys - base_keys, f"Language {locale} has extra keys: {locale_keys - base_keys}"

    def test_plural_keys_consistent(self, translations):
        """Test that plural variants exist in every language"""
        plural_suffixes = ("_zero", "_one", "_other")
        base_plurals = {k for k in extract_keys(translations[BASE_LOCALE]) if k.endswith(plural_suffixes)}
        assert base_plurals, "Base language should define plural forms"

        for locale, content in translations.items():
            assert base_plurals <= extract_keys(content), f"Language {locale} missing plural forms"

    def test_no_placeholder_text(self, translations):
        """Test that no translation contains placeholder text"""
        scanner = PlaceholderScanner()

        for locale, content in translations.items():
            issues = [
                f"{locale}:{key} contains placeholder: \"{value}\""
                for key, value in iter_leaves(content)
                if isinstance(value, str) and scanner.match(value)
            ]
            assert not issues, f"Found placeholder issues in {locale}: {issues}"

    def test_translations_differ_from_base(self, translations):
        """Test that every language translates at least some strings"""
        base_values = dict(iter_leaves(translations[BASE_LOCALE]))

        for locale, content in translations.items():
            if locale == BASE_LOCALE:
                continue
            different = [k for k, v in iter_leaves(content) if v != base_values.get(k)]
            assert different, f"Language {locale} is identical to the base language"

    def test_full_validation_is_clean(self, translations_dir):
        """Test that a strict validation run over the bundled files passes"""
        settings = Settings(
            locales_dir=translations_dir,
            supported_locales=SUPPORTED_LOCALES,
            required_namespaces=["common", "product"],
            strict=True,
        )

        report = validate_translations(DirectoryLocaleStore(translations_dir), settings=settings)

        assert report.passed, report.to_dict()
        assert len(report.results) == len(SUPPORTED_LOCALES) - 1
        for result in report.results:
            assert result.completeness == 100.0
            assert not result.empty_values
            assert not result.interpolation_mismatches
