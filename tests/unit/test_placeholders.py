"""
Unit tests for placeholder detection and interpolation helpers.
"""

import pytest

from i18n_audit.localization import PlaceholderScanner, extract_variables


class TestPlaceholderScanner:
    """Test banned-word detection."""

    @pytest.fixture
    def scanner(self):
        return PlaceholderScanner()

    @pytest.mark.parametrize("text", [
        "TODO: translate this",
        "todo",
        "FIXME later",
        "Please TRANSLATE me",
        "Produits [Translation Needed]",
    ])
    def test_flags_banned_words(self, scanner, text):
        """Banned words are matched case-insensitively."""
        assert scanner.match(text) is not None

    def test_clean_text(self, scanner):
        assert scanner.match("Add to Cart") is None

    def test_allowed_interpolation_is_not_flagged(self, scanner):
        """An allow-listed token alone never triggers a hit."""
        assert scanner.match("Copyright {{year}}") is None

    def test_banned_word_with_allowed_interpolation_is_flagged(self, scanner):
        """Banned words still count when the string also has allowed tokens."""
        assert scanner.match("FIXME {{year}}") == "FIXME"

    def test_interpolation_not_on_allow_list_is_scanned(self, scanner):
        """Tokens outside the allow-list are scanned like any other text."""
        assert scanner.match("{{translatedName}}") == "TRANSLATE"

    def test_allow_list_is_configurable(self):
        scanner = PlaceholderScanner(allowed_interpolations=["todoCount"])

        assert scanner.match("{{todoCount}} open tasks") is None
        assert PlaceholderScanner().match("{{todoCount}} open tasks") == "TODO"

    def test_custom_patterns(self):
        scanner = PlaceholderScanner(patterns=[r"XXX"])

        assert scanner.match("xxx") == "XXX"
        assert scanner.match("TODO") is None

    def test_empty_pattern_list_never_matches(self):
        assert PlaceholderScanner(patterns=[]).match("TODO") is None


class TestExtractVariables:
    """Test interpolation variable extraction."""

    def test_extracts_names(self):
        assert extract_variables("{{count}} items for {{name}}") == {"count", "name"}

    def test_whitespace_inside_braces(self):
        assert extract_variables("{{ count }} items") == {"count"}

    def test_no_variables(self):
        assert extract_variables("Plain text") == set()

    def test_single_braces_are_not_variables(self):
        assert extract_variables("{count}") == set()
