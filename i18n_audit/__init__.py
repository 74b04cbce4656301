"""Translation completeness and placeholder validation for JSON locale files."""

__version__ = "0.1.0"
