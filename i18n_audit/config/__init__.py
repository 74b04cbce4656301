"""Configuration for i18n-audit."""

from .loader import load_config
from .settings import DEFAULT_LOCALES_DIR, DEFAULT_PLACEHOLDER_PATTERNS, Settings

__all__ = [
    "DEFAULT_LOCALES_DIR",
    "DEFAULT_PLACEHOLDER_PATTERNS",
    "Settings",
    "load_config",
]
