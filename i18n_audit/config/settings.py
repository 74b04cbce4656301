"""Settings for translation validation runs."""

import re
from pathlib import Path
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"

DEFAULT_PLACEHOLDER_PATTERNS = [
    r"TODO",
    r"FIXME",
    r"TRANSLATE",
    r"\[translation needed\]",
]


class Settings(BaseSettings):
    """Validation settings.

    Values come from (highest priority first) explicit keyword arguments,
    ``I18N_AUDIT_*`` environment variables and the defaults below.
    """

    locales_dir: Path = Field(default=DEFAULT_LOCALES_DIR, description="Directory of <locale>.json files")
    base_locale: str = Field(default="en-US", description="Locale every other locale is compared against")
    supported_locales: List[str] = Field(
        default_factory=list,
        description="Locales that must have a document; empty means every document found",
    )
    placeholder_patterns: List[str] = Field(default_factory=lambda: list(DEFAULT_PLACEHOLDER_PATTERNS))
    allowed_interpolations: List[str] = Field(default_factory=lambda: ["year"])
    required_namespaces: List[str] = Field(default_factory=list)
    strict: bool = False
    output_format: Literal["text", "json"] = "text"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="I18N_AUDIT_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("base_locale")
    @classmethod
    def validate_base_locale(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("base_locale must not be empty")
        return v

    @field_validator("placeholder_patterns")
    @classmethod
    def validate_placeholder_patterns(cls, v: List[str]) -> List[str]:
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid placeholder pattern {pattern!r}: {e}") from e
        return v
