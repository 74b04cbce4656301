"""Configuration loading from YAML files and overrides."""

from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml
from pydantic import ValidationError

from i18n_audit.errors import ConfigurationError

from .settings import Settings

logger = structlog.get_logger()


def _read_config_file(config_file: Path) -> Dict[str, Any]:
    if not config_file.is_file():
        raise ConfigurationError(f"Configuration file not found: {config_file}", config_key="config_file")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in configuration file {config_file}: {e}",
            config_key="config_file",
            previous_error=e,
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {config_file} must contain a mapping",
            config_key="config_file",
        )

    # Relative locale directories are resolved against the config file
    locales_dir = data.get("locales_dir")
    if locales_dir is not None and not Path(locales_dir).is_absolute():
        data["locales_dir"] = (config_file.parent / locales_dir).resolve()

    return data


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> Settings:
    """Build Settings from an optional YAML file and explicit overrides.

    Precedence: overrides, then the YAML file, then environment variables,
    then defaults. Overrides set to None are ignored so unset CLI options
    do not mask file values.

    Raises:
        ConfigurationError: If the file is unreadable or any value is invalid.
    """
    values: Dict[str, Any] = {}
    if config_file is not None:
        values.update(_read_config_file(Path(config_file)))
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = Settings(**values)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid configuration: {key}: {first.get('msg')}",
            config_key=key or None,
            previous_error=e,
        ) from e

    logger.debug(
        "Configuration loaded",
        config_file=str(config_file) if config_file else None,
        locales_dir=str(settings.locales_dir),
        base_locale=settings.base_locale,
    )
    return settings
