"""
Settings for the onto-schema model layer.

Settings decide how fields are projected for code generation: which
representation name each semantic kind maps to and how field comments are
rendered. They are validated with pydantic and may be loaded from YAML.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from .colored_logging import log_progress, log_success
from .constants import CommentStyle, DefaultTypeNames
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_VALID_TYPE_KEYS = frozenset(DefaultTypeNames.MAPPING)


class SchemaSettings(BaseModel):
    """Pydantic schema describing how schema fields are projected."""

    type_names: Dict[str, str] = Field(
        default_factory=lambda: dict(DefaultTypeNames.MAPPING),
        description="Representation name per kind ('integer', 'date', ...) and for 'relation'.",
    )
    comment_prefix: str = Field(
        default=CommentStyle.PREFIX,
        description="Prefix placed before every field comment in typed projections.",
    )
    first_comment_prefix: str = Field(
        default=CommentStyle.FIRST_FIELD_PREFIX,
        description="Extra prefix for the comment of the first field of a projection.",
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("type_names", mode="before")
    @classmethod
    def merge_type_names(cls, v: Any) -> Dict[str, str]:
        """Overlay user supplied names on the defaults and reject unknown kinds."""
        if v is None:
            return dict(DefaultTypeNames.MAPPING)
        if not isinstance(v, dict):
            raise ValueError(f"type_names must be a mapping, got {type(v).__name__}")

        merged = dict(DefaultTypeNames.MAPPING)
        for key, name in v.items():
            normalized = str(key).strip().lower()
            if normalized not in _VALID_TYPE_KEYS:
                raise ValueError(
                    f"Unknown kind '{key}' in type_names. Valid kinds: {', '.join(sorted(_VALID_TYPE_KEYS))}"
                )
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"Representation name for '{key}' must be a non-empty string")
            merged[normalized] = name.strip()
        return merged


def validate_settings(raw: Dict[str, Any], source: Optional[str] = None) -> SchemaSettings:
    """
    Validate a raw settings dictionary.

    Raises:
        ConfigurationError: If the dictionary does not match SchemaSettings
    """
    try:
        return SchemaSettings.model_validate(raw)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            loc = " -> ".join(str(item) for item in error.get("loc", ())) or "Model Level"
            problems.append(f"{loc}: {error.get('msg', 'Unknown validation error')}")
        raise ConfigurationError(
            "Schema settings validation failed",
            config_file=source,
            context={"errors": "; ".join(problems)},
        ) from e


def load_settings(config_path: Optional[Union[str, Path]] = None) -> SchemaSettings:
    """
    Load settings from a YAML file, falling back to defaults.

    A missing path or file yields the defaults. Unreadable YAML, a
    non-mapping document or invalid values raise ConfigurationError.
    """
    raw_config: Dict[str, Any] = {}

    if config_path:
        config_file = Path(config_path)
        if config_file.is_file():
            log_progress(logger, f"Loading schema settings from {config_file}")
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML in settings file: {e}", config_file=str(config_file)
                ) from e
            except OSError as e:
                raise ConfigurationError(
                    f"Error reading settings file: {e}", config_file=str(config_file)
                ) from e

            if data is not None and not isinstance(data, dict):
                raise ConfigurationError(
                    "Settings file must contain a mapping",
                    config_file=str(config_file),
                    context={"loaded_type": type(data).__name__},
                )
            raw_config.update(data or {})
        else:
            logger.warning(f"Settings file not found at {config_path}. Using defaults.")

    settings = validate_settings(raw_config, source=str(config_path) if config_path else None)
    log_success(logger, "Schema settings loaded")
    logger.debug(f"Effective schema settings: {settings}")
    return settings


# Process-wide active settings
_active_settings: Optional[SchemaSettings] = None


def get_settings() -> SchemaSettings:
    """Return the active settings, creating the defaults on first use."""
    global _active_settings
    if _active_settings is None:
        _active_settings = SchemaSettings()
    return _active_settings


def configure(settings: Union[SchemaSettings, Dict[str, Any]]) -> SchemaSettings:
    """Install settings (a model or a raw dict) as the active settings."""
    global _active_settings
    if not isinstance(settings, SchemaSettings):
        settings = validate_settings(settings)
    _active_settings = settings
    return settings


def reset_settings() -> None:
    """Drop the active settings so the defaults are used again."""
    global _active_settings
    _active_settings = None
