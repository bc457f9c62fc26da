"""
Configuration for the built-in directives.

Only directive names and the default date format are configurable. Values
come from (highest priority first) environment variables prefixed with
``SCHEMA_DIRECTIVES_``, a YAML file, then the defaults below.

    # schema_directives.yaml
    names:
      uppercase: upper
      length: len
    date_default_format: "yyyy-mm-dd"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from schema_directives.core.defs import DEFAULT_DATE_FORMAT
from schema_directives.core.registry import DirectiveRegistry
from schema_directives.directives import (
    date_directive,
    inherits_directive,
    length_directive,
    lowercase_directive,
    uppercase_directive,
)


class DirectiveNames(BaseModel):
    """SDL names of the built-in directives."""
    inherits: str = "inherits"
    length: str = "length"
    date: str = "date"
    lowercase: str = "lowercase"
    uppercase: str = "uppercase"


class DirectiveSettings(BaseSettings):
    """Settings loaded from the environment, e.g. SCHEMA_DIRECTIVES_NAMES__DATE=when."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEMA_DIRECTIVES_",
        env_nested_delimiter="__",
    )

    names: DirectiveNames = Field(default_factory=DirectiveNames)
    date_default_format: str = DEFAULT_DATE_FORMAT

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment overrides values passed in (e.g. from YAML)
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DirectiveSettings":
        """Create settings from a dictionary; environment variables still win."""
        return cls(**(data or {}))


def load_settings(path: Path | str = "schema_directives.yaml") -> DirectiveSettings:
    """Load settings from a YAML file, falling back to defaults if it does not exist."""
    path = Path(path)
    if not path.exists():
        return DirectiveSettings()

    data = yaml.safe_load(path.read_text())
    return DirectiveSettings.from_dict(data)


def create_registry(settings: Optional[DirectiveSettings] = None) -> DirectiveRegistry:
    """
    Create a registry with every built-in directive.

    Args:
        settings: Directive names and defaults; environment/defaults if None.

    Returns:
        DirectiveRegistry ready for build_schema() / transform()
    """
    settings = settings or DirectiveSettings()
    names = settings.names

    registry = DirectiveRegistry()
    registry.register(inherits_directive(names.inherits))
    registry.register(length_directive(names.length))
    registry.register(date_directive(names.date, settings.date_default_format))
    registry.register(lowercase_directive(names.lowercase))
    registry.register(uppercase_directive(names.uppercase))
    return registry
