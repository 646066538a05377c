"""TimedateSettings — one object for CLI flags, environment, and timedate.toml.

Precedence, highest first:

1. keyword arguments (the CLI passes its global flags here)
2. ``TIMEDATE_*`` environment variables, ``__`` for nesting
   (``TIMEDATE_ZONES__LIST_LIMIT=20``)
3. ``timedate.toml`` found by :func:`timedate.config.discovery.find_config`
4. defaults on the section models
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from timedate.config.discovery import find_config
from timedate.config.models import McpConfig, ZonesConfig

# The TOML file for the settings object currently being built. Settings
# sources are chosen in a classmethod, so the path cannot travel as an argument.
_toml_file: ContextVar[Path | None] = ContextVar("timedate_toml_file", default=None)


class TimedateSettings(BaseSettings):
    """Resolved configuration for one CLI invocation or MCP server."""

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="TIMEDATE_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    zones: ZonesConfig = Field(default_factory=ZonesConfig)
    mcp: McpConfig = Field(default_factory=McpConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=_toml_file.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_root: Path | None = None,
        **flags: Any,
    ) -> TimedateSettings:
        """Build settings for a command-line invocation.

        *config_path* (``--config``) wins over discovery; a path that does
        not exist means "no file". Otherwise ``timedate.toml`` is searched
        for upward from *search_root* (default: CWD).

        Raises:
            click.ClickException: if the TOML file cannot be parsed.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(search_root)

        token = _toml_file.set(toml_path)
        try:
            return cls(config_path=toml_path, **flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _toml_file.reset(token)
