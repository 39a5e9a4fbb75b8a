"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DESIGNDEMOS_*`` prefix, ``__`` for nested keys
  3. TOML file    — ``designdemos.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The TOML source reuses the ``find_config`` walk-up from
:mod:`designdemos.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from designdemos.config.discovery import find_config
from designdemos.config.models import GaugeConfig, PluginsConfig, UberConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``designdemos.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class DemoSettings(BaseSettings):
    """Frozen settings for one CLI invocation.

    Stored on the ``AppContext`` created by the root command group.

    Attributes:
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DESIGNDEMOS_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    gauge: GaugeConfig = Field(default_factory=GaugeConfig)
    uber: UberConfig = Field(default_factory=UberConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> DemoSettings:
        """Construct settings for a CLI invocation.

        An explicit *config_path* must exist; otherwise ``designdemos.toml``
        is discovered by walking up from *start* (default: cwd).
        """
        toml_path: Path | None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            msg = f"Invalid configuration from {source}: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None

    @property
    def plugin_dir(self) -> Path:
        """Local plugin directory, relative to the config file when one exists."""
        local = Path(self.plugins.local_dir)
        if local.is_absolute():
            return local
        base = self.config_path.parent if self.config_path else Path.cwd()
        return base / local
