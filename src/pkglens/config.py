"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (PKGLENS__REGISTRY__ACTIVE=crates)
  2. pkglens.yaml           (searched in cwd, then the platform config dir)
  3. Hardcoded defaults

The config file is optional — all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir("pkglens")


def _find_config_file() -> str | None:
    """Return the path of the first pkglens.yaml found, or None."""
    candidates = [
        Path("pkglens.yaml"),
        Path(_DEFAULT_CONFIG_DIR) / "pkglens.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class RegistrySettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Raw selection signal. Interpreted by pkglens.selector, never validated here
    # so that an unrecognized value falls back to npm instead of crashing.
    active: str | None = None


class UpstreamSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    npm_url: str = "https://registry.npmjs.org"
    crates_url: str = "https://crates.io/api/v1"
    zig_index_url: str = "https://zig.pm/api/packages"
    github_api_url: str = "https://api.github.com"
    search_limit: int = Field(default=10, ge=1, le=10)
    github_tags_limit: int = Field(default=100, ge=1, le=100)


class HttpSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    user_agent: str = "pkglens/0.1 (+https://github.com/pkglens/pkglens)"
    timeout_seconds: float = Field(default=10.0, gt=0)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: PKGLENS__UPSTREAM__NPM_URL=...
        env_prefix="PKGLENS__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    registry: RegistrySettings = RegistrySettings()
    upstream: UpstreamSettings = UpstreamSettings()
    http: HttpSettings = HttpSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )


class SelectionSettings(BaseSettings):
    """Only the registry selection, read from the same env vars and YAML file.

    Kept separate from ``Settings`` so a bad value in an unrelated section
    cannot break registry selection.
    """

    model_config = SettingsConfigDict(
        env_prefix="PKGLENS__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
        extra="ignore",
    )

    registry: RegistrySettings = RegistrySettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, YamlConfigSettingsSource(settings_cls))
