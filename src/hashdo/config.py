"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables  (HASHDO__PACKS__BASE_URL=https://cards.example.com)
  3. hashdo.yaml            (searched in cwd, then the user config dir)
  4. Hardcoded defaults

The config file is optional; every field has a default.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_DATA_DIR = platformdirs.user_data_dir("hashdo")
_DEFAULT_CARDS_DIR = str(Path(_DEFAULT_DATA_DIR) / "packs")


def _find_config_file() -> str | None:
    """Return the path of the first hashdo.yaml found, or None."""
    candidates = [
        Path("hashdo.yaml"),
        Path(platformdirs.user_config_dir("hashdo")) / "hashdo.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class PacksSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Protocol and host the cards are served from, e.g. https://hashdo.com
    base_url: str = "https://hashdo.com"
    cards_directory: str = _DEFAULT_CARDS_DIR
    prefix: str = "hashdo-"
    manifest_filename: str = "package.json"
    card_extension: str = ".yaml"

    @field_validator("prefix", "manifest_filename")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("card_extension")
    @classmethod
    def validate_card_extension(cls, v: str) -> str:
        if len(v) < 2 or not v.startswith("."):
            raise ValueError(f"card_extension must look like '.yaml', got {v!r}")
        return v


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: HASHDO__LOGGING__LEVEL=DEBUG
        env_prefix="HASHDO__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    packs: PacksSettings = PacksSettings()
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
