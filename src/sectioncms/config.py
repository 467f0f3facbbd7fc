"""Configuration file loading and validation."""

import logging
import re
import tomllib
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .consts import DATA_ROOT, DATABASE_FILENAME, LOG_FILENAME
from .errors import ConfigException
from .utils import format_validation_error

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class WebConfig(BaseModel):
    """Web service configuration."""

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000, ge=1, le=65535)
    debug: bool = Field(default=False)
    reload: bool = Field(default=False)


class MediaConfig(BaseModel):
    """Object storage used to display uploaded media."""

    base_url: str = Field(default="http://localhost:54321")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("media.base_url must start with http:// or https://")
        return v.rstrip("/")


class EditorConfig(BaseModel):
    """Section editor behaviour."""

    repair_alert_threshold: int = Field(default=5, ge=0)
    expand_advanced: bool = Field(default=False)


class PageConfig(BaseModel):
    slug: str
    title: str = ""

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        v = v.strip()
        if not SLUG_PATTERN.match(v):
            raise ValueError(f"Invalid page slug '{v}': use lowercase letters, digits and dashes")
        return v


class Config(BaseSettings):
    """Application configuration."""

    data_dir: str = Field(default=DATA_ROOT)
    database_path: str | None = Field(default=None)
    log_file: str | None = Field(default=None)
    log_level: str = Field(default="INFO")

    web: WebConfig = Field(default_factory=WebConfig)
    media: MediaConfig = Field(default_factory=MediaConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
    pages: List[PageConfig] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        env_prefix="SECTIONCMS_",
        env_nested_delimiter="__",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level '{v}'")
        return level

    @field_validator("pages", mode="before")
    @classmethod
    def coerce_indexed_dict_to_list(cls, v):
        if v is None:
            return []
        if isinstance(v, dict):
            try:
                items = sorted(v.items(), key=lambda kv: int(kv[0]))
            except ValueError:
                return list(v.values())
            return [value for _key, value in items]
        return v

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
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> "Config":
        """Load configuration from specified path."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Configuration file not found: {config_path}")

        try:
            with path.open("rb") as f:
                tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigException(f"Invalid TOML in {config_path}: {e}") from e

        class _Config(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix="SECTIONCMS_",
                env_nested_delimiter="__",
            )

        try:
            return _Config()
        except ValidationError as e:
            raise ConfigException(
                format_validation_error(e, "Configuration validation failed:")
            ) from e

    def get_database_path(self) -> str:
        return self.database_path or str(Path(self.data_dir) / DATABASE_FILENAME)

    def get_log_file(self) -> str:
        return self.log_file or str(Path(self.data_dir) / LOG_FILENAME)
