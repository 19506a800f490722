"""Configuration file loading and validation."""

import logging
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .consts import JSON_INDENT_DEFAULT, LOG_FILE_DEFAULT, OUTPUT_PATH_DEFAULT
from .errors import ConfigException

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Application configuration."""

    indent: int = Field(default=JSON_INDENT_DEFAULT, ge=0)
    output: str = Field(default=OUTPUT_PATH_DEFAULT)
    log_file: str = Field(default=LOG_FILE_DEFAULT)
    warn_duplicate_names: bool = True

    model_config = SettingsConfigDict(
        env_prefix="CMSFIELDS_",
        env_nested_delimiter="__",
    )

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

        class _Config(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix="CMSFIELDS_",
                env_nested_delimiter="__",
            )

        try:
            return _Config()
        except ValidationError as e:
            error_lines = ["Configuration validation failed:"]
            for error in e.errors():
                loc = " -> ".join(str(item) for item in error["loc"])
                error_lines.append(f"  - {loc}: {error['msg']}")
            raise ConfigException("\n".join(error_lines)) from e
        except ValueError as e:
            raise ConfigException(f"Invalid configuration file {config_path}: {e}") from e

    @classmethod
    def load_or_default(cls, config_path: str) -> "Config":
        if Path(config_path).exists():
            return cls.load_from_file(config_path)
        logger.debug(f"Configuration file {config_path} not found, using defaults")
        return cls()
