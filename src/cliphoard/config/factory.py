# region Docstring
"""
cliphoard.config.factory
Factory module for creating and managing process settings with multi-source configuration support.
Overview:
- Provides a custom Pydantic BaseSettings subclass that supports hierarchical configuration
    loading from YAML files, environment variables, and .env files.
- Implements a cached factory function for settings instantiation across the application.
Contents:
- Constants:
    - T: TypeVar bound to BaseSettings for generic typing support in the factory function.
- Classes:
    - FactoryBaseSettings:
        Custom BaseSettings subclass that extends Pydantic's configuration capabilities to support
        YAML configuration files alongside standard environment variable loading.
        Configuration Priority (highest to lowest):
            1. Init kwargs
            2. Environment variables
            3. .env file values
            4. YAML files (environment-specific settings.{env}.yaml)
            5. YAML files (default settings.yaml)
            6. Field defaults
- Functions:
    - get_settings(settings_cls: Type[T]) -> T:
        LRU-cached factory function that instantiates and returns settings objects.
Design notes:
- Settings here are process-level knobs (paths, log level, polling, retry policy). The user
    facing options (max_history, theme, start_login) live in AppConfig and are re-read from
    disk before every mutation, so they are not cached here.
- YAML files are looked up in the config directory resolved by AppEnv at instantiation time.
- Call get_settings.cache_clear() after changing the environment in-process (tests do this).
"""

# region Imports
from functools import lru_cache
from typing import Type, TypeVar

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from .base import AppEnv

# endregion
# region FactoryBaseSettings Class
T = TypeVar("T", bound=BaseSettings)


class FactoryBaseSettings(BaseSettings):
    """
    Custom BaseSettings that supports YAML and Env Vars.
    Priority: Init > Env Vars > .env > YAML (Env specific) > YAML (Default) > Defaults
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:

        # Load settings.yaml and settings.{env}.yaml
        config_dir = AppEnv.config_dir()
        yaml_settings = YamlConfigSettingsSource(
            settings_cls,
            yaml_file=[
                config_dir / "settings.yaml",
                config_dir / f"settings.{AppEnv.environment()}.yaml",
            ],
        )
        return (
            init_settings,  # Init kwargs (highest priority)
            env_settings,  # Environment variables
            dotenv_settings,  # .env file
            yaml_settings,  # YAML files
        )


# endregion
# region get_settings Factory Function


@lru_cache
def get_settings(settings_cls: Type[T]) -> T:
    """
    Factory function to load any settings class.
    Results are cached so we don't re-read files every time.
    """
    return settings_cls()


# endregion
