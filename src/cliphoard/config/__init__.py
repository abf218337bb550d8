"""
cliphoard.config
Process settings for the clipboard history store, watcher, retry wrapper and logging.
Overview:
- Provides Pydantic-based settings classes for each component.
- Each settings class inherits from FactoryBaseSettings and supports environment variable
    overrides via Field aliases.
Contents:
- Imports:
    - AppEnv: Environment detection and platform directory resolution.
    - FactoryBaseSettings: Base settings class with YAML support.
    - get_settings: Factory function for retrieving cached settings instances (exported).
- Settings Classes:
    - StorageSettings:
        Locations of the data directory (history file, image payloads) and the config
        directory (user config), with computed paths for each file.
    - RetrySettings:
        Attempt ceiling and base delay of the exponential backoff around load/save.
    - ClipboardWatcherSettings:
        Poll interval of the clipboard watcher loop.
    - LogSettings:
        Log level and log directory.
Design Notes:
- All settings classes use Pydantic Field with aliases to support environment variable
    configuration (e.g., CLIPHOARD_DATA_DIR, CLIPHOARD_RETRY_ATTEMPTS).
- Default values are provided for all fields enabling zero-configuration startup.
- These settings do not include the user options (max_history, theme, start_login); see
    cliphoard.models.app_config.AppConfig.

"""

from cliphoard.config.base import AppEnv
from cliphoard.config.factory import FactoryBaseSettings
from cliphoard.config.factory import get_settings  # noqa: F401  This is used externally
from cliphoard.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_BASE_DELAY,
    HISTORY_FILE_NAME,
    IMAGES_DIR_NAME,
)
from cliphoard.imports import Field, Path


class StorageSettings(FactoryBaseSettings):
    """
    Storage location settings.
    """

    data_dir: Path = Field(
        default_factory=AppEnv.data_dir,
        alias="CLIPHOARD_DATA_DIR",
        description="Directory for the history file and image payloads.",
    )
    config_dir: Path = Field(
        default_factory=AppEnv.config_dir,
        alias="CLIPHOARD_CONFIG_DIR",
        description="Directory for the user config file.",
    )

    @property
    def history_path(self) -> Path:
        """Path of the persisted history file."""
        return self.data_dir / HISTORY_FILE_NAME

    @property
    def images_dir(self) -> Path:
        """Directory holding content-addressed image payloads."""
        return self.data_dir / IMAGES_DIR_NAME

    @property
    def config_path(self) -> Path:
        """Path of the persisted user config file."""
        return self.config_dir / CONFIG_FILE_NAME


class RetrySettings(FactoryBaseSettings):
    """
    Backoff settings for history load/save.
    """

    max_attempts: int = Field(
        default=DEFAULT_RETRY_ATTEMPTS,
        ge=1,
        alias="CLIPHOARD_RETRY_ATTEMPTS",
        description="Attempts before a load/save is given up. [Default: 5]",
    )
    base_delay: float = Field(
        default=DEFAULT_RETRY_BASE_DELAY,
        ge=0,
        alias="CLIPHOARD_RETRY_BASE_DELAY",
        description="Delay after the first failure, doubled every retry. (Seconds) [Default: 0.05]",
    )


class ClipboardWatcherSettings(FactoryBaseSettings):
    """
    Configuration for the Clipboard Watcher Service.
    """

    poll_interval: float = Field(
        default=DEFAULT_POLL_INTERVAL,
        gt=0,
        description="Interval for polling the clipboard. (Seconds) [Default: 0.5]",
        alias="CLIPHOARD_POLL_INTERVAL",
    )


class LogSettings(FactoryBaseSettings):
    """
    Logging configuration settings.
    """

    log_level: str = Field(
        default="info",
        alias="CLIPHOARD_LOG_LEVEL",
        description="Log level for cliphoard processes.",
    )
    log_dir: Path = Field(
        default_factory=lambda: AppEnv.data_dir() / "logs",
        alias="CLIPHOARD_LOG_DIR",
        description="Directory for the JSON lines log file and its archives.",
    )


__all__ = [
    "AppEnv",
    "ClipboardWatcherSettings",
    "FactoryBaseSettings",
    "LogSettings",
    "RetrySettings",
    "StorageSettings",
    "get_settings",
]
