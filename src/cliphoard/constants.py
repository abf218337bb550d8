# region Docstring
"""
cliphoard.constants
Shared constants and enumerations for the clipboard history store.
Overview:
- Provides the application identity used to resolve per-user data and config
    directories.
- Defines file names for the persisted history, user config, and image payloads.
- Provides defaults for history capacity, polling and retry backoff.
- Provides enumerations for history item kinds and UI themes.
Contents:
- Identity:
    - APP_NAME, APP_AUTHOR: Passed to platformdirs when resolving directories.
- File Names:
    - HISTORY_FILE_NAME, CONFIG_FILE_NAME, IMAGES_DIR_NAME, IMAGE_SUFFIX,
        LOG_FILE_NAME.
- Defaults:
    - DEFAULT_MAX_HISTORY, DEFAULT_POLL_INTERVAL, DEFAULT_RETRY_ATTEMPTS,
        DEFAULT_RETRY_BASE_DELAY, LOG_ARCHIVES_TO_KEEP.
- Enumerations:
    - ClipKind: Kind of a history entry (text, image).
    - Theme: Presentation theme stored in the user config (dark, light).
Design Notes:
- Enums inherit from both str and enum.Enum so they serialize to their plain
    string value in the JSON files and compare equal to raw strings.
"""
# endregion
# region Imports
import enum

# endregion
# region Constants -- Identity
APP_NAME: str = "cliphoard"
"""str: Application name used for platform directories and logger names."""
APP_AUTHOR: str = "cliphoard"
"""str: Application author used for platform directories (Windows only)."""
# endregion
# region Constants -- File Names
HISTORY_FILE_NAME: str = "history.json"
CONFIG_FILE_NAME: str = "config.json"
IMAGES_DIR_NAME: str = "images"
IMAGE_SUFFIX: str = ".png"
LOG_FILE_NAME: str = "cliphoard.jsonl"
# endregion
# region Constants -- Defaults
DEFAULT_MAX_HISTORY: int = 50
"""int: Number of entries kept when the user config does not say otherwise."""
DEFAULT_POLL_INTERVAL: float = 0.5
"""float: Seconds between two clipboard checks of the watcher."""
DEFAULT_RETRY_ATTEMPTS: int = 5
"""int: Attempts made by the retry wrapper before giving up."""
DEFAULT_RETRY_BASE_DELAY: float = 0.05
"""float: Seconds slept after the first failed attempt; doubled every retry."""
LOG_ARCHIVES_TO_KEEP: int = 10
"""int: Number of archived log files kept next to the active log."""
# endregion
# region Constants -- Enums


class ClipKind(str, enum.Enum):
    """Enumeration of history entry kinds."""

    TEXT = "text"  # Literal clipboard text
    IMAGE = "image"  # Path to a content-addressed PNG payload


class Theme(str, enum.Enum):
    """Enumeration of presentation themes."""

    DARK = "dark"
    LIGHT = "light"


DEFAULT_THEME: Theme = Theme.DARK
# endregion

__all__ = [
    "APP_AUTHOR",
    "APP_NAME",
    "CONFIG_FILE_NAME",
    "DEFAULT_MAX_HISTORY",
    "DEFAULT_POLL_INTERVAL",
    "DEFAULT_RETRY_ATTEMPTS",
    "DEFAULT_RETRY_BASE_DELAY",
    "DEFAULT_THEME",
    "HISTORY_FILE_NAME",
    "IMAGES_DIR_NAME",
    "IMAGE_SUFFIX",
    "LOG_ARCHIVES_TO_KEEP",
    "LOG_FILE_NAME",
    "ClipKind",
    "Theme",
]
