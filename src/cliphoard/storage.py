# region Docstring
"""
cliphoard.storage
Persistence gateways for the clipboard history and the user config.
Overview:
- Serializes the history store and the user config to pretty-printed JSON files
    at the platform data/config directories, and reads them back.
- Every save rewrites the complete file; there is no append or partial update.
Contents:
- Exceptions:
    - HistoryCorruptError:
        Raised by HistoryGateway.load() when the history file exists but does not
        parse into a ClipboardHistory.
- Gateways:
    - HistoryGateway:
        load() returns an empty store for a missing file and raises for a corrupt one.
        save() creates parent directories and overwrites the file.
        ensure_images_dir() returns the image payload directory, creating it.
    - ConfigGateway:
        load() returns AppConfig defaults for a missing, unreadable or invalid file and
        never raises. save() creates parent directories and overwrites the file.
Design Notes:
- Gateways hold no open handle and no cached state; each call is a full read or a
    full write so several processes can share the files.
- Concurrent writers are handled by cliphoard.retry, not here. A crash during a write
    can leave a truncated file; the next load reports it as corrupt.
"""
# endregion
# region Imports
from typing import Optional

from cliphoard.config import StorageSettings, get_settings
from cliphoard.imports import Path, ValidationError
from cliphoard.logger import logger
from cliphoard.models import AppConfig, ClipboardHistory

# endregion
# region Exceptions


class HistoryCorruptError(ValueError):
    """The history file exists but its content is not a valid history document."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"History file {path} could not be parsed: {reason}")
        self.path = path


# endregion
# region Gateways


class HistoryGateway:
    """
    Reads and writes the clipboard history file.

    Attributes:
        path (Path): Location of ``history.json``.
    """

    def __init__(
        self, path: Optional[Path] = None, images_dir: Optional[Path] = None
    ) -> None:
        settings = get_settings(StorageSettings)
        self.path = Path(path) if path is not None else settings.history_path
        self.images_dir = (
            Path(images_dir) if images_dir is not None else settings.images_dir
        )
        self.logger = logger.getChild("storage")

    def load(self) -> ClipboardHistory:
        """
        Load the history snapshot.

        Returns:
            ClipboardHistory: The stored history, or an empty one if no file exists.

        Raises:
            HistoryCorruptError: If the file content is not a valid history document.
            OSError: If the file exists but cannot be read.
        """
        if not self.path.exists():
            return ClipboardHistory()
        try:
            content = self.path.read_text(encoding="utf-8")
            return ClipboardHistory.model_validate_json(content)
        except (UnicodeDecodeError, ValidationError) as e:
            raise HistoryCorruptError(self.path, str(e)) from e

    def save(self, store: ClipboardHistory) -> None:
        """Write the full history, replacing the previous file content."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(store.model_dump_json(indent=2), encoding="utf-8")

    def ensure_images_dir(self) -> Path:
        self.images_dir.mkdir(parents=True, exist_ok=True)
        return self.images_dir


class ConfigGateway:
    """
    Reads and writes the user config file.

    Attributes:
        path (Path): Location of ``config.json``.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = (
            Path(path) if path is not None else get_settings(StorageSettings).config_path
        )
        self.logger = logger.getChild("config")

    def load(self) -> AppConfig:
        """Load the user config; any failure resolves to the defaults."""
        if not self.path.exists():
            return AppConfig()
        try:
            return AppConfig.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            self.logger.debug("Using default config, %s is unusable: %s", self.path, e)
            return AppConfig()

    def save(self, config: AppConfig) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(config.model_dump_json(indent=2), encoding="utf-8")


# endregion

__all__ = ["ConfigGateway", "HistoryCorruptError", "HistoryGateway"]
