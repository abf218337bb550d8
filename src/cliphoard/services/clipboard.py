# region Docstring
"""
cliphoard.services.clipboard
Access to the system clipboard.
Overview:
- Provides the small interface the watcher and the CLI need from a clipboard, and the
    default implementation on top of pyperclip (text) and Pillow ImageGrab (images).
Contents:
- Protocols:
    - ClipboardBackend:
        get_text() -> Optional[str], get_image() -> Optional[Image.Image],
        set_text(text).
- Backends:
    - SystemClipboard:
        Reads and writes the OS clipboard. Read failures (no clipboard tool, clipboard
        owned by another application, unsupported platform) return None.
Design Notes:
- Read failures are expected while polling and are only logged at debug level.
"""
# endregion
# region Imports
from typing import Optional, Protocol

import pyperclip
from PIL import Image, ImageGrab

from cliphoard.logger import logger

# endregion
# region Clipboard Backends


class ClipboardBackend(Protocol):
    def get_text(self) -> Optional[str]: ...

    def get_image(self) -> Optional[Image.Image]: ...

    def set_text(self, text: str) -> None: ...


class SystemClipboard:
    """Clipboard backend for the current desktop session."""

    def __init__(self) -> None:
        self.logger = logger.getChild("clipboard")

    def get_text(self) -> Optional[str]:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as e:
            self.logger.debug("Clipboard text unavailable: %s", e)
            return None

    def get_image(self) -> Optional[Image.Image]:
        try:
            content = ImageGrab.grabclipboard()
        except (OSError, NotImplementedError) as e:
            self.logger.debug("Clipboard image unavailable: %s", e)
            return None
        # grabclipboard() returns a list of file names for copied files
        if isinstance(content, Image.Image):
            return content
        return None

    def set_text(self, text: str) -> None:
        pyperclip.copy(text)


# endregion

__all__ = ["ClipboardBackend", "SystemClipboard"]
