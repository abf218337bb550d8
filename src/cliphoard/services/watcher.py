# region Docstring
"""
cliphoard.services.watcher
Background clipboard watcher.
Overview:
- Polls the clipboard at a fixed interval and records every new text or image in the
    shared history through HistoryService.
- Images are stored once per content address as ``<hash>.png`` in the images
    directory and referenced from the history by path.
Contents:
- Services:
    - ClipboardWatcher:
        poll_once() checks the clipboard a single time and returns the kind of the
        recorded entry (or None). run() sleeps then polls in a loop.
Design Notes:
- Text is checked first; a new text skips the image check for that cycle.
- The last seen text and image hash are remembered in memory only, so restarting the
    watcher re-records the current clipboard (dedup moves it to the front).
- A capture that cannot be recorded (payload directory unusable, history save failing
    after all retries) is logged and the loop continues.
"""
# endregion
# region Imports
import time
from typing import Any, Callable, Optional

from PIL import Image

from cliphoard.config import ClipboardWatcherSettings, get_settings
from cliphoard.constants import ClipKind
from cliphoard.imports import Path
from cliphoard.logger import logger
from cliphoard.services.clipboard import ClipboardBackend, SystemClipboard
from cliphoard.services.history_service import HistoryService
from cliphoard.utils import hash_bytes, image_payload_path

# endregion
# region Clipboard Watcher


class ClipboardWatcher:
    """
    Poll loop recording clipboard changes into the history.

    Attributes:
        last_text (Optional[str]): Last text recorded (or seen while it was current).
        last_image_hash (Optional[str]): Content address of the last image recorded.
    """

    def __init__(
        self,
        service: Optional[HistoryService] = None,
        backend: Optional[ClipboardBackend] = None,
        poll_interval: Optional[float] = None,
        sleep: Optional[Callable[[float], Any]] = None,
    ):
        self.service = service or HistoryService()
        self.backend = backend or SystemClipboard()
        self.poll_interval = (
            poll_interval
            if poll_interval is not None
            else get_settings(ClipboardWatcherSettings).poll_interval
        )
        self.sleep = sleep or time.sleep
        self.last_text: Optional[str] = None
        self.last_image_hash: Optional[str] = None
        self.logger = logger.getChild("watcher")

    def poll_once(self) -> Optional[ClipKind]:
        text = self.backend.get_text()
        if text is not None and text != self.last_text and text.strip():
            self.logger.info("Detected text change")
            self._record(lambda: self.service.record_text(text))
            self.last_text = text
            self.last_image_hash = None
            return ClipKind.TEXT

        image = self.backend.get_image()
        if image is None:
            return None
        digest = hash_bytes(image.tobytes())
        if digest == self.last_image_hash:
            return None

        self.logger.info("Detected image change: %s", digest)
        try:
            path = image_payload_path(self.service.images_dir, digest)
            self._write_payload(image, path)
        except OSError as e:
            self.logger.error("Failed to save image %s: %s", digest, e)
        else:
            self._record(lambda: self.service.record_image(path, digest))
        self.last_image_hash = digest
        self.last_text = None
        return ClipKind.IMAGE

    def run(self, max_cycles: Optional[int] = None) -> int:
        """
        Sleep then poll until interrupted, or for max_cycles polls.

        Returns:
            int: Number of entries recorded.
        """
        self.logger.info("Clipboard watcher started (interval %.2fs)", self.poll_interval)
        cycles = 0
        recorded = 0
        while max_cycles is None or cycles < max_cycles:
            self.sleep(self.poll_interval)
            if self.poll_once() is not None:
                recorded += 1
            cycles += 1
        return recorded

    def _record(self, record: Callable[[], Any]) -> None:
        try:
            record()
        except Exception as e:
            self.logger.error("Failed to record clipboard entry: %s", e)

    def _write_payload(self, image: Image.Image, path: Path) -> None:
        if path.exists():
            return
        image.save(path, format="PNG")


# endregion

__all__ = ["ClipboardWatcher"]
