"""
cliphoard.services
Processes built on top of the history store: the clipboard watcher and the
snapshot-and-swap operations used by viewers.
"""

from .clipboard import ClipboardBackend, SystemClipboard  # noqa: F401
from .history_service import HistoryService, adjust_selection  # noqa: F401
from .watcher import ClipboardWatcher  # noqa: F401


__all__ = [
    "ClipboardBackend",
    "ClipboardWatcher",
    "HistoryService",
    "SystemClipboard",
    "adjust_selection",
]
