"""
cliphoard.models
Domain models shared by every cliphoard process.
"""

from .app_config import AppConfig  # noqa: F401
from .history import ClipboardHistory, HistoryItem  # noqa: F401


__all__ = ["AppConfig", "ClipboardHistory", "HistoryItem"]
