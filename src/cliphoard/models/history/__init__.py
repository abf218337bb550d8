"""
cliphoard.models.history
Package initialization for clipboard history domain models.
Overview:
- Provides the Pydantic models for a single clipboard capture and for the ordered,
    bounded history store that every cliphoard process loads, mutates and saves.
Contents:
- Domain Models:
    - HistoryItem:
        One text or image capture with pinned flag and capture time.
    - ClipboardHistory:
        Ordered history (newest first) with add/remove/pin/retain/clear operations.
Design Notes:
- All models follow Pydantic v2 conventions consistent with cliphoard.models.app_config.
- Persistence lives in cliphoard.storage; these models never touch the disk.

"""

from .clipboard_history import ClipboardHistory, HistoryItem  # noqa: F401


__models__ = ["ClipboardHistory", "HistoryItem"]
__all__ = [*__models__]
