# region Docstring
"""
cliphoard.models.history.clipboard_history
Domain models and the insert/evict algorithm for the clipboard history.
Overview:
- Provides a Pydantic model for a single clipboard capture (text or image).
- Provides the ordered, bounded history store (newest first) with the operations
    every cliphoard process uses to mutate it.
Contents:
- Pydantic models:
    - HistoryItem:
        One clipboard capture. content holds the literal text or the path of the
        image payload, kind tells them apart, hash is the content address of an
        image, pinned exempts the entry from capacity eviction, timestamp is the
        capture time (display only).
    - ClipboardHistory:
        The ordered history. add() deduplicates, inserts at the front and runs the
        capacity pass. remove_at(), set_pinned(), toggle_pin(), retain_pinned() and
        clear() are the viewer mutations.
Design notes:
- Order is insertion order; timestamps are never used to sort.
- The capacity pass is a single forward walk: pinned entries are always kept,
    unpinned entries are kept until the unpinned budget is spent. Survivors keep
    their relative order.
- Pinned entries count toward max_history; only the remainder is left for unpinned
    entries.
- Dedup in add() removes every match, pinned or not.
- The model is a value: processes load it, mutate it and save it back through
    cliphoard.storage and cliphoard.retry, then drop it.
"""
# endregion
# region Imports
from typing import Optional

from cliphoard.constants import DEFAULT_MAX_HISTORY, ClipKind
from cliphoard.imports import BaseModel, ConfigDict, Field, datetime, model_validator
from cliphoard.utils import get_time

# endregion
# region Pydantic Models


class HistoryItem(BaseModel):
    content: str = Field(
        ..., description="Clipboard text, or the path of the saved image payload"
    )
    timestamp: datetime = Field(
        default_factory=get_time, description="Capture time, used for display only"
    )
    pinned: bool = Field(
        False, description="Pinned entries are never evicted by capacity"
    )
    kind: ClipKind = Field(ClipKind.TEXT, description="The type of content (text, image)")
    hash: Optional[str] = Field(
        None, description="Content address of an image payload (images only)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "content": "Sample clipboard text",
                    "timestamp": "2024-01-01T12:00:00+00:00",
                    "pinned": False,
                    "kind": "text",
                    "hash": None,
                },
                {
                    "content": "/home/user/.local/share/cliphoard/images/ab12.png",
                    "timestamp": "2024-01-01T12:00:05+00:00",
                    "pinned": True,
                    "kind": "image",
                    "hash": "ab12",
                },
            ]
        },
    )

    @model_validator(mode="after")
    def _text_has_no_hash(self) -> "HistoryItem":
        if self.kind == ClipKind.TEXT and self.hash is not None:
            raise ValueError("Text history items cannot carry a content hash")
        return self

    @property
    def is_image(self) -> bool:
        return self.kind == ClipKind.IMAGE


class ClipboardHistory(BaseModel):
    """
    Ordered clipboard history, newest first.

    Attributes:
        history (list[HistoryItem]): The entries, index 0 is the most recent capture.
    """

    history: list[HistoryItem] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.history)

    def __getitem__(self, index: int) -> HistoryItem:
        self._check_index(index)
        return self.history[index]

    @property
    def pinned_count(self) -> int:
        return sum(1 for item in self.history if item.pinned)

    @property
    def unpinned_count(self) -> int:
        return len(self.history) - self.pinned_count

    def add(
        self,
        content: str,
        kind: ClipKind = ClipKind.TEXT,
        content_hash: Optional[str] = None,
        max_history: int = DEFAULT_MAX_HISTORY,
    ) -> HistoryItem:
        """
        Record a new capture at the front of the history.

        Arguments:
            content (str): Clipboard text, or the image payload path.
            kind (ClipKind): Kind of the capture.
            content_hash (Optional[str]): Content address, required for images.
            max_history (int): Capacity applied to unpinned entries.

        Returns:
            HistoryItem: The inserted entry.

        Raises:
            ValueError: If an image is added without a hash, or text with one.

        Example:
            >>> store = ClipboardHistory()
            >>> _ = store.add("a", ClipKind.TEXT, None, 2)
            >>> _ = store.add("b", ClipKind.TEXT, None, 2)
            >>> _ = store.add("a", ClipKind.TEXT, None, 2)
            >>> [item.content for item in store.history]
            ['a', 'b']
        """
        kind = ClipKind(kind)
        if kind == ClipKind.IMAGE and not content_hash:
            raise ValueError("Image history items require a content hash")

        item = HistoryItem(content=content, kind=kind, hash=content_hash)

        if kind == ClipKind.TEXT:
            self.history = [i for i in self.history if i.content != content]
        else:
            self.history = [i for i in self.history if i.hash != content_hash]

        self.history.insert(0, item)

        if len(self.history) > max_history:
            self._evict(max_history)
        return item

    def remove_at(self, index: int) -> HistoryItem:
        """Remove and return the entry at index."""
        self._check_index(index)
        return self.history.pop(index)

    def set_pinned(self, index: int, pinned: bool) -> HistoryItem:
        """Set the pinned flag of the entry at index in place."""
        self._check_index(index)
        item = self.history[index]
        item.pinned = pinned
        return item

    def toggle_pin(self, index: int) -> HistoryItem:
        self._check_index(index)
        return self.set_pinned(index, not self.history[index].pinned)

    def retain_pinned(self) -> int:
        """Drop every unpinned entry. Returns the number of entries removed."""
        before = len(self.history)
        self._evict(self.pinned_count)
        return before - len(self.history)

    def clear(self) -> None:
        self.history = []

    def _evict(self, max_history: int) -> None:
        # Single forward pass, keeps pinned entries and the first unpinned ones.
        budget = max(0, max_history - self.pinned_count)
        kept: list[HistoryItem] = []
        for item in self.history:
            if item.pinned:
                kept.append(item)
            elif budget > 0:
                kept.append(item)
                budget -= 1
        self.history = kept

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.history):
            raise IndexError(
                f"History index {index} out of range (0..{len(self.history) - 1})"
            )


# endregion

__all__ = ["HistoryItem", "ClipboardHistory"]
