# region Docstring
"""
cliphoard.services.history_service
Snapshot-and-swap operations shared by the watcher and the viewers.
Overview:
- Every mutation loads the current history file, changes the in-memory copy and
    writes the whole file back, both through the retry wrapper.
- The user config is re-read before each mutation so a capacity change made by
    one process applies to the next capture of every other process.
Contents:
- Services:
    - HistoryService:
        snapshot() / config() read the current state. record_text() and
        record_image() are the watcher captures. remove_at(), set_pinned(),
        toggle_pin(), retain_pinned() and clear() are the viewer mutations.
        save_config() writes the user config.
- Functions:
    - adjust_selection(selected, length) -> Optional[int]:
        Cursor position a viewer keeps after an entry was removed.
Design Notes:
- No state is kept between calls; the history file is the only source of truth and
    the last writer wins.
- A history that cannot be loaded after all retries is replaced by an empty one; a
    save that fails after all retries raises to the caller.
"""
# endregion
# region Imports
from typing import Any, Callable, Optional, TypeVar

from cliphoard.constants import ClipKind
from cliphoard.imports import Path
from cliphoard.logger import logger
from cliphoard.models import AppConfig, ClipboardHistory, HistoryItem
from cliphoard.retry import (
    RetryPolicy,
    load_history_with_retry,
    retry_call,
    save_history_with_retry,
)
from cliphoard.storage import ConfigGateway, HistoryGateway

# endregion
# region History Service
T = TypeVar("T")


class HistoryService:
    """
    Service running one read-modify-write cycle per operation.
    """

    def __init__(
        self,
        gateway: Optional[HistoryGateway] = None,
        config_gateway: Optional[ConfigGateway] = None,
        policy: Optional[RetryPolicy] = None,
        sleep: Optional[Callable[[float], Any]] = None,
    ):
        """
        Initializes the HistoryService.

        Args:
            gateway (Optional[HistoryGateway]): History file gateway.
            config_gateway (Optional[ConfigGateway]): User config gateway.
            policy (Optional[RetryPolicy]): Backoff policy; defaults to RetrySettings.
            sleep (Optional[Callable]): Wait function used between retries.
        """
        self.gateway = gateway or HistoryGateway()
        self.config_gateway = config_gateway or ConfigGateway()
        self.policy = policy or RetryPolicy.from_settings()
        self.sleep = sleep
        self.logger = logger.getChild("HistoryService")

    @property
    def images_dir(self) -> Path:
        return self.gateway.ensure_images_dir()

    def snapshot(self) -> ClipboardHistory:
        return load_history_with_retry(self.gateway, policy=self.policy, sleep=self.sleep)

    def config(self) -> AppConfig:
        return self.config_gateway.load()

    def save_config(self, config: AppConfig) -> None:
        retry_call(
            lambda: self.config_gateway.save(config), policy=self.policy, sleep=self.sleep
        )

    def mutate(self, change: Callable[[ClipboardHistory], T]) -> T:
        """
        Load the history, apply change to it and save it back.

        Args:
            change (Callable[[ClipboardHistory], T]): Mutation applied to the snapshot.

        Returns:
            T: Whatever change returned.

        Raises:
            Exception: The save error once every retry failed. Errors raised by change
                itself (e.g. IndexError) propagate before anything is written.
        """
        store = self.snapshot()
        result = change(store)
        save_history_with_retry(self.gateway, store, policy=self.policy, sleep=self.sleep)
        return result

    def record_text(self, text: str) -> HistoryItem:
        max_history = self.config().max_history
        item = self.mutate(lambda s: s.add(text, ClipKind.TEXT, None, max_history))
        self.logger.debug("Recorded text entry (%d chars)", len(text))
        return item

    def record_image(self, path: Path, digest: str) -> HistoryItem:
        max_history = self.config().max_history
        item = self.mutate(
            lambda s: s.add(str(path), ClipKind.IMAGE, digest, max_history)
        )
        self.logger.debug("Recorded image entry %s", digest)
        return item

    def remove_at(self, index: int) -> HistoryItem:
        return self.mutate(lambda s: s.remove_at(index))

    def set_pinned(self, index: int, pinned: bool) -> HistoryItem:
        return self.mutate(lambda s: s.set_pinned(index, pinned))

    def toggle_pin(self, index: int) -> HistoryItem:
        return self.mutate(lambda s: s.toggle_pin(index))

    def retain_pinned(self) -> int:
        return self.mutate(lambda s: s.retain_pinned())

    def clear(self) -> None:
        self.mutate(lambda s: s.clear())


# endregion
# region Selection Helpers


def adjust_selection(selected: Optional[int], length: int) -> Optional[int]:
    """
    Keep a viewer cursor valid after the list shrank.

    Args:
        selected (Optional[int]): The cursor before the change.
        length (int): The new number of entries.

    Returns:
        Optional[int]: None for an empty list, otherwise the cursor clamped to the last
            entry (0 when there was no cursor).

    Example:
        >>> adjust_selection(4, 4)
        3
        >>> adjust_selection(1, 0) is None
        True
    """
    if length <= 0:
        return None
    if selected is None:
        return 0
    return min(max(selected, 0), length - 1)


# endregion

__all__ = ["HistoryService", "adjust_selection"]
