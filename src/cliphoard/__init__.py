"""
cliphoard
Clipboard history manager with a bounded, order-preserving history shared by
independent processes through a single JSON file.

It leverages Pydantic for the history and config models, pydantic-settings for
process settings, and a retry wrapper with exponential backoff for lock-free
multi-process access.
"""

from . import constants  # noqa: F401
from .models import AppConfig, ClipboardHistory, HistoryItem  # noqa: F401
from .storage import ConfigGateway, HistoryCorruptError, HistoryGateway  # noqa: F401
from .retry import (  # noqa: F401
    RetryPolicy,
    load_history_with_retry,
    save_history_with_retry,
)

__version__ = "0.1.0"
