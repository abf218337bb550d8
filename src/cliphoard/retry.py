# region Docstring
"""
cliphoard.retry
Bounded exponential backoff around history load/save.
Overview:
- Several processes read and rewrite the same history file without locking. A read
    can hit a file that is being rewritten (empty or truncated) and a write can hit a
    file held open by another process. Both are retried after a growing delay.
Contents:
- Models:
    - RetryPolicy:
        Attempt ceiling and base delay. The delay after failed attempt n is
        base_delay * 2 ** (n - 1): 50, 100, 200, 400 ms with the defaults.
- Functions:
    - retry_call(func, policy, sleep) -> T:
        Runs func until it succeeds or the attempts are exhausted, then re-raises the
        last error.
    - load_history_with_retry(gateway, policy, sleep) -> ClipboardHistory:
        Returns an empty history when every attempt failed.
    - save_history_with_retry(gateway, store, policy, sleep):
        Re-raises the last error when every attempt failed.
Design notes:
- Failed attempts are not logged; only the final outcome is, so normal contention
    between the watcher and a viewer does not fill the log.
- Sleeps are plain blocking waits and cannot be cancelled.
"""
# endregion
# region Imports
import time
from typing import Any, Callable, Optional, TypeVar

from cliphoard.config import RetrySettings, get_settings
from cliphoard.constants import DEFAULT_RETRY_ATTEMPTS, DEFAULT_RETRY_BASE_DELAY
from cliphoard.imports import BaseModel, Field
from cliphoard.logger import logger
from cliphoard.models import ClipboardHistory
from cliphoard.storage import HistoryGateway

# endregion
# region Retry Policy
T = TypeVar("T")
retry_logger = logger.getChild("retry")


class RetryPolicy(BaseModel):
    max_attempts: int = Field(
        DEFAULT_RETRY_ATTEMPTS, ge=1, description="Attempts before giving up"
    )
    base_delay: float = Field(
        DEFAULT_RETRY_BASE_DELAY,
        ge=0,
        description="Seconds slept after the first failure, doubled every retry",
    )

    @classmethod
    def from_settings(cls, settings: Optional[RetrySettings] = None) -> "RetryPolicy":
        settings = settings or get_settings(RetrySettings)
        return cls(max_attempts=settings.max_attempts, base_delay=settings.base_delay)

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait after the given failed attempt (1-based)."""
        return self.base_delay * 2 ** (attempt - 1)


# endregion
# region Retry Helpers


def retry_call(
    func: Callable[[], T],
    policy: Optional[RetryPolicy] = None,
    sleep: Optional[Callable[[float], Any]] = None,
) -> T:
    """
    Call func, retrying with exponential backoff on any exception.

    Arguments:
        func (Callable[[], T]): The operation to run.
        policy (Optional[RetryPolicy]): Attempts and delays; defaults to RetrySettings.
        sleep (Optional[Callable[[float], Any]]): Wait function, time.sleep by default.

    Returns:
        T: The result of the first successful call.

    Raises:
        Exception: The error of the last attempt once max_attempts calls failed.
    """
    policy = policy or RetryPolicy.from_settings()
    sleep = sleep or time.sleep
    attempt = 0
    while True:
        try:
            return func()
        except Exception:
            attempt += 1
            if attempt >= policy.max_attempts:
                raise
            sleep(policy.delay_for(attempt))


def load_history_with_retry(
    gateway: HistoryGateway,
    policy: Optional[RetryPolicy] = None,
    sleep: Optional[Callable[[float], Any]] = None,
) -> ClipboardHistory:
    """Load the history, falling back to an empty one once the retries are exhausted."""
    policy = policy or RetryPolicy.from_settings()
    try:
        return retry_call(gateway.load, policy=policy, sleep=sleep)
    except Exception as e:
        retry_logger.warning(
            "Failed to load history from %s after %d attempts, using empty history: %s",
            gateway.path,
            policy.max_attempts,
            e,
        )
        return ClipboardHistory()


def save_history_with_retry(
    gateway: HistoryGateway,
    store: ClipboardHistory,
    policy: Optional[RetryPolicy] = None,
    sleep: Optional[Callable[[float], Any]] = None,
) -> None:
    """Save the history; the last error is logged and re-raised once the retries are exhausted."""
    policy = policy or RetryPolicy.from_settings()
    try:
        retry_call(lambda: gateway.save(store), policy=policy, sleep=sleep)
    except Exception as e:
        retry_logger.error(
            "Failed to save history to %s after %d attempts: %s",
            gateway.path,
            policy.max_attempts,
            e,
        )
        raise


# endregion

__all__ = [
    "RetryPolicy",
    "load_history_with_retry",
    "retry_call",
    "save_history_with_retry",
]
