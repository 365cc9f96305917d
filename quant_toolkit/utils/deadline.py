"""
Cooperative cancellation for long-running loops

Path generation and the optimizer iteration loop call Deadline.check()
between units of work. Nothing is interrupted mid-computation.
"""

import threading
import time
from typing import Optional


class OperationCancelled(RuntimeError):
    """Raised by Deadline.check() after cancel() was called"""


class DeadlineExceeded(TimeoutError):
    """Raised by Deadline.check() once the timeout has elapsed"""


class Deadline:
    """
    Timeout plus a cancellation flag, safe to share across threads

    Args:
        timeout: Seconds from construction until expiry (None = never expires)
    """

    def __init__(self, timeout: Optional[float] = None):
        if timeout is not None and timeout < 0:
            raise ValueError(f"timeout must be non-negative, got {timeout}")

        self.timeout = timeout
        self._expires_at = None if timeout is None else time.monotonic() + timeout
        self._cancelled = threading.Event()

    def cancel(self):
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self._expires_at is not None and time.monotonic() >= self._expires_at

    def remaining(self) -> Optional[float]:
        """Seconds left before expiry, or None without a timeout"""
        if self._expires_at is None:
            return None
        return max(0.0, self._expires_at - time.monotonic())

    def check(self):
        if self.cancelled:
            raise OperationCancelled("Operation cancelled")
        if self.expired:
            raise DeadlineExceeded(f"Deadline of {self.timeout}s exceeded")


def check_deadline(deadline: Optional[Deadline]):
    """No-op when no deadline was supplied"""
    if deadline is not None:
        deadline.check()
