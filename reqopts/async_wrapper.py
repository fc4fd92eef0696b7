"""A future wrapper with optional cooperative cancellation."""

from __future__ import annotations

import threading
import time
from concurrent.futures import Future, wait as _wait_futures
from datetime import datetime, timedelta
from enum import Enum, auto
from typing import Generic, Optional, TypeVar, Union

__all__ = ["CancellationResult", "FutureStatus", "AsyncWrapper"]

T = TypeVar("T")


class CancellationResult(Enum):
    """Outcome of a cancellation request."""

    FAILURE = auto()
    SUCCESS = auto()
    INVALID_OPERATION = auto()


class FutureStatus(Enum):
    """Result of a bounded wait."""

    READY = auto()
    TIMEOUT = auto()


class AsyncWrapper(Generic[T]):
    """Wraps a future; with a ``cancelled`` event it also supports cancellation.

    The result can be taken once: after ``get`` the wrapper is no longer valid.
    A cancellable wrapper marks its request cancelled when closed.
    """

    def __init__(self, future: Optional[Future] = None, cancelled: Optional[threading.Event] = None) -> None:
        self._future = future
        self._cancelled = cancelled

    @property
    def cancellable(self) -> bool:
        return self._cancelled is not None

    def _require_ready(self, operation: str) -> Future:
        if self.is_cancelled():
            raise RuntimeError(f"Calling AsyncWrapper.{operation} on a cancelled request!")
        if self._future is None:
            raise RuntimeError(
                f"Calling AsyncWrapper.{operation} when the associated future instance is invalid!"
            )
        return self._future

    def get(self) -> T:
        """Wait for and return the result, re-raising any exception of the task."""
        future = self._require_ready("get")
        self._future = None
        return future.result()

    def valid(self) -> bool:
        """True while a result can still be taken."""
        return not self.is_cancelled() and self._future is not None

    def wait(self) -> None:
        """Block until the result is available."""
        _wait_futures([self._require_ready("wait")])

    def wait_for(self, timeout: Union[float, timedelta]) -> FutureStatus:
        """Wait up to *timeout* (seconds or timedelta)."""
        future = self._require_ready("wait_for")
        seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
        done, _ = _wait_futures([future], timeout=max(0.0, seconds))
        return FutureStatus.READY if done else FutureStatus.TIMEOUT

    def wait_until(self, deadline: Union[float, datetime]) -> FutureStatus:
        """Wait until *deadline*: a datetime or a ``time.monotonic()`` value."""
        future = self._require_ready("wait_until")
        if isinstance(deadline, datetime):
            remaining = (deadline - datetime.now(deadline.tzinfo)).total_seconds()
        else:
            remaining = deadline - time.monotonic()
        done, _ = _wait_futures([future], timeout=max(0.0, remaining))
        return FutureStatus.READY if done else FutureStatus.TIMEOUT

    def share(self) -> Optional[Future]:
        """Return the underlying future."""
        return self._future

    def cancel(self) -> CancellationResult:
        """Mark the request cancelled, if it can be and has not been already."""
        if self._cancelled is None:
            return CancellationResult.INVALID_OPERATION
        if self._future is None or self._cancelled.is_set():
            return CancellationResult.INVALID_OPERATION
        self._cancelled.set()
        return CancellationResult.SUCCESS

    def is_cancelled(self) -> bool:
        return self._cancelled is not None and self._cancelled.is_set()

    def close(self) -> None:
        """Release the wrapper; a cancellable request is cancelled."""
        if self._cancelled is not None:
            self._cancelled.set()

    def __enter__(self) -> "AsyncWrapper[T]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        cancelled = getattr(self, "_cancelled", None)
        if cancelled is not None:
            cancelled.set()