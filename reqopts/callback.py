"""Progress callback that stops a transfer once it has been cancelled."""

from __future__ import annotations

import threading
from typing import Callable, Optional

__all__ = ["CancellationCallback", "ProgressCallback"]

ProgressCallback = Callable[[int, int, int, int], bool]


class CancellationCallback:
    """Progress callback that returns False once ``cancellation_state`` is set.

    While not cancelled, a user progress callback, if any, decides whether to go on.
    """

    def __init__(
        self,
        cancellation_state: threading.Event,
        user_cb: Optional[ProgressCallback] = None,
    ) -> None:
        self.cancellation_state = cancellation_state
        self.user_cb = user_cb

    def set_progress_callback(self, callback: ProgressCallback) -> None:
        """Chain a user progress callback after the cancellation check."""
        self.user_cb = callback

    def __call__(self, dltotal: int, dlnow: int, ultotal: int, ulnow: int) -> bool:
        go_on = not self.cancellation_state.is_set()
        if self.user_cb is None:
            return go_on
        return go_on and bool(self.user_cb(dltotal, dlnow, ultotal, ulnow))