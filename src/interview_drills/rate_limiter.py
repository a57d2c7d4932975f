"""Sliding-window rate limiting for plain callbacks.

Each limiter keeps its own admission history; nothing is shared between
instances. Admissions and drops are logged at debug level.
"""

from __future__ import annotations

import threading
import time
from collections import deque
from typing import Any, Callable

from interview_drills.errors import InvalidConfigurationError
from interview_drills.log import get_logger

logger = get_logger("rate_limiter")


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class RateLimiter:
    """Sliding-window wrapper around a callback.

    At most ``max_calls`` invocations are let through in any trailing window of
    ``window_ms`` milliseconds. Calls over the limit are dropped: the callback
    is not run and nothing is queued. An admission made exactly ``window_ms``
    ago has left the window.
    """

    def __init__(
        self,
        callback: Callable[..., Any],
        max_calls: int,
        window_ms: float,
        clock: Callable[[], float] | None = None,
    ) -> None:
        # NaN fails these comparisons too
        if not max_calls >= 0:
            raise InvalidConfigurationError(
                f"max_calls must be >= 0, got {max_calls}"
            )
        if not window_ms > 0:
            raise InvalidConfigurationError(
                f"window_ms must be > 0, got {window_ms}"
            )
        self._callback = callback
        self._max_calls = max_calls
        self._window_ms = window_ms
        self._clock = clock or _monotonic_ms
        self._calls: deque[float] = deque()
        self._lock = threading.Lock()

    def _admit(self) -> bool:
        with self._lock:
            now = self._clock()
            cutoff = now - self._window_ms
            while self._calls and self._calls[0] <= cutoff:
                self._calls.popleft()
            if len(self._calls) >= self._max_calls:
                logger.debug(
                    "rate_limited_call_dropped",
                    in_window=len(self._calls),
                    max_calls=self._max_calls,
                    window_ms=self._window_ms,
                )
                return False
            self._calls.append(now)
            logger.debug("rate_limited_call_admitted", in_window=len(self._calls))
            return True

    def __call__(self, *args: Any, **kwargs: Any) -> bool:
        """Run the callback if the window has room.

        Returns True when the callback ran, False when the call was dropped.
        """
        if not self._admit():
            return False
        self._callback(*args, **kwargs)
        return True


def create_rate_limiter(
    callback: Callable[..., Any],
    max_calls: int,
    window_ms: float,
    *,
    clock: Callable[[], float] | None = None,
) -> RateLimiter:
    return RateLimiter(callback, max_calls, window_ms, clock=clock)
