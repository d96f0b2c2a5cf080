"""Per-call deadline and cancellation token threaded into every request."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field

from .errors import StravaCancelledError

__all__ = ["RequestContext", "background"]


@dataclass
class RequestContext:
    """Deadline, cancellation flag and optional credential for one or more calls.

    ``timeout`` is relative (seconds from construction) and is turned into an
    absolute ``deadline`` on the monotonic clock; a caller that already holds
    such a deadline (e.g. one shared by several calls) passes ``deadline``
    instead. Giving both is an error. ``access_token`` overrides
    the client-wide token for calls made with this context.

    ``requests`` cannot interrupt a blocking read from another thread, so the
    remaining time until the deadline is passed as the request timeout and
    cancellation is checked before dispatch and again once the response
    arrives.
    """

    timeout: float | None = None
    deadline: float | None = None
    access_token: str | None = None
    _cancelled: threading.Event = field(
        default_factory=threading.Event, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.timeout is not None and self.deadline is not None:
            raise ValueError("pass either timeout or deadline, not both")
        if self.timeout is not None:
            if self.timeout <= 0:
                raise ValueError("timeout must be > 0")
            self.deadline = time.monotonic() + self.timeout

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or ``None`` when unbounded."""

        if self.deadline is None:
            return None
        return self.deadline - time.monotonic()

    def check(self, operation: str) -> None:
        """Raise :class:`StravaCancelledError` if the call must not proceed."""

        if self.cancelled:
            raise StravaCancelledError(f"{operation} cancelled")
        remaining = self.remaining()
        if remaining is not None and remaining <= 0:
            raise StravaCancelledError(f"{operation} deadline exceeded")

    def request_timeout(self, default: float) -> float:
        """Timeout to hand to ``requests``: the tighter of deadline and default."""

        remaining = self.remaining()
        if remaining is None:
            return default
        return max(min(remaining, default), 0.001)


def background() -> RequestContext:
    """Return a context with no deadline, used when a caller passes ``None``."""

    return RequestContext()
