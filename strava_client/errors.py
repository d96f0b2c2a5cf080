"""Central error types used across the client."""

from __future__ import annotations


class StravaError(RuntimeError):
    """Base error for everything raised by this package."""


class StravaConfigError(StravaError):
    """Raised when the client is missing a credential or is misconfigured."""


class StravaTransportError(StravaError):
    """Raised when the request never produced an HTTP response (network, timeout)."""


class StravaCancelledError(StravaTransportError):
    """Raised when the call's context was cancelled or its deadline passed."""


class StravaAPIError(StravaError):
    """Raised for any non-2xx response; carries the status code and raw body."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str = "",
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.detail = detail


class StravaPermissionError(StravaAPIError):
    """Raised when the API reports insufficient scopes or authentication issues."""


class StravaPaymentRequiredError(StravaAPIError):
    """Raised when Strava returns HTTP 402 for subscription-only resources."""


class StravaResourceNotFoundError(StravaAPIError):
    """Raised when an activity, club, athlete or segment does not exist."""


class StravaDecodeError(StravaError):
    """Raised when a 2xx body is not JSON or does not match the expected record."""


__all__ = [
    "StravaError",
    "StravaConfigError",
    "StravaTransportError",
    "StravaCancelledError",
    "StravaAPIError",
    "StravaPermissionError",
    "StravaPaymentRequiredError",
    "StravaResourceNotFoundError",
    "StravaDecodeError",
]
