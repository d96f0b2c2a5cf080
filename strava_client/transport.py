"""Shared HTTP transport: one authenticated round trip per call, JSON decoded.

Endpoint groups never talk to ``requests`` directly; they hand a path,
parameters and a decode target to :class:`Transport`, which owns the session,
credential, timeout and error mapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests

from .config import REQUEST_TIMEOUT, STRAVA_ACCESS_TOKEN, STRAVA_BASE_URL
from .context import RequestContext, background
from .errors import (
    StravaCancelledError,
    StravaConfigError,
    StravaDecodeError,
    StravaTransportError,
)
from .response_handling import error_for_response
from .serialization import decode
from .session import create_default_session

LOGGER = logging.getLogger(__name__)

__all__ = ["Transport", "TransportConfig", "mask_token"]


def mask_token(value: str | None, visible: int = 4) -> str:
    if not value:
        return ""
    tail = value[-visible:]
    return f"****{tail}" if len(value) > visible else "****" + tail


@dataclass(frozen=True)
class TransportConfig:
    """Credential and endpoint settings shared by every endpoint group."""

    access_token: str = ""
    base_url: str = STRAVA_BASE_URL
    timeout: float = REQUEST_TIMEOUT

    @classmethod
    def from_env(cls) -> "TransportConfig":
        return cls(
            access_token=STRAVA_ACCESS_TOKEN,
            base_url=STRAVA_BASE_URL,
            timeout=REQUEST_TIMEOUT,
        )

    def __repr__(self) -> str:
        return (
            f"TransportConfig(access_token={mask_token(self.access_token)!r}, "
            f"base_url={self.base_url!r}, timeout={self.timeout!r})"
        )


class Transport:
    """Issues GET / POST-form / PUT-JSON requests against the Strava API."""

    def __init__(
        self,
        config: TransportConfig,
        *,
        session: requests.Session | None = None,
    ) -> None:
        if config.timeout <= 0:
            raise StravaConfigError("timeout must be > 0")
        self._config = config
        self._session = session or create_default_session()

    @property
    def config(self) -> TransportConfig:
        return self._config

    def get(
        self,
        ctx: Optional[RequestContext],
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        target: Any = None,
    ) -> Any:
        return self._request(ctx, "GET", path, target, params=params)

    def post_form(
        self,
        ctx: Optional[RequestContext],
        path: str,
        form: Mapping[str, Any],
        target: Any = None,
    ) -> Any:
        return self._request(ctx, "POST", path, target, data=form)

    def put_json(
        self,
        ctx: Optional[RequestContext],
        path: str,
        payload: Any,
        target: Any = None,
    ) -> Any:
        return self._request(
            ctx,
            "PUT",
            path,
            target,
            json_body=payload,
            headers={"Content-Type": "application/json"},
        )

    def url_for(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _auth_headers(self, ctx: RequestContext) -> Dict[str, str]:
        token = ctx.access_token or self._config.access_token
        if not token:
            raise StravaConfigError(
                "No Strava access token configured (set STRAVA_ACCESS_TOKEN "
                "or pass one in TransportConfig / RequestContext)"
            )
        return {"Authorization": f"Bearer {token}"}

    def _request(
        self,
        ctx: Optional[RequestContext],
        method: str,
        path: str,
        target: Any,
        *,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
        json_body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        ctx = ctx or background()
        context = f"{method} {path}"
        ctx.check(context)
        request_headers = self._auth_headers(ctx)
        if headers:
            request_headers.update(headers)
        LOGGER.debug("%s params=%s", context, dict(params) if params else None)

        try:
            response = self._session.request(
                method,
                self.url_for(path),
                headers=request_headers,
                params=dict(params) if params else None,
                data=dict(data) if data is not None else None,
                json=json_body,
                timeout=ctx.request_timeout(self._config.timeout),
            )
        except requests.RequestException as exc:
            if ctx.cancelled:
                raise StravaCancelledError(f"{context} cancelled") from exc
            remaining = ctx.remaining()
            if remaining is not None and remaining <= 0:
                raise StravaCancelledError(f"{context} deadline exceeded") from exc
            message = f"{context} network error: {exc.__class__.__name__}"
            LOGGER.error(message)
            raise StravaTransportError(message) from exc

        if ctx.cancelled:
            raise StravaCancelledError(f"{context} cancelled")

        if not 200 <= response.status_code < 300:
            raise error_for_response(response, context)

        try:
            payload = response.json()
        except ValueError as exc:
            message = f"{context} returned non-JSON payload"
            LOGGER.error(message)
            raise StravaDecodeError(message) from exc

        try:
            return decode(target, payload)
        except StravaDecodeError as exc:
            message = f"{context} returned unexpected payload: {exc}"
            LOGGER.error(message)
            raise StravaDecodeError(message) from exc
