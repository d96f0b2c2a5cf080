"""Shared HTTP response helpers: status classification and error extraction."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from .errors import (
    StravaAPIError,
    StravaPaymentRequiredError,
    StravaPermissionError,
    StravaResourceNotFoundError,
)

LOGGER = logging.getLogger(__name__)

__all__ = [
    "error_for_response",
    "extract_error",
]


def error_for_response(response: requests.Response, context: str) -> StravaAPIError:
    """Build the :class:`StravaAPIError` describing a non-success response."""

    status = response.status_code
    body = _response_text(response)
    detail = extract_error(response)

    def with_detail(message: str) -> str:
        return f"{message} | {detail}" if detail else message

    if status == 402:
        message = with_detail(f"{context} requires a Strava subscription")
        LOGGER.warning(message)
        return StravaPaymentRequiredError(
            message, status_code=status, body=body, detail=detail
        )

    if status in (401, 403):
        message = with_detail(f"{context} forbidden (status {status})")
        LOGGER.warning(message)
        return StravaPermissionError(
            message, status_code=status, body=body, detail=detail
        )

    if status == 404:
        message = with_detail(f"{context} not found")
        LOGGER.info(message)
        return StravaResourceNotFoundError(
            message, status_code=status, body=body, detail=detail
        )

    message = with_detail(f"{context} request failed (status {status})")
    LOGGER.warning(message)
    return StravaAPIError(message, status_code=status, body=body, detail=detail)


def extract_error(resp: Optional[requests.Response]) -> Optional[str]:
    """Return compact string with Strava error info (message + codes) if present."""

    if resp is None:
        return None
    data = _safe_json(resp)
    if data is None:
        return _extract_error_text(resp)
    if not isinstance(data, dict):
        return None
    parts = _collect_error_parts(data)
    return " | ".join(parts) if parts else None


def _response_text(resp: requests.Response) -> str:
    text = getattr(resp, "text", "")
    return text if isinstance(text, str) else ""


def _safe_json(resp: requests.Response) -> Optional[Any]:
    """Safely parse JSON; return None if parsing fails."""

    try:
        return resp.json()
    except ValueError as exc:
        LOGGER.debug(
            "Failed to decode error JSON from %s: %s", getattr(resp, "url", "?"), exc
        )
        return None


def _extract_error_text(resp: requests.Response) -> Optional[str]:
    """Best-effort plain-text extraction when JSON parsing fails."""

    trimmed = _response_text(resp).strip()
    if not trimmed:
        return None
    return (trimmed[:297] + "...") if len(trimmed) > 300 else trimmed


def _collect_error_parts(data: Dict[str, Any]) -> List[str]:
    """Build error snippets from the standard Strava error response."""

    parts: List[str] = []
    message = data.get("message")
    if message:
        parts.append(str(message))
    errors = data.get("errors")
    if isinstance(errors, list):
        for err in errors:
            if not isinstance(err, dict):
                continue
            resource = err.get("resource")
            field = err.get("field")
            code = err.get("code")
            spec = "/".join(filter(None, (resource, field)))
            if code and spec:
                parts.append(f"{spec}:{code}")
            elif code:
                parts.append(str(code))
    return parts
