"""Decode Strava JSON payloads into pydantic records.

Records are validated with pydantic: nested records, lists, timestamps and
enums are converted, unknown keys are ignored and missing optional keys fall
back to ``None``. Any mismatch raises :class:`StravaDecodeError` carrying
pydantic's field-level error summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from functools import lru_cache
from typing import Any, Generic, List, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import StravaDecodeError

T = TypeVar("T")

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

__all__ = ["ListOf", "decode", "format_timestamp"]


@dataclass(frozen=True)
class ListOf(Generic[T]):
    """Decode target for endpoints returning a JSON array of ``item`` records."""

    item: Type[T]


def decode(target: Any, payload: Any) -> Any:
    """Decode ``payload`` into ``target`` (a record class, ``ListOf`` or ``None``)."""

    if target is None:
        return payload
    if isinstance(target, ListOf):
        adapter = _list_adapter(target.item)
        name = f"list[{target.item.__name__}]"
    else:
        adapter = _adapter(target)
        name = target.__name__
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise StravaDecodeError(f"{name}: {_summarize(exc)}") from exc


def format_timestamp(value: datetime) -> str:
    """Render with second precision, keeping the value's own UTC offset.

    Naive and UTC values are written with a ``Z`` suffix; any other offset is
    kept as ``+HH:MM`` so a local wall-clock time is not shifted.
    """

    offset = value.utcoffset()
    if offset is None or offset == timedelta(0):
        return value.replace(tzinfo=None).strftime(TIMESTAMP_FORMAT)
    return value.isoformat(timespec="seconds")


@lru_cache(maxsize=None)
def _adapter(cls: type) -> TypeAdapter:
    return TypeAdapter(cls)


@lru_cache(maxsize=None)
def _list_adapter(cls: type) -> TypeAdapter:
    return TypeAdapter(List[cls])


def _summarize(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors()[:5]:
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg')}")
    if exc.error_count() > 5:
        parts.append(f"... {exc.error_count() - 5} more")
    return "; ".join(parts)
