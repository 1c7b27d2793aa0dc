from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .models import Timestamp


class InvalidTimestampError(ValueError):
    def __init__(self, value, event_id: Optional[str] = None):
        self.value = value
        self.event_id = event_id
        where = f" on event {event_id}" if event_id is not None else ""
        super().__init__(f"Invalid timestamp{where}: {value!r}")


def parse_timestamp(value: Timestamp, event_id: Optional[str] = None) -> datetime:
    """Return ``value`` as an aware datetime; naive values are taken as UTC."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidTimestampError(value, event_id) from exc
    else:
        raise InvalidTimestampError(value, event_id)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def hours_between(later: datetime, earlier: datetime) -> float:
    return (later - earlier).total_seconds() / 3600.0


def resolve_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ValueError(f"Unknown timezone '{name}'") from exc
