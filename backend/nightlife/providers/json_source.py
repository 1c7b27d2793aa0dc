from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from nightlife.domain.models import EventRecord


class JsonEventSource:
    """Reads a JSON array of event objects exported from the data layer.

    Timestamps are passed through untouched; scoring and filtering decide what
    a malformed one means for that record.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def fetch_events(self) -> list[EventRecord]:
        payload = json.loads(self.path.read_text())
        if not isinstance(payload, list):
            raise ValueError(f"{self.path}: expected a JSON array of events")
        return records_from_payload(payload)


def records_from_payload(payload: List[Dict[str, Any]]) -> List[EventRecord]:
    events = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ValueError(f"event at index {index} is not an object")
        if item.get("id") in (None, ""):
            raise ValueError(f"event at index {index} has no id")
        events.append(record_from_dict(item))
    return events


def record_from_dict(item: Dict[str, Any]) -> EventRecord:
    attendee_ids = frozenset(str(uid) for uid in item.get("attendee_ids") or ())
    count = item.get("attendee_count")
    return EventRecord(
        id=str(item["id"]),
        title=item.get("title") or "",
        start_dt=item.get("start_dt"),
        created_at=item.get("created_at"),
        lat=_optional_float(item.get("lat")),
        lon=_optional_float(item.get("lon")),
        category=item.get("category") or None,
        location_name=item.get("location_name"),
        # guestlist size defaults to the attendee ids we were given
        attendee_count=int(count) if count is not None else len(attendee_ids),
        has_guestlist=bool(item.get("has_guestlist", False)),
        attendee_ids=attendee_ids,
    )


def _optional_float(value):
    if value is None or value == "":
        return None
    return float(value)
