from __future__ import annotations

from typing import List, Optional

from fastapi import HTTPException, Request

from nightlife.api.schemas import EventIn
from nightlife.domain.models import EventRecord
from nightlife.providers.base import EventSource
from nightlife.providers.json_source import records_from_payload


def get_event_source(request: Request) -> Optional[EventSource]:
    return getattr(request.app.state, "event_source", None)


def resolve_events(payload: Optional[List[EventIn]], source: Optional[EventSource]) -> List[EventRecord]:
    if payload is not None:
        try:
            return records_from_payload([item.model_dump() for item in payload])
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
    if source is None:
        raise HTTPException(status_code=500, detail="Event source not configured")
    return source.fetch_events()
