from __future__ import annotations

from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from nightlife.api.deps import get_event_source, resolve_events
from nightlife.api.schemas import FeedItem, FeedRequest
from nightlife.domain.models import GeoPoint
from nightlife.domain.scoring import score_events
from nightlife.domain.timeutils import InvalidTimestampError

router = APIRouter(tags=["feed"])


@router.post("/feed", response_model=List[FeedItem])
def for_you_feed(body: FeedRequest, source=Depends(get_event_source)):
    """
    "For You" feed: events ordered by relevance to the viewer.
    """
    events = resolve_events(body.events, source)
    location = GeoPoint(body.location.lat, body.location.lon) if body.location else None
    try:
        scored = score_events(events, location, body.interests, now=body.now)
    except InvalidTimestampError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    response = []
    for item in scored:
        breakdown = asdict(item.breakdown)
        breakdown.pop("total")
        response.append(
            {
                "id": item.event.id,
                "title": item.event.title,
                "category": item.event.category,
                "score": round(item.score, 2),
                "breakdown": breakdown,
            }
        )
    return response
