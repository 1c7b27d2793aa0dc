from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from nightlife.api.deps import get_event_source, resolve_events
from nightlife.api.schemas import CriteriaIn, FilterOptions, NearbyItem, NearbyRequest
from nightlife.domain.geo import format_distance
from nightlife.domain.models import (
    CATEGORIES,
    DISTANCE_OPTIONS,
    DateRange,
    DateWindow,
    FilterCriteria,
    FriendsContext,
    GeoPoint,
)
from nightlife.domain.nearby import apply_filters
from nightlife.domain.timeutils import parse_timestamp, resolve_zone

router = APIRouter(tags=["nearby"])


@router.post("/nearby", response_model=List[NearbyItem])
def nearby_events(body: NearbyRequest, source=Depends(get_event_source)):
    events = resolve_events(body.events, source)
    location = GeoPoint(body.location.lat, body.location.lon) if body.location else None
    try:
        criteria = _to_criteria(body.criteria)
        tz = resolve_zone(body.timezone) if body.timezone else None
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    friends = None
    if body.followed_ids is not None:
        friends = FriendsContext(followed_ids=frozenset(body.followed_ids))

    results = apply_filters(events, location, criteria, friends=friends, now=body.now, tz=tz)
    return [
        {
            "id": item.event.id,
            "title": item.event.title,
            "category": item.event.category,
            "distance_miles": round(item.distance_miles, 2) if item.distance_miles is not None else None,
            "distance_label": format_distance(item.distance_miles),
        }
        for item in results
    ]


@router.get("/filters/options", response_model=FilterOptions)
def filter_options():
    return {
        "categories": list(CATEGORIES),
        "distance_options": list(DISTANCE_OPTIONS),
        "date_windows": [window.value for window in DateWindow],
    }


def _to_criteria(payload: CriteriaIn) -> FilterCriteria:
    custom_range = None
    if payload.custom_start is not None and payload.custom_end is not None:
        custom_range = DateRange(parse_timestamp(payload.custom_start), parse_timestamp(payload.custom_end))
    return FilterCriteria(
        search_text=payload.search_text,
        date_window=payload.date_window,
        custom_range=custom_range,
        categories=frozenset(payload.categories),
        max_distance_miles=payload.max_distance_miles,
        require_guestlist=payload.require_guestlist,
        require_friends_attending=payload.require_friends_attending,
    )
