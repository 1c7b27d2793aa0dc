from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from .geo import distance_miles
from .models import EventRecord, GeoPoint, ScoreBreakdown, ScoredEvent
from .timeutils import hours_between, parse_timestamp, utc_now

WEIGHTS = {
    "proximity": 0.30,
    "popularity": 0.25,
    "interest": 0.25,
    "recency": 0.15,
    "timing": 0.05,
}

NEUTRAL_SCORE = 50.0

# (upper bound in miles, score)
PROXIMITY_STEPS = ((1, 100.0), (5, 80.0), (10, 60.0), (25, 40.0), (50, 20.0))
PROXIMITY_FLOOR = 10.0

# (minimum attendees, score)
POPULARITY_STEPS = ((50, 100.0), (25, 80.0), (10, 60.0), (5, 40.0), (1, 20.0))
POPULARITY_FLOOR = 10.0

# (max hours since creation, score)
RECENCY_STEPS = ((24, 100.0), (72, 80.0), (168, 60.0), (336, 40.0))
RECENCY_FLOOR = 20.0

# (max hours until start, score)
TIMING_STEPS = ((24, 100.0), (48, 80.0), (168, 60.0), (720, 40.0))
TIMING_FLOOR = 20.0


def proximity_for_distance(miles: Optional[float]) -> float:
    if miles is None:
        return NEUTRAL_SCORE
    for bound, score in PROXIMITY_STEPS:
        if miles <= bound:
            return score
    return PROXIMITY_FLOOR


def proximity_score(event: EventRecord, location: Optional[GeoPoint]) -> float:
    return proximity_for_distance(distance_miles(location, event))


def popularity_score(attendee_count: int) -> float:
    for minimum, score in POPULARITY_STEPS:
        if attendee_count >= minimum:
            return score
    return POPULARITY_FLOOR


def interest_score(category: Optional[str], interests: Optional[Iterable[str]]) -> float:
    normalized = [i.lower() for i in interests or ()]
    if not normalized:
        return NEUTRAL_SCORE
    if not category:
        return 20.0
    cat = category.lower()
    if cat in normalized:
        return 100.0
    if any(cat in interest or interest in cat for interest in normalized):
        return 70.0
    return 20.0


def recency_score(hours_since_created: float) -> float:
    for limit, score in RECENCY_STEPS:
        if hours_since_created <= limit:
            return score
    return RECENCY_FLOOR


def timing_score(hours_until_start: float) -> float:
    if hours_until_start < 0:
        return 0.0
    for limit, score in TIMING_STEPS:
        if hours_until_start <= limit:
            return score
    return TIMING_FLOOR


def score_breakdown(
    event: EventRecord,
    location: Optional[GeoPoint],
    interests: Optional[Iterable[str]],
    now: Optional[datetime] = None,
) -> ScoreBreakdown:
    """Compute every sub-score and the weighted total for one event.

    Raises ``InvalidTimestampError`` when ``start_dt`` or ``created_at`` can't
    be parsed; the caller decides what to do with that record.
    """
    now = parse_timestamp(now) if now is not None else utc_now()
    created = parse_timestamp(event.created_at, event.id)
    start = parse_timestamp(event.start_dt, event.id)

    parts = {
        "proximity": proximity_score(event, location),
        "popularity": popularity_score(event.attendee_count),
        "interest": interest_score(event.category, interests),
        "recency": recency_score(hours_between(now, created)),
        "timing": timing_score(hours_between(start, now)),
    }
    total = sum(parts[name] * weight for name, weight in WEIGHTS.items())
    return ScoreBreakdown(total=total, **parts)


def event_score(
    event: EventRecord,
    location: Optional[GeoPoint],
    interests: Optional[Iterable[str]],
    now: Optional[datetime] = None,
) -> float:
    return score_breakdown(event, location, interests, now).total


def score_events(
    events: Iterable[EventRecord],
    location: Optional[GeoPoint],
    interests: Optional[Iterable[str]],
    now: Optional[datetime] = None,
) -> List[ScoredEvent]:
    now = parse_timestamp(now) if now is not None else utc_now()
    interests = list(interests or ())
    scored = []
    for event in events:
        breakdown = score_breakdown(event, location, interests, now)
        scored.append(ScoredEvent(event=event, score=breakdown.total, breakdown=breakdown))
    # sorted() is stable: equal scores keep their input order
    return sorted(scored, key=lambda item: item.score, reverse=True)


def rank_events(
    events: Iterable[EventRecord],
    location: Optional[GeoPoint],
    interests: Optional[Iterable[str]],
    now: Optional[datetime] = None,
) -> List[EventRecord]:
    return [item.event for item in score_events(events, location, interests, now)]
