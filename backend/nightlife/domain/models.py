from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import FrozenSet, Mapping, Optional, Union

Timestamp = Union[datetime, str]

CATEGORIES = ("club", "bar", "concert", "festival", "house_party", "lounge")
DISTANCE_OPTIONS = (None, 1, 5, 10, 25)


@dataclass(frozen=True)
class EventRecord:
    id: str
    title: str
    start_dt: Timestamp
    created_at: Timestamp
    lat: Optional[float] = None
    lon: Optional[float] = None
    category: Optional[str] = None
    location_name: Optional[str] = None
    attendee_count: int = 0
    has_guestlist: bool = False
    attendee_ids: FrozenSet[str] = frozenset()

    def __post_init__(self):
        if self.attendee_count < 0:
            raise ValueError(f"attendee_count must be >= 0 (event {self.id})")

    @property
    def has_location(self) -> bool:
        return self.lat is not None and self.lon is not None


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float


class DateWindow(str, Enum):
    ALL = "all"
    TONIGHT = "tonight"
    THIS_WEEKEND = "this_weekend"
    CUSTOM = "custom"


@dataclass(frozen=True)
class DateRange:
    start: datetime
    end: datetime

    def __post_init__(self):
        # naive bounds are UTC, like every other timestamp the core reads
        for name in ("start", "end"):
            value = getattr(self, name)
            if value.tzinfo is None:
                object.__setattr__(self, name, value.replace(tzinfo=timezone.utc))
        if self.start > self.end:
            raise ValueError("date range start must not be after end")

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


@dataclass(frozen=True)
class FilterCriteria:
    """Filters selected on the discovery map.

    Replaced wholesale on every change; use ``dataclasses.replace`` or
    :meth:`reset` to derive a new value.
    """

    search_text: str = ""
    date_window: DateWindow = DateWindow.ALL
    custom_range: Optional[DateRange] = None
    categories: FrozenSet[str] = frozenset()
    max_distance_miles: Optional[float] = None
    require_guestlist: bool = False
    require_friends_attending: bool = False

    def __post_init__(self):
        # accept plain strings/iterables from callers
        object.__setattr__(self, "date_window", DateWindow(self.date_window))
        object.__setattr__(self, "categories", frozenset(self.categories))
        if self.date_window is DateWindow.CUSTOM and self.custom_range is None:
            raise ValueError("custom date window requires custom_range")
        if self.max_distance_miles is not None and self.max_distance_miles < 0:
            raise ValueError("max_distance_miles must be >= 0")

    @property
    def active_filter_count(self) -> int:
        return (
            (1 if self.date_window is not DateWindow.ALL else 0)
            + len(self.categories)
            + (1 if self.max_distance_miles is not None else 0)
            + (1 if self.require_guestlist else 0)
            + (1 if self.require_friends_attending else 0)
        )

    def reset(self) -> "FilterCriteria":
        return FilterCriteria(search_text=self.search_text)

    def with_category_toggled(self, category: str) -> "FilterCriteria":
        if category in self.categories:
            return replace(self, categories=self.categories - {category})
        return replace(self, categories=self.categories | {category})


@dataclass(frozen=True)
class FriendsContext:
    followed_ids: FrozenSet[str]
    attendees_by_event: Mapping[str, FrozenSet[str]] = field(default_factory=dict)

    def attendees_for(self, event: EventRecord) -> FrozenSet[str]:
        return self.attendees_by_event.get(event.id, event.attendee_ids)


@dataclass(frozen=True)
class ScoreBreakdown:
    proximity: float
    popularity: float
    interest: float
    recency: float
    timing: float
    total: float


@dataclass(frozen=True)
class ScoredEvent:
    event: EventRecord
    score: float
    breakdown: Optional[ScoreBreakdown] = None


@dataclass(frozen=True)
class NearbyEvent:
    event: EventRecord
    distance_miles: Optional[float]
