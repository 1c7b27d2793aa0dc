from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from nightlife.domain.models import DateWindow


class EventIn(BaseModel):
    id: str
    title: str = ""
    start_dt: Optional[str] = Field(default=None, description="ISO8601 e.g. 2026-11-05T22:00:00Z")
    created_at: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    category: Optional[str] = None
    location_name: Optional[str] = None
    attendee_count: Optional[int] = Field(default=None, ge=0)
    has_guestlist: bool = False
    attendee_ids: List[str] = []


class LocationIn(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class FeedRequest(BaseModel):
    events: Optional[List[EventIn]] = None
    location: Optional[LocationIn] = None
    interests: Optional[List[str]] = None
    now: Optional[datetime] = None


class FeedItem(BaseModel):
    id: str
    title: str
    category: Optional[str] = None
    score: float
    breakdown: Dict[str, float]


class CriteriaIn(BaseModel):
    search_text: str = ""
    date_window: DateWindow = DateWindow.ALL
    custom_start: Optional[datetime] = None
    custom_end: Optional[datetime] = None
    categories: List[str] = []
    max_distance_miles: Optional[float] = Field(default=None, ge=0)
    require_guestlist: bool = False
    require_friends_attending: bool = False


class NearbyRequest(BaseModel):
    events: Optional[List[EventIn]] = None
    location: Optional[LocationIn] = None
    criteria: CriteriaIn = Field(default_factory=CriteriaIn)
    followed_ids: Optional[List[str]] = None
    now: Optional[datetime] = None
    timezone: Optional[str] = None


class NearbyItem(BaseModel):
    id: str
    title: str
    category: Optional[str] = None
    distance_miles: Optional[float] = None
    distance_label: str = ""


class FilterOptions(BaseModel):
    categories: List[str]
    distance_options: List[Optional[int]]
    date_windows: List[str]
