from __future__ import annotations

from typing import Iterable, Optional, Protocol

from nightlife.domain.models import EventRecord, FriendsContext, GeoPoint


class EventSource(Protocol):
    """Contract for whatever hands the core its already-fetched events."""

    def fetch_events(self) -> list[EventRecord]:
        raise NotImplementedError


class LocationSource(Protocol):
    """Contract for the platform geolocation wrapper.

    ``None`` means the position is unknown (denied, loading or failed).
    """

    def current_location(self) -> Optional[GeoPoint]:
        raise NotImplementedError


class SocialGraph(Protocol):
    """Contract for the follow graph used by the friends-attending filter."""

    def friends_context(self, event_ids: Iterable[str]) -> FriendsContext:
        raise NotImplementedError
