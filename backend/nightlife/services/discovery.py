from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Iterable, List, Optional

from nightlife.domain.models import FilterCriteria, NearbyEvent, ScoredEvent
from nightlife.domain.nearby import apply_filters
from nightlife.domain.scoring import score_events
from nightlife.providers.base import EventSource, LocationSource, SocialGraph


class DiscoveryRunner:
    """Pulls fresh inputs from the app's collaborators and runs the core.

    Nothing is cached between calls; every run fetches events and the viewer
    position again.
    """

    def __init__(
        self,
        events: EventSource,
        location: LocationSource,
        social_graph: Optional[SocialGraph] = None,
    ):
        self.events = events
        self.location = location
        self.social_graph = social_graph

    def for_you(self, interests: Optional[Iterable[str]], now: Optional[datetime] = None) -> List[ScoredEvent]:
        return score_events(self.events.fetch_events(), self.location.current_location(), interests, now=now)

    def nearby(
        self,
        criteria: FilterCriteria,
        now: Optional[datetime] = None,
        tz: Optional[tzinfo] = None,
    ) -> List[NearbyEvent]:
        events = self.events.fetch_events()
        friends = None
        # the follow graph is only fetched when the filter needs it
        if criteria.require_friends_attending and self.social_graph is not None:
            friends = self.social_graph.friends_context([event.id for event in events])
        return apply_filters(events, self.location.current_location(), criteria, friends=friends, now=now, tz=tz)
