from __future__ import annotations

import logging
from datetime import datetime, time, timedelta, tzinfo
from typing import Callable, Iterable, List, Optional, Tuple

from nightlife.config import default_zone

from .geo import distance_miles
from .models import DateWindow, EventRecord, FilterCriteria, FriendsContext, GeoPoint, NearbyEvent
from .timeutils import InvalidTimestampError, parse_timestamp, utc_now

logger = logging.getLogger(__name__)

FRIDAY = 4
WEEKEND_SPAN = timedelta(days=3) - timedelta(microseconds=1)

Predicate = Callable[[NearbyEvent], bool]


def annotate_distances(events: Iterable[EventRecord], location: Optional[GeoPoint]) -> List[NearbyEvent]:
    return [NearbyEvent(event=event, distance_miles=distance_miles(location, event)) for event in events]


def is_tonight(start: datetime, now: datetime, tz: tzinfo) -> bool:
    return start.astimezone(tz).date() == now.astimezone(tz).date()


def weekend_window(now: datetime, tz: tzinfo) -> Tuple[datetime, datetime]:
    """Friday 00:00 to Sunday 23:59:59.999999 of the current weekend.

    Monday to Friday look ahead to this week's Friday; Saturday and Sunday
    look back to the Friday that opened the weekend they are in.
    """
    today = now.astimezone(tz).date()
    friday = today + timedelta(days=FRIDAY - today.weekday())
    start = datetime.combine(friday, time.min, tzinfo=tz)
    return start, start + WEEKEND_SPAN


def matches_search(item: NearbyEvent, search_text: str) -> bool:
    query = search_text.strip().lower()
    if not query:
        return True
    event = item.event
    fields = (event.title, event.location_name, event.category)
    return any(value and query in value.lower() for value in fields)


def in_date_window(
    item: NearbyEvent,
    criteria: FilterCriteria,
    now: datetime,
    tz: tzinfo,
) -> bool:
    window = criteria.date_window
    if window is DateWindow.ALL:
        return True
    try:
        start = parse_timestamp(item.event.start_dt, item.event.id)
    except InvalidTimestampError as exc:
        logger.warning("Excluding event from %s window: %s", window.value, exc)
        return False
    if window is DateWindow.TONIGHT:
        return is_tonight(start, now, tz)
    if window is DateWindow.THIS_WEEKEND:
        friday, sunday_end = weekend_window(now, tz)
        return friday <= start <= sunday_end
    return criteria.custom_range.contains(start)


def matches_categories(item: NearbyEvent, categories) -> bool:
    if not categories:
        return True
    return item.event.category is not None and item.event.category in categories


def within_distance(item: NearbyEvent, max_distance_miles: Optional[float]) -> bool:
    if max_distance_miles is None:
        return True
    return item.distance_miles is not None and item.distance_miles <= max_distance_miles


def has_guestlist(item: NearbyEvent, required: bool) -> bool:
    return item.event.has_guestlist or not required


def friends_attending(item: NearbyEvent, friends: FriendsContext) -> bool:
    return not friends.followed_ids.isdisjoint(friends.attendees_for(item.event))


def build_predicates(
    criteria: FilterCriteria,
    friends: Optional[FriendsContext],
    now: datetime,
    tz: tzinfo,
) -> List[Predicate]:
    """Return one predicate per active filter in ``criteria``."""
    predicates: List[Predicate] = []
    if criteria.search_text.strip():
        predicates.append(lambda item: matches_search(item, criteria.search_text))
    if criteria.date_window is not DateWindow.ALL:
        predicates.append(lambda item: in_date_window(item, criteria, now, tz))
    if criteria.categories:
        predicates.append(lambda item: matches_categories(item, criteria.categories))
    if criteria.max_distance_miles is not None:
        predicates.append(lambda item: within_distance(item, criteria.max_distance_miles))
    if criteria.require_guestlist:
        predicates.append(lambda item: has_guestlist(item, True))
    if criteria.require_friends_attending:
        if friends is None:
            logger.debug("friends-attending filter requested without a social graph; not applied")
        else:
            predicates.append(lambda item: friends_attending(item, friends))
    return predicates


def _distance_sort_key(item: NearbyEvent):
    if item.distance_miles is None:
        return (1, 0.0)
    return (0, item.distance_miles)


def apply_filters(
    events: Iterable[EventRecord],
    location: Optional[GeoPoint],
    criteria: FilterCriteria,
    friends: Optional[FriendsContext] = None,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> List[NearbyEvent]:
    """Annotate, filter and order events for the discovery map.

    ``tz`` is the viewer's zone for tonight/weekend checks and defaults to the
    configured zone. The input sequence is left untouched.
    """
    now = parse_timestamp(now) if now is not None else utc_now()
    if tz is None:
        tz = default_zone()

    annotated = annotate_distances(events, location)
    predicates = build_predicates(criteria, friends, now, tz)
    result = [item for item in annotated if all(check(item) for check in predicates)]
    if location is not None:
        result.sort(key=_distance_sort_key)
    return result
