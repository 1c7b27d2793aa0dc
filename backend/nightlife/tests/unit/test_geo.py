import math

import pytest

from nightlife.domain.geo import distance_miles, format_distance, haversine_miles
from nightlife.domain.models import EventRecord, GeoPoint

POINTS = [
    (40.7128, -74.0060),
    (34.0522, -118.2437),
    (51.5074, -0.1278),
    (-33.8688, 151.2093),
    (0.0, 0.0),
]


def make_event(lat=None, lon=None):
    return EventRecord(
        id="ev-geo",
        title="Geo",
        start_dt="2026-02-10T22:00:00Z",
        created_at="2026-02-01T10:00:00Z",
        lat=lat,
        lon=lon,
    )


@pytest.mark.parametrize("a", POINTS)
@pytest.mark.parametrize("b", POINTS)
def test_haversine_is_symmetric(a, b):
    assert haversine_miles(*a, *b) == pytest.approx(haversine_miles(*b, *a))


@pytest.mark.parametrize("a", POINTS)
def test_haversine_identity_is_zero(a):
    assert haversine_miles(*a, *a) == 0


def test_haversine_known_distance():
    # New York to Los Angeles is roughly 2445 miles on a sphere
    assert haversine_miles(40.7128, -74.0060, 34.0522, -118.2437) == pytest.approx(2445, abs=5)


def test_one_degree_of_latitude():
    expected = 3959 * math.pi / 180
    assert haversine_miles(10.0, 20.0, 11.0, 20.0) == pytest.approx(expected)


def test_distance_is_none_without_viewer_location():
    assert distance_miles(None, make_event(40.0, -73.0)) is None


def test_distance_is_none_without_event_coordinates():
    viewer = GeoPoint(40.0, -73.0)
    assert distance_miles(viewer, make_event()) is None
    assert distance_miles(viewer, make_event(lat=40.0)) is None


def test_distance_handles_zero_coordinates():
    distance = distance_miles(GeoPoint(0.0, 0.0), make_event(0.0, 0.0))
    assert distance == 0


def test_format_distance():
    assert format_distance(None) == ""
    assert format_distance(0.05) == "< 0.1 mi"
    assert format_distance(0.44) == "0.4 mi"
    assert format_distance(12.4) == "12 mi"


def test_format_distance_rounds_halves_up():
    assert format_distance(2.5) == "3 mi"
    assert format_distance(3.5) == "4 mi"
    assert format_distance(2.49) == "2 mi"
