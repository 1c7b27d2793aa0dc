import pytest

from nightlife.domain import scoring


@pytest.mark.parametrize(
    "miles, expected",
    [(0.5, 100), (1, 100), (3, 80), (7, 60), (20, 40), (40, 20), (50, 20), (100, 10)],
)
def test_proximity_steps(miles, expected):
    assert scoring.proximity_for_distance(miles) == expected


def test_proximity_is_neutral_without_distance():
    assert scoring.proximity_for_distance(None) == 50


def test_proximity_never_increases_with_distance():
    values = [scoring.proximity_for_distance(d / 2) for d in range(0, 240)]
    assert all(a >= b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize(
    "count, expected",
    [(0, 10), (1, 20), (4, 20), (5, 40), (10, 60), (24, 60), (25, 80), (50, 100), (500, 100)],
)
def test_popularity_steps(count, expected):
    assert scoring.popularity_score(count) == expected


def test_interest_exact_match_ignores_case():
    assert scoring.interest_score("Festival", ["festival"]) == 100
    assert scoring.interest_score("club", ["CLUB", "bar"]) == 100


def test_interest_partial_match_either_direction():
    assert scoring.interest_score("house_party", ["party"]) == 70
    assert scoring.interest_score("bar", ["rooftop bars"]) == 70


def test_interest_neutral_without_interests():
    assert scoring.interest_score("club", None) == 50
    assert scoring.interest_score("club", []) == 50
    assert scoring.interest_score(None, []) == 50


def test_interest_without_category_or_overlap():
    assert scoring.interest_score(None, ["club"]) == 20
    assert scoring.interest_score("concert", ["club", "bar"]) == 20


@pytest.mark.parametrize(
    "hours, expected",
    [(0, 100), (24, 100), (25, 80), (72, 80), (100, 60), (168, 60), (300, 40), (336, 40), (337, 20)],
)
def test_recency_steps(hours, expected):
    assert scoring.recency_score(hours) == expected


@pytest.mark.parametrize(
    "hours, expected",
    [(-0.5, 0), (0, 100), (24, 100), (30, 80), (48, 80), (100, 60), (168, 60), (500, 40), (720, 40), (721, 20)],
)
def test_timing_steps(hours, expected):
    assert scoring.timing_score(hours) == expected
