from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from nightlife.api.main import create_app
from nightlife.domain.models import EventRecord

NOW = datetime(2026, 2, 11, 18, 0, tzinfo=timezone.utc)


class StaticEventSource:
    def __init__(self, events: list[EventRecord]):
        self.events = events

    def fetch_events(self) -> list[EventRecord]:
        return list(self.events)


def stored_events() -> list[EventRecord]:
    return [
        EventRecord(
            id="stored-club",
            title="Basement Club",
            start_dt=NOW + timedelta(hours=5),
            created_at=NOW - timedelta(hours=2),
            lat=40.7128,
            lon=-74.0060,
            category="club",
            attendee_count=55,
            has_guestlist=True,
        ),
        EventRecord(
            id="stored-bar",
            title="Dive Bar Trivia",
            start_dt=NOW + timedelta(days=10),
            created_at=NOW - timedelta(days=30),
            lat=40.80,
            lon=-74.0060,
            category="bar",
        ),
    ]


@pytest.fixture()
def api_client():
    app = create_app(event_source=StaticEventSource(stored_events()))
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def api_client_no_source(monkeypatch):
    monkeypatch.delenv("NIGHTLIFE_EVENTS_FILE", raising=False)
    app = create_app()
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def now_iso() -> str:
    return NOW.isoformat()
