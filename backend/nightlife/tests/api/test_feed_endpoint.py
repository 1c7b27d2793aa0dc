def event_payload(event_id, **overrides):
    payload = {
        "id": event_id,
        "title": "Foo Fest",
        "start_dt": "2026-02-11T20:00:00Z",
        "created_at": "2026-02-11T17:00:00Z",
        "lat": 40.0,
        "lon": -73.0,
        "category": "festival",
        "attendee_count": 60,
    }
    payload.update(overrides)
    return payload


def test_feed_scores_posted_events(api_client, now_iso):
    body = {
        "events": [event_payload("small", attendee_count=0), event_payload("fest")],
        "location": {"lat": 40.01, "lon": -73.01},
        "interests": ["festival"],
        "now": now_iso,
    }
    response = api_client.post("/api/feed", json=body)
    assert response.status_code == 200
    data = response.json()
    assert [item["id"] for item in data] == ["fest", "small"]
    assert data[0]["score"] == 100
    assert data[0]["breakdown"] == {
        "proximity": 100,
        "popularity": 100,
        "interest": 100,
        "recency": 100,
        "timing": 100,
    }


def test_feed_without_location_is_neutral(api_client, now_iso):
    body = {"events": [event_payload("fest")], "interests": ["festival"], "now": now_iso}
    data = api_client.post("/api/feed", json=body).json()
    assert data[0]["score"] == 85


def test_feed_falls_back_to_event_source(api_client, now_iso):
    response = api_client.post("/api/feed", json={"now": now_iso, "interests": ["club"]})
    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == ["stored-club", "stored-bar"]


def test_feed_rejects_malformed_timestamp(api_client, now_iso):
    body = {"events": [event_payload("broken", created_at="someday")], "now": now_iso}
    response = api_client.post("/api/feed", json=body)
    assert response.status_code == 422
    assert "broken" in response.json()["detail"]


def test_feed_without_source_is_a_server_error(api_client_no_source):
    response = api_client_no_source.post("/api/feed", json={})
    assert response.status_code == 500
