from zoneinfo import ZoneInfo

import pytest

from nightlife import config


def test_default_zone_is_utc(monkeypatch):
    monkeypatch.delenv("NIGHTLIFE_TIMEZONE", raising=False)
    assert config.default_zone() == ZoneInfo("UTC")


def test_zone_from_environment(monkeypatch):
    monkeypatch.setenv("NIGHTLIFE_TIMEZONE", "Europe/Madrid")
    assert config.default_zone().key == "Europe/Madrid"


def test_unknown_zone_raises(monkeypatch):
    monkeypatch.setenv("NIGHTLIFE_TIMEZONE", "Mars/Olympus_Mons")
    with pytest.raises(ValueError):
        config.default_zone()


def test_events_file(monkeypatch, tmp_path):
    monkeypatch.delenv("NIGHTLIFE_EVENTS_FILE", raising=False)
    assert config.events_file() is None
    monkeypatch.setenv("NIGHTLIFE_EVENTS_FILE", str(tmp_path / "events.json"))
    assert config.events_file() == tmp_path / "events.json"


def test_zone_directory_name_raises(monkeypatch):
    monkeypatch.setenv("NIGHTLIFE_TIMEZONE", "America")
    with pytest.raises(ValueError):
        config.default_zone()
