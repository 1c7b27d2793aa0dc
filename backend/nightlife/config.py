from __future__ import annotations

import os
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo

from nightlife.domain.timeutils import resolve_zone

DEFAULT_TIMEZONE = "UTC"
DEFAULT_FRONTEND_ORIGIN = "http://localhost:5173"


def timezone_name() -> str:
    return os.getenv("NIGHTLIFE_TIMEZONE") or DEFAULT_TIMEZONE


def default_zone() -> ZoneInfo:
    return resolve_zone(timezone_name())


def events_file() -> Optional[Path]:
    value = os.getenv("NIGHTLIFE_EVENTS_FILE")
    return Path(value) if value else None


def frontend_origin() -> str:
    return os.getenv("FRONTEND_ORIGIN", DEFAULT_FRONTEND_ORIGIN)


def log_level() -> str:
    return os.getenv("NIGHTLIFE_LOG_LEVEL", "INFO").upper()
