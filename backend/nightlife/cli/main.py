import logging
from pathlib import Path
from typing import Optional

import typer

from nightlife import config
from nightlife.domain.geo import format_distance
from nightlife.domain.models import DateWindow, EventRecord, FilterCriteria, GeoPoint
from nightlife.domain.nearby import apply_filters
from nightlife.domain.scoring import score_events
from nightlife.domain.timeutils import InvalidTimestampError
from nightlife.providers.json_source import JsonEventSource

app = typer.Typer(help="CLI to try the For You feed and nearby filters on exported events")

_EXAMPLE_DATA = Path(__file__).parent / "sample_events.json"


@app.callback()
def main():
    logging.basicConfig(level=config.log_level(), format="%(levelname)s %(name)s: %(message)s")


def _load_events(events_file: Optional[Path]) -> list[EventRecord]:
    path = events_file or config.events_file() or _EXAMPLE_DATA
    try:
        return JsonEventSource(path).fetch_events()
    except (OSError, ValueError) as exc:
        typer.echo(f"Could not load events from {path}: {exc}", err=True)
        raise typer.Exit(code=1)


def _location(lat: Optional[float], lon: Optional[float]) -> Optional[GeoPoint]:
    if lat is None and lon is None:
        return None
    if lat is None or lon is None:
        typer.echo("--lat and --lon must be given together", err=True)
        raise typer.Exit(code=1)
    return GeoPoint(lat, lon)


def _split(value: Optional[str]) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()] if value else []


@app.command("feed")
def cli_feed(
    events_file: Optional[Path] = typer.Option(None, "--events", help="JSON file with exported events"),
    lat: Optional[float] = typer.Option(None, help="Viewer latitude"),
    lon: Optional[float] = typer.Option(None, help="Viewer longitude"),
    interests: Optional[str] = typer.Option(None, help="Comma separated interests"),
    top: int = typer.Option(10, help="Number of events to show"),
):
    events = _load_events(events_file)
    location = _location(lat, lon)
    try:
        scored = score_events(events, location, _split(interests))
    except InvalidTimestampError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    if not scored:
        typer.echo("No events to rank")
        raise typer.Exit(code=0)
    typer.echo("id\tscore\ttitle")
    for item in scored[:top]:
        typer.echo(f"{item.event.id}\t{item.score:.2f}\t{item.event.title}")


@app.command("nearby")
def cli_nearby(
    events_file: Optional[Path] = typer.Option(None, "--events", help="JSON file with exported events"),
    lat: Optional[float] = typer.Option(None, help="Viewer latitude"),
    lon: Optional[float] = typer.Option(None, help="Viewer longitude"),
    search: str = typer.Option("", help="Text to look for in title, location or category"),
    date: DateWindow = typer.Option(DateWindow.ALL, help="Date window"),
    categories: Optional[str] = typer.Option(None, help="Comma separated categories"),
    max_distance: Optional[float] = typer.Option(None, help="Maximum distance in miles"),
    guestlist_only: bool = typer.Option(False, "--guestlist-only", help="Only events with a guestlist"),
    top: int = typer.Option(20, help="Number of events to show"),
):
    if date is DateWindow.CUSTOM:
        typer.echo("custom date ranges are only supported through the API", err=True)
        raise typer.Exit(code=1)
    events = _load_events(events_file)
    location = _location(lat, lon)
    try:
        criteria = FilterCriteria(
            search_text=search,
            date_window=date,
            categories=frozenset(_split(categories)),
            max_distance_miles=max_distance,
            require_guestlist=guestlist_only,
        )
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    results = apply_filters(events, location, criteria)
    if not results:
        typer.echo("No events match those filters")
        raise typer.Exit(code=0)
    typer.echo("id\tdistance\ttitle")
    for item in results[:top]:
        typer.echo(f"{item.event.id}\t{format_distance(item.distance_miles) or '-'}\t{item.event.title}")


if __name__ == "__main__":
    app()
