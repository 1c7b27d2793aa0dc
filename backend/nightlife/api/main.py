from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nightlife import config
from nightlife.api.routers import feed, nearby
from nightlife.providers.json_source import JsonEventSource


def create_app(event_source=None) -> FastAPI:
    app = FastAPI(title="Nightlife Discovery API", version="0.1.0")
    if event_source is None:
        path = config.events_file()
        event_source = JsonEventSource(path) if path else None
    app.state.event_source = event_source

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.frontend_origin()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(feed.router, prefix="/api")
    app.include_router(nearby.router, prefix="/api")
    return app


app = create_app()
