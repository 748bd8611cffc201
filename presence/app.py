from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import Settings
from .connections import ConnectionHub
from .registry import SessionRegistry
from .relay import RelayHandler
from .routers import players as players_router
from .routers import websockets as ws_router


# Custom StaticFiles variant that disables caching for the client assets.
class NoCacheStaticFiles(StaticFiles):
    async def get_response(self, path: str, scope):  # type: ignore[override]
        response = await super().get_response(path, scope)
        response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
        response.headers["Pragma"] = "no-cache"
        response.headers["Expires"] = "0"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Sessions do not survive a restart.
    app.state.registry.clear()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with a fresh registry, hub and relay."""
    settings = settings or Settings.from_env()

    app = FastAPI(title="Presence Relay", lifespan=lifespan)

    # Allow all origins during development; adjust for production.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    registry = SessionRegistry()
    hub = ConnectionHub(outbox_size=settings.outbox_size)
    app.state.settings = settings
    app.state.registry = registry
    app.state.hub = hub
    app.state.relay = RelayHandler(registry, hub)

    app.include_router(players_router.router)
    app.include_router(ws_router.router)

    # Serve the browser client at root; a missing directory just 404s.
    app.mount(
        "/",
        NoCacheStaticFiles(directory=settings.public_dir, html=True, check_dir=False),
        name="public",
    )
    return app


app = create_app()

__all__ = ["app", "create_app", "NoCacheStaticFiles"]
