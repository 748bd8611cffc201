"""Run the relay with ``python -m presence``."""
from __future__ import annotations

import logging

import uvicorn

from .app import create_app
from .config import Settings


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    logging.getLogger(__name__).info("Starting on %s:%s", settings.host, settings.port)
    # uvicorn exits the process if the port cannot be bound.
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        ws_ping_interval=settings.ws_ping_interval,
        ws_ping_timeout=settings.ws_ping_timeout,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
