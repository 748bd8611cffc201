"""Runtime settings read from the process environment."""
from __future__ import annotations

import os
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

_ENV_KEYS = {
    "host": "HOST",
    "port": "PORT",
    "public_dir": "PUBLIC_DIR",
    "log_level": "LOG_LEVEL",
    "ws_ping_interval": "WS_PING_INTERVAL",
    "ws_ping_timeout": "WS_PING_TIMEOUT",
    "outbox_size": "OUTBOX_SIZE",
}


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=0, le=65535)
    # Directory holding the browser client (index.html, game.js, sprites).
    public_dir: str = "public"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    # Dead peers are detected by the websocket ping, not by the relay.
    ws_ping_interval: float = Field(default=20.0, gt=0)
    ws_ping_timeout: float = Field(default=20.0, gt=0)
    outbox_size: int = Field(default=256, ge=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from *environ* (defaults to ``os.environ``); unset keys keep defaults."""
        env = os.environ if environ is None else environ
        values = {field: env[key] for field, key in _ENV_KEYS.items() if env.get(key)}
        return cls(**values)


__all__ = ["Settings"]
