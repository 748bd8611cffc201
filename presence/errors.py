"""Exception types raised inside the relay.

None of these ever escape a websocket session: the relay catches them and
drops the offending frame.
"""
from __future__ import annotations

from typing import Optional


class RelayError(Exception):
    """Base class for relay failures."""


class MalformedMessageError(RelayError):
    """An inbound frame could not be decoded into a known message kind."""

    def __init__(self, reason: str, raw: Optional[object] = None):
        super().__init__(reason)
        self.reason = reason
        self.raw = raw


class DuplicateSessionError(RelayError):
    """A session id was registered while another session still holds it."""

    def __init__(self, session_id: str):
        super().__init__(f"Session {session_id!r} is already registered")
        self.session_id = session_id


__all__ = ["RelayError", "MalformedMessageError", "DuplicateSessionError"]
