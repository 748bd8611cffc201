"""In-memory session registry.

The registry is the single source of truth for who is online. It is created
once per application and handed to the relay explicitly; nothing in here is a
module-level singleton.
"""
from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from .constants import DEFAULT_DIRECTION, NAME_ID_CHARS, NAME_PREFIX, SPAWN_MIN, SPAWN_SPAN
from .errors import DuplicateSessionError
from .schemas import PlayerState, Position

_MUTABLE_FIELDS = {"position", "direction", "moving", "name"}


def default_name(session_id: str) -> str:
    return f"{NAME_PREFIX}{session_id[:NAME_ID_CHARS]}"


class SessionRegistry:
    """Mapping of session id -> :class:`PlayerState` for every open connection."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._players: Dict[str, PlayerState] = {}
        self._rng = rng or random.Random()

    # -------------------- Lifecycle -------------------- #

    def create(self, session_id: str) -> PlayerState:
        """Insert a fresh player at a random spawn point and return a copy of it."""
        if session_id in self._players:
            raise DuplicateSessionError(session_id)
        player = PlayerState(
            id=session_id,
            position=Position(
                x=SPAWN_MIN + self._rng.randrange(SPAWN_SPAN),
                y=SPAWN_MIN + self._rng.randrange(SPAWN_SPAN),
            ),
            direction=DEFAULT_DIRECTION,
            moving=False,
            name=default_name(session_id),
        )
        self._players[session_id] = player
        return player.model_copy(deep=True)

    def remove(self, session_id: str) -> Optional[PlayerState]:
        """Drop *session_id*; returns the removed entry or ``None`` if it was absent."""
        return self._players.pop(session_id, None)

    def clear(self) -> None:
        self._players.clear()

    # -------------------- Access -------------------- #

    def get(self, session_id: str) -> Optional[PlayerState]:
        player = self._players.get(session_id)
        return player.model_copy(deep=True) if player else None

    def update(self, session_id: str, fields: Dict[str, Any]) -> Optional[PlayerState]:
        """Apply a partial update; only the keys present in *fields* change.

        Returns a copy of the updated entry, or ``None`` when *session_id* is not
        registered (nothing is mutated in that case).
        """
        unknown = set(fields) - _MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")
        player = self._players.get(session_id)
        if player is None:
            return None
        for key, value in fields.items():
            if isinstance(value, Position):
                value = value.model_copy()
            setattr(player, key, value)
        return player.model_copy(deep=True)

    def snapshot(self) -> Dict[str, PlayerState]:
        """Return deep copies of every entry; callers may mutate them freely."""
        return {sid: p.model_copy(deep=True) for sid, p in self._players.items()}

    def ids(self) -> List[str]:
        return list(self._players)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._players

    def __len__(self) -> int:
        return len(self._players)


__all__ = ["SessionRegistry", "default_name"]
