"""Explicit fan-out audiences.

Every outbound message names who receives it. An audience resolves against
the sender and the ids of all currently active sessions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Union


@dataclass(frozen=True)
class ToSelf:
    """Only the connection that triggered the event."""

    def resolve(self, sender: str, active: Iterable[str]) -> List[str]:
        return [sid for sid in active if sid == sender]


@dataclass(frozen=True)
class OthersOnly:
    """Every active connection except the sender."""

    def resolve(self, sender: str, active: Iterable[str]) -> List[str]:
        return [sid for sid in active if sid != sender]


@dataclass(frozen=True)
class ToAll:
    """Every active connection, the sender included."""

    def resolve(self, sender: str, active: Iterable[str]) -> List[str]:
        return list(active)


@dataclass(frozen=True)
class Target:
    """A single named connection; resolves to nobody once it has gone."""

    session_id: str

    def resolve(self, sender: str, active: Iterable[str]) -> List[str]:
        return [sid for sid in active if sid == self.session_id]


Audience = Union[ToSelf, OthersOnly, ToAll, Target]

__all__ = ["Audience", "ToSelf", "OthersOnly", "ToAll", "Target"]
