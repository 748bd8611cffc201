"""Relay protocol handler.

Translates connection lifecycle events and inbound frames into registry
operations and outbound fan-out. It is completely transport-agnostic: the
websocket router feeds it and supplies a ``transport`` with a non-blocking
``send(session_id, message)``.

Every public method is synchronous. A registry mutation and the enqueueing of
the resulting broadcasts happen in one step, so no other event can observe a
half-applied update.
"""
from __future__ import annotations

import enum
import logging
from typing import Any, Dict, Protocol, Union

from .audience import Audience, OthersOnly, Target, ToAll, ToSelf
from .constants import (
    CURRENT_PLAYERS,
    NEW_PLAYER,
    PLAYER_DISCONNECTED,
    PLAYER_INTERACTION_RESPONSE,
    PLAYER_MOVED,
    PLAYER_UPDATED,
)
from .errors import DuplicateSessionError, MalformedMessageError
from .registry import SessionRegistry
from .schemas import (
    InteractionNotice,
    InteractionRequest,
    MovementReport,
    RenameRequest,
    decode_inbound,
    envelope,
)

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def send(self, session_id: str, message: Dict[str, Any]) -> None:
        ...


class ConnectionPhase(str, enum.Enum):
    CONNECTING = "connecting"
    ACTIVE = "active"
    DISCONNECTED = "disconnected"


class RelayHandler:
    """Per-connection message dispatch over a shared :class:`SessionRegistry`."""

    def __init__(self, registry: SessionRegistry, transport: Transport):
        self.registry = registry
        self.transport = transport
        # Sessions that reached DISCONNECTED are dropped from this map.
        self._phases: Dict[str, ConnectionPhase] = {}

    def phase(self, session_id: str) -> ConnectionPhase:
        return self._phases.get(session_id, ConnectionPhase.DISCONNECTED)

    # -------------------- Lifecycle -------------------- #

    def connect(self, session_id: str) -> None:
        if session_id in self._phases:
            raise DuplicateSessionError(session_id)
        player = self.registry.create(session_id)
        self._phases[session_id] = ConnectionPhase.CONNECTING
        logger.info("Player connected: %s", session_id)

        snapshot = {sid: p.model_dump() for sid, p in self.registry.snapshot().items()}
        self.emit(ToSelf(), session_id, CURRENT_PLAYERS, snapshot)
        self.emit(OthersOnly(), session_id, NEW_PLAYER, player)
        self._phases[session_id] = ConnectionPhase.ACTIVE

    def disconnect(self, session_id: str) -> None:
        """Tear down *session_id*. Safe to call more than once."""
        if self._phases.pop(session_id, None) is None:
            return
        removed = self.registry.remove(session_id)
        if removed is None:
            return
        logger.info("Player disconnected: %s", session_id)
        # The leaver is already gone from the registry, so ToAll means the remaining sessions.
        self.emit(ToAll(), session_id, PLAYER_DISCONNECTED, session_id)

    # -------------------- Inbound -------------------- #

    def dispatch(self, session_id: str, raw: Union[str, bytes]) -> None:
        """Decode one inbound frame and apply it. Malformed frames are dropped."""
        if self.phase(session_id) is not ConnectionPhase.ACTIVE:
            logger.debug("Ignoring frame from inactive session %s", session_id)
            return
        try:
            message = decode_inbound(raw)
        except MalformedMessageError as exc:
            logger.debug("Dropping malformed frame from %s: %s", session_id, exc.reason)
            return

        if isinstance(message, MovementReport):
            self._on_movement(session_id, message)
        elif isinstance(message, RenameRequest):
            self._on_rename(session_id, message)
        elif isinstance(message, InteractionRequest):
            self._on_interaction(session_id, message)

    def _on_movement(self, session_id: str, message: MovementReport) -> None:
        data = message.data
        player = self.registry.update(
            session_id,
            {"position": data.position, "direction": data.direction, "moving": data.moving},
        )
        if player is not None:
            self.emit(OthersOnly(), session_id, PLAYER_MOVED, player)

    def _on_rename(self, session_id: str, message: RenameRequest) -> None:
        player = self.registry.update(session_id, {"name": message.data})
        if player is not None:
            # Sender gets the echo as confirmation.
            self.emit(ToAll(), session_id, PLAYER_UPDATED, player)

    def _on_interaction(self, session_id: str, message: InteractionRequest) -> None:
        target_id = message.data.target_id
        if target_id == session_id or target_id not in self.registry:
            logger.debug("Dropping interaction from %s to unavailable %s", session_id, target_id)
            return
        notice = InteractionNotice(from_id=session_id, message=message.data.message)
        self.emit(Target(target_id), session_id, PLAYER_INTERACTION_RESPONSE, notice)

    # -------------------- Outbound -------------------- #

    def emit(self, audience: Audience, sender: str, event: str, data: Any) -> None:
        """Enqueue ``event`` for every session *audience* resolves to."""
        payload = envelope(event, data)
        for recipient in audience.resolve(sender, self.registry.ids()):
            self.transport.send(recipient, payload)


__all__ = ["RelayHandler", "ConnectionPhase", "Transport"]
