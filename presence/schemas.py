"""Pydantic data schemas for the presence relay.

Player state lives here together with the closed set of inbound messages a
client may send and the payloads the server sends back. Every websocket frame
is an envelope of the form ``{"type": <event name>, "data": <payload>}``.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .constants import DEFAULT_DIRECTION
from .errors import MalformedMessageError

Direction = Literal["up", "down", "left", "right"]

# -----------------------------
# Runtime state
# -----------------------------


class Position(BaseModel):
    # Coordinates must be finite so every broadcast stays valid JSON.
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    x: float
    y: float


class PlayerState(BaseModel):
    """One connected player as every client sees it."""

    id: str
    position: Position
    direction: Direction = DEFAULT_DIRECTION
    moving: bool = False
    name: str


# -----------------------------
# Inbound (client -> server)
# -----------------------------
# Inbound models are strict so that e.g. ``"moving": "yes"`` is rejected
# instead of being coerced.


class MovementData(BaseModel):
    model_config = ConfigDict(strict=True)

    position: Position
    direction: Direction
    moving: bool


class InteractionData(BaseModel):
    model_config = ConfigDict(strict=True, populate_by_name=True)

    target_id: str = Field(alias="targetId")
    message: Optional[str] = None


class MovementReport(BaseModel):
    model_config = ConfigDict(strict=True)

    type: Literal["playerMovement"]
    data: MovementData


class RenameRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    type: Literal["updateName"]
    data: str


class InteractionRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    type: Literal["playerInteraction"]
    data: InteractionData


InboundMessage = Annotated[
    Union[MovementReport, RenameRequest, InteractionRequest],
    Field(discriminator="type"),
]

_inbound_adapter: TypeAdapter = TypeAdapter(InboundMessage)


def decode_inbound(raw: Union[str, bytes]) -> Union[MovementReport, RenameRequest, InteractionRequest]:
    """Parse a raw websocket frame into one of the inbound message kinds.

    Raises
    ------
    MalformedMessageError
        If *raw* is not JSON, names an unknown ``type`` or carries missing or
        wrongly typed fields.
    """
    try:
        return _inbound_adapter.validate_json(raw)
    except ValidationError as exc:
        raise MalformedMessageError(str(exc), raw) from exc


# -----------------------------
# Outbound (server -> client)
# -----------------------------


class InteractionNotice(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_id: str = Field(alias="fromId")
    message: Optional[str] = None


def envelope(event: str, data: Any) -> Dict[str, Any]:
    """Wrap *data* into the wire envelope, serialising pydantic models."""
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True, exclude_none=True)
    return {"type": event, "data": data}


__all__ = [
    "Direction",
    "Position",
    "PlayerState",
    "MovementData",
    "InteractionData",
    "MovementReport",
    "RenameRequest",
    "InteractionRequest",
    "InboundMessage",
    "decode_inbound",
    "InteractionNotice",
    "envelope",
]
