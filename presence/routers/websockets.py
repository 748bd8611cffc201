from __future__ import annotations

import asyncio
import logging
import uuid

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ..connections import ConnectionHub, pump_outbox
from ..relay import RelayHandler

router = APIRouter(prefix="", tags=["ws"])

logger = logging.getLogger(__name__)


def _new_session_id(relay: RelayHandler) -> str:
    session_id = str(uuid.uuid4())
    while session_id in relay.registry:
        session_id = str(uuid.uuid4())
    return session_id


@router.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    relay: RelayHandler = ws.app.state.relay
    hub: ConnectionHub = ws.app.state.hub

    await ws.accept()

    # Id assignment, outbox and registry entry happen with no await in between.
    session_id = _new_session_id(relay)
    outbox = hub.open(session_id)
    relay.connect(session_id)
    writer = asyncio.create_task(pump_outbox(ws, outbox, session_id))

    try:
        while True:
            message = await ws.receive()
            if message["type"] == "websocket.disconnect":
                break
            raw = message.get("text") or message.get("bytes")
            if raw:
                relay.dispatch(session_id, raw)
    except WebSocketDisconnect:
        pass
    except Exception:
        logger.exception("WebSocket error for %s", session_id)
    finally:
        relay.disconnect(session_id)
        hub.close(session_id)
        writer.cancel()
        await asyncio.gather(writer, return_exceptions=True)
