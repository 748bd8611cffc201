"""Outbound queues for live websocket connections."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class ConnectionHub:
    """Maps session id -> bounded outbox drained by that connection's writer task.

    ``send`` never blocks: messages for unknown sessions or for a full outbox
    are dropped, so a slow peer cannot hold up anyone else.
    """

    def __init__(self, outbox_size: int = 256):
        self.outbox_size = outbox_size
        self._outboxes: Dict[str, asyncio.Queue] = {}

    def open(self, session_id: str) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.outbox_size)
        self._outboxes[session_id] = queue
        return queue

    def close(self, session_id: str) -> None:
        self._outboxes.pop(session_id, None)

    def is_open(self, session_id: str) -> bool:
        return session_id in self._outboxes

    def send(self, session_id: str, message: Dict[str, Any]) -> None:
        queue = self._outboxes.get(session_id)
        if queue is None:
            return
        try:
            queue.put_nowait(message)
        except asyncio.QueueFull:
            logger.warning("Outbox full for %s, dropping %s", session_id, message.get("type"))

    def __len__(self) -> int:
        return len(self._outboxes)


async def pump_outbox(ws: WebSocket, queue: asyncio.Queue, session_id: str) -> None:
    """Forward queued messages to *ws* until the socket fails or the task is cancelled."""
    while True:
        message = await queue.get()
        try:
            await ws.send_json(message)
        except Exception as exc:
            # Client went away mid-send; the receive loop handles the disconnect.
            logger.warning("Send to %s failed: %r", session_id, exc)
            return


__all__ = ["ConnectionHub", "pump_outbox"]
