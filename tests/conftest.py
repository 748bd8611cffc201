import random
from typing import Any, Dict, List, Tuple

import pytest
from fastapi.testclient import TestClient

from presence.app import create_app
from presence.config import Settings
from presence.registry import SessionRegistry
from presence.relay import RelayHandler


class RecordingTransport:
    """Collects every (recipient, message) pair the relay enqueues."""

    def __init__(self):
        self.sent: List[Tuple[str, Dict[str, Any]]] = []

    def send(self, session_id: str, message: Dict[str, Any]) -> None:
        self.sent.append((session_id, message))

    def to(self, session_id: str) -> List[Dict[str, Any]]:
        return [m for sid, m in self.sent if sid == session_id]

    def of_type(self, event: str) -> List[Tuple[str, Dict[str, Any]]]:
        return [(sid, m) for sid, m in self.sent if m["type"] == event]

    def clear(self) -> None:
        self.sent.clear()


@pytest.fixture
def registry():
    return SessionRegistry(rng=random.Random(1234))


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def relay(registry, transport):
    return RelayHandler(registry, transport)


@pytest.fixture
def app(tmp_path):
    (tmp_path / "index.html").write_text("<html><body>presence</body></html>")
    return create_app(Settings(public_dir=str(tmp_path)))


@pytest.fixture
def client(app):
    # Entering the client keeps every websocket on one event loop.
    with TestClient(app) as test_client:
        yield test_client
