import asyncio

from presence.connections import ConnectionHub, pump_outbox


def test_send_to_unknown_session_is_dropped():
    hub = ConnectionHub()
    hub.send("nobody", {"type": "newPlayer", "data": {}})
    assert len(hub) == 0


def test_send_enqueues_in_order():
    hub = ConnectionHub()
    queue = hub.open("a")
    hub.send("a", {"type": "one"})
    hub.send("a", {"type": "two"})
    assert [queue.get_nowait()["type"], queue.get_nowait()["type"]] == ["one", "two"]


def test_full_outbox_drops_newest():
    hub = ConnectionHub(outbox_size=1)
    queue = hub.open("a")
    hub.send("a", {"type": "kept"})
    hub.send("a", {"type": "dropped"})
    assert queue.qsize() == 1
    assert queue.get_nowait()["type"] == "kept"


def test_close():
    hub = ConnectionHub()
    hub.open("a")
    assert hub.is_open("a")
    hub.close("a")
    hub.close("a")
    assert not hub.is_open("a")


def test_pump_stops_when_send_fails():
    class BrokenSocket:
        def __init__(self):
            self.attempts = 0

        async def send_json(self, message):
            self.attempts += 1
            raise RuntimeError("socket closed")

    async def scenario():
        queue: asyncio.Queue = asyncio.Queue()
        queue.put_nowait({"type": "x"})
        queue.put_nowait({"type": "y"})
        ws = BrokenSocket()
        await asyncio.wait_for(pump_outbox(ws, queue, "a"), timeout=1)
        return ws.attempts, queue.qsize()

    assert asyncio.run(scenario()) == (1, 1)
