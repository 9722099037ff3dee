import asyncio
import pytest

from conftest import BrokenChannel, FakeChannel
from realtime import Dispatcher
from schemas.board import BoardEvent
from services.game.errors import DeliveryFailure


def test_deliver_to_every_seat_in_order(registry):
    async def _run():
        x, o = FakeChannel(), FakeChannel()
        await registry.join("b", "p1", x)
        await registry.join("b", "p2", o)
        cells = await registry.move("b", "X", 3)
        await Dispatcher(registry).deliver("b", BoardEvent.state(cells))
        expected = {"cmd": "STATE", "play_book": ["", "", "", "X", "", "", "", "", ""]}
        assert x.sent == [expected]
        assert o.sent == [expected]
    asyncio.run(_run())


def test_deliver_to_unknown_board_is_noop(registry):
    asyncio.run(Dispatcher(registry).deliver("nowhere", BoardEvent.reset([""] * 9)))


def test_failed_send_does_not_stop_others(registry):
    async def _run():
        survivor = FakeChannel()
        await registry.join("b", "dead", BrokenChannel())
        await registry.join("b", "alive", survivor)
        cells = await registry.reset("b")
        with pytest.raises(DeliveryFailure) as exc:
            await Dispatcher(registry).deliver("b", BoardEvent.reset(cells))
        assert exc.value.failed == ["dead"]
        assert survivor.sent == [{"cmd": "RESET", "play_book": [""] * 9}]
        # state change is not rolled back
        assert (await registry.describe("b")).seat_count == 2
    asyncio.run(_run())


def test_event_payloads():
    assert BoardEvent.complete().payload() == {"cmd": "COMPLETE"}
    assert BoardEvent.init("O", [""] * 9, "abc").payload() == {
        "cmd": "INIT",
        "player": "O",
        "play_book": [""] * 9,
        "client_id": "abc",
    }


class _LoggingChannel:
    def __init__(self, name, log):
        self.name = name
        self.log = log

    async def send_json(self, data):
        self.log.append((self.name, data["cmd"]))


class _ReentrantChannel:
    """Reads the registry from inside a send, which only works with the lock released."""

    def __init__(self, registry):
        self.registry = registry
        self.views = []

    async def send_json(self, data):
        self.views.append(await asyncio.wait_for(self.registry.describe("b"), 1))


def test_deliver_follows_seat_order(registry):
    async def _run():
        log = []
        await registry.join("b", "first", _LoggingChannel("first", log))
        await registry.join("b", "second", _LoggingChannel("second", log))
        await Dispatcher(registry).deliver("b", BoardEvent.reset([""] * 9))
        await registry.leave("b", "first")
        await registry.join("b", "third", _LoggingChannel("third", log))
        await Dispatcher(registry).deliver("b", BoardEvent.leave([""] * 9))
        assert log == [
            ("first", "RESET"), ("second", "RESET"),
            ("second", "LEAVE"), ("third", "LEAVE"),
        ]
    asyncio.run(_run())


def test_registry_is_free_while_sending(registry):
    async def _run():
        channel = _ReentrantChannel(registry)
        await registry.join("b", "p1", channel)
        cells = await registry.move("b", "O", 5)
        await Dispatcher(registry).deliver("b", BoardEvent.state(cells))
        assert len(channel.views) == 1
        assert channel.views[0].cells[5] == "O"
    asyncio.run(_run())
