"""Message bus tests: concurrent posts never interleave or drop messages."""

import asyncio

import pytest

from care_agent.messaging import MessageBus

pytestmark = pytest.mark.anyio


class TestMessageBus:

    async def test_post_returns_message(self):
        bus = MessageBus()
        message = await bus.post("patient", "physician", "Patient query: pain")
        assert message.body == "Patient query: pain"
        assert bus.messages() == (message,)

    async def test_recipient_filter(self):
        bus = MessageBus()
        await bus.post("patient", "physician", "one")
        await bus.post("nurse", "technician", "two")
        await bus.post("patient", "physician", "three")
        assert [m.body for m in bus.messages("physician")] == ["one", "three"]
        assert bus.messages("pharmacist") == ()

    async def test_concurrent_posts_are_all_kept(self):
        bus = MessageBus()
        await asyncio.gather(*(bus.post("patient", "physician", f"q{i}") for i in range(50)))
        assert len(bus) == 50
        assert sorted(m.body for m in bus.messages()) == sorted(f"q{i}" for i in range(50))

    async def test_snapshot_is_not_affected_by_later_posts(self):
        bus = MessageBus()
        await bus.post("a", "b", "first")
        snapshot = bus.messages()
        await bus.post("a", "b", "second")
        assert len(snapshot) == 1
