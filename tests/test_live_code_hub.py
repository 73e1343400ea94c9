import asyncio

from interviewhub.services.live_code_hub import LiveCodeHub


async def _subscribe(hub, interview_id):
    return hub.subscribe(interview_id)


def _closed_subscriber(hub, interview_id):
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(_subscribe(hub, interview_id))
    finally:
        loop.close()


def test_publish_reaches_every_listener_of_the_interview():
    hub = LiveCodeHub()

    async def scenario():
        _, first = hub.subscribe("iv-1")
        _, second = hub.subscribe("iv-1")
        _, other = hub.subscribe("iv-2")

        delivered = hub.publish("iv-1", {"type": "update"})

        assert delivered == 2
        assert await asyncio.wait_for(first.get(), 1) == {"type": "update"}
        assert await asyncio.wait_for(second.get(), 1) == {"type": "update"}
        assert other.empty()

    asyncio.run(scenario())


def test_closed_listener_is_dropped_without_failing_publish():
    hub = LiveCodeHub()
    _closed_subscriber(hub, "iv-1")

    async def scenario():
        _, live = hub.subscribe("iv-1")
        assert hub.subscriber_count("iv-1") == 2

        delivered = hub.publish("iv-1", {"type": "update", "event": None})

        assert delivered == 1
        assert hub.subscriber_count("iv-1") == 1
        assert await asyncio.wait_for(live.get(), 1) == {"type": "update", "event": None}

    asyncio.run(scenario())


def test_unsubscribe_forgets_empty_interviews():
    hub = LiveCodeHub()
    sub = _closed_subscriber(hub, "iv-1")

    hub.unsubscribe("iv-1", sub)
    hub.unsubscribe("iv-1", sub)

    assert hub.subscriber_count("iv-1") == 0
    assert hub.publish("iv-1", {"type": "update"}) == 0
