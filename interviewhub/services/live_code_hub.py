# interviewhub/services/live_code_hub.py
# In-process fan-out of live-code events to websocket listeners.
import asyncio
import logging
import threading
from collections import defaultdict
from typing import Any, Dict, Set, Tuple

logger = logging.getLogger(__name__)

Subscriber = Tuple[asyncio.AbstractEventLoop, asyncio.Queue]


class LiveCodeHub:
    """
    interview_id -> set of (loop, queue). publish() may be called from any
    thread (sync route handlers run in the threadpool); delivery is always
    scheduled on the listener's own loop.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._subscribers: Dict[str, Set[Subscriber]] = defaultdict(set)

    def subscribe(self, interview_id: str) -> Subscriber:
        sub = (asyncio.get_running_loop(), asyncio.Queue())
        with self._lock:
            self._subscribers[interview_id].add(sub)
        logger.info("live-code subscriber joined %s", interview_id)
        return sub

    def unsubscribe(self, interview_id: str, sub: Subscriber) -> None:
        with self._lock:
            subs = self._subscribers.get(interview_id)
            if subs is None:
                return
            subs.discard(sub)
            if not subs:
                del self._subscribers[interview_id]
        logger.info("live-code subscriber left %s", interview_id)

    def subscriber_count(self, interview_id: str) -> int:
        with self._lock:
            return len(self._subscribers.get(interview_id, ()))

    def publish(self, interview_id: str, payload: Dict[str, Any]) -> int:
        """Best effort: a dead listener is dropped, the caller never sees the failure."""
        with self._lock:
            subs = list(self._subscribers.get(interview_id, ()))

        delivered = 0
        for sub in subs:
            loop, queue = sub
            try:
                loop.call_soon_threadsafe(queue.put_nowait, payload)
                delivered += 1
            except RuntimeError as e:  # loop already closed
                logger.warning("dropping live-code listener on %s: %s", interview_id, e)
                self.unsubscribe(interview_id, sub)
        return delivered


live_code_hub = LiveCodeHub()
