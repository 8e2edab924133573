#!/usr/bin/env python3
"""Event sources multiplexed by the session loop.

The session loop waits for the first of four sources to become ready:
the clipboard poll timer, the ping timer, an inbound line, and the liveness
deadline. wait_for_event() suspends until one of them is ready without busy
polling, and never cancels the pending read so no inbound data is lost.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum


class EventSource(Enum):
    """A source of work for the session loop."""

    CLIPBOARD_POLL = "clipboard poll"
    PING = "ping"
    INBOUND = "inbound"
    LIVENESS_TIMEOUT = "liveness timeout"


@dataclass
class IntervalTimer:
    """Periodic timer driven by event loop time.

    The first tick is due immediately when the timer starts. Ticks missed
    while the loop was busy are skipped rather than delivered in a burst.

    Attributes:
        interval: Seconds between ticks.
        next_fire: Event loop time at which the next tick is due.
    """

    interval: float
    next_fire: float

    @classmethod
    def start(cls, interval: float, now: float) -> IntervalTimer:
        """Create a timer whose first tick is due at now."""
        return cls(interval=interval, next_fire=now)

    def is_due(self, now: float) -> bool:
        return now >= self.next_fire

    def consume(self, now: float) -> None:
        """Acknowledge the current tick and schedule the next one."""
        self.next_fire += self.interval
        if self.next_fire <= now:
            self.next_fire = now + self.interval


async def wait_for_event(
    read_task: asyncio.Task,
    timers: dict[EventSource, IntervalTimer],
    liveness_deadline: float | None,
) -> EventSource:
    """Wait until the first event source is ready and return it.

    When several sources are ready at once, the liveness deadline wins,
    then an inbound message, then the timer that was due earliest.

    Args:
        read_task: Pending task reading the next inbound message.
        timers: Active interval timers keyed by source.
        liveness_deadline: Event loop time after which the peer is
            considered unresponsive, or None if liveness is not enforced.

    Returns:
        The source that is ready. Timers are not consumed here.
    """
    loop = asyncio.get_running_loop()
    while True:
        now = loop.time()
        if liveness_deadline is not None and now >= liveness_deadline:
            return EventSource.LIVENESS_TIMEOUT
        if read_task.done():
            return EventSource.INBOUND
        due = [source for source, timer in timers.items() if timer.is_due(now)]
        if due:
            return min(due, key=lambda source: timers[source].next_fire)

        deadlines = [timer.next_fire for timer in timers.values()]
        if liveness_deadline is not None:
            deadlines.append(liveness_deadline)
        timeout = max(0.0, min(deadlines) - now) if deadlines else None
        # asyncio.wait() leaves read_task running when the timeout expires
        await asyncio.wait({read_task}, timeout=timeout)
