#!/usr/bin/env python3
"""Per-session timing and role configuration.

The client and server run the same session loop; they differ only in which
timers are active and whether received clipboard content is acknowledged.
"""

from __future__ import annotations

from dataclasses import dataclass

from clipcast.session_constants import (
    CLIPBOARD_POLL_INTERVAL,
    PING_INTERVAL,
    PONG_TIMEOUT,
    SEND_TIMEOUT,
)


@dataclass(frozen=True)
class SessionConfig:
    """Timing and behavior of one session.

    Attributes:
        clipboard_poll_interval: Seconds between clipboard reads.
        ping_interval: Seconds between pings, or None to never ping.
        pong_timeout: Seconds without a pong before the session ends, or
            None to disable the liveness check.
        send_timeout: Seconds allowed to write and flush one message.
        send_ack: Whether to reply with Ack after applying received content.
    """

    clipboard_poll_interval: float = CLIPBOARD_POLL_INTERVAL
    ping_interval: float | None = PING_INTERVAL
    pong_timeout: float | None = PONG_TIMEOUT
    send_timeout: float = SEND_TIMEOUT
    send_ack: bool = False

    @classmethod
    def initiator(
        cls,
        clipboard_poll_interval: float = CLIPBOARD_POLL_INTERVAL,
        ping_interval: float = PING_INTERVAL,
        pong_timeout: float = PONG_TIMEOUT,
    ) -> SessionConfig:
        """Config for the client side: pings and enforces liveness."""
        return cls(
            clipboard_poll_interval=clipboard_poll_interval,
            ping_interval=ping_interval,
            pong_timeout=pong_timeout,
            send_ack=False,
        )

    @classmethod
    def responder(
        cls,
        clipboard_poll_interval: float = CLIPBOARD_POLL_INTERVAL,
        send_ack: bool = True,
    ) -> SessionConfig:
        """Config for the server side: answers pings, never sends them."""
        return cls(
            clipboard_poll_interval=clipboard_poll_interval,
            ping_interval=None,
            pong_timeout=None,
            send_ack=send_ack,
        )

    @property
    def enforces_liveness(self) -> bool:
        return self.pong_timeout is not None
