#!/usr/bin/env python3
"""Per-connection synchronization state.

A new SessionState is created for every connection, so a reconnect starts
with an empty last observed clipboard and may resend unchanged content. The
peer's state was reset too, so this is the desired behavior.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SessionState:
    """State owned by one running session.

    Attributes:
        last_observed_clipboard: Last clipboard text sent to or applied from
            the peer. Used to suppress duplicate sends.
        last_liveness_at: Event loop time of the last accepted pong, or of
            session start if none has arrived yet.
    """

    last_liveness_at: float
    last_observed_clipboard: str = ""

    def record_pong(self, now: float) -> None:
        """Record that the peer answered a ping at time now."""
        self.last_liveness_at = now

    def liveness_deadline(self, pong_timeout: float) -> float:
        """Return the event loop time at which the peer is considered dead."""
        return self.last_liveness_at + pong_timeout
