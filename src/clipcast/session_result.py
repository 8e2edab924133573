#!/usr/bin/env python3
"""Reasons a session can end."""

from __future__ import annotations

from enum import Enum


class EndReason(Enum):
    """Why a session stopped. Every reason is recoverable by reconnecting."""

    CONNECTION_CLOSED = "connection closed"
    PROTOCOL_ERROR = "protocol error"
    SEND_TIMEOUT = "send timeout"
    LIVENESS_TIMEOUT = "liveness timeout"
    PROVIDER_FAILURE = "clipboard provider failure"


class SessionEnded(Exception):
    """Raised to stop a session, carrying the reason it ended.

    Attributes:
        reason: The EndReason for the termination.
        detail: Optional human-readable detail.
    """

    def __init__(self, reason: EndReason, detail: str = "") -> None:
        self.reason = reason
        self.detail = detail
        message = reason.value if not detail else f"{reason.value}: {detail}"
        super().__init__(message)
