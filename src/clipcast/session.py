#!/usr/bin/env python3
"""Clipboard synchronization session.

This module re-exports session components from submodules for
convenient imports. The actual implementations are in:
- session_config: SessionConfig
- session_state: SessionState
- session_result: EndReason, SessionEnded
- session_loop: run_session
"""

from clipcast.session_config import SessionConfig
from clipcast.session_loop import run_session
from clipcast.session_result import EndReason, SessionEnded
from clipcast.session_state import SessionState

__all__ = [
    "EndReason",
    "SessionConfig",
    "SessionEnded",
    "SessionState",
    "run_session",
]
