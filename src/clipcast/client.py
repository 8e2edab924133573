#!/usr/bin/env python3
"""Client mode implementation for clipcast.

This module provides the main entry point for client mode, which reaches
a clipcast server through an ssh tunnel. The client polls the local
clipboard and sends changes to the server, applies clipboard updates from
the server, and pings the server to detect a dead tunnel.

See client_retry.py for connection handling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clipcast.client_retry import run_client_with_retry
from clipcast.clipboard import ShellClipboard

if TYPE_CHECKING:
    from clipcast.config import ClientConfig


async def run_client(config: ClientConfig) -> None:
    """Run client mode until the process is killed.

    Args:
        config: The client configuration.
    """
    provider = ShellClipboard(config.read_clipboard_cmd, config.write_clipboard_cmd)
    await run_client_with_retry(config, provider)
