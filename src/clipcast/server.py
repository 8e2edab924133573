#!/usr/bin/env python3
"""Server mode implementation for clipcast.

The server is started by the client's ssh tunnel, once per connection. It
speaks the protocol over its own stdin/stdout:
- Polls the local clipboard and sends changes to the client
- Applies clipboard content from the client and acknowledges it
- Answers the client's pings

It runs exactly one session and exits when that session ends. Logging goes
to stderr since stdout carries the protocol.

Usage:
    clipcast server --read-clipboard-cmd CMD --write-clipboard-cmd CMD
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from clipcast.clipboard import ShellClipboard
from clipcast.session import run_session
from clipcast.transport import open_stdio_transport

if TYPE_CHECKING:
    from clipcast.clipboard import ClipboardProvider
    from clipcast.config import ServerConfig
    from clipcast.session import EndReason

logger = logging.getLogger(__name__)


async def run_server(
    config: ServerConfig, provider: ClipboardProvider | None = None
) -> EndReason:
    """Run one session over stdin/stdout.

    Args:
        config: The server configuration.
        provider: Clipboard provider to use instead of the configured
            shell commands.

    Returns:
        The reason the session ended.
    """
    if provider is None:
        provider = ShellClipboard(config.read_clipboard_cmd, config.write_clipboard_cmd)

    transport = await open_stdio_transport()
    logger.debug("Client connected")
    try:
        return await run_session(
            transport.reader, transport.writer, provider, config.session
        )
    finally:
        await transport.close()
