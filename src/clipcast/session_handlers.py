#!/usr/bin/env python3
"""Session event handlers.

This module provides the handlers the session loop runs for each event:
- send_message: write one message to the peer within the send timeout
- handle_clipboard_poll: read the local clipboard and send changes
- handle_incoming_message: apply one message received from the peer

Fatal conditions are raised as SessionEnded carrying the EndReason.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from clipcast.clipboard import ClipboardError
from clipcast.protocol import Ack, Clip, Ping, Pong, encode_message, validate_content_size
from clipcast.session_result import EndReason, SessionEnded

if TYPE_CHECKING:
    from clipcast.clipboard import ClipboardProvider
    from clipcast.protocol import Message
    from clipcast.session_config import SessionConfig
    from clipcast.session_state import SessionState

logger = logging.getLogger(__name__)


async def send_message(
    writer: asyncio.StreamWriter, message: Message, timeout: float
) -> None:
    """Write a message to the peer and flush it within timeout seconds.

    Args:
        writer: The asyncio StreamWriter for the outbound stream.
        message: The message to send.
        timeout: Seconds allowed for the write and flush.

    Raises:
        SessionEnded: SEND_TIMEOUT if the flush does not complete in time,
            CONNECTION_CLOSED if the stream is broken.
    """
    data = encode_message(message)
    try:
        writer.write(data)
        await asyncio.wait_for(writer.drain(), timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.error("Timed out sending %s after %.1fs", type(message).__name__, timeout)
        raise SessionEnded(EndReason.SEND_TIMEOUT) from e
    except OSError as e:
        # BrokenPipeError and ConnectionResetError once the peer is gone
        raise SessionEnded(EndReason.CONNECTION_CLOSED, str(e)) from e


async def handle_clipboard_poll(
    state: SessionState,
    provider: ClipboardProvider,
    writer: asyncio.StreamWriter,
    config: SessionConfig,
) -> None:
    """Read the local clipboard and send it if it changed.

    Content equal to the last observed clipboard (sent or received) is not
    sent again. Read failures are logged and otherwise ignored.

    Args:
        state: The session state.
        provider: The local clipboard provider.
        writer: The asyncio StreamWriter for the outbound stream.
        config: The session configuration.
    """
    try:
        content = await provider.read()
    except ClipboardError as e:
        logger.warning("Clipboard read failed: %s", e)
        return

    if content == state.last_observed_clipboard:
        return

    state.last_observed_clipboard = content
    if not validate_content_size(content):
        logger.warning("Clipboard content exceeds 10 MB limit, skipping")
        return

    logger.info("Sending clipboard: len=%d", len(content))
    await send_message(writer, Clip(content), config.send_timeout)


async def handle_incoming_message(
    state: SessionState,
    message: Message,
    provider: ClipboardProvider,
    writer: asyncio.StreamWriter,
    config: SessionConfig,
    now: float,
) -> None:
    """Apply one message received from the peer.

    Args:
        state: The session state.
        message: The decoded message.
        provider: The local clipboard provider.
        writer: The asyncio StreamWriter for the outbound stream.
        config: The session configuration.
        now: Event loop time at which the message was handled.

    Raises:
        SessionEnded: PROVIDER_FAILURE if received content cannot be
            written to the clipboard, or any reason raised by send_message.
    """
    if isinstance(message, Clip):
        logger.info("Received clipboard: len=%d", len(message.content))
        # Record before writing so the next poll does not echo it back
        state.last_observed_clipboard = message.content
        try:
            await provider.write(message.content)
        except ClipboardError as e:
            logger.error("Error setting clipboard: %s", e)
            raise SessionEnded(EndReason.PROVIDER_FAILURE, str(e)) from e
        if config.send_ack:
            await send_message(writer, Ack(), config.send_timeout)
    elif isinstance(message, Ping):
        logger.debug("Received ping")
        await send_message(writer, Pong(), config.send_timeout)
    elif isinstance(message, Pong):
        if config.enforces_liveness:
            logger.debug("Received pong")
            state.record_pong(now)
        else:
            logger.debug("Ignoring unexpected pong")
    elif isinstance(message, Ack):
        logger.debug("Received ack")
    else:
        raise TypeError(f"Unhandled message type: {type(message).__name__}")
