#!/usr/bin/env python3
"""Main synchronization session loop.

This module provides run_session, which drives one connection until it
must end. A single task owns the stream: it polls the local clipboard,
sends pings, dispatches inbound messages and checks peer liveness, handling
one event per iteration. Outbound messages are therefore written in the
order their events were handled and inbound messages are applied in
arrival order.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from typing import TYPE_CHECKING, NoReturn

from clipcast.protocol import DecodeError, Ping, StreamClosed, read_message
from clipcast.session_events import EventSource, IntervalTimer, wait_for_event
from clipcast.session_handlers import (
    handle_clipboard_poll,
    handle_incoming_message,
    send_message,
)
from clipcast.session_result import EndReason, SessionEnded
from clipcast.session_state import SessionState

if TYPE_CHECKING:
    from clipcast.clipboard import ClipboardProvider
    from clipcast.session_config import SessionConfig

logger = logging.getLogger(__name__)


async def run_session(
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
    provider: ClipboardProvider,
    config: SessionConfig,
) -> EndReason:
    """Run one synchronization session until it ends.

    Args:
        reader: The asyncio StreamReader for inbound messages.
        writer: The asyncio StreamWriter for outbound messages.
        provider: The local clipboard provider.
        config: Timing and role of this session.

    Returns:
        The reason the session ended.
    """
    loop = asyncio.get_running_loop()
    state = SessionState(last_liveness_at=loop.time())
    try:
        await session_loop_inner(state, reader, writer, provider, config)
    except SessionEnded as e:
        if e.reason is EndReason.CONNECTION_CLOSED:
            logger.info("Session ended: %s", e)
        else:
            logger.error("Session ended: %s", e)
        return e.reason


async def session_loop_inner(
    state: SessionState,
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
    provider: ClipboardProvider,
    config: SessionConfig,
) -> NoReturn:
    """Inner session loop, exits only by raising SessionEnded.

    Args:
        state: The session state.
        reader: The asyncio StreamReader for inbound messages.
        writer: The asyncio StreamWriter for outbound messages.
        provider: The local clipboard provider.
        config: Timing and role of this session.

    Raises:
        SessionEnded: When the session must end, with the reason.
    """
    loop = asyncio.get_running_loop()
    now = loop.time()
    timers = {
        EventSource.CLIPBOARD_POLL: IntervalTimer.start(config.clipboard_poll_interval, now)
    }
    if config.ping_interval is not None:
        timers[EventSource.PING] = IntervalTimer.start(config.ping_interval, now)

    read_task = asyncio.create_task(read_message(reader))
    try:
        while True:
            deadline = None
            if config.pong_timeout is not None:
                deadline = state.liveness_deadline(config.pong_timeout)

            source = await wait_for_event(read_task, timers, deadline)

            if source is EventSource.LIVENESS_TIMEOUT:
                raise SessionEnded(
                    EndReason.LIVENESS_TIMEOUT,
                    f"no pong for {config.pong_timeout:.1f}s",
                )
            if source is EventSource.INBOUND:
                message = _inbound_result(read_task)
                await handle_incoming_message(
                    state, message, provider, writer, config, loop.time()
                )
                read_task = asyncio.create_task(read_message(reader))
            elif source is EventSource.CLIPBOARD_POLL:
                timers[source].consume(loop.time())
                await handle_clipboard_poll(state, provider, writer, config)
            elif source is EventSource.PING:
                timers[source].consume(loop.time())
                logger.debug("Sending ping")
                await send_message(writer, Ping(), config.send_timeout)
    finally:
        await _discard_read_task(read_task)


def _inbound_result(read_task: asyncio.Task):
    """Return the message read by a finished read task.

    Raises:
        SessionEnded: PROTOCOL_ERROR for a malformed record,
            CONNECTION_CLOSED for EOF or a read error.
    """
    try:
        return read_task.result()
    except DecodeError as e:
        raise SessionEnded(EndReason.PROTOCOL_ERROR, str(e)) from e
    except StreamClosed as e:
        raise SessionEnded(EndReason.CONNECTION_CLOSED, str(e)) from e
    except OSError as e:
        raise SessionEnded(EndReason.CONNECTION_CLOSED, str(e)) from e


async def _discard_read_task(read_task: asyncio.Task) -> None:
    """Cancel a pending read, or consume the outcome of a finished one."""
    if read_task.done():
        if not read_task.cancelled():
            read_task.exception()
        return
    read_task.cancel()
    with suppress(asyncio.CancelledError):
        await read_task
