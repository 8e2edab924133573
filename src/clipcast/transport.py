#!/usr/bin/env python3
"""Duplex byte streams carrying the line-delimited protocol.

The client spawns a remote-shell tunnel and talks over the child's
stdin/stdout. The server talks over its own stdin/stdout, which ssh
connects to the client.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from contextlib import suppress
from dataclasses import dataclass
from typing import TYPE_CHECKING

from clipcast.protocol import MAX_LINE_LENGTH
from clipcast.tunnel import build_tunnel_command

if TYPE_CHECKING:
    from clipcast.config import ClientConfig

logger = logging.getLogger(__name__)

# Seconds to wait for the tunnel process to exit after its stdin is closed.
TUNNEL_EXIT_TIMEOUT: float = 2.0


@dataclass
class Transport:
    """Inbound line source and outbound sink for one connection.

    Attributes:
        reader: Stream of inbound records.
        writer: Sink for outbound records.
        process: Tunnel process owning the streams, if any.
    """

    reader: asyncio.StreamReader
    writer: asyncio.StreamWriter
    process: asyncio.subprocess.Process | None = None

    async def close(self) -> None:
        """Close the outbound stream and reap the tunnel process.

        The process is terminated if it does not exit on its own shortly
        after its stdin is closed.
        """
        self.writer.close()
        if self.process is None:
            # stdio pipe writers have no close waiter
            return
        with suppress(OSError):
            await self.writer.wait_closed()
        try:
            await asyncio.wait_for(self.process.wait(), timeout=TUNNEL_EXIT_TIMEOUT)
        except asyncio.TimeoutError:
            logger.debug("Tunnel process %d did not exit, terminating", self.process.pid)
            with suppress(ProcessLookupError):
                self.process.terminate()
            await self.process.wait()


async def spawn_tunnel(config: ClientConfig) -> Transport:
    """Start the remote-shell tunnel to the server.

    Args:
        config: The client configuration.

    Returns:
        Transport over the tunnel's stdin/stdout.

    Raises:
        OSError: If the tunnel process cannot be started.
    """
    args = build_tunnel_command(config)
    logger.info("Connecting to remote server: %s", args)
    process = await asyncio.create_subprocess_exec(
        *args,
        stdin=asyncio.subprocess.PIPE,
        stdout=asyncio.subprocess.PIPE,
        limit=MAX_LINE_LENGTH,
    )
    if process.stdin is None or process.stdout is None:
        raise OSError(f"{args[0]} started without stdio pipes")
    return Transport(reader=process.stdout, writer=process.stdin, process=process)


async def open_stdio_transport() -> Transport:
    """Wrap this process's stdin/stdout as asyncio streams.

    Returns:
        Transport reading from stdin and writing to stdout.
    """
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader(limit=MAX_LINE_LENGTH)
    protocol = asyncio.StreamReaderProtocol(reader)
    await loop.connect_read_pipe(lambda: protocol, sys.stdin)
    write_transport, write_protocol = await loop.connect_write_pipe(
        asyncio.streams.FlowControlMixin, sys.stdout
    )
    writer = asyncio.StreamWriter(write_transport, write_protocol, reader, loop)
    return Transport(reader=reader, writer=writer)
