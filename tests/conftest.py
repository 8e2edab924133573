#!/usr/bin/env python3
"""Pytest fixtures for clipcast tests.

Provides an in-memory outbound stream, a scripted clipboard provider and
session configurations with short timings.
"""

from __future__ import annotations

import asyncio

import pytest

from clipcast.protocol import Message, decode_message
from clipcast.session_config import SessionConfig


class RecordingWriter:
    """Stand-in for asyncio.StreamWriter that records written bytes."""

    def __init__(self) -> None:
        self.buffer = bytearray()
        self.closed = False
        self.drain_delay: float = 0.0
        self.drain_error: Exception | None = None

    def write(self, data: bytes) -> None:
        self.buffer.extend(data)

    async def drain(self) -> None:
        if self.drain_delay:
            await asyncio.sleep(self.drain_delay)
        if self.drain_error is not None:
            raise self.drain_error

    def close(self) -> None:
        self.closed = True

    async def wait_closed(self) -> None:
        pass

    def messages(self) -> list[Message]:
        """Decode every record written so far."""
        return [decode_message(line) for line in bytes(self.buffer).splitlines()]


class ScriptedClipboard:
    """Clipboard provider returning scripted reads and recording writes.

    Reads return the scripted values in order, then keep returning the
    last one. A scripted exception instance is raised instead. A write
    replaces the clipboard, so later reads return the written content.
    """

    def __init__(self, reads: list[str | Exception] | None = None) -> None:
        self.reads: list[str | Exception] = list(reads or [""])
        self.read_count = 0
        self.written: list[str] = []
        self.write_error: Exception | None = None

    async def read(self) -> str:
        index = min(self.read_count, len(self.reads) - 1)
        self.read_count += 1
        value = self.reads[index]
        if isinstance(value, Exception):
            raise value
        return value

    async def write(self, content: str) -> None:
        if self.write_error is not None:
            raise self.write_error
        self.written.append(content)
        self.reads = [content]
        self.read_count = 0


def make_reader(data: bytes = b"", eof: bool = True) -> asyncio.StreamReader:
    """Create a StreamReader with the given data for testing."""
    reader = asyncio.StreamReader()
    if data:
        reader.feed_data(data)
    if eof:
        reader.feed_eof()
    return reader


@pytest.fixture
def writer() -> RecordingWriter:
    """Create a fresh RecordingWriter."""
    return RecordingWriter()


@pytest.fixture
def clipboard() -> ScriptedClipboard:
    """Create a clipboard whose content is always empty."""
    return ScriptedClipboard()


@pytest.fixture
def fast_initiator() -> SessionConfig:
    """Client session config with short timings."""
    return SessionConfig(
        clipboard_poll_interval=0.01,
        ping_interval=0.02,
        pong_timeout=0.1,
        send_timeout=0.05,
        send_ack=False,
    )


@pytest.fixture
def fast_responder() -> SessionConfig:
    """Server session config with short timings."""
    return SessionConfig(
        clipboard_poll_interval=0.01,
        ping_interval=None,
        pong_timeout=None,
        send_timeout=0.05,
        send_ack=True,
    )


