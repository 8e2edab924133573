#!/usr/bin/env python3
"""
Line-delimited JSON messages exchanged between client and server.

Every record on the wire is one JSON object terminated by a newline and
tagged by a "type" field:

    {"type":"ping"}
    {"type":"pong"}
    {"type":"clip","clip":"<text>"}
    {"type":"ack"}

JSON escapes quotes and control characters (including newlines) inside the
clipboard text, so a record never spans more than one line. Any record that
is not one of the four variants above is a protocol error.
"""
from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from typing import Union

# Maximum size of clipboard content in bytes (10 MB).
# Prevents memory exhaustion from extremely large clipboard data.
MAX_CONTENT_SIZE: int = 10485760

# Maximum length of one wire record in bytes. JSON escaping can expand each
# content byte to a six character \uXXXX sequence, plus the record envelope.
MAX_LINE_LENGTH: int = MAX_CONTENT_SIZE * 6 + 64

RECORD_SEPARATOR: bytes = b"\n"


@dataclass(frozen=True)
class Ping:
    """Liveness probe sent by the client."""


@dataclass(frozen=True)
class Pong:
    """Reply to a Ping."""


@dataclass(frozen=True)
class Clip:
    """A clipboard content snapshot."""

    content: str


@dataclass(frozen=True)
class Ack:
    """Acknowledgment of a received Clip."""


Message = Union[Ping, Pong, Clip, Ack]

_TAGS: dict[type, str] = {Ping: "ping", Pong: "pong", Clip: "clip", Ack: "ack"}
_EMPTY_VARIANTS: dict[str, Message] = {"ping": Ping(), "pong": Pong(), "ack": Ack()}


class ProtocolError(Exception):
    """
    Exception raised for protocol-level errors.

    Base class for errors raised while reading messages from the peer.
    """

    pass


class DecodeError(ProtocolError):
    """Raised when a wire record is not a well-formed message."""

    pass


class StreamClosed(ProtocolError):
    """Raised when the peer closes the stream."""

    pass


def validate_content_size(content: str) -> bool:
    """
    Check if clipboard text is within the allowed size limit.

    Args:
        content: Clipboard text to validate.

    Returns:
        True if the UTF-8 encoding is at most MAX_CONTENT_SIZE bytes.
    """
    return len(content.encode("utf-8")) <= MAX_CONTENT_SIZE


def encode_message(message: Message) -> bytes:
    """
    Encode a message as a single newline-terminated wire record.

    Args:
        message: The message to encode.

    Returns:
        UTF-8 encoded JSON object followed by the record separator.

    Raises:
        TypeError: If message is not one of the defined variants.
    """
    tag = _TAGS.get(type(message))
    if tag is None:
        raise TypeError(f"Cannot encode {type(message).__name__} as a message")
    record: dict[str, str] = {"type": tag}
    if isinstance(message, Clip):
        record["clip"] = message.content
    text = json.dumps(record, ensure_ascii=False, separators=(",", ":"))
    return text.encode("utf-8") + RECORD_SEPARATOR


def decode_message(line: bytes | str) -> Message:
    """
    Decode one wire record into a message.

    A trailing record separator is tolerated and stripped.

    Args:
        line: One line read from the peer.

    Returns:
        The decoded message.

    Raises:
        DecodeError: If the line is empty, not valid UTF-8 or JSON, not an
            object, nested too deeply to parse, or not tagged with a known
            message type.
    """
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Record is not valid UTF-8: {e}") from e
    line = line.rstrip("\r\n")
    if not line:
        raise DecodeError("Empty record")

    try:
        record = json.loads(line)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Record is not valid JSON: {e}") from e
    except RecursionError as e:
        raise DecodeError("Record is nested too deeply") from e
    if not isinstance(record, dict):
        raise DecodeError(f"Record is not a JSON object: {line[:80]!r}")

    tag = record.get("type")
    if tag == "clip":
        content = record.get("clip")
        if not isinstance(content, str):
            raise DecodeError("Clip record has no string 'clip' field")
        return Clip(content)
    if isinstance(tag, str) and tag in _EMPTY_VARIANTS:
        return _EMPTY_VARIANTS[tag]
    raise DecodeError(f"Unknown message type: {tag!r}")


async def read_message(reader: asyncio.StreamReader) -> Message:
    """
    Read and decode one message from an async stream.

    Args:
        reader: asyncio StreamReader to read from.

    Returns:
        The decoded message.

    Raises:
        StreamClosed: If the stream is at EOF.
        DecodeError: If the record is malformed or longer than the
            reader's limit.
    """
    try:
        line = await reader.readline()
    except ValueError as e:
        # readline() reports a LimitOverrunError as ValueError
        raise DecodeError(f"Record exceeds line length limit: {e}") from e
    if not line:
        raise StreamClosed("Connection closed")
    return decode_message(line)
