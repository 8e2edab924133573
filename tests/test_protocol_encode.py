#!/usr/bin/env python3
"""
Unit tests for message encoding.

Tests encode_message output format and validate_content_size.
"""
import json

import pytest

from clipcast.protocol import (
    MAX_CONTENT_SIZE,
    Ack,
    Clip,
    Ping,
    Pong,
    decode_message,
    encode_message,
    validate_content_size,
)


def test_encode_ping() -> None:
    """Test Ping encodes to a tagged object and newline."""
    assert encode_message(Ping()) == b'{"type":"ping"}\n'


def test_encode_pong() -> None:
    assert encode_message(Pong()) == b'{"type":"pong"}\n'


def test_encode_ack() -> None:
    assert encode_message(Ack()) == b'{"type":"ack"}\n'


def test_encode_clip() -> None:
    """Test Clip carries its content under the clip key."""
    assert encode_message(Clip("hello")) == b'{"type":"clip","clip":"hello"}\n'


def test_encode_clip_escapes_newlines_and_quotes() -> None:
    """Test encoded clip text never spans more than one line."""
    encoded = encode_message(Clip('line one\nline "two"\r\n\ttab'))
    assert encoded.endswith(b"\n")
    assert encoded.count(b"\n") == 1
    assert b"\r" not in encoded
    assert json.loads(encoded) == {"type": "clip", "clip": 'line one\nline "two"\r\n\ttab'}


def test_encode_clip_keeps_non_ascii_as_utf8() -> None:
    """Test non-ASCII text is written as UTF-8 rather than escaped."""
    encoded = encode_message(Clip("héllo ✓"))
    assert "héllo ✓".encode("utf-8") in encoded


def test_encode_rejects_non_message() -> None:
    with pytest.raises(TypeError):
        encode_message("ping")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "message",
    [
        Ping(),
        Pong(),
        Ack(),
        Clip(""),
        Clip("multi\nline\n"),
        Clip('quote " and backslash \\'),
        Clip("日本語 and emoji 🎉"),
        Clip("\x00\x1b[31mcontrol\x7f"),
    ],
)
def test_decode_inverts_encode(message) -> None:
    """Test decode(encode(m)) == m for every variant."""
    assert decode_message(encode_message(message)) == message


def test_validate_content_size_within_limit() -> None:
    """Test content within limit returns True."""
    assert validate_content_size("x" * 1000) is True


def test_validate_content_size_at_limit() -> None:
    assert validate_content_size("x" * MAX_CONTENT_SIZE) is True


def test_validate_content_size_over_limit() -> None:
    assert validate_content_size("x" * (MAX_CONTENT_SIZE + 1)) is False


def test_validate_content_size_counts_utf8_bytes() -> None:
    """Test the limit applies to encoded bytes, not characters."""
    content = "é" * (MAX_CONTENT_SIZE // 2 + 1)
    assert validate_content_size(content) is False
