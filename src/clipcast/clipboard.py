#!/usr/bin/env python3
"""Clipboard access via external shell commands.

The clipboard is read and written by running configurable commands such as
``xclip -selection clipboard -o`` / ``xclip -selection clipboard`` on X11 or
``pbpaste`` / ``pbcopy`` on macOS. The read command's standard output is the
clipboard content; the write command receives the content on standard input.
"""

from __future__ import annotations

import asyncio
import logging
import shlex
from typing import Protocol

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """Raised when a clipboard command cannot be run or fails."""

    pass


class ClipboardProvider(Protocol):
    """Capability to read and write the local clipboard."""

    async def read(self) -> str:
        ...

    async def write(self, content: str) -> None:
        ...


def split_command(command: str) -> list[str]:
    """Split a shell command line into program and arguments.

    Args:
        command: Command line, e.g. "xclip -selection clipboard -o".

    Returns:
        Argument list suitable for exec.

    Raises:
        ClipboardError: If the command cannot be parsed or is empty.
    """
    try:
        args = shlex.split(command)
    except ValueError as e:
        raise ClipboardError(f"Invalid clipboard command {command!r}: {e}") from e
    if not args:
        raise ClipboardError("Empty clipboard command")
    return args


class ShellClipboard:
    """Clipboard provider backed by a read command and a write command."""

    def __init__(self, read_command: str, write_command: str) -> None:
        self.read_command = read_command
        self.write_command = write_command

    async def read(self) -> str:
        """Run the read command and return its output.

        Output that is not valid UTF-8 is treated as an empty clipboard.
        The exit status of the command is not checked.

        Returns:
            Current clipboard text.

        Raises:
            ClipboardError: If the command is invalid or cannot be started.
        """
        args = split_command(self.read_command)
        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
            )
            stdout, _ = await process.communicate()
        except OSError as e:
            raise ClipboardError(f"Failed to run {args[0]}: {e}") from e
        if process.returncode != 0:
            logger.debug("%s exited with status %s", args[0], process.returncode)
        try:
            return stdout.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Clipboard content is not valid UTF-8, treating as empty")
            return ""

    async def write(self, content: str) -> None:
        """Run the write command with content on its standard input.

        A non-zero exit status is logged and otherwise ignored.

        Args:
            content: Text to place on the clipboard.

        Raises:
            ClipboardError: If the command is invalid or cannot be started.
        """
        args = split_command(self.write_command)
        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.DEVNULL,
            )
            await process.communicate(content.encode("utf-8"))
        except OSError as e:
            raise ClipboardError(f"Failed to run {args[0]}: {e}") from e
        if process.returncode != 0:
            logger.warning("%s exited with status %d", args[0], process.returncode)
