#!/usr/bin/env python3
"""Client and server configuration built from command-line options."""

from __future__ import annotations

from dataclasses import dataclass

from clipcast.client_constants import (
    DEFAULT_CLIENT_READ_CMD,
    DEFAULT_CLIENT_WRITE_CMD,
    DEFAULT_REMOTE_SERVER_CMD,
    DEFAULT_SERVER_READ_CMD,
    DEFAULT_SERVER_WRITE_CMD,
    RECONNECT_WAIT,
    SSH_PROGRAM,
)
from clipcast.session_config import SessionConfig


@dataclass(frozen=True)
class ServerConfig:
    """Configuration for server mode.

    Attributes:
        read_clipboard_cmd: Command printing the local clipboard.
        write_clipboard_cmd: Command setting the local clipboard from stdin.
        session: Session timing and role.
    """

    read_clipboard_cmd: str = DEFAULT_SERVER_READ_CMD
    write_clipboard_cmd: str = DEFAULT_SERVER_WRITE_CMD
    session: SessionConfig = SessionConfig.responder()


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for client mode.

    Attributes:
        host: SSH destination running the server.
        ssh_args: Extra arguments for ssh, as one shell-quoted string.
        read_clipboard_cmd: Command printing the local clipboard.
        write_clipboard_cmd: Command setting the local clipboard from stdin.
        remote_server_cmd: How to invoke clipcast on the remote host.
        remote_read_clipboard_cmd: Read command passed to the remote server.
        remote_write_clipboard_cmd: Write command passed to the remote server.
        reconnect_wait: Seconds to wait before reconnecting.
        ssh_program: The remote-shell program to run.
        session: Session timing and role.
    """

    host: str
    ssh_args: str = ""
    read_clipboard_cmd: str = DEFAULT_CLIENT_READ_CMD
    write_clipboard_cmd: str = DEFAULT_CLIENT_WRITE_CMD
    remote_server_cmd: str = DEFAULT_REMOTE_SERVER_CMD
    remote_read_clipboard_cmd: str = DEFAULT_SERVER_READ_CMD
    remote_write_clipboard_cmd: str = DEFAULT_SERVER_WRITE_CMD
    reconnect_wait: float = RECONNECT_WAIT
    ssh_program: str = SSH_PROGRAM
    session: SessionConfig = SessionConfig.initiator()
