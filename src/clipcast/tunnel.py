#!/usr/bin/env python3
"""Remote-shell command line for reaching the server.

The client runs, for example:

    ssh -p 2222 myhost -- "clipcast server \\
        --write-clipboard-cmd 'xclip -selection clipboard' \\
        --read-clipboard-cmd 'xclip -selection clipboard -o'"

and talks to the remote server over the ssh process's stdin/stdout.
"""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clipcast.config import ClientConfig


def quote_remote_arg(value: str) -> str:
    """Wrap value in single quotes for the remote shell.

    Embedded single quotes are closed, escaped and reopened.

    Args:
        value: Argument to quote.

    Returns:
        Single-quoted argument.
    """
    return "'" + value.replace("'", "'\\''") + "'"


def build_remote_command(config: ClientConfig) -> str:
    """Build the server invocation the remote shell runs."""
    return " ".join(
        [
            config.remote_server_cmd,
            "server",
            "--write-clipboard-cmd",
            quote_remote_arg(config.remote_write_clipboard_cmd),
            "--read-clipboard-cmd",
            quote_remote_arg(config.remote_read_clipboard_cmd),
        ]
    )


def build_tunnel_command(config: ClientConfig) -> list[str]:
    """Build the full remote-shell argument list.

    Args:
        config: The client configuration.

    Returns:
        Argument list: program, extra ssh args, host, "--", remote command.

    Raises:
        ValueError: If ssh_args cannot be parsed.
    """
    return [
        config.ssh_program,
        *shlex.split(config.ssh_args),
        config.host,
        "--",
        build_remote_command(config),
    ]
