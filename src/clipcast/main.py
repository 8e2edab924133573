"""CLI handling for clipcast.

This module provides the command-line interface for clipcast, handling
argument parsing via click, logging configuration, and dispatching to server
or client mode.

Usage:
    clipcast client --host HOST [--ssh-args ARGS] [options]
    clipcast server [--read-clipboard-cmd CMD] [--write-clipboard-cmd CMD]
    clipcast generate complete-bash|complete-zsh|complete-fish
"""

import click
import sys

from clipcast.client_constants import (
    DEFAULT_CLIENT_READ_CMD,
    DEFAULT_CLIENT_WRITE_CMD,
    DEFAULT_REMOTE_SERVER_CMD,
    DEFAULT_SERVER_READ_CMD,
    DEFAULT_SERVER_WRITE_CMD,
    RECONNECT_WAIT,
)
from clipcast.main_completion import SHELLS, completion_source
from clipcast.main_logging import configure_logging
from clipcast.session_constants import CLIPBOARD_POLL_INTERVAL, PING_INTERVAL, PONG_TIMEOUT

_positive = click.FloatRange(min=0, min_open=True)


@click.group()
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable DEBUG-level logging (overrides CLIPCAST_LOG)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Synchronize the clipboard between two machines over ssh."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command()
@click.option(
    "--write-clipboard-cmd",
    default=DEFAULT_SERVER_WRITE_CMD,
    show_default=True,
    help="Command to write to clipboard",
)
@click.option(
    "--read-clipboard-cmd",
    default=DEFAULT_SERVER_READ_CMD,
    show_default=True,
    help="Command to read from clipboard",
)
@click.option(
    "--poll-interval",
    type=_positive,
    default=CLIPBOARD_POLL_INTERVAL,
    show_default=True,
    help="Seconds between clipboard reads",
)
@click.option(
    "--ack/--no-ack",
    default=True,
    show_default=True,
    help="Acknowledge clipboard content received from the client",
)
@click.pass_context
def server(
    ctx: click.Context,
    write_clipboard_cmd: str,
    read_clipboard_cmd: str,
    poll_interval: float,
    ack: bool,
) -> None:
    """Run one session over stdin/stdout (started by the client's ssh)."""
    import asyncio

    from clipcast.config import ServerConfig
    from clipcast.server import run_server
    from clipcast.session_config import SessionConfig
    from clipcast.session_result import EndReason

    configure_logging(ctx.obj["verbose"])
    config = ServerConfig(
        read_clipboard_cmd=read_clipboard_cmd,
        write_clipboard_cmd=write_clipboard_cmd,
        session=SessionConfig.responder(
            clipboard_poll_interval=poll_interval, send_ack=ack
        ),
    )
    try:
        reason = asyncio.run(run_server(config))
    except KeyboardInterrupt:
        sys.exit(130)
    if reason is not EndReason.CONNECTION_CLOSED:
        click.echo(f"Error: {reason.value}", err=True)
        sys.exit(1)


@main.command()
@click.option("--host", required=True, help="SSH host to connect to")
@click.option(
    "--ssh-args",
    default="",
    help="Extra arguments for ssh, e.g. '-p 2222 -i ~/.ssh/key'",
)
@click.option(
    "--write-clipboard-cmd",
    default=DEFAULT_CLIENT_WRITE_CMD,
    show_default=True,
    help="Command to write to clipboard",
)
@click.option(
    "--read-clipboard-cmd",
    default=DEFAULT_CLIENT_READ_CMD,
    show_default=True,
    help="Command to read from clipboard",
)
@click.option(
    "--remote-server-cmd",
    default=DEFAULT_REMOTE_SERVER_CMD,
    show_default=True,
    help="Command that runs clipcast on the remote host",
)
@click.option(
    "--remote-write-clipboard-cmd",
    default=DEFAULT_SERVER_WRITE_CMD,
    show_default=True,
    help="Remote command to write to clipboard",
)
@click.option(
    "--remote-read-clipboard-cmd",
    default=DEFAULT_SERVER_READ_CMD,
    show_default=True,
    help="Remote command to read from clipboard",
)
@click.option(
    "--poll-interval",
    type=_positive,
    default=CLIPBOARD_POLL_INTERVAL,
    show_default=True,
    help="Seconds between clipboard reads",
)
@click.option(
    "--ping-interval",
    type=_positive,
    default=PING_INTERVAL,
    show_default=True,
    help="Seconds between pings to the server",
)
@click.option(
    "--pong-timeout",
    type=_positive,
    default=PONG_TIMEOUT,
    show_default=True,
    help="Reconnect if the server has not answered a ping for this long",
)
@click.option(
    "--reconnect-wait",
    type=click.FloatRange(min=0),
    default=RECONNECT_WAIT,
    show_default=True,
    help="Seconds to wait before reconnecting",
)
@click.pass_context
def client(
    ctx: click.Context,
    host: str,
    ssh_args: str,
    write_clipboard_cmd: str,
    read_clipboard_cmd: str,
    remote_server_cmd: str,
    remote_write_clipboard_cmd: str,
    remote_read_clipboard_cmd: str,
    poll_interval: float,
    ping_interval: float,
    pong_timeout: float,
    reconnect_wait: float,
) -> None:
    """Connect to HOST over ssh and keep clipboards in sync, reconnecting forever."""
    import asyncio
    import shlex

    from clipcast.client import run_client
    from clipcast.config import ClientConfig
    from clipcast.session_config import SessionConfig

    try:
        shlex.split(ssh_args)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--ssh-args")
    if ping_interval >= pong_timeout:
        raise click.UsageError("--ping-interval must be less than --pong-timeout")

    configure_logging(ctx.obj["verbose"])
    config = ClientConfig(
        host=host,
        ssh_args=ssh_args,
        read_clipboard_cmd=read_clipboard_cmd,
        write_clipboard_cmd=write_clipboard_cmd,
        remote_server_cmd=remote_server_cmd,
        remote_read_clipboard_cmd=remote_read_clipboard_cmd,
        remote_write_clipboard_cmd=remote_write_clipboard_cmd,
        reconnect_wait=reconnect_wait,
        session=SessionConfig.initiator(
            clipboard_poll_interval=poll_interval,
            ping_interval=ping_interval,
            pong_timeout=pong_timeout,
        ),
    )
    try:
        asyncio.run(run_client(config))
    except KeyboardInterrupt:
        sys.exit(130)


@main.command()
@click.argument("shell", type=click.Choice(sorted(SHELLS)))
def generate(shell: str) -> None:
    """Print a shell completion script."""
    click.echo(completion_source(main, shell))
