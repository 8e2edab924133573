#!/usr/bin/env python3
"""Client connection and retry logic for clipcast.

This module keeps exactly one session running on the client. Every attempt
spawns a fresh tunnel and a fresh session; when the session ends for any
reason, tenacity waits a fixed delay and tries again. Retrying never stops
and the delay never grows: the client is meant to run until it is killed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_never,
    wait_fixed,
)

from clipcast.session import SessionEnded, run_session
from clipcast.transport import spawn_tunnel

if TYPE_CHECKING:
    from tenacity.stop import stop_base

    from clipcast.clipboard import ClipboardProvider
    from clipcast.config import ClientConfig

logger = logging.getLogger(__name__)


async def run_client_connection(
    config: ClientConfig,
    provider: ClipboardProvider,
) -> None:
    """Spawn a tunnel and run one session over it.

    Args:
        config: The client configuration.
        provider: The local clipboard provider.

    Raises:
        SessionEnded: Always, once the session has ended.
        OSError: If the tunnel process cannot be started.
    """
    try:
        transport = await spawn_tunnel(config)
    except OSError:
        logger.warning("Failed to start %s, will retry", config.ssh_program)
        raise

    logger.debug("Tunnel to %s started", config.host)
    try:
        reason = await run_session(
            transport.reader, transport.writer, provider, config.session
        )
    finally:
        await transport.close()
    raise SessionEnded(reason)


async def run_client_with_retry(
    config: ClientConfig,
    provider: ClipboardProvider,
    stop: stop_base = stop_never,
) -> None:
    """Run sessions forever, reconnecting after each one ends.

    Args:
        config: The client configuration.
        provider: The local clipboard provider.
        stop: tenacity stop condition. The default never stops.

    Raises:
        tenacity.RetryError: Only if stop allows retrying to end.
    """
    retrying = AsyncRetrying(
        wait=wait_fixed(config.reconnect_wait),
        retry=retry_if_exception_type((SessionEnded, OSError)),
        stop=stop,
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
    async for attempt in retrying:
        with attempt:
            await run_client_connection(config, provider)
