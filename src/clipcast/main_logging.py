"""Logging configuration for clipcast CLI."""
import logging
import os

# Environment variable selecting the log level, e.g. CLIPCAST_LOG=debug.
LOG_LEVEL_ENV: str = "CLIPCAST_LOG"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def resolve_log_level(verbose: bool, env_value: str | None) -> int:
    """Pick the log level from the --verbose flag and environment.

    Args:
        verbose: If True, use DEBUG regardless of the environment.
        env_value: Value of CLIPCAST_LOG, or None if unset.

    Returns:
        A logging level. Unset or unknown values give INFO.
    """
    if verbose:
        return logging.DEBUG
    if not env_value:
        return logging.INFO
    return _LEVELS.get(env_value.strip().lower(), logging.INFO)


def configure_logging(verbose: bool) -> None:
    """Configure logging on stderr.

    Args:
        verbose: If True, set DEBUG level; otherwise use CLIPCAST_LOG.

    stdout is never used for logs since the server speaks the protocol there.
    """
    level = resolve_log_level(verbose, os.environ.get(LOG_LEVEL_ENV))
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )
