#!/usr/bin/env python3
"""Constants for client mode and the remote server invocation.

The default clipboard commands assume a macOS client (pbcopy/pbpaste)
connecting to an X11 server (xclip).
"""

# Fixed delay between connection attempts in seconds. There is no retry
# ceiling and no exponential backoff; the client retries until killed.
RECONNECT_WAIT: float = 1.0

# Remote-shell program used to reach the server.
SSH_PROGRAM: str = "ssh"

# Command used to start clipcast on the remote host.
DEFAULT_REMOTE_SERVER_CMD: str = "clipcast"

DEFAULT_CLIENT_READ_CMD: str = "pbpaste"
DEFAULT_CLIENT_WRITE_CMD: str = "pbcopy"

DEFAULT_SERVER_READ_CMD: str = "xclip -selection clipboard -o"
DEFAULT_SERVER_WRITE_CMD: str = "xclip -selection clipboard"
