#!/usr/bin/env python3
"""Default timing for a synchronization session.

All values are in seconds.
"""

# How often the local clipboard is read to detect changes.
CLIPBOARD_POLL_INTERVAL: float = 0.5

# How often the client sends a ping. Must stay below PONG_TIMEOUT.
PING_INTERVAL: float = 3.0

# Session ends if no pong has been received for this long.
PONG_TIMEOUT: float = 10.0

# Maximum time to write and flush one message to the peer.
SEND_TIMEOUT: float = 5.0
