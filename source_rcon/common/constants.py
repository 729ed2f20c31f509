"""
Constants and exit codes for source-rcon.
"""


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    RCON_PASSWORD_NOT_FOUND = 3
    RCON_PASSWORD_WRONG = 4
    RCON_COMMAND_EXECUTION_FAILED = 5
    RCON_CONNECTION_FAILED = 6
    RCON_PACKET_ERROR = 7
    RCON_TIMEOUT = 8
    INVALID_CONFIGURATION = 9


# Wire layout
HEADER_SIZE = 8           # id + type
TERMINATOR = b'\x00\x00'  # empty-string terminator after the body
MIN_PAYLOAD_SIZE = HEADER_SIZE + len(TERMINATOR)

# Body of the packet the server sends right after echoing the mirror probe.
TRAILER = b'\x00\x01\x00\x00'

# Sentinel id used by servers to reject credentials.
AUTH_FAILED_ID = -1

DEFAULT_NETWORK = 'tcp'
DEFAULT_DIAL_TIMEOUT = 1.0

DEFAULT_WATCH_INTERVAL = 5.0
DEFAULT_RETRY_DELAY = 1.0
