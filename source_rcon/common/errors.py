"""
Custom exception classes for source-rcon.
"""


class RconError(Exception):
    """Base exception class for RCON client errors."""
    pass


class MissingAddressError(RconError, ValueError):
    """Raised when an RCON connection is requested without a server address."""
    pass


class RconTransportError(RconError):
    """Raised when dialing, reading from or writing to the connection fails."""
    pass


class RconTimeoutError(RconTransportError):
    """Raised when a transport operation times out."""
    pass


class RconPasswordNotFoundError(RconError):
    """Raised when no RCON password is configured."""
    pass


class RconAuthenticationError(RconError):
    """Raised when RCON authentication fails."""
    pass


class RconNotInitializedError(RconError):
    """Raised when a command is sent on a client that never authenticated."""
    pass


class RconPacketError(RconError):
    """Raised when an RCON packet is malformed or violates the protocol."""
    pass


class MalformedPacketError(RconPacketError):
    """Raised when a packet is too short to decode."""
    pass


class InvalidResponseTypeError(RconPacketError):
    """Raised when the server answers with an unexpected packet type."""
    pass


class InvalidResponseIDError(RconPacketError):
    """Raised when a response id matches neither the command nor the mirror probe."""
    pass


class InvalidResponseTrailerError(RconPacketError):
    """Raised when the packet following the mirror echo is not the trailer."""
    pass
