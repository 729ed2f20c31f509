"""source-rcon - Source engine RCON client.

Provides:
* Packet encoding/decoding for the RCON wire format
* An authenticated client that reassembles multi-packet responses
* A thin CLI wrapper (`source-rcon`)

The names exported here form the public API.
"""

from ._version import __version__
from .common.errors import (  # noqa: F401
    InvalidResponseIDError,
    InvalidResponseTrailerError,
    InvalidResponseTypeError,
    MalformedPacketError,
    MissingAddressError,
    RconAuthenticationError,
    RconError,
    RconNotInitializedError,
    RconPacketError,
    RconTimeoutError,
    RconTransportError,
)
from .common.logging_config import configure_logging  # noqa: F401
from .core.client import ConnectOptions, RconClient, connect, execute_rcon_command  # noqa: F401
from .core.packet import Packet, RequestType, ResponseType, decode, encode  # noqa: F401
from .core.transport import FramedTransport, default_dial  # noqa: F401

__all__ = [
	"__version__",
	"configure_logging",
	"ConnectOptions",
	"RconClient",
	"connect",
	"execute_rcon_command",
	"Packet",
	"RequestType",
	"ResponseType",
	"decode",
	"encode",
	"FramedTransport",
	"default_dial",
	"RconError",
	"MissingAddressError",
	"RconTransportError",
	"RconTimeoutError",
	"RconAuthenticationError",
	"RconNotInitializedError",
	"RconPacketError",
	"MalformedPacketError",
	"InvalidResponseTypeError",
	"InvalidResponseIDError",
	"InvalidResponseTrailerError",
]
