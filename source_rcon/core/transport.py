"""
Length-delimited packet framing over a byte-stream connection.

The connection is anything with ``send``, ``recv`` and ``close`` methods,
normally a TCP socket produced by a dial function.
"""

import functools
import logging
import socket
import struct
from typing import Any, Callable, Optional, Tuple

from ..common.constants import DEFAULT_DIAL_TIMEOUT, DEFAULT_NETWORK
from ..common.errors import MalformedPacketError, RconTimeoutError, RconTransportError
from ..common.logging_config import get_null_logger

# (network, address) -> connection
DialFn = Callable[[str, str], Any]

_SIZE = struct.Struct('<i')


def split_address(address: str) -> Tuple[str, int]:
    """
    Split ``host:port`` (or ``[v6addr]:port``) into its parts.

    Raises:
        ValueError: If the port is missing or not a valid port number
    """
    host, sep, port_str = address.rpartition(':')
    if not sep or not host:
        raise ValueError(f"Address must be in host:port form, got: {address!r}")
    if host.startswith('[') and host.endswith(']'):
        host = host[1:-1]
    try:
        port = int(port_str)
    except ValueError as exc:
        raise ValueError(f"Invalid port in address {address!r}") from exc
    if not 1 <= port <= 65535:
        raise ValueError(f"Port must be an integer between 1 and 65535, got: {port}")
    return host, port


def default_dial(network: str, address: str, timeout: Optional[float] = DEFAULT_DIAL_TIMEOUT) -> socket.socket:
    """
    Open a TCP connection to ``address``.

    ``timeout`` bounds the connect only; the returned socket blocks on reads.
    """
    if network != DEFAULT_NETWORK:
        raise ValueError(f"Unsupported network: {network}")
    sock = socket.create_connection(split_address(address), timeout=timeout)
    sock.settimeout(None)
    return sock


def make_dialer(timeout: Optional[float] = DEFAULT_DIAL_TIMEOUT) -> DialFn:
    """Return a `DialFn` that uses `default_dial` with a fixed connect timeout."""
    return functools.partial(default_dial, timeout=timeout)


class FramedTransport:
    """Reads and writes exactly one length-prefixed packet per call."""

    def __init__(self, conn: Any, logger: Optional[logging.Logger] = None) -> None:
        self._conn = conn
        self._logger = logger or get_null_logger()

    def send(self, data: bytes) -> None:
        """
        Write one encoded packet.

        Raises:
            RconTransportError: On socket errors or a short write
            RconTimeoutError: If the write times out
        """
        try:
            written = self._conn.send(data)
        except socket.timeout as exc:
            raise RconTimeoutError("Timed out sending packet") from exc
        except OSError as exc:
            raise RconTransportError(f"Connection error while sending data: {exc}") from exc
        if written != len(data):
            raise RconTransportError(f"Short write: sent {written} of {len(data)} bytes")

    def receive(self) -> bytes:
        """
        Read one packet and return it without its size prefix.

        Raises:
            RconTransportError: If the connection fails or closes mid-packet
            RconTimeoutError: If a read timeout is configured and expires
            MalformedPacketError: If the size prefix is negative
        """
        size, = _SIZE.unpack(self._receive_exact(_SIZE.size))
        if size < 0:
            raise MalformedPacketError(f"Invalid packet size: {size}")
        data = self._receive_exact(size)
        self._logger.debug("rcon: received %d bytes: %r", size, data)
        return data

    def _receive_exact(self, num_bytes: int) -> bytes:
        data = bytearray()
        try:
            while len(data) < num_bytes:
                chunk = self._conn.recv(num_bytes - len(data))
                if not chunk:
                    raise RconTransportError("Connection closed by remote host")
                data += chunk
        except socket.timeout as exc:
            raise RconTimeoutError("Timeout while receiving data") from exc
        except OSError as exc:
            raise RconTransportError(f"Connection error while receiving data: {exc}") from exc
        return bytes(data)

    def set_timeout(self, timeout: Optional[float]) -> None:
        """Apply a read/write timeout when the connection supports one."""
        settimeout = getattr(self._conn, 'settimeout', None)
        if callable(settimeout):
            settimeout(timeout)

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()


__all__ = ["DialFn", "FramedTransport", "default_dial", "make_dialer", "split_address"]
