"""
Binary encoding and decoding of single RCON packets.

Wire layout (little-endian, signed 32-bit integers)::

    size | id | type | body | 0x00 | 0x00

``size`` covers everything after itself. The server reuses the value 2 for
both ``SERVERDATA_EXECCOMMAND`` and ``SERVERDATA_AUTH_RESPONSE``, so packet
types are split into what the client sends (`RequestType`) and what it
receives (`ResponseType`).
"""

import struct
import threading
from enum import IntEnum
from typing import NamedTuple, Union

from ..common.constants import HEADER_SIZE, MIN_PAYLOAD_SIZE, TERMINATOR
from ..common.errors import MalformedPacketError

_SIZE = struct.Struct('<i')
_HEADER = struct.Struct('<ii')

MAX_PACKET_ID = 2 ** 31 - 1


class RequestType(IntEnum):
    """Packet types sent by the client."""
    RESPONSE_VALUE = 0  # empty mirror probe
    EXEC_COMMAND = 2
    AUTH = 3


class ResponseType(IntEnum):
    """Packet types sent by the server."""
    RESPONSE_VALUE = 0
    AUTH_RESPONSE = 2


class Packet(NamedTuple):
    """A decoded RCON packet."""
    id: int
    type: Union[ResponseType, int]
    body: bytes

    def text(self, encoding: str = 'utf-8') -> str:
        """Return the body as text, replacing undecodable bytes."""
        return self.body.decode(encoding, errors='replace')


def _response_type(value: int) -> Union[ResponseType, int]:
    try:
        return ResponseType(value)
    except ValueError:
        return value


def encode(packet_id: int, packet_type: int, body: Union[str, bytes] = b'') -> bytes:
    """
    Encode a packet including its size prefix.

    Args:
        packet_id: Correlation id echoed by the server
        packet_type: Wire type, usually a `RequestType`
        body: Command text or raw bytes

    Returns:
        The bytes to write to the connection
    """
    if isinstance(body, str):
        body = body.encode('utf-8')
    payload = _HEADER.pack(packet_id, int(packet_type)) + body + TERMINATOR
    return _SIZE.pack(len(payload)) + payload


def decode(data: bytes) -> Packet:
    """
    Decode a packet payload whose size prefix was already stripped.

    Raises:
        MalformedPacketError: If fewer bytes than header plus terminator are present
    """
    if len(data) < MIN_PAYLOAD_SIZE:
        raise MalformedPacketError(
            f"Packet too small: {len(data)} < {MIN_PAYLOAD_SIZE} bytes"
        )
    packet_id, packet_type = _HEADER.unpack_from(data)
    # Trailing terminator bytes are counted, not inspected.
    body = bytes(data[HEADER_SIZE:-len(TERMINATOR)])
    return Packet(packet_id, _response_type(packet_type), body)


class PacketIdSequence:
    """Thread-safe monotonic source of request ids.

    Ids start at 1 and wrap back to 1 after ``2**31 - 1`` so they never
    collide with the ``-1`` authentication failure sentinel.
    """

    def __init__(self, start: int = 1) -> None:
        if not 1 <= start <= MAX_PACKET_ID:
            raise ValueError(f"Packet id must be between 1 and {MAX_PACKET_ID}, got: {start}")
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next = 1 if value >= MAX_PACKET_ID else value + 1
            return value


__all__ = [
    "Packet",
    "PacketIdSequence",
    "RequestType",
    "ResponseType",
    "decode",
    "encode",
]
