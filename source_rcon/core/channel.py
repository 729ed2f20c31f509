"""
Serialized command execution with multi-packet response reassembly.

RCON gives no length or fragment count for a response, so every command is
followed by an empty ``RESPONSE_VALUE`` "mirror" packet. The server handles
packets in order, so the mirror is answered only after every fragment of the
command's response. The mirror echo is followed by a trailer packet whose
body is `TRAILER`; that pair marks the end of the response.
"""

import logging
import threading
from typing import Optional

from ..common.constants import TRAILER
from ..common.errors import (
    InvalidResponseIDError,
    InvalidResponseTrailerError,
    InvalidResponseTypeError,
)
from ..common.logging_config import get_null_logger
from .packet import PacketIdSequence, RequestType, ResponseType, decode, encode
from .transport import FramedTransport


class CommandChannel:
    """Runs one command at a time over an authenticated transport."""

    def __init__(self, transport: FramedTransport, ids: PacketIdSequence,
                 logger: Optional[logging.Logger] = None, encoding: str = 'utf-8') -> None:
        self._transport = transport
        self._ids = ids
        self._logger = logger or get_null_logger()
        self._encoding = encoding
        self._lock = threading.Lock()

    def execute(self, command: str) -> str:
        """Run ``command`` and return its full response as text."""
        return self.execute_raw(command).decode(self._encoding, errors='replace')

    def execute_raw(self, command: str) -> bytes:
        """
        Run ``command`` and return the concatenated response bodies.

        The lock covers the whole request/mirror/receive cycle.

        Raises:
            InvalidResponseTypeError: If a packet is not a RESPONSE_VALUE
            InvalidResponseIDError: If a packet before the mirror echo has a foreign id
            InvalidResponseTrailerError: If the mirror echo is not followed by the trailer
            RconTransportError: On I/O failure
        """
        with self._lock:
            request_id = self._ids.next_id()
            self._transport.send(encode(request_id, RequestType.EXEC_COMMAND, command))
            mirror_id = self._ids.next_id()
            self._transport.send(encode(mirror_id, RequestType.RESPONSE_VALUE))
            self._logger.debug("rcon: sent command id=%d mirror id=%d", request_id, mirror_id)

            output = bytearray()
            saw_mirror = False
            while True:
                response = decode(self._transport.receive())
                if response.type != ResponseType.RESPONSE_VALUE:
                    raise InvalidResponseTypeError(
                        f"Unexpected response type {response.type}, "
                        f"expected {ResponseType.RESPONSE_VALUE}"
                    )
                if not saw_mirror and response.id == mirror_id:
                    saw_mirror = True
                    continue
                if saw_mirror:
                    if response.body == TRAILER:
                        break
                    raise InvalidResponseTrailerError(
                        f"Invalid response trailer from server: {response.body!r}"
                    )
                if response.id != request_id:
                    raise InvalidResponseIDError(
                        f"Unexpected response ID {response.id} for request {request_id}"
                    )
                output += response.body
            return bytes(output)
