"""RCON authentication handshake."""

import logging
from typing import Optional

from ..common.constants import AUTH_FAILED_ID
from ..common.errors import (
    InvalidResponseIDError,
    InvalidResponseTypeError,
    RconAuthenticationError,
)
from ..common.logging_config import get_null_logger
from .packet import PacketIdSequence, RequestType, ResponseType, decode, encode
from .transport import FramedTransport


class AuthSession:
    """Performs the one-time password exchange over a `FramedTransport`.

    The server answers an auth request with two packets: an empty
    ``RESPONSE_VALUE`` echo and then the ``AUTH_RESPONSE`` itself, whose id
    is the request id on success or ``-1`` on a bad password.
    """

    def __init__(self, transport: FramedTransport, ids: PacketIdSequence,
                 logger: Optional[logging.Logger] = None) -> None:
        self._transport = transport
        self._ids = ids
        self._logger = logger or get_null_logger()

    def authenticate(self, password: str) -> None:
        """
        Authenticate with ``password``. Single pass, no retries.

        Raises:
            RconAuthenticationError: If the server rejects the password
            InvalidResponseTypeError: If the echo is not a RESPONSE_VALUE
            InvalidResponseIDError: If the echo does not carry the request id
            RconTransportError: On I/O failure
        """
        request_id = self._ids.next_id()
        self._transport.send(encode(request_id, RequestType.AUTH, password))

        echo = decode(self._transport.receive())
        self._logger.debug("rcon: received empty response %r", echo)
        if echo.id == AUTH_FAILED_ID:
            raise RconAuthenticationError("RCON authentication failed: server returned -1 response ID")
        if echo.type != ResponseType.RESPONSE_VALUE:
            raise InvalidResponseTypeError(
                f"Unexpected response type {echo.type} to auth request, "
                f"expected {ResponseType.RESPONSE_VALUE}"
            )
        if echo.id != request_id:
            raise InvalidResponseIDError(f"Unexpected response ID {echo.id} for request {request_id}")

        reply = decode(self._transport.receive())
        if reply.type != ResponseType.AUTH_RESPONSE or reply.id != request_id:
            raise RconAuthenticationError(
                f"RCON authentication failed: got type {reply.type} with id {reply.id} "
                f"for request {request_id}"
            )
        self._logger.debug("rcon: authenticated")
