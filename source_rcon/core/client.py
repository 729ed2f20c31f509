"""
RCON client facade.

Owns the connection, runs authentication once during construction and
exposes `RconClient.send` for command execution.
"""

import logging
import socket
from dataclasses import dataclass, replace
from typing import Optional

from ..common.constants import DEFAULT_DIAL_TIMEOUT, DEFAULT_NETWORK
from ..common.errors import (
    MissingAddressError,
    RconNotInitializedError,
    RconTimeoutError,
    RconTransportError,
)
from ..common.logging_config import get_null_logger
from .auth import AuthSession
from .channel import CommandChannel
from .packet import PacketIdSequence
from .transport import DialFn, FramedTransport, make_dialer


@dataclass
class ConnectOptions:
    """Connection options.

    Attributes:
        dial: ``(network, address) -> connection``; defaults to a TCP dialer
            bounded by ``timeout``
        password: RCON password; without one the client never connects
        timeout: Connect timeout in seconds for the default dialer
        read_timeout: Optional timeout applied to every socket operation
            after connecting; None blocks indefinitely
        logger: Sink for debug events; defaults to a silent logger
        encoding: Text encoding of command responses
    """
    dial: Optional[DialFn] = None
    password: Optional[str] = None
    timeout: Optional[float] = DEFAULT_DIAL_TIMEOUT
    read_timeout: Optional[float] = None
    logger: Optional[logging.Logger] = None
    encoding: str = 'utf-8'


class RconClient:
    """RCON client for a Source engine game server."""

    def __init__(self, address: str, options: Optional[ConnectOptions] = None) -> None:
        """
        Create the client and, if a password is configured, connect and authenticate.

        Raises:
            MissingAddressError: If a password is given but ``address`` is empty
            RconTransportError: If dialing fails
            RconAuthenticationError: If the server rejects the password
            RconPacketError: If the handshake violates the protocol
        """
        options = options or ConnectOptions()
        self.address = address
        self._options = options
        self._dial = options.dial or make_dialer(options.timeout)
        self._logger = options.logger or get_null_logger()
        self._ids = PacketIdSequence()
        self._transport: Optional[FramedTransport] = None
        self._channel: Optional[CommandChannel] = None
        self._initialized = False

        if options.password:
            self._init_rcon(options.password)

    def __str__(self) -> str:
        return self.address

    def __repr__(self) -> str:
        return f"<RconClient {self.address!r} authenticated={self._initialized}>"

    @property
    def authenticated(self) -> bool:
        return self._initialized

    def _init_rcon(self, password: str) -> None:
        if not self.address:
            raise MissingAddressError("RCON server needs an address")

        self._logger.debug("rcon: connecting rcon to %s", self.address)
        try:
            conn = self._dial(DEFAULT_NETWORK, self.address)
        except socket.timeout as exc:
            raise RconTimeoutError(
                f"Timed out connecting to RCON server at {self.address} after {self._options.timeout}s"
            ) from exc
        except Exception as exc:
            raise RconTransportError(f"Could not open tcp socket to {self.address}: {exc}") from exc

        transport = FramedTransport(conn, self._logger)
        try:
            if self._options.read_timeout is not None:
                transport.set_timeout(self._options.read_timeout)
            self._logger.debug("rcon: authenticating to %s", self.address)
            AuthSession(transport, self._ids, self._logger).authenticate(password)
        except Exception:
            transport.close()
            raise

        self._transport = transport
        self._channel = CommandChannel(transport, self._ids, self._logger, self._options.encoding)
        self._initialized = True

    def send(self, command: str) -> str:
        """
        Execute an RCON command and return its response.

        Failures leave the connection open; the caller decides whether to
        retry or close.

        Raises:
            RconNotInitializedError: If the client never authenticated
            RconPacketError: On protocol violations in the response
            RconTransportError: On I/O failure
        """
        if not self._initialized or self._channel is None:
            raise RconNotInitializedError("RCON is not initialized")
        return self._channel.execute(command)

    def close(self) -> None:
        """Release the connection if authentication completed."""
        if self._initialized and self._transport is not None:
            self._initialized = False
            self._channel = None
            transport, self._transport = self._transport, None
            transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def connect(address: str, options: Optional[ConnectOptions] = None) -> RconClient:
    """Connect to ``address`` and authenticate when a password is given."""
    return RconClient(address, options)


def execute_rcon_command(command: str, address: str, password: str,
                         options: Optional[ConnectOptions] = None) -> str:
    """
    Execute a single RCON command (convenience function).

    Args:
        command: The command to execute
        address: Server address in host:port form
        password: RCON password
        options: Extra connection options; ``password`` overrides theirs

    Returns:
        The command response
    """
    merged = replace(options or ConnectOptions(), password=password)
    with connect(address, merged) as client:
        return client.send(command)


__all__ = ["ConnectOptions", "RconClient", "connect", "execute_rcon_command"]
