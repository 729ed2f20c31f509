"""Shared fakes: an in-memory connection that behaves like a Source RCON server."""

from __future__ import annotations

import os
import sys
import threading
import time
from typing import Callable, Iterable, List, Optional, Tuple

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from source_rcon.common.constants import TRAILER  # noqa: E402
from source_rcon.core.packet import Packet, RequestType, ResponseType, decode, encode  # noqa: E402


class FakeConnection:
    """Scripted stand-in for a TCP socket.

    Sent packets are decoded into ``sent``. Unless ``preloaded`` bytes are
    given, replies are generated the way a Source server would: auth echo
    plus auth response, one RESPONSE_VALUE per fragment returned by
    ``handler`` and mirror echo plus trailer for the empty probe.
    """

    def __init__(
        self,
        password: str = "secret",
        handler: Optional[Callable[[str], Iterable[bytes]]] = None,
        preloaded: Optional[Iterable[bytes]] = None,
        send_delay: float = 0.0,
    ) -> None:
        self.password = password
        self.handler = handler or (lambda command: [command.encode()])
        self.scripted = preloaded is not None
        self.buffer = bytearray(b"".join(preloaded or []))
        self.sent: List[Packet] = []
        self.close_calls = 0
        self.timeouts: List[Optional[float]] = []
        self.send_delay = send_delay
        self._lock = threading.Lock()

    def send(self, data: bytes) -> int:
        if self.send_delay:
            time.sleep(self.send_delay)
        with self._lock:
            packet = decode(data[4:])
            self.sent.append(packet)
            if not self.scripted:
                self.buffer += b"".join(self.respond(packet))
        return len(data)

    def respond(self, packet: Packet) -> List[bytes]:
        if packet.type == RequestType.AUTH:
            reply_id = packet.id if packet.body == self.password.encode() else -1
            return [
                encode(packet.id, ResponseType.RESPONSE_VALUE),
                encode(reply_id, ResponseType.AUTH_RESPONSE),
            ]
        if packet.type == RequestType.EXEC_COMMAND:
            return [
                encode(packet.id, ResponseType.RESPONSE_VALUE, fragment)
                for fragment in self.handler(packet.body.decode())
            ]
        return [
            encode(packet.id, ResponseType.RESPONSE_VALUE),
            encode(packet.id, ResponseType.RESPONSE_VALUE, TRAILER),
        ]

    def recv(self, num_bytes: int) -> bytes:
        with self._lock:
            chunk = bytes(self.buffer[:num_bytes])
            del self.buffer[:num_bytes]
            return chunk

    def settimeout(self, timeout: Optional[float]) -> None:
        self.timeouts.append(timeout)

    def close(self) -> None:
        self.close_calls += 1


class FakeDialer:
    """Dial function handing out one prepared connection."""

    def __init__(self, conn: Optional[FakeConnection] = None, error: Optional[Exception] = None) -> None:
        self.conn = conn
        self.error = error
        self.calls: List[Tuple[str, str]] = []

    def __call__(self, network: str, address: str) -> FakeConnection:
        self.calls.append((network, address))
        if self.error is not None:
            raise self.error
        assert self.conn is not None
        return self.conn


@pytest.fixture
def make_connection():
    return FakeConnection


@pytest.fixture
def make_dialer():
    return FakeDialer
