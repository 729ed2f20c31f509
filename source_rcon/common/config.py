"""Configuration resolution for the source-rcon CLI.

Values come from explicit arguments first, then environment variables:

* `RCON_ADDRESS` (legacy alias `ADDR`) - server address in host:port form
* `RCON_PASSWORD` - RCON password
* `RCON_TIMEOUT` - connect timeout, seconds or a duration like ``1s``
* `RCON_READ_TIMEOUT` - optional socket timeout after connecting
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from ..core.client import ConnectOptions
from .constants import DEFAULT_DIAL_TIMEOUT

_DURATION_RE = re.compile(r'^\s*(\d+(?:\.\d+)?)\s*(ms|s|m|h)?\s*$')
_UNIT_SECONDS = {'ms': 0.001, 's': 1.0, 'm': 60.0, 'h': 3600.0}


def parse_duration(value: str) -> float:
    """
    Parse a duration into seconds.

    Accepts bare numbers (seconds) or a number with one of the suffixes
    ``ms``, ``s``, ``m`` or ``h``.

    Raises:
        ValueError: If the value is not a valid non-negative duration
    """
    match = _DURATION_RE.match(value or '')
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return float(amount) * _UNIT_SECONDS[unit or 's']


def _env_duration(environ: Mapping[str, str], key: str) -> Optional[float]:
    raw = environ.get(key, '').strip()
    if not raw:
        return None
    try:
        return parse_duration(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid {key} value: {raw!r}") from exc


@dataclass
class RconSettings:
    """Resolved connection settings."""
    address: str = ''
    password: Optional[str] = None
    timeout: float = DEFAULT_DIAL_TIMEOUT
    read_timeout: Optional[float] = None

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        address: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[float] = None,
        read_timeout: Optional[float] = None,
    ) -> 'RconSettings':
        """Build settings from explicit values falling back to the environment."""
        if environ is None:
            environ = os.environ

        if address is None:
            address = environ.get('RCON_ADDRESS') or environ.get('ADDR') or ''
        if password is None:
            password = environ.get('RCON_PASSWORD') or None
        if timeout is None:
            timeout = _env_duration(environ, 'RCON_TIMEOUT')
        if read_timeout is None:
            read_timeout = _env_duration(environ, 'RCON_READ_TIMEOUT')

        return cls(
            address=address.strip(),
            password=password,
            timeout=DEFAULT_DIAL_TIMEOUT if timeout is None else timeout,
            read_timeout=read_timeout,
        )

    def to_connect_options(self, logger: Optional[logging.Logger] = None) -> ConnectOptions:
        """Return `ConnectOptions` for these settings."""
        return ConnectOptions(
            password=self.password,
            timeout=self.timeout,
            read_timeout=self.read_timeout,
            logger=logger,
        )


__all__ = ["RconSettings", "parse_duration"]
