"""Shared CLI helpers for source-rcon commands."""

import argparse
import sys
from typing import Optional

from .common.config import RconSettings, parse_duration
from .common.constants import ExitCodes
from .common.errors import (
    MissingAddressError,
    RconAuthenticationError,
    RconNotInitializedError,
    RconPacketError,
    RconPasswordNotFoundError,
    RconTimeoutError,
    RconTransportError,
)
from .core.transport import split_address


def duration_arg(value: str) -> float:
    """argparse type for durations such as ``5``, ``5s`` or ``250ms``."""
    try:
        return parse_duration(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to source-rcon exit codes."""
    if isinstance(exc, RconPasswordNotFoundError):
        return ExitCodes.RCON_PASSWORD_NOT_FOUND
    if isinstance(exc, RconAuthenticationError):
        return ExitCodes.RCON_PASSWORD_WRONG
    if isinstance(exc, RconTimeoutError):
        return ExitCodes.RCON_TIMEOUT
    if isinstance(exc, RconTransportError):
        return ExitCodes.RCON_CONNECTION_FAILED
    if isinstance(exc, RconPacketError):
        return ExitCodes.RCON_PACKET_ERROR
    if isinstance(exc, RconNotInitializedError):
        return ExitCodes.RCON_COMMAND_EXECUTION_FAILED
    if isinstance(exc, (MissingAddressError, ValueError)):
        return ExitCodes.INVALID_CONFIGURATION
    return None


def describe_exception(exc: Exception) -> str:
    """Return the user-facing message for an RCON failure."""
    if isinstance(exc, RconPasswordNotFoundError):
        return "Could not read RCON password. Pass --password or set RCON_PASSWORD."
    if isinstance(exc, MissingAddressError):
        return "No RCON server address. Pass --address or set RCON_ADDRESS (host:port)."
    if isinstance(exc, RconAuthenticationError):
        return "Could not execute this RCON command. Authentication failed (wrong server password)."
    if isinstance(exc, RconTimeoutError):
        return f"RCON operation timed out: {exc}"
    if isinstance(exc, RconTransportError):
        return f"Failed to connect to RCON server: {exc}"
    if isinstance(exc, RconPacketError):
        return f"RCON packet error: {exc}"
    if isinstance(exc, ValueError):
        return f"Invalid configuration: {exc}"
    return f"Rcon command execution failed: {exc}"


def fail(exc: Exception) -> None:
    """Exit with the message and code matching ``exc``."""
    exit_code = map_exception_to_exit_code(exc)
    if exit_code is None:
        exit_code = ExitCodes.RCON_COMMAND_EXECUTION_FAILED
    exit_with_error(describe_exception(exc), exit_code)


def resolve_settings(args) -> RconSettings:
    """
    Build connection settings from parsed global arguments and the environment.

    Raises:
        RconPasswordNotFoundError: If no password is configured
        ValueError: If an environment value or the address is invalid
    """
    settings = RconSettings.from_env(
        address=args.address,
        password=args.password,
        timeout=args.timeout,
        read_timeout=args.read_timeout,
    )
    if not settings.password:
        raise RconPasswordNotFoundError("Could not find RCON password in arguments or environment")
    if settings.address:
        split_address(settings.address)
    return settings
