"""
Command Line Interface for source-rcon.

Provides one-shot, polling, scheduled and interactive RCON commands.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .cli_commands import COMMANDS
from .cli_helpers import duration_arg
from .common.constants import ExitCodes
from .common.logging_config import configure_logging, get_logger


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='source-rcon',
        description='Source engine RCON client'
    )
    parser.add_argument('--address', default=None,
                        help='Server address as host:port (env: RCON_ADDRESS)')
    parser.add_argument('--password', default=None,
                        help='RCON password (env: RCON_PASSWORD)')
    parser.add_argument('--timeout', type=duration_arg, default=None,
                        help='Connection timeout, e.g. 1s or 500ms (env: RCON_TIMEOUT)')
    parser.add_argument('--read-timeout', type=duration_arg, default=None,
                        help='Socket timeout after connecting (env: RCON_READ_TIMEOUT)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command_name', help='Available commands')
    for command in COMMANDS:
        command.add_parser(subparsers)

    return parser


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    parser = create_parser()

    if args is None:
        args = sys.argv[1:]

    # If no arguments provided, show help
    if not args:
        parser.print_help()
        sys.exit(ExitCodes.OK)

    parsed_args = parser.parse_args(args)
    configure_logging(logging.DEBUG if parsed_args.debug else None)
    logger = get_logger(__name__)
    logger.debug("Parsed arguments: %s", {k: v for k, v in vars(parsed_args).items() if k != 'password'})

    if hasattr(parsed_args, 'func'):
        parsed_args.func(parsed_args)
    else:
        parser.print_help()
        sys.exit(ExitCodes.OK)


if __name__ == '__main__':
    main()
