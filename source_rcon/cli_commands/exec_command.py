"""One-shot RCON command execution for the source-rcon CLI."""

from source_rcon.cli_helpers import fail, resolve_settings
from source_rcon.common.errors import RconError
from source_rcon.common.logging_config import get_logger
from source_rcon.core.client import execute_rcon_command


class ExecCommand:
    """Handles single RCON command execution."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add exec command parser to subparsers."""
        parser = subparsers.add_parser('exec', help='Execute a single RCON command')
        parser.add_argument('command', nargs='+', help='The RCON command to execute')
        parser.set_defaults(func=ExecCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Execute an RCON command and print the response."""
        logger = get_logger(__name__)
        try:
            settings = resolve_settings(args)
            response = execute_rcon_command(
                ' '.join(args.command),
                settings.address,
                settings.password,
                settings.to_connect_options(logger),
            )
        except (RconError, ValueError) as exc:
            fail(exc)
            return
        print(response)
