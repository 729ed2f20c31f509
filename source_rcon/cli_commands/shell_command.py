"""Interactive RCON shell."""

import cmd
import sys
import textwrap

from source_rcon.cli_helpers import fail, resolve_settings
from source_rcon.common.errors import RconError, RconPacketError, RconTransportError
from source_rcon.common.logging_config import get_logger
from source_rcon.core.client import RconClient, connect


class RconShell(cmd.Cmd):
    """Passes each line straight through to the server.

    Shell-specific commands are prefixed with ``!``.
    """

    _HELP_TEXT = textwrap.dedent("""
        <command> [...]     Run a command on the server.
        !exit               Exit this shell.
        """).strip("\n")

    def __init__(self, client: RconClient, stdin=None, stdout=None) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self._client = client
        self.prompt = f"{client} ] "

    def _write(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def default(self, line: str) -> bool:
        """Run ``line`` on the server and print the response."""
        try:
            response = self._client.send(line)
        except RconTransportError as exc:
            self._write(f"Lost connection to server: {exc}")
            return True
        except RconPacketError as exc:
            self._write(f"RCON packet error: {exc}")
            return False
        if response.endswith("\n"):
            response = response[:-1]
        self._write(response)
        return False

    def emptyline(self) -> bool:
        """Do nothing."""
        return False

    def do_help(self, arg: str) -> bool:
        if arg:
            return self.default(f"help {arg}")
        self._write(self._HELP_TEXT)
        return False

    def do_shell(self, arg: str) -> bool:
        if arg.strip() == "exit":
            return True
        self._write(f"Unknown shell command: !{arg}")
        return False

    def do_exit(self, _arg: str) -> bool:
        self._write("Use !exit to exit this shell.")
        return False

    def do_EOF(self, _arg: str) -> bool:
        """Exit by the Ctrl-D shortcut."""
        self._write("")
        return True


class ShellCommand:
    """Opens an interactive RCON session."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('shell', help='Interactive RCON shell')
        parser.set_defaults(func=ShellCommand.execute)

    @staticmethod
    def execute(args) -> None:
        logger = get_logger(__name__)
        try:
            settings = resolve_settings(args)
            client = connect(settings.address, settings.to_connect_options(logger))
        except (RconError, ValueError) as exc:
            fail(exc)
            return

        with client:
            RconShell(client, stdout=sys.stdout).cmdloop()
