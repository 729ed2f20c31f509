"""Repeatedly run an RCON command, reconnecting when the session drops."""

import time

from source_rcon.cli_helpers import duration_arg, fail, resolve_settings
from source_rcon.common.constants import DEFAULT_RETRY_DELAY, DEFAULT_WATCH_INTERVAL
from source_rcon.common.errors import MissingAddressError, RconAuthenticationError, RconError
from source_rcon.common.logging_config import get_logger
from source_rcon.core.client import connect


class WatchCommand:
    """Polls the server with a command at a fixed interval."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('watch', help='Run an RCON command repeatedly')
        parser.add_argument('command', nargs='+', help='The RCON command to run')
        parser.add_argument('--interval', type=duration_arg, default=DEFAULT_WATCH_INTERVAL,
                            help='Delay between commands, e.g. 5 or 5s (default: %(default)s)')
        parser.add_argument('--retry-delay', type=duration_arg, default=DEFAULT_RETRY_DELAY,
                            help='Delay before reconnecting, e.g. 1s (default: %(default)s)')
        parser.add_argument('--count', type=int, default=None,
                            help='Stop after this many responses')
        parser.set_defaults(func=WatchCommand.execute)

    @staticmethod
    def execute(args) -> None:
        logger = get_logger(__name__)
        try:
            settings = resolve_settings(args)
        except (RconError, ValueError) as exc:
            fail(exc)
            return

        command = ' '.join(args.command)
        options = settings.to_connect_options(logger)
        responses = 0

        def done() -> bool:
            return args.count is not None and responses >= args.count

        while not done():
            try:
                client = connect(settings.address, options)
            except (RconAuthenticationError, MissingAddressError, ValueError) as exc:
                fail(exc)
                return
            except RconError as exc:
                logger.warning("Connecting to %s failed: %s", settings.address, exc)
                time.sleep(args.retry_delay)
                continue

            with client:
                while not done():
                    try:
                        response = client.send(command)
                    except RconError as exc:
                        logger.warning("Command '%s' failed, reconnecting: %s", command, exc)
                        break
                    print(response)
                    responses += 1
                    if not done():
                        time.sleep(args.interval)
