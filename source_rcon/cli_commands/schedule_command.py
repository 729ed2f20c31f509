"""Run an RCON command on a cron schedule."""

from datetime import datetime

from source_rcon.cli_helpers import fail, resolve_settings
from source_rcon.common.errors import RconError
from source_rcon.common.logging_config import get_logger
from source_rcon.core.client import execute_rcon_command
from source_rcon.core.scheduler import CronSchedule, run_schedule


class ScheduleCommand:
    """Executes a command at each occurrence of a cron expression."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('schedule', help='Run an RCON command on a cron schedule')
        parser.add_argument('cron', help="Cron expression, e.g. '*/5 * * * *'")
        parser.add_argument('command', nargs='+', help='The RCON command to run')
        parser.add_argument('--count', type=int, default=None,
                            help='Stop after this many scheduled runs')
        parser.set_defaults(func=ScheduleCommand.execute)

    @staticmethod
    def execute(args) -> None:
        logger = get_logger(__name__)
        try:
            settings = resolve_settings(args)
            schedule = CronSchedule(args.cron)
        except (RconError, ValueError) as exc:
            fail(exc)
            return

        command = ' '.join(args.command)
        options = settings.to_connect_options(logger)
        logger.info("RCON scheduler active (cron='%s', command='%s')", schedule.expression, command)

        def run_once(scheduled: datetime) -> None:
            try:
                response = execute_rcon_command(command, settings.address, settings.password, options)
            except (RconError, ValueError) as exc:
                logger.error("Scheduled command '%s' at %s failed: %s",
                             command, scheduled.strftime("%H:%M"), exc)
                return
            print(response)

        run_schedule(schedule, run_once, logger, max_runs=args.count)
