"""Registry for CLI subcommands."""

from .exec_command import ExecCommand
from .schedule_command import ScheduleCommand
from .shell_command import ShellCommand
from .watch_command import WatchCommand

COMMANDS = (
    ExecCommand,
    WatchCommand,
    ScheduleCommand,
    ShellCommand,
)

__all__ = ["COMMANDS", "ExecCommand", "ScheduleCommand", "ShellCommand", "WatchCommand"]
