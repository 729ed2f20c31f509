"""Utilities for running RCON commands on a cron schedule."""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Callable, Optional

from croniter import croniter
from croniter.croniter import CroniterBadCronError


MAX_SLEEP_INTERVAL_SECONDS = 30


class CronSchedule:
    """Cron schedule helper backed by :mod:`croniter`."""

    def __init__(self, expression: str) -> None:
        self._expression = expression
        self._validate_expression()

    @property
    def expression(self) -> str:
        return self._expression

    def _validate_expression(self) -> None:
        """Eagerly validate cron syntax so we fail fast on start-up."""

        try:
            croniter(self._expression, datetime.now())
        except CroniterBadCronError as exc:
            raise ValueError(str(exc)) from exc

    def next_run(self, reference: datetime) -> datetime:
        """Return the next scheduled time strictly after ``reference``."""

        try:
            iterator = croniter(
                self._expression,
                reference,
                ret_type=datetime,
            )
            return iterator.get_next(datetime)
        except CroniterBadCronError as exc:  # pragma: no cover - defensive
            raise ValueError(str(exc)) from exc


def _sleep_until(target: datetime) -> None:
    while True:
        delta = (target - datetime.now()).total_seconds()
        if delta <= 0:
            return
        time.sleep(min(delta, MAX_SLEEP_INTERVAL_SECONDS))


def run_schedule(
    schedule: CronSchedule,
    action: Callable[[datetime], None],
    logger: logging.Logger,
    max_runs: Optional[int] = None,
) -> int:
    """Invoke ``action`` at each occurrence of ``schedule``.

    Exceptions from ``action`` propagate; callers that want the schedule to
    survive a failed run handle them inside ``action``. Returns the number of
    runs performed once ``max_runs`` is reached.
    """

    runs = 0
    while max_runs is None or runs < max_runs:
        next_run = schedule.next_run(datetime.now())
        logger.info("Next scheduled run at %s", next_run.strftime("%Y-%m-%d %H:%M"))
        _sleep_until(next_run)
        action(next_run)
        runs += 1
    return runs


__all__ = ["CronSchedule", "run_schedule"]
