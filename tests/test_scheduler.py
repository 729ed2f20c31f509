from __future__ import annotations

from datetime import datetime, timedelta

import logging

import pytest

import source_rcon.core.scheduler as scheduler
from source_rcon.core.scheduler import CronSchedule, run_schedule


def make_dt(text: str) -> datetime:
    return datetime.strptime(text, "%Y-%m-%d %H:%M")


def test_status_poll_every_five_minutes():
    schedule = CronSchedule("*/5 * * * *")
    assert schedule.next_run(make_dt("2024-05-20 13:02")) == make_dt("2024-05-20 13:05")
    # Landing exactly on a slot moves on to the following one
    assert schedule.next_run(make_dt("2024-05-20 13:55")) == make_dt("2024-05-20 14:00")


def test_nightly_save_rolls_over_month_end():
    schedule = CronSchedule("30 3 * * *")
    assert schedule.next_run(make_dt("2024-01-31 03:30")) == make_dt("2024-02-01 03:30")


def test_weekend_announcement_window():
    schedule = CronSchedule("0 18-20 * * sat,sun")
    # Friday evening waits for Saturday
    assert schedule.next_run(make_dt("2024-05-17 19:00")) == make_dt("2024-05-18 18:00")
    assert schedule.next_run(make_dt("2024-05-19 20:00")) == make_dt("2024-05-25 18:00")


def test_cron_schedule_invalid_expression():
    with pytest.raises(ValueError):
        CronSchedule("invalid")


def test_run_schedule_invokes_action_at_each_occurrence(monkeypatch):
    base_time = datetime(2024, 1, 1, 12, 0, 30)

    class FakeDateTime(datetime):
        current = base_time

        @classmethod
        def now(cls):
            return cls.current

    sleeps = []

    def fast_sleep(seconds: float) -> None:
        sleeps.append(seconds)
        FakeDateTime.current = FakeDateTime.current + timedelta(seconds=seconds)

    monkeypatch.setattr(scheduler, "datetime", FakeDateTime)
    monkeypatch.setattr(scheduler.time, "sleep", fast_sleep)

    runs = []
    count = run_schedule(CronSchedule("* * * * *"), runs.append, logging.getLogger("tests"), max_runs=2)

    assert count == 2
    assert runs == [datetime(2024, 1, 1, 12, 1), datetime(2024, 1, 1, 12, 2)]
    assert all(seconds <= scheduler.MAX_SLEEP_INTERVAL_SECONDS for seconds in sleeps)


def test_run_schedule_propagates_action_errors(monkeypatch):
    class FakeDateTime(datetime):
        @classmethod
        def now(cls):
            return datetime(2024, 1, 1, 12, 0, 59)

    monkeypatch.setattr(scheduler, "datetime", FakeDateTime)
    monkeypatch.setattr(scheduler.time, "sleep", lambda seconds: None)

    # Every occurrence is due immediately.
    monkeypatch.setattr(CronSchedule, "next_run", lambda self, reference: reference)

    def boom(_scheduled):
        raise RuntimeError("stop")

    with pytest.raises(RuntimeError, match="stop"):
        run_schedule(CronSchedule("* * * * *"), boom, logging.getLogger("tests"))
