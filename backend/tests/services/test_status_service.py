"""Tests for open/closed status and its narration."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from storehours.models import Weekday, WeeklySchedule
from storehours.schemas import StatusRead
from storehours.services.schedule_service import parse_schedule
from storehours.services.status_service import OpenState, describe_status, narrate
from storehours.services.timezone_service import TimezoneDatabase


@pytest.fixture()
def midweek(tz_database: TimezoneDatabase) -> WeeklySchedule:
    return parse_schedule(
        {
            "Wednesday": {"from": "09:00", "to": "17:00"},
            "Thursday": {"from": "10:00", "to": "11:00"},
        },
        "America/New_York",
        database=tz_database,
    )


@pytest.mark.parametrize(
    ("now", "state", "message"),
    [
        (datetime(2025, 1, 15, 11, 30, tzinfo=UTC), OpenState.CLOSED, "Opens in 2 hours"),
        (datetime(2025, 1, 15, 13, 30, tzinfo=UTC), OpenState.CLOSED, "Opens in less than an hour"),
        (datetime(2025, 1, 15, 15, 0, tzinfo=UTC), OpenState.OPEN, "Closes in 7 hours"),
        (datetime(2025, 1, 15, 20, 30, tzinfo=UTC), OpenState.OPEN, "Closes in 1 hour"),
        (datetime(2025, 1, 15, 21, 20, tzinfo=UTC), OpenState.OPEN, "Closes in less than an hour"),
        (datetime(2025, 1, 15, 22, 0, tzinfo=UTC), OpenState.CLOSED, "Closed now"),
        (datetime(2025, 1, 17, 15, 0, tzinfo=UTC), OpenState.CLOSED_TODAY, "Closed today"),
    ],
)
def test_status_messages(
    midweek: WeeklySchedule,
    tz_database: TimezoneDatabase,
    now: datetime,
    state: OpenState,
    message: str,
) -> None:
    report = describe_status(midweek, now, database=tz_database)
    assert report.state is state
    assert narrate(report) == message


def test_today_is_read_in_the_schedule_timezone(
    midweek: WeeklySchedule, tz_database: TimezoneDatabase
) -> None:
    # Thursday 03:00 UTC is still Wednesday evening in New York.
    report = describe_status(midweek, datetime(2025, 1, 16, 3, 0, tzinfo=UTC), database=tz_database)

    assert report.local.day is Weekday.WEDNESDAY
    assert str(report.local.time) == "22:00"
    assert narrate(report) == "Closed now"


def test_durations_are_elapsed_time_across_dst(tz_database: TimezoneDatabase) -> None:
    schedule = parse_schedule(
        {"Sunday": {"from": "01:00", "to": "05:00"}}, "America/New_York", database=tz_database
    )
    # 9 March 2025: 01:30 EST, clocks skip 02:00-03:00 before closing.
    report = describe_status(schedule, datetime(2025, 3, 9, 6, 30, tzinfo=UTC), database=tz_database)

    assert report.state is OpenState.OPEN
    assert report.hours == 2


def test_naive_datetime_is_rejected(midweek: WeeklySchedule, tz_database: TimezoneDatabase) -> None:
    with pytest.raises(ValueError):
        describe_status(midweek, datetime(2025, 1, 15, 12, 0), database=tz_database)


def test_status_read_payload(midweek: WeeklySchedule, tz_database: TimezoneDatabase) -> None:
    report = describe_status(midweek, datetime(2025, 1, 15, 15, 0, tzinfo=UTC), database=tz_database)
    payload = StatusRead.from_report(report).model_dump(mode="json")

    assert payload == {
        "state": "open",
        "hours": 7,
        "message": "Closes in 7 hours",
        "local_time": "Wednesday - 10:00",
    }
