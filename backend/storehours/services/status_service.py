"""Derive display status ("Closes in 2 hours") from a weekly schedule."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import UTC, datetime, time, timedelta, tzinfo

from storehours.models import TimeOfDay, WeeklySchedule, Weekday, ZonedTime
from storehours.services.timezone_service import TimezoneDatabase, get_timezone_database


class OpenState(str, enum.Enum):
    """Coarse open/closed state for the current day."""

    OPEN = "open"
    CLOSED = "closed"
    CLOSED_TODAY = "closed_today"


@dataclass(slots=True, frozen=True)
class StatusReport:
    """Current state plus the whole hours until it changes.

    ``detail`` is ``None`` when the schedule is closed for the rest of the
    day; the next opening day is not looked up.
    """

    state: OpenState
    detail: timedelta | None
    local: ZonedTime

    @property
    def hours(self) -> int | None:
        if self.detail is None:
            return None
        return int(self.detail.total_seconds() // 3600)


def _at(local: datetime, moment: TimeOfDay, zone: tzinfo) -> datetime:
    midnight = datetime.combine(local.date(), time.min, tzinfo=zone)
    return midnight + timedelta(minutes=moment.minutes)


def _floor_hours(delta: timedelta) -> timedelta:
    return timedelta(hours=int(delta.total_seconds() // 3600))


def describe_status(
    schedule: WeeklySchedule,
    now: datetime | None = None,
    *,
    database: TimezoneDatabase | None = None,
) -> StatusReport:
    """Describe ``schedule`` at ``now`` (aware; default: current time).

    "Today" is the weekday of ``now`` in the schedule's timezone. Durations
    are elapsed time floored to whole hours.
    """
    database = database or get_timezone_database()
    moment = now or datetime.now(UTC)
    if moment.tzinfo is None:
        raise ValueError("A timezone-aware datetime is required")
    zone = database.get(schedule.timezone)
    local = moment.astimezone(zone)
    current = ZonedTime(
        day=Weekday(local.weekday()),
        time=TimeOfDay.from_time(local.time()),
        timezone=schedule.timezone,
    )

    interval = schedule.interval_for(current.day)
    if interval is None:
        return StatusReport(OpenState.CLOSED_TODAY, None, current)

    instant = moment.astimezone(UTC)
    opening = _at(local, interval.opens, zone).astimezone(UTC)
    closing = _at(local, interval.closes, zone).astimezone(UTC)
    if instant < opening:
        return StatusReport(OpenState.CLOSED, _floor_hours(opening - instant), current)
    if instant < closing:
        return StatusReport(OpenState.OPEN, _floor_hours(closing - instant), current)
    return StatusReport(OpenState.CLOSED, None, current)


def _plural_hours(hours: int) -> str:
    return f"{hours} hour{'' if hours == 1 else 's'}"


def narrate(report: StatusReport) -> str:
    """Render a status report as a short human-readable phrase."""
    hours = report.hours
    if report.state is OpenState.CLOSED_TODAY:
        return "Closed today"
    if report.state is OpenState.OPEN:
        if not hours:
            return "Closes in less than an hour"
        return f"Closes in {_plural_hours(hours)}"
    if hours is None:
        return "Closed now"
    if hours == 0:
        return "Opens in less than an hour"
    return f"Opens in {_plural_hours(hours)}"


__all__ = ["OpenState", "StatusReport", "describe_status", "narrate"]
