"""Build, serialise and re-express weekly schedules."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from storehours.core.errors import InvalidInterval
from storehours.models import END_OF_DAY, MIDNIGHT, Interval, TimeOfDay, WeeklySchedule, Weekday, ZonedTime
from storehours.services.conversion_service import CivilTimeConverter
from storehours.services.timezone_service import TimezoneDatabase, get_timezone_database


@dataclass(slots=True, frozen=True)
class LocalizedInterval:
    """One schedule interval with both bounds shown in a viewer's timezone."""

    day: Weekday
    interval: Interval
    opens: ZonedTime
    closes: ZonedTime


def make_interval(opens: TimeOfDay | str, closes: TimeOfDay | str) -> Interval:
    return Interval(
        opens=TimeOfDay.parse(opens),
        closes=TimeOfDay.parse(closes, allow_end_of_day=True),
    )


def _read_interval(value: Any) -> Interval | None:
    if value is None or isinstance(value, Interval):
        return value
    if isinstance(value, Mapping):
        opens, closes = value.get("from"), value.get("to")
        if not opens and not closes:
            return None
        if not opens or not closes:
            raise InvalidInterval("Both 'from' and 'to' are required for an open day")
        return make_interval(opens, closes)
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return make_interval(value[0], value[1])
    raise InvalidInterval(f"Unsupported interval value: {value!r}")


def parse_schedule(
    hours: Mapping[Any, Any] | None,
    timezone: str,
    *,
    database: TimezoneDatabase | None = None,
) -> WeeklySchedule:
    """Build a schedule from the JSON form ``{"Monday": {"from": "09:00", "to": "17:00"}}``.

    Keys may be day names or indexes (Monday = 0). Missing or ``null`` days
    are closed.

    Raises:
        InvalidTimezone: if ``timezone`` is unknown.
        InvalidWeekday: for unrecognised day keys.
        InvalidInterval: for duplicate days or malformed intervals.
        EmptyInterval: when an interval opens and closes at the same time.
    """
    database = database or get_timezone_database()
    database.get(timezone)
    parsed: dict[Weekday, Interval | None] = {}
    for key, value in (hours or {}).items():
        day = Weekday.parse(key)
        if day in parsed:
            raise InvalidInterval(f"{day.label} is listed more than once")
        parsed[day] = _read_interval(value)
    return WeeklySchedule.from_days(database.canonical_name(timezone), parsed)


def dump_schedule(schedule: WeeklySchedule) -> dict[str, dict[str, str]]:
    """Return the JSON form of ``schedule``; closed days are omitted."""
    return {
        day.label: {"from": str(interval.opens), "to": str(interval.closes)}
        for day, interval in schedule.open_days()
    }


def split_overnight(
    day: Weekday | int | str,
    opens: TimeOfDay | str,
    closes: TimeOfDay | str,
) -> dict[Weekday, Interval]:
    """Split a window such as ``22:00-02:00`` into same-day intervals.

    ``Monday 22:00-02:00`` becomes ``Monday 22:00-24:00`` and
    ``Tuesday 00:00-02:00``. Windows that do not cross midnight are returned
    unchanged.
    """
    day = Weekday.parse(day)
    start = TimeOfDay.parse(opens)
    end = TimeOfDay.parse(closes, allow_end_of_day=True)
    if start < end:
        return {day: Interval(start, end)}
    if end == MIDNIGHT:
        return {day: Interval(start, END_OF_DAY)}
    return {
        day: Interval(start, END_OF_DAY),
        day.shift(1): Interval(MIDNIGHT, end),
    }


def merge_hours(*parts: Mapping[Weekday, Interval]) -> dict[Weekday, Interval]:
    """Combine per-day interval maps, rejecting two intervals on one day."""
    merged: dict[Weekday, Interval] = {}
    for part in parts:
        for day, interval in part.items():
            if day in merged:
                raise InvalidInterval(f"{day.label} already has an interval")
            merged[day] = interval
    return merged


def localize_schedule(
    schedule: WeeklySchedule,
    viewer_tz: str,
    *,
    converter: CivilTimeConverter | None = None,
) -> list[LocalizedInterval]:
    """Express every open interval of ``schedule`` in ``viewer_tz``.

    Each bound carries its own weekday because conversion can move it to
    the previous or next day.
    """
    converter = converter or CivilTimeConverter()
    localized: list[LocalizedInterval] = []
    for day, interval in schedule.open_days():
        localized.append(
            LocalizedInterval(
                day=day,
                interval=interval,
                opens=converter.convert(day, interval.opens, schedule.timezone, viewer_tz),
                closes=converter.convert(day, interval.closes, schedule.timezone, viewer_tz),
            )
        )
    return localized


__all__ = [
    "LocalizedInterval",
    "dump_schedule",
    "localize_schedule",
    "make_interval",
    "merge_hours",
    "parse_schedule",
    "split_overnight",
]
