"""Answer whether a weekly schedule is open at a caller's instant or window."""

from __future__ import annotations

import logging
from datetime import datetime

from storehours.core.config import get_settings
from storehours.core.errors import EmptyInterval
from storehours.models import (
    END_OF_DAY,
    MIDNIGHT,
    MINUTES_PER_WEEK,
    TimeOfDay,
    WeeklySchedule,
    Weekday,
)
from storehours.services.conversion_service import (
    CivilTimeConverter,
    Clock,
    ReferenceWeek,
    utc_now,
)

logger = logging.getLogger(__name__)


class AvailabilityEvaluator:
    """Evaluate schedules against instants expressed in any timezone.

    Every query is first converted into the schedule's own timezone, then
    compared with that day's interval. Closed days are never open.

    Without an explicit converter, the reference week follows ``clock``
    unless ``REFERENCE_WEEK`` pins it.
    """

    def __init__(
        self,
        converter: CivilTimeConverter | None = None,
        *,
        clock: Clock = utc_now,
    ) -> None:
        if converter is None:
            reference_week = ReferenceWeek(pinned=get_settings().reference_week, clock=clock)
            converter = CivilTimeConverter(reference_week=reference_week)
        self._converter = converter
        self._clock = clock

    @property
    def converter(self) -> CivilTimeConverter:
        return self._converter

    def is_open_at(
        self,
        schedule: WeeklySchedule,
        day: Weekday | int | str,
        moment: TimeOfDay | str,
        timezone: str,
    ) -> bool:
        """Whether ``schedule`` is open at ``day`` ``moment`` read in ``timezone``."""
        moment = TimeOfDay.parse(moment)
        local = self._converter.convert(day, moment, timezone, schedule.timezone)
        interval = schedule.interval_for(local.day)
        verdict = interval is not None and interval.contains(local.time)
        logger.debug("is_open_at %s -> %s", local, verdict)
        return verdict

    def is_open_during(
        self,
        schedule: WeeklySchedule,
        day: Weekday | int | str,
        start: TimeOfDay | str,
        end: TimeOfDay | str,
        timezone: str,
    ) -> bool:
        """Whether ``schedule`` is open for the whole ``[start, end]`` window.

        Both bounds are converted independently. A window that lands on two
        different days in the schedule's timezone is never covered, except
        when it ends exactly at the following midnight. ``start > end`` means
        the window runs past the caller's own midnight.

        Raises:
            EmptyInterval: if ``start`` equals ``end``.
        """
        day = Weekday.parse(day)
        start = TimeOfDay.parse(start)
        end = TimeOfDay.parse(end, allow_end_of_day=True)
        if start == end:
            raise EmptyInterval(f"Requested window {start}-{end} is empty")
        end_day = day if start < end else day.shift(1)

        local_start = self._converter.convert(day, start, timezone, schedule.timezone)
        local_end = self._converter.convert(end_day, end, timezone, schedule.timezone)

        end_time = local_end.time
        if local_end.day != local_start.day:
            if local_end.day == local_start.day.shift(1) and local_end.time == MIDNIGHT:
                end_time = END_OF_DAY
            else:
                logger.debug("is_open_during %s..%s crosses midnight", local_start, local_end)
                return False

        interval = schedule.interval_for(local_start.day)
        verdict = interval is not None and interval.covers(local_start.time, end_time)
        logger.debug("is_open_during %s..%s -> %s", local_start, local_end, verdict)
        return verdict

    def is_open_on(
        self,
        schedule: WeeklySchedule,
        day: Weekday | int | str,
        timezone: str,
    ) -> bool:
        """Whether ``schedule`` opens at any point of the caller's whole ``day``."""
        day = Weekday.parse(day)
        first = self._converter.convert(day, MIDNIGHT, timezone, schedule.timezone)
        last = self._converter.convert(day, END_OF_DAY, timezone, schedule.timezone)
        window_start = first.minute_of_week
        window_end = last.minute_of_week
        if window_end <= window_start:
            window_end += MINUTES_PER_WEEK

        for opens, closes in schedule.week_ranges():
            for offset in (0, MINUTES_PER_WEEK):
                if opens + offset < window_end and closes + offset > window_start:
                    return True
        return False

    def is_open_now(self, schedule: WeeklySchedule, now: datetime | None = None) -> bool:
        """Whether ``schedule`` is open at ``now`` (default: the evaluator's clock)."""
        local = self._converter.from_instant(now or self._clock(), schedule.timezone)
        interval = schedule.interval_for(local.day)
        return interval is not None and interval.contains(local.time)


__all__ = ["AvailabilityEvaluator"]
