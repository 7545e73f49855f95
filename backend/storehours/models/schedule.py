"""Weekly recurring opening hours."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from storehours.core.errors import EmptyInterval, InvalidInterval
from storehours.models.clock import MINUTES_PER_DAY, TimeOfDay
from storehours.models.weekday import Weekday

MINUTES_PER_WEEK = 7 * MINUTES_PER_DAY


@dataclass(slots=True, frozen=True)
class Interval:
    """Half-open ``[opens, closes)`` window on a single calendar day."""

    opens: TimeOfDay
    closes: TimeOfDay

    def __post_init__(self) -> None:
        if self.opens.is_end_of_day:
            raise InvalidInterval("An interval cannot open at 24:00")
        if self.opens == self.closes:
            raise EmptyInterval(f"Interval {self.opens}-{self.closes} is never open")
        if self.opens > self.closes:
            raise InvalidInterval(
                f"Interval {self.opens}-{self.closes} crosses midnight; "
                "split it into two days"
            )

    def contains(self, moment: TimeOfDay) -> bool:
        return self.opens <= moment < self.closes

    def covers(self, start: TimeOfDay, end: TimeOfDay) -> bool:
        """Whether ``[start, end]`` lies entirely within the interval."""
        return self.opens <= start and self.closes >= end

    def __str__(self) -> str:
        return f"{self.opens}-{self.closes}"


@dataclass(slots=True, frozen=True)
class ZonedTime:
    """A weekday and wall-clock time tagged with the zone it is expressed in."""

    day: Weekday
    time: TimeOfDay
    timezone: str

    @property
    def minute_of_week(self) -> int:
        return int(self.day) * MINUTES_PER_DAY + self.time.minutes

    def __str__(self) -> str:
        return f"{self.day.label} {self.time} ({self.timezone})"


@dataclass(slots=True, frozen=True)
class WeeklySchedule:
    """Opening interval per weekday, owned by a single store or product.

    ``days`` holds one slot per weekday in Monday-first order; ``None``
    means closed. Every interval is read in ``timezone``.
    """

    timezone: str
    days: tuple[Interval | None, ...] = (None,) * 7

    def __post_init__(self) -> None:
        if len(self.days) != 7:
            raise InvalidInterval("A weekly schedule needs exactly seven day slots")
        for slot in self.days:
            if slot is not None and not isinstance(slot, Interval):
                raise InvalidInterval(f"Unexpected schedule entry: {slot!r}")

    @classmethod
    def from_days(
        cls, timezone: str, hours: Mapping[Weekday, Interval | None] | None = None
    ) -> WeeklySchedule:
        slots: list[Interval | None] = [None] * 7
        seen: set[Weekday] = set()
        for key, interval in (hours or {}).items():
            day = Weekday.parse(key)
            if day in seen:
                raise InvalidInterval(f"{day.label} is listed more than once")
            seen.add(day)
            slots[day] = interval
        return cls(timezone=timezone, days=tuple(slots))

    def interval_for(self, day: Weekday) -> Interval | None:
        """Return the opening interval for ``day`` or ``None`` when closed."""
        return self.days[Weekday.parse(day)]

    def is_closed_on(self, day: Weekday) -> bool:
        return self.interval_for(day) is None

    @property
    def hours(self) -> dict[Weekday, Interval]:
        return dict(self.open_days())

    def open_days(self) -> Iterator[tuple[Weekday, Interval]]:
        for index, slot in enumerate(self.days):
            if slot is not None:
                yield Weekday(index), slot

    def week_ranges(self) -> Iterator[tuple[int, int]]:
        """Yield ``(start, end)`` minute-of-week offsets for every open interval."""
        for day, interval in self.open_days():
            base = int(day) * MINUTES_PER_DAY
            yield base + interval.opens.minutes, base + interval.closes.minutes


__all__ = ["Interval", "MINUTES_PER_WEEK", "WeeklySchedule", "ZonedTime"]
