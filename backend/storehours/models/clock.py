"""Wall-clock times without a date."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import time

from storehours.core.errors import InvalidTimeOfDay

MINUTES_PER_DAY = 24 * 60

_CLOCK_PATTERN = re.compile(r"^([0-9]{2}):([0-9]{2})(?::00)?$")


@dataclass(slots=True, frozen=True, order=True)
class TimeOfDay:
    """Minute-precision time of day stored as minutes since midnight.

    Regular values cover ``00:00`` to ``23:59``. ``24:00`` is the end-of-day
    marker and is only accepted where the caller asks for it (interval
    closing bounds).
    """

    minutes: int

    def __post_init__(self) -> None:
        if isinstance(self.minutes, bool) or not isinstance(self.minutes, int):
            raise InvalidTimeOfDay(f"Invalid time of day: {self.minutes!r}")
        if not 0 <= self.minutes <= MINUTES_PER_DAY:
            raise InvalidTimeOfDay(f"Time of day out of range: {self.minutes} minutes")

    @classmethod
    def of(cls, hour: int, minute: int = 0) -> TimeOfDay:
        if not 0 <= minute <= 59:
            raise InvalidTimeOfDay(f"Invalid minute: {minute}")
        if not 0 <= hour <= 23 and (hour, minute) != (24, 0):
            raise InvalidTimeOfDay(f"Invalid hour: {hour}")
        return cls(hour * 60 + minute)

    @classmethod
    def parse(cls, value: TimeOfDay | time | str, *, allow_end_of_day: bool = False) -> TimeOfDay:
        """Read ``"HH:MM"`` text or a ``datetime.time`` into a TimeOfDay."""
        if isinstance(value, TimeOfDay):
            result = value
        elif isinstance(value, time):
            result = cls.from_time(value)
        elif isinstance(value, str):
            match = _CLOCK_PATTERN.match(value.strip())
            if match is None:
                raise InvalidTimeOfDay(f"Invalid time of day: {value!r}; expected HH:MM")
            result = cls.of(int(match.group(1)), int(match.group(2)))
        else:
            raise InvalidTimeOfDay(f"Invalid time of day: {value!r}")
        if result.is_end_of_day and not allow_end_of_day:
            raise InvalidTimeOfDay("24:00 is only valid as a closing time")
        return result

    @classmethod
    def from_time(cls, value: time) -> TimeOfDay:
        """Truncate a ``datetime.time`` to minute precision."""
        return cls(value.hour * 60 + value.minute)

    @property
    def hour(self) -> int:
        return self.minutes // 60

    @property
    def minute(self) -> int:
        return self.minutes % 60

    @property
    def is_end_of_day(self) -> bool:
        return self.minutes == MINUTES_PER_DAY

    def to_time(self) -> time:
        if self.is_end_of_day:
            raise InvalidTimeOfDay("24:00 has no datetime.time equivalent")
        return time(self.hour, self.minute)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


MIDNIGHT = TimeOfDay(0)
END_OF_DAY = TimeOfDay(MINUTES_PER_DAY)

__all__ = ["END_OF_DAY", "MIDNIGHT", "MINUTES_PER_DAY", "TimeOfDay"]
