"""Days of the week."""

from __future__ import annotations

import enum

from storehours.core.errors import InvalidWeekday


class Weekday(enum.IntEnum):
    """Day of the week, Monday first to match ``datetime.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        """Canonical day name used as the JSON key, e.g. ``"Monday"``."""
        return self.name.capitalize()

    def shift(self, days: int) -> Weekday:
        return Weekday((self.value + days) % 7)

    @classmethod
    def parse(cls, value: Weekday | int | str) -> Weekday:
        """Read a weekday from its index (0-6) or its English name."""
        if isinstance(value, Weekday):
            return value
        if isinstance(value, bool):
            raise InvalidWeekday(f"Invalid weekday: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as exc:
                raise InvalidWeekday(f"Invalid weekday: {value!r}") from exc
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
            if key.isdigit():
                return cls.parse(int(key))
        raise InvalidWeekday(f"Invalid weekday: {value!r}")

    def __str__(self) -> str:
        return self.label


__all__ = ["Weekday"]
