"""Caller-side availability filters."""

from __future__ import annotations

from dataclasses import dataclass

from storehours.models.clock import TimeOfDay
from storehours.models.weekday import Weekday


@dataclass(slots=True, frozen=True)
class AvailabilityQuery:
    """Listing filter expressed from the caller's point of view.

    ``at`` asks for a single instant, ``start``/``end`` for a window that must
    be fully covered. All day and time fields are read in ``timezone``.
    """

    timezone: str | None = None
    day: Weekday | None = None
    at: TimeOfDay | None = None
    start: TimeOfDay | None = None
    end: TimeOfDay | None = None

    @property
    def constrains_time(self) -> bool:
        return any(value is not None for value in (self.day, self.at, self.start, self.end))

    @property
    def has_range(self) -> bool:
        return self.start is not None or self.end is not None


__all__ = ["AvailabilityQuery"]
