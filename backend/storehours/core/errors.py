"""Error taxonomy for availability evaluation."""

from __future__ import annotations


class AvailabilityError(ValueError):
    """Base class for rejected availability inputs."""


class InvalidTimezone(AvailabilityError):
    """Raised when a timezone identifier is not in the IANA database."""

    def __init__(self, timezone: object) -> None:
        super().__init__(f"Invalid timezone: {timezone!r}")
        self.timezone = timezone


class InvalidTimeOfDay(AvailabilityError):
    """Raised for malformed or out-of-range wall-clock values."""


class InvalidWeekday(AvailabilityError):
    """Raised when a value cannot be read as a day of the week."""


class InvalidInterval(AvailabilityError):
    """Raised when an opening interval cannot be represented."""


class EmptyInterval(InvalidInterval):
    """Raised when an interval opens and closes at the same minute."""


class InsufficientFilterContext(AvailabilityError):
    """Raised when filter fields are too ambiguous to evaluate."""


__all__ = [
    "AvailabilityError",
    "EmptyInterval",
    "InsufficientFilterContext",
    "InvalidInterval",
    "InvalidTimeOfDay",
    "InvalidTimezone",
    "InvalidWeekday",
]
