"""Domain value types for weekly availability."""

from storehours.models.clock import END_OF_DAY, MIDNIGHT, MINUTES_PER_DAY, TimeOfDay
from storehours.models.query import AvailabilityQuery
from storehours.models.schedule import (
    MINUTES_PER_WEEK,
    Interval,
    WeeklySchedule,
    ZonedTime,
)
from storehours.models.weekday import Weekday

__all__ = [
    "AvailabilityQuery",
    "END_OF_DAY",
    "Interval",
    "MIDNIGHT",
    "MINUTES_PER_DAY",
    "MINUTES_PER_WEEK",
    "TimeOfDay",
    "WeeklySchedule",
    "Weekday",
    "ZonedTime",
]
