"""Schema exports."""

from storehours.schemas.availability import (
    ActiveAtParams,
    AvailabilityFilterParams,
    IntervalPayload,
    LocalizedIntervalRead,
    StatusRead,
    WeeklyScheduleCreate,
    ZonedTimeRead,
)

__all__ = [
    "ActiveAtParams",
    "AvailabilityFilterParams",
    "IntervalPayload",
    "LocalizedIntervalRead",
    "StatusRead",
    "WeeklyScheduleCreate",
    "ZonedTimeRead",
]
