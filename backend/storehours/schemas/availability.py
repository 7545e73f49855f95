"""Schemas for schedules, availability filters and status payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from storehours.models import AvailabilityQuery, TimeOfDay, WeeklySchedule, Weekday, ZonedTime
from storehours.services.schedule_service import LocalizedInterval, parse_schedule
from storehours.services.status_service import OpenState, StatusReport, narrate
from storehours.services.timezone_service import is_valid_timezone

_CLOCK = r"^([01]\d|2[0-3]):[0-5]\d$"
_CLOSING_CLOCK = r"^(([01]\d|2[0-3]):[0-5]\d|24:00)$"


def _validate_timezone(value: str | None) -> str | None:
    if value is not None and not is_valid_timezone(value):
        raise ValueError("Invalid timezone string")
    return value


class IntervalPayload(BaseModel):
    """Opening interval in ``HH:MM`` form."""

    opens: str = Field(alias="from", pattern=_CLOCK, examples=["09:00"])
    closes: str = Field(alias="to", pattern=_CLOSING_CLOCK, examples=["17:00"])

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class WeeklyScheduleCreate(BaseModel):
    """Weekly hours of a store (``operatingHours``) or product (``availability``)."""

    timezone: str = Field(examples=["Europe/Kyiv"])
    hours: dict[str, IntervalPayload | None] = Field(
        default_factory=dict,
        examples=[{"Tuesday": {"from": "10:00", "to": "17:00"}}],
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str | None) -> str | None:
        return _validate_timezone(value)

    @field_validator("hours")
    @classmethod
    def _check_hours(cls, value: dict[str, IntervalPayload | None]) -> dict[str, IntervalPayload | None]:
        normalised: dict[str, IntervalPayload | None] = {}
        for key, interval in value.items():
            day = Weekday.parse(key)
            if day.label in normalised:
                raise ValueError(f"{day.label} is listed more than once")
            normalised[day.label] = interval
        return normalised

    @model_validator(mode="after")
    def _check_intervals(self) -> WeeklyScheduleCreate:
        self.to_schedule()
        return self

    def to_schedule(self) -> WeeklySchedule:
        """Build the domain schedule; interval errors propagate unchanged."""
        return parse_schedule(
            {
                day: None if interval is None else interval.model_dump(by_alias=True)
                for day, interval in self.hours.items()
            },
            self.timezone,
        )


class AvailabilityFilterParams(BaseModel):
    """Optional day/time filters from a listing request."""

    timezone: str | None = Field(default=None, examples=["Europe/London"])
    day: str | None = Field(default=None, examples=["Monday"])
    time: str | None = Field(default=None, pattern=_CLOCK, examples=["10:30"])
    start: str | None = Field(default=None, alias="from", pattern=_CLOCK, examples=["08:00"])
    end: str | None = Field(default=None, alias="to", pattern=_CLOSING_CLOCK, examples=["11:00"])

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str | None) -> str | None:
        return _validate_timezone(value)

    @field_validator("day")
    @classmethod
    def _check_day(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return Weekday.parse(value).label

    def to_query(self) -> AvailabilityQuery:
        return AvailabilityQuery(
            timezone=self.timezone,
            day=None if self.day is None else Weekday.parse(self.day),
            at=None if self.time is None else TimeOfDay.parse(self.time),
            start=None if self.start is None else TimeOfDay.parse(self.start),
            end=None if self.end is None else TimeOfDay.parse(self.end, allow_end_of_day=True),
        )


class ActiveAtParams(BaseModel):
    """Parameters for "open now at this time" listings."""

    timezone: str = Field(examples=["Europe/London"])
    time: str = Field(pattern=_CLOCK, examples=["10:30"])

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str | None) -> str | None:
        return _validate_timezone(value)


class ZonedTimeRead(BaseModel):
    """Weekday and wall-clock time in an explicit timezone."""

    day: str
    time: str
    timezone: str

    @classmethod
    def from_zoned(cls, value: ZonedTime) -> ZonedTimeRead:
        return cls(day=value.day.label, time=str(value.time), timezone=value.timezone)


class LocalizedIntervalRead(BaseModel):
    """Schedule interval alongside its bounds in the viewer's timezone."""

    day: str
    opens: str = Field(serialization_alias="from")
    closes: str = Field(serialization_alias="to")
    local_opens: ZonedTimeRead
    local_closes: ZonedTimeRead

    @classmethod
    def from_localized(cls, value: LocalizedInterval) -> LocalizedIntervalRead:
        return cls(
            day=value.day.label,
            opens=str(value.interval.opens),
            closes=str(value.interval.closes),
            local_opens=ZonedTimeRead.from_zoned(value.opens),
            local_closes=ZonedTimeRead.from_zoned(value.closes),
        )


class StatusRead(BaseModel):
    """Display status for a store or product."""

    state: OpenState
    hours: int | None = None
    message: str
    local_time: str

    @classmethod
    def from_report(cls, report: StatusReport) -> StatusRead:
        return cls(
            state=report.state,
            hours=report.hours,
            message=narrate(report),
            local_time=f"{report.local.day.label} - {report.local.time}",
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
