"""Convert weekday + wall-clock pairs between timezones."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta, tzinfo

from storehours.core.config import get_settings
from storehours.models import TimeOfDay, Weekday, ZonedTime
from storehours.services.timezone_service import TimezoneDatabase, get_timezone_database

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True, frozen=True)
class ReferenceWeek:
    """Calendar week used to give a weekday + time a concrete date.

    With ``pinned`` set, the week containing that date is always used.
    Otherwise the week containing "now" (per ``clock``) in the source zone.
    Weeks start on Monday.
    """

    pinned: date | None = None
    clock: Clock = utc_now

    @classmethod
    def fixed(cls, anchor: date) -> ReferenceWeek:
        return cls(pinned=anchor)

    @classmethod
    def current(cls, clock: Clock = utc_now) -> ReferenceWeek:
        return cls(clock=clock)

    def monday(self, zone: tzinfo) -> date:
        """Return the Monday of the reference week as seen from ``zone``."""
        if self.pinned is not None:
            anchor = self.pinned
        else:
            anchor = self.clock().astimezone(zone).date()
        return anchor - timedelta(days=anchor.weekday())


class CivilTimeConverter:
    """Re-express a weekday and wall-clock time in another timezone."""

    def __init__(
        self,
        database: TimezoneDatabase | None = None,
        reference_week: ReferenceWeek | None = None,
    ) -> None:
        self._database = database or get_timezone_database()
        if reference_week is None:
            reference_week = ReferenceWeek(pinned=get_settings().reference_week)
        self._reference_week = reference_week

    @property
    def database(self) -> TimezoneDatabase:
        return self._database

    @property
    def reference_week(self) -> ReferenceWeek:
        return self._reference_week

    def anchor(self, day: Weekday, moment: TimeOfDay, timezone: str) -> datetime:
        """Pin ``day`` at ``moment`` to an aware datetime inside the reference week.

        The UTC offset is the one observed in ``timezone`` on that date.
        ``24:00`` lands on midnight of the following day.
        """
        zone = self._database.get(timezone)
        monday = self._reference_week.monday(zone)
        midnight = datetime.combine(monday + timedelta(days=int(day)), time.min, tzinfo=zone)
        return midnight + timedelta(minutes=moment.minutes)

    def convert(
        self,
        day: Weekday | int | str,
        moment: TimeOfDay | str,
        from_tz: str,
        to_tz: str,
    ) -> ZonedTime:
        """Return the weekday and wall time in ``to_tz`` for ``day`` at ``moment`` in ``from_tz``.

        The resulting weekday may differ by one day in either direction,
        including the Sunday/Monday wrap.

        Raises:
            InvalidTimezone: if either identifier is unknown.
        """
        day = Weekday.parse(day)
        moment = TimeOfDay.parse(moment, allow_end_of_day=True)
        target = self._database.get(to_tz)
        instant = self.anchor(day, moment, from_tz)
        return self._zoned(instant.astimezone(target), to_tz, source=(day, moment, from_tz))

    def convert_zoned(self, value: ZonedTime, to_tz: str) -> ZonedTime:
        return self.convert(value.day, value.time, value.timezone, to_tz)

    def from_instant(self, instant: datetime, to_tz: str) -> ZonedTime:
        """Express an aware datetime as weekday + wall time in ``to_tz``."""
        if instant.tzinfo is None:
            raise ValueError("A timezone-aware datetime is required")
        local = instant.astimezone(self._database.get(to_tz))
        return self._zoned(local, to_tz)

    def _zoned(
        self,
        local: datetime,
        timezone: str,
        *,
        source: tuple[Weekday, TimeOfDay, str] | None = None,
    ) -> ZonedTime:
        result = ZonedTime(
            day=Weekday(local.weekday()),
            time=TimeOfDay.from_time(local.time()),
            timezone=self._database.canonical_name(timezone),
        )
        if source is not None:
            day, moment, from_tz = source
            logger.debug("Converted %s %s (%s) to %s", day.label, moment, from_tz, result)
        return result


__all__ = ["CivilTimeConverter", "Clock", "ReferenceWeek", "utc_now"]
