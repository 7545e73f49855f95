"""Test fixtures for the availability core."""
from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from storehours.core.config import get_settings
from storehours.models import WeeklySchedule
from storehours.services.availability_service import AvailabilityEvaluator
from storehours.services.conversion_service import CivilTimeConverter, ReferenceWeek
from storehours.services.filter_service import AvailabilityFilter
from storehours.services.schedule_service import parse_schedule
from storehours.services.timezone_service import TimezoneDatabase, get_timezone_database

# Monday 13 January 2025: no DST transition anywhere in the zones used below.
WINTER_WEEK = date(2025, 1, 13)
MONDAY_NOON_UTC = datetime(2025, 1, 13, 12, 0, tzinfo=UTC)

FIXED_ZONES = {
    "Test/Plus2": timezone(timedelta(hours=2)),
    "Test/Minus3": timezone(timedelta(hours=-3)),
    "Test/Minus5": timezone(timedelta(hours=-5)),
}


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings/timezone handles around every test."""
    get_settings.cache_clear()
    get_timezone_database.cache_clear()
    yield
    get_settings.cache_clear()
    get_timezone_database.cache_clear()


@pytest.fixture()
def tz_database() -> TimezoneDatabase:
    return TimezoneDatabase(aliases={"Europe/Kiev": "Europe/Kyiv"})


@pytest.fixture()
def fixed_database() -> TimezoneDatabase:
    """Timezone rules frozen to constant offsets."""
    return TimezoneDatabase(loader=FIXED_ZONES.__getitem__)


@pytest.fixture()
def converter(tz_database: TimezoneDatabase) -> CivilTimeConverter:
    return CivilTimeConverter(tz_database, ReferenceWeek.fixed(WINTER_WEEK))


@pytest.fixture()
def fixed_clock() -> datetime:
    return MONDAY_NOON_UTC


@pytest.fixture()
def evaluator(converter: CivilTimeConverter, fixed_clock: datetime) -> AvailabilityEvaluator:
    return AvailabilityEvaluator(converter, clock=lambda: fixed_clock)


@pytest.fixture()
def availability_filter(
    evaluator: AvailabilityEvaluator, fixed_clock: datetime
) -> AvailabilityFilter:
    return AvailabilityFilter(evaluator, clock=lambda: fixed_clock)


@pytest.fixture()
def new_york_weekdays(tz_database: TimezoneDatabase) -> WeeklySchedule:
    """Monday 09:00-17:00 in New York, closed otherwise."""
    return parse_schedule(
        {"Monday": {"from": "09:00", "to": "17:00"}},
        "America/New_York",
        database=tz_database,
    )
