"""Keep or drop listing candidates by their weekly availability."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import TypeVar

from storehours.core.errors import InsufficientFilterContext
from storehours.models import AvailabilityQuery, TimeOfDay, WeeklySchedule, Weekday
from storehours.services.availability_service import AvailabilityEvaluator
from storehours.services.conversion_service import Clock, utc_now

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class AvailabilityFilter:
    """Predicate that matches schedules against an :class:`AvailabilityQuery`.

    Day and time filters are only meaningful together with the caller's
    timezone; without one the query is rejected instead of guessed.
    """

    def __init__(
        self,
        evaluator: AvailabilityEvaluator | None = None,
        *,
        clock: Clock = utc_now,
    ) -> None:
        self._evaluator = evaluator or AvailabilityEvaluator(clock=clock)
        self._clock = clock

    def validate(self, query: AvailabilityQuery) -> str | None:
        """Reject queries whose fields cannot be evaluated unambiguously.

        Returns the query timezone when the query constrains day or time,
        ``None`` when every candidate is kept.

        Raises:
            InsufficientFilterContext: for day/time fields without a timezone,
                a half-open range, or an instant combined with a range.
            InvalidTimezone: if the query timezone is unknown.
        """
        if not query.constrains_time:
            return None
        if query.timezone is None:
            logger.warning("Rejected availability filter without timezone: %s", query)
            raise InsufficientFilterContext(
                "A timezone is required to filter by day or time"
            )
        if query.has_range and (query.start is None or query.end is None):
            raise InsufficientFilterContext("Both 'from' and 'to' are required for a range")
        if query.at is not None and query.has_range:
            raise InsufficientFilterContext("Filter by a single time or by a range, not both")
        self._evaluator.converter.database.get(query.timezone)
        return query.timezone

    def matches(self, schedule: WeeklySchedule, query: AvailabilityQuery) -> bool:
        """Whether ``schedule`` satisfies every field present in ``query``."""
        timezone = self.validate(query)
        if timezone is None:
            return True
        return self._matches(schedule, query, timezone, self._day_of(query, timezone))

    def filter(
        self,
        candidates: Iterable[tuple[EntityT, WeeklySchedule]],
        query: AvailabilityQuery,
    ) -> list[EntityT]:
        """Return the entities whose schedule satisfies ``query``, in input order."""
        timezone = self.validate(query)
        if timezone is None:
            return [entity for entity, _ in candidates]
        day = self._day_of(query, timezone)
        kept = [
            entity
            for entity, schedule in candidates
            if self._matches(schedule, query, timezone, day)
        ]
        logger.debug("Availability filter kept %d candidate(s) for %s", len(kept), query)
        return kept

    def active_at(
        self,
        candidates: Iterable[tuple[EntityT, WeeklySchedule]],
        timezone: str,
        at: TimeOfDay | str,
        now: datetime | None = None,
    ) -> list[EntityT]:
        """Return entities open today at ``at`` on the caller's clock.

        "Today" is the current weekday in ``timezone`` at ``now``.
        """
        day = self._today(timezone, now)
        query = AvailabilityQuery(timezone=timezone, day=day, at=TimeOfDay.parse(at))
        return self.filter(candidates, query)

    def _matches(
        self,
        schedule: WeeklySchedule,
        query: AvailabilityQuery,
        timezone: str,
        day: Weekday,
    ) -> bool:
        if query.at is not None:
            return self._evaluator.is_open_at(schedule, day, query.at, timezone)
        if query.start is not None and query.end is not None:
            return self._evaluator.is_open_during(schedule, day, query.start, query.end, timezone)
        return self._evaluator.is_open_on(schedule, day, timezone)

    def _day_of(self, query: AvailabilityQuery, timezone: str) -> Weekday:
        return query.day if query.day is not None else self._today(timezone)

    def _today(self, timezone: str, now: datetime | None = None) -> Weekday:
        return self._evaluator.converter.from_instant(now or self._clock(), timezone).day


__all__ = ["AvailabilityFilter"]
