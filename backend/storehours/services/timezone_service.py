"""Access to the IANA timezone database."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from storehours.core.config import get_settings
from storehours.core.errors import InvalidTimezone
from storehours.models.weekday import Weekday

logger = logging.getLogger(__name__)

ZoneLoader = Callable[[str], tzinfo]


class TimezoneDatabase:
    """Read-only handle over timezone rules.

    The default loader reads the system/``tzdata`` rules through ``zoneinfo``.
    Tests pass a loader backed by fixed offsets so results do not depend on
    the installed rule set.
    """

    def __init__(
        self,
        loader: ZoneLoader = ZoneInfo,
        *,
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        self._loader = loader
        self._aliases = dict(aliases or {})

    def canonical_name(self, name: str) -> str:
        """Map legacy identifiers such as ``Europe/Kiev`` to their current name."""
        if not isinstance(name, str) or not name.strip():
            raise InvalidTimezone(name)
        name = name.strip()
        return self._aliases.get(name, name)

    def get(self, name: str) -> tzinfo:
        """Return the rules for ``name`` or raise :class:`InvalidTimezone`."""
        canonical = self.canonical_name(name)
        try:
            return self._loader(canonical)
        except (ZoneInfoNotFoundError, KeyError, ValueError, OSError) as exc:
            logger.warning("Rejected unknown timezone %r", name)
            raise InvalidTimezone(name) from exc

    def is_valid(self, name: str) -> bool:
        try:
            self.get(name)
        except InvalidTimezone:
            return False
        return True

    def abbreviation(self, name: str, at: datetime | None = None) -> str:
        """Return the zone abbreviation in effect at ``at`` (``"EST"``, ``"GMT"``)."""
        moment = (at or datetime.now(UTC)).astimezone(self.get(name))
        return moment.tzname() or ""

    def local_now(self, name: str, now: datetime | None = None) -> datetime:
        """Return ``now`` (default: current time) as wall-clock time in ``name``."""
        moment = now or datetime.now(UTC)
        if moment.tzinfo is None:
            raise ValueError("A timezone-aware datetime is required")
        return moment.astimezone(self.get(name))

    def local_clock_label(self, name: str, now: datetime | None = None) -> str:
        """Render the zone's current day and time, e.g. ``"Monday - 14:05"``."""
        local = self.local_now(name, now)
        return f"{Weekday(local.weekday()).label} - {local:%H:%M}"


@lru_cache
def get_timezone_database() -> TimezoneDatabase:
    """Return the process-wide timezone database handle."""
    settings = get_settings()
    return TimezoneDatabase(aliases=settings.timezone_aliases)


def is_valid_timezone(name: str, database: TimezoneDatabase | None = None) -> bool:
    """Return whether ``name`` is a known IANA timezone identifier."""
    return (database or get_timezone_database()).is_valid(name)


__all__ = [
    "TimezoneDatabase",
    "ZoneLoader",
    "get_timezone_database",
    "is_valid_timezone",
]
