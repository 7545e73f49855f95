"""Print opening status for stores or products described in a YAML/JSON file.

Each record needs ``name`` and ``timezone`` plus ``operatingHours`` (stores)
or ``availability`` (products) in the ``{"Monday": {"from": "09:00", "to": "17:00"}}``
form. Day/time options filter the list the same way listing endpoints do.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from storehours.core.config import get_settings
from storehours.core.errors import AvailabilityError
from storehours.core.logging import configure_logging
from storehours.models import WeeklySchedule
from storehours.schemas import ActiveAtParams, AvailabilityFilterParams, StatusRead
from storehours.services.filter_service import AvailabilityFilter
from storehours.services.schedule_service import parse_schedule
from storehours.services.status_service import describe_status

LOGGER = logging.getLogger("storehours.scripts.store_status")


def load_records(path: Path) -> list[dict[str, Any]]:
    with path.open("r", encoding="utf-8") as fh:
        payload = yaml.safe_load(fh)
    if payload is None:
        return []
    if isinstance(payload, dict):
        if "stores" in payload:
            payload = payload["stores"]
        elif "products" in payload:
            payload = payload["products"]
        else:
            payload = [payload]
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise SystemExit(f"{path}: expected a list of records")
    records: list[dict[str, Any]] = []
    for index, record in enumerate(payload):
        if not isinstance(record, dict):
            LOGGER.error("Skipping record %d: expected a mapping, got %r", index, record)
            continue
        records.append(record)
    return records


def build_candidates(
    records: list[dict[str, Any]],
) -> list[tuple[tuple[str, WeeklySchedule], WeeklySchedule]]:
    """Pair each parsed record with its schedule; the entity keeps both."""
    default_tz = get_settings().default_timezone
    candidates: list[tuple[tuple[str, WeeklySchedule], WeeklySchedule]] = []
    for index, record in enumerate(records):
        name = str(record.get("name") or f"record-{index}")
        hours = record.get("operatingHours") or record.get("availability") or {}
        try:
            schedule = parse_schedule(hours, record.get("timezone") or default_tz)
        except AvailabilityError as exc:
            LOGGER.error("Skipping %s: %s", name, exc)
            continue
        candidates.append(((name, schedule), schedule))
    return candidates


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show store/product opening status")
    parser.add_argument("path", type=Path, help="YAML or JSON file with records")
    parser.add_argument("--timezone", help="Caller timezone, e.g. Europe/London")
    parser.add_argument("--day", help="Day name to filter on, e.g. Monday")
    parser.add_argument("--time", help="Filter on a single HH:MM time")
    parser.add_argument("--from", dest="start", help="Range start, HH:MM")
    parser.add_argument("--to", dest="end", help="Range end, HH:MM")
    parser.add_argument(
        "--active-at",
        dest="active_at",
        help="Only records open today at this HH:MM in --timezone",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()

    candidates = build_candidates(load_records(args.path))
    predicate = AvailabilityFilter()
    try:
        if args.active_at:
            params = ActiveAtParams(timezone=args.timezone, time=args.active_at)
            matches = predicate.active_at(candidates, params.timezone, params.time)
        else:
            filters = AvailabilityFilterParams(
                timezone=args.timezone,
                day=args.day,
                time=args.time,
                start=args.start,
                end=args.end,
            )
            matches = predicate.filter(candidates, filters.to_query())
    except (ValidationError, AvailabilityError) as exc:
        LOGGER.error("Invalid filter: %s", exc)
        return 2

    for name, schedule in matches:
        status = StatusRead.from_report(describe_status(schedule))
        print(f"{name}: {status.message} ({status.local_time} {schedule.timezone})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
