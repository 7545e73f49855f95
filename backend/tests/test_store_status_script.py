"""Tests for the store status command line script."""

from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest
import yaml

DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "store_status.py"

RECORDS = """
stores:
  - name: Harbour Books
    timezone: America/New_York
    operatingHours:
      Monday: {from: "09:00", to: "17:00"}
  - name: Night Owl
    timezone: America/New_York
    operatingHours:
      Wednesday: {from: "20:00", to: "24:00"}
  - name: Broken
    timezone: Atlantis/Capital
    operatingHours:
      Monday: {from: "09:00", to: "17:00"}
"""


@pytest.fixture()
def store_status():
    spec = importlib.util.spec_from_file_location("store_status", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    return module


@pytest.fixture()
def records_file(tmp_path: Path) -> Path:
    path = tmp_path / "stores.yaml"
    path.write_text(RECORDS, encoding="utf-8")
    return path


def test_invalid_records_are_skipped(store_status, records_file: Path) -> None:
    candidates = store_status.build_candidates(store_status.load_records(records_file))
    assert [name for (name, _), _ in candidates] == ["Harbour Books", "Night Owl"]


def test_day_filter_lists_matching_stores(
    store_status, records_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = store_status.main(
        [str(records_file), "--timezone", "Europe/London", "--day", "Monday"]
    )

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert len(lines) == 1
    assert lines[0].startswith("Harbour Books: ")
    assert lines[0].endswith("America/New_York)")


def test_day_filter_without_timezone_fails(
    store_status, records_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert store_status.main([str(records_file), "--day", "Thursday"]) == 2
    assert capsys.readouterr().out == ""


def test_active_at_requires_timezone(store_status, records_file: Path) -> None:
    assert store_status.main([str(records_file), "--active-at", "10:00"]) == 2
    assert store_status.main([str(records_file), "--timezone", "Europe/Nowhere", "--active-at", "10:00"]) == 2


@pytest.mark.parametrize("body", ["stores: []\n", "products: []\n", "stores:\n", ""])
def test_empty_record_lists_print_nothing(
    store_status, tmp_path: Path, capsys: pytest.CaptureFixture[str], body: str
) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text(body, encoding="utf-8")

    assert store_status.load_records(path) == []
    assert store_status.main([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_records_that_are_not_mappings_are_skipped(store_status, tmp_path: Path) -> None:
    path = tmp_path / "mixed.yaml"
    path.write_text(
        'stores:\n  - just a name\n  - name: Corner Shop\n    timezone: UTC\n', encoding="utf-8"
    )

    assert store_status.load_records(path) == [{"name": "Corner Shop", "timezone": "UTC"}]


def test_records_sharing_a_name_keep_their_own_schedule(
    store_status, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    always = {day: {"from": "00:00", "to": "24:00"} for day in DAYS}
    path = tmp_path / "twins.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "stores": [
                    {"name": "Shop", "timezone": "UTC", "operatingHours": always},
                    {"name": "Shop", "timezone": "UTC", "operatingHours": {}},
                ]
            }
        ),
        encoding="utf-8",
    )

    assert store_status.main([str(path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Shop: Closes in ")
    assert lines[1].startswith("Shop: Closed today ")
