"""Tests for the JSON file record repository."""

import json

import pytest

from fitness_tracker.adapters.json_file_record_repository import (
    JsonFileRecordRepository,
)
from fitness_tracker.services.backup import BackupService, LogKind
from fitness_tracker.services.records import RecordService


def test_missing_file_reads_as_empty(tmp_path) -> None:
    repository = JsonFileRecordRepository(tmp_path / "records.json")

    assert repository.get("gymLog") is None


def test_set_many_creates_file_and_keeps_other_keys(tmp_path) -> None:
    path = tmp_path / "nested" / "records.json"
    repository = JsonFileRecordRepository(path)

    repository.set_many({"unitPref": "metric"})
    repository.set_many({"goals": {"calories": 2000}, "bodyLog": []})

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "unitPref": "metric",
        "goals": {"calories": 2000},
        "bodyLog": [],
    }
    assert repository.get("goals") == {"calories": 2000}
    assert list(path.parent.iterdir()) == [path]


def test_non_object_file_is_rejected(tmp_path) -> None:
    path = tmp_path / "records.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        JsonFileRecordRepository(path).get("gymLog")


def test_records_survive_restart(tmp_path) -> None:
    path = tmp_path / "records.json"
    first = RecordService(JsonFileRecordRepository(path))
    entry = first.log_workout("e1", date="2025-07-01", sets=3, reps=10, weight=50)

    second = RecordService(JsonFileRecordRepository(path))

    assert second.snapshot.gym_log == (entry,)


def test_seeded_references_resolve_after_restart(tmp_path) -> None:
    path = tmp_path / "records.json"
    first = RecordService(JsonFileRecordRepository(path))
    bench = first.snapshot.exercises[0]
    chicken = first.snapshot.foods[0]
    first.log_workout(bench.id, date="2025-07-01", sets=3, reps=8, weight=60)
    first.log_intake(chicken.id, date="2025-07-01", qty=2)

    second = BackupService(RecordService(JsonFileRecordRepository(path)))

    gym_rows = second.export_csv(LogKind.GYM).splitlines()
    nutrition_rows = second.export_csv(LogKind.NUTRITION).splitlines()
    assert gym_rows[1] == "2025-07-01,Bench Press,3,8,60,"
    assert nutrition_rows[1].startswith("2025-07-01,Chicken breast 100g,2,330,")
