"""Tests for stored-value conversion."""

import math

import pytest

from fitness_tracker.domain import codec
from fitness_tracker.domain.dates import parse_day
from fitness_tracker.domain.records import ExerciseTag, Goals


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (5, 5),
        (2.5, 2.5),
        ("42", 42),
        (" 7.25 ", 7.25),
        ("", 0),
        ("abc", 0),
        (None, 0),
        (True, 0),
        (math.nan, 0),
        ("inf", 0),
        ([1], 0),
    ],
)
def test_to_number(raw: object, expected: float) -> None:
    assert codec.to_number(raw) == expected


def test_round_half_up() -> None:
    assert codec.round_half_up(583.5) == 584
    assert codec.round_half_up(2.4) == 2
    assert codec.round_half_up(-0.5) == 0


def test_parse_gym_entry_reads_camel_case_keys() -> None:
    entry = codec.parse_gym_entry(
        {"id": "g1", "date": "2025-07-01", "exerciseId": "e1", "sets": "3"}
    )

    assert entry.exercise_id == "e1"
    assert entry.sets == 3
    assert entry.weight == 0
    assert codec.dump_gym_entry(entry)["exerciseId"] == "e1"


def test_parse_exercise_without_tags() -> None:
    exercise = codec.parse_exercise({"id": "e1", "name": "Row"})

    assert exercise.tags == ()
    assert codec.dump_exercise(exercise)["tags"] == []


def test_parse_tags_drops_unknown_and_duplicates() -> None:
    assert codec.parse_tags(["core", "cardio", "core", "back"]) == (
        ExerciseTag.CORE,
        ExerciseTag.BACK,
    )
    assert codec.parse_tags("core") == ()


def test_parse_goals_keeps_defaults() -> None:
    assert codec.parse_goals({"protein": "150"}) == Goals(protein=150)
    with pytest.raises(ValueError):
        codec.parse_goals([2000])


def test_parse_collection_rejects_wrong_shape() -> None:
    with pytest.raises(ValueError):
        codec.parse_collection({"id": "f1"}, codec.parse_food)
    with pytest.raises(ValueError):
        codec.parse_collection(["f1"], codec.parse_food)


@pytest.mark.parametrize(
    ("value", "valid"),
    [
        ("2025-07-01", True),
        ("2024-02-29", True),
        ("2025-02-29", False),
        ("2025-7-1", False),
        ("01/07/2025", False),
        ("2025-07-01\n", False),
        (None, False),
    ],
)
def test_parse_day(value: object, valid: bool) -> None:
    assert (parse_day(value) is not None) is valid
