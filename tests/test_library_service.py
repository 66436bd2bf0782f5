"""Tests for exercise and food lookups."""

from fitness_tracker.domain.records import Exercise, ExerciseTag, Food
from fitness_tracker.services.library import (
    UNKNOWN_NAME,
    exercise_name,
    filter_exercises,
    filter_foods,
    food_name,
    resolve_exercise,
    resolve_food,
    tag_labels,
    toggle_tag,
)

EXERCISES = [
    Exercise(id="e1", name="Bench Press", tags=(ExerciseTag.CHEST,)),
    Exercise(id="e2", name="Squat", tags=(ExerciseTag.LEGS, ExerciseTag.CORE)),
    Exercise(id="e3", name="Incline Bench", tags=(ExerciseTag.CHEST,)),
]
FOODS = [
    Food(id="f1", name="Chicken breast 100g", calories=165, protein=31),
    Food(id="f2", name="Egg 1x", calories=78, protein=6),
]


def test_resolve_returns_record_or_none() -> None:
    assert resolve_exercise(EXERCISES, "e2") == EXERCISES[1]
    assert resolve_exercise(EXERCISES, "missing") is None
    assert resolve_food(FOODS, "f2") == FOODS[1]
    assert resolve_food(FOODS, "missing") is None


def test_names_fall_back_to_placeholder() -> None:
    assert exercise_name(EXERCISES, "e1") == "Bench Press"
    assert exercise_name(EXERCISES, "deleted") == UNKNOWN_NAME
    assert food_name(FOODS, "f1") == "Chicken breast 100g"
    assert food_name([], "f1") == UNKNOWN_NAME


def test_filter_exercises_by_query_and_tag() -> None:
    assert filter_exercises(EXERCISES, "bench") == [EXERCISES[0], EXERCISES[2]]
    assert filter_exercises(EXERCISES, tag=ExerciseTag.LEGS) == [EXERCISES[1]]
    assert filter_exercises(EXERCISES, "squat", ExerciseTag.CHEST) == []
    assert filter_exercises(EXERCISES) == EXERCISES


def test_filter_foods_is_case_insensitive() -> None:
    assert filter_foods(FOODS, "EGG") == [FOODS[1]]
    assert filter_foods(FOODS, None) == FOODS


def test_toggle_tag_adds_then_removes() -> None:
    added = toggle_tag(EXERCISES[0], ExerciseTag.TRICEPS)
    removed = toggle_tag(added, ExerciseTag.CHEST)

    assert added.tags == (ExerciseTag.CHEST, ExerciseTag.TRICEPS)
    assert removed.tags == (ExerciseTag.TRICEPS,)
    assert removed.id == "e1"


def test_tag_labels() -> None:
    assert tag_labels(EXERCISES[1].tags) == ["Legs", "Core"]
