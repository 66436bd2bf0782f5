"""Lookups and filters over the exercise and food reference lists."""

from collections.abc import Sequence

from fitness_tracker.domain.records import TAG_PALETTE, Exercise, ExerciseTag, Food

UNKNOWN_NAME = "-"


def resolve_exercise(
    exercises: Sequence[Exercise], exercise_id: str
) -> Exercise | None:
    """Return the exercise with this id, or None when it was deleted."""
    for exercise in exercises:
        if exercise.id == exercise_id:
            return exercise
    return None


def resolve_food(foods: Sequence[Food], food_id: str) -> Food | None:
    """Return the food with this id, or None when it was deleted."""
    for food in foods:
        if food.id == food_id:
            return food
    return None


def exercise_name(exercises: Sequence[Exercise], exercise_id: str) -> str:
    """Return a display name, falling back to a placeholder."""
    exercise = resolve_exercise(exercises, exercise_id)
    return exercise.name if exercise else UNKNOWN_NAME


def food_name(foods: Sequence[Food], food_id: str) -> str:
    """Return a display name, falling back to a placeholder."""
    food = resolve_food(foods, food_id)
    return food.name if food else UNKNOWN_NAME


def filter_exercises(
    exercises: Sequence[Exercise],
    query: str | None = None,
    tag: ExerciseTag | None = None,
) -> list[Exercise]:
    """Filter exercises by a case-insensitive name substring and a tag."""
    needle = (query or "").lower()
    return [
        exercise
        for exercise in exercises
        if needle in exercise.name.lower() and (tag is None or tag in exercise.tags)
    ]


def filter_foods(foods: Sequence[Food], query: str | None = None) -> list[Food]:
    """Filter foods by a case-insensitive name substring."""
    needle = (query or "").lower()
    return [food for food in foods if needle in food.name.lower()]


def toggle_tag(exercise: Exercise, tag: ExerciseTag) -> Exercise:
    """Return a copy of the exercise with the tag added or removed."""
    if tag in exercise.tags:
        tags = tuple(current for current in exercise.tags if current != tag)
    else:
        tags = (*exercise.tags, tag)
    return Exercise(id=exercise.id, name=exercise.name, tags=tags)


def tag_labels(tags: Sequence[ExerciseTag]) -> list[str]:
    return [TAG_PALETTE[tag].label for tag in tags]
