"""Conversion between stored JSON values and domain records.

Stored documents use the camelCase field names of the persisted layout
(``exerciseId``, ``foodId``). Missing or non-numeric numbers read as zero.
"""

import logging
import math
from collections.abc import Callable, Iterable
from typing import TypeVar

from fitness_tracker.domain.records import (
    BodyLogEntry,
    Exercise,
    ExerciseTag,
    Food,
    Goals,
    GymLogEntry,
    Number,
    NutritionLogEntry,
    UnitPreference,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def to_number(value: object) -> Number:
    """Coerce a stored value to a number, defaulting to zero."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else 0
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            parsed = float(text)
        except ValueError:
            return 0
        return parsed if math.isfinite(parsed) else 0
    return 0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def _to_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def parse_tags(raw: object) -> tuple[ExerciseTag, ...]:
    """Parse a tag list, dropping labels outside the palette."""
    if not isinstance(raw, list):
        return ()
    tags: list[ExerciseTag] = []
    for item in raw:
        try:
            tag = ExerciseTag(item)
        except ValueError:
            logger.debug("Dropping unknown exercise tag", extra={"tag": item})
            continue
        if tag not in tags:
            tags.append(tag)
    return tuple(tags)


def parse_exercise(row: dict[str, object]) -> Exercise:
    """Build an exercise from its stored form."""
    return Exercise(
        id=_to_text(row.get("id")),
        name=_to_text(row.get("name")),
        tags=parse_tags(row.get("tags")),
    )


def parse_food(row: dict[str, object]) -> Food:
    """Build a food from its stored form."""
    return Food(
        id=_to_text(row.get("id")),
        name=_to_text(row.get("name")),
        calories=to_number(row.get("calories")),
        protein=to_number(row.get("protein")),
        carbs=to_number(row.get("carbs")),
        fat=to_number(row.get("fat")),
    )


def parse_gym_entry(row: dict[str, object]) -> GymLogEntry:
    """Build a gym log entry from its stored form."""
    return GymLogEntry(
        id=_to_text(row.get("id")),
        date=_to_text(row.get("date")),
        exercise_id=_to_text(row.get("exerciseId")),
        sets=to_number(row.get("sets")),
        reps=to_number(row.get("reps")),
        weight=to_number(row.get("weight")),
        notes=_to_text(row.get("notes")),
    )


def parse_nutrition_entry(row: dict[str, object]) -> NutritionLogEntry:
    """Build a nutrition log entry from its stored form."""
    return NutritionLogEntry(
        id=_to_text(row.get("id")),
        date=_to_text(row.get("date")),
        food_id=_to_text(row.get("foodId")),
        qty=to_number(row.get("qty")),
        calories=to_number(row.get("calories")),
        protein=to_number(row.get("protein")),
        notes=_to_text(row.get("notes")),
    )


def parse_body_entry(row: dict[str, object]) -> BodyLogEntry:
    """Build a body log entry from its stored form."""
    return BodyLogEntry(
        id=_to_text(row.get("id")),
        date=_to_text(row.get("date")),
        weight=to_number(row.get("weight")),
        height=to_number(row.get("height")),
        muscle=to_number(row.get("muscle")),
        fat=to_number(row.get("fat")),
        waist=to_number(row.get("waist")),
        arms=to_number(row.get("arms")),
        chest=to_number(row.get("chest")),
        notes=_to_text(row.get("notes")),
    )


def parse_goals(raw: object) -> Goals:
    """Build goals from their stored form, keeping defaults for absent keys."""
    if not isinstance(raw, dict):
        raise ValueError("goals must be an object")
    defaults = Goals()
    return Goals(
        calories=to_number(raw.get("calories", defaults.calories)),
        protein=to_number(raw.get("protein", defaults.protein)),
        weight=to_number(raw.get("weight", defaults.weight)),
    )


def parse_unit(raw: object) -> UnitPreference:
    """Parse a unit preference."""
    try:
        return UnitPreference(raw)
    except ValueError as exc:
        raise ValueError(f"unknown unit preference: {raw!r}") from exc


def parse_collection(
    raw: object, parser: Callable[[dict[str, object]], RecordT]
) -> tuple[RecordT, ...]:
    """Parse a stored list of records; raise ValueError on a wrong shape."""
    if not isinstance(raw, list):
        raise ValueError("expected a list of records")
    records = []
    for item in raw:
        if not isinstance(item, dict):
            raise ValueError("expected every record to be an object")
        records.append(parser(item))
    return tuple(records)


def dump_exercise(exercise: Exercise) -> dict[str, object]:
    return {
        "id": exercise.id,
        "name": exercise.name,
        "tags": [tag.value for tag in exercise.tags],
    }


def dump_food(food: Food) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "calories": food.calories,
        "protein": food.protein,
        "carbs": food.carbs,
        "fat": food.fat,
    }


def dump_gym_entry(entry: GymLogEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "date": entry.date,
        "exerciseId": entry.exercise_id,
        "sets": entry.sets,
        "reps": entry.reps,
        "weight": entry.weight,
        "notes": entry.notes,
    }


def dump_nutrition_entry(entry: NutritionLogEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "date": entry.date,
        "foodId": entry.food_id,
        "qty": entry.qty,
        "calories": entry.calories,
        "protein": entry.protein,
        "notes": entry.notes,
    }


def dump_body_entry(entry: BodyLogEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "date": entry.date,
        "weight": entry.weight,
        "height": entry.height,
        "muscle": entry.muscle,
        "fat": entry.fat,
        "waist": entry.waist,
        "arms": entry.arms,
        "chest": entry.chest,
        "notes": entry.notes,
    }


def dump_goals(goals: Goals) -> dict[str, object]:
    return {
        "calories": goals.calories,
        "protein": goals.protein,
        "weight": goals.weight,
    }


def dump_collection(
    records: Iterable[RecordT], dumper: Callable[[RecordT], dict[str, object]]
) -> list[dict[str, object]]:
    """Dump records to their stored list form."""
    return [dumper(record) for record in records]
