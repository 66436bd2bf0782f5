"""Day-by-day history views of the gym and nutrition logs."""

from collections.abc import Iterable, Sequence

from fitness_tracker.domain.codec import to_number
from fitness_tracker.domain.records import (
    Exercise,
    GymLogEntry,
    Number,
    NutritionLogEntry,
)
from fitness_tracker.domain.stats import (
    ExerciseGroup,
    GymDay,
    HistoryEntry,
    NutritionDay,
)
from fitness_tracker.services.library import UNKNOWN_NAME, resolve_exercise


def top_weights(gym_log: Iterable[GymLogEntry]) -> dict[str, Number]:
    """Return the all-time heaviest weight per exercise id, floored at zero."""
    best: dict[str, Number] = {}
    for entry in gym_log:
        best[entry.exercise_id] = max(
            best.get(entry.exercise_id, 0), to_number(entry.weight)
        )
    return best


def group_gym_log(
    gym_log: Sequence[GymLogEntry], exercises: Sequence[Exercise]
) -> list[GymDay]:
    """Group the gym log by date (newest first), then by exercise name."""
    records = top_weights(gym_log)
    by_date: dict[str, dict[str, list[GymLogEntry]]] = {}
    for entry in gym_log:
        by_date.setdefault(entry.date, {}).setdefault(entry.exercise_id, []).append(
            entry
        )

    days = []
    for day, by_exercise in sorted(by_date.items(), reverse=True):
        groups = [
            _exercise_group(exercise_id, entries, exercises, records)
            for exercise_id, entries in by_exercise.items()
        ]
        groups.sort(key=lambda group: _sort_name(group, exercises))
        days.append(
            GymDay(
                date=day,
                exercises=groups,
                exercise_count=len(groups),
                set_count=sum(group.set_count for group in groups),
            )
        )
    return days


def group_nutrition_log(
    nutrition_log: Iterable[NutritionLogEntry],
) -> list[NutritionDay]:
    """Group the nutrition log by date, newest first, with daily totals."""
    by_date: dict[str, list[NutritionLogEntry]] = {}
    for entry in nutrition_log:
        by_date.setdefault(entry.date, []).append(entry)
    return [
        NutritionDay(
            date=day,
            calories=sum(to_number(entry.calories) for entry in entries),
            protein=sum(to_number(entry.protein) for entry in entries),
            entries=entries,
        )
        for day, entries in sorted(by_date.items(), reverse=True)
    ]


def _exercise_group(
    exercise_id: str,
    entries: list[GymLogEntry],
    exercises: Sequence[Exercise],
    records: dict[str, Number],
) -> ExerciseGroup:
    exercise = resolve_exercise(exercises, exercise_id)
    return ExerciseGroup(
        exercise_id=exercise_id,
        name=exercise.name if exercise else UNKNOWN_NAME,
        tags=exercise.tags if exercise else (),
        entries=[
            HistoryEntry(
                entry=entry,
                is_personal_record=records.get(exercise_id, 0)
                == to_number(entry.weight),
            )
            for entry in entries
        ],
        set_count=sum(to_number(entry.sets) for entry in entries),
        best_weight=max([0, *(to_number(entry.weight) for entry in entries)]),
    )


def _sort_name(group: ExerciseGroup, exercises: Sequence[Exercise]) -> str:
    # Unknown exercises sort first, as if their name were empty.
    exercise = resolve_exercise(exercises, group.exercise_id)
    return exercise.name.lower() if exercise else ""
