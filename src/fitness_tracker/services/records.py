"""Record store service that owns application state and persistence."""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Protocol, TypeVar
from uuid import uuid4

from fitness_tracker.domain import codec
from fitness_tracker.domain.dates import today_iso
from fitness_tracker.domain.errors import InvalidRecordError, RecordNotFoundError
from fitness_tracker.domain.records import (
    BodyLogEntry,
    Exercise,
    ExerciseTag,
    Food,
    Goals,
    GymLogEntry,
    Number,
    NutritionLogEntry,
    RecordSnapshot,
    UnitPreference,
)
from fitness_tracker.services.library import resolve_exercise, resolve_food, toggle_tag

logger = logging.getLogger(__name__)

UNIT_KEY = "unitPref"
GOALS_KEY = "goals"
EXERCISES_KEY = "exDB"
FOODS_KEY = "foodDB"
GYM_LOG_KEY = "gymLog"
NUTRITION_LOG_KEY = "nutritionLog"
BODY_LOG_KEY = "bodyLog"

Record = Exercise | Food | GymLogEntry | NutritionLogEntry | BodyLogEntry
RecordT = TypeVar(
    "RecordT", Exercise, Food, GymLogEntry, NutritionLogEntry, BodyLogEntry
)

# Snapshot field -> (storage key, parser for the stored value).
_STORED_FIELDS: dict[str, tuple[str, Callable[[object], object]]] = {
    "exercises": (
        EXERCISES_KEY,
        lambda raw: codec.parse_collection(raw, codec.parse_exercise),
    ),
    "foods": (FOODS_KEY, lambda raw: codec.parse_collection(raw, codec.parse_food)),
    "gym_log": (
        GYM_LOG_KEY,
        lambda raw: codec.parse_collection(raw, codec.parse_gym_entry),
    ),
    "nutrition_log": (
        NUTRITION_LOG_KEY,
        lambda raw: codec.parse_collection(raw, codec.parse_nutrition_entry),
    ),
    "body_log": (
        BODY_LOG_KEY,
        lambda raw: codec.parse_collection(raw, codec.parse_body_entry),
    ),
    "unit": (UNIT_KEY, codec.parse_unit),
    "goals": (GOALS_KEY, codec.parse_goals),
}


class RecordRepository(Protocol):
    """Key/value persistence for JSON-compatible values."""

    def get(self, key: str) -> object | None:
        """Return the stored value for a key, or None when absent."""

    def set_many(self, values: Mapping[str, object]) -> None:
        """Store several keys in one write, replacing any previous values."""


def new_record_id() -> str:
    """Return a short random identifier."""
    return uuid4().hex[:8]


def default_snapshot(id_factory: Callable[[], str] = new_record_id) -> RecordSnapshot:
    """Return the state of a brand-new tracker."""
    return RecordSnapshot(
        exercises=(
            Exercise(id=id_factory(), name="Bench Press", tags=(ExerciseTag.CHEST,)),
            Exercise(id=id_factory(), name="Squat", tags=(ExerciseTag.LEGS,)),
            Exercise(id=id_factory(), name="Lat Pulldown", tags=(ExerciseTag.BACK,)),
        ),
        foods=(
            Food(
                id=id_factory(),
                name="Chicken breast 100g",
                calories=165,
                protein=31,
                carbs=0,
                fat=3.6,
            ),
            Food(
                id=id_factory(), name="Egg 1x", calories=78, protein=6, carbs=0.6, fat=5
            ),
        ),
    )


@dataclass
class RecordService:
    """Application service holding the current snapshot of all records.

    The in-memory snapshot is authoritative. Every mutation replaces the
    affected collection wholesale and writes it through to the repository;
    write failures are logged and otherwise ignored. Defaults used for keys
    missing from storage are written back on first load, so seeded records
    keep their ids across restarts.
    """

    repository: RecordRepository
    id_factory: Callable[[], str] = new_record_id
    _snapshot: RecordSnapshot | None = field(default=None, init=False, repr=False)

    @property
    def snapshot(self) -> RecordSnapshot:
        """Return the current snapshot, loading it on first access."""
        if self._snapshot is None:
            self._snapshot, seeded = self._load()
            self._persist(seeded)
        return self._snapshot

    def add_exercise(self, name: str, tags: Iterable[ExerciseTag] = ()) -> Exercise:
        """Create a reference exercise."""
        cleaned = name.strip()
        if not cleaned:
            raise InvalidRecordError("Exercise name is required")
        exercise = Exercise(
            id=self._new_id(self.snapshot.exercises),
            name=cleaned,
            tags=tuple(dict.fromkeys(tags)),
        )
        self._update(exercises=(exercise, *self.snapshot.exercises))
        return exercise

    def delete_exercise(self, exercise_id: str) -> None:
        """Remove a reference exercise; gym entries keep their dangling id."""
        self._update(
            exercises=_without(self.snapshot.exercises, exercise_id, "exercise")
        )

    def toggle_exercise_tag(self, exercise_id: str, tag: ExerciseTag) -> Exercise:
        """Add the tag when missing, remove it when present."""
        current = resolve_exercise(self.snapshot.exercises, exercise_id)
        if current is None:
            raise RecordNotFoundError("exercise", exercise_id)
        updated = toggle_tag(current, tag)
        self._update(
            exercises=tuple(
                updated if exercise.id == exercise_id else exercise
                for exercise in self.snapshot.exercises
            )
        )
        return updated

    def add_food(  # noqa: PLR0913
        self,
        name: str,
        calories: Number = 0,
        protein: Number = 0,
        carbs: Number = 0,
        fat: Number = 0,
    ) -> Food:
        """Create a reference food."""
        cleaned = name.strip()
        if not cleaned:
            raise InvalidRecordError("Food name is required")
        food = Food(
            id=self._new_id(self.snapshot.foods),
            name=cleaned,
            calories=codec.to_number(calories),
            protein=codec.to_number(protein),
            carbs=codec.to_number(carbs),
            fat=codec.to_number(fat),
        )
        self._update(foods=(food, *self.snapshot.foods))
        return food

    def add_foods(self, foods: Sequence[Food]) -> list[Food]:
        """Add several foods at once, assigning fresh ids."""
        created: list[Food] = []
        taken = list(self.snapshot.foods)
        for food in foods:
            record = replace(food, id=self._new_id([*taken, *created]))
            created.append(record)
        if created:
            self._update(foods=(*created, *self.snapshot.foods))
        return created

    def delete_food(self, food_id: str) -> None:
        """Remove a reference food; intake entries keep their dangling id."""
        self._update(foods=_without(self.snapshot.foods, food_id, "food"))

    def log_workout(  # noqa: PLR0913
        self,
        exercise_id: str,
        date: str | None = None,
        sets: Number = 0,
        reps: Number = 0,
        weight: Number = 0,
        notes: str = "",
    ) -> GymLogEntry:
        """Record one exercise performed on a day."""
        if not exercise_id:
            raise InvalidRecordError("Exercise is required")
        entry = GymLogEntry(
            id=self._new_id(self.snapshot.gym_log),
            date=date or today_iso(),
            exercise_id=exercise_id,
            sets=codec.to_number(sets),
            reps=codec.to_number(reps),
            weight=codec.to_number(weight),
            notes=notes or "",
        )
        self._update(gym_log=(entry, *self.snapshot.gym_log))
        return entry

    def delete_workout(self, entry_id: str) -> None:
        """Remove a gym log entry."""
        self._update(gym_log=_without(self.snapshot.gym_log, entry_id, "gym"))

    def log_intake(
        self,
        food_id: str,
        date: str | None = None,
        qty: Number = 1,
        notes: str = "",
    ) -> NutritionLogEntry:
        """Record a food intake, fixing its calories and protein now."""
        quantity = codec.to_number(qty) or 1
        food = resolve_food(self.snapshot.foods, food_id)
        calories = codec.round_half_up(food.calories * quantity) if food else 0
        protein = food.protein * quantity if food else 0
        entry = NutritionLogEntry(
            id=self._new_id(self.snapshot.nutrition_log),
            date=date or today_iso(),
            food_id=food_id,
            qty=quantity,
            calories=calories,
            protein=protein,
            notes=notes or "",
        )
        self._update(nutrition_log=(entry, *self.snapshot.nutrition_log))
        return entry

    def delete_intake(self, entry_id: str) -> None:
        """Remove a nutrition log entry."""
        self._update(
            nutrition_log=_without(self.snapshot.nutrition_log, entry_id, "nutrition")
        )

    def log_body(
        self, date: str | None = None, **measurements: object
    ) -> BodyLogEntry:
        """Record body measurements for a day."""
        payload: dict[str, object] = {
            **measurements,
            "id": self._new_id(self.snapshot.body_log),
            "date": date or today_iso(),
        }
        entry = codec.parse_body_entry(payload)
        self._update(body_log=(entry, *self.snapshot.body_log))
        return entry

    def delete_body(self, entry_id: str) -> None:
        """Remove a body log entry."""
        self._update(body_log=_without(self.snapshot.body_log, entry_id, "body"))

    def set_unit(self, unit: UnitPreference) -> None:
        """Replace the unit preference."""
        self._update(unit=unit)

    def set_goals(self, goals: Goals) -> None:
        """Replace the goals."""
        self._update(goals=goals)

    def replace_all(self, **changes: object) -> None:
        """Replace any mix of collections and settings in one step."""
        self._update(**changes)

    def _update(self, **changes: object) -> None:
        self._snapshot = replace(self.snapshot, **changes)
        self._persist(changes)

    def _serialize(self, name: str) -> tuple[str, object]:
        snapshot = self.snapshot
        if name == "unit":
            return UNIT_KEY, snapshot.unit.value
        if name == "goals":
            return GOALS_KEY, codec.dump_goals(snapshot.goals)
        if name == "exercises":
            return EXERCISES_KEY, codec.dump_collection(
                snapshot.exercises, codec.dump_exercise
            )
        if name == "foods":
            return FOODS_KEY, codec.dump_collection(snapshot.foods, codec.dump_food)
        if name == "gym_log":
            return GYM_LOG_KEY, codec.dump_collection(
                snapshot.gym_log, codec.dump_gym_entry
            )
        if name == "nutrition_log":
            return NUTRITION_LOG_KEY, codec.dump_collection(
                snapshot.nutrition_log, codec.dump_nutrition_entry
            )
        if name == "body_log":
            return BODY_LOG_KEY, codec.dump_collection(
                snapshot.body_log, codec.dump_body_entry
            )
        raise ValueError(f"Unknown snapshot field: {name}")

    def _persist(self, names: Iterable[str]) -> None:
        values = dict(self._serialize(name) for name in names)
        if not values:
            return
        try:
            self.repository.set_many(values)
        except Exception:
            logger.exception("Failed to persist records", extra={"keys": list(values)})

    def _load(self) -> tuple[RecordSnapshot, list[str]]:
        """Read every stored field; return the snapshot and the fields to seed."""
        defaults = default_snapshot(self.id_factory)
        values: dict[str, object] = {}
        seeded: list[str] = []
        for name, (key, parse) in _STORED_FIELDS.items():
            value, readable = self._read(key, parse)
            if value is None:
                value = getattr(defaults, name)
                if readable:
                    seeded.append(name)
            values[name] = value
        return RecordSnapshot(**values), seeded

    def _read(
        self, key: str, parse: Callable[[object], object]
    ) -> tuple[object | None, bool]:
        # The flag is False when storage itself failed; nothing is seeded then.
        try:
            raw = self.repository.get(key)
        except Exception:
            logger.exception("Failed to read records", extra={"key": key})
            return None, False
        if raw is None:
            return None, True
        try:
            return parse(raw), True
        except ValueError:
            logger.warning("Ignoring unreadable stored value", extra={"key": key})
            return None, True

    def _new_id(self, existing: Iterable[Record]) -> str:
        taken = {record.id for record in existing}
        while True:
            candidate = self.id_factory()
            if candidate not in taken:
                return candidate


def _without(
    records: tuple[RecordT, ...], record_id: str, collection: str
) -> tuple[RecordT, ...]:
    remaining = tuple(record for record in records if record.id != record_id)
    if len(remaining) == len(records):
        raise RecordNotFoundError(collection, record_id)
    return remaining
