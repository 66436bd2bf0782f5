"""Backup, restore, food import and CSV export."""

import csv
import io
import json
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from fitness_tracker.domain import codec
from fitness_tracker.domain.dates import today_iso
from fitness_tracker.domain.errors import InvalidBackupError, InvalidImportError
from fitness_tracker.domain.records import Food
from fitness_tracker.services.library import exercise_name, food_name
from fitness_tracker.services.records import RecordService

logger = logging.getLogger(__name__)

FOOD_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name", "food"),
    "calories": ("calories", "kcal"),
    "protein": ("protein", "proteins"),
    "carbs": ("carbs", "carbohydrates"),
    "fat": ("fat", "fats"),
}

_RESTORE_FIELDS: dict[str, tuple[str, Callable[[object], object]]] = {
    "unit": ("unit", codec.parse_unit),
    "goals": ("goals", codec.parse_goals),
    "exerciseDB": (
        "exercises",
        lambda raw: codec.parse_collection(raw, codec.parse_exercise),
    ),
    "foodDB": ("foods", lambda raw: codec.parse_collection(raw, codec.parse_food)),
    "gymLog": (
        "gym_log",
        lambda raw: codec.parse_collection(raw, codec.parse_gym_entry),
    ),
    "nutritionLog": (
        "nutrition_log",
        lambda raw: codec.parse_collection(raw, codec.parse_nutrition_entry),
    ),
    "bodyLog": (
        "body_log",
        lambda raw: codec.parse_collection(raw, codec.parse_body_entry),
    ),
}


class LogKind(str, Enum):
    """Log collections that can be exported as CSV."""

    GYM = "gym"
    NUTRITION = "nutrition"
    BODY = "body"


CSV_HEADERS: dict[LogKind, tuple[str, ...]] = {
    LogKind.GYM: ("date", "exercise", "sets", "reps", "weight", "notes"),
    LogKind.NUTRITION: ("date", "food", "qty", "calories", "protein", "notes"),
    LogKind.BODY: (
        "date",
        "weight",
        "height",
        "fat",
        "muscle",
        "waist",
        "arms",
        "chest",
        "notes",
    ),
}


@dataclass
class BackupService:
    """Moves the full record set in and out of portable documents."""

    records: RecordService

    def export_backup(self) -> dict[str, object]:
        """Return the full record set as a backup document."""
        snapshot = self.records.snapshot
        return {
            "unit": snapshot.unit.value,
            "goals": codec.dump_goals(snapshot.goals),
            "exerciseDB": codec.dump_collection(
                snapshot.exercises, codec.dump_exercise
            ),
            "foodDB": codec.dump_collection(snapshot.foods, codec.dump_food),
            "gymLog": codec.dump_collection(snapshot.gym_log, codec.dump_gym_entry),
            "nutritionLog": codec.dump_collection(
                snapshot.nutrition_log, codec.dump_nutrition_entry
            ),
            "bodyLog": codec.dump_collection(snapshot.body_log, codec.dump_body_entry),
        }

    def export_backup_json(self) -> str:
        """Return the backup document as indented JSON text."""
        return json.dumps(self.export_backup(), indent=2)

    @staticmethod
    def backup_filename(day: str | None = None) -> str:
        return f"fitness-backup-{day or today_iso()}.json"

    def restore_backup(self, text: str | bytes) -> list[str]:
        """Replace every collection present in the backup; return their keys.

        Nothing changes unless the whole document is valid.
        """
        try:
            payload = json.loads(text)
        except ValueError as exc:
            raise InvalidBackupError("Backup is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise InvalidBackupError("Backup must be a JSON object")

        changes: dict[str, object] = {}
        restored: list[str] = []
        for key, (field_name, parse) in _RESTORE_FIELDS.items():
            raw = payload.get(key)
            if raw is None:
                continue
            try:
                changes[field_name] = parse(raw)
            except ValueError as exc:
                raise InvalidBackupError(f"Invalid backup section: {key}") from exc
            restored.append(key)

        self.records.replace_all(**changes)
        logger.info("Backup restored", extra={"keys": restored})
        return restored

    def import_foods(self, text: str | bytes) -> int:
        """Add foods from an import document, skipping known names.

        Returns the number of foods added.
        """
        try:
            payload = json.loads(text)
        except ValueError as exc:
            raise InvalidImportError("Food import is not valid JSON") from exc
        items = _food_items(payload)

        seen = {_name_key(food.name) for food in self.records.snapshot.foods}
        new_foods: list[Food] = []
        for item in items:
            if not isinstance(item, dict):
                continue
            food = _food_from_import(item)
            key = _name_key(food.name)
            if not key or key in seen:
                continue
            seen.add(key)
            new_foods.append(food)

        created = self.records.add_foods(new_foods)
        logger.info(
            "Foods imported", extra={"added": len(created), "received": len(items)}
        )
        return len(created)

    def export_csv(self, kind: LogKind) -> str:
        """Return one log collection as CSV text."""
        snapshot = self.records.snapshot
        rows: Iterable[Sequence[object]]
        if kind is LogKind.GYM:
            rows = (
                (
                    entry.date,
                    exercise_name(snapshot.exercises, entry.exercise_id),
                    entry.sets,
                    entry.reps,
                    entry.weight,
                    entry.notes,
                )
                for entry in snapshot.gym_log
            )
        elif kind is LogKind.NUTRITION:
            rows = (
                (
                    entry.date,
                    food_name(snapshot.foods, entry.food_id),
                    entry.qty,
                    entry.calories,
                    entry.protein,
                    entry.notes,
                )
                for entry in snapshot.nutrition_log
            )
        else:
            rows = (
                (
                    entry.date,
                    entry.weight,
                    entry.height,
                    entry.fat,
                    entry.muscle,
                    entry.waist,
                    entry.arms,
                    entry.chest,
                    entry.notes,
                )
                for entry in snapshot.body_log
            )
        return to_csv(CSV_HEADERS[kind], rows)

    @staticmethod
    def csv_filename(kind: LogKind) -> str:
        return f"{kind.value}-log.csv"


def to_csv(headers: Sequence[str], rows: Iterable[Sequence[object]]) -> str:
    """Encode rows as CSV, quoting fields only when they need it."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([_format_cell(value) for value in row])
    return buffer.getvalue()


def parse_csv(text: str) -> list[dict[str, str]]:
    """Decode CSV text with a header row into dicts."""
    return list(csv.DictReader(io.StringIO(text)))


def _format_cell(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _food_items(payload: object) -> list[object]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("foods", "foodDB"):
            items = payload.get(key)
            if isinstance(items, list):
                return items
    raise InvalidImportError("Expected a list of foods or an object with 'foods'")


def _first_present(item: dict[str, object], keys: tuple[str, ...]) -> object:
    for key in keys:
        value = item.get(key)
        if value is not None:
            return value
    return None


def _food_from_import(item: dict[str, object]) -> Food:
    name = _first_present(item, FOOD_FIELD_ALIASES["name"])
    return Food(
        id="",
        name=str(name).strip() if name is not None else "",
        calories=codec.to_number(_first_present(item, FOOD_FIELD_ALIASES["calories"])),
        protein=codec.to_number(_first_present(item, FOOD_FIELD_ALIASES["protein"])),
        carbs=codec.to_number(_first_present(item, FOOD_FIELD_ALIASES["carbs"])),
        fat=codec.to_number(_first_present(item, FOOD_FIELD_ALIASES["fat"])),
    )


def _name_key(name: str) -> str:
    return name.strip().lower()
