"""Domain models for tracked records and settings."""

from dataclasses import dataclass, field
from enum import Enum

Number = int | float


class UnitPreference(str, Enum):
    """Measurement system used for display."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class ExerciseTag(str, Enum):
    """Closed set of muscle-group labels an exercise can carry."""

    LEGS = "legs"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    CORE = "core"


@dataclass(frozen=True)
class TagStyle:
    """Display label and color for a tag."""

    label: str
    color: str


TAG_PALETTE: dict[ExerciseTag, TagStyle] = {
    ExerciseTag.LEGS: TagStyle(label="Legs", color="#9333ea"),
    ExerciseTag.BICEPS: TagStyle(label="Biceps", color="#14b8a6"),
    ExerciseTag.TRICEPS: TagStyle(label="Triceps", color="#f97316"),
    ExerciseTag.CHEST: TagStyle(label="Chest", color="#ef4444"),
    ExerciseTag.BACK: TagStyle(label="Back", color="#0ea5e9"),
    ExerciseTag.SHOULDERS: TagStyle(label="Shoulders", color="#f59e0b"),
    ExerciseTag.CORE: TagStyle(label="Core", color="#22c55e"),
}


@dataclass(frozen=True)
class Exercise:
    """Reference exercise that gym entries point at."""

    id: str
    name: str
    tags: tuple[ExerciseTag, ...] = ()


@dataclass(frozen=True)
class Food:
    """Reference food with macros per serving."""

    id: str
    name: str
    calories: Number = 0
    protein: Number = 0
    carbs: Number = 0
    fat: Number = 0


@dataclass(frozen=True)
class GymLogEntry:
    """One logged exercise on a given day; weight is in kilograms."""

    id: str
    date: str
    exercise_id: str
    sets: Number = 0
    reps: Number = 0
    weight: Number = 0
    notes: str = ""


@dataclass(frozen=True)
class NutritionLogEntry:
    """One logged intake; macros are fixed at the time of entry."""

    id: str
    date: str
    food_id: str
    qty: Number = 1
    calories: Number = 0
    protein: Number = 0
    notes: str = ""


@dataclass(frozen=True)
class BodyLogEntry:
    """Body-composition measurements for a day."""

    id: str
    date: str
    weight: Number = 0
    height: Number = 0
    muscle: Number = 0
    fat: Number = 0
    waist: Number = 0
    arms: Number = 0
    chest: Number = 0
    notes: str = ""


@dataclass(frozen=True)
class Goals:
    """Daily intake goals and target body weight."""

    calories: Number = 2200
    protein: Number = 180
    weight: Number = 80


@dataclass(frozen=True)
class RecordSnapshot:
    """Immutable view of every collection and setting at one point in time."""

    exercises: tuple[Exercise, ...] = ()
    foods: tuple[Food, ...] = ()
    gym_log: tuple[GymLogEntry, ...] = ()
    nutrition_log: tuple[NutritionLogEntry, ...] = ()
    body_log: tuple[BodyLogEntry, ...] = ()
    unit: UnitPreference = UnitPreference.METRIC
    goals: Goals = field(default_factory=Goals)
