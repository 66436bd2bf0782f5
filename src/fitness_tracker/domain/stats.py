"""Domain models for derived statistics."""

from dataclasses import dataclass, field

from fitness_tracker.domain.records import (
    BodyLogEntry,
    ExerciseTag,
    GymLogEntry,
    Number,
    NutritionLogEntry,
)


@dataclass
class DaySummary:
    """Everything logged on one calendar day."""

    date: str
    gym_entries: list[GymLogEntry] = field(default_factory=list)
    total_calories: Number = 0
    total_protein: Number = 0
    body_entry: BodyLogEntry | None = None


@dataclass(frozen=True)
class VolumePoint:
    """Total lifted volume for a day."""

    date: str
    volume: Number


@dataclass(frozen=True)
class MaxWeightPoint:
    """Heaviest weight lifted on a day, across exercises."""

    date: str
    max_weight: Number


@dataclass(frozen=True)
class NutritionPoint:
    """Daily intake totals."""

    date: str
    calories: Number
    protein: Number


@dataclass(frozen=True)
class InsightPoint:
    """Gym volume, intake and body weight lined up on one day."""

    date: str
    gym_volume: Number
    calories: Number
    weight: Number | None


@dataclass(frozen=True)
class PlanProgress:
    """Distinct workout days against a weekly target over a fixed window."""

    start: str
    end: str
    weekly_target: int
    target: int
    actual: int
    percent: float

    @property
    def bar_width(self) -> float:
        """Percent clamped for a progress bar."""
        return min(100.0, self.percent)

    @property
    def exceeded(self) -> bool:
        """True when more sessions were logged than planned."""
        return self.percent > 100


@dataclass(frozen=True)
class ChartSeries:
    """All chart series for the overview."""

    gym_volume: list[VolumePoint]
    gym_max_weight: list[MaxWeightPoint]
    nutrition: list[NutritionPoint]
    body: list[BodyLogEntry]
    insights: list[InsightPoint]


@dataclass(frozen=True)
class GoalProgress:
    """Value against a goal, as shown on overview stat cards."""

    value: Number
    goal: Number
    percent: int | None


@dataclass(frozen=True)
class Overview:
    """Today's totals, goal progress and the plan."""

    today: str
    calories: GoalProgress
    protein: GoalProgress
    gym_volume: Number
    latest_weight: Number | None
    plan: PlanProgress


@dataclass(frozen=True)
class GymEntryDetail:
    """Gym entry with its exercise name resolved."""

    entry: GymLogEntry
    exercise_name: str


@dataclass(frozen=True)
class DayDetails:
    """Per-day view used by the calendar."""

    date: str
    total_calories: Number
    total_protein: Number
    body_entry: BodyLogEntry | None
    gym_entries: list[GymEntryDetail]


@dataclass(frozen=True)
class HistoryEntry:
    """Gym entry flagged when it matches the exercise's all-time best."""

    entry: GymLogEntry
    is_personal_record: bool


@dataclass(frozen=True)
class ExerciseGroup:
    """Entries for one exercise within a day."""

    exercise_id: str
    name: str
    tags: tuple[ExerciseTag, ...]
    entries: list[HistoryEntry]
    set_count: Number
    best_weight: Number


@dataclass(frozen=True)
class GymDay:
    """Gym log for one day, grouped by exercise."""

    date: str
    exercises: list[ExerciseGroup]
    exercise_count: int
    set_count: Number


@dataclass(frozen=True)
class NutritionDay:
    """Nutrition log for one day with totals."""

    date: str
    calories: Number
    protein: Number
    entries: list[NutritionLogEntry]
