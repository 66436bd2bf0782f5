"""Statistics over the tracked records.

Module-level functions are pure folds over record collections; StatsService
feeds them the record store's current snapshot.
"""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from fitness_tracker.domain.codec import round_half_up, to_number
from fitness_tracker.domain.dates import parse_day, today_iso
from fitness_tracker.domain.records import (
    BodyLogEntry,
    Exercise,
    GymLogEntry,
    Number,
    NutritionLogEntry,
)
from fitness_tracker.domain.stats import (
    ChartSeries,
    DayDetails,
    DaySummary,
    GoalProgress,
    GymEntryDetail,
    InsightPoint,
    MaxWeightPoint,
    NutritionPoint,
    Overview,
    PlanProgress,
    VolumePoint,
)
from fitness_tracker.services.library import exercise_name
from fitness_tracker.services.records import RecordService

DAYS_PER_WEEK = 7
DEFAULT_WEEKLY_TARGET = 3


def index_by_date(
    gym_log: Iterable[GymLogEntry],
    nutrition_log: Iterable[NutritionLogEntry],
    body_log: Iterable[BodyLogEntry],
) -> dict[str, DaySummary]:
    """Fold all logs into one summary per date.

    Gym entries keep their input order. When several body entries share a
    date, the last one folded wins.
    """
    index: dict[str, DaySummary] = {}

    def summary_for(day: str) -> DaySummary:
        if day not in index:
            index[day] = DaySummary(date=day)
        return index[day]

    for entry in gym_log:
        summary_for(entry.date).gym_entries.append(entry)
    for entry in nutrition_log:
        summary = summary_for(entry.date)
        summary.total_calories += to_number(entry.calories)
        summary.total_protein += to_number(entry.protein)
    for entry in body_log:
        summary_for(entry.date).body_entry = entry
    return index


def entry_volume(entry: GymLogEntry) -> Number:
    """Return sets x reps x weight, with missing factors as zero."""
    return to_number(entry.sets) * to_number(entry.reps) * to_number(entry.weight)


def gym_volume_by_date(gym_log: Iterable[GymLogEntry]) -> list[VolumePoint]:
    """Return total volume per date, oldest first."""
    totals: dict[str, Number] = {}
    for entry in gym_log:
        totals[entry.date] = totals.get(entry.date, 0) + entry_volume(entry)
    return [
        VolumePoint(date=day, volume=volume) for day, volume in sorted(totals.items())
    ]


def gym_max_weight_by_date(gym_log: Iterable[GymLogEntry]) -> list[MaxWeightPoint]:
    """Return the heaviest weight per date, floored at zero, oldest first."""
    maxima: dict[str, Number] = {}
    for entry in gym_log:
        maxima[entry.date] = max(maxima.get(entry.date, 0), to_number(entry.weight))
    return [
        MaxWeightPoint(date=day, max_weight=weight)
        for day, weight in sorted(maxima.items())
    ]


def nutrition_by_date(
    nutrition_log: Iterable[NutritionLogEntry],
) -> list[NutritionPoint]:
    """Return calories and protein per date, oldest first."""
    totals: dict[str, tuple[Number, Number]] = {}
    for entry in nutrition_log:
        calories, protein = totals.get(entry.date, (0, 0))
        totals[entry.date] = (
            calories + to_number(entry.calories),
            protein + to_number(entry.protein),
        )
    return [
        NutritionPoint(date=day, calories=calories, protein=protein)
        for day, (calories, protein) in sorted(totals.items())
    ]


def body_trend(body_log: Iterable[BodyLogEntry]) -> list[BodyLogEntry]:
    """Return body entries oldest first; same-date entries are all kept."""
    return sorted(body_log, key=lambda entry: entry.date)


def insight_series(
    volume: Iterable[VolumePoint],
    nutrition: Iterable[NutritionPoint],
    body: Iterable[BodyLogEntry],
) -> list[InsightPoint]:
    """Line up volume, calories and weight over the union of their dates."""
    rows: dict[str, dict[str, Number | None]] = {}

    def row_for(day: str) -> dict[str, Number | None]:
        if day not in rows:
            rows[day] = {"gym_volume": 0, "calories": 0, "weight": None}
        return rows[day]

    for point in volume:
        row_for(point.date)["gym_volume"] = point.volume
    for point in nutrition:
        row_for(point.date)["calories"] = point.calories
    for entry in body:
        row_for(entry.date)["weight"] = to_number(entry.weight)
    return [
        InsightPoint(
            date=day,
            gym_volume=row["gym_volume"],
            calories=row["calories"],
            weight=row["weight"],
        )
        for day, row in sorted(rows.items())
    ]


def plan_progress(
    gym_log: Iterable[GymLogEntry],
    start: date,
    end: date,
    weekly_target: int = DEFAULT_WEEKLY_TARGET,
) -> PlanProgress:
    """Count distinct workout days in [start, end] against a weekly target.

    Entries whose date is not a real calendar day are ignored. The percent
    is not clamped and exceeds 100 when the plan is beaten.
    """
    workout_days: set[str] = set()
    for entry in gym_log:
        day = parse_day(entry.date)
        if day is not None and start <= day <= end:
            workout_days.add(entry.date)
    span_days = (end - start).days + 1
    weeks = max(0, math.ceil(span_days / DAYS_PER_WEEK))
    target = weeks * weekly_target
    actual = len(workout_days)
    percent = actual / target * 100 if target > 0 else 0.0
    return PlanProgress(
        start=start.isoformat(),
        end=end.isoformat(),
        weekly_target=weekly_target,
        target=target,
        actual=actual,
        percent=percent,
    )


def goal_progress(value: Number, goal: Number) -> GoalProgress:
    """Return progress toward a goal, capped at 100 percent."""
    percent = min(100, round_half_up(value / goal * 100)) if goal else None
    return GoalProgress(value=value, goal=goal, percent=percent)


def day_details(
    summary: DaySummary | None, exercises: Sequence[Exercise]
) -> DayDetails | None:
    """Resolve a day summary for display; None when nothing was logged."""
    if summary is None:
        return None
    return DayDetails(
        date=summary.date,
        total_calories=summary.total_calories,
        total_protein=summary.total_protein,
        body_entry=summary.body_entry,
        gym_entries=[
            GymEntryDetail(
                entry=entry, exercise_name=exercise_name(exercises, entry.exercise_id)
            )
            for entry in summary.gym_entries
        ],
    )


@dataclass
class StatsService:
    """Service computing derived views from the current records."""

    records: RecordService
    plan_start: date
    plan_end: date
    weekly_target: int = DEFAULT_WEEKLY_TARGET

    def get_day_index(self) -> dict[str, DaySummary]:
        """Return per-date summaries for every day with data."""
        snapshot = self.records.snapshot
        return index_by_date(
            snapshot.gym_log, snapshot.nutrition_log, snapshot.body_log
        )

    def get_data_dates(self) -> set[str]:
        """Return the dates that hold at least one entry."""
        return set(self.get_day_index())

    def get_charts(self) -> ChartSeries:
        """Return every chart series."""
        snapshot = self.records.snapshot
        volume = gym_volume_by_date(snapshot.gym_log)
        nutrition = nutrition_by_date(snapshot.nutrition_log)
        body = body_trend(snapshot.body_log)
        return ChartSeries(
            gym_volume=volume,
            gym_max_weight=gym_max_weight_by_date(snapshot.gym_log),
            nutrition=nutrition,
            body=body,
            insights=insight_series(volume, nutrition, body),
        )

    def get_plan(self) -> PlanProgress:
        """Return progress on the configured workout plan."""
        return plan_progress(
            self.records.snapshot.gym_log,
            self.plan_start,
            self.plan_end,
            self.weekly_target,
        )

    def get_overview(self, today: str | None = None) -> Overview:
        """Return today's totals against goals, latest weight and the plan."""
        snapshot = self.records.snapshot
        day = today or today_iso()
        summary = self.get_day_index().get(day)
        calories = summary.total_calories if summary else 0
        protein = summary.total_protein if summary else 0
        volume = sum(
            point.volume
            for point in gym_volume_by_date(snapshot.gym_log)
            if point.date == day
        )
        trend = body_trend(snapshot.body_log)
        return Overview(
            today=day,
            calories=goal_progress(calories, snapshot.goals.calories),
            protein=goal_progress(protein, snapshot.goals.protein),
            gym_volume=volume,
            latest_weight=to_number(trend[-1].weight) if trend else None,
            plan=self.get_plan(),
        )

    def get_day_details(self, day: str) -> DayDetails | None:
        """Return the details for one day, or None when it has no data."""
        return day_details(
            self.get_day_index().get(day), self.records.snapshot.exercises
        )
