"""Convert domain objects to JSON-ready dicts."""

from dataclasses import asdict, replace

from fitness_tracker.domain.records import (
    TAG_PALETTE,
    BodyLogEntry,
    Exercise,
    UnitPreference,
)
from fitness_tracker.domain.stats import ChartSeries, PlanProgress
from fitness_tracker.services.calendar import WEEKDAY_LABELS, MonthView
from fitness_tracker.services.library import tag_labels
from fitness_tracker.services.units import body_entry_for_display, kg_to_lb, unit_labels


def serialize_exercise(exercise: Exercise) -> dict[str, object]:
    return {
        "id": exercise.id,
        "name": exercise.name,
        "tags": [tag.value for tag in exercise.tags],
        "tag_labels": tag_labels(exercise.tags),
    }


def serialize_tags() -> list[dict[str, str]]:
    return [
        {"key": tag.value, "label": style.label, "color": style.color}
        for tag, style in TAG_PALETTE.items()
    ]


def serialize_plan(plan: PlanProgress) -> dict[str, object]:
    return {
        **asdict(plan),
        "bar_width": plan.bar_width,
        "exceeded": plan.exceeded,
    }


def serialize_body(entry: BodyLogEntry, unit: UnitPreference) -> dict[str, object]:
    return asdict(body_entry_for_display(entry, unit))


def serialize_charts(charts: ChartSeries, unit: UnitPreference) -> dict[str, object]:
    """Serialize chart series, converting body weights for the unit preference."""
    insights = charts.insights
    if unit is UnitPreference.IMPERIAL:
        insights = [
            replace(
                point,
                weight=kg_to_lb(point.weight) if point.weight is not None else None,
            )
            for point in insights
        ]
    return {
        "units": unit_labels(unit),
        "gym_volume": [asdict(point) for point in charts.gym_volume],
        "gym_max_weight": [asdict(point) for point in charts.gym_max_weight],
        "nutrition": [asdict(point) for point in charts.nutrition],
        "body": [serialize_body(entry, unit) for entry in charts.body],
        "insights": [asdict(point) for point in insights],
    }


def serialize_month(view: MonthView) -> dict[str, object]:
    return {**asdict(view), "weekdays": list(WEEKDAY_LABELS)}
