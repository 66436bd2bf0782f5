"""Unit conversion for display."""

from dataclasses import replace

from fitness_tracker.domain.records import BodyLogEntry, Number, UnitPreference

LB_PER_KG = 2.20462
CM_PER_IN = 2.54


def kg_to_lb(kg: Number) -> float:
    return kg * LB_PER_KG


def cm_to_in(cm: Number) -> float:
    return cm / CM_PER_IN


def unit_labels(unit: UnitPreference) -> dict[str, str]:
    """Return the weight and length labels for a unit preference."""
    if unit is UnitPreference.IMPERIAL:
        return {"weight": "lb", "length": "in"}
    return {"weight": "kg", "length": "cm"}


def body_entry_for_display(entry: BodyLogEntry, unit: UnitPreference) -> BodyLogEntry:
    """Convert stored metric measurements for display; percentages are unchanged."""
    if unit is not UnitPreference.IMPERIAL:
        return entry
    return replace(
        entry,
        weight=kg_to_lb(entry.weight),
        height=cm_to_in(entry.height),
        waist=cm_to_in(entry.waist),
        arms=cm_to_in(entry.arms),
        chest=cm_to_in(entry.chest),
    )
