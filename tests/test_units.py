"""Tests for display unit conversion."""

import pytest

from fitness_tracker.domain.records import BodyLogEntry, UnitPreference
from fitness_tracker.services.units import body_entry_for_display, unit_labels


def test_metric_entries_are_unchanged() -> None:
    entry = BodyLogEntry(id="b1", date="2025-07-01", weight=80, waist=90)

    assert body_entry_for_display(entry, UnitPreference.METRIC) is entry
    assert unit_labels(UnitPreference.METRIC) == {"weight": "kg", "length": "cm"}


def test_imperial_converts_weight_and_lengths() -> None:
    entry = BodyLogEntry(
        id="b1", date="2025-07-01", weight=100, height=254, waist=25.4, fat=20
    )

    shown = body_entry_for_display(entry, UnitPreference.IMPERIAL)

    assert shown.weight == pytest.approx(220.462)
    assert shown.height == pytest.approx(100)
    assert shown.waist == pytest.approx(10)
    assert shown.fat == 20
    assert unit_labels(UnitPreference.IMPERIAL) == {"weight": "lb", "length": "in"}
