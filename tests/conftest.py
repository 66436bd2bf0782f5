"""Shared test fixtures."""

import itertools
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date

import pytest

from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer, build_container_for
from fitness_tracker.domain.records import (
    BodyLogEntry,
    GymLogEntry,
    NutritionLogEntry,
)
from fitness_tracker.services.records import RecordRepository, RecordService


@dataclass
class InMemoryRecordRepository(RecordRepository):
    """In-memory record repository for tests."""

    values: dict[str, object] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)
    batches: int = 0

    def get(self, key: str) -> object | None:
        return self.values.get(key)

    def set_many(self, values: Mapping[str, object]) -> None:
        self.batches += 1
        self.writes.extend(values)
        self.values.update(values)


@dataclass
class FailingRecordRepository(RecordRepository):
    """Repository whose storage is unavailable."""

    def get(self, key: str) -> object | None:
        raise OSError("storage unavailable")

    def set_many(self, values: Mapping[str, object]) -> None:
        raise OSError("quota exceeded")


def sequential_ids(prefix: str = "id") -> Callable[[], str]:
    """Return an id factory producing id1, id2, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


def gym(
    day: str,
    exercise_id: str = "e1",
    sets: object = 3,
    reps: object = 10,
    weight: object = 50,
    entry_id: str | None = None,
) -> GymLogEntry:
    return GymLogEntry(
        id=entry_id or f"g-{day}-{exercise_id}-{weight}",
        date=day,
        exercise_id=exercise_id,
        sets=sets,
        reps=reps,
        weight=weight,
    )


def intake(
    day: str,
    calories: object = 100,
    protein: object = 10,
    food_id: str = "f1",
    entry_id: str | None = None,
) -> NutritionLogEntry:
    return NutritionLogEntry(
        id=entry_id or f"n-{day}-{calories}",
        date=day,
        food_id=food_id,
        qty=1,
        calories=calories,
        protein=protein,
    )


def body(day: str, weight: object = 80, entry_id: str | None = None) -> BodyLogEntry:
    return BodyLogEntry(id=entry_id or f"b-{day}-{weight}", date=day, weight=weight)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        storage_backend="file",
        data_file=tmp_path / "records.json",
        plan_start=date(2025, 7, 1),
        plan_end=date(2026, 10, 8),
    )


@pytest.fixture
def repository() -> InMemoryRecordRepository:
    return InMemoryRecordRepository()


@pytest.fixture
def record_service(repository: InMemoryRecordRepository) -> RecordService:
    return RecordService(repository, id_factory=sequential_ids())


@pytest.fixture
def container(settings: Settings, repository: InMemoryRecordRepository) -> AppContainer:
    built = build_container_for(settings, repository)
    built.record_service.id_factory = sequential_ids()
    return built
