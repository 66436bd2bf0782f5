"""Endpoints that read and mutate the tracked records."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from fitness_tracker.api.models import (
    BodyCreate,
    ExerciseCreate,
    FoodCreate,
    GoalsUpdate,
    IntakeCreate,
    UnitUpdate,
    WorkoutCreate,
)
from fitness_tracker.api.serializers import serialize_body, serialize_exercise
from fitness_tracker.domain import codec
from fitness_tracker.domain.records import ExerciseTag, Goals
from fitness_tracker.services.history import group_gym_log, group_nutrition_log
from fitness_tracker.services.library import filter_exercises, filter_foods

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(tags=["records"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/exercises")
async def list_exercises(
    request: Request, q: str | None = None, tag: ExerciseTag | None = None
) -> dict[str, object]:
    """Return exercises, optionally filtered by name and tag."""
    exercises = _container(request).record_service.snapshot.exercises
    return {
        "exercises": [
            serialize_exercise(exercise)
            for exercise in filter_exercises(exercises, query=q, tag=tag)
        ]
    }


@router.post("/exercises", status_code=status.HTTP_201_CREATED)
async def create_exercise(
    payload: ExerciseCreate, request: Request
) -> dict[str, object]:
    """Add an exercise to the reference list."""
    exercise = _container(request).record_service.add_exercise(
        payload.name, payload.tags
    )
    return serialize_exercise(exercise)


@router.delete("/exercises/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exercise(exercise_id: str, request: Request) -> None:
    """Remove an exercise; gym entries referencing it show as unknown."""
    _container(request).record_service.delete_exercise(exercise_id)


@router.post("/exercises/{exercise_id}/tags/{tag}")
async def toggle_exercise_tag(
    exercise_id: str, tag: ExerciseTag, request: Request
) -> dict[str, object]:
    """Add or remove one tag on an exercise."""
    exercise = _container(request).record_service.toggle_exercise_tag(
        exercise_id, tag
    )
    return serialize_exercise(exercise)


@router.get("/foods")
async def list_foods(request: Request, q: str | None = None) -> dict[str, object]:
    """Return foods, optionally filtered by name."""
    foods = _container(request).record_service.snapshot.foods
    return {"foods": [asdict(food) for food in filter_foods(foods, query=q)]}


@router.post("/foods", status_code=status.HTTP_201_CREATED)
async def create_food(payload: FoodCreate, request: Request) -> dict[str, object]:
    """Add a food to the reference list."""
    food = _container(request).record_service.add_food(
        payload.name,
        calories=payload.calories,
        protein=payload.protein,
        carbs=payload.carbs,
        fat=payload.fat,
    )
    return asdict(food)


@router.delete("/foods/{food_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_food(food_id: str, request: Request) -> None:
    """Remove a food; intake entries referencing it show as unknown."""
    _container(request).record_service.delete_food(food_id)


@router.get("/gym")
async def list_gym_log(request: Request) -> dict[str, object]:
    """Return the gym log grouped by day and exercise."""
    snapshot = _container(request).record_service.snapshot
    days = group_gym_log(snapshot.gym_log, snapshot.exercises)
    return {"days": [asdict(day) for day in days]}


@router.post("/gym", status_code=status.HTTP_201_CREATED)
async def create_workout(payload: WorkoutCreate, request: Request) -> dict[str, object]:
    """Log an exercise."""
    entry = _container(request).record_service.log_workout(
        payload.exercise_id,
        date=payload.date,
        sets=payload.sets,
        reps=payload.reps,
        weight=payload.weight,
        notes=payload.notes,
    )
    return asdict(entry)


@router.delete("/gym/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout(entry_id: str, request: Request) -> None:
    """Remove a gym entry."""
    _container(request).record_service.delete_workout(entry_id)


@router.get("/nutrition")
async def list_nutrition_log(request: Request) -> dict[str, object]:
    """Return the nutrition log grouped by day with totals."""
    snapshot = _container(request).record_service.snapshot
    days = group_nutrition_log(snapshot.nutrition_log)
    return {"days": [asdict(day) for day in days]}


@router.post("/nutrition", status_code=status.HTTP_201_CREATED)
async def create_intake(payload: IntakeCreate, request: Request) -> dict[str, object]:
    """Log a food intake."""
    entry = _container(request).record_service.log_intake(
        payload.food_id, date=payload.date, qty=payload.qty, notes=payload.notes
    )
    return asdict(entry)


@router.delete("/nutrition/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_intake(entry_id: str, request: Request) -> None:
    """Remove a nutrition entry."""
    _container(request).record_service.delete_intake(entry_id)


@router.get("/body")
async def list_body_log(request: Request) -> dict[str, object]:
    """Return body entries, newest first, in the preferred units."""
    snapshot = _container(request).record_service.snapshot
    entries = sorted(snapshot.body_log, key=lambda entry: entry.date, reverse=True)
    return {"entries": [serialize_body(entry, snapshot.unit) for entry in entries]}


@router.post("/body", status_code=status.HTTP_201_CREATED)
async def create_body_entry(payload: BodyCreate, request: Request) -> dict[str, object]:
    """Log body measurements."""
    measurements = payload.model_dump(exclude={"date"})
    entry = _container(request).record_service.log_body(
        date=payload.date, **measurements
    )
    return asdict(entry)


@router.delete("/body/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_body_entry(entry_id: str, request: Request) -> None:
    """Remove a body entry."""
    _container(request).record_service.delete_body(entry_id)


@router.get("/settings")
async def get_settings(request: Request) -> dict[str, object]:
    """Return the unit preference and goals."""
    snapshot = _container(request).record_service.snapshot
    return {"unit": snapshot.unit.value, "goals": codec.dump_goals(snapshot.goals)}


@router.put("/settings/unit")
async def update_unit(payload: UnitUpdate, request: Request) -> dict[str, object]:
    """Replace the unit preference."""
    _container(request).record_service.set_unit(payload.unit)
    return {"unit": payload.unit.value}


@router.put("/settings/goals")
async def update_goals(payload: GoalsUpdate, request: Request) -> dict[str, object]:
    """Replace the goals."""
    goals = Goals(
        calories=payload.calories, protein=payload.protein, weight=payload.weight
    )
    _container(request).record_service.set_goals(goals)
    return {"goals": codec.dump_goals(goals)}
