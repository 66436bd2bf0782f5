"""Request payload models for the HTTP API."""

from pydantic import BaseModel, Field

from fitness_tracker.domain.records import ExerciseTag, UnitPreference

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

Amount = int | float


class ExerciseCreate(BaseModel):
    name: str = Field(min_length=1)
    tags: list[ExerciseTag] = Field(default_factory=list)


class FoodCreate(BaseModel):
    name: str = Field(min_length=1)
    calories: Amount = 0
    protein: Amount = 0
    carbs: Amount = 0
    fat: Amount = 0


class WorkoutCreate(BaseModel):
    """A gym entry; the date defaults to today."""

    exercise_id: str = Field(min_length=1)
    date: str | None = Field(None, pattern=DATE_PATTERN)
    sets: Amount = 0
    reps: Amount = 0
    weight: Amount = Field(0, description="Weight in kilograms")
    notes: str = ""


class IntakeCreate(BaseModel):
    """A food intake; calories and protein are derived from the food."""

    food_id: str = Field(min_length=1)
    date: str | None = Field(None, pattern=DATE_PATTERN)
    qty: Amount = 1
    notes: str = ""


class BodyCreate(BaseModel):
    """Body measurements in kilograms, centimetres and percent."""

    date: str | None = Field(None, pattern=DATE_PATTERN)
    weight: Amount = 0
    height: Amount = 0
    muscle: Amount = 0
    fat: Amount = 0
    waist: Amount = 0
    arms: Amount = 0
    chest: Amount = 0
    notes: str = ""


class UnitUpdate(BaseModel):
    unit: UnitPreference


class GoalsUpdate(BaseModel):
    calories: Amount = Field(0, ge=0)
    protein: Amount = Field(0, ge=0)
    weight: Amount = Field(0, ge=0)
