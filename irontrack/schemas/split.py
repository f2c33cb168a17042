"""Split schemas: create payload and the composed split + children view."""

from pydantic import ConfigDict, Field, model_validator

from irontrack.schemas.cardio_type import CardioTypeRead
from irontrack.schemas.common import CamelModel
from irontrack.schemas.exercise import ExerciseRead


class SplitExerciseInput(CamelModel):
    exercise_id: int
    day_number: int = Field(default=1, ge=1)
    sets: int = Field(..., ge=1)
    rep_min: int = Field(..., ge=0)
    rep_max: int = Field(..., ge=0)
    notes: str | None = None

    @model_validator(mode="after")
    def rep_range_ordered(self) -> "SplitExerciseInput":
        if self.rep_min > self.rep_max:
            raise ValueError("repMin must not exceed repMax")
        return self


class SplitCardioInput(CamelModel):
    cardio_type_id: int
    day_number: int = Field(default=1, ge=1)
    target_duration_seconds: int | None = Field(default=None, ge=0)
    target_distance: float | None = Field(default=None, ge=0)
    target_distance_unit: str | None = Field(default=None, max_length=20)
    notes: str | None = None


class SplitCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    number_of_days: int = Field(default=1, ge=1)
    split_exercises: list[SplitExerciseInput]
    split_cardio: list[SplitCardioInput] = []

    @model_validator(mode="after")
    def days_within_split(self) -> "SplitCreate":
        for slot in [*self.split_exercises, *self.split_cardio]:
            if slot.day_number > self.number_of_days:
                raise ValueError(
                    f"dayNumber {slot.day_number} exceeds numberOfDays ({self.number_of_days})"
                )
        return self


class SplitExerciseRead(CamelModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    split_id: int
    exercise_id: int
    day_number: int
    sets: int
    rep_min: int
    rep_max: int
    notes: str | None = None
    exercise: ExerciseRead | None = None


class SplitCardioRead(CamelModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    split_id: int
    cardio_type_id: int
    day_number: int
    target_duration_seconds: int | None = None
    target_distance: float | None = None
    target_distance_unit: str | None = None
    notes: str | None = None
    cardio_type: CardioTypeRead | None = None


class SplitRead(CamelModel):
    """Split with its exercise and cardio slots (each with its referenced entity)."""

    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    description: str | None = None
    number_of_days: int
    split_exercises: list[SplitExerciseRead] = []
    split_cardio: list[SplitCardioRead] = []
