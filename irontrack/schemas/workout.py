"""Workout, WorkoutSet and CardioSession schemas."""

from datetime import datetime, timezone

from pydantic import ConfigDict, Field, field_validator

from irontrack.core.enums import EffortLevel, WeightUnit
from irontrack.schemas.cardio_type import CardioTypeRead
from irontrack.schemas.common import CamelModel
from irontrack.schemas.exercise import ExerciseRead


def to_utc(value: datetime) -> datetime:
    """Naive timestamps are taken as UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class WorkoutSetInput(CamelModel):
    exercise_id: int
    set_number: int = Field(..., ge=1)
    weight: int = Field(..., ge=0)
    reps: int = Field(..., ge=1)
    weight_unit: WeightUnit = Field(default=WeightUnit.LBS, validate_default=True)
    exercise_note: str | None = None


class WorkoutSetUpsert(WorkoutSetInput):
    """A set in an update diff: with `id` it replaces that set, without it is inserted."""

    id: int | None = None


class CardioSessionBase(CamelModel):
    cardio_type_id: int
    duration_seconds: int
    distance: float | None = None
    distance_unit: str | None = None
    calories: int | None = None
    effort_level: str | None = None
    rpe: int | None = None
    avg_heart_rate: int | None = None
    max_heart_rate: int | None = None
    notes: str | None = None
    is_intervals: bool = False
    work_seconds: int | None = None
    rest_seconds: int | None = None
    rounds: int | None = None
    elevation_gain: int | None = None
    incline: float | None = None
    resistance_level: int | None = None
    strokes_per_minute: int | None = None
    pool_length: str | None = None
    floors_climbed: int | None = None
    total_steps: int | None = None
    total_jumps: int | None = None


class CardioSessionInput(CardioSessionBase):
    """Cardio session as sent by clients; ranges are checked here only."""

    duration_seconds: int = Field(..., ge=1)
    distance: float | None = Field(default=None, ge=0)
    distance_unit: str | None = Field(default=None, max_length=20)
    calories: int | None = Field(default=None, ge=0)
    effort_level: EffortLevel | None = None
    rpe: int | None = Field(default=None, ge=1, le=10)
    avg_heart_rate: int | None = Field(default=None, ge=0)
    max_heart_rate: int | None = Field(default=None, ge=0)
    pool_length: str | None = Field(default=None, max_length=20)


class CardioSessionUpsert(CardioSessionInput):
    id: int | None = None


class WorkoutCreate(CamelModel):
    date: datetime
    notes: str | None = None
    split_id: int | None = None
    sets: list[WorkoutSetInput]
    cardio_sessions: list[CardioSessionInput] = []

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, value: datetime) -> datetime:
        return to_utc(value)


class WorkoutUpdate(CamelModel):
    """Sparse diff: delete the named ids, replace sets with an id, insert the rest."""

    notes: str | None = None
    sets: list[WorkoutSetUpsert] = []
    deleted_set_ids: list[int] = []
    cardio_sessions: list[CardioSessionUpsert] | None = None
    deleted_cardio_session_ids: list[int] = []


class WorkoutSetRead(CamelModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    workout_id: int
    exercise_id: int
    set_number: int
    weight: int
    reps: int
    weight_unit: str
    exercise_note: str | None = None
    exercise: ExerciseRead | None = None


class CardioSessionRead(CardioSessionBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    workout_id: int
    cardio_type: CardioTypeRead | None = None


class WorkoutRead(CamelModel):
    """Workout with nested sets and cardio sessions."""

    model_config = ConfigDict(from_attributes=True)
    id: int
    date: datetime
    notes: str | None = None
    split_id: int | None = None
    sets: list[WorkoutSetRead] = []
    cardio_sessions: list[CardioSessionRead] = []

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, value: datetime) -> datetime:
        return to_utc(value)
