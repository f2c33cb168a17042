"""Backup document schemas (the export/import file format).

Incoming entries are parsed leniently: ids of children and parents are
optional, and unknown keys are ignored so older exports still load.
"""

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from irontrack.schemas.common import CamelModel
from irontrack.schemas.workout import to_utc


class BackupModel(CamelModel):
    model_config = ConfigDict(from_attributes=True, extra="ignore")


class BackupExercise(BackupModel):
    id: int
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class BackupCardioType(BackupModel):
    id: int
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category: str = "other"
    is_built_in: bool = False
    default_distance_unit: str | None = Field(default=None, max_length=20)
    show_distance: bool | None = True
    show_pace: bool | None = True
    show_speed: bool | None = False
    pace_unit: str | None = Field(default=None, max_length=20)
    speed_unit: str | None = Field(default=None, max_length=20)


class BackupSplitExercise(BackupModel):
    id: int | None = None
    split_id: int | None = None
    exercise_id: int
    day_number: int | None = 1
    sets: int
    rep_min: int
    rep_max: int
    notes: str | None = None


class BackupSplitCardio(BackupModel):
    id: int | None = None
    split_id: int | None = None
    cardio_type_id: int
    day_number: int | None = 1
    target_duration_seconds: int | None = None
    target_distance: float | None = None
    target_distance_unit: str | None = None
    notes: str | None = None


class BackupSplit(BackupModel):
    id: int
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    number_of_days: int | None = 1
    split_exercises: list[BackupSplitExercise] = []
    split_cardio: list[BackupSplitCardio] = []


class BackupSet(BackupModel):
    id: int | None = None
    workout_id: int | None = None
    exercise_id: int
    set_number: int
    weight: int
    reps: int
    weight_unit: str | None = "lbs"
    exercise_note: str | None = None


class BackupCardioSession(BackupModel):
    id: int | None = None
    workout_id: int | None = None
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
    is_intervals: bool | None = False
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


class BackupWorkout(BackupModel):
    id: int | None = None
    date: datetime
    notes: str | None = None
    split_id: int | None = None
    sets: list[BackupSet] = []
    cardio_sessions: list[BackupCardioSession] = []

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, value: datetime) -> datetime:
        return to_utc(value)


class BackupDocument(BackupModel):
    version: str
    exported_at: datetime | None = None
    exercises: list[BackupExercise]
    cardio_types: list[BackupCardioType] = []
    splits: list[BackupSplit]
    workouts: list[BackupWorkout]


class ImportCounts(CamelModel):
    exercises: int = 0
    cardio_types: int = 0
    splits: int = 0
    workouts: int = 0


class ImportResult(CamelModel):
    message: str = "Import successful"
    imported: ImportCounts
