"""ORM models - import all so Base.metadata is complete for migrations."""

from irontrack.models.cardio_type import CardioType
from irontrack.models.exercise import Exercise
from irontrack.models.split import Split, SplitCardio, SplitExercise
from irontrack.models.workout import CardioSession, Workout, WorkoutSet

__all__ = [
    "CardioSession",
    "CardioType",
    "Exercise",
    "Split",
    "SplitCardio",
    "SplitExercise",
    "Workout",
    "WorkoutSet",
]
