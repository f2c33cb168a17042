"""Shared enums for models and API."""

from enum import Enum


class WeightUnit(str, Enum):
    """Unit a set's weight was logged in."""

    LBS = "lbs"
    KG = "kg"


class EffortLevel(str, Enum):
    """Perceived effort of a cardio session."""

    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"


class CardioCategory(str, Enum):
    """Modality family of a cardio type."""

    RUN = "run"
    CYCLE = "cycle"
    ROW = "row"
    SWIM = "swim"
    OTHER = "other"
