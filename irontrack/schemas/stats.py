"""Per-day exercise progress schema."""

from irontrack.schemas.common import CamelModel


class ExerciseStatsPoint(CamelModel):
    date: str  # YYYY-MM-DD (UTC calendar day)
    max_weight: int
    max_weight_reps: int
    max_weight_unit: str
    total_volume: int
