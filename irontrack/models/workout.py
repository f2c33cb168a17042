"""Workout, WorkoutSet and CardioSession models."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from irontrack.core.constants import DEFAULT_WEIGHT_UNIT
from irontrack.db.base import Base


class Workout(Base):
    """One logged training session. `split_id` is a loose reference (no FK)."""

    __tablename__ = "workouts"
    __table_args__ = (
        Index("ix_workouts_date", "date"),
        Index("ix_workouts_split_id", "split_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    split_id: Mapped[int | None] = mapped_column(Integer, nullable=True)


class WorkoutSet(Base):
    """One set: weight x reps of an exercise, numbered within the workout."""

    __tablename__ = "sets"
    __table_args__ = (
        Index("ix_sets_workout_id", "workout_id"),
        Index("ix_sets_exercise_id", "exercise_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    workout_id: Mapped[int] = mapped_column(ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False)
    exercise_id: Mapped[int] = mapped_column(Integer, nullable=False)
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight_unit: Mapped[str] = mapped_column(String(10), nullable=False, default=DEFAULT_WEIGHT_UNIT)
    exercise_note: Mapped[str | None] = mapped_column(Text, nullable=True)


class CardioSession(Base):
    """One cardio activity inside a workout, with optional modality-specific metrics."""

    __tablename__ = "cardio_sessions"
    __table_args__ = (Index("ix_cardio_sessions_workout_id", "workout_id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    workout_id: Mapped[int] = mapped_column(ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False)
    cardio_type_id: Mapped[int] = mapped_column(Integer, nullable=False)
    duration_seconds: Mapped[int] = mapped_column(Integer, nullable=False)
    distance: Mapped[float | None] = mapped_column(Float, nullable=True)
    distance_unit: Mapped[str | None] = mapped_column(String(20), nullable=True)  # miles, km, meters, yards
    calories: Mapped[int | None] = mapped_column(Integer, nullable=True)
    effort_level: Mapped[str | None] = mapped_column(String(20), nullable=True)  # easy, moderate, hard
    rpe: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 1-10
    avg_heart_rate: Mapped[int | None] = mapped_column(Integer, nullable=True)
    max_heart_rate: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    is_intervals: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    work_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rest_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rounds: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Modality-specific
    elevation_gain: Mapped[int | None] = mapped_column(Integer, nullable=True)
    incline: Mapped[float | None] = mapped_column(Float, nullable=True)
    resistance_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    strokes_per_minute: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pool_length: Mapped[str | None] = mapped_column(String(20), nullable=True)  # 25m, 50m, 25yd
    floors_climbed: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_steps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_jumps: Mapped[int | None] = mapped_column(Integer, nullable=True)
