"""Split (multi-day training template) and its prescribed exercise/cardio slots."""

from __future__ import annotations

from sqlalchemy import Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from irontrack.db.base import Base


class Split(Base):
    """Named, reusable training template spanning `number_of_days` days."""

    __tablename__ = "splits"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    number_of_days: Mapped[int] = mapped_column(Integer, nullable=False, default=1)


class SplitExercise(Base):
    """Prescribed exercise slot for one day of a split."""

    __tablename__ = "split_exercises"
    __table_args__ = (Index("ix_split_exercises_split_id", "split_id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    split_id: Mapped[int] = mapped_column(ForeignKey("splits.id", ondelete="CASCADE"), nullable=False)
    # No FK: imports may carry ids that were never remapped
    exercise_id: Mapped[int] = mapped_column(Integer, nullable=False)
    day_number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    sets: Mapped[int] = mapped_column(Integer, nullable=False)
    rep_min: Mapped[int] = mapped_column(Integer, nullable=False)
    rep_max: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class SplitCardio(Base):
    """Prescribed cardio slot for one day of a split."""

    __tablename__ = "split_cardio"
    __table_args__ = (Index("ix_split_cardio_split_id", "split_id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    split_id: Mapped[int] = mapped_column(ForeignKey("splits.id", ondelete="CASCADE"), nullable=False)
    cardio_type_id: Mapped[int] = mapped_column(Integer, nullable=False)
    day_number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    target_duration_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    target_distance: Mapped[float | None] = mapped_column(Float, nullable=True)
    target_distance_unit: Mapped[str | None] = mapped_column(String(20), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
