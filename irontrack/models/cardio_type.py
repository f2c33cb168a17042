"""CardioType model - built-in and custom cardio modalities."""

from __future__ import annotations

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from irontrack.core.constants import DEFAULT_DISTANCE_UNIT
from irontrack.db.base import Base


class CardioType(Base):
    """A cardio modality and which metrics the UI should show for it."""

    __tablename__ = "cardio_types"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(20), nullable=False)  # run, cycle, row, swim, other
    is_built_in: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    default_distance_unit: Mapped[str | None] = mapped_column(
        String(20), nullable=True, default=DEFAULT_DISTANCE_UNIT
    )
    show_distance: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_pace: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    show_speed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    pace_unit: Mapped[str | None] = mapped_column(String(20), nullable=True)  # min/mile, min/km, min/500m
    speed_unit: Mapped[str | None] = mapped_column(String(20), nullable=True)  # mph, km/h
