"""Initial schema: exercises, cardio types, splits with slots, workouts with sets and cardio sessions.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=True)

    op.create_table(
        "cardio_types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("is_built_in", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("default_distance_unit", sa.String(length=20), nullable=True),
        sa.Column("show_distance", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("show_pace", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("show_speed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("pace_unit", sa.String(length=20), nullable=True),
        sa.Column("speed_unit", sa.String(length=20), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_cardio_types_name"), "cardio_types", ["name"], unique=True)

    op.create_table(
        "splits",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("number_of_days", sa.Integer(), nullable=False, server_default="1"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_splits_name"), "splits", ["name"], unique=True)

    op.create_table(
        "split_exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("split_id", sa.Integer(), nullable=False),
        sa.Column("exercise_id", sa.Integer(), nullable=False),
        sa.Column("day_number", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("sets", sa.Integer(), nullable=False),
        sa.Column("rep_min", sa.Integer(), nullable=False),
        sa.Column("rep_max", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["split_id"], ["splits.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_split_exercises_split_id", "split_exercises", ["split_id"], unique=False)

    op.create_table(
        "split_cardio",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("split_id", sa.Integer(), nullable=False),
        sa.Column("cardio_type_id", sa.Integer(), nullable=False),
        sa.Column("day_number", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("target_duration_seconds", sa.Integer(), nullable=True),
        sa.Column("target_distance", sa.Float(), nullable=True),
        sa.Column("target_distance_unit", sa.String(length=20), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["split_id"], ["splits.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_split_cardio_split_id", "split_cardio", ["split_id"], unique=False)

    op.create_table(
        "workouts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("split_id", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workouts_date", "workouts", ["date"], unique=False)
    op.create_index("ix_workouts_split_id", "workouts", ["split_id"], unique=False)

    op.create_table(
        "sets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("workout_id", sa.Integer(), nullable=False),
        sa.Column("exercise_id", sa.Integer(), nullable=False),
        sa.Column("set_number", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Integer(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("weight_unit", sa.String(length=10), nullable=False, server_default="lbs"),
        sa.Column("exercise_note", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["workout_id"], ["workouts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_sets_workout_id", "sets", ["workout_id"], unique=False)
    op.create_index("ix_sets_exercise_id", "sets", ["exercise_id"], unique=False)

    op.create_table(
        "cardio_sessions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("workout_id", sa.Integer(), nullable=False),
        sa.Column("cardio_type_id", sa.Integer(), nullable=False),
        sa.Column("duration_seconds", sa.Integer(), nullable=False),
        sa.Column("distance", sa.Float(), nullable=True),
        sa.Column("distance_unit", sa.String(length=20), nullable=True),
        sa.Column("calories", sa.Integer(), nullable=True),
        sa.Column("effort_level", sa.String(length=20), nullable=True),
        sa.Column("rpe", sa.Integer(), nullable=True),
        sa.Column("avg_heart_rate", sa.Integer(), nullable=True),
        sa.Column("max_heart_rate", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_intervals", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("work_seconds", sa.Integer(), nullable=True),
        sa.Column("rest_seconds", sa.Integer(), nullable=True),
        sa.Column("rounds", sa.Integer(), nullable=True),
        sa.Column("elevation_gain", sa.Integer(), nullable=True),
        sa.Column("incline", sa.Float(), nullable=True),
        sa.Column("resistance_level", sa.Integer(), nullable=True),
        sa.Column("strokes_per_minute", sa.Integer(), nullable=True),
        sa.Column("pool_length", sa.String(length=20), nullable=True),
        sa.Column("floors_climbed", sa.Integer(), nullable=True),
        sa.Column("total_steps", sa.Integer(), nullable=True),
        sa.Column("total_jumps", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["workout_id"], ["workouts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_cardio_sessions_workout_id", "cardio_sessions", ["workout_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_cardio_sessions_workout_id", table_name="cardio_sessions")
    op.drop_table("cardio_sessions")
    op.drop_index("ix_sets_exercise_id", table_name="sets")
    op.drop_index("ix_sets_workout_id", table_name="sets")
    op.drop_table("sets")
    op.drop_index("ix_workouts_split_id", table_name="workouts")
    op.drop_index("ix_workouts_date", table_name="workouts")
    op.drop_table("workouts")
    op.drop_index("ix_split_cardio_split_id", table_name="split_cardio")
    op.drop_table("split_cardio")
    op.drop_index("ix_split_exercises_split_id", table_name="split_exercises")
    op.drop_table("split_exercises")
    op.drop_index(op.f("ix_splits_name"), table_name="splits")
    op.drop_table("splits")
    op.drop_index(op.f("ix_cardio_types_name"), table_name="cardio_types")
    op.drop_table("cardio_types")
    op.drop_index(op.f("ix_exercises_name"), table_name="exercises")
    op.drop_table("exercises")
