"""Initial schema: profiles, readings and reminders

Revision ID: a1c4e7b9d2f0
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1c4e7b9d2f0"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "profiles",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("gender", sa.String(length=10), nullable=False, comment="male or female"),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column(
            "medical_conditions",
            sa.JSON(),
            nullable=False,
            comment="Free-form list of conditions (e.g. Diabetic)",
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        comment="Tracked people (family members)",
    )

    op.create_table(
        "blood_pressure_readings",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("profile_id", sa.String(length=36), nullable=False, comment="Owning profile"),
        sa.Column("systolic", sa.Integer(), nullable=False),
        sa.Column("diastolic", sa.Integer(), nullable=False),
        sa.Column("pulse", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Integer(), nullable=True, comment="Body weight in kg"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("reading_date", sa.DateTime(timezone=True), nullable=False),
        # Derived values
        sa.Column(
            "classification", sa.String(length=32), nullable=False, comment="ACC/AHA 2017 category"
        ),
        sa.Column(
            "pulse_pressure", sa.Integer(), nullable=False, comment="Systolic minus diastolic"
        ),
        sa.Column(
            "mean_arterial_pressure",
            sa.Integer(),
            nullable=False,
            comment="Diastolic plus a third of pulse pressure, rounded",
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        comment="Blood pressure readings with derived ACC/AHA classification",
    )
    op.create_index(
        "ix_blood_pressure_readings_profile_id", "blood_pressure_readings", ["profile_id"]
    )
    op.create_index(
        "ix_blood_pressure_readings_reading_date", "blood_pressure_readings", ["reading_date"]
    )
    op.create_index(
        "ix_readings_profile_date", "blood_pressure_readings", ["profile_id", "reading_date"]
    )

    op.create_table(
        "reminders",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("profile_id", sa.String(length=36), nullable=False, comment="Owning profile"),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("time", sa.String(length=5), nullable=False, comment="HH:MM, 24h"),
        sa.Column("is_repeating", sa.Boolean(), nullable=False),
        sa.Column(
            "days_of_week",
            sa.JSON(),
            nullable=False,
            comment="Lowercase weekday names (monday..sunday)",
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        comment="Per-profile measurement reminders",
    )
    op.create_index("ix_reminders_profile_id", "reminders", ["profile_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_reminders_profile_id", table_name="reminders")
    op.drop_table("reminders")
    op.drop_index("ix_readings_profile_date", table_name="blood_pressure_readings")
    op.drop_index("ix_blood_pressure_readings_reading_date", table_name="blood_pressure_readings")
    op.drop_index("ix_blood_pressure_readings_profile_id", table_name="blood_pressure_readings")
    op.drop_table("blood_pressure_readings")
    op.drop_table("profiles")
