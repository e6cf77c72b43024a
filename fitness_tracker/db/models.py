from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Float, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""


class TreadmillWorkout(Base):
    """Logged treadmill sessions.

    Stores only the entered values:
    - total_duration_minutes / running_duration_minutes
    - running_speed_kmh / walking_speed_kmh

    Walking duration, distances, average speed and calories are derived by
    the metrics engine and never stored. `id` and `date` are set once.
    """

    __tablename__ = "treadmill_workouts"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    total_duration_minutes: Mapped[float] = mapped_column(Float, nullable=False)
    running_duration_minutes: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    running_speed_kmh: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    walking_speed_kmh: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)


class UserProfile(Base):
    """The user's physical attributes. At most one row is kept."""

    __tablename__ = "user_profiles"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    weight_kg: Mapped[float] = mapped_column(Float, nullable=False, default=70.0)
    height_cm: Mapped[float] = mapped_column(Float, nullable=False, default=175.0)
    gender: Mapped[str] = mapped_column(String, nullable=False, default="male")
    daily_steps_goal: Mapped[int] = mapped_column(Integer, nullable=False, default=10000)


class WeightMeasurement(Base):
    """Body-weight history entries."""

    __tablename__ = "weight_measurements"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    weight_kg: Mapped[float] = mapped_column(Float, nullable=False)


class DailyStepCount(Base):
    """Step totals per local calendar day, as imported from the health store."""

    __tablename__ = "daily_step_counts"

    day: Mapped[date] = mapped_column(Date, primary_key=True)
    steps: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
