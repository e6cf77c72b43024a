"""Pydantic schemas for workouts, profile and weight history.

These are the value types the metrics engine consumes. Repositories map
database rows to and from them.
"""

import uuid
from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fitness_tracker.utils.timezone import to_utc

# ============================================================================
# Enums
# ============================================================================


class Gender(StrEnum):
    """Gender recorded on the user profile."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


# ============================================================================
# Records
# ============================================================================


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class WorkoutRecord(BaseModel):
    """One logged treadmill session split into a running and a walking segment.

    `id` and `date` are fixed at creation. Edits replace the numeric fields
    and keep both.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id, description="Workout identifier")
    date: datetime = Field(default_factory=_now, description="When the workout was logged")
    total_duration_minutes: float = Field(ge=0, description="Whole session length in minutes")
    running_duration_minutes: float = Field(ge=0, description="Running portion in minutes")
    running_speed_kmh: float = Field(ge=0, description="Running speed in km/h")
    walking_speed_kmh: float = Field(ge=0, description="Walking speed in km/h")

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        """Store timestamps as aware UTC."""
        return to_utc(value)


class UserProfile(BaseModel):
    """Physical attributes used to personalise calorie estimates."""

    id: str = Field(default_factory=_new_id, description="Profile identifier")
    weight_kg: float = Field(default=70.0, gt=0, description="Body weight in kg")
    height_cm: float = Field(default=175.0, gt=0, description="Height in cm")
    gender: Gender = Field(default=Gender.MALE)
    daily_steps_goal: int = Field(default=10000, gt=0, description="Daily step target")


class WeightMeasurement(BaseModel):
    """A single body-weight entry."""

    id: str = Field(default_factory=_new_id)
    date: datetime = Field(default_factory=_now)
    weight_kg: float = Field(gt=0)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return to_utc(value)
