"""Input validation for treadmill workouts.

Values are checked here, before a record is built or stored. No clamping:
failures raise WorkoutValidationError listing every problem, which the API
returns as 422.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from fitness_tracker.core.errors import WorkoutValidationError


class WorkoutInput(BaseModel):
    """Editable fields of a workout as entered by the user."""

    total_duration_minutes: float = Field(description="Whole session length in minutes")
    running_duration_minutes: float = Field(default=0.0, description="Running portion in minutes")
    running_speed_kmh: float = Field(default=0.0, description="Running speed in km/h")
    walking_speed_kmh: float = Field(default=0.0, description="Walking speed in km/h")


def validate_workout_input(data: WorkoutInput) -> WorkoutInput:
    """Validate workout input against hard constraints.

    Enforced constraints:
    - Durations and speeds are finite and non-negative
    - Running duration does not exceed total duration

    Args:
        data: Workout input to validate

    Returns:
        The same input, unchanged

    Raises:
        WorkoutValidationError: If any constraint fails
    """
    errors: list[str] = []

    for field_name in ("total_duration_minutes", "running_duration_minutes", "running_speed_kmh", "walking_speed_kmh"):
        value = getattr(data, field_name)
        if not math.isfinite(value):
            errors.append(f"{field_name} must be a finite number")
        elif value < 0:
            errors.append(f"{field_name} must be non-negative")

    if (
        math.isfinite(data.running_duration_minutes)
        and math.isfinite(data.total_duration_minutes)
        and data.running_duration_minutes > data.total_duration_minutes
    ):
        errors.append(
            f"running_duration_minutes ({data.running_duration_minutes}) "
            f"exceeds total_duration_minutes ({data.total_duration_minutes})"
        )

    if errors:
        raise WorkoutValidationError(errors)
    return data
