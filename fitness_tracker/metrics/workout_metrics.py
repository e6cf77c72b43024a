"""Derived metrics for treadmill workouts.

Implements:
- Walking duration from total and running duration
- Per-segment, total distance and average speed
- MET-based calorie estimate personalised by body weight

All functions are pure. Input is expected to have passed
`validate_workout_input`; nothing here clamps or rejects values.
"""

from __future__ import annotations

from dataclasses import dataclass

from fitness_tracker.metrics.met import running_met, segment_calories, walking_met
from fitness_tracker.models.records import UserProfile, WorkoutRecord

MINUTES_PER_HOUR = 60.0


@dataclass(frozen=True)
class WorkoutMetrics:
    """Every derived quantity of a workout in one value."""

    walking_duration_minutes: float
    running_distance_km: float
    walking_distance_km: float
    total_distance_km: float
    average_speed_kmh: float
    calories_kcal: float | None = None


def walking_duration(record: WorkoutRecord) -> float:
    """Minutes spent walking: total minus running."""
    return record.total_duration_minutes - record.running_duration_minutes


def segment_distance(duration_minutes: float, speed_kmh: float) -> float:
    """Distance in km covered at a constant speed."""
    return (duration_minutes / MINUTES_PER_HOUR) * speed_kmh


def running_distance(record: WorkoutRecord) -> float:
    return segment_distance(record.running_duration_minutes, record.running_speed_kmh)


def walking_distance(record: WorkoutRecord) -> float:
    return segment_distance(walking_duration(record), record.walking_speed_kmh)


def total_distance(record: WorkoutRecord) -> float:
    """Running plus walking distance in km."""
    return running_distance(record) + walking_distance(record)


def average_speed(record: WorkoutRecord) -> float:
    """Average speed over the whole session in km/h.

    Returns 0.0 for a zero-length session.
    """
    if record.total_duration_minutes <= 0:
        return 0.0
    return total_distance(record) / (record.total_duration_minutes / MINUTES_PER_HOUR)


def calories_burned(record: WorkoutRecord, profile: UserProfile) -> float:
    """Estimated kcal for the session using the banded MET tables.

    Running and walking segments are estimated separately with their own
    MET and summed.
    """
    running_kcal = segment_calories(
        running_met(record.running_speed_kmh),
        profile.weight_kg,
        record.running_duration_minutes,
    )
    walking_kcal = segment_calories(
        walking_met(record.walking_speed_kmh),
        profile.weight_kg,
        walking_duration(record),
    )
    return running_kcal + walking_kcal


def compute_workout_metrics(record: WorkoutRecord, profile: UserProfile | None = None) -> WorkoutMetrics:
    """Compute all derived metrics; calories only when a profile is given."""
    run_km = running_distance(record)
    walk_km = walking_distance(record)
    return WorkoutMetrics(
        walking_duration_minutes=walking_duration(record),
        running_distance_km=run_km,
        walking_distance_km=walk_km,
        total_distance_km=run_km + walk_km,
        average_speed_kmh=average_speed(record),
        calories_kcal=calories_burned(record, profile) if profile is not None else None,
    )
