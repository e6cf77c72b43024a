"""Distance and calorie estimates from a raw step count."""

from __future__ import annotations

from fitness_tracker.metrics.met import segment_calories

STRIDE_LENGTH_M = 0.762
WALKING_PACE_M_PER_MIN = 80.0
STEP_WALKING_MET = 3.0


def steps_to_distance_km(steps: int) -> float:
    """Distance walked assuming an average stride of 0.762 m."""
    return steps * STRIDE_LENGTH_M / 1000


def steps_to_calories_kcal(steps: int, weight_kg: float) -> float:
    """Calories for the steps, treated as walking at 80 m/min with MET 3.0."""
    walking_minutes = (steps * STRIDE_LENGTH_M) / WALKING_PACE_M_PER_MIN
    return segment_calories(STEP_WALKING_MET, weight_kg, walking_minutes)


def steps_goal_progress(steps: int, goal: int) -> float:
    """Fraction of the daily goal reached. Not capped at 1.0."""
    if goal <= 0:
        return 0.0
    return steps / goal
