"""Aggregation over collections of workout records."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from fitness_tracker.metrics.workout_metrics import calories_burned, total_distance
from fitness_tracker.models.records import UserProfile, WorkoutRecord
from fitness_tracker.utils.timezone import to_utc


def todays_workouts(records: Iterable[WorkoutRecord], today: date | datetime) -> list[WorkoutRecord]:
    """Return the records that fall on the given calendar day.

    Args:
        records: Workouts in any order
        today: Either a calendar date, matched against each record's date
            component, or the start of the local day as a datetime, in which
            case records in [today, today + 1 day) match. A naive datetime is
            taken as UTC

    Returns:
        Matching records in input order
    """
    if isinstance(today, datetime):
        today = to_utc(today)
        day_end = today + timedelta(days=1)
        return [r for r in records if today <= r.date < day_end]
    return [r for r in records if r.date.date() == today]


def sum_distance(records: Iterable[WorkoutRecord]) -> float:
    """Total distance in km across all records."""
    return sum((total_distance(r) for r in records), 0.0)


def sum_calories(records: Iterable[WorkoutRecord], profile: UserProfile) -> float:
    """Total estimated kcal across all records for one profile."""
    return sum((calories_burned(r, profile) for r in records), 0.0)


def sort_by_date(records: Iterable[WorkoutRecord], descending: bool = True) -> list[WorkoutRecord]:
    """Order records by date, newest first by default."""
    return sorted(records, key=lambda r: r.date, reverse=descending)
