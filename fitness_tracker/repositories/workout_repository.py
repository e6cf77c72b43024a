"""Repository for treadmill workout storage.

Maps `TreadmillWorkout` rows to `WorkoutRecord` values. Reads return rows
unordered; ordering is a presentation concern.
"""

from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from fitness_tracker.core.errors import RecordNotFoundError
from fitness_tracker.db.models import TreadmillWorkout
from fitness_tracker.models.records import WorkoutRecord
from fitness_tracker.workouts.validation import WorkoutInput


def _to_record(row: TreadmillWorkout) -> WorkoutRecord:
    return WorkoutRecord(
        id=row.id,
        date=row.date,
        total_duration_minutes=row.total_duration_minutes,
        running_duration_minutes=row.running_duration_minutes,
        running_speed_kmh=row.running_speed_kmh,
        walking_speed_kmh=row.walking_speed_kmh,
    )


class WorkoutRepository:
    """Repository for treadmill workouts."""

    @staticmethod
    def _get_row(session: Session, workout_id: str) -> TreadmillWorkout:
        row = session.get(TreadmillWorkout, workout_id)
        if row is None:
            raise RecordNotFoundError("Workout", workout_id)
        return row

    @staticmethod
    def create(session: Session, record: WorkoutRecord) -> WorkoutRecord:
        """Store a new workout.

        Args:
            session: Database session
            record: Workout with its id and date already assigned

        Returns:
            The stored workout
        """
        session.add(
            TreadmillWorkout(
                id=record.id,
                date=record.date,
                total_duration_minutes=record.total_duration_minutes,
                running_duration_minutes=record.running_duration_minutes,
                running_speed_kmh=record.running_speed_kmh,
                walking_speed_kmh=record.walking_speed_kmh,
            )
        )
        session.commit()
        logger.info(f"Workout created: id={record.id}")
        return record

    @staticmethod
    def get(session: Session, workout_id: str) -> WorkoutRecord:
        """Load one workout.

        Raises:
            RecordNotFoundError: If no workout has this id
        """
        return _to_record(WorkoutRepository._get_row(session, workout_id))

    @staticmethod
    def list_all(session: Session) -> list[WorkoutRecord]:
        """Load every stored workout, unordered."""
        rows = session.execute(select(TreadmillWorkout)).scalars().all()
        return [_to_record(row) for row in rows]

    @staticmethod
    def replace(session: Session, workout_id: str, data: WorkoutInput) -> WorkoutRecord:
        """Replace the editable fields of a workout, keeping its id and date.

        Raises:
            RecordNotFoundError: If no workout has this id
        """
        row = WorkoutRepository._get_row(session, workout_id)
        row.total_duration_minutes = data.total_duration_minutes
        row.running_duration_minutes = data.running_duration_minutes
        row.running_speed_kmh = data.running_speed_kmh
        row.walking_speed_kmh = data.walking_speed_kmh
        session.commit()
        logger.info(f"Workout replaced: id={workout_id}")
        return _to_record(row)

    @staticmethod
    def delete(session: Session, workout_id: str) -> None:
        """Remove a workout.

        Raises:
            RecordNotFoundError: If no workout has this id
        """
        row = WorkoutRepository._get_row(session, workout_id)
        session.delete(row)
        session.commit()
        logger.info(f"Workout deleted: id={workout_id}")
