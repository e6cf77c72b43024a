"""Repository for daily step totals imported from the health store."""

from __future__ import annotations

from datetime import date, datetime, timezone

from loguru import logger
from sqlalchemy.orm import Session

from fitness_tracker.db.models import DailyStepCount


class StepCountRepository:
    """Repository for daily step counts, keyed by local calendar day."""

    @staticmethod
    def record(session: Session, day: date, steps: int) -> None:
        """Insert or overwrite the step total for a day."""
        row = session.get(DailyStepCount, day)
        if row is None:
            session.add(DailyStepCount(day=day, steps=steps, recorded_at=datetime.now(timezone.utc)))
        else:
            row.steps = steps
            row.recorded_at = datetime.now(timezone.utc)
        session.commit()
        logger.debug(f"Recorded {steps} steps for {day.isoformat()}")

    @staticmethod
    def get_for_day(session: Session, day: date) -> int | None:
        """Step total for the day, or None when nothing was recorded."""
        row = session.get(DailyStepCount, day)
        return row.steps if row is not None else None
