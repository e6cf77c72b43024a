"""Repository for body-weight history."""

from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from fitness_tracker.core.errors import RecordNotFoundError
from fitness_tracker.db.models import WeightMeasurement as WeightMeasurementRow
from fitness_tracker.models.records import WeightMeasurement


def _to_measurement(row: WeightMeasurementRow) -> WeightMeasurement:
    return WeightMeasurement(id=row.id, date=row.date, weight_kg=row.weight_kg)


class WeightRepository:
    """Repository for weight measurements."""

    @staticmethod
    def _get_row(session: Session, measurement_id: str) -> WeightMeasurementRow:
        row = session.get(WeightMeasurementRow, measurement_id)
        if row is None:
            raise RecordNotFoundError("Weight measurement", measurement_id)
        return row

    @staticmethod
    def create(session: Session, measurement: WeightMeasurement) -> WeightMeasurement:
        session.add(WeightMeasurementRow(id=measurement.id, date=measurement.date, weight_kg=measurement.weight_kg))
        session.commit()
        logger.info(f"Weight measurement created: id={measurement.id} weight_kg={measurement.weight_kg}")
        return measurement

    @staticmethod
    def get(session: Session, measurement_id: str) -> WeightMeasurement:
        return _to_measurement(WeightRepository._get_row(session, measurement_id))

    @staticmethod
    def list_all(session: Session) -> list[WeightMeasurement]:
        """Load every measurement, unordered."""
        rows = session.execute(select(WeightMeasurementRow)).scalars().all()
        return [_to_measurement(row) for row in rows]

    @staticmethod
    def latest(session: Session) -> WeightMeasurement | None:
        """Most recent measurement by date, or None when the history is empty."""
        row = session.execute(
            select(WeightMeasurementRow).order_by(WeightMeasurementRow.date.desc()).limit(1)
        ).scalar_one_or_none()
        return _to_measurement(row) if row is not None else None

    @staticmethod
    def update(session: Session, measurement: WeightMeasurement) -> WeightMeasurement:
        """Edit a measurement in place (date and weight)."""
        row = WeightRepository._get_row(session, measurement.id)
        row.date = measurement.date
        row.weight_kg = measurement.weight_kg
        session.commit()
        logger.info(f"Weight measurement updated: id={measurement.id}")
        return _to_measurement(row)

    @staticmethod
    def delete(session: Session, measurement_id: str) -> None:
        session.delete(WeightRepository._get_row(session, measurement_id))
        session.commit()
        logger.info(f"Weight measurement deleted: id={measurement_id}")
