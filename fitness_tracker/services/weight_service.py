"""Weight history operations that keep the profile weight in step.

After a measurement is added, edited or removed, the profile passed in (by
id) takes the weight of the most recent remaining measurement. With an empty
history the profile keeps its current weight.
"""

from __future__ import annotations

from datetime import datetime

from loguru import logger
from sqlalchemy.orm import Session

from fitness_tracker.models.records import UserProfile, WeightMeasurement
from fitness_tracker.repositories.profile_repository import ProfileRepository
from fitness_tracker.repositories.weight_repository import WeightRepository


def sync_profile_weight(session: Session, profile_id: str) -> UserProfile | None:
    """Set the profile weight to the latest measurement.

    Returns:
        The updated profile, or None if there is nothing to sync from
    """
    latest = WeightRepository.latest(session)
    if latest is None:
        logger.debug("Weight history empty, profile weight left unchanged")
        return None

    profile = ProfileRepository.get(session, profile_id)
    if profile.weight_kg == latest.weight_kg:
        return profile
    logger.info(f"Syncing profile {profile_id} weight {profile.weight_kg} -> {latest.weight_kg}")
    return ProfileRepository.update(session, profile.model_copy(update={"weight_kg": latest.weight_kg}))


def _require_profile(session: Session, profile_id: str | None) -> None:
    """Fail before any write when the profile to resync does not exist."""
    if profile_id:
        ProfileRepository.get(session, profile_id)


def add_measurement(
    session: Session,
    weight_kg: float,
    date: datetime | None = None,
    profile_id: str | None = None,
) -> WeightMeasurement:
    """Append a measurement and optionally resync the profile.

    Raises:
        RecordNotFoundError: If profile_id names no stored profile
    """
    _require_profile(session, profile_id)
    measurement = WeightMeasurement(weight_kg=weight_kg) if date is None else WeightMeasurement(weight_kg=weight_kg, date=date)
    WeightRepository.create(session, measurement)
    if profile_id:
        sync_profile_weight(session, profile_id)
    return measurement


def edit_measurement(
    session: Session,
    measurement_id: str,
    weight_kg: float | None = None,
    date: datetime | None = None,
    profile_id: str | None = None,
) -> WeightMeasurement:
    """Edit a measurement in place and optionally resync the profile.

    Raises:
        RecordNotFoundError: If the measurement or the named profile does not exist
    """
    _require_profile(session, profile_id)
    current = WeightRepository.get(session, measurement_id)
    updated = WeightMeasurement(
        id=current.id,
        date=date if date is not None else current.date,
        weight_kg=weight_kg if weight_kg is not None else current.weight_kg,
    )
    WeightRepository.update(session, updated)
    if profile_id:
        sync_profile_weight(session, profile_id)
    return updated


def delete_measurement(session: Session, measurement_id: str, profile_id: str | None = None) -> None:
    """Remove a measurement and optionally resync the profile.

    Raises:
        RecordNotFoundError: If the measurement or the named profile does not exist
    """
    _require_profile(session, profile_id)
    WeightRepository.delete(session, measurement_id)
    if profile_id:
        sync_profile_weight(session, profile_id)
