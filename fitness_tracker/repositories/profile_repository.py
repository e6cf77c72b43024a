"""Repository for the user profile.

At most one profile is stored. Callers always pass the profile id
explicitly; there is no implicit "first profile" lookup.
"""

from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from fitness_tracker.config.settings import settings
from fitness_tracker.core.errors import ProfileExistsError, RecordNotFoundError
from fitness_tracker.db.models import UserProfile as UserProfileRow
from fitness_tracker.models.records import Gender, UserProfile


def _to_profile(row: UserProfileRow) -> UserProfile:
    return UserProfile(
        id=row.id,
        weight_kg=row.weight_kg,
        height_cm=row.height_cm,
        gender=Gender(row.gender),
        daily_steps_goal=row.daily_steps_goal,
    )


def default_profile(profile_id: str | None = None) -> UserProfile:
    """Transient profile built from configured defaults. Never stored."""
    values = {
        "weight_kg": settings.default_weight_kg,
        "height_cm": settings.default_height_cm,
        "gender": Gender.MALE,
        "daily_steps_goal": settings.default_daily_steps_goal,
    }
    if profile_id:
        values["id"] = profile_id
    return UserProfile(**values)


class ProfileRepository:
    """Repository for the user profile."""

    @staticmethod
    def _get_row(session: Session, profile_id: str) -> UserProfileRow:
        row = session.get(UserProfileRow, profile_id)
        if row is None:
            raise RecordNotFoundError("Profile", profile_id)
        return row

    @staticmethod
    def create(session: Session, profile: UserProfile) -> UserProfile:
        """Store the profile.

        Raises:
            ProfileExistsError: If a profile is already stored
        """
        existing = session.execute(select(UserProfileRow.id).limit(1)).scalar_one_or_none()
        if existing is not None:
            raise ProfileExistsError(f"A profile already exists: {existing}")

        session.add(
            UserProfileRow(
                id=profile.id,
                weight_kg=profile.weight_kg,
                height_cm=profile.height_cm,
                gender=profile.gender.value,
                daily_steps_goal=profile.daily_steps_goal,
            )
        )
        session.commit()
        logger.info(f"Profile created: id={profile.id}")
        return profile

    @staticmethod
    def get(session: Session, profile_id: str) -> UserProfile:
        """Load a profile.

        Raises:
            RecordNotFoundError: If no profile has this id
        """
        return _to_profile(ProfileRepository._get_row(session, profile_id))

    @staticmethod
    def get_or_default(session: Session, profile_id: str | None) -> UserProfile:
        """Load a profile, falling back to a transient default when missing."""
        if profile_id:
            row = session.get(UserProfileRow, profile_id)
            if row is not None:
                return _to_profile(row)
            logger.debug(f"Profile {profile_id} not found, using default profile")
        return default_profile(profile_id)

    @staticmethod
    def update(session: Session, profile: UserProfile) -> UserProfile:
        """Overwrite the stored profile with the given values.

        Raises:
            RecordNotFoundError: If no profile has this id
        """
        row = ProfileRepository._get_row(session, profile.id)
        row.weight_kg = profile.weight_kg
        row.height_cm = profile.height_cm
        row.gender = profile.gender.value
        row.daily_steps_goal = profile.daily_steps_goal
        session.commit()
        logger.info(f"Profile updated: id={profile.id}")
        return _to_profile(row)

    @staticmethod
    def delete(session: Session, profile_id: str) -> None:
        """Remove a profile.

        Raises:
            RecordNotFoundError: If no profile has this id
        """
        session.delete(ProfileRepository._get_row(session, profile_id))
        session.commit()
        logger.info(f"Profile deleted: id={profile_id}")
