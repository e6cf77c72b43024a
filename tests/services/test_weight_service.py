"""Tests for weight history operations and profile weight resync."""

from datetime import UTC, datetime

import pytest

from fitness_tracker.core.errors import RecordNotFoundError
from fitness_tracker.models.records import UserProfile
from fitness_tracker.repositories.profile_repository import ProfileRepository
from fitness_tracker.repositories.weight_repository import WeightRepository
from fitness_tracker.services import weight_service


@pytest.fixture
def profile(db_session) -> UserProfile:
    return ProfileRepository.create(db_session, UserProfile(weight_kg=80.0))


def test_add_resyncs_profile(db_session, profile):
    weight_service.add_measurement(db_session, 78.5, date=datetime(2024, 1, 10, tzinfo=UTC), profile_id=profile.id)
    assert ProfileRepository.get(db_session, profile.id).weight_kg == 78.5


def test_add_older_measurement_keeps_latest(db_session, profile):
    weight_service.add_measurement(db_session, 78.0, date=datetime(2024, 1, 10, tzinfo=UTC), profile_id=profile.id)
    weight_service.add_measurement(db_session, 82.0, date=datetime(2023, 12, 1, tzinfo=UTC), profile_id=profile.id)
    assert ProfileRepository.get(db_session, profile.id).weight_kg == 78.0


def test_add_without_profile_leaves_profile_alone(db_session, profile):
    weight_service.add_measurement(db_session, 60.0)
    assert ProfileRepository.get(db_session, profile.id).weight_kg == 80.0


def test_delete_latest_falls_back_to_previous(db_session, profile):
    weight_service.add_measurement(db_session, 79.0, date=datetime(2024, 1, 1, tzinfo=UTC), profile_id=profile.id)
    newest = weight_service.add_measurement(db_session, 77.0, date=datetime(2024, 1, 8, tzinfo=UTC), profile_id=profile.id)

    weight_service.delete_measurement(db_session, newest.id, profile_id=profile.id)

    assert ProfileRepository.get(db_session, profile.id).weight_kg == 79.0


def test_delete_last_measurement_keeps_profile_weight(db_session, profile):
    only = weight_service.add_measurement(db_session, 76.0, date=datetime(2024, 1, 1, tzinfo=UTC), profile_id=profile.id)
    weight_service.delete_measurement(db_session, only.id, profile_id=profile.id)
    assert WeightRepository.list_all(db_session) == []
    assert ProfileRepository.get(db_session, profile.id).weight_kg == 76.0


def test_edit_in_place(db_session, profile):
    entry = weight_service.add_measurement(db_session, 76.0, date=datetime(2024, 1, 1, tzinfo=UTC), profile_id=profile.id)
    edited = weight_service.edit_measurement(db_session, entry.id, weight_kg=75.2, profile_id=profile.id)
    assert edited.id == entry.id
    assert edited.date == entry.date
    assert WeightRepository.get(db_session, entry.id).weight_kg == 75.2
    assert ProfileRepository.get(db_session, profile.id).weight_kg == 75.2


def test_delete_missing_measurement(db_session):
    with pytest.raises(RecordNotFoundError):
        weight_service.delete_measurement(db_session, "missing")


def test_unknown_profile_rejects_before_any_write(db_session, profile):
    with pytest.raises(RecordNotFoundError):
        weight_service.add_measurement(db_session, 70.0, profile_id="unknown")
    assert WeightRepository.list_all(db_session) == []

    entry = weight_service.add_measurement(db_session, 76.0, date=datetime(2024, 1, 1, tzinfo=UTC))
    with pytest.raises(RecordNotFoundError):
        weight_service.edit_measurement(db_session, entry.id, weight_kg=70.0, profile_id="unknown")
    with pytest.raises(RecordNotFoundError):
        weight_service.delete_measurement(db_session, entry.id, profile_id="unknown")
    assert WeightRepository.get(db_session, entry.id).weight_kg == 76.0
