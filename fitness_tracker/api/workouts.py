"""Workout API endpoints.

List, add, edit (full replacement) and delete treadmill workouts.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response
from loguru import logger
from sqlalchemy.orm import Session

from fitness_tracker.api.dependencies import to_http_exception
from fitness_tracker.api.schemas import WorkoutResponse
from fitness_tracker.core.errors import RecordNotFoundError, WorkoutValidationError
from fitness_tracker.db.session import get_db
from fitness_tracker.metrics.aggregation import sort_by_date
from fitness_tracker.models.records import UserProfile, WorkoutRecord
from fitness_tracker.repositories.profile_repository import ProfileRepository
from fitness_tracker.repositories.workout_repository import WorkoutRepository
from fitness_tracker.workouts.validation import WorkoutInput, validate_workout_input

router = APIRouter(prefix="/workouts", tags=["workouts"])


def _profile_for(db: Session, profile_id: str | None) -> UserProfile | None:
    return ProfileRepository.get_or_default(db, profile_id) if profile_id else None


@router.get("", response_model=list[WorkoutResponse])
def list_workouts(
    profile_id: str | None = Query(default=None, description="Profile used for calorie estimates"),
    db: Session = Depends(get_db),
) -> list[WorkoutResponse]:
    """List workouts, newest first."""
    profile = _profile_for(db, profile_id)
    records = sort_by_date(WorkoutRepository.list_all(db))
    logger.info(f"[API] GET /workouts returned {len(records)} workouts")
    return [WorkoutResponse.from_record(r, profile) for r in records]


@router.post("", response_model=WorkoutResponse, status_code=201)
def create_workout(
    request: WorkoutInput,
    profile_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> WorkoutResponse:
    """Log a new workout. Rejects running duration above total duration."""
    try:
        data = validate_workout_input(request)
    except WorkoutValidationError as e:
        raise to_http_exception(e) from e

    record = WorkoutRepository.create(db, WorkoutRecord(**data.model_dump()))
    return WorkoutResponse.from_record(record, _profile_for(db, profile_id))


@router.get("/{workout_id}", response_model=WorkoutResponse)
def get_workout(
    workout_id: str,
    profile_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> WorkoutResponse:
    try:
        record = WorkoutRepository.get(db, workout_id)
    except RecordNotFoundError as e:
        raise to_http_exception(e) from e
    return WorkoutResponse.from_record(record, _profile_for(db, profile_id))


@router.put("/{workout_id}", response_model=WorkoutResponse)
def replace_workout(
    workout_id: str,
    request: WorkoutInput,
    profile_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> WorkoutResponse:
    """Replace a workout's values. Its id and date are kept."""
    try:
        data = validate_workout_input(request)
        record = WorkoutRepository.replace(db, workout_id, data)
    except (WorkoutValidationError, RecordNotFoundError) as e:
        raise to_http_exception(e) from e
    return WorkoutResponse.from_record(record, _profile_for(db, profile_id))


@router.delete("/{workout_id}", status_code=204)
def delete_workout(workout_id: str, db: Session = Depends(get_db)) -> Response:
    try:
        WorkoutRepository.delete(db, workout_id)
    except RecordNotFoundError as e:
        raise to_http_exception(e) from e
    return Response(status_code=204)
