"""Weight history API endpoints.

Mutations accept an optional `profile_id`; when given, the profile weight is
resynced to the most recent measurement.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from fitness_tracker.api.dependencies import to_http_exception
from fitness_tracker.api.schemas import WeightCreateRequest, WeightUpdateRequest
from fitness_tracker.core.errors import RecordNotFoundError
from fitness_tracker.db.session import get_db
from fitness_tracker.models.records import WeightMeasurement
from fitness_tracker.repositories.weight_repository import WeightRepository
from fitness_tracker.services import weight_service

router = APIRouter(prefix="/weights", tags=["weights"])


@router.get("", response_model=list[WeightMeasurement])
def list_weights(db: Session = Depends(get_db)) -> list[WeightMeasurement]:
    """Weight history, newest first."""
    return sorted(WeightRepository.list_all(db), key=lambda m: m.date, reverse=True)


@router.post("", response_model=WeightMeasurement, status_code=201)
def add_weight(
    request: WeightCreateRequest,
    profile_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> WeightMeasurement:
    try:
        return weight_service.add_measurement(db, request.weight_kg, date=request.date, profile_id=profile_id)
    except RecordNotFoundError as e:
        raise to_http_exception(e) from e


@router.put("/{measurement_id}", response_model=WeightMeasurement)
def edit_weight(
    measurement_id: str,
    request: WeightUpdateRequest,
    profile_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> WeightMeasurement:
    try:
        return weight_service.edit_measurement(
            db, measurement_id, weight_kg=request.weight_kg, date=request.date, profile_id=profile_id
        )
    except RecordNotFoundError as e:
        raise to_http_exception(e) from e


@router.delete("/{measurement_id}", status_code=204)
def delete_weight(
    measurement_id: str,
    profile_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> Response:
    try:
        weight_service.delete_measurement(db, measurement_id, profile_id=profile_id)
    except RecordNotFoundError as e:
        raise to_http_exception(e) from e
    return Response(status_code=204)
