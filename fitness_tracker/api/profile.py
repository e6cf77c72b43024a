"""Profile API endpoints.

A single profile is stored; every call names it by id.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from loguru import logger
from sqlalchemy.orm import Session

from fitness_tracker.api.dependencies import to_http_exception
from fitness_tracker.api.schemas import ProfileRequest
from fitness_tracker.core.errors import ProfileExistsError, RecordNotFoundError
from fitness_tracker.db.session import get_db
from fitness_tracker.models.records import UserProfile
from fitness_tracker.repositories.profile_repository import ProfileRepository, default_profile

router = APIRouter(prefix="/profiles", tags=["profile"])


@router.get("/default", response_model=UserProfile)
def get_default_profile() -> UserProfile:
    """Transient default profile, used until the user saves their own."""
    return default_profile()


@router.post("", response_model=UserProfile, status_code=201)
def create_profile(request: ProfileRequest, db: Session = Depends(get_db)) -> UserProfile:
    try:
        profile = ProfileRepository.create(db, UserProfile(**request.model_dump()))
    except ProfileExistsError as e:
        raise to_http_exception(e) from e
    logger.info(f"[API] Profile created id={profile.id}")
    return profile


@router.get("/{profile_id}", response_model=UserProfile)
def get_profile(profile_id: str, db: Session = Depends(get_db)) -> UserProfile:
    try:
        return ProfileRepository.get(db, profile_id)
    except RecordNotFoundError as e:
        raise to_http_exception(e) from e


@router.put("/{profile_id}", response_model=UserProfile)
def update_profile(profile_id: str, request: ProfileRequest, db: Session = Depends(get_db)) -> UserProfile:
    try:
        return ProfileRepository.update(db, UserProfile(id=profile_id, **request.model_dump()))
    except RecordNotFoundError as e:
        raise to_http_exception(e) from e


@router.delete("/{profile_id}", status_code=204)
def delete_profile(profile_id: str, db: Session = Depends(get_db)) -> Response:
    try:
        ProfileRepository.delete(db, profile_id)
    except RecordNotFoundError as e:
        raise to_http_exception(e) from e
    return Response(status_code=204)
