from __future__ import annotations

from fastapi import HTTPException, status
from loguru import logger

from fitness_tracker.config.settings import settings
from fitness_tracker.core.errors import ProfileExistsError, RecordNotFoundError, WorkoutValidationError
from fitness_tracker.db.session import get_session_factory
from fitness_tracker.integrations.health.steps import StepCountProvider, StoredStepCountProvider


def get_step_provider() -> StepCountProvider:
    """Step-count provider for request handlers. Overridden in tests."""
    return StoredStepCountProvider(get_session_factory(), authorized=settings.health_steps_authorized)


def to_http_exception(error: Exception) -> HTTPException:
    """Translate a domain error into the matching HTTP error."""
    if isinstance(error, WorkoutValidationError):
        logger.info(f"[API] Rejected workout input: {error.errors}")
        return HTTPException(status_code=422, detail=error.errors)
    if isinstance(error, RecordNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ProfileExistsError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    logger.error(f"[API] Unexpected error: {error}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
