"""Step-count providers.

Reading a day's step count is an explicit async operation that yields one
`StepCountResult` per call: success with the count, or an unavailable/denied
status with a count of 0. There is no retry policy.

Providers:
- StoredStepCountProvider: reads the daily_step_counts table, gated by the
  HEALTH_STEPS_AUTHORIZED setting
- StaticStepCountProvider: fixed result, for tests and offline use
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import StrEnum
from typing import Protocol

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fitness_tracker.repositories.step_count_repository import StepCountRepository
from fitness_tracker.utils.timezone import now_local


class StepCountStatus(StrEnum):
    """Outcome of a step-count read."""

    SUCCESS = "success"
    UNAVAILABLE = "unavailable"
    DENIED = "denied"


@dataclass(frozen=True)
class StepCountResult:
    status: StepCountStatus
    steps: int = 0
    day: date | None = None

    @property
    def ok(self) -> bool:
        return self.status == StepCountStatus.SUCCESS


class StepCountProvider(Protocol):
    async def current_steps_today(self, day: date | None = None) -> StepCountResult:
        """Step total for `day`, or for the provider's own today when None."""
        ...


class StaticStepCountProvider:
    """Provider returning a preset result."""

    def __init__(self, result: StepCountResult):
        self._result = result

    @classmethod
    def with_steps(cls, steps: int, day: date | None = None) -> StaticStepCountProvider:
        return cls(StepCountResult(status=StepCountStatus.SUCCESS, steps=steps, day=day))

    async def current_steps_today(self, day: date | None = None) -> StepCountResult:
        if day is not None and self._result.day is None:
            return replace(self._result, day=day)
        return self._result


class StoredStepCountProvider:
    """Reads today's total from the locally stored health data.

    Args:
        session_factory: Callable returning a new SQLAlchemy session
        authorized: Whether the user granted step-count access
        clock: Returns the current local datetime; decides which day is "today"
            when the caller does not name one
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        authorized: bool,
        clock: Callable[[], datetime] = now_local,
    ):
        self._session_factory = session_factory
        self._authorized = authorized
        self._clock = clock

    def _read(self, day: date) -> int | None:
        session = self._session_factory()
        try:
            return StepCountRepository.get_for_day(session, day)
        finally:
            session.close()

    async def current_steps_today(self, day: date | None = None) -> StepCountResult:
        day = day or self._clock().date()
        if not self._authorized:
            logger.warning("Step count requested but health data access is not authorized")
            return StepCountResult(status=StepCountStatus.DENIED, day=day)

        try:
            steps = await asyncio.to_thread(self._read, day)
        except SQLAlchemyError as e:
            logger.warning(f"Step count read failed for {day.isoformat()}: {e}")
            return StepCountResult(status=StepCountStatus.UNAVAILABLE, day=day)

        if steps is None:
            logger.info(f"No step count recorded for {day.isoformat()}")
            return StepCountResult(status=StepCountStatus.UNAVAILABLE, day=day)
        return StepCountResult(status=StepCountStatus.SUCCESS, steps=steps, day=day)
