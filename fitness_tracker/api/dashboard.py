"""Today dashboard endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fitness_tracker.api.dependencies import get_step_provider
from fitness_tracker.api.schemas import TodaySummaryResponse
from fitness_tracker.db.session import get_db
from fitness_tracker.integrations.health.steps import StepCountProvider
from fitness_tracker.services.dashboard_service import build_today_summary

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/today", response_model=TodaySummaryResponse)
async def get_today(
    profile_id: str | None = Query(default=None, description="Active profile; default profile when omitted"),
    db: Session = Depends(get_db),
    provider: StepCountProvider = Depends(get_step_provider),
) -> TodaySummaryResponse:
    """Today's workouts, totals and step-based estimates."""
    summary = await build_today_summary(db, profile_id, provider)
    return TodaySummaryResponse.from_summary(summary)
