from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..age import enrich_child_with_age
from ..development import get_development_summary
from ..pregnancy import (
    BabySizeComparison,
    DueDateCountdown,
    MaternalChange,
    PlanningTip,
    get_baby_size_comparison,
    get_due_date_countdown,
    get_maternal_changes,
    get_planning_tips,
)
from ..schemas import Child, ChildWithAge, DevelopmentSummary

router = APIRouter(prefix="/api/v1", tags=["dashboard"])
logger = logging.getLogger(__name__)


class ChildSnapshotPayload(BaseModel):
    child: Child
    now: Optional[datetime] = Field(default=None, description="Pin the clock; defaults to server time")


class DevelopmentResponse(BaseModel):
    child: ChildWithAge
    summary: DevelopmentSummary


class PregnancyResponse(BaseModel):
    countdown: DueDateCountdown
    size: Optional[BabySizeComparison] = None
    maternal_change: Optional[MaternalChange] = None
    planning_tips: List[PlanningTip] = Field(default_factory=list)


def _log_child_request(path: str, child: Child) -> None:
    logger.info(
        "child-scoped request",
        extra={"method": "POST", "path": path, "child_id": child.id},
    )


@router.post("/children/age", response_model=ChildWithAge)
async def child_age_endpoint(payload: ChildSnapshotPayload) -> ChildWithAge:
    _log_child_request("/api/v1/children/age", payload.child)
    return enrich_child_with_age(payload.child, payload.now)


@router.post("/development/summary", response_model=DevelopmentResponse)
async def development_summary_endpoint(payload: ChildSnapshotPayload) -> DevelopmentResponse:
    """Current and upcoming milestones plus this week's tip for the dashboard."""

    _log_child_request("/api/v1/development/summary", payload.child)
    child = enrich_child_with_age(payload.child, payload.now)
    return DevelopmentResponse(child=child, summary=get_development_summary(child.age_in_weeks))


@router.post("/pregnancy/countdown", response_model=PregnancyResponse)
async def pregnancy_countdown_endpoint(payload: ChildSnapshotPayload) -> PregnancyResponse:
    _log_child_request("/api/v1/pregnancy/countdown", payload.child)
    countdown = get_due_date_countdown(payload.child, payload.now)
    if countdown is None:
        raise HTTPException(status_code=404, detail="No active pregnancy for this child.")
    week = countdown.gestational_week
    return PregnancyResponse(
        countdown=countdown,
        size=get_baby_size_comparison(week),
        maternal_change=get_maternal_changes(week),
        planning_tips=get_planning_tips(week),
    )
