from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ..age import calculate_age_in_weeks
from ..feed import rank_resources
from ..schemas import Child, ResourceWithMeta, UserPreferences

router = APIRouter(prefix="/api/v1", tags=["feed"])
logger = logging.getLogger(__name__)


class RankFeedPayload(BaseModel):
    child: Child
    resources: List[ResourceWithMeta]
    preferences: UserPreferences = Field(default_factory=UserPreferences)
    now: Optional[datetime] = None


@router.post("/feed/rank", response_model=List[ResourceWithMeta])
async def rank_feed_endpoint(payload: RankFeedPayload) -> List[ResourceWithMeta]:
    """Personalized feed order. Text search does not go through here."""

    child = payload.child
    logger.info(
        "child-scoped request",
        extra={"method": "POST", "path": "/api/v1/feed/rank", "child_id": child.id},
    )
    age_in_weeks = calculate_age_in_weeks(child, payload.now)
    return rank_resources(payload.resources, payload.preferences, age_in_weeks)
