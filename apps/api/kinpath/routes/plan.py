from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..catalogs.milestone_templates import MILESTONE_TEMPLATES
from ..checklist import (
    MilestoneSuggestion,
    build_checklist_item,
    existing_milestone_keys,
    get_milestone_suggestions,
    group_by_timeframe,
)
from ..doctor import DoctorDiscussionItem, DoctorItemGroups, group_doctor_items
from ..schemas import Child, ChecklistItem, GroupedItems

router = APIRouter(prefix="/api/v1", tags=["plan"])
logger = logging.getLogger(__name__)

TEMPLATES_BY_KEY = {template.key: template for template in MILESTONE_TEMPLATES}


class SuggestionsPayload(BaseModel):
    child: Child
    items: List[ChecklistItem] = Field(default_factory=list, description="The child's current checklist")
    now: Optional[datetime] = None


class AddMilestonePayload(BaseModel):
    child: Child
    template_key: str
    user_id: str
    items: List[ChecklistItem] = Field(default_factory=list)


class GroupItemsPayload(BaseModel):
    items: List[ChecklistItem]
    now: Optional[datetime] = None


class GroupDoctorItemsPayload(BaseModel):
    items: List[DoctorDiscussionItem]


@router.post("/plan/suggestions", response_model=List[MilestoneSuggestion])
async def milestone_suggestions_endpoint(payload: SuggestionsPayload) -> List[MilestoneSuggestion]:
    child = payload.child
    logger.info(
        "child-scoped request",
        extra={"method": "POST", "path": "/api/v1/plan/suggestions", "child_id": child.id},
    )
    existing = existing_milestone_keys(payload.items, child_id=child.id)
    return get_milestone_suggestions(child, MILESTONE_TEMPLATES, existing, now=payload.now)


@router.post("/plan/items", response_model=ChecklistItem)
async def add_milestone_item_endpoint(payload: AddMilestonePayload) -> ChecklistItem:
    child = payload.child
    logger.info(
        "child-scoped request",
        extra={"method": "POST", "path": "/api/v1/plan/items", "child_id": child.id},
    )
    template = TEMPLATES_BY_KEY.get(payload.template_key)
    if template is None:
        raise HTTPException(status_code=404, detail="Milestone template not found")
    if template.key in existing_milestone_keys(payload.items, child_id=child.id):
        raise HTTPException(status_code=409, detail="Milestone is already on this checklist")
    return build_checklist_item(
        child,
        template,
        user_id=payload.user_id,
        sort_order=len(payload.items),
    )


@router.post("/plan/groups", response_model=GroupedItems)
async def group_items_endpoint(payload: GroupItemsPayload) -> GroupedItems:
    return group_by_timeframe(payload.items, now=payload.now)


@router.post("/doctor/groups", response_model=DoctorItemGroups)
async def group_doctor_items_endpoint(payload: GroupDoctorItemsPayload) -> DoctorItemGroups:
    return group_doctor_items(payload.items)
