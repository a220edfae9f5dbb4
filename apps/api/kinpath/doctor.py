"""Questions a family wants to raise at the next pediatric or prenatal visit."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DoctorItemPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


PRIORITY_ORDER = {
    DoctorItemPriority.HIGH: 0,
    DoctorItemPriority.NORMAL: 1,
    DoctorItemPriority.LOW: 2,
}


class DoctorDiscussionItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    title: str
    notes: Optional[str] = None
    priority: DoctorItemPriority = DoctorItemPriority.NORMAL
    is_discussed: bool = False
    discussed_at: Optional[datetime] = None
    doctor_response: Optional[str] = None
    sort_order: int = 0
    created_at: datetime
    updated_at: datetime
    child_ids: List[str] = Field(default_factory=list)


class DoctorItemGroups(BaseModel):
    to_discuss: List[DoctorDiscussionItem]
    discussed: List[DoctorDiscussionItem]


def _last_touched(item: DoctorDiscussionItem) -> float:
    return (item.discussed_at or item.updated_at).timestamp()


def group_doctor_items(items: Iterable[DoctorDiscussionItem]) -> DoctorItemGroups:
    to_discuss: List[DoctorDiscussionItem] = []
    discussed: List[DoctorDiscussionItem] = []
    for item in items:
        if item.is_discussed:
            discussed.append(item)
        else:
            to_discuss.append(item)

    return DoctorItemGroups(
        to_discuss=sorted(to_discuss, key=lambda item: PRIORITY_ORDER[item.priority]),
        discussed=sorted(discussed, key=_last_touched, reverse=True),
    )
