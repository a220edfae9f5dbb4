"""Checklist scheduling: milestone dates, suggestions, and timeframe buckets."""
from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Set, Tuple, TypeVar

from pydantic import BaseModel

from .age import at_midnight, resolve_now
from .config import CONFIG
from .schemas import (
    Child,
    ChecklistItem,
    ChecklistItemType,
    GroupedItems,
    MilestoneTemplate,
    OffsetReference,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MilestoneSuggestion(BaseModel):
    template: MilestoneTemplate
    suggested_date: date


def coalesce(*values: Optional[T]) -> Optional[T]:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def to_iso_date_string(value: date) -> str:
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def _reference_date(child: Child, template: MilestoneTemplate) -> Optional[date]:
    # The fallback order differs per anchor and must not be swapped.
    if template.offset_reference == OffsetReference.DUE_DATE:
        return coalesce(child.due_date, child.dob)
    return coalesce(child.dob, child.due_date)


def calculate_milestone_date(child: Child, template: MilestoneTemplate) -> Optional[date]:
    """Calendar date for a template, or None when the child has no anchor date."""

    reference = _reference_date(child, template)
    if reference is None:
        return None
    return reference + timedelta(days=template.offset_weeks * 7)


def get_milestone_suggestions(
    child: Child,
    templates: Iterable[MilestoneTemplate],
    existing_keys: Set[str],
    now: Optional[datetime] = None,
    horizon_weeks: Optional[int] = None,
) -> List[MilestoneSuggestion]:
    """Templates worth suggesting, paired with their computed dates.

    Already-instantiated keys never come back. Past-dated templates stay
    visible until the parent acts on them; future ones appear once they fall
    within the horizon (26 weeks by default).
    """
    current = resolve_now(now)
    if horizon_weeks is None:
        horizon_weeks = CONFIG.suggestion_horizon_weeks
    cutoff = current + timedelta(weeks=horizon_weeks)

    suggestions: List[MilestoneSuggestion] = []
    for template in templates:
        if template.key in existing_keys:
            continue
        milestone_date = calculate_milestone_date(child, template)
        if milestone_date is None:
            logger.debug("no anchor date for template %s on child %s", template.key, child.id)
            continue
        if at_midnight(milestone_date, current) <= cutoff:
            suggestions.append(MilestoneSuggestion(template=template, suggested_date=milestone_date))
    return suggestions


def get_relevant_milestones(
    child: Child,
    templates: Iterable[MilestoneTemplate],
    existing_keys: Set[str],
    now: Optional[datetime] = None,
) -> List[MilestoneTemplate]:
    return [s.template for s in get_milestone_suggestions(child, templates, existing_keys, now=now)]


def existing_milestone_keys(items: Iterable[ChecklistItem], child_id: Optional[str] = None) -> Set[str]:
    return {
        item.milestone_key
        for item in items
        if item.milestone_key and (child_id is None or item.child_id == child_id)
    }


def build_checklist_item(
    child: Child,
    template: MilestoneTemplate,
    *,
    user_id: str,
    sort_order: int = 0,
) -> ChecklistItem:
    """Instantiate a template; suggested_date and due_date start out equal."""

    milestone_date = calculate_milestone_date(child, template)
    return ChecklistItem(
        child_id=child.id,
        user_id=user_id,
        title=template.title,
        description=template.description,
        item_type=ChecklistItemType.MILESTONE,
        milestone_key=template.key,
        suggested_date=milestone_date,
        due_date=milestone_date,
        sort_order=sort_order,
    )


def build_custom_item(
    *,
    child_id: str,
    user_id: str,
    title: str,
    description: Optional[str] = None,
    due_date: Optional[date] = None,
    sort_order: int = 0,
) -> ChecklistItem:
    title = title.strip()
    if not title:
        raise ValueError("title is required")
    return ChecklistItem(
        child_id=child_id,
        user_id=user_id,
        title=title,
        description=description,
        item_type=ChecklistItemType.CUSTOM,
        due_date=due_date,
        sort_order=sort_order,
    )


def display_date(item: ChecklistItem) -> Optional[date]:
    return coalesce(item.due_date, item.suggested_date)


def _date_sort_key(item: ChecklistItem) -> str:
    # ISO strings sort chronologically; undated items sort first.
    value = display_date(item)
    return value.isoformat() if value else ""


def _completed_sort_key(item: ChecklistItem) -> Tuple[bool, float]:
    # Compare instants, not text, so mixed UTC offsets order correctly.
    # Naive timestamps are read as local time; undated items sort last.
    if item.completed_at is None:
        return (False, 0.0)
    return (True, item.completed_at.timestamp())


def end_of_month(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def group_by_timeframe(items: Iterable[ChecklistItem], now: Optional[datetime] = None) -> GroupedItems:
    current = resolve_now(now)
    today = current.date()
    month_end = end_of_month(today)

    overdue: List[ChecklistItem] = []
    this_month: List[ChecklistItem] = []
    coming_up: List[ChecklistItem] = []
    completed: List[ChecklistItem] = []

    for item in items:
        if item.is_completed:
            completed.append(item)
            continue

        when = display_date(item)
        if when is None:
            coming_up.append(item)
        elif when < today:
            overdue.append(item)
        elif when <= month_end:
            this_month.append(item)
        else:
            coming_up.append(item)

    return GroupedItems(
        overdue=sorted(overdue, key=_date_sort_key),
        this_month=sorted(this_month, key=_date_sort_key),
        coming_up=sorted(coming_up, key=_date_sort_key),
        completed=sorted(completed, key=_completed_sort_key, reverse=True),
    )
