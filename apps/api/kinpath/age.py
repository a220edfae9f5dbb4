"""Developmental age helpers: signed age in weeks, labels, and stages."""
from __future__ import annotations

import logging
import math
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple

from .schemas import Child, ChildWithAge

logger = logging.getLogger(__name__)

WEEK = timedelta(weeks=1)
FULL_TERM_WEEKS = 40
AVERAGE_WEEKS_PER_MONTH = 4.345

# Ordered first-match ladder: the first threshold the age falls below wins.
DEVELOPMENT_STAGES: List[Tuple[int, str]] = [
    (-26, "First Trimester"),
    (-12, "Second Trimester"),
    (0, "Third Trimester"),
    (4, "Newborn"),
    (12, "Early Infancy"),
    (26, "Infancy"),
    (52, "Late Infancy"),
    (104, "Toddler"),
    (156, "Early Preschool"),
]
FINAL_STAGE = "Preschool"


def resolve_now(now: Optional[datetime] = None) -> datetime:
    return now if now is not None else datetime.now()


def at_midnight(day: date, like: datetime) -> datetime:
    """Place a calendar date at midnight in the same timezone as ``like``."""
    return datetime.combine(day, time.min, tzinfo=like.tzinfo)


def has_reference_date(child: Child) -> bool:
    return bool((child.is_born and child.dob) or child.due_date)


def calculate_age_in_weeks(child: Child, now: Optional[datetime] = None) -> int:
    """Signed age in whole weeks.

    Born children count whole weeks since ``dob``. Unborn children count down to
    the due date as negative gestational weeks clamped to [-40, 0]: -40 is
    conception, 0 means the due date has arrived or passed. A child with no
    usable dates is treated as 0.
    """
    current = resolve_now(now)

    if child.is_born and child.dob:
        elapsed = current - at_midnight(child.dob, current)
        return math.floor(elapsed / WEEK)

    if child.due_date:
        remaining = at_midnight(child.due_date, current) - current
        weeks_until_due = math.ceil(remaining / WEEK)
        return -max(0, min(weeks_until_due, FULL_TERM_WEEKS))

    logger.debug("child %s has no dob or due_date; defaulting age to 0", child.id)
    return 0


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_age_label(age_in_weeks: int) -> str:
    if age_in_weeks < 0:
        return f"{FULL_TERM_WEEKS + age_in_weeks} weeks pregnant"

    if age_in_weeks == 0:
        return "Newborn"

    if age_in_weeks < 4:
        return f"{_plural(age_in_weeks, 'week')} old"

    months = math.floor(age_in_weeks / AVERAGE_WEEKS_PER_MONTH)
    if months < 24:
        return f"{_plural(months, 'month')} old"

    years = months // 12
    remaining_months = months % 12
    if remaining_months == 0:
        return f"{_plural(years, 'year')} old"
    return f"{_plural(years, 'year')}, {_plural(remaining_months, 'month')} old"


def get_development_stage(age_in_weeks: int) -> str:
    for threshold, stage in DEVELOPMENT_STAGES:
        if age_in_weeks < threshold:
            return stage
    return FINAL_STAGE


def enrich_child_with_age(child: Child, now: Optional[datetime] = None) -> ChildWithAge:
    """Recompute the derived age fields for a child snapshot."""

    age_in_weeks = calculate_age_in_weeks(child, now)
    return ChildWithAge(
        **child.model_dump(include=set(Child.model_fields)),
        age_in_weeks=age_in_weeks,
        age_label=format_age_label(age_in_weeks),
        age_known=has_reference_date(child),
        development_stage=get_development_stage(age_in_weeks),
    )
