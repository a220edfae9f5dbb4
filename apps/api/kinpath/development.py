"""Match developmental milestones and postnatal tips to a child's age."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .catalogs.development import DEVELOPMENTAL_MILESTONES
from .catalogs.postnatal_tips import POSTNATAL_WEEKLY_TIPS
from .config import CONFIG
from .schemas import DevelopmentalMilestone, DevelopmentSummary, PostnatalTip

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a static catalog breaks its window invariants."""


def validate_milestone_windows(milestones: Sequence[DevelopmentalMilestone]) -> None:
    for milestone in milestones:
        if milestone.min_weeks > milestone.max_weeks:
            raise CatalogError(
                f"milestone {milestone.id} has min_weeks {milestone.min_weeks}"
                f" > max_weeks {milestone.max_weeks}"
            )


def validate_tip_windows(tips: Sequence[PostnatalTip]) -> None:
    """Tip windows must be well-formed and must not overlap; gaps only warn."""

    ordered = sorted(tips, key=lambda tip: tip.min_weeks)
    previous: Optional[PostnatalTip] = None
    for tip in ordered:
        if tip.min_weeks > tip.max_weeks:
            raise CatalogError(f"tip window [{tip.min_weeks}, {tip.max_weeks}] is inverted")
        if previous is not None:
            if tip.min_weeks <= previous.max_weeks:
                raise CatalogError(
                    f"tip window [{tip.min_weeks}, {tip.max_weeks}] overlaps"
                    f" [{previous.min_weeks}, {previous.max_weeks}]"
                )
            if tip.min_weeks > previous.max_weeks + 1:
                logger.warning(
                    "postnatal tips have a gap between week %s and week %s",
                    previous.max_weeks,
                    tip.min_weeks,
                )
        previous = tip


if CONFIG.validate_catalogs:
    validate_milestone_windows(DEVELOPMENTAL_MILESTONES)
    validate_tip_windows(POSTNATAL_WEEKLY_TIPS)


def get_milestones_for_age(
    age_in_weeks: int,
    milestones: Sequence[DevelopmentalMilestone] = DEVELOPMENTAL_MILESTONES,
) -> List[DevelopmentalMilestone]:
    """Every milestone whose inclusive window contains the age, in catalog order."""

    return [m for m in milestones if m.min_weeks <= age_in_weeks <= m.max_weeks]


def get_upcoming_milestones(
    age_in_weeks: int,
    limit: Optional[int] = None,
    milestones: Sequence[DevelopmentalMilestone] = DEVELOPMENTAL_MILESTONES,
) -> List[DevelopmentalMilestone]:
    if limit is None:
        limit = CONFIG.upcoming_milestone_limit
    upcoming = [m for m in milestones if m.min_weeks > age_in_weeks]
    # sorted() is stable, so ties keep catalog order.
    upcoming = sorted(upcoming, key=lambda m: m.min_weeks)
    return upcoming[:limit]


def get_postnatal_tip(
    age_in_weeks: int,
    tips: Sequence[PostnatalTip] = POSTNATAL_WEEKLY_TIPS,
) -> Optional[PostnatalTip]:
    return next(
        (tip for tip in tips if tip.min_weeks <= age_in_weeks <= tip.max_weeks),
        None,
    )


def get_development_summary(age_in_weeks: int) -> DevelopmentSummary:
    return DevelopmentSummary(
        current=get_milestones_for_age(age_in_weeks),
        upcoming=get_upcoming_milestones(age_in_weeks),
        tip=get_postnatal_tip(age_in_weeks),
    )
