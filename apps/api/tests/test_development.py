from __future__ import annotations

import logging

import pytest

from kinpath.catalogs.development import DEVELOPMENTAL_MILESTONES
from kinpath.catalogs.postnatal_tips import POSTNATAL_WEEKLY_TIPS
from kinpath.development import (
    CatalogError,
    get_development_summary,
    get_milestones_for_age,
    get_postnatal_tip,
    get_upcoming_milestones,
    validate_milestone_windows,
    validate_tip_windows,
)
from kinpath.schemas import DevelopmentalMilestone, PostnatalTip


def _ids(milestones) -> list[str]:
    return [m.id for m in milestones]


def test_milestones_for_newborn_span_every_domain() -> None:
    current = get_milestones_for_age(0)
    assert _ids(current) == ["m-0-1", "m-0-2", "l-0-1", "s-0-1", "c-0-1"]
    assert {m.domain.value for m in current} == {"motor", "language", "social", "cognitive"}


def test_milestone_windows_are_inclusive() -> None:
    assert "m-0-1" in _ids(get_milestones_for_age(6))
    assert "m-2-1" in _ids(get_milestones_for_age(12))
    assert len(get_milestones_for_age(44)) == 6


def test_long_window_matches_alone() -> None:
    assert _ids(get_milestones_for_age(61)) == ["m-12-2"]


def test_prenatal_age_has_no_current_milestones() -> None:
    assert get_milestones_for_age(-10) == []


def test_upcoming_milestones_sorted_with_stable_ties() -> None:
    upcoming = get_upcoming_milestones(0)
    assert _ids(upcoming) == ["m-2-1", "s-2-1", "l-2-1", "c-2-1", "m-4-1"]


def test_upcoming_milestones_respects_limit() -> None:
    assert len(get_upcoming_milestones(0, limit=2)) == 2
    assert get_upcoming_milestones(250) == []


def test_upcoming_milestones_during_pregnancy() -> None:
    assert _ids(get_upcoming_milestones(-10)) == ["m-0-1", "m-0-2", "l-0-1", "s-0-1", "c-0-1"]


def test_upcoming_milestones_sorts_unordered_catalog() -> None:
    catalog = [
        DevelopmentalMilestone(id="late", domain="motor", title="Late", description="", min_weeks=30, max_weeks=40),
        DevelopmentalMilestone(id="early", domain="motor", title="Early", description="", min_weeks=10, max_weeks=20),
        DevelopmentalMilestone(id="early-2", domain="social", title="Early 2", description="", min_weeks=10, max_weeks=12),
    ]
    assert _ids(get_upcoming_milestones(0, limit=5, milestones=catalog)) == ["early", "early-2", "late"]


def test_postnatal_tip_lookup() -> None:
    assert get_postnatal_tip(0).min_weeks == 0
    assert get_postnatal_tip(4).min_weeks == 3
    assert get_postnatal_tip(260).min_weeks == 235
    assert get_postnatal_tip(261) is None
    assert get_postnatal_tip(-1) is None


def test_every_postnatal_week_has_a_tip() -> None:
    for week in range(0, 261):
        assert get_postnatal_tip(week) is not None, week


def test_development_summary() -> None:
    summary = get_development_summary(13)
    assert _ids(summary.current)[0] == "m-4-1"
    assert summary.upcoming[0].min_weeks == 21
    assert summary.tip is not None
    assert summary.tip.min_weeks == 13


def test_shipped_catalogs_are_valid() -> None:
    validate_milestone_windows(DEVELOPMENTAL_MILESTONES)
    validate_tip_windows(POSTNATAL_WEEKLY_TIPS)


def test_inverted_milestone_window_is_rejected() -> None:
    bad = DevelopmentalMilestone(id="x", domain="motor", title="x", description="", min_weeks=10, max_weeks=2)
    with pytest.raises(CatalogError):
        validate_milestone_windows([bad])


def test_overlapping_tip_windows_are_rejected() -> None:
    tips = [
        PostnatalTip(min_weeks=0, max_weeks=4, body="a", self_care="a"),
        PostnatalTip(min_weeks=4, max_weeks=8, body="b", self_care="b"),
    ]
    with pytest.raises(CatalogError):
        validate_tip_windows(tips)


def test_tip_gap_only_warns(caplog: pytest.LogCaptureFixture) -> None:
    tips = [
        PostnatalTip(min_weeks=0, max_weeks=4, body="a", self_care="a"),
        PostnatalTip(min_weeks=10, max_weeks=12, body="b", self_care="b"),
    ]
    with caplog.at_level(logging.WARNING, logger="kinpath.development"):
        validate_tip_windows(tips)
    assert "gap" in caplog.text
