from __future__ import annotations

from datetime import date, datetime

from kinpath.pregnancy import (
    PREGNANCY_MILESTONES,
    get_all_pregnancy_milestones,
    get_baby_size_comparison,
    get_due_date_countdown,
    get_maternal_changes,
    get_planning_tips,
)
from kinpath.schemas import Child

NOW = datetime(2025, 6, 15, 18, 30)


def make_child(**fields) -> Child:
    return Child(id="child-1", user_id="user-1", **fields)


def test_countdown_mid_pregnancy() -> None:
    countdown = get_due_date_countdown(make_child(due_date=date(2025, 9, 1)), NOW)
    assert countdown is not None
    assert countdown.total_days_remaining == 78
    assert (countdown.weeks_remaining, countdown.days_remainder) == (11, 1)
    assert countdown.gestational_week == 29
    assert countdown.percent_complete == 73
    assert countdown.trimester == 3
    assert countdown.milestone == "Baby shower time"
    assert "calcium" in countdown.encouragement


def test_countdown_past_due_pins_to_week_forty() -> None:
    countdown = get_due_date_countdown(make_child(due_date=date(2025, 6, 1)), NOW)
    assert countdown.total_days_remaining == 0
    assert countdown.gestational_week == 40
    assert countdown.percent_complete == 100
    assert countdown.milestone == "Due date week"


def test_countdown_very_early_uses_fallbacks() -> None:
    countdown = get_due_date_countdown(make_child(due_date=date(2026, 4, 11)), NOW)
    assert countdown.gestational_week == 1
    assert countdown.percent_complete == 3
    assert countdown.trimester == 1
    assert countdown.milestone == "First ultrasound window"
    assert countdown.encouragement == "Every day brings you closer to meeting your little one."


def test_countdown_requires_active_pregnancy() -> None:
    assert get_due_date_countdown(make_child(), NOW) is None
    born = make_child(is_born=True, dob=date(2025, 6, 1), due_date=date(2025, 6, 10))
    assert get_due_date_countdown(born, NOW) is None


def test_size_comparison_clamps_and_rounds() -> None:
    assert get_baby_size_comparison(2).name == "poppy seed"
    assert get_baby_size_comparison(45).name == "watermelon"
    assert get_baby_size_comparison(20.5).week == 21


def test_planning_tips_window() -> None:
    assert [tip.week for tip in get_planning_tips(38)] == [38, 39, 40]
    assert get_planning_tips(2) == []
    assert [tip.week for tip in get_planning_tips(24, look_ahead_weeks=1)] == [24, 25]


def test_maternal_changes_lookup() -> None:
    assert get_maternal_changes(12).week == 12
    assert get_maternal_changes(1).week == 4


def test_all_pregnancy_milestones_is_a_copy() -> None:
    milestones = get_all_pregnancy_milestones()
    milestones.clear()
    assert len(PREGNANCY_MILESTONES) == 13
