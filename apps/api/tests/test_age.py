import unittest
from datetime import date, datetime, timedelta, timezone

from kinpath.age import (
    calculate_age_in_weeks,
    enrich_child_with_age,
    format_age_label,
    get_development_stage,
)
from kinpath.schemas import Child

NOW = datetime(2025, 6, 15, 12, 0)


def make_child(**fields) -> Child:
    return Child(id="child-1", user_id="user-1", name="Noah", **fields)


class AgeInWeeksTests(unittest.TestCase):
    def test_due_in_forty_weeks_is_start_of_pregnancy(self):
        child = make_child(due_date=NOW.date() + timedelta(weeks=40))
        self.assertEqual(calculate_age_in_weeks(child, NOW), -40)

    def test_due_date_further_out_clamps_to_minus_forty(self):
        child = make_child(due_date=date(2026, 6, 15))
        self.assertEqual(calculate_age_in_weeks(child, NOW), -40)

    def test_past_due_date_collapses_to_zero(self):
        child = make_child(due_date=date(2025, 6, 1))
        self.assertEqual(calculate_age_in_weeks(child, NOW), 0)

    def test_partial_week_before_due_rounds_up(self):
        # 10 days out -> still two weeks to go.
        child = make_child(due_date=date(2025, 6, 25))
        self.assertEqual(calculate_age_in_weeks(child, NOW), -2)

    def test_born_child_counts_whole_weeks(self):
        child = make_child(is_born=True, dob=date(2025, 6, 1), due_date=date(2025, 6, 10))
        self.assertEqual(calculate_age_in_weeks(child, NOW), 2)

    def test_born_today_is_zero(self):
        child = make_child(is_born=True, dob=NOW.date())
        self.assertEqual(calculate_age_in_weeks(child, NOW), 0)

    def test_timezone_aware_now(self):
        child = make_child(is_born=True, dob=date(2025, 6, 1))
        aware = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)
        self.assertEqual(calculate_age_in_weeks(child, aware), 2)

    def test_dob_ignored_until_marked_born(self):
        child = make_child(is_born=False, dob=date(2025, 1, 1))
        self.assertEqual(calculate_age_in_weeks(child, NOW), 0)

    def test_born_without_dob_uses_due_date(self):
        child = make_child(is_born=True, due_date=date(2025, 5, 1))
        self.assertEqual(calculate_age_in_weeks(child, NOW), 0)

    def test_no_dates_defaults_to_zero(self):
        self.assertEqual(calculate_age_in_weeks(make_child(), NOW), 0)


class AgeLabelTests(unittest.TestCase):
    def test_labels(self):
        cases = [
            (-40, "0 weeks pregnant"),
            (-10, "30 weeks pregnant"),
            (-1, "39 weeks pregnant"),
            (0, "Newborn"),
            (1, "1 week old"),
            (3, "3 weeks old"),
            (4, "0 months old"),
            (5, "1 month old"),
            (10, "2 months old"),
            (53, "12 months old"),
            (104, "23 months old"),
            (105, "2 years old"),
            (110, "2 years, 1 month old"),
            (120, "2 years, 3 months old"),
            (157, "3 years old"),
        ]
        for weeks, expected in cases:
            with self.subTest(weeks=weeks):
                self.assertEqual(format_age_label(weeks), expected)


class DevelopmentStageTests(unittest.TestCase):
    def test_first_match_ladder(self):
        cases = [
            (-40, "First Trimester"),
            (-30, "First Trimester"),
            (-26, "Second Trimester"),
            (-13, "Second Trimester"),
            (-12, "Third Trimester"),
            (-10, "Third Trimester"),
            (0, "Newborn"),
            (3, "Newborn"),
            (4, "Early Infancy"),
            (12, "Infancy"),
            (26, "Late Infancy"),
            (52, "Toddler"),
            (104, "Early Preschool"),
            (156, "Preschool"),
            (300, "Preschool"),
        ]
        for weeks, expected in cases:
            with self.subTest(weeks=weeks):
                self.assertEqual(get_development_stage(weeks), expected)


class EnrichChildTests(unittest.TestCase):
    def test_enrich_prenatal_child(self):
        child = make_child(due_date=date(2025, 8, 24))
        enriched = enrich_child_with_age(child, NOW)
        self.assertEqual(enriched.age_in_weeks, -10)
        self.assertEqual(enriched.age_label, "30 weeks pregnant")
        self.assertEqual(enriched.development_stage, "Third Trimester")
        self.assertTrue(enriched.age_known)
        self.assertEqual(enriched.name, "Noah")

    def test_missing_dates_flag_unknown_age(self):
        enriched = enrich_child_with_age(make_child(), NOW)
        self.assertEqual(enriched.age_in_weeks, 0)
        self.assertEqual(enriched.age_label, "Newborn")
        self.assertFalse(enriched.age_known)

    def test_re_enriching_recomputes(self):
        child = make_child(is_born=True, dob=date(2025, 6, 1))
        first = enrich_child_with_age(child, NOW)
        later = enrich_child_with_age(first, NOW + timedelta(weeks=4))
        self.assertEqual(later.age_in_weeks, 6)


if __name__ == "__main__":
    unittest.main()
