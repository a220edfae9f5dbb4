from __future__ import annotations

import pytest
from pydantic import ValidationError

from kinpath.config import EngineConfig
from kinpath.feed import age_fit_score, build_user_tags, rank_resources, score_resource
from kinpath.schemas import ResourceWithMeta, UserPreferences


def make_resource(resource_id: str, start: int, end: int, **fields) -> ResourceWithMeta:
    return ResourceWithMeta(
        id=resource_id,
        title=resource_id.upper(),
        slug=resource_id,
        age_start_weeks=start,
        age_end_weeks=end,
        **fields,
    )


def test_sleep_resource_outranks_distant_one() -> None:
    resource_a = make_resource("a", -4, 4, topics=["sleep"])
    resource_b = make_resource("b", 20, 28)
    prefs = UserPreferences(topics_of_interest=["sleep"])

    assert score_resource(resource_a, prefs, 0) == 120
    assert score_resource(resource_b, prefs, 0) == 0

    ranked = rank_resources([resource_b, resource_a], prefs, 0)
    assert [r.id for r in ranked] == ["a", "b"]
    assert [r.relevance_score for r in ranked] == [120, 0]


def test_ranking_does_not_mutate_inputs() -> None:
    resource = make_resource("a", 0, 10)
    ranked = rank_resources([resource], UserPreferences(), 5)
    assert resource.relevance_score is None
    assert ranked[0].relevance_score == 100
    assert ranked[0] is not resource


def test_equal_scores_keep_input_order() -> None:
    first = make_resource("first", 0, 10)
    second = make_resource("second", 0, 10)
    third = make_resource("third", 100, 110)
    ranked = rank_resources([third, first, second], UserPreferences(), 5)
    assert [r.id for r in ranked] == ["first", "second", "third"]

    ranked = rank_resources([second, first], UserPreferences(), 5)
    assert [r.id for r in ranked] == ["second", "first"]


def test_age_score_non_increasing_with_distance() -> None:
    resource = make_resource("a", 0, 20)
    prefs = UserPreferences()
    scores = [score_resource(resource, prefs, age) for age in range(10, 45)]
    assert scores == sorted(scores, reverse=True)
    assert scores[0] == 100
    assert scores[-1] == 0


def test_narrow_window_falls_off_faster() -> None:
    narrow = make_resource("narrow", 8, 12)
    wide = make_resource("wide", 0, 20)
    assert age_fit_score(narrow, 13) < age_fit_score(wide, 13)


def test_zero_width_window_does_not_divide_by_zero() -> None:
    point = make_resource("point", 10, 10)
    assert age_fit_score(point, 10) == 100
    assert age_fit_score(point, 11) == 0


def test_user_tags_skip_no_opinion_values() -> None:
    prefs = UserPreferences(
        birth_preference="undecided",
        feeding_preference="formula",
        vaccine_stance="prefer_not_to_say",
        dietary_preference="omnivore",
        parenting_style="gentle",
        religion="jewish",
    )
    assert build_user_tags(prefs) == {"feeding:formula", "faith:jewish"}


def test_user_tags_for_all_namespaces() -> None:
    prefs = UserPreferences(
        birth_preference="home",
        feeding_preference="breastfeeding",
        vaccine_stance="delayed",
        dietary_preference="vegan",
        religion="",
    )
    assert build_user_tags(prefs) == {
        "birth:home",
        "feeding:breastfeeding",
        "vaccine:delayed",
        "diet:vegan",
    }


def test_tag_and_topic_matches_add_up() -> None:
    prefs = UserPreferences(
        feeding_preference="formula",
        dietary_preference="omnivore",
        religion="jewish",
        topics_of_interest=["sleep", "safety"],
    )
    resource = make_resource(
        "a",
        0,
        10,
        topics=["sleep", "safety", "postpartum"],
        tags=["feeding:formula", "faith:jewish", "diet:omnivore"],
    )
    assert score_resource(resource, prefs, 5) == 100 + 40 + 30


def test_weights_come_from_config() -> None:
    prefs = UserPreferences(topics_of_interest=["sleep"])
    resource = make_resource("a", 0, 10, topics=["sleep"])
    config = EngineConfig(topic_match_weight=5, age_score_max=50)
    assert score_resource(resource, prefs, 5, config=config) == 55


def test_resource_age_bounds_are_validated() -> None:
    with pytest.raises(ValidationError):
        make_resource("too-early", -41, 0)
    with pytest.raises(ValidationError):
        make_resource("too-late", 0, 261)


def test_unknown_topics_are_rejected() -> None:
    with pytest.raises(ValidationError):
        make_resource("a", 0, 10, topics=["sleep", "astrology"])
    with pytest.raises(ValidationError):
        UserPreferences(topics_of_interest=["astrology"])


def test_faith_tag_uses_religion_verbatim() -> None:
    assert build_user_tags(UserPreferences(religion="Christian")) == {"faith:Christian"}
