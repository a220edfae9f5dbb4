"""Relevance scoring for the personalized resource feed."""
from __future__ import annotations

from typing import Iterable, List, Optional, Set

from .catalogs.taxonomy import build_tag
from .config import CONFIG, EngineConfig
from .schemas import (
    BirthPreference,
    DietaryPreference,
    FeedingPreference,
    ResourceWithMeta,
    UserPreferences,
    VaccineStance,
)

# Preference values meaning "no opinion"; they never become tags.
NO_OPINION_VALUES = {
    BirthPreference.UNDECIDED,
    FeedingPreference.UNDECIDED,
    VaccineStance.PREFER_NOT_TO_SAY,
    DietaryPreference.OMNIVORE,
}


def build_user_tags(preferences: UserPreferences) -> Set[str]:
    """Convert stated preferences into namespaced tags for matching."""

    tags: Set[str] = set()
    candidates = [
        ("birth", preferences.birth_preference),
        ("feeding", preferences.feeding_preference),
        ("vaccine", preferences.vaccine_stance),
        ("diet", preferences.dietary_preference),
    ]
    for namespace, value in candidates:
        if value is None or value in NO_OPINION_VALUES:
            continue
        tags.add(build_tag(namespace, value.value))

    if preferences.religion:
        tags.add(build_tag("faith", preferences.religion))
    return tags


def age_fit_score(resource: ResourceWithMeta, age_in_weeks: int, max_score: float = 100.0) -> float:
    """Full marks at the window center, falling off linearly; narrow windows fall off faster."""

    center = (resource.age_start_weeks + resource.age_end_weeks) / 2
    age_range = max(resource.age_end_weeks - resource.age_start_weeks, 1)
    distance = abs(age_in_weeks - center)
    return max(0.0, max_score - max_score * distance / age_range)


def score_resource(
    resource: ResourceWithMeta,
    preferences: UserPreferences,
    age_in_weeks: int,
    config: Optional[EngineConfig] = None,
) -> float:
    cfg = config or CONFIG
    score = age_fit_score(resource, age_in_weeks, cfg.age_score_max)

    interests = set(preferences.topics_of_interest)
    if interests:
        matching_topics = [topic for topic in resource.topics if topic in interests]
        score += len(matching_topics) * cfg.topic_match_weight

    user_tags = build_user_tags(preferences)
    matching_tags = [tag for tag in resource.tags if tag in user_tags]
    score += len(matching_tags) * cfg.tag_match_weight

    return score


def rank_resources(
    resources: Iterable[ResourceWithMeta],
    preferences: UserPreferences,
    age_in_weeks: int,
    config: Optional[EngineConfig] = None,
) -> List[ResourceWithMeta]:
    """Return scored copies sorted by relevance; ties keep their input order."""

    scored = [
        resource.model_copy(
            update={"relevance_score": score_resource(resource, preferences, age_in_weeks, config)}
        )
        for resource in resources
    ]
    return sorted(scored, key=lambda r: r.relevance_score or 0.0, reverse=True)
