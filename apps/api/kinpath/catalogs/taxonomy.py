"""Topic and lifestyle-tag taxonomies used to personalize the resource feed.

Tags use a ``namespace:value`` format (e.g. ``faith:christian``). Resources may
carry several tags; users match them through their stated preferences.
"""
from __future__ import annotations

from typing import Dict, List

TOPICS: Dict[str, Dict[str, str]] = {
    "prenatal": {"label": "Prenatal Care", "icon": "baby"},
    "newborn_care": {"label": "Newborn Care", "icon": "heart"},
    "nutrition_and_diet": {"label": "Nutrition & Diet", "icon": "apple"},
    "vaccinations": {"label": "Vaccinations", "icon": "syringe"},
    "breastfeeding": {"label": "Breastfeeding & Feeding", "icon": "droplet"},
    "emotional_wellness": {"label": "Emotional Wellness", "icon": "smile"},
    "sleep": {"label": "Sleep", "icon": "moon"},
    "milestones": {"label": "Milestones", "icon": "flag"},
    "safety": {"label": "Safety", "icon": "shield"},
    "postpartum": {"label": "Postpartum", "icon": "flower"},
    "infant_development": {"label": "Infant Development", "icon": "trending-up"},
    "toddler_development": {"label": "Toddler Development", "icon": "footprints"},
    "relationships": {"label": "Relationships & Co-Parenting", "icon": "users"},
}

TOPIC_KEYS: List[str] = list(TOPICS)

TAG_NAMESPACES: Dict[str, Dict[str, object]] = {
    "faith": {
        "label": "Faith & Spirituality",
        "values": {
            "christian": "Christian",
            "catholic": "Catholic",
            "jewish": "Jewish",
            "muslim": "Muslim",
            "hindu": "Hindu",
            "buddhist": "Buddhist",
            "secular": "Secular / Non-religious",
            "spiritual": "Spiritual (non-denominational)",
        },
    },
    "birth": {
        "label": "Birth Preference",
        "values": {
            "home": "Home Birth",
            "hospital": "Hospital Birth",
            "birth_center": "Birth Center",
            "water": "Water Birth",
        },
    },
    "vaccine": {
        "label": "Vaccine Approach",
        "values": {
            "standard": "Standard CDC Schedule",
            "delayed": "Delayed Schedule",
            "selective": "Selective Vaccination",
        },
    },
    "diet": {
        "label": "Dietary Preferences",
        "values": {
            "vegetarian": "Vegetarian",
            "vegan": "Vegan",
            "kosher": "Kosher",
            "halal": "Halal",
            "gluten_free": "Gluten-Free",
            "dairy_free": "Dairy-Free",
        },
    },
    "feeding": {
        "label": "Feeding Approach",
        "values": {
            "breastfeeding": "Breastfeeding",
            "formula": "Formula Feeding",
            "combination": "Combination Feeding",
            "blw": "Baby-Led Weaning",
        },
    },
    "parenting": {
        "label": "Parenting Philosophy",
        "values": {
            "attachment": "Attachment Parenting",
            "gentle": "Gentle Parenting",
            "montessori": "Montessori",
            "rie": "RIE",
        },
    },
}


def build_tag(namespace: str, value: str) -> str:
    """Build a full tag string from namespace + value."""
    return f"{namespace}:{value}"
