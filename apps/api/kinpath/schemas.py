"""Pydantic records shared by the personalization engine and the API."""
from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .catalogs.taxonomy import TOPIC_KEYS


class MilestoneDomain(str, Enum):
    MOTOR = "motor"
    LANGUAGE = "language"
    COGNITIVE = "cognitive"
    SOCIAL = "social"


class TemplateCategory(str, Enum):
    PREGNANCY = "pregnancy"
    POSTPARTUM = "postpartum"
    DEVELOPMENT = "development"


class OffsetReference(str, Enum):
    DUE_DATE = "due_date"
    BIRTH = "birth"


class ChecklistItemType(str, Enum):
    MILESTONE = "milestone"
    CUSTOM = "custom"


class BirthPreference(str, Enum):
    HOME = "home"
    HOSPITAL = "hospital"
    BIRTH_CENTER = "birth_center"
    UNDECIDED = "undecided"


class FeedingPreference(str, Enum):
    BREASTFEEDING = "breastfeeding"
    FORMULA = "formula"
    COMBINATION = "combination"
    UNDECIDED = "undecided"


class VaccineStance(str, Enum):
    STANDARD = "standard"
    DELAYED = "delayed"
    SELECTIVE = "selective"
    HESITANT = "hesitant"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class ParentingStyle(str, Enum):
    ATTACHMENT = "attachment"
    GENTLE = "gentle"
    MONTESSORI = "montessori"
    RIE = "rie"
    NO_PREFERENCE = "no_preference"


class DietaryPreference(str, Enum):
    OMNIVORE = "omnivore"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    KOSHER = "kosher"
    HALAL = "halal"
    OTHER = "other"


class ResourceType(str, Enum):
    ARTICLE = "article"
    CHECKLIST = "checklist"
    VIDEO = "video"
    GUIDE = "guide"
    INFOGRAPHIC = "infographic"


class ResourceStatus(str, Enum):
    DRAFT = "draft"
    IN_REVIEW = "in_review"
    PUBLISHED = "published"
    REJECTED = "rejected"
    ARCHIVED = "archived"


class Child(BaseModel):
    """Snapshot of a child profile. Age is never stored, only derived."""

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    name: str = ""
    due_date: Optional[date] = Field(default=None, description="Expected delivery date")
    dob: Optional[date] = Field(default=None, description="Date of birth, set once born")
    is_born: bool = False
    created_at: Optional[datetime] = None


class ChildWithAge(Child):
    age_in_weeks: int = Field(description="Negative = prenatal, 0 = birth week, positive = postnatal")
    age_label: str = Field(description="e.g. '32 weeks pregnant', '3 months old'")
    age_known: bool = Field(
        default=True,
        description="False when neither dob nor due_date is set and the age fell back to 0",
    )
    development_stage: str


class DevelopmentalMilestone(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    domain: MilestoneDomain
    title: str
    description: str
    min_weeks: int
    max_weeks: int


class PostnatalTip(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_weeks: int
    max_weeks: int
    body: str
    self_care: str


class MilestoneTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    description: str
    category: TemplateCategory
    offset_weeks: int = Field(description="Signed offset from the reference date")
    offset_reference: OffsetReference
    icon: str = "calendar"


class ChecklistItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    child_id: str
    user_id: str
    title: str
    description: Optional[str] = None
    item_type: ChecklistItemType = ChecklistItemType.CUSTOM
    milestone_key: Optional[str] = Field(
        default=None,
        description="Template key, set only when instantiated from a milestone template",
    )
    suggested_date: Optional[date] = None
    due_date: Optional[date] = Field(default=None, description="Editable by the parent")
    is_completed: bool = False
    completed_at: Optional[datetime] = None
    sort_order: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class GroupedItems(BaseModel):
    overdue: List[ChecklistItem] = Field(default_factory=list)
    this_month: List[ChecklistItem] = Field(default_factory=list)
    coming_up: List[ChecklistItem] = Field(default_factory=list)
    completed: List[ChecklistItem] = Field(default_factory=list)


def check_topics(topics: List[str]) -> List[str]:
    unknown = [topic for topic in topics if topic not in TOPIC_KEYS]
    if unknown:
        raise ValueError(f"Unknown topics: {', '.join(unknown)}")
    return topics


class Resource(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    slug: str
    summary: str = ""
    resource_type: ResourceType = ResourceType.ARTICLE
    source_url: Optional[str] = None
    age_start_weeks: int = Field(ge=-40, le=260, description="-40 (conception) to 260 (age 5)")
    age_end_weeks: int = Field(ge=-40, le=260)
    status: ResourceStatus = ResourceStatus.PUBLISHED
    vetted_at: Optional[datetime] = None
    is_premium: bool = False


class ResourceWithMeta(Resource):
    topics: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list, description="Namespaced tags like 'feeding:formula'")
    relevance_score: Optional[float] = Field(
        default=None,
        description="Attached only to the copies returned by rank_resources",
    )

    @field_validator("topics")
    @classmethod
    def known_topics(cls, value: List[str]) -> List[str]:
        return check_topics(value)


class UserPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = None
    birth_preference: Optional[BirthPreference] = None
    feeding_preference: Optional[FeedingPreference] = None
    vaccine_stance: Optional[VaccineStance] = None
    religion: Optional[str] = None
    dietary_preference: Optional[DietaryPreference] = None
    parenting_style: Optional[ParentingStyle] = None
    topics_of_interest: List[str] = Field(default_factory=list)

    @field_validator("topics_of_interest")
    @classmethod
    def known_topics(cls, value: List[str]) -> List[str]:
        return check_topics(value)


class DevelopmentSummary(BaseModel):
    current: List[DevelopmentalMilestone]
    upcoming: List[DevelopmentalMilestone]
    tip: Optional[PostnatalTip] = None
