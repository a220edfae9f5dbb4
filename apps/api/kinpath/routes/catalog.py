from __future__ import annotations

from typing import Dict

from fastapi import APIRouter
from pydantic import BaseModel

from ..catalogs.development import DOMAIN_LABELS
from ..catalogs.taxonomy import TAG_NAMESPACES, TOPICS

router = APIRouter(prefix="/api/v1", tags=["catalog"])


class TopicOut(BaseModel):
    label: str
    icon: str


class TagNamespaceOut(BaseModel):
    label: str
    values: Dict[str, str]


class TaxonomyResponse(BaseModel):
    topics: Dict[str, TopicOut]
    tag_namespaces: Dict[str, TagNamespaceOut]
    domain_labels: Dict[str, str]


@router.get("/catalog/taxonomy", response_model=TaxonomyResponse)
async def taxonomy_endpoint() -> TaxonomyResponse:
    """Labels the onboarding and feed filters render for topics, tags and domains."""

    return TaxonomyResponse(
        topics={key: TopicOut(**entry) for key, entry in TOPICS.items()},
        tag_namespaces={
            namespace: TagNamespaceOut(label=entry["label"], values=entry["values"])
            for namespace, entry in TAG_NAMESPACES.items()
        },
        domain_labels={domain.value: label for domain, label in DOMAIN_LABELS.items()},
    )
