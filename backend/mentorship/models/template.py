from pydantic import BaseModel, Field
from typing import List
from enum import Enum
import uuid

from .base import TimestampedModel
from .session import ResourceType


class TemplateCategory(str, Enum):
    TECHNICAL = "technical"
    CAREER = "career"
    SOFT_SKILLS = "soft-skills"
    PROJECT_REVIEW = "project-review"
    GENERAL = "general"


class TemplateDifficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TemplateResource(BaseModel):
    """Resource blueprint copied into a session when the template is applied"""
    title: str
    url: str
    type: ResourceType = ResourceType.LINK


class Preparation(BaseModel):
    mentee: List[str] = Field(default_factory=list)
    mentor: List[str] = Field(default_factory=list)


class SessionTemplateCreate(BaseModel):
    """Everything a caller supplies when authoring a template"""
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    duration: int = Field(60, ge=0, description="Suggested length in minutes")
    agenda: List[str] = Field(default_factory=list)
    preparation: Preparation = Field(default_factory=Preparation)
    resources: List[TemplateResource] = Field(default_factory=list)
    category: TemplateCategory = TemplateCategory.GENERAL
    difficulty: TemplateDifficulty = TemplateDifficulty.INTERMEDIATE
    tags: List[str] = Field(default_factory=list)
    created_by: str = "system"
    is_public: bool = True


class SessionTemplate(SessionTemplateCreate, TimestampedModel):
    id: str = Field(default_factory=lambda: f"template-{uuid.uuid4().hex}")
    usage_count: int = Field(0, ge=0)
    rating: float = 0.0
