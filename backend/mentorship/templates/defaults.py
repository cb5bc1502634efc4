"""
Built-in session templates
Seeded into the catalog on startup when no template with the same name exists.
"""

from ..models.template import (
    Preparation,
    SessionTemplateCreate,
    TemplateCategory,
    TemplateDifficulty,
    TemplateResource,
)
from ..models.session import ResourceType

DEFAULT_TEMPLATES = [
    SessionTemplateCreate(
        name="Technical Skills Review",
        description="Review and discuss technical skills and knowledge",
        duration=60,
        agenda=[
            "Review current skill level",
            "Identify knowledge gaps",
            "Discuss learning resources",
            "Set skill development goals",
            "Plan next steps",
        ],
        preparation=Preparation(
            mentee=["Prepare skill assessment", "List current projects", "Identify challenges"],
            mentor=["Review mentee profile", "Prepare skill evaluation", "Gather resources"],
        ),
        resources=[
            TemplateResource(title="Skill Assessment Template", url="#", type=ResourceType.DOCUMENT),
            TemplateResource(title="Learning Resources Guide", url="#", type=ResourceType.LINK),
        ],
        category=TemplateCategory.TECHNICAL,
        difficulty=TemplateDifficulty.INTERMEDIATE,
        tags=["skills", "assessment", "development"],
        created_by="system",
        is_public=True,
    ),
    SessionTemplateCreate(
        name="Career Planning Session",
        description="Discuss career goals and development path",
        duration=90,
        agenda=[
            "Review career goals",
            "Assess current position",
            "Identify opportunities",
            "Create action plan",
            "Set milestones",
        ],
        preparation=Preparation(
            mentee=["Prepare career goals", "Research opportunities", "Update resume"],
            mentor=["Review industry trends", "Prepare career resources", "Research opportunities"],
        ),
        resources=[
            TemplateResource(title="Career Planning Worksheet", url="#", type=ResourceType.DOCUMENT),
            TemplateResource(title="Industry Trends Report", url="#", type=ResourceType.ARTICLE),
        ],
        category=TemplateCategory.CAREER,
        difficulty=TemplateDifficulty.BEGINNER,
        tags=["career", "planning", "goals"],
        created_by="system",
        is_public=True,
    ),
]
