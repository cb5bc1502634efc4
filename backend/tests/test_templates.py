"""Tests for the session template catalog"""
import pytest

from mentorship.core.outcome import FailureReason
from mentorship.models.session import ResourceType
from mentorship.models.template import (
    SessionTemplateCreate,
    TemplateCategory,
    TemplateDifficulty,
    TemplateResource,
)
from mentorship.templates.defaults import DEFAULT_TEMPLATES


@pytest.fixture
def template_spec():
    return SessionTemplateCreate(
        name="Code Review Walkthrough",
        description="Walk through a pull request together",
        duration=45,
        agenda=["Context", "Review diff", "Discuss feedback"],
        resources=[
            TemplateResource(title="Review checklist", url="https://example.com/checklist", type=ResourceType.DOCUMENT),
        ],
        category=TemplateCategory.PROJECT_REVIEW,
        difficulty=TemplateDifficulty.INTERMEDIATE,
        tags=["code", "review"],
        created_by="mentor-1",
    )


class TestCreateTemplate:
    def test_new_template_starts_unused(self, catalog, template_spec, clock):
        template = catalog.create_template(template_spec)

        assert template.id.startswith("template-")
        assert template.usage_count == 0
        assert template.rating == 0
        assert template.created_at == clock()
        assert catalog.get_template(template.id).name == "Code Review Walkthrough"

    def test_get_unknown_template(self, catalog):
        assert catalog.get_template("template-missing") is None


class TestListTemplates:
    def test_filters_and_orders_by_usage(self, catalog, store, template_spec, make_session):
        review = catalog.create_template(template_spec)
        career = catalog.create_template(template_spec.model_copy(update={
            "name": "Career Chat", "category": TemplateCategory.CAREER,
        }))
        assert store.register_session(make_session())
        assert catalog.use_template("session-1", career.id)
        assert catalog.use_template("session-1", career.id)

        everything = catalog.get_templates()
        assert [t.id for t in everything] == [career.id, review.id]

        assert [t.id for t in catalog.get_templates(category=TemplateCategory.PROJECT_REVIEW)] == [review.id]
        assert catalog.get_templates(difficulty=TemplateDifficulty.ADVANCED) == []


class TestUseTemplate:
    def test_replaces_agenda_and_counts_usage(self, catalog, tracker, store, session_id, template_spec):
        template = catalog.create_template(template_spec)
        assert tracker.add_agenda_item(session_id, "Old item")

        outcome = catalog.use_template(session_id, template.id)

        assert outcome
        session = store.get_session(session_id)
        assert session.session_data.agenda == ["Context", "Review diff", "Discuss feedback"]
        assert catalog.get_template(template.id).usage_count == 1

    def test_materializes_resources_with_fresh_ids(self, catalog, store, session_id, template_spec):
        template = catalog.create_template(template_spec)
        assert catalog.use_template(session_id, template.id)

        resources = store.get_session(session_id).session_data.resources
        assert len(resources) == 1
        assert resources[0].title == "Review checklist"
        assert resources[0].type == ResourceType.DOCUMENT
        assert resources[0].id.startswith("resource-")

    def test_agenda_copy_is_independent(self, catalog, tracker, store, session_id, template_spec):
        template = catalog.create_template(template_spec)
        assert catalog.use_template(session_id, template.id)
        assert tracker.add_agenda_item(session_id, "Extra")

        assert catalog.get_template(template.id).agenda == ["Context", "Review diff", "Discuss feedback"]

    def test_missing_session(self, catalog, template_spec):
        template = catalog.create_template(template_spec)
        outcome = catalog.use_template("missing", template.id)

        assert outcome.reason == FailureReason.NOT_FOUND
        assert catalog.get_template(template.id).usage_count == 0

    def test_missing_template(self, catalog, store, session_id):
        outcome = catalog.use_template(session_id, "template-missing")

        assert outcome.reason == FailureReason.NOT_FOUND
        assert store.get_session(session_id).session_data.agenda == []


class TestDefaults:
    def test_seed_defaults_once(self, catalog):
        first = catalog.seed_defaults()
        second = catalog.seed_defaults()

        assert {t.name for t in first} == {"Technical Skills Review", "Career Planning Session"}
        assert second == []
        assert len(catalog.get_templates()) == len(DEFAULT_TEMPLATES)

    def test_default_agenda(self, catalog):
        catalog.seed_defaults()
        [technical] = catalog.get_templates(category=TemplateCategory.TECHNICAL)
        assert technical.agenda[0] == "Review current skill level"
        assert technical.duration == 60
