"""
Catalog of reusable session templates (agenda + resource bundles)
"""

import logging
from typing import List, Optional, Sequence

from ..core.outcome import Outcome
from ..models.session import SessionResource
from ..models.template import (
    SessionTemplate,
    SessionTemplateCreate,
    TemplateCategory,
    TemplateDifficulty,
)
from ..repositories.session import SessionStore
from ..services.content import new_resource_id
from .defaults import DEFAULT_TEMPLATES

logger = logging.getLogger(__name__)


class TemplateCatalog:
    """Creates, lists and applies session templates"""

    def __init__(self, store: SessionStore):
        self.store = store

    def create_template(self, spec: SessionTemplateCreate) -> SessionTemplate:
        now = self.store.now()
        template = SessionTemplate(
            **spec.model_dump(),
            usage_count=0,
            rating=0.0,
            created_at=now,
            updated_at=now,
        )
        self.store.add_template(template)
        logger.info(f"Created template {template.id} ({template.name})")
        return template.model_copy(deep=True)

    def get_template(self, template_id: str) -> Optional[SessionTemplate]:
        template = self.store.find_template(template_id)
        return template.model_copy(deep=True) if template else None

    def get_templates(
        self,
        category: Optional[TemplateCategory] = None,
        difficulty: Optional[TemplateDifficulty] = None,
    ) -> List[SessionTemplate]:
        """Templates matching the filters, most used first"""
        templates = list(self.store.templates.values())
        if category:
            templates = [t for t in templates if t.category == category]
        if difficulty:
            templates = [t for t in templates if t.difficulty == difficulty]
        templates.sort(key=lambda t: t.usage_count, reverse=True)
        return [t.model_copy(deep=True) for t in templates]

    def use_template(self, session_id: str, template_id: str) -> Outcome:
        """Seed a session from a template.

        The session's agenda is replaced by the template's, each template
        resource becomes a new session resource, and the template's usage
        count goes up by one.
        """
        with self.store.lock_for(session_id):
            session = self.store.find_session(session_id)
            template = self.store.find_template(template_id)
            if session is None:
                return Outcome.not_found(f"Session {session_id} not found")
            if template is None:
                return Outcome.not_found(f"Template {template_id} not found")

            now = self.store.now()
            updated = session.model_copy(deep=True)
            updated.session_data.agenda = list(template.agenda)
            updated.session_data.resources = [
                SessionResource(id=new_resource_id(), **resource.model_dump())
                for resource in template.resources
            ]
            updated.touch(now)

            # Plain counter: concurrent applications of one template may race here
            used = template.model_copy(update={
                "usage_count": template.usage_count + 1,
                "updated_at": now,
            })
            with self.store.staged():
                self.store.sessions[session_id] = updated
                self.store.templates[template_id] = used

        logger.info(f"Applied template {template_id} to session {session_id}")
        return Outcome.success(session_id)

    def seed_defaults(self, defaults: Sequence[SessionTemplateCreate] = DEFAULT_TEMPLATES) -> List[SessionTemplate]:
        """Create the built-in templates whose names are not in the catalog yet"""
        existing = {t.name for t in self.store.templates.values()}
        return [self.create_template(spec) for spec in defaults if spec.name not in existing]
