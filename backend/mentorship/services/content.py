import logging
import uuid
from typing import Any, Callable, Dict, Optional, TypeVar

from ..core.outcome import Outcome
from ..models.session import (
    ActionItem,
    Assignee,
    ChatMessage,
    ParticipantRole,
    ResourceType,
    Session,
    SessionResource,
    Whiteboard,
)
from ..repositories.session import SessionStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def new_resource_id() -> str:
    return f"resource-{uuid.uuid4().hex}"


class SessionContentTracker:
    """Mutators for the content captured while a session runs.

    Content is stored as given; nothing here validates or sanitizes text.
    """

    def __init__(self, store: SessionStore):
        self.store = store

    def add_agenda_item(self, session_id: str, item: str) -> Outcome:
        return self._mutate(session_id, lambda s: s.session_data.agenda.append(item))

    def add_note(self, session_id: str, text: str, author: str) -> Outcome:
        def append(session: Session) -> str:
            note = f"[{author}] {self.store.now().isoformat()}: {text}"
            session.session_data.notes.append(note)
            return note

        return self._mutate(session_id, append)

    def add_action_item(
        self,
        session_id: str,
        description: str,
        assigned_to: Assignee,
        due_date: Optional[str] = None,
    ) -> Outcome:
        """Append an action item; the outcome's value is its new id"""
        def append(session: Session) -> str:
            taken = {item.id for item in session.session_data.action_items}
            item_id = f"action-{uuid.uuid4().hex[:12]}"
            while item_id in taken:
                item_id = f"action-{uuid.uuid4().hex[:12]}"
            session.session_data.action_items.append(ActionItem(
                id=item_id,
                description=description,
                assigned_to=Assignee(assigned_to),
                due_date=due_date,
            ))
            return item_id

        return self._mutate(session_id, append)

    def complete_action_item(self, session_id: str, action_item_id: str) -> Outcome:
        """Mark an item done; completing it again changes nothing"""
        with self.store.lock_for(session_id):
            session = self.store.find_session(session_id)
            if session is None:
                return Outcome.not_found(f"Session {session_id} not found")
            item = next(
                (i for i in session.session_data.action_items if i.id == action_item_id),
                None,
            )
            if item is None:
                return Outcome.not_found(f"Action item {action_item_id} not found")
            if item.completed:
                return Outcome.success(action_item_id, detail="already completed")

            updated = session.model_copy(deep=True)
            with self.store.staged():
                for copied in updated.session_data.action_items:
                    if copied.id == action_item_id:
                        copied.completed = True
                updated.touch(self.store.now())
                self.store.sessions[session_id] = updated
        return Outcome.success(action_item_id)

    def add_resource(self, session_id: str, title: str, url: str, type: ResourceType) -> Outcome:
        def append(session: Session) -> str:
            resource = SessionResource(
                id=new_resource_id(), title=title, url=url, type=ResourceType(type)
            )
            session.session_data.resources.append(resource)
            return resource.id

        return self._mutate(session_id, append)

    def update_whiteboard(self, session_id: str, content: str) -> Outcome:
        def replace(session: Session) -> None:
            session.session_data.whiteboard = Whiteboard(
                content=content, last_modified=self.store.now()
            )

        return self._mutate(session_id, replace)

    def add_chat_message(self, session_id: str, sender: str, message: str) -> Outcome:
        def append(session: Session) -> None:
            session.technical_details.chat_log.append(
                ChatMessage(timestamp=self.store.now(), sender=sender, message=message)
            )

        return self._mutate(session_id, append)

    def submit_feedback(self, session_id: str, role: ParticipantRole, feedback: Dict[str, Any]) -> Outcome:
        """Shallow-merge feedback fields into the given participant's feedback.

        Raises pydantic's ValidationError when a field has the wrong type; the
        session is left unchanged.
        """
        role = ParticipantRole(role)

        def merge(session: Session) -> None:
            current = getattr(session.feedback, role.value)
            merged = type(current).model_validate({**current.model_dump(), **feedback})
            setattr(session.feedback, role.value, merged)

        return self._mutate(session_id, merge)

    def _mutate(self, session_id: str, change: Callable[[Session], T]) -> Outcome:
        with self.store.lock_for(session_id):
            session = self.store.find_session(session_id)
            if session is None:
                logger.info(f"Content change rejected, session {session_id} not found")
                return Outcome.not_found(f"Session {session_id} not found")
            updated = session.model_copy(deep=True)
            with self.store.staged():
                result = change(updated)
                updated.touch(self.store.now())
                self.store.sessions[session_id] = updated
        return Outcome.success(result)
