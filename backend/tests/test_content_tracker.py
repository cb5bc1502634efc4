"""Tests for in-session content capture"""
import pytest
from pydantic import ValidationError

from mentorship.core.outcome import FailureReason
from mentorship.models.session import Assignee, ResourceType


class TestAgendaAndNotes:
    def test_add_agenda_item(self, tracker, store, session_id):
        assert tracker.add_agenda_item(session_id, "Review portfolio")
        assert store.get_session(session_id).session_data.agenda == ["Review portfolio"]

    def test_note_is_stamped_with_author_and_time(self, tracker, store, session_id, clock):
        outcome = tracker.add_note(session_id, "Discussed React hooks", "mentor-1")

        expected = f"[mentor-1] {clock().isoformat()}: Discussed React hooks"
        assert outcome.value == expected
        assert store.get_session(session_id).session_data.notes == [expected]

    def test_content_is_stored_verbatim(self, tracker, store, session_id):
        text = "<script>alert('x')</script>"
        assert tracker.add_agenda_item(session_id, text)
        assert store.get_session(session_id).session_data.agenda == [text]

    def test_missing_session(self, tracker):
        outcome = tracker.add_note("missing", "text", "mentor-1")
        assert not outcome
        assert outcome.reason == FailureReason.NOT_FOUND

    def test_mutation_stamps_updated_at(self, tracker, store, session_id, clock):
        clock.advance(minutes=7)
        assert tracker.add_agenda_item(session_id, "Intro")
        assert store.get_session(session_id).updated_at == clock()

    def test_content_allowed_after_completion(self, tracker, lifecycle, store, session_id):
        assert lifecycle.start(session_id, "mentor-1")
        assert lifecycle.end(session_id, "mentor-1")
        assert tracker.add_note(session_id, "Late note", "mentee-1")
        assert len(store.get_session(session_id).session_data.notes) == 1


class TestActionItems:
    def test_action_item_ids_are_unique(self, tracker, store, session_id):
        ids = {
            tracker.add_action_item(session_id, f"Task {i}", Assignee.MENTEE).value
            for i in range(20)
        }
        assert len(ids) == 20
        items = store.get_session(session_id).session_data.action_items
        assert all(not item.completed for item in items)

    def test_complete_action_item(self, tracker, store, session_id):
        item_id = tracker.add_action_item(session_id, "Read docs", Assignee.BOTH, "2024-03-08").value

        assert tracker.complete_action_item(session_id, item_id)
        item = store.get_session(session_id).session_data.action_items[0]
        assert item.completed
        assert item.due_date == "2024-03-08"

    def test_complete_twice_is_idempotent(self, tracker, persistence, session_id):
        item_id = tracker.add_action_item(session_id, "Read docs", Assignee.MENTOR).value
        assert tracker.complete_action_item(session_id, item_id)
        saves = persistence.save_count

        again = tracker.complete_action_item(session_id, item_id)

        assert again
        assert again.detail == "already completed"
        assert persistence.save_count == saves

    def test_complete_unknown_item(self, tracker, session_id):
        outcome = tracker.complete_action_item(session_id, "action-nope")
        assert outcome.reason == FailureReason.NOT_FOUND

    def test_invalid_assignee_rejected(self, tracker, session_id):
        with pytest.raises(ValueError):
            tracker.add_action_item(session_id, "Task", "everyone")


class TestResourcesWhiteboardChat:
    def test_add_resource(self, tracker, store, session_id):
        outcome = tracker.add_resource(session_id, "MDN", "https://developer.mozilla.org", ResourceType.LINK)

        resources = store.get_session(session_id).session_data.resources
        assert resources[0].id == outcome.value
        assert resources[0].id.startswith("resource-")
        assert resources[0].type == ResourceType.LINK

    def test_whiteboard_is_replaced(self, tracker, store, session_id, clock):
        assert tracker.update_whiteboard(session_id, "first sketch")
        clock.advance(minutes=1)
        assert tracker.update_whiteboard(session_id, "second sketch")

        whiteboard = store.get_session(session_id).session_data.whiteboard
        assert whiteboard.content == "second sketch"
        assert whiteboard.last_modified == clock()

    def test_chat_messages_appended_in_order(self, tracker, store, session_id):
        assert tracker.add_chat_message(session_id, "mentor", "Hi there")
        assert tracker.add_chat_message(session_id, "mentee", "Hello!")

        chat = store.get_session(session_id).technical_details.chat_log
        assert [m.message for m in chat] == ["Hi there", "Hello!"]


class TestFeedback:
    def test_feedback_merges_fields(self, tracker, store, session_id):
        assert tracker.submit_feedback(session_id, "mentor", {"rating": 4, "review": "Good"})
        assert tracker.submit_feedback(session_id, "mentor", {"mentee_progress": "steady"})

        feedback = store.get_session(session_id).feedback.mentor
        assert feedback.rating == 4
        assert feedback.review == "Good"
        assert feedback.mentee_progress == "steady"

    def test_feedback_for_each_role_is_separate(self, tracker, store, session_id):
        assert tracker.submit_feedback(session_id, "mentee", {"rating": 5})
        feedback = store.get_session(session_id).feedback
        assert feedback.mentee.rating == 5
        assert feedback.mentor.rating is None

    def test_invalid_feedback_fields(self, tracker, session_id):
        with pytest.raises(ValidationError):
            tracker.submit_feedback(session_id, "mentee", {"rating": "excellent"})

    def test_rejected_feedback_leaves_session_unchanged(self, tracker, store, persistence, session_id):
        assert tracker.submit_feedback(session_id, "mentee", {"rating": 3})
        saves = persistence.save_count

        with pytest.raises(ValidationError):
            tracker.submit_feedback(session_id, "mentee", {"rating": "excellent", "review": "x"})

        feedback = store.get_session(session_id).feedback.mentee
        assert feedback.rating == 3
        assert feedback.review is None
        assert persistence.save_count == saves
