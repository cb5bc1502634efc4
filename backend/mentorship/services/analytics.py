"""
Post-session analytics.

The generator runs once, when a session moves from in_progress to completed.
Every metric falls back to a fixed default when its inputs are sparse, so
generation never fails.
"""

import logging
from collections import Counter
from typing import List, Optional

from ..core.numbers import round_half_up
from ..models.analytics import (
    ConnectionQuality,
    ContentMetrics,
    EngagementMetrics,
    OutcomeMetrics,
    ParticipationLevel,
    Sentiment,
    SessionAnalytics,
    SessionAnalyticsSummary,
    TechnicalMetrics,
    UserAnalytics,
)
from ..models.session import ParticipantRole, Session, SessionStatus
from ..repositories.session import SessionStore
from .text_analysis import KeywordTextAnalyzer, TextAnalyzer

logger = logging.getLogger(__name__)

UNKNOWN_PARTICIPATION = 50
KEY_TOPIC_COUNT = 5
TOP_TOPIC_COUNT = 5
SATISFACTION_TREND_LENGTH = 10


class AnalyticsGenerator:
    """Heuristic analysis of a finished session"""

    def __init__(self, text_analyzer: Optional[TextAnalyzer] = None):
        self.text_analyzer = text_analyzer or KeywordTextAnalyzer()

    def generate(self, session: Session) -> SessionAnalytics:
        notes = session.session_data.notes
        action_items = session.session_data.action_items
        chat_log = session.technical_details.chat_log
        messages = [entry.message for entry in chat_log]
        issues = self.text_analyzer.technical_issues(messages)

        return SessionAnalytics(
            session_id=session.id,
            duration=session.duration,
            engagement=EngagementMetrics(
                mentee_participation=self.participation(session, ParticipantRole.MENTEE),
                mentor_participation=self.participation(session, ParticipantRole.MENTOR),
                interaction_count=len(chat_log),
                question_count=sum(1 for m in messages if "?" in m),
            ),
            content=ContentMetrics(
                topics_covered=self.text_analyzer.extract_topics(session.session_data.agenda, notes),
                key_insights=self.text_analyzer.extract_insights(notes),
                action_items_created=len(action_items),
                resources_shared=len(session.session_data.resources),
            ),
            outcomes=OutcomeMetrics(
                goals_achieved=self.text_analyzer.extract_achievements(notes),
                next_steps=[item.description for item in action_items if not item.completed],
                follow_up_scheduled=self.text_analyzer.mentions_follow_up(notes),
                satisfaction_score=self.satisfaction_score(session),
            ),
            technical=TechnicalMetrics(
                connection_quality=self.connection_quality(len(issues)),
                platform_used=session.technical_details.meeting_platform,
                issues_encountered=issues,
            ),
        )

    @staticmethod
    def participation(session: Session, role: ParticipantRole) -> int:
        """Share of chat messages sent by one role, 50 when nobody has chatted"""
        chat_log = session.technical_details.chat_log
        if not chat_log:
            return UNKNOWN_PARTICIPATION
        senders = {role.value, session.participants.id_for(role)}
        authored = sum(1 for entry in chat_log if entry.sender in senders)
        return round_half_up(authored / len(chat_log) * 100)

    @staticmethod
    def satisfaction_score(session: Session) -> float:
        ratings = [
            r for r in (session.feedback.mentor.rating, session.feedback.mentee.rating)
            if r is not None and r > 0
        ]
        if not ratings:
            return 0.0
        return sum(ratings) / len(ratings)

    @staticmethod
    def connection_quality(issue_count: int) -> ConnectionQuality:
        if issue_count == 0:
            return ConnectionQuality.EXCELLENT
        if issue_count <= 2:
            return ConnectionQuality.GOOD
        if issue_count <= 4:
            return ConnectionQuality.FAIR
        return ConnectionQuality.POOR

    @staticmethod
    def summarize(analytics: SessionAnalytics) -> SessionAnalyticsSummary:
        """Headline fields written back onto the session record"""
        engagement = analytics.engagement.mentee_participation
        if engagement >= 60:
            level = ParticipationLevel.HIGH
        elif engagement >= 30:
            level = ParticipationLevel.MEDIUM
        else:
            level = ParticipationLevel.LOW

        satisfaction = analytics.outcomes.satisfaction_score
        if satisfaction == 0:
            sentiment = Sentiment.NEUTRAL
        elif satisfaction >= 4:
            sentiment = Sentiment.POSITIVE
        elif satisfaction < 3:
            sentiment = Sentiment.NEGATIVE
        else:
            sentiment = Sentiment.NEUTRAL

        return SessionAnalyticsSummary(
            engagement_score=engagement,
            participation_level=level,
            key_topics=analytics.content.topics_covered[:KEY_TOPIC_COUNT],
            sentiment=sentiment,
            follow_up_required=(
                analytics.outcomes.follow_up_scheduled or bool(analytics.outcomes.next_steps)
            ),
        )

    def user_analytics(self, store: SessionStore, user_id: str, role: ParticipantRole) -> UserAnalytics:
        """Aggregate a user's sessions in one role; ratings come from the other participant"""
        sessions = store.get_sessions_for_user(user_id, role)
        completed = [s for s in sessions if s.status == SessionStatus.COMPLETED]

        ratings: List[float] = []
        for s in completed:
            counterpart = s.feedback.mentee if role == ParticipantRole.MENTOR else s.feedback.mentor
            if counterpart.rating is not None and counterpart.rating > 0:
                ratings.append(counterpart.rating)

        records = [a for a in (store.analytics.get(s.id) for s in completed) if a]
        average_engagement = (
            sum(
                (a.engagement.mentee_participation + a.engagement.mentor_participation) / 2
                for a in records
            ) / len(records)
            if records else 0.0
        )

        topic_counts = Counter(
            topic
            for s in completed
            for topic in self.text_analyzer.extract_topics(s.session_data.agenda, s.session_data.notes)
        )

        return UserAnalytics(
            total_sessions=len(sessions),
            completed_sessions=len(completed),
            average_rating=sum(ratings) / len(ratings) if ratings else 0.0,
            total_duration=sum(s.duration for s in completed),
            average_engagement=average_engagement,
            top_topics=[topic for topic, _ in topic_counts.most_common(TOP_TOPIC_COUNT)],
            satisfaction_trend=ratings[-SATISFACTION_TREND_LENGTH:],
        )
