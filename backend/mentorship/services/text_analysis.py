"""
Keyword heuristics used by session analytics.

Naive substring matching over lowercased text. The keyword lists and limits
are fixed; swapping in a different analyzer only requires another
``TextAnalyzer`` implementation.
"""

from typing import List, Protocol, Sequence

INSIGHT_KEYWORDS = ("insight", "learned", "discovered")
ACHIEVEMENT_KEYWORDS = ("achieved", "completed", "accomplished")
FOLLOW_UP_KEYWORDS = ("follow-up", "next session")
CONNECTIVITY_KEYWORDS = ("connection", "audio", "video", "lag")

MAX_NOTE_TOPICS = 10
MAX_INSIGHTS = 5
MIN_TOPIC_WORD_LENGTH = 4


class TextAnalyzer(Protocol):
    def extract_topics(self, agenda: Sequence[str], notes: Sequence[str]) -> List[str]:
        ...

    def extract_insights(self, notes: Sequence[str]) -> List[str]:
        ...

    def extract_achievements(self, notes: Sequence[str]) -> List[str]:
        ...

    def mentions_follow_up(self, notes: Sequence[str]) -> bool:
        ...

    def technical_issues(self, messages: Sequence[str]) -> List[str]:
        ...


def _contains_any(text: str, keywords: Sequence[str]) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


class KeywordTextAnalyzer:
    """Substring and whitespace-token heuristics over notes and chat messages"""

    def extract_topics(self, agenda: Sequence[str], notes: Sequence[str]) -> List[str]:
        topics = list(agenda)
        note_words = 0
        for note in notes:
            for word in note.lower().split():
                if note_words >= MAX_NOTE_TOPICS:
                    return topics
                if len(word) >= MIN_TOPIC_WORD_LENGTH and word not in topics:
                    topics.append(word)
                    note_words += 1
        return topics

    def extract_insights(self, notes: Sequence[str]) -> List[str]:
        return [n for n in notes if _contains_any(n, INSIGHT_KEYWORDS)][:MAX_INSIGHTS]

    def extract_achievements(self, notes: Sequence[str]) -> List[str]:
        return [n for n in notes if _contains_any(n, ACHIEVEMENT_KEYWORDS)]

    def mentions_follow_up(self, notes: Sequence[str]) -> bool:
        return any(_contains_any(n, FOLLOW_UP_KEYWORDS) for n in notes)

    def technical_issues(self, messages: Sequence[str]) -> List[str]:
        return [m for m in messages if _contains_any(m, CONNECTIVITY_KEYWORDS)]
