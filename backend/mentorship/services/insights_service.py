"""
Career insights derived from a profile snapshot
"""

from typing import List, Optional

from ..models.profile import UserProfile
from ..models.recommendation import CareerInsight, InsightType

SPECIALIZATION_SKILL_COUNT = 5


class InsightGenerator:
    """Fixed-order checks over a profile; every check that holds adds one insight"""

    def generate(self, profile: Optional[UserProfile]) -> List[CareerInsight]:
        if profile is None:
            return []

        insights: List[CareerInsight] = []

        if "JavaScript" in profile.skills or "React" in profile.skills:
            insights.append(CareerInsight(
                type=InsightType.OPPORTUNITY,
                title="High Demand for Frontend Skills",
                description=(
                    "Frontend development skills are in high demand. "
                    "Consider specializing in modern frameworks."
                ),
                impact="high",
                timeframe="immediate",
                action_required=True,
                related_skills=["React", "Vue", "Angular", "TypeScript"],
                market_trends=["Remote work opportunities", "High salary potential", "Growing market"],
            ))

        wants_data_science = any("data science" in goal.lower() for goal in profile.goals)
        knows_python = any("python" in skill.lower() for skill in profile.skills)
        if wants_data_science and not knows_python:
            insights.append(CareerInsight(
                type=InsightType.WARNING,
                title="Missing Core Data Science Skill",
                description="Python is essential for data science. Consider learning it to achieve your goals.",
                impact="high",
                timeframe="short-term",
                action_required=True,
                related_skills=["Python", "Pandas", "NumPy", "Matplotlib"],
            ))

        if len(profile.skills) >= SPECIALIZATION_SKILL_COUNT:
            insights.append(CareerInsight(
                type=InsightType.ACHIEVEMENT,
                title="Strong Skill Foundation",
                description=(
                    "You have a solid foundation of skills. "
                    "Consider specializing in a specific area."
                ),
                impact="medium",
                timeframe="medium-term",
                action_required=False,
                related_skills=list(profile.skills),
            ))

        return insights
