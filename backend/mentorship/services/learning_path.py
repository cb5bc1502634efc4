import logging
from typing import List, Optional

from ..core.numbers import round_half_up
from ..models.profile import UserProfile
from ..models.recommendation import Difficulty, LearningPath, Milestone
from .skills import (
    duration_weeks,
    estimate_learning_time,
    skill_difficulty,
    skill_gaps,
    slugify,
)

logger = logging.getLogger(__name__)


def total_duration(milestones: List[Milestone]) -> str:
    """Sum milestone week estimates into a coarse label"""
    weeks = sum(duration_weeks(m.duration) for m in milestones)
    if weeks < 4:
        return f"{weeks} weeks"
    if weeks < 12:
        return f"{round_half_up(weeks / 4)} months"
    return f"{round_half_up(weeks / 12)} months"


def path_difficulty(experience_level: str, gap_count: int) -> Difficulty:
    if experience_level == "beginner" or gap_count <= 2:
        return Difficulty.BEGINNER
    if experience_level == "advanced" or gap_count >= 5:
        return Difficulty.ADVANCED
    return Difficulty.INTERMEDIATE


class LearningPathGenerator:
    """Builds a milestone plan that closes the skill gaps for one goal"""

    def generate_path(self, goal: str, profile: Optional[UserProfile]) -> LearningPath:
        if profile is None:
            return self.default_path(goal)

        gaps = skill_gaps([goal], profile.skills)
        milestones = [
            Milestone(
                title=f"Master {skill}",
                description=f"Learn and practice {skill} fundamentals",
                duration=estimate_learning_time(skill, skill_difficulty(skill)),
                skills=[skill],
                projects=[f"Build a {skill} project"],
            )
            for skill in gaps
        ]
        learning_format = (
            profile.learning_preferences.format if profile.learning_preferences else None
        ) or "mixed"

        path = LearningPath(
            id=f"path-{slugify(goal)}",
            title=f"Path to {goal}",
            description=f"A personalized learning path to achieve your goal of {goal}",
            total_duration=total_duration(milestones),
            difficulty=path_difficulty(profile.experience_level, len(gaps)),
            skills=gaps,
            milestones=milestones,
            personalized_for=[
                f"Experience level: {profile.experience_level}",
                f"Learning style: {learning_format}",
                f"Interests: {', '.join(profile.interests)}",
            ],
        )
        logger.debug(f"Learning path {path.id} for {profile.id}: {len(milestones)} milestones")
        return path

    @staticmethod
    def default_path(goal: str) -> LearningPath:
        return LearningPath(
            id=f"default-{slugify(goal)}",
            title=f"Path to {goal}",
            description=f"A learning path to achieve {goal}",
            total_duration="3-6 months",
            difficulty=Difficulty.INTERMEDIATE,
            skills=["Basic Skills"],
            milestones=[Milestone(
                title="Learn Fundamentals",
                description="Master the basics",
                duration="1-2 months",
                skills=["Fundamentals"],
                projects=["Basic Project"],
            )],
            personalized_for=["Default path"],
        )
