"""
Personalized recommendation engine.

Takes a caller-supplied profile snapshot and returns ranked suggestions from
five independent generators: skill, career, learning, project and networking.
"""

import logging
from typing import List, Optional

from ..models.profile import UserProfile
from ..models.recommendation import (
    Difficulty,
    PersonalizedRecommendation,
    Priority,
    RecommendationResource,
    RecommendationType,
)
from .skills import (
    estimate_learning_time,
    skill_difficulty,
    skill_gaps,
    skill_priority,
    skill_relevance,
    slugify,
)

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 10


def _rank_key(recommendation: PersonalizedRecommendation):
    return (recommendation.priority != Priority.URGENT, -recommendation.relevance_score)


class RecommendationEngine:
    def __init__(self, limit: int = MAX_RECOMMENDATIONS):
        self.limit = limit

    def generate(self, profile: Optional[UserProfile]) -> List[PersonalizedRecommendation]:
        """Urgent items first, then by relevance; at most ``limit`` items"""
        if profile is None or profile.is_empty():
            return self.default_recommendations()

        recommendations: List[PersonalizedRecommendation] = []
        recommendations.extend(self.skill_recommendations(profile))
        recommendations.extend(self.career_recommendations(profile))
        recommendations.extend(self.learning_recommendations(profile))
        recommendations.extend(self.project_recommendations(profile))
        recommendations.extend(self.networking_recommendations(profile))

        ranked = sorted(recommendations, key=_rank_key)
        logger.debug(
            f"Generated {len(recommendations)} recommendations for {profile.id}, "
            f"returning {min(len(ranked), self.limit)}"
        )
        return ranked[:self.limit]

    def skill_recommendations(self, profile: UserProfile) -> List[PersonalizedRecommendation]:
        recommendations = []
        for skill in skill_gaps(profile.goals, profile.skills):
            difficulty = skill_difficulty(skill)
            recommendations.append(PersonalizedRecommendation(
                id=f"skill-{slugify(skill)}",
                type=RecommendationType.SKILL,
                title=f"Learn {skill}",
                description=f"Master {skill} to advance your career goals",
                priority=skill_priority(skill, profile.goals, profile.interests),
                estimated_time=estimate_learning_time(skill, difficulty),
                difficulty=difficulty,
                relevance_score=skill_relevance(skill, profile.goals, profile.interests),
                personalization_factors=[
                    f"Required for: {', '.join(profile.goals)}",
                    f"Matches your interests: {', '.join(profile.interests)}",
                    f"Appropriate for {profile.experience_level} level",
                ],
                action_items=[
                    f"Find a comprehensive {skill} tutorial",
                    f"Practice with {skill} exercises",
                    f"Build a small {skill} project",
                    f"Join {skill} community forums",
                    f"Read {skill} documentation",
                ],
                resources=[
                    RecommendationResource(
                        title=f"{skill} Official Documentation",
                        type="article",
                        description=f"Official documentation for {skill}",
                        url=f"https://{skill.lower()}.org/docs",
                    ),
                    RecommendationResource(
                        title=f"{skill} Tutorial Series",
                        type="video",
                        description=f"Comprehensive video tutorial for {skill}",
                        url=f"https://youtube.com/search?q={skill}+tutorial",
                    ),
                ],
            ))
        return recommendations

    def career_recommendations(self, profile: UserProfile) -> List[PersonalizedRecommendation]:
        recommendations = []
        if profile.experience_level == "beginner":
            recommendations.append(PersonalizedRecommendation(
                id="career-internship",
                type=RecommendationType.CAREER,
                title="Apply for Internships",
                description="Gain practical experience through internships in your field",
                priority=Priority.HIGH,
                estimated_time="2-4 weeks",
                difficulty=Difficulty.BEGINNER,
                relevance_score=90,
                personalization_factors=[
                    "Perfect for beginner level",
                    "Builds practical experience",
                    "Networking opportunity",
                ],
                action_items=[
                    "Research companies in your area",
                    "Prepare your resume and portfolio",
                    "Practice interview skills",
                    "Apply to 5-10 positions",
                ],
                resources=[_guide("internship", "Internship Guide", "Comprehensive guide to internships")],
            ))

        industries = profile.career_preferences.industry if profile.career_preferences else []
        for industry in industries:
            recommendations.append(PersonalizedRecommendation(
                id=f"career-{slugify(industry)}",
                type=RecommendationType.CAREER,
                title=f"Explore {industry} Opportunities",
                description=f"Discover career paths and opportunities in {industry}",
                priority=Priority.MEDIUM,
                estimated_time="1-2 weeks",
                difficulty=Difficulty.INTERMEDIATE,
                relevance_score=80,
                personalization_factors=[
                    f"Matches your industry interest: {industry}",
                    "Aligns with career preferences",
                ],
                action_items=[
                    f"Research {industry} companies",
                    "Connect with professionals in the field",
                    "Learn industry-specific skills",
                    "Attend industry events",
                ],
                resources=[
                    _guide(industry, f"{industry} Industry Report", f"Latest trends in {industry}", "trends")
                ],
            ))
        return recommendations

    def learning_recommendations(self, profile: UserProfile) -> List[PersonalizedRecommendation]:
        recommendations = []
        learning_format = profile.learning_preferences.format if profile.learning_preferences else None
        if learning_format:
            recommendations.append(PersonalizedRecommendation(
                id=f"learning-{learning_format}",
                type=RecommendationType.COURSE,
                title=f"Optimize Your {learning_format.capitalize()} Learning",
                description=f"Enhance your learning experience with {learning_format}-focused resources",
                priority=Priority.MEDIUM,
                estimated_time="1 week",
                difficulty=Difficulty.BEGINNER,
                relevance_score=75,
                personalization_factors=[
                    f"Matches your learning style: {learning_format}",
                    "Improves learning efficiency",
                ],
                action_items=[
                    f"Find {learning_format} learning resources",
                    "Set up your learning environment",
                    "Create a learning schedule",
                    "Track your progress",
                ],
                resources=[
                    _guide(
                        learning_format,
                        f"{learning_format} Learning Resources",
                        f"Best {learning_format} learning resources",
                        "learning",
                    )
                ],
            ))

        for interest in profile.interests:
            recommendations.append(PersonalizedRecommendation(
                id=f"learning-{slugify(interest)}",
                type=RecommendationType.COURSE,
                title=f"Deep Dive into {interest}",
                description=f"Explore advanced topics in {interest} to expand your expertise",
                priority=Priority.MEDIUM,
                estimated_time="2-4 weeks",
                difficulty=Difficulty.INTERMEDIATE,
                relevance_score=85,
                personalization_factors=[
                    f"Matches your interest: {interest}",
                    "Builds specialized knowledge",
                ],
                action_items=[
                    f"Research advanced {interest} topics",
                    "Find expert resources",
                    "Join specialized communities",
                    "Practice with projects",
                ],
                resources=[RecommendationResource(
                    title=f"{interest} Community",
                    type="community",
                    description=f"Join the {interest} community",
                    url=f"https://example.com/{slugify(interest)}-community",
                )],
            ))
        return recommendations

    def project_recommendations(self, profile: UserProfile) -> List[PersonalizedRecommendation]:
        return [
            PersonalizedRecommendation(
                id=f"project-{slugify(skill)}",
                type=RecommendationType.PROJECT,
                title=f"Build a {skill} Project",
                description=f"Create a practical project to showcase your {skill} abilities",
                priority=Priority.HIGH,
                estimated_time="1-3 weeks",
                difficulty=skill_difficulty(skill),
                relevance_score=90,
                personalization_factors=[
                    f"Uses your existing skill: {skill}",
                    "Builds portfolio",
                    "Practical application",
                ],
                action_items=[
                    f"Plan your {skill} project",
                    "Set up development environment",
                    "Implement core features",
                    "Document and showcase",
                ],
                resources=[
                    _guide(skill, f"{skill} Project Ideas", f"Project ideas for {skill}", "projects")
                ],
            )
            for skill in profile.skills
        ]

    def networking_recommendations(self, profile: UserProfile) -> List[PersonalizedRecommendation]:
        return [_networking_recommendation()]

    def default_recommendations(self) -> List[PersonalizedRecommendation]:
        """Shown when there is no usable profile, so every user sees something"""
        return [
            PersonalizedRecommendation(
                id="default-1",
                type=RecommendationType.SKILL,
                title="Learn JavaScript",
                description="JavaScript is essential for web development",
                priority=Priority.HIGH,
                estimated_time="4-6 weeks",
                difficulty=Difficulty.BEGINNER,
                relevance_score=80,
                personalization_factors=["High demand skill"],
                action_items=["Find JavaScript tutorial", "Practice coding exercises"],
            ),
            _networking_recommendation(),
        ]


def _guide(subject: str, title: str, description: str, suffix: str = "guide") -> RecommendationResource:
    return RecommendationResource(
        title=title,
        type="article",
        description=description,
        url=f"https://example.com/{slugify(subject)}-{suffix}",
    )


def _networking_recommendation() -> PersonalizedRecommendation:
    return PersonalizedRecommendation(
        id="networking-community",
        type=RecommendationType.NETWORKING,
        title="Join Professional Communities",
        description="Connect with like-minded professionals and expand your network",
        priority=Priority.MEDIUM,
        estimated_time="Ongoing",
        difficulty=Difficulty.BEGINNER,
        relevance_score=80,
        personalization_factors=[
            "Builds professional network",
            "Learning opportunities",
            "Career advancement",
        ],
        action_items=[
            "Join online communities",
            "Attend local meetups",
            "Participate in discussions",
            "Share your knowledge",
        ],
        resources=[RecommendationResource(
            title="Professional Networking",
            type="community",
            description="Connect with professionals",
            url="https://linkedin.com",
        )],
    )
