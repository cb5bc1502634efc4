"""Tests for the personalized recommendation engine"""
import pytest

from mentorship.models.profile import CareerPreferences, LearningPreferences, UserProfile, merge_profile
from mentorship.models.recommendation import Difficulty, Priority, RecommendationType
from mentorship.services.recommendations import RecommendationEngine
from mentorship.services.skills import (
    estimate_learning_time,
    missing_skills,
    required_skills_for_goals,
    skill_priority,
    skill_relevance,
)


@pytest.fixture
def engine():
    return RecommendationEngine()


@pytest.fixture
def web_profile():
    return UserProfile(
        id="user-1",
        interests=["frontend"],
        goals=["web development"],
        experience_level="beginner",
        skills=["React"],
    )


class TestDefaults:
    def test_absent_profile_gets_defaults(self, engine):
        recommendations = engine.generate(None)

        assert recommendations
        assert recommendations[0].title == "Learn JavaScript"
        assert recommendations[0].estimated_time == "4-6 weeks"

    def test_empty_profile_gets_defaults(self, engine):
        recommendations = engine.generate(UserProfile(id="blank"))
        assert [r.id for r in recommendations] == [r.id for r in engine.generate(None)]


class TestSkillGenerator:
    def test_recommends_missing_web_skills_not_known_ones(self, engine, web_profile):
        skills = engine.skill_recommendations(web_profile)
        titles = {r.title for r in skills}

        assert titles & {"Learn HTML", "Learn CSS", "Learn JavaScript", "Learn Node.js"}
        assert "Learn React" not in titles

        ranked = engine.generate(web_profile)
        assert not any(r.type == RecommendationType.SKILL and r.title == "Learn React" for r in ranked)

    def test_skill_scores(self, engine, web_profile):
        javascript = next(r for r in engine.skill_recommendations(web_profile) if r.title == "Learn JavaScript")

        assert javascript.id == "skill-javascript"
        assert javascript.difficulty == Difficulty.BEGINNER
        assert javascript.priority == Priority.LOW
        assert javascript.relevance_score == 20
        assert javascript.estimated_time == "4-6 weeks"

    def test_bidirectional_known_skill_match(self):
        assert missing_skills(["Node.js", "CSS"], ["node.js developer"]) == ["CSS"]
        assert missing_skills(["React Native"], ["React"]) == []

    def test_goal_table_union_is_deduplicated(self):
        skills = required_skills_for_goals(["Data Science", "AI ML"])
        assert skills.count("Python") == 1
        assert skills[:5] == ["Python", "R", "SQL", "Machine Learning", "Statistics"]

    def test_unknown_goal_yields_no_skills(self):
        assert required_skills_for_goals(["gardening"]) == []


class TestScoring:
    def test_priority_thresholds(self):
        assert skill_priority("Python", ["learn python"], ["python scripting"]) == Priority.URGENT
        assert skill_priority("Rust", ["rust systems"], []) == Priority.HIGH
        assert skill_priority("Go", [], ["go"]) == Priority.MEDIUM
        assert skill_priority("SQL", [], []) == Priority.LOW

    def test_relevance_components(self):
        assert skill_relevance("Python", ["python"], ["python"]) == 90
        assert skill_relevance("Python", [], []) == 20

    def test_learning_time_lookup(self):
        assert estimate_learning_time("Machine Learning", Difficulty.ADVANCED) == "3-6 months"
        assert estimate_learning_time("Figma", Difficulty.INTERMEDIATE) == "2-4 weeks"


class TestRanking:
    def test_urgent_first_then_relevance(self, engine):
        profile = UserProfile(
            id="user-2",
            goals=["python data science"],
            interests=["python"],
            skills=["Excel"],
            experience_level="intermediate",
        )

        recommendations = engine.generate(profile)

        assert recommendations[0].priority == Priority.URGENT
        assert recommendations[0].title == "Learn Python"
        rest = [r.relevance_score for r in recommendations if r.priority != Priority.URGENT]
        assert rest == sorted(rest, reverse=True)

    def test_capped_at_ten(self, engine):
        profile = UserProfile(
            id="user-3",
            goals=["web development", "data science"],
            interests=["design", "music", "robotics"],
            skills=["Excel", "Word", "Photoshop"],
            learning_preferences=LearningPreferences(format="visual"),
            career_preferences=CareerPreferences(industry=["fintech", "health"]),
        )
        assert len(engine.generate(profile)) == 10


class TestOtherGenerators:
    def test_beginner_gets_internship(self, engine, web_profile):
        ids = [r.id for r in engine.career_recommendations(web_profile)]
        assert ids == ["career-internship"]

    def test_unstated_experience_level_is_not_treated_as_beginner(self, engine):
        profile = UserProfile(id="user-6", goals=["web development"])

        assert engine.career_recommendations(profile) == []
        assert "career-internship" not in [r.id for r in engine.generate(profile)]

    def test_industry_items(self, engine):
        profile = UserProfile(
            id="user-4",
            experience_level="advanced",
            career_preferences=CareerPreferences(industry=["Fintech"]),
        )
        [item] = engine.career_recommendations(profile)

        assert item.title == "Explore Fintech Opportunities"
        assert item.priority == Priority.MEDIUM
        assert item.relevance_score == 80

    def test_learning_items(self, engine):
        profile = UserProfile(
            id="user-5",
            interests=["Cloud", "Security"],
            learning_preferences=LearningPreferences(format="hands-on"),
        )
        items = engine.learning_recommendations(profile)

        assert [r.relevance_score for r in items] == [75, 85, 85]
        assert items[1].title == "Deep Dive into Cloud"

    def test_project_per_known_skill(self, engine, web_profile):
        [project] = engine.project_recommendations(web_profile)

        assert project.title == "Build a React Project"
        assert project.priority == Priority.HIGH
        assert project.relevance_score == 90

    def test_networking_always_present(self, engine, web_profile):
        [item] = engine.networking_recommendations(web_profile)
        assert item.title == "Join Professional Communities"
        assert item.estimated_time == "Ongoing"


class TestProfileMerge:
    def test_shallow_overwrite(self, web_profile):
        merged = merge_profile(web_profile, {"skills": ["HTML"], "experience_level": "intermediate"})

        assert merged.skills == ["HTML"]
        assert merged.goals == ["web development"]
        assert merged.experience_level == "intermediate"
        assert web_profile.skills == ["React"]

    def test_merge_into_absent_profile(self):
        merged = merge_profile(None, {"id": "new-user", "goals": ["ui ux"]})
        assert merged.id == "new-user"
        assert merged.goals == ["ui ux"]
