"""Tests for learning path generation and career insights"""
import pytest

from mentorship.models.profile import LearningPreferences, UserProfile
from mentorship.models.recommendation import Difficulty, InsightType, Milestone
from mentorship.services.insights_service import InsightGenerator
from mentorship.services.learning_path import LearningPathGenerator, path_difficulty, total_duration


@pytest.fixture
def generator():
    return LearningPathGenerator()


def milestones(*durations):
    return [Milestone(title="m", description="d", duration=d) for d in durations]


class TestLearningPath:
    def test_default_path_without_profile(self, generator):
        path = generator.generate_path("web development", None)

        assert path.title == "Path to web development"
        assert path.total_duration == "3-6 months"
        assert path.milestones[0].title == "Learn Fundamentals"

    def test_milestone_per_missing_skill(self, generator):
        profile = UserProfile(
            id="user-1",
            skills=["HTML", "CSS"],
            interests=["design"],
            experience_level="intermediate",
            learning_preferences=LearningPreferences(format="visual"),
        )

        path = generator.generate_path("Web Development", profile)

        assert path.id == "path-web-development"
        assert path.skills == ["JavaScript", "React", "Node.js"]
        assert [m.title for m in path.milestones] == [
            "Master JavaScript", "Master React", "Master Node.js",
        ]
        assert path.milestones[0].duration == "4-6 weeks"
        assert path.milestones[0].projects == ["Build a JavaScript project"]
        assert path.difficulty == Difficulty.INTERMEDIATE
        assert "Learning style: visual" in path.personalized_for

    def test_total_duration_for_full_web_path(self, generator):
        profile = UserProfile(id="user-2", experience_level="advanced")
        path = generator.generate_path("web development", profile)

        # HTML 1 + CSS 2 + JavaScript 4 + React 3 + Node.js 4 weeks
        assert path.total_duration == "1 months"
        assert path.difficulty == Difficulty.ADVANCED

    def test_unstated_experience_level_follows_gap_count(self, generator):
        path = generator.generate_path("cybersecurity", UserProfile(id="user-4"))
        assert path.difficulty == Difficulty.INTERMEDIATE

    def test_learning_style_defaults_to_mixed(self, generator):
        path = generator.generate_path("ui ux", UserProfile(id="user-3"))
        assert "Learning style: mixed" in path.personalized_for


class TestPathHelpers:
    @pytest.mark.parametrize("durations, expected", [
        (("1-2 weeks",), "1 weeks"),
        (("2-3 weeks", "1-2 weeks"), "3 weeks"),
        (("4-6 weeks", "2-4 weeks"), "2 months"),
        (("6-8 weeks", "4-6 weeks", "3-4 weeks"), "1 months"),
        (("soon",), "2 weeks"),
    ])
    def test_total_duration_buckets(self, durations, expected):
        assert total_duration(milestones(*durations)) == expected

    def test_no_milestones(self):
        assert total_duration([]) == "0 weeks"

    def test_difficulty_rules(self):
        assert path_difficulty("beginner", 6) == Difficulty.BEGINNER
        assert path_difficulty("intermediate", 2) == Difficulty.BEGINNER
        assert path_difficulty("intermediate", 5) == Difficulty.ADVANCED
        assert path_difficulty("advanced", 3) == Difficulty.ADVANCED
        assert path_difficulty("intermediate", 3) == Difficulty.INTERMEDIATE


class TestCareerInsights:
    def test_no_profile_no_insights(self):
        assert InsightGenerator().generate(None) == []

    def test_frontend_opportunity(self):
        [insight] = InsightGenerator().generate(UserProfile(id="u", skills=["React"]))
        assert insight.type == InsightType.OPPORTUNITY
        assert insight.market_trends

    def test_data_science_without_python_warns(self):
        profile = UserProfile(id="u", goals=["Become a Data Science lead"], skills=["SQL"])
        [insight] = InsightGenerator().generate(profile)

        assert insight.type == InsightType.WARNING
        assert "Python" in insight.related_skills

    def test_python_skill_silences_warning(self):
        profile = UserProfile(id="u", goals=["data science"], skills=["Python 3"])
        assert InsightGenerator().generate(profile) == []

    def test_all_insights_fire_in_order(self):
        profile = UserProfile(
            id="u",
            goals=["data science"],
            skills=["JavaScript", "HTML", "CSS", "SQL", "Excel"],
        )

        insights = InsightGenerator().generate(profile)

        assert [i.type for i in insights] == [
            InsightType.OPPORTUNITY, InsightType.WARNING, InsightType.ACHIEVEMENT,
        ]
        assert insights[2].related_skills == profile.skills
