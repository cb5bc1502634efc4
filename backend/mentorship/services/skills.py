"""
Goal-to-skill knowledge shared by the recommendation, learning path and
insight generators. All tables are fixed; scores derived from them are part of
the engines' observable behaviour.
"""

import re
from typing import Dict, List, Sequence

from ..models.recommendation import Difficulty, Priority

GOAL_SKILL_MAP: Dict[str, List[str]] = {
    "web development": ["HTML", "CSS", "JavaScript", "React", "Node.js"],
    "mobile development": ["React Native", "Flutter", "Swift", "Kotlin"],
    "data science": ["Python", "R", "SQL", "Machine Learning", "Statistics"],
    "ai ml": ["Python", "TensorFlow", "PyTorch", "Machine Learning", "Deep Learning"],
    "cybersecurity": ["Network Security", "Ethical Hacking", "Risk Assessment"],
    "ui ux": ["Figma", "Adobe XD", "User Research", "Prototyping", "Design Systems"],
}

BEGINNER_SKILLS = frozenset({"HTML", "CSS", "JavaScript", "Python", "SQL"})
ADVANCED_SKILLS = frozenset({"Machine Learning", "System Design", "DevOps", "Microservices"})
HIGH_DEMAND_SKILLS = frozenset({"JavaScript", "Python", "React", "Node.js", "SQL"})

LEARNING_TIME: Dict[Difficulty, Dict[str, str]] = {
    Difficulty.BEGINNER: {"HTML": "1-2 weeks", "CSS": "2-3 weeks", "JavaScript": "4-6 weeks"},
    Difficulty.INTERMEDIATE: {"React": "3-4 weeks", "Node.js": "4-6 weeks", "Python": "6-8 weeks"},
    Difficulty.ADVANCED: {"Machine Learning": "3-6 months", "System Design": "2-4 months"},
}
DEFAULT_LEARNING_TIME = "2-4 weeks"
DEFAULT_MILESTONE_WEEKS = 2


def required_skills_for_goals(goals: Sequence[str]) -> List[str]:
    """Union of the skills of every table entry whose key occurs in a goal, first-seen order"""
    skills: List[str] = []
    for goal in goals:
        goal_lower = goal.lower()
        for key, key_skills in GOAL_SKILL_MAP.items():
            if key in goal_lower:
                skills.extend(key_skills)
    return list(dict.fromkeys(skills))


def _matches(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    return a in b or b in a


def missing_skills(required: Sequence[str], known: Sequence[str]) -> List[str]:
    """Required skills with no known skill matching in either direction"""
    return [
        skill for skill in required
        if not any(_matches(skill, user_skill) for user_skill in known)
    ]


def skill_gaps(goals: Sequence[str], known: Sequence[str]) -> List[str]:
    return missing_skills(required_skills_for_goals(goals), known)


def skill_difficulty(skill: str) -> Difficulty:
    if skill in ADVANCED_SKILLS:
        return Difficulty.ADVANCED
    if skill in BEGINNER_SKILLS:
        return Difficulty.BEGINNER
    return Difficulty.INTERMEDIATE


def _mentioned_in(skill: str, texts: Sequence[str]) -> bool:
    skill_lower = skill.lower()
    return any(skill_lower in text.lower() for text in texts)


def skill_priority(skill: str, goals: Sequence[str], interests: Sequence[str]) -> Priority:
    score = 0
    if _mentioned_in(skill, goals):
        score += 3
    if _mentioned_in(skill, interests):
        score += 2
    if skill in HIGH_DEMAND_SKILLS:
        score += 1

    if score >= 4:
        return Priority.URGENT
    if score >= 3:
        return Priority.HIGH
    if score >= 2:
        return Priority.MEDIUM
    return Priority.LOW


def skill_relevance(skill: str, goals: Sequence[str], interests: Sequence[str]) -> int:
    score = 20
    if _mentioned_in(skill, goals):
        score += 40
    if _mentioned_in(skill, interests):
        score += 30
    return min(100, score)


def estimate_learning_time(skill: str, difficulty: Difficulty) -> str:
    return LEARNING_TIME.get(difficulty, {}).get(skill, DEFAULT_LEARNING_TIME)


def duration_weeks(duration: str) -> int:
    """First integer in a duration label; "3-6 months" counts as 3"""
    match = re.search(r"\d+", duration)
    return int(match.group()) if match else DEFAULT_MILESTONE_WEEKS


def slugify(text: str) -> str:
    return re.sub(r"\s+", "-", text.lower())
