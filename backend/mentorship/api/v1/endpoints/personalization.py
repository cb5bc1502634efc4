"""Recommendations, learning paths and career insights.

Profiles are supplied by the caller on every request; nothing here stores them.
"""
from typing import List, Optional

from fastapi import APIRouter, Body, HTTPException, status
from pydantic import ValidationError

from ....models.api import LearningPathRequest, ProfileMergeRequest
from ....models.profile import UserProfile, merge_profile
from ....models.recommendation import CareerInsight, LearningPath, PersonalizedRecommendation
from ....services.insights_service import InsightGenerator
from ....services.learning_path import LearningPathGenerator
from ....services.recommendations import RecommendationEngine

router = APIRouter()


@router.post("/recommendations", response_model=List[PersonalizedRecommendation])
def get_recommendations(profile: Optional[UserProfile] = Body(None)):
    return RecommendationEngine().generate(profile)


@router.post("/learning-path", response_model=LearningPath)
def get_learning_path(request: LearningPathRequest):
    return LearningPathGenerator().generate_path(request.goal, request.profile)


@router.post("/insights", response_model=List[CareerInsight])
def get_career_insights(profile: Optional[UserProfile] = Body(None)):
    return InsightGenerator().generate(profile)


@router.post("/profile/merge", response_model=UserProfile)
def merge_user_profile(request: ProfileMergeRequest):
    try:
        return merge_profile(request.profile, request.updates)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.errors())
