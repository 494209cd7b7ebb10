"""
Data models for the Travel Recommender.
"""

from travel_recommender.data.models import (
    MISSING_INPUT_MESSAGE,
    ErrorResponse,
    ImageAttachment,
    Recommendation,
    RecommendationList,
    RecommendationRequest,
)

__all__ = [
    "MISSING_INPUT_MESSAGE",
    "ErrorResponse",
    "ImageAttachment",
    "Recommendation",
    "RecommendationList",
    "RecommendationRequest",
]
