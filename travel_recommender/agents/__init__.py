"""
Gemini agents for the Travel Recommender.
"""

from travel_recommender.agents.base import (
    AgentConfig,
    BaseAgent,
    InvalidConfigurationError,
)
from travel_recommender.agents.recommendation import RecommendationAgent

__all__ = [
    "AgentConfig",
    "BaseAgent",
    "InvalidConfigurationError",
    "RecommendationAgent",
]
