"""
Recommendation agent for multimodal travel suggestions.

Sends the profile text and every attached image to Gemini in one request,
constrained to a JSON schema, and decodes the generated recommendations.
"""

import json
from typing import Any

from google.genai import errors, types
from pydantic import ValidationError as PydanticValidationError

from travel_recommender.agents.base import AgentConfig, BaseAgent
from travel_recommender.config import DEFAULT_MODEL, GatewayConfig
from travel_recommender.data.models import (
    Recommendation,
    RecommendationList,
    RecommendationRequest,
)
from travel_recommender.prompts.templates import (
    RECOMMENDATION_SCHEMA,
    build_recommendation_prompt,
)
from travel_recommender.utils.error_handling import (
    InvalidResponseError,
    UpstreamError,
)
from travel_recommender.utils.helpers import truncate_text
from travel_recommender.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_STRUCTURE_MESSAGE = "Invalid response structure from Gemini API."


class RecommendationAgent(BaseAgent):
    """Agent for generating personalized travel recommendations."""

    def __init__(self, api_key: str | None, model: str = DEFAULT_MODEL):
        config = AgentConfig(
            name="Recommendation Agent",
            api_key=api_key,
            model=model,
        )
        super().__init__(config)

    @classmethod
    def from_config(cls, config: GatewayConfig) -> "RecommendationAgent":
        return cls(api_key=config.gemini_api_key, model=config.model)

    def _generation_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            temperature=self.config.temperature,
            max_output_tokens=self.config.max_tokens,
            response_mime_type="application/json",
            response_schema=RECOMMENDATION_SCHEMA,
        )

    async def recommend(self, request: RecommendationRequest) -> list[Recommendation]:
        """
        Generate recommendations for a profile, city and images.

        Args:
            request: The submission to build the prompt from

        Returns:
            The decoded recommendations, in model order

        Raises:
            UpstreamError: If Gemini answers with a non-success status
            InvalidResponseError: If the reply is missing the generated
                text or it does not decode to the expected shape
        """
        prompt = build_recommendation_prompt(request.city, request.profile)
        contents = self._build_contents(prompt, request.images)

        logger.info(
            f"Requesting recommendations for {request.city!r} "
            f"with {len(request.images)} image(s) from {self.config.model}"
        )

        try:
            response = await self.client.aio.models.generate_content(
                model=self.config.model,
                contents=contents,
                config=self._generation_config(),
            )
        except errors.APIError as e:
            raise UpstreamError(e.code, _error_body(e)) from e

        text = self._extract_text(response)
        logger.debug(f"Raw Gemini output: {truncate_text(text)}")
        return self._parse_recommendations(text)

    @staticmethod
    def _extract_text(response: types.GenerateContentResponse) -> str:
        """Return the text of the first part of the first candidate."""
        try:
            text = response.candidates[0].content.parts[0].text
        except (AttributeError, IndexError, TypeError) as e:
            raise InvalidResponseError(INVALID_STRUCTURE_MESSAGE) from e

        if not text:
            raise InvalidResponseError(INVALID_STRUCTURE_MESSAGE)
        return text

    @staticmethod
    def _parse_recommendations(text: str) -> list[Recommendation]:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidResponseError(f"{INVALID_STRUCTURE_MESSAGE} {e!s}") from e

        if not isinstance(payload, dict) or "recommendations" not in payload:
            raise InvalidResponseError(INVALID_STRUCTURE_MESSAGE)

        try:
            return RecommendationList.validate_python(payload["recommendations"])
        except PydanticValidationError as e:
            raise InvalidResponseError(
                f"{INVALID_STRUCTURE_MESSAGE} {e.error_count()} invalid field(s)"
            ) from e


def _error_body(error: errors.APIError) -> str:
    """Diagnostic text for a failed Gemini call."""
    details: Any = error.details
    if details is None:
        return error.message or str(error)
    if isinstance(details, str):
        return details
    return json.dumps(details, default=str)
