"""
Recommendation gateway.

A stateless request handler: it checks the method and the server
configuration, validates the submitted profile, asks Gemini for three
recommendations and relays either the bare recommendation array or a
normalized error object. Every failure is turned into a response here;
nothing propagates to the caller as an exception.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from travel_recommender.agents.recommendation import RecommendationAgent
from travel_recommender.config import GatewayConfig
from travel_recommender.data.models import ErrorResponse, RecommendationRequest
from travel_recommender.utils.error_handling import ValidationError
from travel_recommender.utils.logging import get_logger

logger = get_logger(__name__)

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_METHOD_NOT_ALLOWED = 405
HTTP_SERVER_ERROR = 500

METHOD_NOT_ALLOWED_MESSAGE = "Method Not Allowed"
MISSING_API_KEY_MESSAGE = "API key is not configured on the server."
INVALID_BODY_MESSAGE = "Invalid request body."
FAILED_MESSAGE = "Failed to get recommendations."

AgentFactory = Callable[[GatewayConfig], RecommendationAgent]


@dataclass
class GatewayResponse:
    """Status code and JSON-compatible payload for one gateway call."""

    status_code: int
    payload: Any

    @property
    def ok(self) -> bool:
        return self.status_code == HTTP_OK

    @property
    def body(self) -> str:
        return json.dumps(self.payload)


def parse_request(body: str | bytes | dict[str, Any] | None) -> RecommendationRequest:
    """
    Decode a request body into a RecommendationRequest.

    Raises:
        ValueError: If the body is not JSON or does not match the request
            shape (pydantic's ValidationError is a ValueError)
    """
    data = json.loads(body) if isinstance(body, str | bytes | bytearray) else body
    return RecommendationRequest.model_validate(data)


class RecommendationGateway:
    """Relays recommendation requests to Gemini."""

    def __init__(
        self,
        config: GatewayConfig,
        agent_factory: AgentFactory = RecommendationAgent.from_config,
    ):
        """
        Initialize the gateway.

        Args:
            config: Gateway configuration holding the Gemini credential
            agent_factory: Builds the agent used for each request
        """
        self.config = config
        self._agent_factory = agent_factory

    @staticmethod
    def _error(
        status_code: int, message: str, detail: str | None = None
    ) -> GatewayResponse:
        return GatewayResponse(
            status_code, ErrorResponse(message=message, error=detail).to_wire()
        )

    async def handle(
        self, method: str, body: str | bytes | dict[str, Any] | None
    ) -> GatewayResponse:
        """
        Handle one submission.

        Args:
            method: HTTP method of the incoming call
            body: Raw JSON body, or an already decoded dict

        Returns:
            200 with the recommendations array, or an error status with
            {"message", "error"}
        """
        if method.upper() != "POST":
            return self._error(HTTP_METHOD_NOT_ALLOWED, METHOD_NOT_ALLOWED_MESSAGE)

        if not self.config.is_configured:
            logger.error("Rejecting request: GEMINI_API_KEY is not configured")
            return self._error(HTTP_SERVER_ERROR, MISSING_API_KEY_MESSAGE)

        try:
            request = parse_request(body)
        except ValueError as e:
            logger.warning(f"Rejecting malformed request body: {e!s}")
            return self._error(HTTP_BAD_REQUEST, INVALID_BODY_MESSAGE, str(e))

        try:
            request.ensure_complete()
        except ValidationError as e:
            logger.warning(f"Rejecting incomplete request: {e!s}")
            return self._error(HTTP_BAD_REQUEST, str(e))

        try:
            agent = self._agent_factory(self.config)
            recommendations = await agent.recommend(request)
        except Exception as e:
            logger.error(f"Error in recommendation gateway: {e!s}")
            return self._error(HTTP_SERVER_ERROR, FAILED_MESSAGE, str(e))

        logger.info(
            f"Returning {len(recommendations)} recommendation(s) for {request.city!r}"
        )
        return GatewayResponse(
            HTTP_OK, [item.model_dump() for item in recommendations]
        )
