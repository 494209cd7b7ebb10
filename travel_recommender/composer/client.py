"""
HTTP client the composer uses to reach the recommendation gateway.
"""

import json
from typing import Any

import aiohttp
from pydantic import ValidationError as PydanticValidationError

from travel_recommender.data.models import (
    Recommendation,
    RecommendationList,
    RecommendationRequest,
)
from travel_recommender.utils.error_handling import GatewayError
from travel_recommender.utils.helpers import truncate_text
from travel_recommender.utils.logging import get_logger

logger = get_logger(__name__)

HTTP_STATUS_OK = 200
HTTP_STATUS_REDIRECT = 300

SERVER_ERROR_FALLBACK = "The server returned an error."
INVALID_RESPONSE_MESSAGE = "The server returned an invalid response."
UNREACHABLE_MESSAGE = "Could not reach the recommendation service."


def _server_message(response_text: str) -> str:
    """Pick the server's reported message out of an error body."""
    try:
        data: Any = json.loads(response_text)
    except json.JSONDecodeError:
        return SERVER_ERROR_FALLBACK
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return SERVER_ERROR_FALLBACK


class GatewayClient:
    """Posts one recommendation request per call to the gateway."""

    def __init__(
        self,
        url: str,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize the client.

        Args:
            url: Full URL of the recommendations endpoint
            session: Shared session to use; a short-lived one is opened
                per request when omitted
            timeout: Total seconds allowed per request on the short-lived
                sessions; aiohttp's default when omitted
        """
        self.url = url
        self._session = session
        self._timeout = timeout

    def _open_session(self) -> aiohttp.ClientSession:
        if self._timeout is None:
            return aiohttp.ClientSession()
        timeout = aiohttp.ClientTimeout(total=self._timeout)
        return aiohttp.ClientSession(timeout=timeout)

    async def _post(
        self, session: aiohttp.ClientSession, payload: dict[str, Any]
    ) -> tuple[int, str]:
        async with session.post(self.url, json=payload) as response:
            return response.status, await response.text(errors="replace")

    async def fetch_recommendations(
        self, request: RecommendationRequest
    ) -> list[Recommendation]:
        """
        Send the request and decode the recommendation array.

        Raises:
            GatewayError: On a transport failure, a non-success status or a
                body that is not a recommendation array. The message is
                meant to be shown to the user.
        """
        payload = request.to_wire()
        try:
            if self._session is not None:
                status_code, response_text = await self._post(self._session, payload)
            else:
                async with self._open_session() as session:
                    status_code, response_text = await self._post(session, payload)
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.error(f"Connection error to {self.url}: {e!s}")
            raise GatewayError(str(e) or UNREACHABLE_MESSAGE, original_error=e) from e

        if not (HTTP_STATUS_OK <= status_code < HTTP_STATUS_REDIRECT):
            logger.warning(
                f"HTTP {status_code} from {self.url}: {truncate_text(response_text)}"
            )
            raise GatewayError(_server_message(response_text), status_code=status_code)

        try:
            return RecommendationList.validate_json(response_text)
        except PydanticValidationError as e:
            logger.error(f"Invalid recommendation payload from {self.url}: {e!s}")
            raise GatewayError(
                INVALID_RESPONSE_MESSAGE, status_code=status_code, original_error=e
            ) from e
