"""
AWS Lambda handler for the recommendation gateway.

Entry point for API Gateway proxy integrations (REST API v1 and HTTP API
v2 payloads). Builds the gateway from the environment on every invocation
and wraps its reply in a proxy response.
"""

import asyncio
import base64
from typing import Any

from travel_recommender.config import GatewayConfig
from travel_recommender.data.models import ErrorResponse
from travel_recommender.gateway import (
    HTTP_BAD_REQUEST,
    INVALID_BODY_MESSAGE,
    GatewayResponse,
    RecommendationGateway,
)
from travel_recommender.utils.logging import get_logger

logger = get_logger(__name__)

_RESPONSE_HEADERS = {"Content-Type": "application/json"}


def _get_gateway() -> RecommendationGateway:
    return RecommendationGateway(GatewayConfig.from_env())


def route_event(event: dict[str, Any]) -> tuple[str, str | None]:
    """
    Parse a proxy event and extract the HTTP method and raw body.

    Raises:
        ValueError: If a base64-encoded body cannot be decoded
    """
    method = event.get("httpMethod")
    if not method:
        method = event.get("requestContext", {}).get("http", {}).get("method", "")

    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        body = base64.b64decode(body, validate=True).decode("utf-8")

    return method, body


def to_proxy_response(response: GatewayResponse) -> dict[str, Any]:
    return {
        "statusCode": response.status_code,
        "headers": dict(_RESPONSE_HEADERS),
        "body": response.body,
    }


async def async_handler(event: dict[str, Any]) -> dict[str, Any]:
    """Main async handler."""
    try:
        method, body = route_event(event)
    except ValueError as e:
        logger.warning(f"Could not decode request body: {e!s}")
        return to_proxy_response(
            GatewayResponse(
                HTTP_BAD_REQUEST,
                ErrorResponse(message=INVALID_BODY_MESSAGE, error=str(e)).to_wire(),
            )
        )
    logger.debug(f"Received {method or 'unknown'} request")

    response = await _get_gateway().handle(method, body)
    return to_proxy_response(response)


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Lambda entry point (sync wrapper)."""
    return asyncio.run(async_handler(event))
