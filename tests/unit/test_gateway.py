"""Tests for the recommendation gateway."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import errors

from tests.unit.mock_gemini import SAMPLE_RECOMMENDATIONS, make_gemini_response
from travel_recommender.config import GatewayConfig
from travel_recommender.data.models import MISSING_INPUT_MESSAGE, Recommendation
from travel_recommender.gateway import (
    FAILED_MESSAGE,
    INVALID_BODY_MESSAGE,
    METHOD_NOT_ALLOWED_MESSAGE,
    MISSING_API_KEY_MESSAGE,
    GatewayResponse,
    RecommendationGateway,
    parse_request,
)
from travel_recommender.utils.error_handling import UpstreamError


@pytest.fixture
def request_body(sample_request):
    return json.dumps(sample_request.to_wire())


@pytest.fixture
def fake_agent():
    agent = MagicMock()
    agent.recommend = AsyncMock(
        return_value=[Recommendation(**item) for item in SAMPLE_RECOMMENDATIONS]
    )
    return agent


@pytest.fixture
def agent_factory(fake_agent):
    return MagicMock(return_value=fake_agent)


def test_parse_request_accepts_str_bytes_and_dict(request_body):
    from_str = parse_request(request_body)
    assert parse_request(request_body.encode()) == from_str
    assert parse_request(json.loads(request_body)) == from_str
    assert from_str.city == "Riga"
    assert from_str.images[0].mime_type == "image/png"


def test_gateway_response_body():
    response = GatewayResponse(200, [{"title": "T"}])
    assert response.ok
    assert json.loads(response.body) == [{"title": "T"}]


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "OPTIONS"])
async def test_rejects_non_post(gateway_config, agent_factory, request_body, method):
    gateway = RecommendationGateway(gateway_config, agent_factory=agent_factory)
    response = await gateway.handle(method, request_body)

    assert response.status_code == 405
    assert response.payload == {"message": METHOD_NOT_ALLOWED_MESSAGE}
    agent_factory.assert_not_called()


async def test_missing_api_key_makes_no_upstream_call(agent_factory, request_body):
    gateway = RecommendationGateway(GatewayConfig(), agent_factory=agent_factory)
    response = await gateway.handle("POST", request_body)

    assert response.status_code == 500
    assert response.payload == {"message": MISSING_API_KEY_MESSAGE}
    agent_factory.assert_not_called()


async def test_missing_api_key_with_real_agent(mock_genai, request_body):
    gateway = RecommendationGateway(GatewayConfig(gemini_api_key=""))
    response = await gateway.handle("POST", request_body)

    assert response.status_code == 500
    mock_genai.aio.models.generate_content.assert_not_called()


@pytest.mark.parametrize(
    "body",
    ["{not json", None, "[]", json.dumps({"city": "Riga", "images": "nope"})],
)
async def test_rejects_malformed_body(gateway_config, agent_factory, body):
    gateway = RecommendationGateway(gateway_config, agent_factory=agent_factory)
    response = await gateway.handle("POST", body)

    assert response.status_code == 400
    assert response.payload["message"] == INVALID_BODY_MESSAGE
    assert response.payload["error"]
    agent_factory.assert_not_called()


@pytest.mark.parametrize(
    "payload",
    [
        {"profile": "", "city": "Riga", "images": []},
        {"profile": "Loves jazz", "city": "", "images": []},
    ],
)
async def test_rejects_incomplete_request(gateway_config, agent_factory, payload):
    gateway = RecommendationGateway(gateway_config, agent_factory=agent_factory)
    response = await gateway.handle("POST", json.dumps(payload))

    assert response.status_code == 400
    assert response.payload == {"message": MISSING_INPUT_MESSAGE}
    agent_factory.assert_not_called()


async def test_returns_bare_recommendation_array(
    gateway_config, agent_factory, fake_agent, request_body
):
    gateway = RecommendationGateway(gateway_config, agent_factory=agent_factory)
    response = await gateway.handle("post", request_body)

    assert response.status_code == 200
    assert response.payload == SAMPLE_RECOMMENDATIONS
    agent_factory.assert_called_once_with(gateway_config)
    fake_agent.recommend.assert_awaited_once()


async def test_upstream_error_is_normalized(
    gateway_config, agent_factory, fake_agent, request_body
):
    fake_agent.recommend.side_effect = UpstreamError(500, "oops")
    gateway = RecommendationGateway(gateway_config, agent_factory=agent_factory)
    response = await gateway.handle("POST", request_body)

    assert response.status_code == 500
    assert response.payload["message"] == FAILED_MESSAGE
    assert "oops" in response.payload["error"]


async def test_unexpected_error_is_normalized(
    gateway_config, agent_factory, fake_agent, request_body
):
    fake_agent.recommend.side_effect = RuntimeError("boom")
    gateway = RecommendationGateway(gateway_config, agent_factory=agent_factory)
    response = await gateway.handle("POST", request_body)

    assert response.status_code == 500
    assert response.payload == {"message": FAILED_MESSAGE, "error": "boom"}


async def test_end_to_end_success(mock_genai, gateway_config, request_body):
    response = await RecommendationGateway(gateway_config).handle(
        "POST", request_body
    )

    assert response.status_code == 200
    assert response.payload == SAMPLE_RECOMMENDATIONS
    mock_genai.aio.models.generate_content.assert_called_once()


async def test_end_to_end_upstream_500(mock_genai, gateway_config, request_body):
    mock_genai.aio.models.generate_content.side_effect = errors.ServerError(
        500, {"error": {"code": 500, "message": "oops", "status": "INTERNAL"}}
    )
    response = await RecommendationGateway(gateway_config).handle(
        "POST", request_body
    )

    assert response.status_code == 500
    assert response.payload["message"] == FAILED_MESSAGE
    assert response.payload["message"] != "oops"
    assert "status: 500" in response.payload["error"]


async def test_end_to_end_invalid_json_reply(mock_genai, gateway_config, request_body):
    mock_genai.aio.models.generate_content.return_value = make_gemini_response(
        "Sure! Here are some ideas"
    )
    response = await RecommendationGateway(gateway_config).handle(
        "POST", request_body
    )

    assert response.status_code == 500
    assert response.payload["message"] == FAILED_MESSAGE
    assert "Invalid response structure" in response.payload["error"]


async def test_end_to_end_image_only_request(mock_genai, gateway_config, png_attachment):
    body = json.dumps(
        {"profile": "", "city": "Riga", "images": [png_attachment.to_wire()]}
    )
    response = await RecommendationGateway(gateway_config).handle("POST", body)

    assert response.status_code == 200
    parts = mock_genai.aio.models.generate_content.call_args.kwargs["contents"][0].parts
    assert len(parts) == 2
