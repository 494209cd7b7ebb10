"""
Pytest configuration for the Travel Recommender tests.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from tests.unit.mock_gemini import (
    PNG_BYTES,
    SAMPLE_RECOMMENDATIONS,
    make_gemini_response,
)
from travel_recommender.config import ComposerConfig, GatewayConfig, SystemConfig
from travel_recommender.data.models import ImageAttachment, RecommendationRequest
from travel_recommender.utils import LogLevel, encode_data_url, setup_logging


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Set up logging for tests."""
    setup_logging(SystemConfig(log_level=LogLevel.DEBUG))


@pytest.fixture
def mock_genai():
    """Patch the Gemini client with a successful structured reply."""
    with patch("travel_recommender.agents.base.genai") as mock:
        mock_client = MagicMock()
        mock.Client.return_value = mock_client
        mock_client.aio.models.generate_content = AsyncMock(
            return_value=make_gemini_response(
                json.dumps({"recommendations": SAMPLE_RECOMMENDATIONS})
            )
        )
        yield mock_client


@pytest.fixture
def gateway_config():
    return GatewayConfig(gemini_api_key="test-key")


@pytest.fixture
def composer_config():
    return ComposerConfig(gateway_url="http://gateway.test/api/getRecommendations")


@pytest.fixture
def png_attachment():
    return ImageAttachment(
        mime_type="image/png", encoded_bytes=encode_data_url(PNG_BYTES, "image/png")
    )


@pytest.fixture
def sample_request(png_attachment):
    return RecommendationRequest(
        profile="Loves hiking, landscape photography, and craft beer.",
        city="Riga",
        images=[png_attachment],
    )
