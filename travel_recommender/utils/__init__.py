"""
Utility modules for the Travel Recommender.
"""

from travel_recommender.config import LogLevel
from travel_recommender.utils.error_handling import (
    AttachmentLimitError,
    ConfigurationError,
    GatewayError,
    InvalidResponseError,
    RecommenderError,
    UpstreamError,
    ValidationError,
)
from travel_recommender.utils.helpers import (
    decode_base64_payload,
    encode_data_url,
    strip_data_url_header,
    truncate_text,
)
from travel_recommender.utils.logging import get_logger, setup_logging

__all__ = [
    "AttachmentLimitError",
    "ConfigurationError",
    "GatewayError",
    "InvalidResponseError",
    "LogLevel",
    "RecommenderError",
    "UpstreamError",
    "ValidationError",
    "decode_base64_payload",
    "encode_data_url",
    "get_logger",
    "setup_logging",
    "strip_data_url_header",
    "truncate_text",
]
