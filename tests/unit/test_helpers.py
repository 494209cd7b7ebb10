"""Tests for helper utilities."""

import pytest

from travel_recommender.utils.helpers import (
    decode_base64_payload,
    encode_data_url,
    strip_data_url_header,
    truncate_text,
)


def test_encode_data_url():
    assert encode_data_url(b"hi", "image/png") == "data:image/png;base64,aGk="


def test_strip_data_url_header():
    assert strip_data_url_header("data:image/png;base64,aGk=") == "aGk="
    assert strip_data_url_header("aGk=") == "aGk="


def test_decode_base64_payload():
    assert decode_base64_payload("data:image/png;base64,aGk=") == b"hi"
    assert decode_base64_payload("aGk=") == b"hi"


def test_decode_base64_payload_invalid():
    with pytest.raises(ValueError, match="Invalid base64"):
        decode_base64_payload("data:image/png;base64,not base64!")


def test_truncate_text():
    assert truncate_text("short") == "short"
    truncated = truncate_text("x" * 300, max_length=20)
    assert len(truncated) == 20
    assert truncated.endswith("...")
