"""
Helper utilities for the Travel Recommender.

Data URL handling for image attachments and small text helpers.
"""

import base64
import binascii

DATA_URL_PREFIX = "data:"
BASE64_MARKER = ";base64,"


def encode_data_url(data: bytes, mime_type: str) -> str:
    """
    Encode raw bytes as a self-describing base64 data URL.

    Args:
        data: Raw file contents
        mime_type: Media type written into the URL header

    Returns:
        A string like "data:image/png;base64,iVBORw0..."
    """
    payload = base64.b64encode(data).decode("ascii")
    return f"{DATA_URL_PREFIX}{mime_type}{BASE64_MARKER}{payload}"


def strip_data_url_header(encoded: str) -> str:
    """
    Return the base64 payload of a data URL.

    Strings without a header are returned unchanged.
    """
    if encoded.startswith(DATA_URL_PREFIX) and "," in encoded:
        return encoded.split(",", 1)[1]
    return encoded


def decode_base64_payload(encoded: str) -> bytes:
    """
    Decode a data URL or bare base64 string into bytes.

    Raises:
        ValueError: If the payload is not valid base64
    """
    try:
        return base64.b64decode(strip_data_url_header(encoded), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 image data: {e!s}") from e


def truncate_text(text: str, max_length: int = 200, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length for log output.

    Args:
        text: Text to truncate
        max_length: Maximum length of the returned string
        suffix: Suffix appended when truncation happens

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix
