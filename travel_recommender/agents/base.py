"""
Base agent class for Gemini-backed agents.

Holds the agent configuration and the google-genai client, and converts
plain prompt pieces into Gemini content parts.
"""

from dataclasses import dataclass

from google import genai
from google.genai import types

from travel_recommender.data.models import ImageAttachment
from travel_recommender.utils.error_handling import ConfigurationError
from travel_recommender.utils.helpers import decode_base64_payload


class InvalidConfigurationError(ConfigurationError):
    """Exception raised when agent configuration is invalid."""

    pass


@dataclass
class AgentConfig:
    """Configuration for an agent."""

    name: str
    api_key: str | None = None
    model: str = "gemini-2.0-flash"
    temperature: float | None = None
    max_tokens: int | None = None


class BaseAgent:
    """
    Base class for Gemini agents.

    Subclasses build their request contents with the helpers here and
    call ``self.client.aio.models.generate_content``.
    """

    def __init__(self, config: AgentConfig):
        """
        Initialize a base agent.

        Args:
            config: Configuration for the agent

        Raises:
            InvalidConfigurationError: If the configuration is incomplete
        """
        self.config = config
        self._validate_config()
        self.client = genai.Client(api_key=config.api_key)

    @property
    def name(self) -> str:
        """Get the name of the agent."""
        return self.config.name

    def _validate_config(self) -> bool:
        """Validate the agent configuration."""
        if not self.config.name:
            raise InvalidConfigurationError("Agent name cannot be empty")
        if not self.config.api_key:
            raise InvalidConfigurationError(
                "API key is not configured on the server."
            )
        return True

    @staticmethod
    def _text_part(text: str) -> types.Part:
        return types.Part(text=text)

    @staticmethod
    def _image_part(image: ImageAttachment) -> types.Part:
        """
        Convert an attachment into an inline-data part.

        The data URL header is stripped and the payload decoded; the SDK
        base64-encodes the bytes again on the wire.
        """
        return types.Part(
            inline_data=types.Blob(
                mime_type=image.mime_type,
                data=decode_base64_payload(image.encoded_bytes),
            )
        )

    def _build_contents(
        self, prompt: str, images: list[ImageAttachment]
    ) -> list[types.Content]:
        """
        Build a single user turn: the prompt text first, then one part
        per image in attachment order.
        """
        parts = [self._text_part(prompt)]
        parts.extend(self._image_part(image) for image in images)
        return [types.Content(role="user", parts=parts)]
