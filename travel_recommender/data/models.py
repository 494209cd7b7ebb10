"""
Data models for recommendation requests and replies.

The wire format follows the browser client: an image travels as
{"file": {"type": <mime>}, "base64": <data url>} and a successful reply is
a bare JSON array of recommendation objects.
"""

from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

from travel_recommender.config import MAX_IMAGES
from travel_recommender.utils.error_handling import ValidationError

MISSING_INPUT_MESSAGE = (
    "Please provide a profile description or upload images, and specify a city."
)


class ImageAttachment(BaseModel):
    """One uploaded image held as a media type plus a base64 data URL."""

    mime_type: str
    encoded_bytes: str = Field(
        validation_alias=AliasChoices("encoded_bytes", "base64")
    )

    @model_validator(mode="before")
    @classmethod
    def unwrap_file_info(cls, data: Any) -> Any:
        """Accept the browser shape {"file": {"type": ...}, "base64": ...}."""
        if isinstance(data, dict) and "file" in data:
            data = dict(data)
            file_info = data.pop("file")
            if isinstance(file_info, dict) and "mime_type" not in data:
                data["mime_type"] = file_info.get("type")
        return data

    @field_validator("mime_type")
    @classmethod
    def validate_image_type(cls, value: str) -> str:
        """Only image media types are accepted."""
        if not value.startswith("image/"):
            raise ValueError(f"Attachment must be an image, got {value!r}")
        return value

    def to_wire(self) -> dict[str, Any]:
        return {"file": {"type": self.mime_type}, "base64": self.encoded_bytes}


class RecommendationRequest(BaseModel):
    """Profile text, destination city and attached images for one submission."""

    profile: str = ""
    city: str = ""
    images: list[ImageAttachment] = Field(
        default_factory=list, max_length=MAX_IMAGES
    )

    @property
    def is_complete(self) -> bool:
        """Profile or images must be present, and a city is always required."""
        return bool((self.profile or self.images) and self.city)

    def ensure_complete(self) -> "RecommendationRequest":
        """
        Check the request may be sent.

        Raises:
            ValidationError: If the profile and images are both empty,
                or the city is empty
        """
        if not self.is_complete:
            raise ValidationError(MISSING_INPUT_MESSAGE)
        return self

    def to_wire(self) -> dict[str, Any]:
        return {
            "profile": self.profile,
            "city": self.city,
            "images": [image.to_wire() for image in self.images],
        }


class Recommendation(BaseModel):
    """A single generated travel suggestion."""

    title: str
    explanation: str
    activity: str


class ErrorResponse(BaseModel):
    """Normalized error body returned by the gateway."""

    message: str
    error: str | None = None

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


RecommendationList = TypeAdapter(list[Recommendation])
