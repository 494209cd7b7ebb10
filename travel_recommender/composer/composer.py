"""
Client composer.

Collects the profile text, destination city and image attachments,
validates them, sends one request per submission to the gateway and
keeps the outcome as a single submission state.
"""

from collections.abc import Iterable

from travel_recommender.composer.attachments import (
    AttachmentList,
    IntakeResult,
    SelectedFile,
)
from travel_recommender.composer.client import SERVER_ERROR_FALLBACK, GatewayClient
from travel_recommender.composer.state import (
    ComposerState,
    Failed,
    Idle,
    Loading,
    Succeeded,
)
from travel_recommender.config import ComposerConfig
from travel_recommender.data.models import (
    ImageAttachment,
    Recommendation,
    RecommendationRequest,
)
from travel_recommender.utils.error_handling import GatewayError, ValidationError
from travel_recommender.utils.logging import get_logger

logger = get_logger(__name__)


class Composer:
    """Form model behind the recommendation client."""

    def __init__(
        self,
        config: ComposerConfig | None = None,
        client: GatewayClient | None = None,
    ):
        """
        Initialize the composer.

        Args:
            config: Composer settings; defaults are used if omitted
            client: Gateway client; one for ``config.gateway_url`` is
                created if omitted
        """
        config = config or ComposerConfig()
        self.config = config
        self.profile = ""
        self.city = config.default_city
        self.attachments = AttachmentList(config.max_images, config.max_image_bytes)
        self.client = client or GatewayClient(
            config.gateway_url, timeout=config.request_timeout
        )
        self.state: ComposerState = Idle()

    @property
    def images(self) -> list[ImageAttachment]:
        return self.attachments.images

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def recommendations(self) -> tuple[Recommendation, ...]:
        if isinstance(self.state, Succeeded):
            return self.state.recommendations
        return ()

    @property
    def error(self) -> str | None:
        if isinstance(self.state, Failed):
            return self.state.message
        return None

    async def add_files(self, files: Iterable[SelectedFile]) -> IntakeResult:
        """
        Attach a batch of selected files.

        Raises:
            AttachmentLimitError: If the batch would exceed the image limit
        """
        return await self.attachments.add_files(files)

    def remove_image(self, index: int) -> ImageAttachment:
        return self.attachments.remove(index)

    def build_request(self) -> RecommendationRequest:
        return RecommendationRequest(
            profile=self.profile, city=self.city, images=self.attachments.images
        )

    def validate(self) -> bool:
        """
        Check the form can be submitted.

        On failure the state becomes Failed with the validation message.
        """
        try:
            self.build_request().ensure_complete()
        except ValidationError as e:
            self.state = Failed(str(e))
            return False
        return True

    async def submit(self) -> ComposerState:
        """
        Validate and send one recommendation request.

        A submission while another is in flight is ignored. Every failure,
        including unexpected exceptions, ends in a Failed state carrying a
        message for the user; nothing is raised.

        Returns:
            The state after the submission
        """
        if self.is_loading:
            logger.warning("Ignoring submission while a request is in flight")
            return self.state

        if not self.validate():
            return self.state

        request = self.build_request()
        self.state = Loading()
        try:
            recommendations = await self.client.fetch_recommendations(request)
            self.state = Succeeded(tuple(recommendations))
        except GatewayError as e:
            logger.error(f"Recommendation request failed: {e!s}")
            self.state = Failed(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error fetching recommendations: {e!s}")
            self.state = Failed(str(e) or SERVER_ERROR_FALLBACK)
        finally:
            # Cancellation is the only way out that leaves Loading behind
            if self.is_loading:
                self.state = Failed(SERVER_ERROR_FALLBACK)

        return self.state

    def render(self) -> str:
        """Render the current state as text, one card per recommendation."""
        state = self.state
        if isinstance(state, Idle):
            return ""
        if isinstance(state, Succeeded) and not state.recommendations:
            return ""

        lines = [f"Your Personalized {self.city} Itinerary", ""]
        if isinstance(state, Loading):
            lines.append("Generating...")
        elif isinstance(state, Failed):
            lines.append(f"Error: {state.message}")
        else:
            for recommendation in state.recommendations:
                lines.extend(
                    [
                        recommendation.title,
                        recommendation.explanation,
                        "Suggested Activity:",
                        recommendation.activity,
                        "",
                    ]
                )
        return "\n".join(lines).rstrip("\n")
