"""
Client composer for the Travel Recommender.
"""

from travel_recommender.composer.attachments import (
    AttachmentList,
    IntakeResult,
    SelectedFile,
)
from travel_recommender.composer.client import GatewayClient
from travel_recommender.composer.composer import Composer
from travel_recommender.composer.state import (
    ComposerState,
    Failed,
    Idle,
    Loading,
    Succeeded,
)

__all__ = [
    "AttachmentList",
    "Composer",
    "ComposerState",
    "Failed",
    "GatewayClient",
    "Idle",
    "IntakeResult",
    "Loading",
    "SelectedFile",
    "Succeeded",
]
