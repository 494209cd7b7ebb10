"""
Submission state for the composer.

One tagged variant replaces separate loading/error/results flags, so a
state cannot be loading and failed at the same time.
"""

from dataclasses import dataclass, field

from travel_recommender.data.models import Recommendation


@dataclass(frozen=True)
class Idle:
    """Nothing submitted yet."""


@dataclass(frozen=True)
class Loading:
    """A request is in flight."""


@dataclass(frozen=True)
class Succeeded:
    """The last request returned recommendations."""

    recommendations: tuple[Recommendation, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Failed:
    """The last submission failed with a user-visible message."""

    message: str


ComposerState = Idle | Loading | Succeeded | Failed
