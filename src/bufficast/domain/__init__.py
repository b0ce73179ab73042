"""Domain models and value objects."""

from bufficast.domain.models import (
    ContentIdentifier,
    ErrorKind,
    MintResult,
    PipelineResult,
    PodcastMetadata,
    PodcastPrompt,
    RandomParameters,
)

__all__ = [
    "ContentIdentifier",
    "ErrorKind",
    "MintResult",
    "PipelineResult",
    "PodcastMetadata",
    "PodcastPrompt",
    "RandomParameters",
]
