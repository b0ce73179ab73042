"""Prompt and metadata builders – pure functions, no I/O."""

import json
from typing import Sequence

from bufficast.domain.models import PodcastMetadata, PodcastPrompt, RandomParameters

PODCAST_INSTRUCTION = (
    "Generate a podcast script based on the day's messages. "
    "Create natural speech without formatting."
)
PODCAST_TOPIC = "Ethereum Denver 2025 daily podcast"
PODCAST_DURATION = "20 Seconds"
PODCAST_LANGUAGE = "English"

PODCAST_NAME = "BuffiCast Podcast"


def build_podcast_prompt(
    messages: Sequence[str],
    random_params: RandomParameters,
) -> PodcastPrompt:
    """Fixed instruction/topic/duration/language plus the day's messages and the oracle output."""
    if not messages:
        raise ValueError("At least one message is required to build a podcast prompt")
    return PodcastPrompt(
        instruction=PODCAST_INSTRUCTION,
        topic=PODCAST_TOPIC,
        daily_messages=list(messages),
        random_parameters=random_params,
        duration=PODCAST_DURATION,
        language=PODCAST_LANGUAGE,
    )


def build_podcast_metadata(
    random_params: RandomParameters,
    audio_url: str,
    cover_image: str,
) -> PodcastMetadata:
    return PodcastMetadata(
        name=PODCAST_NAME,
        description=(
            "Podcast generated by BuffiCast with parameters: "
            f"{json.dumps(random_params, separators=(',', ':'))}"
        ),
        image=cover_image,
        external_url=audio_url,
    )
