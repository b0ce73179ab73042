"""Domain models – plain dicts on the wire, typed here for the pipeline."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, TypedDict

# Opaque to the pipeline; only the oracle adapter knows its keys.
RandomParameters = Dict[str, Any]

# IPFS CID returned by the storage network.
ContentIdentifier = str


class PodcastPrompt(TypedDict):
    """Payload sent (JSON-serialized) to the language model."""
    instruction: str
    topic: str
    daily_messages: List[str]
    random_parameters: RandomParameters
    duration: str
    language: str


class PodcastMetadata(TypedDict):
    """NFT metadata pinned next to the audio."""
    name: str
    description: str
    image: str
    external_url: str


class MintResult(TypedDict):
    """Outcome of the IP registration transaction."""
    txHash: str
    ipId: str


class ErrorKind(str, Enum):
    CONFIGURATION_MISSING = "configuration_missing"
    STEP_FAILURE = "step_failure"


@dataclass(frozen=True)
class PipelineResult:
    """What `PodcastPipeline.execute` hands back instead of raising."""

    ok: bool
    kind: Optional[ErrorKind] = None
    mint: Optional[MintResult] = None
    failed_step: Optional[str] = None

    @classmethod
    def success(cls, mint: MintResult) -> "PipelineResult":
        return cls(ok=True, mint=mint)

    @classmethod
    def failure(cls, kind: ErrorKind, failed_step: Optional[str] = None) -> "PipelineResult":
        return cls(ok=False, kind=kind, failed_step=failed_step)
