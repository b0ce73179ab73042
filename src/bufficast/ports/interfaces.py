"""
Port interfaces (SOLID – Dependency Inversion).
Implement these in adapters; the pipeline depends only on these abstractions.
Swap any external service (another oracle, another TTS vendor) by writing a new adapter.
"""

from abc import ABC, abstractmethod

from bufficast.domain.models import (
    ContentIdentifier,
    MintResult,
    PodcastMetadata,
    PodcastPrompt,
    RandomParameters,
)


class IProgressSink(ABC):
    """Receives human-readable status lines. Delivery problems are not the pipeline's concern."""

    @abstractmethod
    def notify(self, status: str) -> None:
        pass


class IRandomnessOracle(ABC):
    """Source of verifiable randomness used to parameterize the episode."""

    @abstractmethod
    def request_random_parameters(self) -> RandomParameters:
        """Request randomness and wait until it is available."""
        pass


class ILanguageModel(ABC):
    """Script writer."""

    @abstractmethod
    def complete(self, prompt: PodcastPrompt) -> str:
        """Return the text of the model's answer (text blocks only, newline-joined)."""
        pass


class ISpeechSynthesizer(ABC):
    """Text-to-speech."""

    @abstractmethod
    def synthesize(self, text: str) -> str:
        """Synthesize audio for text; return the local audio file path."""
        pass


class IContentStorage(ABC):
    """Content-addressed storage (IPFS pinning service)."""

    @abstractmethod
    def upload_file(self, path: str) -> ContentIdentifier:
        """Pin a local file; return its CID."""
        pass

    @abstractmethod
    def upload_json(self, metadata: PodcastMetadata) -> ContentIdentifier:
        """Pin a JSON document; return its CID."""
        pass


class IBlockchain(ABC):
    """On-chain side effects: NFT metadata and IP registration."""

    @abstractmethod
    def update_token_uri(self, uri: str) -> None:
        """Point the podcast NFT at a new metadata URI."""
        pass

    @abstractmethod
    def register_ip(
        self,
        audio_cid: ContentIdentifier,
        metadata_cid: ContentIdentifier,
    ) -> MintResult:
        """Mint and register the episode as an IP asset; return tx hash and IP id."""
        pass
