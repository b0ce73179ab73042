"""ILanguageModel adapter using the Anthropic Messages API."""

import json
from typing import Iterable, Optional

import anthropic

from bufficast.config import Settings
from bufficast.domain.models import PodcastPrompt
from bufficast.errors import EmptyScriptError
from bufficast.logging_utils import get_logger
from bufficast.ports.interfaces import ILanguageModel

logger = get_logger(__name__)


def join_text_blocks(blocks: Iterable) -> str:
    """Keep only text blocks (drop tool_use, thinking, ...) and join them in order."""
    return "\n".join(block.text for block in blocks if getattr(block, "type", None) == "text")


class AnthropicScriptWriter(ILanguageModel):
    """Sends the prompt as one JSON user message."""

    def __init__(self, settings: Settings, client: Optional[anthropic.Anthropic] = None):
        self._settings = settings
        self._client = client

    @property
    def client(self) -> anthropic.Anthropic:
        if self._client is None:
            self._client = anthropic.Anthropic(api_key=self._settings.anthropic_api_key)
        return self._client

    def complete(self, prompt: PodcastPrompt) -> str:
        logger.info("✍️  Using Anthropic model: %s", self._settings.anthropic_model)
        response = self.client.messages.create(
            model=self._settings.anthropic_model,
            max_tokens=self._settings.anthropic_max_tokens,
            messages=[{"role": "user", "content": json.dumps(prompt)}],
        )
        script = join_text_blocks(response.content)
        if not script.strip():
            raise EmptyScriptError(f"{self._settings.anthropic_model} returned no text content")
        return script
