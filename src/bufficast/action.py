"""
RANDOMIZE_SPEECH action: the agent-facing entry point.

The agent runtime calls `validate` first (which stashes the quoted messages
in session state) and then `handler` with the same state.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from bufficast.adapters import default_adapters
from bufficast.adapters.sink import CallbackSink, HandlerCallback
from bufficast.application.messages import extract_messages
from bufficast.application.pipeline import PodcastPipeline
from bufficast.config import Settings
from bufficast.logging_utils import get_logger

logger = get_logger(__name__)

STATE_KEY = "daily_messages"
FALLBACK_MESSAGES = ["Awesome messages!"]

ACTION_EXAMPLES = [
    [
        {
            "user": "{{user1}}",
            "content": {
                "text": 'use Chainlink to create me a speech "eth denver is awesome", '
                        '"bufficast project is the best"',
            },
        },
        {
            "user": "{{agentName}}",
            "content": {"text": "Let me do it for you!!", "action": "RANDOMIZE_SPEECH"},
        },
    ],
    [
        {
            "user": "{{user1}}",
            "content": {
                "text": 'Create me a podcast using Chainlink "ethereum is great", '
                        '"avalanche is great", "solana sucks"',
            },
        },
        {
            "user": "{{agentName}}",
            "content": {"text": "I'll start to create!", "action": "RANDOMIZE_SPEECH"},
        },
    ],
]


def message_text(message: Any) -> Optional[str]:
    """Text of an inbound memory, either {"content": {"text": ...}} or a plain string."""
    if isinstance(message, str):
        return message
    if isinstance(message, dict):
        return (message.get("content") or {}).get("text")
    content = getattr(message, "content", None)
    if isinstance(content, dict):
        return content.get("text")
    return getattr(content, "text", None)


class GeneratePodcastAction:
    """Generate a podcast with VRF randomization and mint it as NFT."""

    name = "RANDOMIZE_SPEECH"
    similes: List[str] = []
    description = "Generate a podcast with VRF randomization and mint it as NFT"
    examples = ACTION_EXAMPLES

    def __init__(
        self,
        settings: Optional[Settings] = None,
        adapters_factory: Callable[[Settings], Dict[str, Any]] = default_adapters,
    ):
        self._settings = settings
        self._adapters_factory = adapters_factory

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings.from_env()
        return self._settings

    def validate(self, message: Any, state: Optional[Dict[str, Any]] = None) -> bool:
        messages = extract_messages(message_text(message))
        if not messages:
            return False
        if state is None:
            return False
        state[STATE_KEY] = messages
        return True

    def handler(
        self,
        message: Any,
        state: Optional[Dict[str, Any]] = None,
        options: Optional[Dict[str, Any]] = None,
        callback: Optional[HandlerCallback] = None,
    ) -> bool:
        if callback is None:
            raise ValueError("Callback is required")

        messages = (state or {}).get(STATE_KEY) or extract_messages(message_text(message))
        if not messages:
            logger.warning("No quoted messages in request, using fallback messages")
            messages = FALLBACK_MESSAGES

        pipeline = PodcastPipeline(
            settings=self.settings,
            sink=CallbackSink(callback),
            **self._adapters_factory(self.settings),
        )
        return pipeline.execute(messages).ok


generate_podcast_action = GeneratePodcastAction()


@dataclass
class BuffiCastPlugin:
    """Bundle for agent runtimes that register plugins by name."""

    name: str = "bufficast"
    description: str = "Chainlink VRF randomized podcasts minted as Story IP assets"
    actions: List[GeneratePodcastAction] = field(default_factory=lambda: [generate_podcast_action])


bufficast_plugin = BuffiCastPlugin()
