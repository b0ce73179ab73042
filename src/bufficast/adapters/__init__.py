"""
Adapters – concrete implementations of ports.
Chainlink VRF, Anthropic, ElevenLabs, Pinata and Story by default; to use
another vendor write a new adapter for the port and pass it as an override.
"""

from bufficast.adapters.blockchain import StoryBlockchain
from bufficast.adapters.llm import AnthropicScriptWriter
from bufficast.adapters.oracle import ChainlinkVRFOracle
from bufficast.adapters.sink import CallbackSink, RecordingSink
from bufficast.adapters.storage import PinataStorage
from bufficast.adapters.tts import ElevenLabsSpeech
from bufficast.config import Settings


def default_adapters(settings: Settings, **overrides):
    """
    Build default adapter instances for the pipeline's keyword arguments.
    Overrides: oracle=..., language_model=..., etc. for testing or another vendor.
    SDK clients are created on first use, so building these with missing keys is safe.
    """
    defaults = {
        "oracle": ChainlinkVRFOracle(settings),
        "language_model": AnthropicScriptWriter(settings),
        "speech": ElevenLabsSpeech(settings),
        "storage": PinataStorage(settings),
        "blockchain": StoryBlockchain(settings),
    }
    defaults.update(overrides)
    return defaults


__all__ = [
    "AnthropicScriptWriter",
    "CallbackSink",
    "ChainlinkVRFOracle",
    "ElevenLabsSpeech",
    "PinataStorage",
    "RecordingSink",
    "StoryBlockchain",
    "default_adapters",
]
