"""Ports (interfaces) – depend on these, implement in adapters."""

from bufficast.ports.interfaces import (
    IProgressSink,
    IRandomnessOracle,
    ILanguageModel,
    ISpeechSynthesizer,
    IContentStorage,
    IBlockchain,
)

__all__ = [
    "IProgressSink",
    "IRandomnessOracle",
    "ILanguageModel",
    "ISpeechSynthesizer",
    "IContentStorage",
    "IBlockchain",
]
