"""Application layer – use cases and pipeline orchestration."""

from bufficast.application.pipeline import PodcastPipeline

__all__ = ["PodcastPipeline"]
