from .episode_pipeline import EpisodePipeline, PipelineOutcome, PipelineState

__all__ = ["EpisodePipeline", "PipelineOutcome", "PipelineState"]
