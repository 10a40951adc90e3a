"""Pipeline orchestration for catalog normalization and validation."""

from asset_parser.pipelines.orchestrator import Orchestrator, PipelineResult, PipelineStage

__all__ = [
    "Orchestrator",
    "PipelineResult",
    "PipelineStage",
]
