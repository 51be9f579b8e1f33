"""Pipeline orchestration for documentation generation."""

from .orchestrator import DocumentationPipeline, PipelineResult, PipelineState, on_init

__all__ = ["DocumentationPipeline", "PipelineResult", "PipelineState", "on_init"]
