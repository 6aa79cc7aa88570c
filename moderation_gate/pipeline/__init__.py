from moderation_gate.pipeline.controller import PipelineController, build_controller
from moderation_gate.pipeline.models import PipelineResult, PipelineState, SelectedFile

__all__ = [
    "PipelineController",
    "PipelineResult",
    "PipelineState",
    "SelectedFile",
    "build_controller",
]
