from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from moderation_gate.pipeline.models import (
    DecodedContent,
    DecodedImage,
    Detection,
    PipelineResult,
    PipelineState,
    PolicyDecision,
    SelectedFile,
    UploadOutcome,
)


@dataclass(slots=True)
class PipelineContext:
    selected_file: SelectedFile
    state: PipelineState = PipelineState.LOADING
    content: DecodedContent | None = None
    image: DecodedImage | None = None
    detections: list[Detection] = field(default_factory=list)
    is_valid_document: bool | None = None
    decision: PolicyDecision | None = None
    outcome: UploadOutcome | None = None
    error_message: str = ""

    @property
    def settled(self) -> bool:
        return self.state is not PipelineState.LOADING

    def to_result(self) -> PipelineResult:
        return PipelineResult(
            state=self.state,
            decision=self.decision,
            outcome=self.outcome,
            error_message=self.error_message,
        )


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
