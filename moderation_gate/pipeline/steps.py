import asyncio

from moderation_gate.interaction.base import BaseNotifier
from moderation_gate.interaction.models import Severity
from moderation_gate.logging.logger import Log
from moderation_gate.pipeline.classifier import ContentClassifier
from moderation_gate.pipeline.file_reader import FileReader
from moderation_gate.pipeline.image_decoder import ImageDecoder
from moderation_gate.pipeline.models import PipelineState
from moderation_gate.pipeline.orchestrator import UploadOrchestrator
from moderation_gate.pipeline.pipeline import PipelineContext, PipelineStep
from moderation_gate.pipeline.policy import DocumentValidator, PolicyEngine


class ReadFileStep(PipelineStep):
    def __init__(self, reader: FileReader) -> None:
        self._reader = reader

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.content = await self._reader.read(context.selected_file)
        return context


class DecodeImageStep(PipelineStep):
    def __init__(self, decoder: ImageDecoder) -> None:
        self._decoder = decoder

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.content is None:
            raise ValueError("PipelineContext.content must be set before decoding")
        context.image = await self._decoder.decode(context.content)
        return context


class ClassifyStep(PipelineStep):
    def __init__(self, classifier: ContentClassifier) -> None:
        self._classifier = classifier

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.image is None:
            raise ValueError("PipelineContext.image must be set before classification")
        context.detections = await self._classifier.classify(context.image)
        return context


class DecideStep(PipelineStep):
    def __init__(self, policy: PolicyEngine, notifier: BaseNotifier) -> None:
        self._policy = policy
        self._notifier = notifier

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.decision = self._policy.decide(context.detections)
        if not context.decision.allowed:
            context.state = PipelineState.REJECTED
            Log.info(f"Image rejected: {context.decision.reason}")
            self._notifier.notify(
                "Invalid image", "This image contains a human or animal.", Severity.ERROR
            )
        return context


class ValidateDocumentStep(PipelineStep):
    def __init__(
        self,
        validator: DocumentValidator,
        policy: PolicyEngine,
        notifier: BaseNotifier,
    ) -> None:
        self._validator = validator
        self._policy = policy
        self._notifier = notifier

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.content is None:
            raise ValueError("PipelineContext.content must be set before validation")
        data = context.content.payload_bytes()
        context.is_valid_document = await asyncio.to_thread(
            self._validator.validate_document, data
        )
        context.decision = self._policy.decide_document(context.is_valid_document)
        if not context.decision.allowed:
            context.state = PipelineState.REJECTED
            Log.info(f"Document rejected: {context.decision.reason}")
            self._notifier.notify("Invalid PDF", "The PDF file is not valid.", Severity.ERROR)
        return context


class SubmitStep(PipelineStep):
    def __init__(self, orchestrator: UploadOrchestrator) -> None:
        self._orchestrator = orchestrator

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.content is None or context.decision is None:
            raise ValueError("PipelineContext.content and decision must be set before upload")
        context.outcome = await self._orchestrator.submit(
            context.content,
            context.selected_file.mime_type,
            context.decision,
        )
        context.state = PipelineState.COMPLETED
        return context
