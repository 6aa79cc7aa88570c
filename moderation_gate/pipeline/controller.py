from collections.abc import Sequence

from moderation_gate.config.settings import Settings
from moderation_gate.detection.factory import DetectorFactory
from moderation_gate.interaction.base import BaseConfirmationPrompt, BaseNotifier
from moderation_gate.interaction.factory import ConfirmationPromptFactory
from moderation_gate.interaction.log_notifier import LogNotifier
from moderation_gate.interaction.models import Severity
from moderation_gate.logging.logger import Log
from moderation_gate.pdf.factory import PdfValidatorFactory
from moderation_gate.pipeline.classifier import ContentClassifier
from moderation_gate.pipeline.exceptions import InvalidInputError, PipelineError
from moderation_gate.pipeline.file_reader import FileReader
from moderation_gate.pipeline.image_decoder import ImageDecoder
from moderation_gate.pipeline.models import (
    MimeCategory,
    PipelineResult,
    PipelineState,
    SelectedFile,
)
from moderation_gate.pipeline.orchestrator import UploadOrchestrator
from moderation_gate.pipeline.pipeline import PipelineContext, PipelineStep
from moderation_gate.pipeline.policy import DocumentValidator, PolicyEngine
from moderation_gate.pipeline.steps import (
    ClassifyStep,
    DecideStep,
    DecodeImageStep,
    ReadFileStep,
    SubmitStep,
    ValidateDocumentStep,
)
from moderation_gate.storage.base import BaseStorage
from moderation_gate.storage.factory import StorageFactory


class PipelineController:
    """Runs one pipeline per file selection and tracks its state.

    Image: read -> decode -> classify -> decide -> confirm/upload.
    Document: read -> validate -> confirm/upload.
    Anything else is rejected before any I/O.
    """

    def __init__(
        self,
        classifier: ContentClassifier,
        image_steps: Sequence[PipelineStep],
        document_steps: Sequence[PipelineStep],
        notifier: BaseNotifier,
    ) -> None:
        self._classifier = classifier
        self._steps: dict[MimeCategory, Sequence[PipelineStep]] = {
            MimeCategory.IMAGE: image_steps,
            MimeCategory.DOCUMENT: document_steps,
        }
        self._notifier = notifier
        self._state = PipelineState.IDLE

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._state is PipelineState.LOADING

    async def start(self) -> None:
        """Warm the detection model once at startup."""
        await self._classifier.warm_up()

    async def on_file_selected(self, file: SelectedFile) -> PipelineResult:
        if self.is_busy:
            Log.warning("File selected while a previous run is still loading")
        self._state = PipelineState.LOADING
        context = PipelineContext(selected_file=file)
        try:
            await self._run(context)
        except PipelineError as exc:
            context.state = PipelineState.FAILED
            context.error_message = str(exc)
            Log.error(f"Pipeline failed: {exc}")
            self._notifier.notify("Upload failed", str(exc), Severity.ERROR)
        except Exception as exc:
            context.state = PipelineState.FAILED
            context.error_message = str(exc)
            Log.exception(f"Unexpected pipeline error: {exc}")
            raise
        finally:
            if context.state is PipelineState.LOADING:
                context.state = PipelineState.FAILED
            self._state = context.state
        Log.info(f"Pipeline finished in state {context.state.value}")
        return context.to_result()

    async def _run(self, context: PipelineContext) -> None:
        file = context.selected_file
        if not isinstance(file, SelectedFile):
            raise InvalidInputError("Invalid file type. Please select a valid file.")

        Log.info(f"Processing selected file ({file.mime_type}, {file.size_bytes} bytes)")
        steps = self._steps.get(file.mime_category)
        if steps is None:
            context.state = PipelineState.REJECTED
            Log.info(f"Rejected unsupported MIME type '{file.mime_type}'")
            self._notifier.notify(
                "Invalid file type", "Please select an image or PDF file.", Severity.ERROR
            )
            return

        for step in steps:
            await step.run(context)
            if context.settled:
                return
        context.state = PipelineState.COMPLETED


def build_controller(
    settings: Settings,
    prompt: BaseConfirmationPrompt | None = None,
    notifier: BaseNotifier | None = None,
    storage: BaseStorage | None = None,
) -> PipelineController:
    """Build a PipelineController with all required adapters."""
    Log.configure(settings.log_level)
    notifier = notifier if notifier is not None else LogNotifier()
    prompt = prompt if prompt is not None else ConfirmationPromptFactory.create(settings)
    storage = storage if storage is not None else StorageFactory.create(settings)

    reader = FileReader()
    classifier = ContentClassifier(
        DetectorFactory.create(settings),
        inference_timeout_seconds=settings.inference_timeout_seconds,
    )
    policy = PolicyEngine()
    validator = DocumentValidator(PdfValidatorFactory.create(settings))
    orchestrator = UploadOrchestrator(
        prompt,
        storage,
        notifier,
        settings.storage_bucket,
        upload_timeout_seconds=settings.upload_timeout_seconds,
        notify_on_storage_failure=settings.notify_on_storage_failure,
    )

    image_steps = [
        ReadFileStep(reader),
        DecodeImageStep(ImageDecoder()),
        ClassifyStep(classifier),
        DecideStep(policy, notifier),
        SubmitStep(orchestrator),
    ]
    document_steps = [
        ReadFileStep(reader),
        ValidateDocumentStep(validator, policy, notifier),
        SubmitStep(orchestrator),
    ]
    return PipelineController(classifier, image_steps, document_steps, notifier)
