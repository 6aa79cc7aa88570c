import asyncio
from typing import Any

from moderation_gate.detection.base import BaseDetector
from moderation_gate.detection.exceptions import DetectionError
from moderation_gate.logging.logger import Log
from moderation_gate.pipeline.exceptions import ClassificationError
from moderation_gate.pipeline.models import DecodedImage, Detection


class ContentClassifier:
    """Runs object detection on decoded images.

    Owns the detection model handle: it is loaded at most once (on warm-up
    or first use) and shared by every pipeline run afterwards. A failed load
    is not cached, so the next call tries again.
    """

    def __init__(
        self,
        detector: BaseDetector,
        inference_timeout_seconds: float | None = None,
    ) -> None:
        self._detector = detector
        self._inference_timeout_seconds = inference_timeout_seconds
        self._model: Any = None
        self._load_lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._model is not None

    async def ensure_loaded(self) -> Any:
        """Return the cached model handle, loading it on first use.

        Raises:
            ClassificationError: if the model cannot be loaded.
        """
        if self._model is not None:
            return self._model
        async with self._load_lock:
            if self._model is None:
                try:
                    model = await asyncio.to_thread(self._detector.load)
                except DetectionError as exc:
                    raise ClassificationError(f"Model load failed: {exc}") from exc
                self._model = model
                Log.info(f"Detection model loaded ({type(self._detector).__name__})")
        return self._model

    async def warm_up(self) -> bool:
        """Load the model ahead of the first selection. Failures are retried lazily."""
        try:
            await self.ensure_loaded()
        except ClassificationError as exc:
            Log.warning(f"Model warm-up failed, will retry on first use: {exc}")
            return False
        return True

    async def classify(self, image: DecodedImage) -> list[Detection]:
        model = await self.ensure_loaded()
        try:
            raw = await asyncio.wait_for(
                asyncio.to_thread(self._detector.detect, model, image.image),
                timeout=self._inference_timeout_seconds,
            )
        except DetectionError as exc:
            raise ClassificationError(f"Inference failed: {exc}") from exc
        except asyncio.TimeoutError as exc:
            raise ClassificationError(
                f"Inference timed out after {self._inference_timeout_seconds}s"
            ) from exc
        detections = [self._to_detection(item) for item in raw]
        Log.info(
            f"Classified {image.width}x{image.height} image: "
            f"{[d.category for d in detections]}"
        )
        return detections

    @staticmethod
    def _to_detection(item: dict[str, object]) -> Detection:
        try:
            return Detection(
                category=str(item["class"]),
                confidence=float(item["score"]),  # type: ignore[arg-type]
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ClassificationError(f"Malformed detection record {item!r}") from exc
