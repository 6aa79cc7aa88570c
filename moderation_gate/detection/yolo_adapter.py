from typing import Any

from PIL import Image
from ultralytics import YOLO

from moderation_gate.detection.base import BaseDetector
from moderation_gate.detection.exceptions import DetectionError


class YoloDetector(BaseDetector):
    """Detects COCO objects using an Ultralytics YOLO model."""

    def __init__(
        self,
        *,
        model_path: str,
        confidence_threshold: float,
        device: str | None = None,
    ) -> None:
        self._model_path = model_path
        self._confidence_threshold = confidence_threshold
        self._device = device

    def load(self) -> Any:
        try:
            return YOLO(self._model_path)
        except Exception as exc:
            raise DetectionError(
                f"failed to load YOLO model '{self._model_path}': {exc}"
            ) from exc

    def detect(self, model: Any, image: Image.Image) -> list[dict[str, object]]:
        try:
            results = model.predict(
                image,
                conf=self._confidence_threshold,
                device=self._device,
                verbose=False,
            )
        except Exception as exc:
            raise DetectionError(f"YOLO inference failed: {exc}") from exc

        detections: list[dict[str, object]] = []
        for result in results:
            names = result.names
            for cls_idx, score in zip(result.boxes.cls.tolist(), result.boxes.conf.tolist()):
                detections.append({"class": str(names[int(cls_idx)]), "score": float(score)})
        return detections
