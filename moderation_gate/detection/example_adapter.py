"""Example detection adapter.

Loads no model and performs no inference. Useful for local development,
tests, and as a template for new detection adapters: implement BaseDetector
and register the engine in DetectorFactory.
"""

from typing import Any

from PIL import Image

from moderation_gate.detection.base import BaseDetector


class ExampleDetector(BaseDetector):
    """Reports the same fixed labels for every image."""

    MODEL_HANDLE = "example-model"

    def __init__(self, labels: list[str] | None = None, score: float = 1.0) -> None:
        self._labels = list(labels or [])
        self._score = score

    def load(self) -> Any:
        return self.MODEL_HANDLE

    def detect(self, model: Any, image: Image.Image) -> list[dict[str, object]]:
        _ = model, image
        return [{"class": label, "score": self._score} for label in self._labels]
