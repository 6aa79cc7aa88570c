from moderation_gate.config.settings import Settings
from moderation_gate.detection.base import BaseDetector
from moderation_gate.detection.example_adapter import ExampleDetector
from moderation_gate.detection.yolo_adapter import YoloDetector


class DetectorFactory:
    """Creates the configured detection adapter."""

    ENGINES = ("yolo", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseDetector:
        engine = settings.detection_engine.lower()
        if engine == "yolo":
            return YoloDetector(
                model_path=settings.detection_model_path,
                confidence_threshold=settings.detection_confidence_threshold,
                device=settings.detection_device,
            )
        if engine == "example":
            return ExampleDetector(labels=settings.example_detection_labels)
        raise ValueError(
            f"Unknown detection engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
