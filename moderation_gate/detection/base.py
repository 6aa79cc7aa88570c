from abc import ABC, abstractmethod
from typing import Any

from PIL import Image


class BaseDetector(ABC):
    """Contract for object-detection adapters.

    Both methods are blocking; callers are expected to offload them from the
    event loop.
    """

    @abstractmethod
    def load(self) -> Any:
        """Load the detection model and return an opaque model handle.

        Raises:
            DetectionError: if the model cannot be loaded.
        """

    @abstractmethod
    def detect(self, model: Any, image: Image.Image) -> list[dict[str, object]]:
        """Run detection on a fully decoded image.

        Args:
            model: Handle previously returned by ``load``.
            image: RGB image with resolved dimensions.

        Returns:
            Raw detections, each a dict with ``class`` (str) and ``score`` (float).

        Raises:
            DetectionError: if inference fails.
        """
