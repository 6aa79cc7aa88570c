import asyncio
import io

from PIL import Image, UnidentifiedImageError

from moderation_gate.pipeline.exceptions import ReadError
from moderation_gate.pipeline.models import DecodedContent, DecodedImage


class ImageDecoder:
    """Turns a buffered image payload into a ready-to-classify image."""

    async def decode(self, content: DecodedContent) -> DecodedImage:
        try:
            data = content.payload_bytes()
            image = await asyncio.to_thread(self._decode, data)
        except (ValueError, OSError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
            raise ReadError(f"Failed to decode image: {exc}") from exc
        width, height = image.size
        return DecodedImage(image=image, width=width, height=height, content=content)

    @staticmethod
    def _decode(data: bytes) -> Image.Image:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            return img.convert("RGB")
