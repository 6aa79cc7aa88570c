import base64
import binascii
import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from PIL import Image

IMAGE_MIME_PREFIX = "image/"
DOCUMENT_MIME_TYPE = "application/pdf"


class MimeCategory(str, Enum):
    IMAGE = "image"
    DOCUMENT = "document"
    INVALID = "invalid"

    @classmethod
    def from_mime_type(cls, mime_type: str) -> "MimeCategory":
        if mime_type.startswith(IMAGE_MIME_PREFIX):
            return cls.IMAGE
        if mime_type == DOCUMENT_MIME_TYPE:
            return cls.DOCUMENT
        return cls.INVALID


@dataclass(frozen=True)
class SelectedFile:
    """A single file chosen by the user, as handed over by the file picker."""

    handle: Path | BinaryIO
    mime_type: str
    size_bytes: int

    @property
    def mime_category(self) -> MimeCategory:
        return MimeCategory.from_mime_type(self.mime_type)

    @classmethod
    def from_path(cls, path: Path, mime_type: str | None = None) -> "SelectedFile":
        """Build a selection from a filesystem path, guessing the MIME type if not given."""
        if mime_type is None:
            mime_type = mimetypes.guess_type(path.name)[0] or ""
        size = path.stat().st_size if path.exists() else 0
        return cls(handle=path, mime_type=mime_type, size_bytes=size)


@dataclass(frozen=True)
class DecodedContent:
    """Whole-file payload of one pipeline run, encoded as a data URL."""

    encoded_payload: str
    source: SelectedFile

    @classmethod
    def from_bytes(cls, data: bytes, source: SelectedFile) -> "DecodedContent":
        encoded = base64.b64encode(data).decode("ascii")
        mime_type = source.mime_type or "application/octet-stream"
        return cls(encoded_payload=f"data:{mime_type};base64,{encoded}", source=source)

    def payload_bytes(self) -> bytes:
        """Materialize the binary blob carried by the data URL."""
        header, sep, body = self.encoded_payload.partition(",")
        if not sep or not header.endswith(";base64"):
            raise ValueError("payload is not a base64 data URL")
        try:
            return base64.b64decode(body, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"payload is not valid base64: {exc}") from exc


@dataclass(frozen=True)
class DecodedImage:
    """Pixel-addressable image with resolved dimensions, ready to classify."""

    image: Image.Image
    width: int
    height: int
    content: DecodedContent


@dataclass(frozen=True)
class Detection:
    category: str
    confidence: float


class Verdict(str, Enum):
    ALLOW = "allow"
    BLOCK = "block"


@dataclass(frozen=True)
class PolicyDecision:
    verdict: Verdict
    reason: str
    matched: tuple[str, ...] = ()

    @property
    def allowed(self) -> bool:
        return self.verdict is Verdict.ALLOW


USER_CANCELLED = "UserCancelled"


@dataclass(frozen=True)
class UploadOutcome:
    """Terminal result of one confirmed (or declined) upload attempt."""

    succeeded: bool
    location: str | None = None
    reason: str = ""

    @property
    def cancelled(self) -> bool:
        return self.reason == USER_CANCELLED


class PipelineState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    COMPLETED = "completed"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass(frozen=True)
class PipelineResult:
    """Final, read-only view of a settled pipeline run."""

    state: PipelineState
    decision: PolicyDecision | None = None
    outcome: UploadOutcome | None = None
    error_message: str = ""
