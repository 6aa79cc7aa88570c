import asyncio
import time
from collections.abc import Callable
from dataclasses import dataclass

from moderation_gate.interaction.base import BaseConfirmationPrompt, BaseNotifier
from moderation_gate.interaction.models import Severity
from moderation_gate.logging.logger import Log
from moderation_gate.pipeline.models import (
    USER_CANCELLED,
    DecodedContent,
    MimeCategory,
    PolicyDecision,
    UploadOutcome,
    Verdict,
)
from moderation_gate.storage.base import BaseStorage
from moderation_gate.storage.exceptions import StorageError


@dataclass(frozen=True)
class UploadProfile:
    """Prompt text and object naming for one MIME family."""

    prompt_title: str
    prompt_message: str
    key_prefix: str
    extension: str
    content_type: str


UPLOAD_PROFILES: dict[MimeCategory, UploadProfile] = {
    MimeCategory.IMAGE: UploadProfile(
        prompt_title="Valid image",
        prompt_message="Do you want to store this image?",
        key_prefix="valid-image",
        extension="jpg",
        content_type="image/jpeg",
    ),
    MimeCategory.DOCUMENT: UploadProfile(
        prompt_title="Valid PDF",
        prompt_message="Do you want to upload this PDF?",
        key_prefix="valid-pdf",
        extension="pdf",
        content_type="application/pdf",
    ),
}


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class UploadOrchestrator:
    """Confirm -> build blob -> store, for content the policy allowed.

    Storage failures are logged and returned as an unsuccessful outcome;
    they never propagate to the caller.
    """

    def __init__(
        self,
        prompt: BaseConfirmationPrompt,
        storage: BaseStorage,
        notifier: BaseNotifier,
        bucket_id: str,
        *,
        upload_timeout_seconds: float | None = None,
        notify_on_storage_failure: bool = False,
        clock: Callable[[], int] = _epoch_millis,
    ) -> None:
        self._prompt = prompt
        self._storage = storage
        self._notifier = notifier
        self._bucket_id = bucket_id
        self._upload_timeout_seconds = upload_timeout_seconds
        self._notify_on_storage_failure = notify_on_storage_failure
        self._clock = clock
        self._last_stamp = 0

    async def submit(
        self,
        content: DecodedContent,
        mime_type: str,
        decision: PolicyDecision,
    ) -> UploadOutcome:
        if decision.verdict is not Verdict.ALLOW:
            raise ValueError(f"submit() requires an ALLOW decision, got {decision.verdict.value}")
        profile = self._profile_for(mime_type)

        answer = await self._prompt.prompt(
            profile.prompt_title, profile.prompt_message, Severity.SUCCESS
        )
        if not answer.confirmed:
            Log.info(f"Upload of {mime_type} cancelled by user")
            return UploadOutcome(succeeded=False, reason=USER_CANCELLED)

        data = content.payload_bytes()
        object_key = self.object_key(profile)

        try:
            location = await asyncio.wait_for(
                self._storage.put(self._bucket_id, object_key, data, profile.content_type),
                timeout=self._upload_timeout_seconds,
            )
        except (StorageError, asyncio.TimeoutError) as exc:
            reason = str(exc) or f"upload timed out after {self._upload_timeout_seconds}s"
            Log.error(f"Error uploading {object_key} to {self._storage.backend_name()}: {reason}")
            if self._notify_on_storage_failure:
                self._notifier.notify("Upload failed", reason, Severity.ERROR)
            return UploadOutcome(succeeded=False, reason=reason)

        Log.info(f"Uploaded {object_key} ({len(data)} bytes) to {location}")
        return UploadOutcome(succeeded=True, location=location)

    def object_key(self, profile: UploadProfile) -> str:
        """Build a unique object name, e.g. ``valid-image-1700000000000.jpg``."""
        stamp = self._clock()
        if stamp <= self._last_stamp:
            stamp = self._last_stamp + 1
        self._last_stamp = stamp
        return f"{profile.key_prefix}-{stamp}.{profile.extension}"

    @staticmethod
    def _profile_for(mime_type: str) -> UploadProfile:
        profile = UPLOAD_PROFILES.get(MimeCategory.from_mime_type(mime_type))
        if profile is None:
            raise ValueError(f"No upload profile for MIME type '{mime_type}'")
        return profile
