import asyncio
from pathlib import Path

from moderation_gate.logging.logger import Log
from moderation_gate.pipeline.exceptions import InvalidInputError, ReadError
from moderation_gate.pipeline.models import DecodedContent, SelectedFile

INVALID_INPUT_MESSAGE = "Invalid file type. Please select a valid file."


class FileReader:
    """Buffers a selected file into memory as a data URL."""

    async def read(self, file: SelectedFile) -> DecodedContent:
        """Read the whole file, from the start for seekable streams.

        Raises:
            InvalidInputError: if ``file`` is not a selection with a binary handle.
            ReadError: if the underlying read fails.
        """
        self._check_handle(file)
        try:
            data = await asyncio.to_thread(self._read_bytes, file.handle)
        except InvalidInputError:
            raise
        except Exception as exc:
            raise ReadError(f"Failed to read selected file: {exc}") from exc
        Log.debug(f"Read {len(data)} bytes ({file.mime_type})")
        return DecodedContent.from_bytes(data, file)

    @staticmethod
    def _check_handle(file: object) -> None:
        if not isinstance(file, SelectedFile):
            raise InvalidInputError(INVALID_INPUT_MESSAGE)
        handle = file.handle
        if isinstance(handle, Path):
            return
        if not callable(getattr(handle, "read", None)):
            raise InvalidInputError(INVALID_INPUT_MESSAGE)
        if getattr(handle, "closed", False):
            raise InvalidInputError("Selected file is already closed.")

    @staticmethod
    def _read_bytes(handle: object) -> bytes:
        if isinstance(handle, Path):
            return handle.read_bytes()
        try:
            seekable = getattr(handle, "seekable", None)
            if callable(seekable) and seekable():
                handle.seek(0)  # type: ignore[attr-defined]
            data = handle.read()  # type: ignore[attr-defined]
        except ValueError as exc:
            raise InvalidInputError(f"{INVALID_INPUT_MESSAGE} ({exc})") from exc
        if isinstance(data, str):
            raise InvalidInputError(INVALID_INPUT_MESSAGE)
        return bytes(data)
