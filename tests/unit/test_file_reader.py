import io
import tempfile
from pathlib import Path

import pytest

from moderation_gate.pipeline.exceptions import InvalidInputError, ReadError
from moderation_gate.pipeline.file_reader import FileReader
from moderation_gate.pipeline.models import SelectedFile


class TestReadReturnsContent:
    @pytest.mark.asyncio
    async def test_reads_path_into_data_url(self, jpeg_path: Path, jpeg_bytes: bytes) -> None:
        selected = SelectedFile.from_path(jpeg_path)

        content = await FileReader().read(selected)

        assert content.encoded_payload.startswith("data:image/jpeg;base64,")
        assert content.payload_bytes() == jpeg_bytes
        assert content.source is selected

    @pytest.mark.asyncio
    async def test_reads_binary_stream(self) -> None:
        selected = SelectedFile(
            handle=io.BytesIO(b"%PDF-1.4"), mime_type="application/pdf", size_bytes=8
        )

        content = await FileReader().read(selected)

        assert content.payload_bytes() == b"%PDF-1.4"

    @pytest.mark.asyncio
    async def test_reads_named_temporary_file(self, jpeg_bytes: bytes) -> None:
        with tempfile.NamedTemporaryFile(suffix=".jpg") as handle:
            handle.write(jpeg_bytes)
            handle.flush()
            selected = SelectedFile(handle=handle, mime_type="image/jpeg", size_bytes=len(jpeg_bytes))

            content = await FileReader().read(selected)

        assert content.payload_bytes() == jpeg_bytes

    @pytest.mark.asyncio
    async def test_reads_spooled_temporary_file(self) -> None:
        with tempfile.SpooledTemporaryFile() as handle:
            handle.write(b"%PDF-1.7")
            selected = SelectedFile(handle=handle, mime_type="application/pdf", size_bytes=8)

            content = await FileReader().read(selected)

        assert content.payload_bytes() == b"%PDF-1.7"

    @pytest.mark.asyncio
    async def test_rereads_stream_from_start(self) -> None:
        stream = io.BytesIO(b"%PDF-1.4")
        selected = SelectedFile(handle=stream, mime_type="application/pdf", size_bytes=8)
        reader = FileReader()

        first = await reader.read(selected)
        second = await reader.read(selected)

        assert first.payload_bytes() == second.payload_bytes() == b"%PDF-1.4"


class TestReadRejectsInvalidInput:
    @pytest.mark.asyncio
    async def test_raises_for_non_selection(self) -> None:
        with pytest.raises(InvalidInputError, match="valid file"):
            await FileReader().read("photo.jpg")  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_raises_for_text_stream(self) -> None:
        selected = SelectedFile(
            handle=io.StringIO("hello"),  # type: ignore[arg-type]
            mime_type="image/png",
            size_bytes=5,
        )
        with pytest.raises(InvalidInputError):
            await FileReader().read(selected)

    @pytest.mark.asyncio
    async def test_raises_for_object_without_read(self) -> None:
        selected = SelectedFile(
            handle=object(),  # type: ignore[arg-type]
            mime_type="image/png",
            size_bytes=5,
        )
        with pytest.raises(InvalidInputError):
            await FileReader().read(selected)

    @pytest.mark.asyncio
    async def test_raises_for_closed_stream(self) -> None:
        stream = io.BytesIO(b"%PDF-1.4")
        stream.close()
        selected = SelectedFile(handle=stream, mime_type="application/pdf", size_bytes=8)

        with pytest.raises(InvalidInputError, match="closed"):
            await FileReader().read(selected)


class TestReadWrapsFailures:
    @pytest.mark.asyncio
    async def test_missing_file_raises_read_error(self, tmp_path: Path) -> None:
        selected = SelectedFile(
            handle=tmp_path / "gone.jpg", mime_type="image/jpeg", size_bytes=10
        )

        with pytest.raises(ReadError) as exc_info:
            await FileReader().read(selected)

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
