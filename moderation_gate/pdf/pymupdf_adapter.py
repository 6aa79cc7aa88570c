import pymupdf

from moderation_gate.pdf.base import BasePdfValidator
from moderation_gate.pdf.exceptions import PdfValidationError


class PyMuPdfAdapter(BasePdfValidator):
    """Validates PDF structure using PyMuPDF."""

    def count_pages(self, pdf_bytes: bytes) -> int:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return doc.page_count
        except PdfValidationError:
            raise
        except Exception as exc:
            raise PdfValidationError(f"pymupdf could not parse document: {exc}") from exc
