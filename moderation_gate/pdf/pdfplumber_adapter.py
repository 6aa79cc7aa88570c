import io

import pdfplumber

from moderation_gate.pdf.base import BasePdfValidator
from moderation_gate.pdf.exceptions import PdfValidationError


class PdfPlumberAdapter(BasePdfValidator):
    """Validates PDF structure using pdfplumber."""

    def count_pages(self, pdf_bytes: bytes) -> int:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return len(pdf.pages)
        except PdfValidationError:
            raise
        except Exception as exc:
            raise PdfValidationError(f"pdfplumber could not parse document: {exc}") from exc
