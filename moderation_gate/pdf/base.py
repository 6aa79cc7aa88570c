from abc import ABC, abstractmethod

from moderation_gate.pdf.exceptions import PdfValidationError


class BasePdfValidator(ABC):
    """Contract for all PDF structural validation adapters."""

    def is_valid(self, pdf_bytes: bytes) -> bool:
        """Return True when the bytes parse as a PDF with at least one page.

        Malformed input yields False; it never raises.
        """
        if not pdf_bytes:
            return False
        try:
            return self.count_pages(pdf_bytes) > 0
        except PdfValidationError:
            return False

    @abstractmethod
    def count_pages(self, pdf_bytes: bytes) -> int:
        """Parse PDF bytes and return the number of pages.

        Args:
            pdf_bytes: Raw PDF file content.

        Raises:
            PdfValidationError: if the bytes are not a parseable PDF.
        """
