from moderation_gate.config.settings import Settings
from moderation_gate.pdf.base import BasePdfValidator
from moderation_gate.pdf.pdfplumber_adapter import PdfPlumberAdapter
from moderation_gate.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfValidatorFactory:
    """Creates the correct PDF validator based on settings."""

    ADAPTERS: dict[str, type[BasePdfValidator]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfValidator:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
