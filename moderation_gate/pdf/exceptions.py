class PdfValidationError(Exception):
    """Raised when PDF bytes cannot be parsed by the underlying engine."""
