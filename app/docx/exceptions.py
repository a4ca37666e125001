from app.extraction.exceptions import ExtractionFailureError


class DocxConversionError(ExtractionFailureError):
    """Raised when a word-processor document cannot be converted to markup."""
