class ExtractionError(Exception):
    """Base exception for text extraction failures local to one file."""


class UnsupportedFormatError(ExtractionError):
    """Raised when a file suffix is not one of the recognized formats."""


class ExtractionFailureError(ExtractionError):
    """Raised when file bytes cannot be parsed as their declared format."""
