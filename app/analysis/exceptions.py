ANALYZER_FAILURE_MARKER = "Failed to analyze document"


class AnalyzerError(Exception):
    """Raised when document analysis fails."""


class AnalyzerResponseError(AnalyzerError):
    """Raised when the AI response does not match the verdict shape."""


class AnalyzerNetworkError(AnalyzerError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


def is_systemic_failure(exc: AnalyzerError) -> bool:
    """True when the error signals the analyzer backend itself is broken.

    The batch pipeline aborts on these; every error raised by
    DocumentAnalyzer.analyze carries the marker.
    """
    return str(exc).startswith(ANALYZER_FAILURE_MARKER)
