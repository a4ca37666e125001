class PipelineError(Exception):
    """Base exception for batch pipeline errors raised outside a batch run."""


class FileReadError(PipelineError):
    """Raised when a file cannot be read from disk."""
