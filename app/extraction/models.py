from dataclasses import dataclass

from app.extraction.formats import DocumentFormat, detect_format


@dataclass(frozen=True)
class InputFile:
    """A file submitted for scanning. ``declared_format`` is None for unknown suffixes."""

    name: str
    declared_format: DocumentFormat | None
    raw_bytes: bytes

    @classmethod
    def from_bytes(cls, name: str, raw_bytes: bytes) -> "InputFile":
        """Build an InputFile, inferring the format from the filename suffix."""
        return cls(name=name, declared_format=detect_format(name), raw_bytes=raw_bytes)


@dataclass(frozen=True)
class ExtractedText:
    """Plain text recovered from an InputFile. May be empty."""

    source_file: InputFile
    text: str
