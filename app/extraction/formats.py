from enum import Enum
from pathlib import PurePath


class DocumentFormat(str, Enum):
    """Document formats the scanner can turn into plain text."""

    TEXT = "text"
    MARKDOWN = "markdown"
    WORD_PROCESSOR = "word_processor"


SUFFIX_FORMATS: dict[str, DocumentFormat] = {
    ".txt": DocumentFormat.TEXT,
    ".md": DocumentFormat.MARKDOWN,
    ".markdown": DocumentFormat.MARKDOWN,
    ".docx": DocumentFormat.WORD_PROCESSOR,
}


def file_suffix(file_name: str) -> str:
    """Lower-cased suffix of ``file_name`` including the dot, or ``""``."""
    return PurePath(file_name).suffix.lower()


def detect_format(file_name: str) -> DocumentFormat | None:
    """Infer the format from the filename suffix; None when unrecognized."""
    return SUFFIX_FORMATS.get(file_suffix(file_name))
