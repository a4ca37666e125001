from collections.abc import Callable

from app.docx.base import BaseDocxConverter
from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import UnsupportedFormatError
from app.extraction.formats import DocumentFormat, file_suffix
from app.extraction.markup import strip_markup
from app.extraction.models import ExtractedText, InputFile


class TextExtractor(BaseTextExtractor):
    """Dispatches extraction on the file's declared format, one handler per format."""

    def __init__(self, docx_converter: BaseDocxConverter) -> None:
        self._docx_converter = docx_converter
        self._handlers: dict[DocumentFormat, Callable[[bytes], str]] = {
            DocumentFormat.TEXT: self._read_text,
            DocumentFormat.MARKDOWN: self._read_text,
            DocumentFormat.WORD_PROCESSOR: self._read_word_processor,
        }

    def extract(self, file: InputFile) -> ExtractedText:
        if file.declared_format is None:
            suffix = file_suffix(file.name) or "(none)"
            raise UnsupportedFormatError(
                f"Unsupported file type '{suffix}' for {file.name}"
            )
        handler = self._handlers[file.declared_format]
        return ExtractedText(source_file=file, text=handler(file.raw_bytes))

    @staticmethod
    def _read_text(raw_bytes: bytes) -> str:
        # matches browser text decoding: BOM dropped, undecodable bytes replaced
        return raw_bytes.decode("utf-8-sig", errors="replace")

    def _read_word_processor(self, raw_bytes: bytes) -> str:
        return strip_markup(self._docx_converter.to_markup(raw_bytes))
