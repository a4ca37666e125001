from app.config.settings import Settings
from app.docx.factory import DocxConverterFactory
from app.extraction.base import BaseTextExtractor
from app.extraction.text_extractor import TextExtractor


class TextExtractorFactory:
    """Creates the text extractor with the configured .docx engine."""

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractor:
        return TextExtractor(docx_converter=DocxConverterFactory.create(settings))
