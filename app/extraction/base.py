from abc import ABC, abstractmethod

from app.extraction.models import ExtractedText, InputFile


class BaseTextExtractor(ABC):
    """Contract for turning a submitted file into plain text."""

    @abstractmethod
    def extract(self, file: InputFile) -> ExtractedText:
        """Extract plain text from an input file.

        Args:
            file: The submitted file with its declared format.

        Returns:
            ExtractedText, possibly empty or whitespace-only.

        Raises:
            UnsupportedFormatError: if the file's suffix is not recognized.
            ExtractionFailureError: if the bytes do not parse as the format.
        """
