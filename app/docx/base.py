from abc import ABC, abstractmethod


class BaseDocxConverter(ABC):
    """Contract for all word-processor (.docx) conversion adapters."""

    @abstractmethod
    def to_markup(self, docx_bytes: bytes) -> str:
        """Convert a .docx document into intermediate HTML markup.

        Only the main document body is converted: headers, footers and
        styling are dropped, block order follows the document.

        Args:
            docx_bytes: Raw .docx file content.

        Returns:
            HTML markup using ``<p>``, ``<br>`` and ``<table>/<tr>/<td>``.

        Raises:
            DocxConversionError: if the document is corrupt or unreadable.
        """
