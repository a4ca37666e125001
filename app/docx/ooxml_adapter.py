"""Dependency-free .docx converter reading the WordprocessingML body directly."""

import html
import io
import zipfile
import zlib
import xml.etree.ElementTree as ET

from app.docx.base import BaseDocxConverter
from app.docx.exceptions import DocxConversionError

_W = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"
_DOCUMENT_PART = "word/document.xml"
# zipfile raises these for damaged, encrypted or unsupported-compression entries
_ARCHIVE_ERRORS = (
    zipfile.BadZipFile,
    KeyError,
    zlib.error,
    EOFError,
    RuntimeError,
    NotImplementedError,
    ET.ParseError,
)


class OoxmlAdapter(BaseDocxConverter):
    """Converts .docx to markup by walking ``word/document.xml``.

    Field codes (``w:instrText``) and deleted runs (``w:delText``) are not
    visible text and are skipped.
    """

    def to_markup(self, docx_bytes: bytes) -> str:
        try:
            with zipfile.ZipFile(io.BytesIO(docx_bytes)) as archive:
                root = ET.fromstring(archive.read(_DOCUMENT_PART))
        except _ARCHIVE_ERRORS as exc:
            raise DocxConversionError(f"ooxml conversion failed: {exc}") from exc

        body = root.find(f"{_W}body")
        if body is None:
            raise DocxConversionError("ooxml conversion failed: document has no body")
        return self._container_markup(body)

    def _container_markup(self, element: ET.Element) -> str:
        parts: list[str] = []
        for child in element:
            if child.tag == f"{_W}p":
                parts.append(self._paragraph_markup(child))
            elif child.tag == f"{_W}tbl":
                parts.append(self._table_markup(child))
            elif child.tag == f"{_W}sdt":
                content = child.find(f"{_W}sdtContent")
                if content is not None:
                    parts.append(self._container_markup(content))
        return "".join(parts)

    @staticmethod
    def _paragraph_markup(paragraph: ET.Element) -> str:
        pieces: list[str] = []
        # only direct run children: w:tab also appears in w:pPr as a tab stop
        for run in paragraph.iter(f"{_W}r"):
            for node in run:
                if node.tag == f"{_W}t" and node.text:
                    pieces.append(html.escape(node.text))
                elif node.tag == f"{_W}tab":
                    pieces.append("\t")
                elif node.tag in (f"{_W}br", f"{_W}cr"):
                    pieces.append("<br>")
        return f"<p>{''.join(pieces)}</p>"

    def _table_markup(self, table: ET.Element) -> str:
        rows: list[str] = []
        for row in table.findall(f"{_W}tr"):
            cells = [
                f"<td>{self._container_markup(cell)}</td>"
                for cell in row.findall(f"{_W}tc")
            ]
            rows.append(f"<tr>{''.join(cells)}</tr>")
        return f"<table>{''.join(rows)}</table>"
