import html
import io

import docx
from docx.table import Table
from docx.text.paragraph import Paragraph

from app.docx.base import BaseDocxConverter
from app.docx.exceptions import DocxConversionError


class PythonDocxAdapter(BaseDocxConverter):
    """Converts .docx to markup using python-docx."""

    def to_markup(self, docx_bytes: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(docx_bytes))
            blocks = [self._block_markup(block) for block in document.iter_inner_content()]
            return "".join(blocks)
        except DocxConversionError:
            raise
        except Exception as exc:
            raise DocxConversionError(f"python-docx conversion failed: {exc}") from exc

    def _block_markup(self, block: Paragraph | Table) -> str:
        if isinstance(block, Table):
            return self._table_markup(block)
        return self._paragraph_markup(block)

    @staticmethod
    def _paragraph_markup(paragraph: Paragraph) -> str:
        lines = [html.escape(line) for line in paragraph.text.split("\n")]
        return f"<p>{'<br>'.join(lines)}</p>"

    def _table_markup(self, table: Table) -> str:
        rows: list[str] = []
        for row in table.rows:
            cells: list[str] = []
            seen: set[int] = set()
            for cell in row.cells:
                # merged cells are returned once per grid column they span
                if id(cell._tc) in seen:
                    continue
                seen.add(id(cell._tc))
                inner = "".join(self._block_markup(b) for b in cell.iter_inner_content())
                cells.append(f"<td>{inner}</td>")
            rows.append(f"<tr>{''.join(cells)}</tr>")
        return f"<table>{''.join(rows)}</table>"
