import io
import json
import struct
import zipfile
from unittest.mock import MagicMock

import docx
import pytest
from docx.document import Document as DocxDocument

from app.extraction.models import InputFile


def _save(document: DocxDocument) -> bytes:
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def report_docx_bytes() -> bytes:
    """A .docx whose prose claims $50M while its table shows $10M.

    Header and footer carry text that must not be extracted.
    """
    document = docx.Document()
    section = document.sections[0]
    section.header.paragraphs[0].text = "CONFIDENTIAL HEADER"
    section.footer.paragraphs[0].text = "Page footer text"

    document.add_paragraph("Acme Corp Q1 2024 Report")
    paragraph = document.add_paragraph("The first quarter profit was ")
    paragraph.add_run("$50M").bold = True
    paragraph.add_run(".")

    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Metric"
    table.cell(0, 1).text = "Value"
    table.cell(1, 0).text = "Profit"
    table.cell(1, 1).text = "$10M"

    document.add_paragraph("End of report.")
    return _save(document)


@pytest.fixture()
def corrupt_docx_bytes(report_docx_bytes: bytes) -> bytes:
    """The report .docx with its deflated word/document.xml stream overwritten."""
    with zipfile.ZipFile(io.BytesIO(report_docx_bytes)) as archive:
        info = archive.getinfo("word/document.xml")
    assert info.compress_type == zipfile.ZIP_DEFLATED
    raw = bytearray(report_docx_bytes)
    name_len, extra_len = struct.unpack_from("<HH", raw, info.header_offset + 26)
    data_start = info.header_offset + 30 + name_len + extra_len
    raw[data_start : data_start + 40] = b"\xff" * 40
    return bytes(raw)


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    """A valid .docx with no body text."""
    return _save(docx.Document())


@pytest.fixture()
def make_input_file():  # type: ignore[no-untyped-def]
    """Factory for InputFiles with the format inferred from the name."""

    def _make(name: str, content: bytes | str = b"some text") -> InputFile:
        raw = content.encode("utf-8") if isinstance(content, str) else content
        return InputFile.from_bytes(name, raw)

    return _make


@pytest.fixture()
def scripted_client() -> MagicMock:
    """An analysis client mock that answers with a safe verdict by default."""
    client = MagicMock()
    client.request_verdict.return_value = json.dumps(
        {"isSafe": True, "summary": "No inconsistencies found.", "issues": None}
    )
    return client
