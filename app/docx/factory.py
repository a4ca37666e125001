from app.config.settings import Settings
from app.docx.base import BaseDocxConverter
from app.docx.ooxml_adapter import OoxmlAdapter
from app.docx.python_docx_adapter import PythonDocxAdapter


class DocxConverterFactory:
    """Picks the .docx-to-markup engine named by ``settings.docx_engine``.

    ``python_docx`` understands merged cells and nested tables through the
    python-docx object model; ``ooxml`` reads the raw XML and needs nothing
    beyond the standard library. Both emit the same markup dialect, so text
    extraction does not depend on the choice. Hyphens and case are ignored,
    so ``Python-Docx`` selects ``python_docx``.
    """

    ENGINES: dict[str, type[BaseDocxConverter]] = {
        "python_docx": PythonDocxAdapter,
        "ooxml": OoxmlAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseDocxConverter:
        engine = settings.docx_engine.strip().lower().replace("-", "_")
        try:
            converter_cls = cls.ENGINES[engine]
        except KeyError:
            raise ValueError(
                f"Unknown docx engine '{settings.docx_engine}'. "
                f"Choose from: {', '.join(cls.ENGINES)}"
            ) from None
        return converter_cls()
