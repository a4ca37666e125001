from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.analysis.base import BaseAnalyzer
from app.analysis.models import Verdict
from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.models import InputFile
from app.logging.logger import Log
from app.pipeline.models import EMPTY_FILE_SUMMARY, ProgressCallback


@dataclass(slots=True)
class FileContext:
    """Per-file state carried through the steps. Setting ``verdict`` ends the chain."""

    file: InputFile
    position: int
    total: int
    progress: ProgressCallback
    text: str = ""
    verdict: Verdict | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: FileContext) -> FileContext:
        raise NotImplementedError


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: BaseTextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: FileContext) -> FileContext:
        try:
            extracted = self._extractor.extract(context.file)
        except ExtractionError as exc:
            Log.warning(f"Could not extract {context.file.name}: {exc}")
            context.verdict = Verdict(
                is_safe=False,
                summary=f"Could not read {context.file.name}: {exc}",
            )
            return context
        context.text = extracted.text
        Log.info(f"Extracted {len(context.text)} chars from {context.file.name}")
        return context


class SkipBlankTextStep(PipelineStep):
    def run(self, context: FileContext) -> FileContext:
        if not context.text.strip():
            Log.info(f"Skipping analysis of {context.file.name}: no text")
            context.verdict = Verdict(is_safe=True, summary=EMPTY_FILE_SUMMARY)
        return context


class AnalyzeStep(PipelineStep):
    """Runs the analyzer. AnalyzerError propagates to the batch loop."""

    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: FileContext) -> FileContext:
        context.progress(f"Analyzing file {context.position} of {context.total}")
        context.verdict = self._analyzer.analyze(context.text)
        return context
