from collections.abc import Sequence

from app.analysis import AnalyzerFactory, BaseAnalyzer, Verdict
from app.analysis.exceptions import AnalyzerError, is_systemic_failure
from app.config.settings import Settings
from app.extraction.base import BaseTextExtractor
from app.extraction.factory import TextExtractorFactory
from app.extraction.models import InputFile
from app.logging.logger import Log
from app.pipeline.models import (
    Aborted,
    BatchOutcome,
    Completed,
    FileVerdict,
    ProgressCallback,
)
from app.pipeline.steps import (
    AnalyzeStep,
    ExtractTextStep,
    FileContext,
    PipelineStep,
    SkipBlankTextStep,
)


def _ignore_progress(message: str) -> None:
    _ = message


class BatchPipeline:
    """Runs a batch of files through the per-file steps, strictly in order.

    Extraction problems and non-systemic analyzer errors become an unsafe
    verdict for that file and the batch carries on. A systemic analyzer
    failure aborts the whole batch and discards the verdicts gathered so far.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def run(
        self,
        files: Sequence[InputFile],
        progress: ProgressCallback = _ignore_progress,
    ) -> BatchOutcome:
        total = len(files)
        Log.info(f"Starting batch of {total} files")
        verdicts: list[FileVerdict] = []
        for position, file in enumerate(files, start=1):
            progress(f"Processing file {position} of {total}")
            context = FileContext(file=file, position=position, total=total, progress=progress)
            try:
                verdict = self._run_steps(context)
            except AnalyzerError as exc:
                if is_systemic_failure(exc):
                    Log.error(
                        f"Batch aborted at file {position} of {total}: {exc}",
                        file=file.name,
                    )
                    return Aborted(reason=str(exc))
                Log.warning(f"Analysis failed for {file.name}: {exc}")
                verdict = Verdict(is_safe=False, summary=str(exc))
            verdicts.append(FileVerdict(file_name=file.name, verdict=verdict))

        Log.info(f"Batch completed: {len(verdicts)} verdicts")
        return Completed(verdicts=tuple(verdicts))

    def _run_steps(self, context: FileContext) -> Verdict:
        for step in self._steps:
            context = step.run(context)
            if context.verdict is not None:
                return context.verdict
        raise RuntimeError(f"No step produced a verdict for {context.file.name}")


def build_pipeline(
    settings: Settings,
    extractor: BaseTextExtractor | None = None,
    analyzer: BaseAnalyzer | None = None,
) -> BatchPipeline:
    """Build a BatchPipeline with the configured extractor and analyzer."""
    extractor = extractor if extractor is not None else TextExtractorFactory.create(settings)
    analyzer = analyzer if analyzer is not None else AnalyzerFactory.create(settings)
    return BatchPipeline(
        steps=[
            ExtractTextStep(extractor),
            SkipBlankTextStep(),
            AnalyzeStep(analyzer),
        ]
    )
