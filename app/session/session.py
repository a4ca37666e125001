from collections.abc import Callable, Sequence

from app.config.settings import Settings
from app.extraction.models import InputFile
from app.logging.logger import Log
from app.pipeline.models import Aborted
from app.pipeline.pipeline import BatchPipeline, build_pipeline
from app.session.models import (
    BatchFinished,
    ProgressReported,
    Reset,
    SessionEvent,
    SessionState,
    SubmitFiles,
)
from app.session.state_machine import INITIAL_STATE, transition

StateListener = Callable[[SessionState], None]


class ScanSession:
    """Drives the batch pipeline and owns the current session state.

    The pipeline is the single writer; ``listener`` (the rendering layer)
    receives every new snapshot and never mutates it.
    """

    def __init__(
        self,
        pipeline: BatchPipeline,
        listener: StateListener | None = None,
    ) -> None:
        self._pipeline = pipeline
        self._listener = listener
        self._state = INITIAL_STATE

    @property
    def state(self) -> SessionState:
        return self._state

    def submit(self, files: Sequence[InputFile]) -> SessionState:
        """Run a batch over ``files``. Ignored unless the session is idle.

        An exception escaping the pipeline ends the batch as Aborted, so the
        session always leaves RUNNING.
        """
        if not self._dispatch(SubmitFiles(files=tuple(files))):
            Log.warning(
                f"Submit ignored in phase {self._state.phase.value}",
                files=len(files),
            )
            return self._state

        try:
            outcome = self._pipeline.run(
                self._state.files,
                progress=lambda message: self._dispatch(ProgressReported(message)),
            )
        except Exception as exc:
            Log.error(f"Batch failed unexpectedly: {exc}")
            outcome = Aborted(reason=str(exc) or type(exc).__name__)
        self._dispatch(BatchFinished(outcome))
        return self._state

    def reset(self) -> SessionState:
        """Return to idle from RESULTS or FATAL, clearing everything."""
        self._dispatch(Reset())
        return self._state

    def _dispatch(self, event: SessionEvent) -> bool:
        new_state = transition(self._state, event)
        if new_state is self._state:
            return False
        if new_state.phase is not self._state.phase:
            Log.info(f"Session {self._state.phase.value} -> {new_state.phase.value}")
        self._state = new_state
        if self._listener is not None:
            self._listener(new_state)
        return True


def build_session(
    settings: Settings,
    listener: StateListener | None = None,
) -> ScanSession:
    """Build a ScanSession with a pipeline wired from settings."""
    return ScanSession(build_pipeline(settings), listener=listener)

