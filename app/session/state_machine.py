"""Pure transition function for the scan session.

    IDLE    --SubmitFiles(non-empty)-->  RUNNING
    RUNNING --ProgressReported------->   RUNNING
    RUNNING --BatchFinished(Completed)-> RESULTS
    RUNNING --BatchFinished(Aborted)---> FATAL
    RESULTS --Reset------------------>   IDLE
    FATAL   --Reset------------------>   IDLE

Any other (state, event) pair is ignored and the given state is returned
unchanged, so submitting while RUNNING is a no-op rather than a queued job.
"""

from app.pipeline.models import Aborted, Completed
from app.session.models import (
    BatchFinished,
    ProgressReported,
    Reset,
    SessionEvent,
    SessionPhase,
    SessionState,
    SubmitFiles,
)

INITIAL_STATE = SessionState()


def transition(state: SessionState, event: SessionEvent) -> SessionState:
    """Return the state after ``event``; ``state`` itself when the event is not legal."""
    if state.phase is SessionPhase.IDLE:
        if isinstance(event, SubmitFiles) and event.files:
            return SessionState(phase=SessionPhase.RUNNING, files=tuple(event.files))
        return state

    if state.phase is SessionPhase.RUNNING:
        if isinstance(event, ProgressReported):
            return SessionState(
                phase=SessionPhase.RUNNING,
                files=state.files,
                progress=event.message,
            )
        if isinstance(event, BatchFinished):
            return _finish(state, event)
        return state

    if isinstance(event, Reset):
        return INITIAL_STATE
    return state


def _finish(state: SessionState, event: BatchFinished) -> SessionState:
    outcome = event.outcome
    if isinstance(outcome, Completed):
        return SessionState(
            phase=SessionPhase.RESULTS,
            files=state.files,
            results=outcome.verdicts,
        )
    if isinstance(outcome, Aborted):
        return SessionState(
            phase=SessionPhase.FATAL,
            files=state.files,
            error=outcome.reason,
        )
    raise TypeError(f"Unknown batch outcome: {outcome!r}")
