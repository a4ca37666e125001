import pytest

from app.analysis.models import Verdict
from app.extraction.models import InputFile
from app.pipeline.models import Aborted, Completed, FileVerdict
from app.session.models import (
    BatchFinished,
    ProgressReported,
    Reset,
    SessionPhase,
    SessionState,
    SubmitFiles,
)
from app.session.state_machine import INITIAL_STATE, transition

_FILES = (InputFile.from_bytes("a.txt", b"x"), InputFile.from_bytes("b.md", b"y"))
_VERDICTS = (FileVerdict("a.txt", Verdict(is_safe=True)),)


def _running() -> SessionState:
    return transition(INITIAL_STATE, SubmitFiles(_FILES))


def _results() -> SessionState:
    return transition(_running(), BatchFinished(Completed(verdicts=_VERDICTS)))


def _fatal() -> SessionState:
    return transition(_running(), BatchFinished(Aborted(reason="Failed to analyze document: x")))


class TestInitialState:
    def test_is_idle_and_empty(self) -> None:
        assert INITIAL_STATE == SessionState(
            phase=SessionPhase.IDLE, files=(), progress="", results=(), error=None
        )


class TestSubmit:
    def test_idle_to_running(self) -> None:
        state = _running()
        assert state.phase is SessionPhase.RUNNING
        assert state.files == _FILES

    def test_empty_submit_is_ignored(self) -> None:
        assert transition(INITIAL_STATE, SubmitFiles(())) is INITIAL_STATE

    def test_submit_while_running_is_ignored(self) -> None:
        running = _running()
        assert transition(running, SubmitFiles(_FILES[:1])) is running

    @pytest.mark.parametrize("make_state", [_results, _fatal])
    def test_submit_after_finish_requires_reset(self, make_state) -> None:  # type: ignore[no-untyped-def]
        state = make_state()
        assert transition(state, SubmitFiles(_FILES)) is state


class TestRunning:
    def test_progress_updates_text(self) -> None:
        state = transition(_running(), ProgressReported("Processing file 1 of 2"))
        assert state.phase is SessionPhase.RUNNING
        assert state.progress == "Processing file 1 of 2"
        assert state.files == _FILES

    def test_progress_outside_running_is_ignored(self) -> None:
        assert transition(INITIAL_STATE, ProgressReported("x")) is INITIAL_STATE
        results = _results()
        assert transition(results, ProgressReported("x")) is results

    def test_completed_goes_to_results(self) -> None:
        state = _results()
        assert state.phase is SessionPhase.RESULTS
        assert state.results == _VERDICTS
        assert state.error is None

    def test_completed_without_verdicts_still_results(self) -> None:
        state = transition(_running(), BatchFinished(Completed(verdicts=())))
        assert state.phase is SessionPhase.RESULTS
        assert state.results == ()

    def test_aborted_goes_to_fatal_without_results(self) -> None:
        state = _fatal()
        assert state.phase is SessionPhase.FATAL
        assert state.error == "Failed to analyze document: x"
        assert state.results == ()

    def test_reset_while_running_is_ignored(self) -> None:
        running = _running()
        assert transition(running, Reset()) is running

    def test_finish_outside_running_is_ignored(self) -> None:
        event = BatchFinished(Completed(verdicts=_VERDICTS))
        assert transition(INITIAL_STATE, event) is INITIAL_STATE


class TestReset:
    def test_results_to_idle(self) -> None:
        assert transition(_results(), Reset()) == INITIAL_STATE

    def test_fatal_to_idle_clears_everything(self) -> None:
        state = transition(_fatal(), Reset())
        assert state.phase is SessionPhase.IDLE
        assert state.error is None
        assert state.files == ()
        assert state.progress == ""
        assert state.results == ()

    def test_reset_when_idle_is_ignored(self) -> None:
        assert transition(INITIAL_STATE, Reset()) is INITIAL_STATE


class TestImmutability:
    def test_transition_does_not_mutate_input(self) -> None:
        running = _running()
        transition(running, ProgressReported("Analyzing file 1 of 2"))
        assert running.progress == ""

    def test_state_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            INITIAL_STATE.phase = SessionPhase.RUNNING  # type: ignore[misc]


class TestUnknownOutcome:
    def test_raises_type_error(self) -> None:
        with pytest.raises(TypeError, match="Unknown batch outcome"):
            transition(_running(), BatchFinished(outcome="done"))  # type: ignore[arg-type]
