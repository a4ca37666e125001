import json
import sys
from pathlib import Path

from app.config.settings import Settings
from app.logging.logger import Log
from app.pipeline.file_loader import FileLoader
from app.pipeline.models import Aborted, Completed
from app.pipeline.report import ReportBuilder
from app.session.models import SessionPhase, SessionState
from app.session.session import build_session


def _log_progress(state: SessionState) -> None:
    if state.phase is SessionPhase.RUNNING and state.progress:
        Log.info(state.progress)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> read files -> scan -> print JSON report."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: python -m app.main FILE [FILE ...]", file=sys.stderr)
        return 2

    settings = Settings()
    Log.configure(settings.log_level)

    files = FileLoader().load_all([Path(arg) for arg in args])
    session = build_session(settings, listener=_log_progress)
    state = session.submit(files)

    if state.phase is SessionPhase.FATAL:
        outcome = Aborted(reason=state.error or "")
    else:
        outcome = Completed(verdicts=state.results)
    print(json.dumps(ReportBuilder().build(outcome), indent=2, ensure_ascii=False))
    return 1 if state.phase is SessionPhase.FATAL else 0


if __name__ == "__main__":
    sys.exit(main())
