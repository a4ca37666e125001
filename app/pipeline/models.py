from collections.abc import Callable
from dataclasses import dataclass, field

from app.analysis.models import Verdict

ProgressCallback = Callable[[str], None]

EMPTY_FILE_SUMMARY = "File is empty or contains no extractable text."


@dataclass(frozen=True)
class FileVerdict:
    """Verdict for one processed file. Names need not be unique."""

    file_name: str
    verdict: Verdict


@dataclass(frozen=True)
class Completed:
    """Every file was analyzed or handled locally; verdicts follow input order."""

    verdicts: tuple[FileVerdict, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Aborted:
    """The analyzer backend failed systemically; no verdicts are surfaced."""

    reason: str


BatchOutcome = Completed | Aborted
