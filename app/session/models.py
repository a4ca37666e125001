from dataclasses import dataclass, field
from enum import Enum

from app.extraction.models import InputFile
from app.pipeline.models import BatchOutcome, FileVerdict


class SessionPhase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    RESULTS = "results"
    FATAL = "fatal"


@dataclass(frozen=True)
class SessionState:
    """Immutable snapshot of everything the rendering layer shows."""

    phase: SessionPhase = SessionPhase.IDLE
    files: tuple[InputFile, ...] = field(default_factory=tuple)
    progress: str = ""
    results: tuple[FileVerdict, ...] = field(default_factory=tuple)
    error: str | None = None


@dataclass(frozen=True)
class SubmitFiles:
    files: tuple[InputFile, ...]


@dataclass(frozen=True)
class ProgressReported:
    message: str


@dataclass(frozen=True)
class BatchFinished:
    outcome: BatchOutcome


@dataclass(frozen=True)
class Reset:
    pass


SessionEvent = SubmitFiles | ProgressReported | BatchFinished | Reset
