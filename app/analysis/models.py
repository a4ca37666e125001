from dataclasses import dataclass, field


@dataclass(frozen=True)
class Issue:
    """A prose claim that contradicts structured data in the same document."""

    text_claim: str
    structural_reference: str
    explanation: str


@dataclass(frozen=True)
class Verdict:
    """Outcome of scanning one document.

    A safe verdict lists no issues. An unsafe verdict without issues must
    explain itself in ``summary``.
    """

    is_safe: bool
    summary: str | None = None
    issues: tuple[Issue, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.is_safe and self.issues:
            raise ValueError("A safe verdict cannot list issues")
        if not self.is_safe and not self.issues and not (self.summary or "").strip():
            raise ValueError("An unsafe verdict without issues needs a summary")
