from abc import ABC, abstractmethod

from app.analysis.models import Verdict


class BaseAnalyzer(ABC):
    """Contract for all document analyzers."""

    @abstractmethod
    def analyze(self, text: str) -> Verdict:
        """Scan document text for claims that contradict its structured data.

        Args:
            text: Extracted document text, non-blank.

        Returns:
            Validated Verdict.

        Raises:
            AnalyzerError: on any failure; the message starts with
                ANALYZER_FAILURE_MARKER.
        """
