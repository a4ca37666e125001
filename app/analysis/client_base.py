from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Transport to one AI provider for a single structural-consistency check.

    Clients only move text; parsing and validating the verdict is the
    analyzer's job.
    """

    @abstractmethod
    def request_verdict(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        document_text: str,
        verdict_schema: dict[str, object],
    ) -> str:
        """Ask ``model`` to judge ``document_text`` and return its raw reply.

        Args:
            model: Provider model identifier.
            temperature: Sampling temperature, already clamped by the analyzer.
            system_prompt: The fixed detection instruction.
            document_text: Extracted text of one document, sent unmodified.
            verdict_schema: JSON schema of ``{isSafe, summary, issues}`` the
                provider should constrain its output to, where it supports that.

        Raises:
            AnalyzerNetworkError: the provider could not be reached or refused.
            AnalyzerError: the provider answered without any content.
        """
