"""AI-powered structural spoofing analyzer."""

import json
from pathlib import Path

from app.analysis.base import BaseAnalyzer
from app.analysis.client_base import BaseAnalysisClient
from app.analysis.exceptions import ANALYZER_FAILURE_MARKER, AnalyzerError, AnalyzerResponseError
from app.analysis.models import Verdict
from app.analysis.prompt_loader import load_system_instruction, load_verdict_schema
from app.analysis.validator import validate_and_build
from app.logging.logger import Log


class DocumentAnalyzer(BaseAnalyzer):
    """Sends document text to an AI provider and validates the returned verdict.

    One request per call, no retries. Every failure leaves as an AnalyzerError
    (or subclass) whose message starts with ANALYZER_FAILURE_MARKER.
    """

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.1,
        system_instruction_path: Path | None = None,
        verdict_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_instruction = load_system_instruction(system_instruction_path)
        self._verdict_schema = load_verdict_schema(verdict_schema_path)

    def analyze(self, text: str) -> Verdict:
        try:
            verdict = self._analyze(text)
        except AnalyzerError as exc:
            raise type(exc)(f"{ANALYZER_FAILURE_MARKER}: {exc}") from exc
        except Exception as exc:
            raise AnalyzerError(f"{ANALYZER_FAILURE_MARKER}: {exc}") from exc
        Log.info(
            "Analysis complete",
            is_safe=verdict.is_safe,
            issues=len(verdict.issues),
        )
        return verdict

    def _analyze(self, text: str) -> Verdict:
        Log.debug(f"Analysis request: {len(text)} chars, model {self._model}")
        raw_response = self._call_ai(text)
        Log.debug(f"AI raw response:\n{raw_response}")
        return validate_and_build(self._parse_json(raw_response))

    def _call_ai(self, text: str) -> str:
        return self._client.request_verdict(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_instruction,
            document_text=text,
            verdict_schema=self._verdict_schema,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AnalyzerResponseError(f"Invalid response shape: not JSON ({exc})") from exc

        if not isinstance(parsed, dict):
            raise AnalyzerResponseError("Invalid response shape: JSON response must be an object")
        return parsed
