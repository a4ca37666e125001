"""Offline analysis client adapter.

Returns a fixed safe verdict without any network calls. Useful for local
development and tests, and as a template for new provider adapters:
implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from app.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Adapter that always answers with a valid safe verdict."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "isSafe": True,
        "summary": "Offline example analyzer: no structural inconsistencies checked.",
        "issues": None,
    }

    def request_verdict(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        document_text: str,
        verdict_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, document_text, verdict_schema
        return json.dumps(self.DEFAULT_RESPONSE)
