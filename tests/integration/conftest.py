import json
from unittest.mock import MagicMock

import pytest

from app.analysis.analyzer import DocumentAnalyzer
from app.config.settings import Settings
from app.pipeline.pipeline import BatchPipeline, build_pipeline


def _answer(document_text: str) -> str:
    if "$50M" in document_text and "$10M" in document_text:
        return json.dumps(
            {
                "isSafe": False,
                "summary": "Profit in the prose disagrees with the table.",
                "issues": [
                    {
                        "text_claim": "The first quarter profit was $50M.",
                        "structural_reference": "Profit | $10M",
                        "explanation": "The table lists profit as $10M, not $50M.",
                    }
                ],
            }
        )
    return json.dumps({"isSafe": True, "summary": None, "issues": None})


@pytest.fixture()
def consistency_client() -> MagicMock:
    """Client that flags documents mentioning both $50M and $10M."""
    client = MagicMock()
    client.request_verdict.side_effect = lambda **kwargs: _answer(kwargs["document_text"])
    return client


@pytest.fixture()
def make_pipeline(consistency_client: MagicMock):  # type: ignore[no-untyped-def]
    """Factory for a real pipeline backed by the scripted client."""

    def _make(docx_engine: str = "python_docx", client: MagicMock | None = None) -> BatchPipeline:
        settings = Settings(docx_engine=docx_engine, analyzer_provider="example")
        analyzer = DocumentAnalyzer(client=client or consistency_client, model="test-model")
        return build_pipeline(settings, analyzer=analyzer)

    return _make
