import httpx
import openai

from app.analysis.client_base import BaseAnalysisClient
from app.analysis.exceptions import AnalyzerError, AnalyzerNetworkError

_TRANSPORT_ERRORS = (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException)


class OpenAIClientAdapter(BaseAnalysisClient):
    """Verdict client for any provider speaking the OpenAI chat-completions API.

    The verdict schema is sent as a strict ``json_schema`` response format so
    the model cannot drop ``isSafe`` or invent extra fields. ``timeout_seconds``
    bounds each call and the SDK's own retries are disabled: one document is
    one request, and a failure is reported rather than silently repeated.
    """

    SCHEMA_NAME = "scan_verdict"

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def request_verdict(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        document_text: str,
        verdict_schema: dict[str, object],
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format=self._response_format(verdict_schema),
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": document_text},
                ],
            )
        except _TRANSPORT_ERRORS as exc:
            raise AnalyzerNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            # status errors (auth, quota, 5xx) abort the batch like lost connections
            raise AnalyzerNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalyzerError("AI returned no choices")
        reply = response.choices[0].message.content
        if reply is None:
            raise AnalyzerError("AI returned empty response")
        return reply

    @classmethod
    def _response_format(cls, verdict_schema: dict[str, object]) -> dict[str, object]:
        return {
            "type": "json_schema",
            "json_schema": {
                "name": cls.SCHEMA_NAME,
                "strict": True,
                "schema": verdict_schema,
            },
        }
