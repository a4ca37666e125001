"""Decodes the parsed AI response into a Verdict, failing closed on any mismatch."""

from typing import Any

from app.analysis.exceptions import AnalyzerResponseError
from app.analysis.models import Issue, Verdict

_ISSUE_FIELDS = ("text_claim", "structural_reference", "explanation")


def validate_and_build(data: dict[str, Any]) -> Verdict:
    """Validate raw parsed JSON and build a Verdict.

    Nothing is defaulted: a missing or non-boolean ``isSafe`` is an error,
    not a guess.

    Raises:
        AnalyzerResponseError: on any validation failure.
    """
    is_safe = _build_is_safe(data)
    summary = _build_summary(data.get("summary"))
    issues = _build_issues(data.get("issues"))
    if is_safe and issues:
        raise _invalid("a safe verdict must not list issues")
    if not is_safe and not issues and not (summary or "").strip():
        raise _invalid("an unsafe verdict without issues must include a summary")
    return Verdict(is_safe=is_safe, summary=summary, issues=issues)


def _invalid(reason: str) -> AnalyzerResponseError:
    return AnalyzerResponseError(f"Invalid response shape: {reason}")


def _build_is_safe(data: dict[str, Any]) -> bool:
    if "isSafe" not in data:
        raise _invalid("missing required field 'isSafe'")
    is_safe = data["isSafe"]
    if not isinstance(is_safe, bool):
        raise _invalid(f"'isSafe' must be a boolean, got {type(is_safe).__name__}")
    return is_safe


def _build_summary(raw: Any) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise _invalid("'summary' must be a string or null")
    return raw


def _build_issues(raw: Any) -> tuple[Issue, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise _invalid("'issues' must be a list or null")
    return tuple(_build_issue(item, i) for i, item in enumerate(raw))


def _build_issue(raw: Any, index: int) -> Issue:
    if not isinstance(raw, dict):
        raise _invalid(f"issue at index {index} must be an object")
    values: dict[str, str] = {}
    for name in _ISSUE_FIELDS:
        value = raw.get(name)
        if not isinstance(value, str):
            raise _invalid(f"issue at index {index}: '{name}' must be a string")
        values[name] = value
    return Issue(**values)
