"""Loaders for the analyzer's bundled prompt resources.

Both files ship as package data under ``prompts/`` and can be overridden per
analyzer for experiments with other instructions or schemas.
"""

import json
from pathlib import Path

from app.analysis.exceptions import AnalyzerError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def _read(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalyzerError(f"Failed to load {label}: {exc}") from exc


def load_system_instruction(path: Path | None = None) -> str:
    """Return the instruction telling the model what structural spoofing is.

    Raises:
        AnalyzerError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "system_instruction.txt", "system instruction")


def load_verdict_schema(path: Path | None = None) -> dict[str, object]:
    """Return the JSON schema a verdict reply must satisfy, parsed.

    The bundled schema requires ``isSafe``, ``summary`` and ``issues`` and
    forbids extra fields, which strict structured output needs.

    Raises:
        AnalyzerError: if the file cannot be read or is not a JSON object.
    """
    raw = _read(path or _DEFAULT_PROMPT_DIR / "verdict_schema.json", "verdict schema")
    try:
        schema = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise AnalyzerError(f"Failed to load verdict schema: invalid JSON ({exc})") from exc
    if not isinstance(schema, dict):
        raise AnalyzerError("Failed to load verdict schema: schema must be a JSON object")
    return schema
