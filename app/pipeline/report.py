from app.analysis.models import Issue, Verdict
from app.pipeline.models import Aborted, BatchOutcome, FileVerdict


class ReportBuilder:
    """Converts a batch outcome into a JSON-serializable report.

    Verdict fields use the analyzer's wire names (``isSafe``, ``text_claim``...).
    """

    def build(self, outcome: BatchOutcome) -> dict[str, object]:
        """Return ``{"status": "completed", "files": [...]}`` or
        ``{"status": "aborted", "error": reason}``.
        """
        if isinstance(outcome, Aborted):
            return {"status": "aborted", "error": outcome.reason}
        files = [self._file_verdict_to_dict(fv) for fv in outcome.verdicts]
        return {
            "status": "completed",
            "files": files,
            "unsafe_count": sum(1 for fv in outcome.verdicts if not fv.verdict.is_safe),
        }

    def _file_verdict_to_dict(self, file_verdict: FileVerdict) -> dict[str, object]:
        return {"fileName": file_verdict.file_name, **self.verdict_to_dict(file_verdict.verdict)}

    def verdict_to_dict(self, verdict: Verdict) -> dict[str, object]:
        data: dict[str, object] = {"isSafe": verdict.is_safe}
        if verdict.summary is not None:
            data["summary"] = verdict.summary
        if verdict.issues:
            data["issues"] = [self._issue_to_dict(issue) for issue in verdict.issues]
        return data

    @staticmethod
    def _issue_to_dict(issue: Issue) -> dict[str, str]:
        return {
            "text_claim": issue.text_claim,
            "structural_reference": issue.structural_reference,
            "explanation": issue.explanation,
        }
