import json

from app.analysis.models import Issue, Verdict
from app.pipeline.models import Aborted, Completed, FileVerdict
from app.pipeline.report import ReportBuilder


def _issue() -> Issue:
    return Issue(
        text_claim="profit was $50M",
        structural_reference="$10M",
        explanation="mismatch",
    )


class TestReportBuilder:
    def test_completed_report(self) -> None:
        outcome = Completed(
            verdicts=(
                FileVerdict("a.txt", Verdict(is_safe=True, summary="clean")),
                FileVerdict("b.txt", Verdict(is_safe=False, issues=(_issue(),))),
            )
        )

        report = ReportBuilder().build(outcome)

        assert report == {
            "status": "completed",
            "files": [
                {"fileName": "a.txt", "isSafe": True, "summary": "clean"},
                {
                    "fileName": "b.txt",
                    "isSafe": False,
                    "issues": [
                        {
                            "text_claim": "profit was $50M",
                            "structural_reference": "$10M",
                            "explanation": "mismatch",
                        }
                    ],
                },
            ],
            "unsafe_count": 1,
        }

    def test_aborted_report(self) -> None:
        report = ReportBuilder().build(Aborted(reason="Failed to analyze document: down"))
        assert report == {"status": "aborted", "error": "Failed to analyze document: down"}

    def test_report_is_json_serializable(self) -> None:
        outcome = Completed(verdicts=(FileVerdict("a.txt", Verdict(is_safe=True)),))
        assert json.loads(json.dumps(ReportBuilder().build(outcome)))["files"] == [
            {"fileName": "a.txt", "isSafe": True}
        ]

    def test_verdict_to_dict_omits_absent_fields(self) -> None:
        assert ReportBuilder().verdict_to_dict(Verdict(is_safe=True)) == {"isSafe": True}
