from app.analysis.analyzer import DocumentAnalyzer
from app.analysis.base import BaseAnalyzer
from app.analysis.factory import AnalyzerFactory
from app.analysis.models import Issue, Verdict

__all__ = ["AnalyzerFactory", "BaseAnalyzer", "DocumentAnalyzer", "Issue", "Verdict"]
