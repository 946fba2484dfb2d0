from csv_insights.analysis.analyzer import Analyzer
from csv_insights.analysis.base import BaseAnalyzer
from csv_insights.analysis.factory import AnalyzerFactory

__all__ = ["Analyzer", "AnalyzerFactory", "BaseAnalyzer"]
