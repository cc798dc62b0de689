from app.analysis.analyzer import ContentAnalyzer
from app.analysis.factory import AnalyzerFactory
from app.analysis.normalizer import ResponseNormalizer
from app.analysis.request_builder import AnalysisRequestBuilder

__all__ = ["AnalysisRequestBuilder", "AnalyzerFactory", "ContentAnalyzer", "ResponseNormalizer"]
