"""Services for the CV Analysis Backend."""
from app.services.ats_scorer import ATSScorer, calculate_ats_score
from app.services.content_quality import ContentQualityScorer, calculate_content_quality
from app.services.cv_analysis import CVAnalysisService, analyze_cv
from app.services.keyword_matcher import KeywordMatcher, match_keywords
from app.services.length_analyzer import LengthAnalyzer, calculate_length_analysis
from app.services.text_extractor import extract_all_text

__all__ = [
    "ATSScorer",
    "calculate_ats_score",
    "ContentQualityScorer",
    "calculate_content_quality",
    "CVAnalysisService",
    "analyze_cv",
    "KeywordMatcher",
    "match_keywords",
    "LengthAnalyzer",
    "calculate_length_analysis",
    "extract_all_text",
]
