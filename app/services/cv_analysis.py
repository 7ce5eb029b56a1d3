"""
CV analysis orchestration.

Runs the requested analyzers over one CV and assembles a single response.
This is the only place where analyzer exceptions are caught: any failure is
turned into ``AnalysisResponse(success=False, error=...)``.
"""

import logging

from app.models.analysis import AnalysisResponse, AnalysisResults
from app.models.cv import AnalysisRequest
from app.services.ats_scorer import ATSScorer
from app.services.content_quality import ContentQualityScorer
from app.services.design_scorer import calculate_design_score
from app.services.keyword_matcher import KeywordMatcher
from app.services.length_analyzer import LengthAnalyzer
from app.services.lexicons import DEFAULT_INDUSTRY
from app.services.text_extractor import extract_all_text

logger = logging.getLogger(__name__)


ATS_SCORE = "ats_score"
CONTENT_QUALITY = "content_quality"
LENGTH_ANALYSIS = "length_analysis"
DESIGN_SCORE = "design_score"

ANALYSIS_TYPES = (ATS_SCORE, CONTENT_QUALITY, LENGTH_ANALYSIS, DESIGN_SCORE)


class CVAnalysisService:
    """Stateless entry point of the analysis engine; build one per request."""

    def __init__(self):
        self.ats_scorer = ATSScorer()
        self.content_scorer = ContentQualityScorer()
        self.length_analyzer = LengthAnalyzer()
        self.keyword_matcher = KeywordMatcher()

    def analyze_cv(self, request: AnalysisRequest) -> AnalysisResponse:
        """
        Perform the requested analyses on a CV.

        Only requested kinds are populated; unknown kinds are ignored. Keyword
        analysis runs whenever a job description is present.

        Args:
            request: CV, optional job description, target industry and kinds

        Returns:
            AnalysisResponse with results, or success=False and the error message
        """
        try:
            cv = request.cv_data
            job_description = request.job_description
            industry = request.target_industry or DEFAULT_INDUSTRY
            requested = set(request.analysis_types)

            ignored = requested.difference(ANALYSIS_TYPES)
            if ignored:
                logger.debug(f"Ignoring unknown analysis types: {sorted(ignored)}")

            logger.info(f"Analyzing CV: types={sorted(requested)}, industry={industry}")
            results = AnalysisResults()

            if ATS_SCORE in requested:
                results.ats_score = self.ats_scorer.score(cv, job_description, industry)

            if CONTENT_QUALITY in requested:
                results.content_quality = self.content_scorer.score(cv)

            if DESIGN_SCORE in requested:
                results.design_score = calculate_design_score(cv)

            if LENGTH_ANALYSIS in requested:
                results.length_analysis = self.length_analyzer.analyze(cv, industry)

            if job_description:
                results.keyword_analysis = self.keyword_matcher.match(
                    extract_all_text(cv), job_description
                )

            logger.info("CV analysis completed successfully")
            return AnalysisResponse(success=True, results=results)

        except Exception as e:
            logger.error(f"CV analysis failed: {e}", exc_info=True)
            return AnalysisResponse(
                success=False,
                results=AnalysisResults(),
                error=str(e) or "Analysis failed",
            )


def analyze_cv(request: AnalysisRequest) -> AnalysisResponse:
    """Analyze a CV with a fresh, stateless service."""
    return CVAnalysisService().analyze_cv(request)
