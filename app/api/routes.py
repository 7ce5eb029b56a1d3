"""
API Routes for the CV Analysis Backend.

Provides endpoints for:
- Full CV analysis (ATS score, content quality, length, design, keywords)
- Standalone job description keyword matching
- CV completeness validation
- Industry benchmarks
- Health checks
"""
from datetime import datetime
import logging

from fastapi import APIRouter

from app.models.analysis import (
    AnalysisResponse,
    HealthResponse,
    KeywordAnalysis,
)
from app.models.cv import AnalysisRequest, CVRecord, KeywordMatchRequest
from app.services.ats_scorer import preferred_terms
from app.services.cache import cache_get_json, cache_set_json, make_cache_key
from app.services.cv_analysis import CVAnalysisService
from app.services.cv_validator import (
    completion_message,
    estimate_word_count,
    validate_for_analysis,
)
from app.services.keyword_matcher import match_keywords
from app.services.lexicons import INDUSTRY_BENCHMARKS
from app.services.text_extractor import extract_all_text
from app.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns the service status and version.
    """
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.utcnow(),
    )


@router.post("/analyze", tags=["Analysis"])
async def analyze(request: AnalysisRequest):
    """
    Analyze a CV.

    Request body:
    - cvData: The CV record matching the frontend format
    - jobDescription: Optional job description (enables keyword analysis)
    - targetIndustry: technology, healthcare, finance, marketing or education
    - analysisTypes: any of ats_score, content_quality, length_analysis, design_score

    Returns:
    - success: Whether the analysis succeeded
    - results: One entry per requested analysis, plus keywordAnalysis
      when a job description was supplied
    - error: Failure message when success is false
    """
    settings = get_settings()
    if not request.target_industry:
        request.target_industry = settings.default_industry

    cache_key = make_cache_key("analysis:v1", request.model_dump(by_alias=True))
    cached = await cache_get_json(cache_key)
    if cached:
        return cached

    response = CVAnalysisService().analyze_cv(request)
    payload = response.model_dump(by_alias=True, exclude_none=True)

    if response.success:
        await cache_set_json(cache_key, payload, ttl=settings.cache_ttl)
    else:
        logger.warning(f"Analysis returned failure: {response.error}")

    return payload


@router.post("/analyze/keywords", response_model=KeywordAnalysis, tags=["Analysis"])
async def analyze_keywords(request: KeywordMatchRequest):
    """
    Match a CV against the top keywords of a job description.

    Returns ranked job keywords with importance, CV matches and density,
    plus missing, underused and overused keyword lists.
    """
    return match_keywords(extract_all_text(request.cv_data), request.job_description)


@router.post("/validate", tags=["Utilities"])
async def validate_cv(cv_data: CVRecord):
    """
    Check whether a CV is complete enough for analysis.

    Returns the completion score, missing fields and recommendations.
    """
    result = validate_for_analysis(cv_data)
    return {
        **result.model_dump(by_alias=True),
        "message": completion_message(result),
        "estimatedWordCount": estimate_word_count(cv_data),
    }


@router.get("/industries", tags=["Utilities"])
async def list_industries():
    """
    List supported industries with their length benchmarks and preferred terms.
    """
    return [
        {
            "id": industry,
            "benchmark": benchmark,
            "preferredTerms": preferred_terms(industry),
        }
        for industry, benchmark in INDUSTRY_BENCHMARKS.items()
    ]
