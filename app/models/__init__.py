"""Data models for the CV Analysis Backend."""
from app.models.cv import (
    PersonalInfo,
    ExperienceEntry,
    EducationEntry,
    Certification,
    CVRecord,
    AnalysisRequest,
    KeywordMatchRequest,
)
from app.models.analysis import (
    ATSBreakdown,
    ATSScore,
    GrammarIssue,
    GrammarAnalysis,
    ImpactAnalysis,
    ClarityAnalysis,
    ContentQuality,
    LengthAnalysis,
    KeywordItem,
    KeywordAnalysis,
    DesignScore,
    CVValidationResult,
    AnalysisResults,
    AnalysisResponse,
    HealthResponse,
)

__all__ = [
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "Certification",
    "CVRecord",
    "AnalysisRequest",
    "KeywordMatchRequest",
    "ATSBreakdown",
    "ATSScore",
    "GrammarIssue",
    "GrammarAnalysis",
    "ImpactAnalysis",
    "ClarityAnalysis",
    "ContentQuality",
    "LengthAnalysis",
    "KeywordItem",
    "KeywordAnalysis",
    "DesignScore",
    "CVValidationResult",
    "AnalysisResults",
    "AnalysisResponse",
    "HealthResponse",
]
