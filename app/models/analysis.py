"""Result models produced by the CV analysis engine.

All models serialize with camelCase aliases (``model_dump(by_alias=True)``)
so the UI receives the same shape it always has.
"""
from datetime import datetime
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field


# ============================================
# ATS Score
# ============================================


class ATSBreakdown(BaseModel):
    """Weighted sub-scores behind the ATS score."""
    formatting: int = Field(..., ge=0, le=100)
    keywords: int = Field(..., ge=0, le=100)
    structure: int = Field(..., ge=0, le=100)
    readability: int = Field(..., ge=0, le=100)
    file_format: int = Field(..., alias="fileFormat", ge=0, le=100)

    class Config:
        populate_by_name = True


class ATSScore(BaseModel):
    """ATS compatibility score."""
    overall: int = Field(..., ge=0, le=100)
    breakdown: ATSBreakdown
    recommendations: List[str] = Field(default_factory=list)
    pass_rate: Literal["High", "Medium", "Low"] = Field(..., alias="passRate")

    class Config:
        populate_by_name = True


# ============================================
# Content Quality
# ============================================


class GrammarIssue(BaseModel):
    """A single grammar heuristic hit."""
    type: str = "grammar"
    message: str
    text: str
    suggestion: str
    severity: str = "warning"
    position: int


class GrammarAnalysis(BaseModel):
    score: int = Field(..., ge=0, le=100)
    issues: List[GrammarIssue] = Field(default_factory=list)


class ImpactAnalysis(BaseModel):
    """Weak phrasing and missing quantification in experience text."""
    score: int = Field(..., ge=0, le=100)
    weak_verbs: List[str] = Field(alias="weakVerbs", default_factory=list)
    suggested_verbs: Dict[str, List[str]] = Field(alias="suggestedVerbs", default_factory=dict)
    missing_quantification: List[str] = Field(alias="missingQuantification", default_factory=list)
    passive_voice_count: int = Field(0, alias="passiveVoiceCount")

    class Config:
        populate_by_name = True


class ClarityAnalysis(BaseModel):
    """Sentence length, readability grade and jargon level."""
    score: int = Field(..., ge=0, le=100)
    avg_sentence_length: int = Field(0, alias="avgSentenceLength")
    readability_grade: int = Field(0, alias="readabilityGrade")
    jargon_level: Literal["Low", "Medium", "High"] = Field("Low", alias="jargonLevel")
    jargon_words: List[str] = Field(alias="jargonWords", default_factory=list)

    class Config:
        populate_by_name = True


class ContentQuality(BaseModel):
    """Content quality score averaged over grammar, impact and clarity."""
    overall: int = Field(..., ge=0, le=100)
    grammar: GrammarAnalysis
    impact: ImpactAnalysis
    clarity: ClarityAnalysis


# ============================================
# Length Analysis
# ============================================


class SectionLength(BaseModel):
    section: str
    words: int
    recommended: int
    status: Literal["short", "optimal", "long"] = "optimal"


class LengthStats(BaseModel):
    pages: int
    words: int
    characters: int
    sections: List[SectionLength] = Field(default_factory=list)


class IndustryBenchmark(BaseModel):
    ideal_pages: str = Field(..., alias="idealPages")
    ideal_words: int = Field(..., alias="idealWords")
    max_words: int = Field(..., alias="maxWords")
    min_words: int = Field(..., alias="minWords")

    class Config:
        populate_by_name = True


class LengthRecommendations(BaseModel):
    action: Literal["expand", "condense", "optimal"]
    priority: Literal["high", "medium", "low"]
    suggestions: List[str] = Field(default_factory=list)


class LengthAnalysis(BaseModel):
    """Word count compared against industry benchmarks."""
    overall: int = Field(..., ge=0, le=100)
    current_stats: LengthStats = Field(..., alias="currentStats")
    industry_benchmark: IndustryBenchmark = Field(..., alias="industryBenchmark")
    recommendations: LengthRecommendations

    class Config:
        populate_by_name = True


# ============================================
# Keyword Analysis
# ============================================


ImportanceLevel = Literal["Critical", "Important", "Nice-to-have"]


class KeywordItem(BaseModel):
    """A ranked job-description keyword and how the CV covers it."""
    keyword: str
    importance: ImportanceLevel
    frequency: int
    cv_matches: int = Field(0, alias="cvMatches")
    density: float = 0.0

    class Config:
        populate_by_name = True


class SynonymHint(BaseModel):
    """A missing keyword that the CV expresses through a known alias."""
    keyword: str
    found_as: str = Field(..., alias="foundAs")

    class Config:
        populate_by_name = True


class KeywordRecommendations(BaseModel):
    missing: List[str] = Field(default_factory=list)
    underused: List[str] = Field(default_factory=list)
    overused: List[str] = Field(default_factory=list)
    synonyms: List[SynonymHint] = Field(default_factory=list)


class KeywordAnalysis(BaseModel):
    """Job description keyword coverage."""
    job_keywords: List[KeywordItem] = Field(alias="jobKeywords", default_factory=list)
    recommendations: KeywordRecommendations = Field(default_factory=KeywordRecommendations)
    overall_match: int = Field(0, alias="overallMatch", ge=0, le=100)

    class Config:
        populate_by_name = True


# ============================================
# Design Score (placeholder)
# ============================================


class LayoutScore(BaseModel):
    score: int
    whitespace: int
    margins: str
    sections: str


class TypographyScore(BaseModel):
    score: int
    font_consistency: bool = Field(..., alias="fontConsistency")
    font_size: str = Field(..., alias="fontSize")
    hierarchy: str

    class Config:
        populate_by_name = True


class ProfessionalismScore(BaseModel):
    score: int
    color_scheme: str = Field(..., alias="colorScheme")
    graphics: str

    class Config:
        populate_by_name = True


class DesignScore(BaseModel):
    overall: int = Field(..., ge=0, le=100)
    layout: LayoutScore
    typography: TypographyScore
    professionalism: ProfessionalismScore


# ============================================
# Validation
# ============================================


class CVValidationResult(BaseModel):
    """How complete a CV is before analysis."""
    is_valid: bool = Field(..., alias="isValid")
    completion_score: int = Field(..., alias="completionScore", ge=0, le=100)
    missing_fields: List[str] = Field(alias="missingFields", default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True


# ============================================
# Orchestrated response
# ============================================


class AnalysisResults(BaseModel):
    """Results keyed by analysis kind; only requested kinds are populated."""
    ats_score: Optional[ATSScore] = Field(None, alias="atsScore")
    content_quality: Optional[ContentQuality] = Field(None, alias="contentQuality")
    design_score: Optional[DesignScore] = Field(None, alias="designScore")
    length_analysis: Optional[LengthAnalysis] = Field(None, alias="lengthAnalysis")
    keyword_analysis: Optional[KeywordAnalysis] = Field(None, alias="keywordAnalysis")

    class Config:
        populate_by_name = True


class AnalysisResponse(BaseModel):
    """Response returned by the analysis orchestrator."""
    success: bool
    results: AnalysisResults = Field(default_factory=AnalysisResults)
    error: Optional[str] = None

    class Config:
        populate_by_name = True


class HealthResponse(BaseModel):
    """Health check response."""
    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime
