"""
ATS (Applicant Tracking System) compatibility scoring.

The ATS score is a weighted blend of five sub-scores:
- Formatting: decorative glyphs and table-like layout cost points
- Keywords: job description terms and industry vocabulary found in the CV
- Structure: presence of the sections recruiters' software expects
- Readability: sentence length and bullet usage
- File format: fixed until real document inspection exists

All sub-scores are integers in [0, 100] and the overall score is rounded
half-up from the weighted sum.
"""

import re
import logging
from typing import Optional

from app.models.analysis import ATSBreakdown, ATSScore
from app.models.cv import CVRecord
from app.services.lexicons import DEFAULT_INDUSTRY, INDUSTRY_RULES
from app.services.nlp_utils import extract_keywords, round_half_up, TextStats
from app.services.text_extractor import extract_all_text

logger = logging.getLogger(__name__)


SCORE_WEIGHTS = {
    "formatting": 0.25,
    "keywords": 0.30,
    "structure": 0.20,
    "readability": 0.15,
    "file_format": 0.10,
}

# Neutral keyword score when no job description is supplied
NEUTRAL_KEYWORD_SCORE = 70

# Not derived from the uploaded document yet
FILE_FORMAT_SCORE = 85

INDUSTRY_TERM_BONUS = 0.5


def preferred_terms(industry: str) -> list[str]:
    """Industry vocabulary the ATS rewards; empty for unknown industries."""
    return INDUSTRY_RULES.get(industry, {}).get("preferred_terms", [])


def pass_rate_for(overall: int) -> str:
    if overall >= 85:
        return "High"
    if overall >= 70:
        return "Medium"
    return "Low"


class ATSScorer:
    """
    ATS compatibility scoring engine.

    Stateless: holds only precompiled patterns, so a fresh instance can be
    created per request.
    """

    def __init__(self):
        self.special_char_pattern = re.compile(r"[★●◆▪▫]")
        self.bullet_pattern = re.compile(r"[•*\-]")

    def score(
        self,
        cv: CVRecord,
        job_description: Optional[str] = None,
        industry: str = DEFAULT_INDUSTRY,
    ) -> ATSScore:
        """
        Calculate the ATS compatibility score of a CV.

        Args:
            cv: The CV record to analyze
            job_description: Optional job description for keyword scoring
            industry: Target industry tag

        Returns:
            ATSScore with overall score, breakdown, recommendations and pass rate
        """
        text = extract_all_text(cv)

        formatting = self.score_formatting(cv, text)
        keywords = (
            self.score_keywords(text, job_description, industry)
            if job_description else NEUTRAL_KEYWORD_SCORE
        )
        structure = self.score_structure(cv, industry)
        readability = self.score_readability(text)
        file_format = FILE_FORMAT_SCORE

        overall = round_half_up(
            formatting * SCORE_WEIGHTS["formatting"]
            + keywords * SCORE_WEIGHTS["keywords"]
            + structure * SCORE_WEIGHTS["structure"]
            + readability * SCORE_WEIGHTS["readability"]
            + file_format * SCORE_WEIGHTS["file_format"]
        )

        breakdown = ATSBreakdown(
            formatting=formatting,
            keywords=keywords,
            structure=structure,
            readability=readability,
            file_format=file_format,
        )

        logger.debug(
            f"ATS score {overall}: formatting={formatting} keywords={keywords} "
            f"structure={structure} readability={readability} fileFormat={file_format}"
        )

        return ATSScore(
            overall=overall,
            breakdown=breakdown,
            recommendations=self.generate_recommendations(breakdown, industry),
            pass_rate=pass_rate_for(overall),
        )

    def score_formatting(self, cv: CVRecord, text: str) -> int:
        """Penalise decorative glyphs and table-like characters."""
        score = 100

        special_chars = len(self.special_char_pattern.findall(text))
        score -= min(special_chars * 5, 30)

        if self.has_standard_sections(cv):
            score += 10

        # Pipes and box-drawing dashes usually mean tables or columns
        if "|" in text or "─" in text:
            score -= 15

        return max(0, min(100, score))

    def score_keywords(self, text: str, job_description: str, industry: str) -> int:
        """Share of job description terms (plus industry vocabulary) found in the CV."""
        cv_text = text.lower()
        job_keywords = extract_keywords(job_description)

        matches = 0.0
        for keyword in job_keywords:
            if keyword in cv_text:
                matches += 1

        for term in preferred_terms(industry):
            if term.lower() in cv_text:
                matches += INDUSTRY_TERM_BONUS

        match_rate = matches / len(job_keywords) if job_keywords else 0.7
        return round_half_up(min(100, match_rate * 100))

    def score_structure(self, cv: CVRecord, industry: str) -> int:
        """Additive score for the sections an ATS expects to find."""
        info = cv.personal_info
        score = 0

        if info.name and info.email:
            score += 20
        if any(exp.title for exp in cv.experience):
            score += 25
        if any(edu.degree for edu in cv.education):
            score += 20
        if cv.skills:
            score += 20

        if industry == "technology" and info.website:
            score += 5
        if industry == "healthcare" and cv.certifications:
            score += 10

        if info.summary and len(info.summary) >= 50:
            score += 10

        return min(100, score)

    def score_readability(self, text: str) -> int:
        """Score average sentence length; bullets help."""
        if not text or not text.strip():
            logger.debug("No text found for readability analysis")
            return 0

        stats = TextStats.from_text(text)
        if stats.sentence_count == 0:
            return 0

        avg_sentence_length = stats.avg_sentence_length
        score = 100

        if avg_sentence_length > 25:
            score -= 20
        elif avg_sentence_length > 20:
            score -= 10

        if avg_sentence_length < 8:
            score -= 15

        if len(self.bullet_pattern.findall(text)) > 5:
            score += 10

        return max(0, min(100, score))

    def has_standard_sections(self, cv: CVRecord) -> bool:
        """Name, an experience with a title, an education with a degree and skills."""
        return bool(
            cv.personal_info.name
            and any(exp.title for exp in cv.experience)
            and any(edu.degree for edu in cv.education)
            and cv.skills
        )

    def generate_recommendations(self, breakdown: ATSBreakdown, industry: str) -> list[str]:
        recommendations = []

        if breakdown.formatting < 80:
            recommendations.append("Simplify formatting - avoid tables, graphics, and special characters")
            recommendations.append("Use standard bullet points (• or -) instead of fancy symbols")

        if breakdown.keywords < 70:
            recommendations.append("Include more job-relevant keywords from the job description")
            terms = preferred_terms(industry)
            if terms:
                recommendations.append(f"Add industry-specific terms: {', '.join(terms[:3])}")

        if breakdown.structure < 75:
            recommendations.append(
                "Ensure all standard sections are present: Contact, Summary, Experience, Education, Skills"
            )
            recommendations.append("Add a professional summary at the top of your CV")

        if breakdown.readability < 80:
            recommendations.append("Use shorter sentences and bullet points for better readability")
            recommendations.append("Break up long paragraphs into digestible chunks")

        return recommendations


def calculate_ats_score(
    cv: CVRecord,
    job_description: Optional[str] = None,
    industry: str = DEFAULT_INDUSTRY,
) -> ATSScore:
    """Calculate the ATS compatibility score of a CV."""
    return ATSScorer().score(cv, job_description, industry)
