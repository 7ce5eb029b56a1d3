"""CV length analysis against per-industry word-count benchmarks."""

import math
import logging

from app.models.analysis import (
    IndustryBenchmark,
    LengthAnalysis,
    LengthRecommendations,
    LengthStats,
    SectionLength,
)
from app.models.cv import CVRecord
from app.services.lexicons import DEFAULT_INDUSTRY, INDUSTRY_BENCHMARKS, SECTION_TARGETS
from app.services.nlp_utils import round_half_up, split_words, strip_punctuation
from app.services.text_extractor import extract_all_text

logger = logging.getLogger(__name__)


WORDS_PER_PAGE = 250


def benchmark_for(industry: str) -> dict:
    """Word-count benchmark of an industry; unknown industries use technology's."""
    return INDUSTRY_BENCHMARKS.get(industry, INDUSTRY_BENCHMARKS[DEFAULT_INDUSTRY])


def count_words(text: str) -> int:
    return len(split_words(text or ""))


def count_entry_words(entries) -> int:
    """Sum the words of every string field across a list of entries."""
    total = 0
    for entry in entries:
        values = [v for v in entry.model_dump().values() if isinstance(v, str)]
        total += count_words(" ".join(values))
    return total


class LengthAnalyzer:
    """Compares CV word count with an industry benchmark."""

    def analyze(self, cv: CVRecord, industry: str = DEFAULT_INDUSTRY) -> LengthAnalysis:
        text = extract_all_text(cv)
        word_count = count_words(strip_punctuation(text))
        pages = max(1, math.ceil(word_count / WORDS_PER_PAGE))

        benchmark = benchmark_for(industry)

        if word_count < benchmark["min"]:
            score = max(60, word_count / benchmark["min"] * 100)
            action = "expand"
            suggestions = [
                "Add more detail to your experience descriptions",
                "Include quantified achievements and specific examples",
            ]
        elif word_count > benchmark["max"]:
            score = max(70, 100 - (word_count - benchmark["max"]) / benchmark["max"] * 30)
            action = "condense"
            suggestions = [
                "Remove redundant information and focus on key achievements",
                "Use bullet points instead of long paragraphs",
            ]
        else:
            score = 100
            action = "optimal"
            suggestions = ["Your CV length is optimal for your industry"]

        if score < 80:
            priority = "high"
        elif score < 90:
            priority = "medium"
        else:
            priority = "low"

        logger.debug(f"Length analysis: {word_count} words, {pages} page(s), action={action}")

        return LengthAnalysis(
            overall=round_half_up(score),
            current_stats=LengthStats(
                pages=pages,
                words=word_count,
                characters=len(text),
                sections=self.section_breakdown(cv),
            ),
            industry_benchmark=IndustryBenchmark(
                ideal_pages="1-2 pages" if pages <= 2 else "2-3 pages",
                ideal_words=benchmark["ideal"],
                max_words=benchmark["max"],
                min_words=benchmark["min"],
            ),
            recommendations=LengthRecommendations(
                action=action,
                priority=priority,
                suggestions=suggestions,
            ),
        )

    def section_breakdown(self, cv: CVRecord) -> list[SectionLength]:
        """Per-section word counts next to their recommended targets."""
        counts = {
            "Summary": count_words(cv.personal_info.summary),
            "Experience": count_entry_words(cv.experience),
            "Education": count_entry_words(cv.education),
            "Skills": count_words(" ".join(skill or "" for skill in cv.skills)),
        }
        # TODO: derive status from words vs. recommended once the product
        # thresholds for "short" and "long" sections are agreed.
        return [
            SectionLength(section=name, words=counts[name], recommended=target, status="optimal")
            for name, target in SECTION_TARGETS.items()
        ]


def calculate_length_analysis(cv: CVRecord, industry: str = DEFAULT_INDUSTRY) -> LengthAnalysis:
    """Analyze CV length against the industry benchmark."""
    return LengthAnalyzer().analyze(cv, industry)
