"""
Job description keyword matching.

Ranks the most frequent meaningful terms of a job description and measures
how the CV covers each of them: literal matches, density, and which terms
are missing, underused or overused.
"""

import logging

from app.models.analysis import (
    KeywordAnalysis,
    KeywordItem,
    KeywordRecommendations,
    SynonymHint,
)
from app.services.nlp_utils import (
    count_occurrences,
    find_alias,
    keyword_frequencies,
    round_half_up,
    split_words,
    tokenize,
)

logger = logging.getLogger(__name__)


TOP_KEYWORDS = 20
OVERUSED_DENSITY = 5.0


def importance_for(frequency: int) -> str:
    if frequency > 3:
        return "Critical"
    if frequency > 1:
        return "Important"
    return "Nice-to-have"


class KeywordMatcher:
    """Matches a CV's text against the top keywords of a job description."""

    def __init__(self, top_n: int = TOP_KEYWORDS):
        self.top_n = top_n

    def rank_keywords(self, job_description: str) -> list[tuple[str, int]]:
        """Top keywords by descending frequency; ties keep first-seen order."""
        frequencies = keyword_frequencies(job_description or "")
        ranked = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)
        return ranked[:self.top_n]

    def match(self, cv_text: str, job_description: str) -> KeywordAnalysis:
        cv_lower = (cv_text or "").lower()
        cv_word_count = max(1, len(split_words(cv_lower)))

        job_keywords = []
        for keyword, frequency in self.rank_keywords(job_description):
            cv_matches = count_occurrences(cv_lower, keyword)
            job_keywords.append(KeywordItem(
                keyword=keyword,
                importance=importance_for(frequency),
                frequency=frequency,
                cv_matches=cv_matches,
                density=cv_matches / cv_word_count * 100,
            ))

        missing = [
            k.keyword for k in job_keywords
            if k.importance == "Critical" and k.cv_matches == 0
        ]
        underused = [
            k.keyword for k in job_keywords
            if k.importance == "Important" and k.cv_matches < 2
        ]
        overused = [k.keyword for k in job_keywords if k.density > OVERUSED_DENSITY]

        cv_tokens = tokenize(cv_lower)
        synonyms = []
        for item in job_keywords:
            if item.cv_matches:
                continue
            alias = find_alias(item.keyword, cv_tokens)
            if alias:
                synonyms.append(SynonymHint(keyword=item.keyword, found_as=alias))

        matched = sum(1 for k in job_keywords if k.cv_matches > 0)
        overall_match = round_half_up(matched / len(job_keywords) * 100) if job_keywords else 0

        logger.debug(
            f"Keyword match: {matched}/{len(job_keywords)} keywords found, "
            f"{len(missing)} missing, overall {overall_match}"
        )

        return KeywordAnalysis(
            job_keywords=job_keywords,
            recommendations=KeywordRecommendations(
                missing=missing,
                underused=underused,
                overused=overused,
                synonyms=synonyms,
            ),
            overall_match=overall_match,
        )


def match_keywords(cv_text: str, job_description: str) -> KeywordAnalysis:
    """Match CV text against a job description's top keywords."""
    return KeywordMatcher().match(cv_text, job_description)
