"""
Content quality analysis.

The content quality score is the mean of three sub-analyzers:
- Grammar: regex heuristics for common typing and capitalisation slips
- Impact: weak phrasing, missing quantification and passive voice in
  experience descriptions
- Clarity: sentence length, a Flesch-Kincaid grade estimate and jargon ratio
"""

import re
import logging
from dataclasses import dataclass

from app.models.analysis import (
    ClarityAnalysis,
    ContentQuality,
    GrammarAnalysis,
    GrammarIssue,
    ImpactAnalysis,
)
from app.models.cv import CVRecord
from app.services.lexicons import PASSIVE_VOICE_INDICATORS, WEAK_TO_STRONG_VERBS
from app.services.nlp_utils import jargon_words, round_half_up, TextStats
from app.services.text_extractor import extract_all_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrammarRule:
    """A regex heuristic and the advice attached to its hits."""
    pattern: re.Pattern
    message: str
    suggestion: str


GRAMMAR_RULES = (
    GrammarRule(re.compile(r"\bi\s"), 'Lowercase "i"', 'Use "I"'),
    GrammarRule(re.compile(r"\s{2,}"), "Multiple spaces", "Use single spaces"),
    GrammarRule(re.compile(r"[.!?]\s*[a-z]"), "Sentence not capitalized", "Capitalize after periods"),
    GrammarRule(
        re.compile(r"\b[bcdfghjklmnpqrstvwxyz]{4,}\b", re.IGNORECASE),
        "Possible typo",
        "Check spelling",
    ),
    GrammarRule(re.compile(r"(.)\1{3,}"), "Repeated characters", "Check for typos"),
)

PENALTY_PER_MATCH = 5
MAX_PENALTY_PER_RULE = 20

WEAK_VERB_PENALTY = 5
MISSING_QUANTIFICATION_PENALTY = 10
PASSIVE_VOICE_THRESHOLD = 3
PASSIVE_VOICE_PENALTY = 15

QUANTIFICATION_PATTERN = re.compile(r"[\d%$£€]")

MAX_JARGON_WORDS = 10


def analyze_grammar(text: str) -> GrammarAnalysis:
    """Run the grammar heuristics over ``text``."""
    if not text or not text.strip():
        logger.debug("No text provided for grammar analysis")
        return GrammarAnalysis(score=0, issues=[])

    score = 100
    issues = []

    for rule in GRAMMAR_RULES:
        matches = [m.group(0) for m in rule.pattern.finditer(text)]
        if not matches:
            continue
        for match in matches:
            issues.append(GrammarIssue(
                message=rule.message,
                text=match.strip(),
                suggestion=rule.suggestion,
                position=text.find(match),
            ))
        score -= min(len(matches) * PENALTY_PER_MATCH, MAX_PENALTY_PER_RULE)

    logger.debug(f"Grammar analysis: score={score}, issues={len(issues)}")
    return GrammarAnalysis(score=max(0, score), issues=issues)


def analyze_impact(cv: CVRecord) -> ImpactAnalysis:
    """Look for weak verbs, unquantified roles and passive voice."""
    score = 100
    weak_verbs = []
    missing_quantification = []
    passive_voice_count = 0

    for exp in cv.experience:
        if not exp.description:
            continue
        description = exp.description.lower()

        for weak_verb in WEAK_TO_STRONG_VERBS:
            if weak_verb in description:
                weak_verbs.append(weak_verb)
                score -= WEAK_VERB_PENALTY

        if not QUANTIFICATION_PATTERN.search(exp.description):
            missing_quantification.append(exp.title or "Experience item")
            score -= MISSING_QUANTIFICATION_PENALTY

        for indicator in PASSIVE_VOICE_INDICATORS:
            if indicator in description:
                passive_voice_count += 1

    if passive_voice_count > PASSIVE_VOICE_THRESHOLD:
        score -= PASSIVE_VOICE_PENALTY

    unique_weak_verbs = list(dict.fromkeys(weak_verbs))

    logger.debug(
        f"Impact analysis: score={score}, weak verbs={len(unique_weak_verbs)}, "
        f"unquantified={len(missing_quantification)}, passive={passive_voice_count}"
    )

    return ImpactAnalysis(
        score=max(0, score),
        weak_verbs=unique_weak_verbs,
        suggested_verbs={verb: WEAK_TO_STRONG_VERBS[verb] for verb in unique_weak_verbs},
        missing_quantification=missing_quantification,
        passive_voice_count=passive_voice_count,
    )


def analyze_clarity(text: str) -> ClarityAnalysis:
    """Estimate how easy ``text`` is to read."""
    if not text or not text.strip():
        logger.debug("No text provided for clarity analysis")
        return ClarityAnalysis(score=0)

    stats = TextStats.from_text(text)
    avg_sentence_length = stats.avg_sentence_length
    readability_grade = 0.39 * avg_sentence_length + 11.8 * stats.avg_syllables_per_word - 15.59

    score = 100

    if readability_grade > 12:
        score -= 20
    elif readability_grade > 10:
        score -= 10

    long_words = jargon_words(text)
    jargon_ratio = len(long_words) / stats.word_count

    jargon_level = "Low"
    if jargon_ratio > 0.1:
        jargon_level = "High"
        score -= 15
    elif jargon_ratio > 0.05:
        jargon_level = "Medium"
        score -= 5

    logger.debug(
        f"Clarity analysis: score={score}, avg sentence={avg_sentence_length:.1f}, "
        f"grade={readability_grade:.1f}, jargon={jargon_level}"
    )

    return ClarityAnalysis(
        score=max(0, score),
        avg_sentence_length=round_half_up(avg_sentence_length),
        readability_grade=round_half_up(readability_grade),
        jargon_level=jargon_level,
        jargon_words=list(dict.fromkeys(long_words))[:MAX_JARGON_WORDS],
    )


class ContentQualityScorer:
    """Combines the grammar, impact and clarity analyzers."""

    def score(self, cv: CVRecord) -> ContentQuality:
        text = extract_all_text(cv)

        grammar = analyze_grammar(text)
        impact = analyze_impact(cv)
        clarity = analyze_clarity(text)

        overall = round_half_up((grammar.score + impact.score + clarity.score) / 3)

        logger.debug(
            f"Content quality {overall}: grammar={grammar.score} "
            f"impact={impact.score} clarity={clarity.score}"
        )

        return ContentQuality(
            overall=overall,
            grammar=grammar,
            impact=impact,
            clarity=clarity,
        )


def calculate_content_quality(cv: CVRecord) -> ContentQuality:
    """Calculate the content quality score of a CV."""
    return ContentQualityScorer().score(cv)
