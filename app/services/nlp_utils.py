"""Lightweight text utilities for CV scoring.

This module intentionally avoids heavyweight NLP dependencies; every scorer
works on plain strings. It provides:
- Whitespace word and sentence splitting
- Stop-word filtered keyword extraction for job descriptions
- Literal occurrence counting
- Vowel-group syllable estimation
- Jargon (long word) detection
- Half-up rounding so scores round the same way the UI always showed them
"""

from __future__ import annotations

import math
import re
from collections import Counter
from dataclasses import dataclass

from app.services.lexicons import KEYWORD_ALIASES, STOP_WORDS


NON_WORD_PATTERN = re.compile(r"[^A-Za-z0-9_\s]")
SENTENCE_PATTERN = re.compile(r"[.!?]+")
VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]+")
TOKEN_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9+\-#.]*")

MIN_KEYWORD_LENGTH = 4
JARGON_WORD_LENGTH = 12


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))


def split_words(text: str) -> list[str]:
    return text.split()


def split_sentences(text: str) -> list[str]:
    """Split on runs of sentence terminators, dropping blank fragments."""
    return [s for s in SENTENCE_PATTERN.split(text) if s.strip()]


def strip_punctuation(text: str) -> str:
    """Replace every non-word, non-space character with a space."""
    return NON_WORD_PATTERN.sub(" ", text)


def extract_keywords(text: str) -> list[str]:
    """
    Extract candidate keywords from free text.

    Lowercases, strips punctuation, drops short tokens and stop words.
    Duplicates are kept so callers can count frequency.
    """
    words = strip_punctuation(text.lower()).split()
    return [
        word for word in words
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS
    ]


def keyword_frequencies(text: str) -> Counter:
    """Keyword frequency table, in first-seen order."""
    return Counter(extract_keywords(text))


def count_occurrences(text: str, term: str) -> int:
    """Count non-overlapping literal occurrences of ``term`` in ``text``."""
    if not term:
        return 0
    return text.count(term)


def estimate_syllables(text: str) -> int:
    """Each maximal vowel run counts as a syllable; vowel-less words count one."""
    syllables = 0
    for word in text.lower().split():
        groups = VOWEL_GROUP_PATTERN.findall(word)
        syllables += len(groups) if groups else 1
    return syllables


def jargon_words(text: str) -> list[str]:
    """Words longer than the jargon threshold, in order of appearance."""
    return [word for word in text.split() if len(word) > JARGON_WORD_LENGTH]


def tokenize(text: str) -> set[str]:
    """Lowercased technical-friendly tokens (keeps ``front-end``, ``c#``...)."""
    return {token.rstrip(".") for token in TOKEN_PATTERN.findall(text.lower())}


def find_alias(keyword: str, tokens: set[str]) -> str | None:
    """Return the first known alias of ``keyword`` present in ``tokens``."""
    for alias in KEYWORD_ALIASES.get(keyword, []):
        if alias in tokens:
            return alias
    return None


@dataclass
class TextStats:
    """Word, sentence and syllable counts of a text."""

    word_count: int
    sentence_count: int
    syllable_count: int

    @classmethod
    def from_text(cls, text: str) -> "TextStats":
        return cls(
            word_count=len(split_words(text)),
            sentence_count=len(split_sentences(text)),
            syllable_count=estimate_syllables(text),
        )

    @property
    def avg_sentence_length(self) -> float:
        if self.sentence_count == 0:
            return 0.0
        return self.word_count / self.sentence_count

    @property
    def avg_syllables_per_word(self) -> float:
        if self.word_count == 0:
            return 0.0
        return self.syllable_count / self.word_count
