import pytest

from app.models.cv import CVRecord
from app.services.content_quality import (
    analyze_clarity,
    analyze_grammar,
    analyze_impact,
    calculate_content_quality,
)
from app.services.nlp_utils import round_half_up


# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------


def test_grammar_empty_text():
    result = analyze_grammar("")
    assert result.score == 0
    assert result.issues == []


def test_grammar_lowercase_i_and_double_space():
    result = analyze_grammar("i am a  developer.")

    assert len(result.issues) >= 2
    assert result.score < 100
    messages = [issue.message for issue in result.issues]
    assert 'Lowercase "i"' in messages
    assert "Multiple spaces" in messages

    lowercase_i = result.issues[0]
    assert lowercase_i.text == "i"
    assert lowercase_i.position == 0
    assert lowercase_i.severity == "warning"
    assert result.issues[1].position == 6


def test_grammar_uppercase_i_is_fine():
    result = analyze_grammar("I am a developer.")
    assert result.score == 100
    assert result.issues == []


@pytest.mark.parametrize("text, message", [
    ("I am ready. next step", "Sentence not capitalized"),
    ("Built xkcdq tool", "Possible typo"),
    ("Sooooo good", "Repeated characters"),
])
def test_grammar_single_rule_hits(text, message):
    result = analyze_grammar(text)

    assert [issue.message for issue in result.issues] == [message]
    assert result.score == 95


def test_grammar_penalty_is_capped_per_rule():
    result = analyze_grammar("a  b  c  d  e  f")

    assert len(result.issues) == 5
    assert result.score == 80


# ---------------------------------------------------------------------------
# Impact
# ---------------------------------------------------------------------------


def test_impact_weak_phrase_and_missing_quantification():
    cv = CVRecord(experience=[{"title": "Team Lead", "description": "responsible for managing the team"}])
    result = analyze_impact(cv)

    assert "responsible for" in result.weak_verbs
    assert "Team Lead" in result.missing_quantification
    assert result.suggested_verbs["responsible for"] == ["managed", "led", "oversaw", "directed"]
    assert result.score == 85


@pytest.mark.parametrize("description", [
    "Grew revenue by 20 percent",
    "Cut costs by a third (%)",
    "Saved $ on hosting",
    "Saved £ on hosting",
    "Saved € on hosting",
])
def test_impact_quantification_signals(description):
    cv = CVRecord(experience=[{"title": "Analyst", "description": description}])
    assert analyze_impact(cv).missing_quantification == []


def test_impact_untitled_entry_uses_placeholder():
    cv = CVRecord(experience=[{"description": "Led the platform team"}])
    assert analyze_impact(cv).missing_quantification == ["Experience item"]


def test_impact_skips_entries_without_description():
    cv = CVRecord(experience=[{"title": "Engineer"}, {"title": "Intern", "description": ""}])
    result = analyze_impact(cv)

    assert result.score == 100
    assert result.missing_quantification == []
    assert result.passive_voice_count == 0


def test_impact_passive_voice_and_dedup():
    entry = {"title": "Clerk", "description": "It was done and they were there"}
    cv = CVRecord(experience=[entry, entry])
    result = analyze_impact(cv)

    assert result.passive_voice_count == 4
    assert result.weak_verbs == ["was"]
    assert result.missing_quantification == ["Clerk", "Clerk"]
    # 2 x (weak verb 5 + quantification 10) + passive voice 15
    assert result.score == 55


def test_impact_score_floored_at_zero():
    description = "responsible for, worked on, helped with, did, made, got, was, had, were, been, being"
    cv = CVRecord(experience=[{"title": "X", "description": description}] * 3)

    assert analyze_impact(cv).score == 0


def test_impact_empty_cv(empty_cv):
    result = analyze_impact(empty_cv)
    assert result.score == 100
    assert result.weak_verbs == []


# ---------------------------------------------------------------------------
# Clarity
# ---------------------------------------------------------------------------


def test_clarity_empty_text():
    result = analyze_clarity("   ")

    assert result.score == 0
    assert result.avg_sentence_length == 0
    assert result.readability_grade == 0
    assert result.jargon_level == "Low"


def test_clarity_simple_text():
    result = analyze_clarity("I led a team. We shipped a product.")

    assert result.score == 100
    assert result.avg_sentence_length == 4
    assert result.jargon_level == "Low"


def test_clarity_high_jargon():
    result = analyze_clarity("Internationalization responsibilities.")

    assert result.jargon_level == "High"
    assert result.jargon_words == ["Internationalization", "responsibilities."]
    assert result.score <= 85


def test_clarity_grade_above_twelve():
    # 20 three-syllable words in one sentence: grade 27.6
    result = analyze_clarity(" ".join(["banana"] * 20) + ".")

    assert result.readability_grade == 28
    assert result.jargon_level == "Low"
    assert result.score == 80


def test_clarity_grade_between_ten_and_twelve():
    # 36 one-syllable words in one sentence: grade 10.25
    result = analyze_clarity(" ".join(["work"] * 36) + ".")

    assert result.avg_sentence_length == 36
    assert result.readability_grade == 10
    assert result.jargon_level == "Low"
    assert result.score == 90


def test_clarity_medium_jargon():
    words = ["work"] * 15 + ["internationalization"]
    result = analyze_clarity(" ".join(words) + ".")

    assert result.jargon_level == "Medium"


# ---------------------------------------------------------------------------
# Combined score
# ---------------------------------------------------------------------------


def test_overall_is_rounded_mean(full_cv, jane_cv, empty_cv):
    for cv in (full_cv, jane_cv, empty_cv):
        result = calculate_content_quality(cv)
        expected = round_half_up((result.grammar.score + result.impact.score + result.clarity.score) / 3)
        assert result.overall == expected
        assert 0 <= result.overall <= 100


def test_empty_cv_content_quality(empty_cv):
    result = calculate_content_quality(empty_cv)

    assert result.grammar.score == 0
    assert result.impact.score == 100
    assert result.clarity.score == 0
    assert result.overall == 33


def test_content_quality_is_idempotent(full_cv):
    assert calculate_content_quality(full_cv) == calculate_content_quality(full_cv)
