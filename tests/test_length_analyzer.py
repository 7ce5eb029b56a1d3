import pytest

from app.models.cv import CVRecord
from app.services.length_analyzer import (
    benchmark_for,
    calculate_length_analysis,
)


def cv_with_words(count: int) -> CVRecord:
    return CVRecord(personalInfo={"summary": " ".join(["word"] * count)})


def test_empty_cv_expands(empty_cv):
    result = calculate_length_analysis(empty_cv, "technology")

    assert result.current_stats.words == 0
    assert result.current_stats.pages == 1
    assert result.recommendations.action == "expand"
    assert result.overall == 60
    assert result.recommendations.priority == "high"


def test_jane_cv_is_too_short(jane_cv):
    result = calculate_length_analysis(jane_cv, "technology")

    assert result.current_stats.words == 14
    assert result.recommendations.action == "expand"
    assert result.recommendations.suggestions == [
        "Add more detail to your experience descriptions",
        "Include quantified achievements and specific examples",
    ]


@pytest.mark.parametrize("words, industry, action", [
    (299, "technology", "expand"),
    (300, "technology", "optimal"),
    (600, "technology", "optimal"),
    (601, "technology", "condense"),
    (350, "healthcare", "expand"),
    (800, "healthcare", "optimal"),
    (660, "finance", "condense"),
    (700, "education", "optimal"),
])
def test_action_follows_benchmark(words, industry, action):
    result = calculate_length_analysis(cv_with_words(words), industry)

    assert result.current_stats.words == words
    assert result.recommendations.action == action


def test_expand_score_scales_with_word_count():
    result = calculate_length_analysis(cv_with_words(285), "technology")

    assert result.overall == 95
    assert result.recommendations.priority == "low"


def test_condense_score():
    result = calculate_length_analysis(cv_with_words(700), "technology")

    assert result.overall == 95
    assert result.current_stats.pages == 3
    assert result.industry_benchmark.ideal_pages == "2-3 pages"
    assert result.recommendations.priority == "low"


def test_condense_score_is_floored():
    result = calculate_length_analysis(cv_with_words(2000), "technology")

    assert result.overall == 70
    assert result.recommendations.priority == "high"


def test_optimal_length():
    result = calculate_length_analysis(cv_with_words(400), "technology")

    assert result.overall == 100
    assert result.recommendations.suggestions == ["Your CV length is optimal for your industry"]
    assert result.industry_benchmark.ideal_words == 400
    assert result.industry_benchmark.ideal_pages == "1-2 pages"


def test_unknown_industry_uses_technology_benchmark():
    assert benchmark_for("astronomy") == {"ideal": 400, "min": 300, "max": 600}

    result = calculate_length_analysis(cv_with_words(250), "astronomy")
    assert result.industry_benchmark.min_words == 300
    assert result.recommendations.action == "expand"


def test_punctuation_is_not_counted_as_words():
    cv = CVRecord(personalInfo={"summary": "Hello , world ! - ok"})
    result = calculate_length_analysis(cv)

    assert result.current_stats.words == 3
    assert result.current_stats.characters == len("Hello , world ! - ok")


def test_section_breakdown(full_cv):
    sections = calculate_length_analysis(full_cv).current_stats.sections

    assert [s.section for s in sections] == ["Summary", "Experience", "Education", "Skills"]
    assert [s.recommended for s in sections] == [50, 200, 50, 30]
    assert all(s.status == "optimal" for s in sections)
    assert sections[0].words == 17
    assert sections[3].words == 5


def test_section_breakdown_counts_entry_fields():
    cv = CVRecord(education=[{"degree": "BSc Physics", "institution": "Leeds", "startDate": "2012"}])
    sections = calculate_length_analysis(cv).current_stats.sections

    assert sections[2].words == 4
