from app.models.cv import AnalysisRequest, CVRecord
from app.services.ats_scorer import ATSScorer
from app.services.cv_analysis import CVAnalysisService, analyze_cv


def make_request(cv, types, job_description=None, industry=None):
    return AnalysisRequest(
        cvData=cv,
        analysisTypes=types,
        jobDescription=job_description,
        targetIndustry=industry,
    )


def test_end_to_end_scenario(jane_cv):
    response = analyze_cv(make_request(jane_cv, ["ats_score", "content_quality", "length_analysis"]))

    assert response.success is True
    assert response.error is None

    results = response.results
    assert 0 <= results.ats_score.overall <= 100
    assert "responsible for" in results.content_quality.impact.weak_verbs
    assert "Engineer" not in results.content_quality.impact.missing_quantification
    assert results.length_analysis.recommendations.action == "expand"
    assert results.keyword_analysis is None
    assert results.design_score is None


def test_only_requested_kinds_are_populated(jane_cv):
    response = analyze_cv(make_request(jane_cv, ["content_quality"]))

    payload = response.model_dump(by_alias=True, exclude_none=True)
    assert payload["success"] is True
    assert list(payload["results"]) == ["contentQuality"]


def test_keyword_analysis_runs_whenever_job_description_present(jane_cv):
    response = analyze_cv(make_request(jane_cv, [], job_description="Python engineer, Python expert"))

    assert response.success
    assert response.results.ats_score is None
    assert response.results.keyword_analysis is not None
    assert response.results.keyword_analysis.job_keywords[0].keyword == "python"


def test_blank_job_description_skips_keyword_analysis(jane_cv):
    response = analyze_cv(make_request(jane_cv, ["ats_score"], job_description=""))

    assert response.results.keyword_analysis is None
    assert response.results.ats_score.breakdown.keywords == 70


def test_unknown_kinds_are_ignored(jane_cv):
    response = analyze_cv(make_request(jane_cv, ["ats_score", "horoscope"]))

    assert response.success
    assert response.results.ats_score is not None


def test_empty_types_and_empty_cv(empty_cv):
    response = analyze_cv(make_request(empty_cv, []))

    assert response.success
    assert response.results.model_dump(exclude_none=True) == {}


def test_design_score(jane_cv):
    response = analyze_cv(make_request(jane_cv, ["design_score"]))

    design = response.results.design_score
    assert design.overall == 85
    assert design.layout.margins == "Appropriate"


def test_design_score_is_capped():
    cv = CVRecord(
        personalInfo={"name": "A", "summary": "S", "profilePhoto": "data:image/png;base64,AAAA"},
        experience=[{"title": "T"}],
        education=[{"degree": "D"}],
        skills=["x"],
    )
    response = analyze_cv(make_request(cv, ["design_score"]))

    assert response.results.design_score.overall == 100


def test_default_industry_is_technology():
    cv = CVRecord(personalInfo={"name": "A", "email": "a@example.com", "website": "https://a.dev"})
    response = analyze_cv(make_request(cv, ["ats_score"]))

    assert response.results.ats_score.breakdown.structure == 25


def test_industry_changes_benchmark(jane_cv):
    response = analyze_cv(make_request(jane_cv, ["length_analysis"], industry="healthcare"))

    assert response.results.length_analysis.industry_benchmark.min_words == 400


def test_analyzer_failure_becomes_structured_error(jane_cv, monkeypatch):
    def explode(self, *args, **kwargs):
        raise ValueError("scorer exploded")

    monkeypatch.setattr(ATSScorer, "score", explode)
    response = CVAnalysisService().analyze_cv(make_request(jane_cv, ["ats_score", "content_quality"]))

    assert response.success is False
    assert response.error == "scorer exploded"
    assert response.results.model_dump(exclude_none=True) == {}


def test_every_scorer_handles_empty_cv(empty_cv):
    response = analyze_cv(make_request(
        empty_cv,
        ["ats_score", "content_quality", "length_analysis", "design_score"],
        job_description="Senior Python developer",
    ))

    assert response.success
    results = response.results
    assert 0 <= results.ats_score.overall <= 100
    assert 0 <= results.content_quality.overall <= 100
    assert 0 <= results.length_analysis.overall <= 100
    assert results.keyword_analysis.overall_match == 0


def test_analysis_is_idempotent(full_cv):
    request = make_request(
        full_cv,
        ["ats_score", "content_quality", "length_analysis", "design_score"],
        job_description="Python engineer with AWS and Docker experience",
    )

    assert analyze_cv(request) == analyze_cv(request)
