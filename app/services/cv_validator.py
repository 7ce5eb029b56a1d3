"""Checks whether a CV holds enough information for a meaningful analysis."""

import logging

from app.models.analysis import CVValidationResult
from app.models.cv import CVRecord
from app.services.nlp_utils import round_half_up, split_words

logger = logging.getLogger(__name__)


MIN_COMPLETION_SCORE = 60
MAX_MISSING_FIELDS = 2
DETAILED_TEXT_WORDS = 10

# Section weights of the completion score (percent)
PERSONAL_WEIGHT = 40
EXPERIENCE_WEIGHT = 30
EDUCATION_WEIGHT = 15
SKILLS_WEIGHT = 15


def _blank(value) -> bool:
    return not (value or "").strip()


def validate_for_analysis(cv: CVRecord) -> CVValidationResult:
    """
    Score how complete a CV is before running the analyzers.

    Personal info, experience, education and skills each contribute a share
    of a 0-100 completion score. A CV is ready for analysis when the score
    reaches 60 and no more than two fields are missing.
    """
    missing_fields = []
    recommendations = []
    completion = 0.0
    info = cv.personal_info

    # Personal information: name 2, email 1, title 1, summary 1
    personal = 0
    if _blank(info.name):
        missing_fields.append("Full Name")
    else:
        personal += 2

    if _blank(info.email):
        missing_fields.append("Email Address")
    else:
        personal += 1

    if _blank(info.title):
        missing_fields.append("Job Title/Position")
        recommendations.append("Add your current or desired job title")
    else:
        personal += 1

    if _blank(info.summary):
        missing_fields.append("Professional Summary")
        recommendations.append("Add a professional summary (2-3 sentences)")
    elif len(info.summary.split(" ")) < DETAILED_TEXT_WORDS:
        recommendations.append("Expand your professional summary (aim for 20-50 words)")
    else:
        personal += 1

    completion += personal / 5 * PERSONAL_WEIGHT

    # Experience: a titled role at a company 2, a detailed description 1
    experience = 0
    if not any(exp.title and exp.company for exp in cv.experience):
        missing_fields.append("Work Experience")
        recommendations.append("Add at least one work experience entry")
    else:
        experience += 2
        detailed = any(
            exp.description and len(exp.description.split(" ")) >= DETAILED_TEXT_WORDS
            for exp in cv.experience
        )
        if detailed:
            experience += 1
        else:
            recommendations.append(
                "Add detailed descriptions to your work experience (use bullet points with achievements)"
            )
    completion += experience / 3 * EXPERIENCE_WEIGHT

    if not any(edu.degree and edu.institution for edu in cv.education):
        missing_fields.append("Education")
        recommendations.append("Add your educational background")
    else:
        completion += EDUCATION_WEIGHT

    if not cv.skills:
        missing_fields.append("Skills")
        recommendations.append("Add relevant skills (aim for 5-10 skills)")
    elif len(cv.skills) < 3:
        recommendations.append("Add more skills (aim for 5-10 relevant skills)")
        completion += 0.5 * SKILLS_WEIGHT
    else:
        completion += SKILLS_WEIGHT

    completion_score = round_half_up(completion)
    is_valid = completion_score >= MIN_COMPLETION_SCORE and len(missing_fields) <= MAX_MISSING_FIELDS

    if not is_valid and completion_score < MIN_COMPLETION_SCORE:
        recommendations.insert(
            0,
            "Complete more sections to enable analysis (minimum 60% completion required)",
        )

    logger.debug(f"CV validation: completion={completion_score}, missing={missing_fields}")

    return CVValidationResult(
        is_valid=is_valid,
        completion_score=completion_score,
        missing_fields=missing_fields,
        recommendations=recommendations,
    )


def completion_message(result: CVValidationResult) -> str:
    """User-facing summary of a validation result."""
    if result.completion_score >= 90:
        return "Your CV is comprehensive and ready for analysis!"
    elif result.completion_score >= 75:
        return "Your CV looks good! Minor improvements could enhance the analysis."
    elif result.completion_score >= 60:
        return "Your CV is ready for analysis, but adding more details will improve results."
    elif result.completion_score >= 40:
        return "Your CV needs more information before we can provide meaningful analysis."
    else:
        return "Let's build your CV! Add your basic information to get started."


def _join(*values) -> str:
    return " ".join(value or "" for value in values)


def estimate_word_count(cv: CVRecord) -> int:
    """Approximate number of words across the CV's main text fields."""
    info = cv.personal_info
    fields = [info.name, info.title, info.summary, info.location]
    fields.extend(_join(exp.title, exp.company, exp.description) for exp in cv.experience)
    fields.extend(_join(edu.degree, edu.institution, edu.description) for edu in cv.education)
    fields.append(" ".join(cv.skills))
    fields.extend(_join(cert.name, cert.issuer, cert.description) for cert in cv.certifications)

    return sum(len(split_words(field)) for field in fields if field)
