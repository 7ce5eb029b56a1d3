import logging

from app.models.cv import CVRecord

logger = logging.getLogger(__name__)


def _text(value) -> str:
    return value or ""


def extract_all_text(cv: CVRecord) -> str:
    """
    Flatten a CV record into one plain-text blob.

    Fields are joined with single spaces in a fixed order (personal info,
    experience, education, skills, certifications) so position-dependent
    heuristics stay deterministic. Absent fields contribute empty strings.
    """
    info = cv.personal_info
    parts = [
        _text(info.name),
        _text(info.title),
        _text(info.email),
        _text(info.phone),
        _text(info.location),
        _text(info.summary),
        _text(info.linkedin),
        _text(info.website),
    ]

    for exp in cv.experience:
        parts.extend([
            _text(exp.title),
            _text(exp.company),
            _text(exp.location),
            _text(exp.description),
        ])

    for edu in cv.education:
        parts.extend([
            _text(edu.degree),
            _text(edu.institution),
            _text(edu.location),
            _text(edu.description),
        ])

    parts.append(" ".join(_text(skill) for skill in cv.skills))

    for cert in cv.certifications:
        parts.extend([
            _text(cert.name),
            _text(cert.issuer),
            _text(cert.description),
        ])

    text = " ".join(parts).strip()
    logger.debug(f"Extracted {len(text)} characters from CV")
    return text
