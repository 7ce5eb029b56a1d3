"""Design score placeholder.

Real layout and typography inspection needs the rendered document, which this
service never sees; only section presence moves the score.
"""

from app.models.analysis import (
    DesignScore,
    LayoutScore,
    ProfessionalismScore,
    TypographyScore,
)
from app.models.cv import CVRecord


BASE_DESIGN_SCORE = 70
SECTION_BONUS = 5


def calculate_design_score(cv: CVRecord) -> DesignScore:
    info = cv.personal_info
    present = [
        info.name,
        info.summary,
        cv.experience,
        cv.education,
        cv.skills,
        info.profile_photo,
    ]
    score = BASE_DESIGN_SCORE + SECTION_BONUS * sum(1 for section in present if section)

    return DesignScore(
        overall=min(100, score),
        layout=LayoutScore(score=85, whitespace=15, margins="Appropriate", sections="Well-organized"),
        typography=TypographyScore(
            score=90,
            font_consistency=True,
            font_size="Readable",
            hierarchy="Clear",
        ),
        professionalism=ProfessionalismScore(score=88, color_scheme="Professional", graphics="Appropriate"),
    )
