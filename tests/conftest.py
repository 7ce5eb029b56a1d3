import pytest

from app.models.cv import CVRecord


@pytest.fixture
def empty_cv():
    return CVRecord()


@pytest.fixture
def jane_cv():
    return CVRecord(
        personalInfo={"name": "Jane Doe"},
        experience=[
            {
                "title": "Engineer",
                "company": "Acme",
                "description": "Responsible for building things. Increased revenue by 20%.",
            }
        ],
        skills=["Python", "SQL"],
    )


@pytest.fixture
def full_cv():
    return CVRecord(
        personalInfo={
            "name": "Alex Morgan",
            "title": "Senior Software Engineer",
            "email": "alex@example.com",
            "phone": "+44 20 7946 0000",
            "location": "London, UK",
            "summary": (
                "Software engineer with 8 years of experience building reliable "
                "web platforms and data pipelines for fintech companies."
            ),
            "website": "https://alex.dev",
        },
        experience=[
            {
                "id": "exp-1",
                "title": "Senior Software Engineer",
                "company": "Fintech Ltd",
                "location": "London",
                "startDate": "2020-01",
                "endDate": "present",
                "current": True,
                "description": (
                    "Developed a payments API serving 2 million requests per day. "
                    "Automated deployments and cut release time by 40%."
                ),
            },
            {
                "id": "exp-2",
                "title": "Software Engineer",
                "company": "Retail Co",
                "location": "Manchester",
                "startDate": "2016-06",
                "endDate": "2019-12",
                "description": "Implemented inventory services in Python and optimized SQL queries for 30 stores.",
            },
        ],
        education=[
            {
                "degree": "BSc Computer Science",
                "institution": "University of Leeds",
                "location": "Leeds",
                "startDate": "2012",
                "endDate": "2015",
                "description": "First class honours.",
            }
        ],
        skills=["Python", "SQL", "Docker", "AWS", "FastAPI"],
        certifications=[
            {"name": "AWS Solutions Architect", "issuer": "Amazon", "date": "2022", "description": "Associate level."}
        ],
    )
