"""CV record models matching the frontend structure."""
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class PersonalInfo(BaseModel):
    """Personal information block of the CV."""
    name: Optional[str] = Field(None, description="Full name")
    title: Optional[str] = Field(None, description="Professional title/headline")
    email: Optional[str] = Field(None, description="Email address")
    phone: Optional[str] = Field(None, description="Phone number")
    location: Optional[str] = Field(None, description="Location (City, Country)")
    summary: Optional[str] = Field(None, description="Professional summary")
    linkedin: Optional[str] = Field(None, description="LinkedIn profile URL")
    website: Optional[str] = Field(None, description="Personal website URL")
    profile_photo: Optional[str] = Field(
        None,
        alias="profilePhoto",
        description="Reference to a profile photo (e.g. base64 data)"
    )

    class Config:
        populate_by_name = True


class ExperienceEntry(BaseModel):
    """Work experience entry."""
    id: Optional[str] = Field(None, description="Unique identifier")
    title: Optional[str] = Field(None, description="Job title")
    company: Optional[str] = Field(None, description="Company name")
    location: Optional[str] = Field(None, description="Job location")
    start_date: Optional[str] = Field(None, alias="startDate", description="Start date")
    end_date: Optional[str] = Field(None, alias="endDate", description="End date")
    current: bool = Field(False, description="Is this the current job?")
    description: Optional[str] = Field(None, description="Free-text description of the role")

    class Config:
        populate_by_name = True


class EducationEntry(BaseModel):
    """Education entry."""
    id: Optional[str] = Field(None, description="Unique identifier")
    degree: Optional[str] = Field(None, description="Degree (e.g. 'BSc Computer Science')")
    institution: Optional[str] = Field(None, description="School/University name")
    location: Optional[str] = Field(None, description="Institution location")
    start_date: Optional[str] = Field(None, alias="startDate", description="Start date")
    end_date: Optional[str] = Field(None, alias="endDate", description="End date")
    current: bool = Field(False, description="Still studying?")
    description: Optional[str] = Field(None, description="Free-text description")

    class Config:
        populate_by_name = True


class Certification(BaseModel):
    """Certification entry."""
    id: Optional[str] = Field(None, description="Unique identifier")
    name: Optional[str] = Field(None, description="Certification name")
    issuer: Optional[str] = Field(None, description="Issuing organisation")
    date: Optional[str] = Field(None, description="Date obtained")
    description: Optional[str] = Field(None, description="Free-text description")


class CVRecord(BaseModel):
    """Complete CV record as stored by the builder."""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo, alias="personalInfo")
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    @field_validator("personal_info", mode="before")
    @classmethod
    def default_personal_info(cls, v):
        """Treat an explicit null personal info block as empty."""
        return PersonalInfo() if v is None else v

    @field_validator("experience", "education", "certifications", mode="before")
    @classmethod
    def default_lists(cls, v):
        """Treat null sections as empty lists."""
        return [] if v is None else v

    @field_validator("skills", mode="before")
    @classmethod
    def skills_as_text(cls, v):
        """Treat null skills (or null entries) as empty text."""
        if v is None:
            return []
        if isinstance(v, list):
            return [item or "" for item in v]
        return v


class AnalysisRequest(BaseModel):
    """Request model for CV analysis."""
    cv_data: CVRecord = Field(..., alias="cvData")
    job_description: Optional[str] = Field(
        None,
        alias="jobDescription",
        description="Optional job description for keyword matching"
    )
    target_industry: Optional[str] = Field(
        None,
        alias="targetIndustry",
        description="Target industry (technology, healthcare, finance, marketing, education)"
    )
    analysis_types: List[str] = Field(
        default_factory=list,
        alias="analysisTypes",
        description="Requested analyses: ats_score, content_quality, length_analysis, design_score"
    )

    class Config:
        populate_by_name = True


class KeywordMatchRequest(BaseModel):
    """Request model for standalone keyword matching."""
    cv_data: CVRecord = Field(..., alias="cvData")
    job_description: str = Field(..., alias="jobDescription")

    class Config:
        populate_by_name = True
