from datetime import datetime
from enum import Enum
from typing import ClassVar, Optional, Dict, Any, List, Union

from pydantic import BaseModel, Field

SOCIAL_MEDIA_JOB_ID = "TV-MKT-SMM-2025-003"


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    ACCEPTED = "accepted"


APPLICATION_STATUSES = [s.value for s in ApplicationStatus]


class WireModel(BaseModel):
    """Base for payloads coming from the careers backend (camelCase on the wire)."""
    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
        "coerce_numbers_to_str": True,
    }


# User Schemas
class AdminUser(WireModel):
    id: Optional[str] = Field(None, alias="_id")
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None
    role: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return (self.role or "").lower() == "admin"

    @property
    def display_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)


class AppliedBy(WireModel):
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)


# Application Schemas
class ApplicationBase(WireModel):
    """Fields every application carries regardless of the role applied for."""
    role_kind: ClassVar[str] = ""

    id: str = Field(..., alias="_id")
    full_name: str = Field("", alias="fullName")
    email: str = ""
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin_profile: Optional[str] = Field(None, alias="linkedinProfile")
    motivation: Optional[str] = None
    expected_stipend: Optional[str] = Field(None, alias="expectedStipend")
    job_id: Optional[str] = Field(None, alias="jobId")
    status: str = ApplicationStatus.PENDING.value
    resume_link: Optional[str] = Field(None, alias="resumeLink")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    applied_by: Optional[AppliedBy] = Field(None, alias="appliedBy")

    @property
    def is_social_media(self) -> bool:
        return self.role_kind == "social_media"

    @property
    def education_summary(self) -> Optional[str]:
        return None

    @property
    def portfolio_link(self) -> Optional[str]:
        return None

    @property
    def start_date(self) -> Optional[str]:
        return None


class TechnicalRoleApplication(ApplicationBase):
    """AIML / MERN style application."""
    role_kind: ClassVar[str] = "technical"

    education_status: Optional[str] = Field(None, alias="educationStatus")
    degree_discipline: Optional[str] = Field(None, alias="degreeDiscipline")
    portfolio_url: Optional[str] = Field(None, alias="portfolioUrl")
    research_papers: Optional[str] = Field(None, alias="researchPapers")
    internship_experience: Optional[str] = Field(None, alias="internshipExperience")
    duration: Optional[str] = None
    ai_ml_projects: Optional[str] = Field(None, alias="aiMlProjects")
    preferred_start_date: Optional[str] = Field(None, alias="preferredStartDate")

    @property
    def education_summary(self) -> Optional[str]:
        if not self.education_status:
            return None
        if self.degree_discipline:
            return f"{self.education_status} - {self.degree_discipline}"
        return self.education_status

    @property
    def portfolio_link(self) -> Optional[str]:
        return self.portfolio_url or None

    @property
    def start_date(self) -> Optional[str]:
        return self.preferred_start_date or None


class SocialMediaRoleApplication(ApplicationBase):
    """Social media management application."""
    role_kind: ClassVar[str] = "social_media"

    current_qualification: Optional[str] = Field(None, alias="currentQualification")
    college_university: Optional[str] = Field(None, alias="collegeUniversity")
    relevant_courses: Optional[str] = Field(None, alias="relevantCourses")
    social_media_platforms: Optional[List[str]] = Field(None, alias="socialMediaPlatforms")
    content_creation_skills: Optional[List[str]] = Field(None, alias="contentCreationSkills")
    portfolio_work_samples: Optional[str] = Field(None, alias="portfolioWorkSamples")
    hours_per_week: Optional[str] = Field(None, alias="hoursPerWeek")
    work_preference: Optional[str] = Field(None, alias="workPreference")
    expectations: Optional[str] = None

    @property
    def education_summary(self) -> Optional[str]:
        if not self.current_qualification:
            return None
        if self.college_university:
            return f"{self.current_qualification} ({self.college_university})"
        return self.current_qualification

    @property
    def portfolio_link(self) -> Optional[str]:
        return self.portfolio_work_samples or None


Application = Union[TechnicalRoleApplication, SocialMediaRoleApplication]


def decode_application(payload: Dict[str, Any]) -> Application:
    """
    Decode a wire payload into the variant selected by its job identifier.

    The social media posting gets its own field group; every other
    identifier (including unknown ones) is treated as a technical role.
    """
    if payload.get("jobId") == SOCIAL_MEDIA_JOB_ID:
        return SocialMediaRoleApplication.model_validate(payload)
    return TechnicalRoleApplication.model_validate(payload)


class ApplicationPage(BaseModel):
    rows: List[Any] = []
    total_pages: int = 1


# Dashboard Schemas
class StatusBreakdown(WireModel):
    pending: int = 0
    reviewed: int = 0
    shortlisted: int = 0
    rejected: int = 0
    accepted: int = 0


class Stats(WireModel):
    total_applications: int = Field(0, alias="totalApplications")
    recent_applications: int = Field(0, alias="recentApplications")
    status_breakdown: StatusBreakdown = Field(default_factory=StatusBreakdown, alias="statusBreakdown")
