"""
Job Post Request/Response Schemas
Pydantic v2 models with strict validation
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.entities import JobPost
from domain.value_objects import DbJobStatus, JobAction, JobStatus


class JobPostCreateRequest(BaseModel):
    """Employer job post creation request"""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=10)
    min_qualification: str = Field(..., min_length=1)
    experience_required: str = Field(..., min_length=1)
    skills: str = Field(..., min_length=1)
    responsibilities: str = Field(..., min_length=1)
    salary_range: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    vacancy: int = Field(1, gt=0)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Reject whitespace-only titles"""
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Title must be at least 3 characters")
        return v


class AdminJobPostCreateRequest(JobPostCreateRequest):
    """Admin job post creation request: names the employer, may set the initial status"""

    employer_id: int = Field(..., gt=0)
    job_status: DbJobStatus = DbJobStatus.PENDING


class JobPostUpdateRequest(BaseModel):
    """Partial job post update; status is changed through the action endpoints"""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=3, max_length=100)
    description: Optional[str] = Field(None, min_length=10)
    min_qualification: Optional[str] = Field(None, min_length=1)
    experience_required: Optional[str] = Field(None, min_length=1)
    skills: Optional[str] = Field(None, min_length=1)
    responsibilities: Optional[str] = Field(None, min_length=1)
    salary_range: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1)
    vacancy: Optional[int] = Field(None, gt=0)

    @field_validator(
        "title", "min_qualification", "skills", "responsibilities",
        "salary_range", "location", "vacancy",
        mode="before",
    )
    @classmethod
    def reject_null(cls, v):
        """Omit a field to leave it unchanged; required columns cannot be cleared"""
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Title must be at least 3 characters")
        return v


class CloneJobRequest(BaseModel):
    """Admin clone request"""

    employer_id: int = Field(..., gt=0)


class JobPostResponse(BaseModel):
    """Job post with its derived display status"""

    id: int
    job_code: str
    employer_id: int
    title: str
    description: Optional[str] = None
    min_qualification: str
    experience_required: Optional[str] = None
    skills: str
    responsibilities: str
    salary_range: str
    location: str
    vacancy: int
    job_status: str
    deleted: bool
    on_hold: bool
    status: JobStatus
    applications_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, job: JobPost) -> "JobPostResponse":
        return cls(
            id=job.id,
            job_code=job.job_code,
            employer_id=job.employer_id,
            title=job.title,
            description=job.description,
            min_qualification=job.min_qualification,
            experience_required=job.experience_required,
            skills=job.skills,
            responsibilities=job.responsibilities,
            salary_range=job.salary_range,
            location=job.location,
            vacancy=job.vacancy,
            job_status=str(job.job_status),
            deleted=job.deleted,
            on_hold=job.on_hold,
            status=job.status,
            applications_count=job.applications_count,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )


class CandidateJobPostResponse(BaseModel):
    """Candidate view of a job post (no employer id, no vacancy count)"""

    id: int
    job_code: str
    title: str
    description: Optional[str] = None
    min_qualification: str
    experience_required: Optional[str] = None
    skills: str
    responsibilities: str
    salary_range: str
    location: str
    status: JobStatus
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, job: JobPost) -> "CandidateJobPostResponse":
        return cls(
            id=job.id,
            job_code=job.job_code,
            title=job.title,
            description=job.description,
            min_qualification=job.min_qualification,
            experience_required=job.experience_required,
            skills=job.skills,
            responsibilities=job.responsibilities,
            salary_range=job.salary_range,
            location=job.location,
            status=job.status,
            created_at=job.created_at,
        )


class JobActionsResponse(BaseModel):
    """Actions the caller may perform on a job post"""

    job_id: int
    status: JobStatus
    actions: List[JobAction]
