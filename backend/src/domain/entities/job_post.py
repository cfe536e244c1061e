"""
JobPost Domain Entity
Immutable job posting owned by an employer
"""
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from ..job_lifecycle import get_job_status
from ..value_objects import DbJobStatus, JobStatus


@dataclass(frozen=True)
class JobPost:
    """Job post domain entity - immutable"""

    employer_id: int
    title: str
    id: Optional[int] = None
    job_code: str = ""

    # Details
    description: Optional[str] = None
    min_qualification: str = ""
    experience_required: Optional[str] = None
    skills: str = ""
    responsibilities: str = ""
    salary_range: str = ""
    location: str = ""
    vacancy: int = 1

    # Lifecycle
    job_status: DbJobStatus = DbJobStatus.PENDING
    deleted: bool = False
    on_hold: bool = False

    applications_count: int = 0

    # Timestamps
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate job post data"""
        if not self.title or len(self.title.strip()) == 0:
            raise ValueError("Job title cannot be empty")

        if self.vacancy is not None and self.vacancy < 1:
            raise ValueError("Vacancy must be positive")

    @property
    def status(self) -> JobStatus:
        """Display status derived from job_status and deleted"""
        return get_job_status(self.job_status, self.deleted)

    def is_owned_by(self, employer_id: Optional[int]) -> bool:
        return employer_id is not None and self.employer_id == employer_id

    def clone_for(self, employer_id: int, job_code: str) -> "JobPost":
        """Copy of this post for ``employer_id``, back at the start of the lifecycle"""
        return replace(
            self,
            id=None,
            employer_id=employer_id,
            job_code=job_code,
            title=f"Copy of {self.title}",
            job_status=DbJobStatus.PENDING,
            deleted=False,
            on_hold=False,
            applications_count=0,
            created_at=None,
            updated_at=None,
        )

    def __str__(self) -> str:
        return f"JobPost({self.job_code or self.id}: {self.title})"
