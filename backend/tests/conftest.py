"""
Shared test fixtures
"""
import os

# Settings are read at import time; keep the limiter and sweeper out of the way.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DORMANCY_SWEEP_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from dataclasses import replace
from datetime import datetime, timezone
from itertools import count
from typing import Any, Dict, List, Optional

import pytest

from application.repositories.interfaces import IJobPostRepository
from core.exceptions import ResourceNotFoundException
from domain.entities import Actor, JobPost
from domain.value_objects import DbJobStatus


class InMemoryJobPostRepository(IJobPostRepository):
    """Dict-backed job post repository for service and API tests"""

    def __init__(self):
        self.jobs: Dict[int, JobPost] = {}
        self._ids = count(1)

    def add(self, job: JobPost) -> JobPost:
        if job.id is None:
            job = replace(job, id=next(self._ids))
        if job.created_at is None:
            job = replace(job, created_at=datetime.now(timezone.utc))
        self.jobs[job.id] = job
        return job

    async def get_by_id(self, job_id: int) -> Optional[JobPost]:
        return self.jobs.get(job_id)

    async def create(self, job: JobPost) -> JobPost:
        return self.add(job)

    async def update(self, job_id: int, changes: Dict[str, Any]) -> JobPost:
        return self._replace(job_id, **changes)

    async def set_status(self, job_id: int, status: DbJobStatus) -> JobPost:
        return self._replace(job_id, job_status=status, on_hold=status is DbJobStatus.ON_HOLD)

    async def soft_delete(self, job_id: int) -> JobPost:
        return self._replace(job_id, deleted=True)

    async def list_jobs(
        self,
        employer_id: Optional[int] = None,
        job_status: Optional[DbJobStatus] = None,
        include_deleted: bool = True,
        limit: int = 50,
        offset: int = 0
    ) -> List[JobPost]:
        jobs = [
            job for job in self.jobs.values()
            if (employer_id is None or job.employer_id == employer_id)
            and (job_status is None or job.job_status == job_status)
            and (include_deleted or not job.deleted)
        ]
        jobs.sort(key=lambda job: job.id, reverse=True)
        return jobs[offset:offset + limit]

    async def mark_dormant_before(self, cutoff: datetime) -> int:
        stale = [
            job for job in self.jobs.values()
            if job.job_status == DbJobStatus.ACTIVE and not job.deleted and job.created_at < cutoff
        ]
        for job in stale:
            self._replace(job.id, job_status=DbJobStatus.DORMANT, on_hold=False)
        return len(stale)

    def _replace(self, job_id: int, **changes) -> JobPost:
        if job_id not in self.jobs:
            raise ResourceNotFoundException("Job post", str(job_id))
        job = replace(self.jobs[job_id], updated_at=datetime.now(timezone.utc), **changes)
        self.jobs[job_id] = job
        return job


def build_job(**overrides) -> JobPost:
    fields = dict(
        employer_id=7,
        title="Backend Engineer",
        job_code="JOB-123456-ABCD",
        description="Build and run the job board API.",
        min_qualification="Bachelor's Degree",
        experience_required="Mid-Level (3-5 years)",
        skills="python, sql",
        responsibilities="Own the lifecycle service",
        salary_range="50k-70k",
        location="Remote",
        vacancy=2,
    )
    fields.update(overrides)
    return JobPost(**fields)


@pytest.fixture
def job_repo():
    return InMemoryJobPostRepository()


@pytest.fixture
def employer():
    return Actor(role="employer", employer_id=7)


@pytest.fixture
def other_employer():
    return Actor(role="employer", employer_id=99)


@pytest.fixture
def admin():
    return Actor(role="admin")


@pytest.fixture
def candidate():
    return Actor(role="candidate")
