"""
Candidate Job Endpoints
Read-only view of open job posts
"""
from typing import List

from fastapi import APIRouter, Depends, Query

from application.services.jobs import JobLifecycleService
from domain.entities import Actor
from domain.value_objects import JobRole
from presentation.api.v1.container import get_job_lifecycle_service
from presentation.api.v1.dependencies import require_role
from presentation.api.v1.schemas.job_post import CandidateJobPostResponse


router = APIRouter()

current_candidate = require_role(JobRole.CANDIDATE)


@router.get("/jobs", response_model=List[CandidateJobPostResponse])
async def list_open_jobs(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    actor: Actor = Depends(current_candidate),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    """Active, non-deleted job posts"""
    jobs = await service.list_jobs(actor, limit=limit, offset=offset)
    return [CandidateJobPostResponse.from_entity(job) for job in jobs]


@router.get("/jobs/{job_id}", response_model=CandidateJobPostResponse)
async def get_open_job(
    job_id: int,
    actor: Actor = Depends(current_candidate),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    """A single job post; anything not open to candidates is reported as not found"""
    job = await service.get_job(actor, job_id)
    return CandidateJobPostResponse.from_entity(job)
