"""
Admin Job Post Endpoints
Moderation of job posts: approve, hold, reject, fulfill, delete, clone
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from application.services.jobs import JobLifecycleService
from domain.entities import Actor
from domain.value_objects import DbJobStatus, JobRole
from presentation.api.v1.container import get_job_lifecycle_service
from presentation.api.v1.dependencies import require_role
from presentation.api.v1.schemas.job_post import (
    AdminJobPostCreateRequest,
    CloneJobRequest,
    JobPostResponse,
    JobPostUpdateRequest,
)


router = APIRouter()

current_admin = require_role(JobRole.ADMIN)


@router.post("/jobs", response_model=JobPostResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    request: AdminJobPostCreateRequest,
    actor: Actor = Depends(current_admin),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    job = await service.create_job(actor, request.model_dump())
    return JobPostResponse.from_entity(job)


@router.get("/jobs", response_model=List[JobPostResponse])
async def list_jobs(
    job_status: Optional[DbJobStatus] = Query(None, description="Filter by lifecycle status"),
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    actor: Actor = Depends(current_admin),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    """All job posts, deleted ones included"""
    jobs = await service.list_jobs(actor, job_status=job_status, limit=limit, offset=offset)
    return [JobPostResponse.from_entity(job) for job in jobs]


@router.get("/jobs/{job_id}", response_model=JobPostResponse)
async def get_job(
    job_id: int,
    actor: Actor = Depends(current_admin),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    job = await service.get_job(actor, job_id)
    return JobPostResponse.from_entity(job)


@router.put("/jobs/{job_id}", response_model=JobPostResponse)
async def edit_job(
    job_id: int,
    request: JobPostUpdateRequest,
    actor: Actor = Depends(current_admin),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    job = await service.edit_job(actor, job_id, request.model_dump(exclude_unset=True))
    return JobPostResponse.from_entity(job)


@router.patch("/jobs/{job_id}/fulfill", response_model=JobPostResponse)
async def fulfill_job(
    job_id: int,
    actor: Actor = Depends(current_admin),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    job = await service.fulfill_job(actor, job_id)
    return JobPostResponse.from_entity(job)


@router.patch("/jobs/{job_id}/approve", response_model=JobPostResponse)
async def approve_job(
    job_id: int,
    actor: Actor = Depends(current_admin),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    """Approve (activate) a pending, on-hold or dormant job post"""
    job = await service.activate_job(actor, job_id)
    return JobPostResponse.from_entity(job)


@router.patch("/jobs/{job_id}/hold", response_model=JobPostResponse)
async def hold_job(
    job_id: int,
    actor: Actor = Depends(current_admin),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    job = await service.hold_job(actor, job_id)
    return JobPostResponse.from_entity(job)


@router.patch("/jobs/{job_id}/reject", response_model=JobPostResponse)
async def reject_job(
    job_id: int,
    actor: Actor = Depends(current_admin),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    """Reject a pending job post (soft delete)"""
    job = await service.reject_job(actor, job_id)
    return JobPostResponse.from_entity(job)


@router.delete("/jobs/{job_id}", response_model=JobPostResponse)
async def delete_job(
    job_id: int,
    actor: Actor = Depends(current_admin),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    job = await service.delete_job(actor, job_id)
    return JobPostResponse.from_entity(job)


@router.post("/jobs/{job_id}/clone", response_model=JobPostResponse, status_code=status.HTTP_201_CREATED)
async def clone_job(
    job_id: int,
    request: CloneJobRequest,
    actor: Actor = Depends(current_admin),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    """Clone a job post under the given employer"""
    job = await service.clone_job(actor, job_id, employer_id=request.employer_id)
    return JobPostResponse.from_entity(job)
