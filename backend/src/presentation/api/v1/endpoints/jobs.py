"""
Shared Job Endpoints
Per-role action menus for dashboards
"""
from fastapi import APIRouter, Depends

from application.services.jobs import JobLifecycleService
from domain.entities import Actor
from presentation.api.v1.container import get_job_lifecycle_service
from presentation.api.v1.dependencies import get_current_actor
from presentation.api.v1.schemas.job_post import JobActionsResponse


router = APIRouter()


@router.get("/jobs/{job_id}/actions", response_model=JobActionsResponse)
async def get_job_actions(
    job_id: int,
    actor: Actor = Depends(get_current_actor),
    service: JobLifecycleService = Depends(get_job_lifecycle_service)
):
    """
    Actions the caller may perform on a job post in its current state.

    Dashboards use this to decide which menu entries to show; the action
    endpoints apply the same rules when called.
    """
    job, actions = await service.available_actions(actor, job_id)
    return JobActionsResponse(
        job_id=job.id,
        status=job.status,
        actions=sorted(actions, key=lambda action: action.value),
    )
