"""
Dependency Injection Container
Manages service and repository instances
"""
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import Depends

from core.database import get_db
from application.repositories.interfaces import IJobPostRepository
from application.services.jobs import JobLifecycleService
from infrastructure.persistence.repositories.job_post import SQLAlchemyJobPostRepository


def get_job_post_repository(
    session: AsyncSession = Depends(get_db)
) -> IJobPostRepository:
    """Get job post repository instance (per-request)"""
    return SQLAlchemyJobPostRepository(session)


def get_job_lifecycle_service(
    job_repo: IJobPostRepository = Depends(get_job_post_repository)
) -> JobLifecycleService:
    """Get job lifecycle service instance (per-request)"""
    return JobLifecycleService(job_repo)
