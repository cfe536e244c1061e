"""
JobPost Repository Implementation
SQLAlchemy-based persistence for job posts.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from loguru import logger
from sqlalchemy import select, update, and_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from application.repositories.interfaces import IJobPostRepository
from core.exceptions import RepositoryException, ResourceNotFoundException
from domain.entities import JobPost
from domain.value_objects import DbJobStatus
from infrastructure.persistence.models.job_post import JobPostModel


# Columns a caller may change through update(); lifecycle flags go through
# set_status() and soft_delete().
EDITABLE_FIELDS = frozenset({
    "title",
    "description",
    "min_qualification",
    "experience_required",
    "skills",
    "responsibilities",
    "salary_range",
    "location",
    "vacancy",
})


class SQLAlchemyJobPostRepository(IJobPostRepository):
    """SQLAlchemy implementation of the job post repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, job_id: int) -> Optional[JobPost]:
        """Get job post by ID"""
        try:
            model = await self._get_model(job_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to get job post {job_id}: {str(e)}")
            raise RepositoryException("Failed to get job post")
        return self._to_entity(model) if model else None

    async def create(self, job: JobPost) -> JobPost:
        """Insert a new job post"""
        try:
            model = self._to_model(job)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create job post '{job.title}': {str(e)}")
            raise RepositoryException("Failed to create job post")

        logger.info(f"Created job post {model.id} ({model.job_code}) for employer {model.employer_id}")
        return self._to_entity(model)

    async def update(self, job_id: int, changes: Dict[str, Any]) -> JobPost:
        """Apply editable field changes to a job post"""
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise RepositoryException(f"Fields not editable: {', '.join(sorted(unknown))}")

        return await self._write(job_id, dict(changes))

    async def set_status(self, job_id: int, status: DbJobStatus) -> JobPost:
        """Write a new lifecycle status"""
        return await self._write(job_id, {
            "job_status": status.value,
            "on_hold": status is DbJobStatus.ON_HOLD,
        })

    async def soft_delete(self, job_id: int) -> JobPost:
        """Flag a job post as deleted, leaving job_status untouched"""
        return await self._write(job_id, {"deleted": True})

    async def list_jobs(
        self,
        employer_id: Optional[int] = None,
        job_status: Optional[DbJobStatus] = None,
        include_deleted: bool = True,
        limit: int = 50,
        offset: int = 0
    ) -> List[JobPost]:
        """List job posts matching the filters, newest first"""
        conditions = []
        if employer_id is not None:
            conditions.append(JobPostModel.employer_id == employer_id)
        if job_status is not None:
            conditions.append(JobPostModel.job_status == DbJobStatus(job_status).value)
        if not include_deleted:
            conditions.append(JobPostModel.deleted.is_(False))

        stmt = select(JobPostModel)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        stmt = stmt.order_by(JobPostModel.created_at.desc(), JobPostModel.id.desc()).limit(limit).offset(offset)

        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list job posts: {str(e)}")
            raise RepositoryException("Failed to list job posts")
        return [self._to_entity(model) for model in result.scalars().all()]

    async def mark_dormant_before(self, cutoff: datetime) -> int:
        """Bulk move stale ACTIVE posts to DORMANT; returns the number of rows moved"""
        stmt = (
            update(JobPostModel)
            .where(
                and_(
                    JobPostModel.created_at < cutoff,
                    JobPostModel.job_status == DbJobStatus.ACTIVE.value,
                    JobPostModel.deleted.is_(False),
                )
            )
            .values(job_status=DbJobStatus.DORMANT.value, on_hold=False)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to mark stale job posts dormant: {str(e)}")
            raise RepositoryException("Failed to mark job posts dormant")
        return result.rowcount or 0

    async def _get_model(self, job_id: int) -> Optional[JobPostModel]:
        result = await self.session.execute(
            select(JobPostModel).where(JobPostModel.id == job_id)
        )
        return result.scalar_one_or_none()

    async def _write(self, job_id: int, values: Dict[str, Any]) -> JobPost:
        try:
            model = await self._get_model(job_id)
            if model is None:
                raise ResourceNotFoundException("Job post", str(job_id))

            for key, value in values.items():
                setattr(model, key, value)

            await self.session.flush()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update job post {job_id}: {str(e)}")
            raise RepositoryException("Failed to update job post")

        return self._to_entity(model)

    def _to_model(self, entity: JobPost) -> JobPostModel:
        return JobPostModel(
            id=entity.id,
            employer_id=entity.employer_id,
            job_code=entity.job_code,
            title=entity.title,
            description=entity.description,
            min_qualification=entity.min_qualification,
            experience_required=entity.experience_required,
            skills=entity.skills,
            responsibilities=entity.responsibilities,
            salary_range=entity.salary_range,
            location=entity.location,
            vacancy=entity.vacancy,
            job_status=DbJobStatus(entity.job_status).value,
            deleted=entity.deleted,
            on_hold=entity.job_status == DbJobStatus.ON_HOLD,
            applications_count=entity.applications_count,
        )

    def _to_entity(self, model: JobPostModel) -> JobPost:
        # Rows written outside this service may hold an unknown status string;
        # the lifecycle rules treat those as pending.
        try:
            status = DbJobStatus(model.job_status)
        except ValueError:
            logger.warning(f"Job post {model.id} has unknown status {model.job_status!r}")
            status = model.job_status

        return JobPost(
            id=model.id,
            employer_id=model.employer_id,
            job_code=model.job_code,
            title=model.title,
            description=model.description,
            min_qualification=model.min_qualification,
            experience_required=model.experience_required,
            skills=model.skills,
            responsibilities=model.responsibilities,
            salary_range=model.salary_range,
            location=model.location,
            vacancy=model.vacancy if model.vacancy is not None else 1,
            job_status=status,
            deleted=bool(model.deleted),
            on_hold=bool(model.on_hold),
            applications_count=model.applications_count or 0,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
