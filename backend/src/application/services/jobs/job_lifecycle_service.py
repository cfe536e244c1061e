"""
Job Lifecycle Service
Authorizes and applies job post status changes on behalf of an actor.

Every mutating operation runs the same guard sequence before touching
storage: load the post, hide it from employers who do not own it, check the
role permission table, then check the transition table. Only when all pass
is the write issued.
"""
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Tuple

from loguru import logger

from application.repositories.interfaces import IJobPostRepository
from core.exceptions import (
    AuthorizationException,
    InvalidStateTransitionException,
    ResourceNotFoundException,
    ValidationException,
)
from domain.entities import Actor, JobPost
from domain.job_lifecycle import allowed_actions, can_perform_action, is_valid_transition
from domain.value_objects import DbJobStatus, JobAction, JobRole

from .job_code import generate_job_code


class JobLifecycleService:
    """Job post operations guarded by the lifecycle rules"""

    def __init__(
        self,
        job_repository: IJobPostRepository,
        code_generator: Callable[[], str] = generate_job_code
    ):
        self.job_repo = job_repository
        self.code_generator = code_generator

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_job(self, actor: Actor, job_id: int) -> JobPost:
        """Fetch a job post as seen by ``actor``"""
        self._require_known_role(actor)
        return await self._load(actor, job_id)

    async def list_jobs(
        self,
        actor: Actor,
        job_status: Optional[DbJobStatus] = None,
        limit: int = 50,
        offset: int = 0
    ) -> List[JobPost]:
        """
        List job posts visible to ``actor``.

        Candidates only ever see ACTIVE, non-deleted posts. Employers see their
        own non-deleted posts. Admins see everything, deleted posts included.
        """
        role = self._require_known_role(actor)

        if role is JobRole.CANDIDATE:
            return await self.job_repo.list_jobs(
                job_status=DbJobStatus.ACTIVE,
                include_deleted=False,
                limit=limit,
                offset=offset,
            )

        if role is JobRole.EMPLOYER:
            if actor.employer_id is None:
                raise AuthorizationException("Employer profile required")
            return await self.job_repo.list_jobs(
                employer_id=actor.employer_id,
                job_status=job_status,
                include_deleted=False,
                limit=limit,
                offset=offset,
            )

        return await self.job_repo.list_jobs(job_status=job_status, limit=limit, offset=offset)

    async def available_actions(self, actor: Actor, job_id: int) -> Tuple[JobPost, FrozenSet[JobAction]]:
        """Job post plus the actions ``actor`` may perform on it right now"""
        self._require_known_role(actor)
        job = await self._load(actor, job_id)
        return job, allowed_actions(actor.role, job.job_status, job.deleted)

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    async def create_job(self, actor: Actor, data: Dict[str, Any]) -> JobPost:
        """
        Create a job post.

        Employers always create PENDING posts under their own profile. Admins
        name the employer and may choose the initial status.
        """
        role = self._require_known_role(actor)
        fields = dict(data)

        if role is JobRole.EMPLOYER:
            if actor.employer_id is None:
                raise ValidationException("employer_id", "Employer profile required")
            fields["employer_id"] = actor.employer_id
            fields["job_status"] = DbJobStatus.PENDING
        elif role is JobRole.ADMIN:
            if fields.get("employer_id") is None:
                raise ValidationException("employer_id", "Admin must specify the owning employer")
            try:
                fields["job_status"] = DbJobStatus(fields.get("job_status") or DbJobStatus.PENDING)
            except ValueError:
                raise ValidationException("job_status", f"Unknown job status {fields.get('job_status')!r}")
        else:
            raise AuthorizationException(f"Role '{actor.role}' cannot create job posts")

        fields["job_code"] = self.code_generator()
        try:
            job = JobPost(**fields)
        except ValueError as e:
            raise ValidationException("job_post", str(e))

        created = await self.job_repo.create(job)
        logger.info(f"{actor} created job post {created.id} ({created.job_code}) in {created.job_status}")
        return created

    async def clone_job(self, actor: Actor, job_id: int, employer_id: Optional[int] = None) -> JobPost:
        """Copy a job post into a fresh PENDING post"""
        job = await self._load(actor, job_id)
        self._authorize(actor, job, JobAction.CLONE)

        if actor.role == JobRole.EMPLOYER:
            target_employer = actor.employer_id
        elif employer_id is not None:
            target_employer = employer_id
        else:
            raise ValidationException("employer_id", "Missing employer_id")

        cloned = await self.job_repo.create(job.clone_for(target_employer, self.code_generator()))
        logger.info(f"{actor} cloned job post {job.id} into {cloned.id} for employer {target_employer}")
        return cloned

    # ------------------------------------------------------------------
    # Edits and status changes
    # ------------------------------------------------------------------

    async def edit_job(self, actor: Actor, job_id: int, changes: Dict[str, Any]) -> JobPost:
        """Change descriptive fields; status changes go through the dedicated actions"""
        job = await self._load(actor, job_id)
        self._authorize(actor, job, JobAction.EDIT)

        if not changes:
            return job
        if "job_status" in changes or "deleted" in changes:
            raise ValidationException("job_status", "Use the job action endpoints to change status")
        if "title" in changes and not (changes["title"] or "").strip():
            raise ValidationException("title", "Job title cannot be empty")
        if "vacancy" in changes and changes["vacancy"] is not None and changes["vacancy"] < 1:
            raise ValidationException("vacancy", "Vacancy must be positive")

        updated = await self.job_repo.update(job.id, changes)
        logger.info(f"{actor} edited job post {job.id}: {', '.join(sorted(changes))}")
        return updated

    async def fulfill_job(self, actor: Actor, job_id: int) -> JobPost:
        return await self._change_status(actor, job_id, JobAction.FULFILL, DbJobStatus.FULFILLED)

    async def activate_job(self, actor: Actor, job_id: int) -> JobPost:
        """Move a job to ACTIVE (admin approval uses this too)"""
        return await self._change_status(actor, job_id, JobAction.ACTIVATE, DbJobStatus.ACTIVE)

    async def hold_job(self, actor: Actor, job_id: int) -> JobPost:
        return await self._change_status(actor, job_id, JobAction.HOLD, DbJobStatus.ON_HOLD)

    async def deactivate_job(self, actor: Actor, job_id: int) -> JobPost:
        """
        Send a job back to PENDING.

        No role's permission table lists ``deactivate``; this is an employer
        operation guarded by ownership and the transition table alone, so it
        only succeeds as a no-op on a job that is already PENDING.
        """
        if actor.role != JobRole.EMPLOYER:
            raise AuthorizationException(f"Role '{actor.role}' cannot deactivate job posts")

        job = await self._load(actor, job_id)
        self._validate_transition(actor, job, DbJobStatus.PENDING)
        return await self.job_repo.set_status(job.id, DbJobStatus.PENDING)

    async def reject_job(self, actor: Actor, job_id: int) -> JobPost:
        """Admin rejection of a PENDING job: soft-deletes it"""
        job = await self._load(actor, job_id)
        self._authorize(actor, job, JobAction.DELETE)
        self._validate_transition(actor, job, DbJobStatus.PENDING)

        rejected = await self.job_repo.soft_delete(job.id)
        logger.info(f"{actor} rejected job post {job.id}")
        return rejected

    async def delete_job(self, actor: Actor, job_id: int) -> JobPost:
        """Soft-delete a job post"""
        job = await self._load(actor, job_id)
        self._authorize(actor, job, JobAction.DELETE)

        deleted = await self.job_repo.soft_delete(job.id)
        logger.info(f"{actor} deleted job post {job.id}")
        return deleted

    # ------------------------------------------------------------------
    # Guards
    # ------------------------------------------------------------------

    async def _change_status(
        self,
        actor: Actor,
        job_id: int,
        action: JobAction,
        target: DbJobStatus
    ) -> JobPost:
        job = await self._load(actor, job_id)
        self._authorize(actor, job, action)
        self._validate_transition(actor, job, target)

        updated = await self.job_repo.set_status(job.id, target)
        logger.info(f"{actor} moved job post {job.id}: {job.job_status} -> {target}")
        return updated

    async def _load(self, actor: Actor, job_id: int) -> JobPost:
        job = await self.job_repo.get_by_id(job_id)
        if job is None:
            raise ResourceNotFoundException("Job post", str(job_id))

        # Foreign posts look absent to employers, unlisted posts look absent to candidates
        if actor.role == JobRole.EMPLOYER and not job.is_owned_by(actor.employer_id):
            raise ResourceNotFoundException("Job post", str(job_id))
        if actor.role == JobRole.CANDIDATE and not can_perform_action(
            JobRole.CANDIDATE, job.job_status, JobAction.VIEW, job.deleted
        ):
            raise ResourceNotFoundException("Job post", str(job_id))

        return job

    def _authorize(self, actor: Actor, job: JobPost, action: JobAction) -> None:
        if not can_perform_action(actor.role, job.job_status, action, job.deleted):
            logger.warning(
                f"Denied {action.value} on job post {job.id} for {actor} "
                f"(status={job.job_status}, deleted={job.deleted})"
            )
            raise AuthorizationException(
                f"Role '{actor.role}' cannot {action.value} a job post that is {job.status.value}"
            )

    def _validate_transition(self, actor: Actor, job: JobPost, target: DbJobStatus) -> None:
        if not is_valid_transition(job.job_status, target, job.deleted):
            logger.warning(
                f"Rejected transition {job.job_status} -> {target.value} on job post {job.id} for {actor}"
            )
            raise InvalidStateTransitionException(str(job.job_status), target.value, job.deleted)

    @staticmethod
    def _require_known_role(actor: Actor) -> JobRole:
        try:
            return JobRole(actor.role)
        except ValueError:
            raise AuthorizationException(f"Unknown role '{actor.role}'")
