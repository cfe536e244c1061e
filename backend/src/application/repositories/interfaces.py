"""
Repository Interfaces (Abstract Base Classes)
Define contracts for data access without implementation details
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional

from domain.entities import JobPost
from domain.value_objects import DbJobStatus


class IJobPostRepository(ABC):
    """Job post repository interface"""

    @abstractmethod
    async def get_by_id(self, job_id: int) -> Optional[JobPost]:
        """Get job post by ID, deleted or not"""
        pass

    @abstractmethod
    async def create(self, job: JobPost) -> JobPost:
        """Insert a new job post"""
        pass

    @abstractmethod
    async def update(self, job_id: int, changes: Dict[str, Any]) -> JobPost:
        """Apply field changes to a job post"""
        pass

    @abstractmethod
    async def set_status(self, job_id: int, status: DbJobStatus) -> JobPost:
        """Write a new lifecycle status (keeps on_hold in step)"""
        pass

    @abstractmethod
    async def soft_delete(self, job_id: int) -> JobPost:
        """Flag a job post as deleted"""
        pass

    @abstractmethod
    async def list_jobs(
        self,
        employer_id: Optional[int] = None,
        job_status: Optional[DbJobStatus] = None,
        include_deleted: bool = True,
        limit: int = 50,
        offset: int = 0
    ) -> List[JobPost]:
        """List job posts, newest first"""
        pass

    @abstractmethod
    async def mark_dormant_before(self, cutoff: datetime) -> int:
        """Move ACTIVE, non-deleted posts created before cutoff to DORMANT"""
        pass
