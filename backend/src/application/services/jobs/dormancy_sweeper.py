"""
Dormancy Sweeper - Background worker that retires stale job posts
ACTIVE posts older than the configured age move to DORMANT
"""
import asyncio
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from application.repositories.interfaces import IJobPostRepository
from core.config import settings
from core.database import AsyncSessionLocal
from domain.job_lifecycle import is_valid_transition
from domain.value_objects import DbJobStatus


RepositoryFactory = Callable[[AsyncSession], IJobPostRepository]


def _default_repository(session: AsyncSession) -> IJobPostRepository:
    from infrastructure.persistence.repositories.job_post import SQLAlchemyJobPostRepository
    return SQLAlchemyJobPostRepository(session)


class DormancySweeper:
    """Background worker for the ACTIVE -> DORMANT sweep"""

    def __init__(
        self,
        dormant_after_days: int = 90,
        interval_minutes: int = 60 * 24,
        session_factory=AsyncSessionLocal,
        repository_factory: RepositoryFactory = _default_repository
    ):
        """
        Initialize the sweeper

        Args:
            dormant_after_days: Age in days after which an ACTIVE post goes dormant
            interval_minutes: Minutes between sweeps
            session_factory: Callable returning an async session context manager
            repository_factory: Builds a job post repository for a session
        """
        if not is_valid_transition(DbJobStatus.ACTIVE, DbJobStatus.DORMANT):
            raise RuntimeError("Lifecycle no longer allows ACTIVE -> DORMANT")

        self.dormant_after = timedelta(days=dormant_after_days)
        self.interval_seconds = interval_minutes * 60
        self.session_factory = session_factory
        self.repository_factory = repository_factory
        self.running = False

    async def start(self):
        """Run sweeps until stopped"""
        self.running = True
        logger.info(
            f"Dormancy sweeper started (after={self.dormant_after.days}d, interval={self.interval_seconds}s)"
        )

        try:
            while self.running:
                try:
                    await self.sweep_once()
                except Exception as e:
                    logger.error(f"Dormancy sweep failed: {e}")
                await asyncio.sleep(self.interval_seconds)
        finally:
            logger.info("Dormancy sweeper stopped")

    async def stop(self):
        """Stop after the current sweep"""
        self.running = False

    async def sweep_once(self, now: Optional[datetime] = None) -> int:
        """Move stale ACTIVE posts to DORMANT; returns how many moved"""
        now = now or datetime.now(timezone.utc)
        cutoff = now - self.dormant_after

        async with self.session_factory() as session:
            try:
                repo = self.repository_factory(session)
                moved = await repo.mark_dormant_before(cutoff)
                await session.commit()
            except Exception:
                await session.rollback()
                raise

        if moved:
            logger.info(f"Marked {moved} job post(s) created before {cutoff.isoformat()} as DORMANT")
        else:
            logger.debug(f"No job posts created before {cutoff.isoformat()} to mark dormant")
        return moved


# Global sweeper instance
_sweeper_instance: Optional[DormancySweeper] = None
_sweeper_task: Optional[asyncio.Task] = None


def start_sweeper() -> Optional[DormancySweeper]:
    """Start the global sweeper in the background when enabled"""
    global _sweeper_instance, _sweeper_task

    if not settings.DORMANCY_SWEEP_ENABLED:
        logger.info("Dormancy sweeper disabled")
        return None

    if _sweeper_instance and _sweeper_instance.running:
        logger.warning("Dormancy sweeper is already running")
        return _sweeper_instance

    _sweeper_instance = DormancySweeper(
        dormant_after_days=settings.DORMANCY_AFTER_DAYS,
        interval_minutes=settings.DORMANCY_SWEEP_INTERVAL_MINUTES,
    )
    _sweeper_task = asyncio.create_task(_sweeper_instance.start())
    return _sweeper_instance


async def stop_sweeper():
    """Stop the global sweeper and wait for its task"""
    global _sweeper_instance, _sweeper_task

    if _sweeper_instance:
        await _sweeper_instance.stop()
    if _sweeper_task:
        _sweeper_task.cancel()
        try:
            await _sweeper_task
        except asyncio.CancelledError:
            pass
    _sweeper_instance = None
    _sweeper_task = None


def get_sweeper() -> Optional[DormancySweeper]:
    """Get the global sweeper instance"""
    return _sweeper_instance
