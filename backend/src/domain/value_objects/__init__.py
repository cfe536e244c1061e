"""Value Objects - Immutable objects defined by their attributes"""

from .job_status import DbJobStatus, JobStatus, JobAction, JobRole
__all__ = [
    "DbJobStatus",
    "JobStatus",
    "JobAction",
    "JobRole",
]
