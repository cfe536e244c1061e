"""
Jobs Service Package
"""
from .job_code import generate_job_code
from .job_lifecycle_service import JobLifecycleService

__all__ = [
    "generate_job_code",
    "JobLifecycleService",
]
