"""ORM Models Package"""

from .job_post import JobPostModel

__all__ = [
    "JobPostModel",
]
