"""Domain Entities - Core business objects"""

from .actor import Actor
from .job_post import JobPost
__all__ = ["Actor", "JobPost"]
