"""
Job Status Enums
Lifecycle, display, action and role enumerations for job posts
"""
from enum import Enum


class DbJobStatus(str, Enum):
    """Persisted job post lifecycle state"""
    PENDING = "PENDING"
    ON_HOLD = "ON_HOLD"
    ACTIVE = "ACTIVE"
    FULFILLED = "FULFILLED"
    DORMANT = "DORMANT"

    def __str__(self) -> str:
        return self.value


class JobStatus(str, Enum):
    """Display status derived from (job_status, deleted)"""
    ACTIVE = "active"
    PENDING = "pending"
    ON_HOLD = "onHold"
    DORMANT = "dormant"
    FULFILLED = "fulfilled"
    DELETED = "deleted"


class JobAction(str, Enum):
    """Actions a role may attempt on a job post"""
    FULFILL = "fulfill"
    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"
    HOLD = "hold"
    CLONE = "clone"
    DELETE = "delete"
    EDIT = "edit"
    VIEW = "view"
    APPLY = "apply"


class JobRole(str, Enum):
    """Roles known to the job board"""
    CANDIDATE = "candidate"
    EMPLOYER = "employer"
    ADMIN = "admin"
