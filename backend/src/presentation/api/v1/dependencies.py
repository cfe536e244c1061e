"""
FastAPI Dependencies
Current actor and role gates
"""
from typing import Optional

from fastapi import Depends, HTTPException, status, Header

from domain.entities import Actor
from domain.value_objects import JobRole


async def get_current_actor(
    x_user_role: Optional[str] = Header(None),
    x_employer_id: Optional[int] = Header(None)
) -> Actor:
    """
    Build the calling actor from identity headers

    The upstream gateway authenticates the user and forwards the role and,
    for employers, the employer profile id. Unknown roles are passed through
    and receive no permissions from the lifecycle rules.

    Usage:
        @router.get("/jobs")
        async def list_jobs(actor: Actor = Depends(get_current_actor)):
            ...
    """
    if not x_user_role:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Role header",
        )

    return Actor(role=x_user_role.strip().lower(), employer_id=x_employer_id)


def require_role(role: JobRole):
    """Dependency factory restricting a router to one role"""

    async def _require_role(actor: Actor = Depends(get_current_actor)) -> Actor:
        if actor.role != role:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied"
            )

        if role is JobRole.EMPLOYER and actor.employer_id is None:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Missing X-Employer-Id header"
            )

        return actor

    return _require_role
