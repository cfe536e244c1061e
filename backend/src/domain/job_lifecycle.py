"""
Job Lifecycle Rules
Status projection, transition table and role permission tables for job posts.

All functions here are pure and total: anything they do not recognise (an
unknown role, a status string that is not a DbJobStatus, None) falls through
to the most restrictive answer, ``pending`` or ``False``. Untyped strings coming
from JSON or headers are accepted alongside the enum members.
"""
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Type, TypeVar, Union

from .value_objects import DbJobStatus, JobStatus, JobAction, JobRole


E = TypeVar("E", DbJobStatus, JobAction, JobRole)


# Persisted status -> display status. Anything missing here displays as pending.
DISPLAY_STATUS: Mapping[DbJobStatus, JobStatus] = MappingProxyType({
    DbJobStatus.PENDING: JobStatus.PENDING,
    DbJobStatus.ON_HOLD: JobStatus.ON_HOLD,
    DbJobStatus.ACTIVE: JobStatus.ACTIVE,
    DbJobStatus.FULFILLED: JobStatus.FULFILLED,
    DbJobStatus.DORMANT: JobStatus.DORMANT,
})

# Lifecycle edges. FULFILLED is terminal.
TRANSITIONS: Mapping[DbJobStatus, FrozenSet[DbJobStatus]] = MappingProxyType({
    DbJobStatus.PENDING: frozenset({DbJobStatus.ON_HOLD, DbJobStatus.ACTIVE}),
    DbJobStatus.ON_HOLD: frozenset({DbJobStatus.ACTIVE}),
    DbJobStatus.ACTIVE: frozenset({DbJobStatus.DORMANT, DbJobStatus.FULFILLED}),
    DbJobStatus.DORMANT: frozenset({DbJobStatus.ACTIVE}),
    DbJobStatus.FULFILLED: frozenset(),
})

CANDIDATE_ACTIONS: FrozenSet[JobAction] = frozenset({JobAction.VIEW, JobAction.APPLY})

EMPLOYER_PERMISSIONS: Mapping[DbJobStatus, FrozenSet[JobAction]] = MappingProxyType({
    DbJobStatus.PENDING: frozenset({JobAction.CLONE, JobAction.EDIT}),
    DbJobStatus.ON_HOLD: frozenset({JobAction.CLONE, JobAction.EDIT}),
    DbJobStatus.DORMANT: frozenset({JobAction.CLONE, JobAction.ACTIVATE}),
    DbJobStatus.ACTIVE: frozenset({JobAction.CLONE, JobAction.EDIT, JobAction.FULFILL}),
    DbJobStatus.FULFILLED: frozenset({JobAction.CLONE}),
})

# NOTE: admin may activate a FULFILLED job here although TRANSITIONS has no
# FULFILLED -> ACTIVE edge. Both tables are kept as they are.
ADMIN_PERMISSIONS: Mapping[DbJobStatus, FrozenSet[JobAction]] = MappingProxyType({
    DbJobStatus.PENDING: frozenset({
        JobAction.DELETE, JobAction.CLONE, JobAction.EDIT, JobAction.ACTIVATE, JobAction.HOLD,
    }),
    DbJobStatus.ON_HOLD: frozenset({
        JobAction.DELETE, JobAction.CLONE, JobAction.EDIT, JobAction.ACTIVATE,
    }),
    DbJobStatus.ACTIVE: frozenset({
        JobAction.DELETE, JobAction.CLONE, JobAction.EDIT, JobAction.FULFILL,
    }),
    DbJobStatus.DORMANT: frozenset({JobAction.DELETE, JobAction.CLONE, JobAction.ACTIVATE}),
    DbJobStatus.FULFILLED: frozenset({JobAction.DELETE, JobAction.CLONE, JobAction.ACTIVATE}),
})

ROLE_PERMISSIONS: Mapping[JobRole, Mapping[DbJobStatus, FrozenSet[JobAction]]] = MappingProxyType({
    JobRole.EMPLOYER: EMPLOYER_PERMISSIONS,
    JobRole.ADMIN: ADMIN_PERMISSIONS,
})


def _coerce(enum_cls: Type[E], value: object) -> Optional[E]:
    """Map a member or its raw value onto ``enum_cls``; None when unrecognised"""
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None


def get_job_status(
    job_status: Optional[Union[DbJobStatus, str]] = None,
    deleted: Optional[bool] = False,
) -> JobStatus:
    """Project persisted fields onto the display status; deleted wins"""
    if deleted:
        return JobStatus.DELETED
    status = _coerce(DbJobStatus, job_status)
    return DISPLAY_STATUS.get(status, JobStatus.PENDING)


def is_valid_transition(
    current: Union[DbJobStatus, str],
    target: Union[DbJobStatus, str],
    deleted: bool = False,
) -> bool:
    """
    Check whether moving a job from ``current`` to ``target`` is a lifecycle edge.

    A deleted job accepts no transitions. Staying in the same state is
    always allowed.
    """
    if deleted:
        return False
    if current == target:
        return True
    current_status = _coerce(DbJobStatus, current)
    target_status = _coerce(DbJobStatus, target)
    if current_status is None or target_status is None:
        return False
    return target_status in TRANSITIONS.get(current_status, frozenset())


def can_perform_action(
    role: Union[JobRole, str],
    status: Union[DbJobStatus, str],
    action: Union[JobAction, str],
    deleted: bool = False,
) -> bool:
    """
    Check whether ``role`` may perform ``action`` on a job in ``status``.

    Deletion vetoes everything. Candidates may only view or apply to ACTIVE
    jobs; employers and admins go through their per-status allow-lists.
    Unknown roles get no permissions.
    """
    if deleted:
        return False

    job_role = _coerce(JobRole, role)
    job_status = _coerce(DbJobStatus, status)
    job_action = _coerce(JobAction, action)
    if job_role is None or job_status is None or job_action is None:
        return False

    if job_role is JobRole.CANDIDATE:
        return job_action in CANDIDATE_ACTIONS and job_status is DbJobStatus.ACTIVE

    rules = ROLE_PERMISSIONS.get(job_role)
    if rules is None:
        return False
    return job_action in rules.get(job_status, frozenset())


def allowed_actions(
    role: Union[JobRole, str],
    status: Union[DbJobStatus, str],
    deleted: bool = False,
) -> FrozenSet[JobAction]:
    """All actions ``role`` may perform on a job in ``status``"""
    return frozenset(
        action for action in JobAction
        if can_perform_action(role, status, action, deleted)
    )
