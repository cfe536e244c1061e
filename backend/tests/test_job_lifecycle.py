"""
Tests for the job lifecycle rules: status projection, transitions, permissions
"""
import pytest

from domain.job_lifecycle import (
    ADMIN_PERMISSIONS,
    EMPLOYER_PERMISSIONS,
    TRANSITIONS,
    allowed_actions,
    can_perform_action,
    get_job_status,
    is_valid_transition,
)
from domain.value_objects import DbJobStatus, JobAction, JobRole, JobStatus


ALL_STATUSES = list(DbJobStatus)
ALL_ACTIONS = list(JobAction)
ALL_ROLES = list(JobRole)


class TestGetJobStatus:
    """Projection of persisted fields onto display status"""

    @pytest.mark.parametrize("db_status,expected", [
        (DbJobStatus.PENDING, JobStatus.PENDING),
        (DbJobStatus.ON_HOLD, JobStatus.ON_HOLD),
        (DbJobStatus.ACTIVE, JobStatus.ACTIVE),
        (DbJobStatus.FULFILLED, JobStatus.FULFILLED),
        (DbJobStatus.DORMANT, JobStatus.DORMANT),
    ])
    def test_maps_each_persisted_status(self, db_status, expected):
        assert get_job_status(db_status, False) is expected

    @pytest.mark.parametrize("db_status", ALL_STATUSES + [None])
    def test_deleted_wins(self, db_status):
        assert get_job_status(db_status, True) is JobStatus.DELETED

    def test_defaults_to_pending(self):
        assert get_job_status() is JobStatus.PENDING
        assert get_job_status(None, False) is JobStatus.PENDING

    def test_unknown_status_falls_back_to_pending(self):
        assert get_job_status("ARCHIVED", False) is JobStatus.PENDING

    def test_raw_strings_are_accepted(self):
        assert get_job_status("ACTIVE") is JobStatus.ACTIVE
        assert get_job_status("ON_HOLD") is JobStatus.ON_HOLD

    def test_display_values(self):
        assert JobStatus.ON_HOLD.value == "onHold"
        assert get_job_status(DbJobStatus.DORMANT).value == "dormant"


class TestIsValidTransition:
    """Lifecycle transition table"""

    @pytest.mark.parametrize("current,target", [
        (DbJobStatus.PENDING, DbJobStatus.ON_HOLD),
        (DbJobStatus.PENDING, DbJobStatus.ACTIVE),
        (DbJobStatus.ON_HOLD, DbJobStatus.ACTIVE),
        (DbJobStatus.ACTIVE, DbJobStatus.DORMANT),
        (DbJobStatus.ACTIVE, DbJobStatus.FULFILLED),
        (DbJobStatus.DORMANT, DbJobStatus.ACTIVE),
    ])
    def test_listed_edges_are_valid(self, current, target):
        assert is_valid_transition(current, target, False) is True

    @pytest.mark.parametrize("current,target", [
        (DbJobStatus.ACTIVE, DbJobStatus.PENDING),
        (DbJobStatus.ON_HOLD, DbJobStatus.PENDING),
        (DbJobStatus.ACTIVE, DbJobStatus.ON_HOLD),
        (DbJobStatus.DORMANT, DbJobStatus.FULFILLED),
        (DbJobStatus.PENDING, DbJobStatus.FULFILLED),
    ])
    def test_unlisted_edges_are_invalid(self, current, target):
        assert is_valid_transition(current, target, False) is False

    @pytest.mark.parametrize("status", ALL_STATUSES)
    def test_staying_put_is_always_valid(self, status):
        assert is_valid_transition(status, status, False) is True

    @pytest.mark.parametrize("current", ALL_STATUSES)
    @pytest.mark.parametrize("target", ALL_STATUSES)
    def test_deleted_job_accepts_nothing(self, current, target):
        assert is_valid_transition(current, target, True) is False

    @pytest.mark.parametrize("target", ALL_STATUSES)
    def test_fulfilled_is_terminal(self, target):
        expected = target is DbJobStatus.FULFILLED
        assert is_valid_transition(DbJobStatus.FULFILLED, target, False) is expected

    def test_matches_table_exhaustively(self):
        for current in ALL_STATUSES:
            for target in ALL_STATUSES:
                expected = current == target or target in TRANSITIONS[current]
                assert is_valid_transition(current, target) is expected, (current, target)

    def test_unknown_statuses_are_invalid(self):
        assert is_valid_transition("ARCHIVED", DbJobStatus.ACTIVE) is False
        assert is_valid_transition(DbJobStatus.ACTIVE, "ARCHIVED") is False

    def test_raw_strings_are_accepted(self):
        assert is_valid_transition("PENDING", "ACTIVE") is True
        assert is_valid_transition("FULFILLED", DbJobStatus.ACTIVE) is False


class TestCanPerformAction:
    """Role permission tables"""

    @pytest.mark.parametrize("role", ALL_ROLES + ["guest"])
    @pytest.mark.parametrize("status", ALL_STATUSES)
    @pytest.mark.parametrize("action", ALL_ACTIONS)
    def test_deleted_vetoes_everything(self, role, status, action):
        assert can_perform_action(role, status, action, True) is False

    @pytest.mark.parametrize("action", [JobAction.VIEW, JobAction.APPLY])
    def test_candidate_may_view_and_apply_active_jobs(self, action):
        assert can_perform_action(JobRole.CANDIDATE, DbJobStatus.ACTIVE, action) is True

    @pytest.mark.parametrize("status", [s for s in ALL_STATUSES if s is not DbJobStatus.ACTIVE])
    @pytest.mark.parametrize("action", [JobAction.VIEW, JobAction.APPLY])
    def test_candidate_sees_nothing_but_active(self, status, action):
        assert can_perform_action(JobRole.CANDIDATE, status, action) is False

    @pytest.mark.parametrize("status", ALL_STATUSES)
    @pytest.mark.parametrize("action", [a for a in ALL_ACTIONS if a not in (JobAction.VIEW, JobAction.APPLY)])
    def test_candidate_cannot_manage_jobs(self, status, action):
        assert can_perform_action(JobRole.CANDIDATE, status, action) is False

    @pytest.mark.parametrize("status", ALL_STATUSES)
    @pytest.mark.parametrize("action", ALL_ACTIONS)
    def test_employer_matches_table(self, status, action):
        expected = action in EMPLOYER_PERMISSIONS[status]
        assert can_perform_action(JobRole.EMPLOYER, status, action) is expected

    @pytest.mark.parametrize("status", ALL_STATUSES)
    @pytest.mark.parametrize("action", ALL_ACTIONS)
    def test_admin_matches_table(self, status, action):
        expected = action in ADMIN_PERMISSIONS[status]
        assert can_perform_action(JobRole.ADMIN, status, action) is expected

    @pytest.mark.parametrize("status", ALL_STATUSES)
    def test_employer_and_admin_may_always_clone(self, status):
        assert can_perform_action(JobRole.EMPLOYER, status, JobAction.CLONE) is True
        assert can_perform_action(JobRole.ADMIN, status, JobAction.CLONE) is True

    @pytest.mark.parametrize("role", ALL_ROLES)
    @pytest.mark.parametrize("status", ALL_STATUSES)
    def test_nobody_may_deactivate(self, role, status):
        assert can_perform_action(role, status, JobAction.DEACTIVATE) is False

    @pytest.mark.parametrize("status", ALL_STATUSES)
    def test_employer_never_deletes_or_holds(self, status):
        assert can_perform_action(JobRole.EMPLOYER, status, JobAction.DELETE) is False
        assert can_perform_action(JobRole.EMPLOYER, status, JobAction.HOLD) is False

    def test_only_pending_jobs_can_be_held(self):
        held = [s for s in ALL_STATUSES if can_perform_action(JobRole.ADMIN, s, JobAction.HOLD)]
        assert held == [DbJobStatus.PENDING]

    @pytest.mark.parametrize("status", ALL_STATUSES)
    @pytest.mark.parametrize("action", ALL_ACTIONS)
    def test_unknown_role_gets_nothing(self, status, action):
        assert can_perform_action("guest", status, action) is False

    def test_unknown_status_or_action_gets_nothing(self):
        assert can_perform_action(JobRole.ADMIN, "ARCHIVED", JobAction.CLONE) is False
        assert can_perform_action(JobRole.ADMIN, DbJobStatus.PENDING, "publish") is False

    def test_raw_strings_are_accepted(self):
        assert can_perform_action("employer", "ACTIVE", "fulfill") is True
        assert can_perform_action("candidate", "ACTIVE", "apply") is True
        assert can_perform_action("admin", "PENDING", "hold") is True

    def test_examples(self):
        assert can_perform_action(JobRole.CANDIDATE, DbJobStatus.ACTIVE, JobAction.APPLY) is True
        assert can_perform_action(JobRole.CANDIDATE, DbJobStatus.DORMANT, JobAction.APPLY) is False
        assert can_perform_action(JobRole.EMPLOYER, DbJobStatus.PENDING, JobAction.EDIT) is True
        assert can_perform_action(JobRole.ADMIN, DbJobStatus.FULFILLED, JobAction.EDIT) is False
        assert can_perform_action(JobRole.ADMIN, DbJobStatus.DORMANT, JobAction.ACTIVATE) is True
        assert can_perform_action(JobRole.EMPLOYER, DbJobStatus.PENDING, JobAction.ACTIVATE) is False
        assert can_perform_action(JobRole.EMPLOYER, DbJobStatus.ON_HOLD, JobAction.ACTIVATE) is False
        assert can_perform_action("guest", DbJobStatus.ACTIVE, JobAction.VIEW) is False
        assert can_perform_action(JobRole.EMPLOYER, DbJobStatus.DORMANT, JobAction.ACTIVATE) is True
        assert can_perform_action(JobRole.EMPLOYER, DbJobStatus.FULFILLED, JobAction.EDIT) is False
        assert can_perform_action(JobRole.ADMIN, DbJobStatus.ACTIVE, JobAction.HOLD) is False
        assert can_perform_action(JobRole.ADMIN, DbJobStatus.ACTIVE, JobAction.FULFILL, True) is False


class TestAdminActivateFulfilled:
    """Admin may activate a FULFILLED job, the transition table forbids the move"""

    def test_permission_and_transition_disagree(self):
        assert can_perform_action(JobRole.ADMIN, DbJobStatus.FULFILLED, JobAction.ACTIVATE) is True
        assert is_valid_transition(DbJobStatus.FULFILLED, DbJobStatus.ACTIVE) is False


class TestAllowedActions:
    """Action menus derived from the permission tables"""

    def test_candidate_active(self):
        assert allowed_actions(JobRole.CANDIDATE, DbJobStatus.ACTIVE) == {JobAction.VIEW, JobAction.APPLY}

    def test_employer_dormant(self):
        assert allowed_actions(JobRole.EMPLOYER, DbJobStatus.DORMANT) == {JobAction.CLONE, JobAction.ACTIVATE}

    def test_admin_pending(self):
        assert allowed_actions("admin", "PENDING") == {
            JobAction.DELETE, JobAction.CLONE, JobAction.EDIT, JobAction.ACTIVATE, JobAction.HOLD,
        }

    @pytest.mark.parametrize("role", ALL_ROLES)
    def test_deleted_job_has_no_actions(self, role):
        assert allowed_actions(role, DbJobStatus.ACTIVE, True) == frozenset()

    def test_unknown_role_has_no_actions(self):
        assert allowed_actions("guest", DbJobStatus.ACTIVE) == frozenset()

    @pytest.mark.parametrize("role", ALL_ROLES)
    @pytest.mark.parametrize("status", ALL_STATUSES)
    def test_agrees_with_can_perform_action(self, role, status):
        actions = allowed_actions(role, status)
        for action in ALL_ACTIONS:
            assert (action in actions) is can_perform_action(role, status, action)
