"""Tests for the role policy in check_permission / has_role."""

import itertools

import pytest

from careerhub.core.permissions import check_permission, has_role
from careerhub.schemas.schemas import (
    AdminActor, EmployerActor, ManagedItems, ResourceKind, Role, StudentActor
)

ACTIONS = ["read", "save", "create", "edit", "delete", "approve", "", None]
RESOURCE_TYPES = ["user", "company", "job", "event", "course", "jobs", "companies", "resume", "", None, 42]


def make_employer(company_id="c1", job_ids=("j1",), event_ids=()):
    return EmployerActor(
        id="e1", name="Employer", email="e@example.com", company_id=company_id,
        managed_items=ManagedItems(job_ids=list(job_ids), event_ids=list(event_ids)),
    )


ADMIN = AdminActor(id="a1", name="Admin", email="a@example.com")
STUDENT = StudentActor(id="s1", name="Student", email="s@example.com")

# ---------------------------------------------------------------------------
# TestEmployerScenario
# ---------------------------------------------------------------------------


class TestEmployerScenario:
    """Employer with company c1 managing job j1."""

    def test_edit_managed_job(self) -> None:
        assert check_permission(make_employer(), "edit", "job", "j1") is True

    def test_edit_unmanaged_job(self) -> None:
        assert check_permission(make_employer(), "edit", "job", "j2") is False

    def test_edit_own_company(self) -> None:
        assert check_permission(make_employer(), "edit", "company", "c1") is True

    def test_edit_other_company(self) -> None:
        assert check_permission(make_employer(), "edit", "company", "c2") is False

    def test_edit_without_id_is_denied(self) -> None:
        assert check_permission(make_employer(), "edit", "job") is False

    def test_managed_event(self) -> None:
        employer = make_employer(event_ids=["ev1"])
        assert check_permission(employer, "delete", "event", "ev1") is True
        assert check_permission(employer, "delete", "event", "ev2") is False

    @pytest.mark.parametrize("kind", ["company", "event", "job"])
    def test_can_create_postings(self, kind: str) -> None:
        assert check_permission(make_employer(), "create", kind) is True

    @pytest.mark.parametrize("kind", ["course", "user"])
    def test_cannot_create_courses_or_users(self, kind: str) -> None:
        assert check_permission(make_employer(), "create", kind) is False

    def test_cannot_touch_users(self) -> None:
        assert check_permission(make_employer(), "delete", "user", "e1") is False

    def test_read_and_save_anything(self) -> None:
        for kind in ResourceKind:
            assert check_permission(make_employer(), "read", kind)
            assert check_permission(make_employer(), "save", kind)

    def test_company_less_employer_owns_nothing(self) -> None:
        employer = make_employer(company_id=None)
        assert check_permission(employer, "edit", "company", "c1") is False


# ---------------------------------------------------------------------------
# TestDeleteCompanyRule
# ---------------------------------------------------------------------------


class TestDeleteCompanyRule:
    """delete/company/X holds iff admin, or employer whose company_id is X."""

    @pytest.mark.parametrize("company_id", ["c1", "c2", None])
    def test_rule_across_roles(self, company_id) -> None:
        employer = make_employer(company_id=company_id)
        for target in ["c1", "c2"]:
            assert check_permission(ADMIN, "delete", "company", target) is True
            assert check_permission(STUDENT, "delete", "company", target) is False
            assert check_permission(employer, "delete", "company", target) is (company_id == target)


# ---------------------------------------------------------------------------
# TestStudentAndAdmin
# ---------------------------------------------------------------------------


class TestStudentAndAdmin:

    def test_student_reads_and_saves_only(self) -> None:
        assert check_permission(STUDENT, "read", "job")
        assert check_permission(STUDENT, "save", "event", "event-1")
        for action in ["create", "edit", "delete"]:
            assert check_permission(STUDENT, action, "job", "job-1") is False

    def test_admin_allows_everything(self) -> None:
        for action, kind in itertools.product(["read", "create", "edit", "delete"], ResourceKind):
            assert check_permission(ADMIN, action, kind, "x") is True

    def test_no_actor_allows_nothing(self) -> None:
        assert check_permission(None, "read", "job") is False

    def test_plural_and_enum_types_are_equivalent(self) -> None:
        employer = make_employer()
        assert check_permission(employer, "edit", "jobs", "j1") is True
        assert check_permission(employer, "edit", ResourceKind.job, "j1") is True


# ---------------------------------------------------------------------------
# TestNeverRaises
# ---------------------------------------------------------------------------


class TestNeverRaises:
    """Every combination returns a bool, unknown ones False."""

    @pytest.mark.parametrize("actor", [None, ADMIN, STUDENT, make_employer(), object(), "admin"])
    def test_all_combinations(self, actor) -> None:
        for action, kind in itertools.product(ACTIONS, RESOURCE_TYPES):
            result = check_permission(actor, action, kind, "id-1")
            assert isinstance(result, bool)

    def test_unknown_action_is_false(self) -> None:
        assert check_permission(make_employer(), "approve", "job", "j1") is False
        assert check_permission(STUDENT, "approve", "job", "j1") is False

    def test_broken_employer_is_false(self) -> None:
        employer = make_employer()
        object.__setattr__(employer, "managed_items", None)
        assert check_permission(employer, "edit", "job", "j1") is False


class TestHasRole:

    def test_matches_enum_or_string(self) -> None:
        assert has_role(ADMIN, Role.admin)
        assert has_role(STUDENT, "student")
        assert not has_role(STUDENT, Role.employer)

    def test_no_actor(self) -> None:
        assert has_role(None, Role.admin) is False
