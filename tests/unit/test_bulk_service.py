"""Tests for admin selections and bulk operations."""

from careerhub.core.state import PortalState
from careerhub.schemas.schemas import BulkOperation, NotificationKind, ResourceKind, UserStatus
from careerhub.services.bulk_service import SelectionSet

# ---------------------------------------------------------------------------
# TestSelectionSet
# ---------------------------------------------------------------------------


class TestSelectionSet:

    def test_toggle(self) -> None:
        selection = SelectionSet()
        assert selection.toggle("a") is True
        assert selection.toggle("a") is False
        assert len(selection) == 0

    def test_select_all_then_clear(self) -> None:
        selection = SelectionSet()
        selection.select_all(["a", "b"])
        assert selection.ids == {"a", "b"}
        selection.select_all(["a", "b"])
        assert selection.ids == set()

    def test_select_all_from_partial(self) -> None:
        selection = SelectionSet()
        selection.toggle("a")
        selection.select_all(["a", "b", "c"])
        assert selection.ids == {"a", "b", "c"}


# ---------------------------------------------------------------------------
# TestApplyBulk
# ---------------------------------------------------------------------------


class TestApplyBulk:

    async def test_delete_removes_exactly_selected(self, admin_portal: PortalState) -> None:
        store = admin_portal.stores[ResourceKind.job]
        before = {job.id for job in store.list()}
        selected = {"job-1", "job-3"}

        result = await admin_portal.bulk.apply_bulk(BulkOperation.delete, ResourceKind.job, selected)

        assert result.succeeded == 2
        assert {job.id for job in store.list()} == before - selected
        assert {row["id"] for row in result.items} == before - selected
        assert result.notification.kind == NotificationKind.success
        assert result.notification.message == "2 items deleted successfully"
        assert len(admin_portal.bulk.selection(ResourceKind.job)) == 0

    async def test_uses_current_selection(self, admin_portal: PortalState) -> None:
        selection = admin_portal.bulk.selection(ResourceKind.course)
        selection.toggle("course-1")

        result = await admin_portal.bulk.apply_bulk(BulkOperation.delete, ResourceKind.course)

        assert result.succeeded == 1
        assert "course-1" not in admin_portal.stores[ResourceKind.course]
        assert len(selection) == 0

    async def test_deactivate_users(self, admin_portal: PortalState) -> None:
        result = await admin_portal.bulk.apply_bulk(BulkOperation.deactivate, ResourceKind.user, ["1", "2"])

        users = admin_portal.stores[ResourceKind.user]
        assert result.succeeded == 2
        assert users.get("1").status == UserStatus.inactive
        assert users.get("2").status == UserStatus.inactive
        assert result.notification.message == "2 users deactivated"

    async def test_activate_on_other_kind_is_noop(self, admin_portal: PortalState) -> None:
        before = admin_portal.stores[ResourceKind.company].list()
        result = await admin_portal.bulk.apply_bulk(BulkOperation.activate, ResourceKind.company,
                                                     ["company-1", "company-2"])

        assert result.succeeded == 0
        assert result.notification.kind == NotificationKind.success
        assert result.notification.message == "Nothing to change: only users can be activated"
        assert admin_portal.stores[ResourceKind.company].list() == before

    async def test_empty_selection(self, admin_portal: PortalState) -> None:
        result = await admin_portal.bulk.apply_bulk(BulkOperation.delete, ResourceKind.job, [])
        assert result.succeeded == 0
        assert result.notification.kind == NotificationKind.error

    async def test_denied_clears_selection_and_keeps_data(self, student_portal: PortalState) -> None:
        store = student_portal.stores[ResourceKind.job]
        before = store.list()

        result = await student_portal.bulk.apply_bulk(BulkOperation.delete, ResourceKind.job, ["job-1"])

        assert result.succeeded == 0
        assert result.notification.kind == NotificationKind.error
        assert store.list() == before
        assert len(student_portal.bulk.selection(ResourceKind.job)) == 0

    async def test_transport_failure_clears_selection(self, admin_portal: PortalState) -> None:
        admin_portal.transport.failure_rate = 1.0
        result = await admin_portal.bulk.apply_bulk(BulkOperation.delete, ResourceKind.event, ["event-1"])

        assert result.succeeded == 0
        assert result.notification.kind == NotificationKind.error
        assert "event-1" in admin_portal.stores[ResourceKind.event]
        assert len(admin_portal.bulk.selection(ResourceKind.event)) == 0
        assert admin_portal.transport.is_loading(ResourceKind.event) is False

    async def test_unknown_ids_are_not_counted(self, admin_portal: PortalState) -> None:
        result = await admin_portal.bulk.apply_bulk(BulkOperation.delete, ResourceKind.job, ["job-1", "ghost"])
        assert result.succeeded == 1

    def test_logout_clears_selections(self, admin_portal: PortalState) -> None:
        admin_portal.bulk.selection(ResourceKind.user).toggle("1")
        admin_portal.teardown()
        assert len(admin_portal.bulk.selection(ResourceKind.user)) == 0
