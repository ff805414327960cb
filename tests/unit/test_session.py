"""Tests for the session lifecycle, portal state and small services."""

from datetime import datetime

import pytest

from careerhub.core import session as session_module
from careerhub.core.config import Settings
from careerhub.core.errors import NotFound, PermissionDenied, ValidationFailure
from careerhub.core.session import Session
from careerhub.core.state import PortalState
from careerhub.db.kv_store import USER_KEY, MemoryKeyValueStore
from careerhub.db.seed import load_demo_data
from careerhub.schemas.schemas import (
    NotificationKind, ResourceKind, SavedKind, StudentActor, UserStatus
)
from careerhub.services.dashboard_service import dashboard_stats
from careerhub.services.notifications import Notifier
from careerhub.services.resource_store import create_stores

# ---------------------------------------------------------------------------
# TestSession
# ---------------------------------------------------------------------------


class TestSession:

    def test_demo_login(self) -> None:
        store = MemoryKeyValueStore()
        actor = Session(store).login("g6@gmail.com")
        assert actor.role == "admin"
        assert store.get(USER_KEY)["role"] == "admin"

    def test_employer_demo_account(self) -> None:
        actor = Session(MemoryKeyValueStore()).login("employer@demo.com")
        assert actor.company_id == "company-1"
        assert actor.managed_items.job_ids == []

    def test_unknown_email_becomes_student(self) -> None:
        actor = Session(MemoryKeyValueStore()).login("someone@uni.edu")
        assert actor.role == "student"
        assert actor.email == "someone@uni.edu"

    def test_inactive_account_is_refused(self, monkeypatch) -> None:
        inactive = StudentActor(id="s9", name="Gone", email="gone@uni.edu", status=UserStatus.inactive)
        monkeypatch.setattr(session_module, "demo_accounts", lambda: {"gone@uni.edu": inactive})
        session = Session(MemoryKeyValueStore())
        with pytest.raises(PermissionDenied):
            session.login("gone@uni.edu")
        assert session.actor is None

    def test_restore_after_restart(self) -> None:
        store = MemoryKeyValueStore()
        Session(store).login("student@demo.com")

        restored = Session(store).restore()
        assert isinstance(restored, StudentActor)
        assert restored.id == "student-1"

    def test_restore_ignores_garbage(self) -> None:
        store = MemoryKeyValueStore()
        store.set(USER_KEY, {"role": "wizard"})
        assert Session(store).restore() is None

    def test_logout_clears_slot(self) -> None:
        store = MemoryKeyValueStore()
        session = Session(store)
        session.login("student@demo.com")
        session.logout()
        assert session.actor is None
        assert store.get(USER_KEY) is None
        assert not session.is_authenticated

    def test_register_employer_with_company(self) -> None:
        actor = Session(MemoryKeyValueStore()).register("Pat", "pat@corp.com", "employer", "Corp")
        assert actor.company == "Corp"
        assert actor.company_id.startswith("company-")

    def test_register_admin_is_refused(self) -> None:
        with pytest.raises(ValidationFailure):
            Session(MemoryKeyValueStore()).register("Eve", "eve@x.com", "admin")

    def test_update_user_keeps_role_and_id(self) -> None:
        session = Session(MemoryKeyValueStore())
        session.login("student@demo.com")
        actor = session.update_user({"bio": "Hi", "role": "admin", "id": "other"})
        assert actor.bio == "Hi"
        assert actor.role == "student"
        assert actor.id == "student-1"

    def test_update_without_login(self) -> None:
        with pytest.raises(NotFound):
            Session(MemoryKeyValueStore()).update_user({"bio": "Hi"})

    def test_has_role(self) -> None:
        session = Session(MemoryKeyValueStore())
        assert session.has_role("student") is False
        session.login("student@demo.com")
        assert session.has_role("student") is True
        assert session.has_role("admin") is False

    def test_require_raises_on_denial(self) -> None:
        session = Session(MemoryKeyValueStore())
        session.login("student@demo.com")
        session.require("read", "job")
        with pytest.raises(PermissionDenied):
            session.require("delete", "job", "job-1")

    def test_listeners_follow_changes(self) -> None:
        session = Session(MemoryKeyValueStore())
        seen = []
        session.subscribe(lambda actor: seen.append(actor.id if actor else None))
        session.login("student@demo.com")
        session.logout()
        assert seen == ["student-1", None]


# ---------------------------------------------------------------------------
# TestPortalState
# ---------------------------------------------------------------------------


class TestPortalState:

    def test_bootstrap_seeds_and_restores(self, settings: Settings) -> None:
        first = PortalState.bootstrap(settings)
        first.session.login("student@demo.com")

        second = PortalState.bootstrap(settings)
        assert second.session.actor.id == "student-1"
        assert len(second.stores[ResourceKind.job]) == 3

    def test_saved_items_follow_login(self, portal: PortalState) -> None:
        portal.session.login("student@demo.com")
        portal.ledger.toggle(SavedKind.jobs, "job-1")
        portal.sync_saved_items()
        assert portal.session.actor.saved_items.jobs == ["job-1"]

        portal.session.login("someone@uni.edu")
        assert portal.ledger.list(SavedKind.jobs) == set()

        portal.session.login("student@demo.com")
        assert portal.ledger.list(SavedKind.jobs) == {"job-1"}

    def test_no_seed(self) -> None:
        settings = Settings(_env_file=None, storage_backend="memory", seed_demo_data=False)
        state = PortalState.bootstrap(settings)
        assert len(state.stores[ResourceKind.job]) == 0


# ---------------------------------------------------------------------------
# TestNotifier / TestDashboard
# ---------------------------------------------------------------------------


class TestNotifier:

    def test_auto_dismiss(self) -> None:
        now = [100.0]
        notifier = Notifier(duration_seconds=3, clock=lambda: now[0])
        notifier.success("Saved")
        assert notifier.current().message == "Saved"
        now[0] += 2.9
        assert notifier.current().kind == NotificationKind.success
        now[0] += 0.2
        assert notifier.current() is None

    def test_latest_wins(self) -> None:
        notifier = Notifier()
        notifier.success("first")
        notifier.error("second")
        assert notifier.current().message == "second"
        assert notifier.current().duration_seconds == 3


class TestDashboard:

    def test_counts(self) -> None:
        now = datetime(2026, 6, 1, 12, 0, 0)
        stores = create_stores()
        load_demo_data(stores, now=now)

        stats = dashboard_stats(stores, now=now)
        assert stats.total_users == 5
        assert stats.active_users == 5
        assert stats.total_jobs == 3
        # posted 2 and 12 days ago; the third is 45 days old
        assert stats.recent_jobs == 2
        assert stats.total_events == 3
        assert stats.upcoming_events == 2
        assert stats.total_companies == 3
        assert stats.total_courses == 3
        assert stats.user_growth == 12.5
        assert stats.job_growth == 8.3
