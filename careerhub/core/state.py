"""
Application state container.

Everything a request may touch hangs off one PortalState: the session, the
resource stores and the services built on them. It is created at start-up
(restoring the persisted user) and attached to app.state.portal.
"""

import logging
from typing import Optional

from careerhub.core.config import Settings, get_settings
from careerhub.core.session import Session
from careerhub.db.kv_store import KeyValueStore, create_kv_store
from careerhub.db.seed import load_demo_data
from careerhub.schemas.schemas import ResourceKind, Role, SavedItems
from careerhub.services.bulk_service import BulkOperationCoordinator
from careerhub.services.notifications import Notifier
from careerhub.services.resource_service import ResourceService
from careerhub.services.resource_store import create_stores
from careerhub.services.resume_service import ResumeService
from careerhub.services.saved_ledger import EventRegistrations, SavedItemLedger
from careerhub.services.transport import SimulatedTransport

logger = logging.getLogger(__name__)


class PortalState:

    def __init__(self, settings: Settings, kv_store: KeyValueStore):
        self.settings = settings
        self.kv_store = kv_store

        self.session = Session(kv_store)
        self.stores = create_stores()
        self.transport = SimulatedTransport(
            latency_seconds=settings.simulated_latency_seconds,
            failure_rate=settings.simulated_failure_rate,
        )
        self.notifier = Notifier(settings.notification_seconds)
        self.resources = ResourceService(self.session, self.stores, self.transport)
        self.bulk = BulkOperationCoordinator(self.resources, self.notifier)
        self.ledger = SavedItemLedger(kv_store, scope_by_actor=settings.scope_saved_items_by_actor)
        self.registrations = EventRegistrations(kv_store, scope_by_actor=settings.scope_saved_items_by_actor)
        self.resumes = ResumeService()

        self.session.subscribe(self._on_actor_changed)

    @classmethod
    def bootstrap(cls, settings: Optional[Settings] = None, kv_store: Optional[KeyValueStore] = None) -> "PortalState":
        settings = settings or get_settings()
        state = cls(settings, kv_store or create_kv_store(settings))
        if settings.seed_demo_data:
            load_demo_data(state.stores)
        actor = state.session.restore()
        logger.info("Portal state ready (restored user: %s)", actor.email if actor else "none")
        return state

    def teardown(self) -> None:
        """Logout: drop the actor and everything selected on its behalf."""
        self.session.logout()

    def sync_saved_items(self) -> None:
        """Refresh a student's denormalized saved_items from the ledger."""
        actor = self.session.actor
        if actor is None or actor.role != Role.student.value:
            return
        actor.saved_items = SavedItems(**self.ledger.snapshot())
        self.session.replace_actor(actor)

    def _on_actor_changed(self, actor) -> None:
        self.ledger.bind(actor.id if actor is not None else None)
        self.registrations.bind(actor.id if actor is not None else None)
        if actor is None:
            self.bulk.clear_all()
            return
        users = self.stores[ResourceKind.user]
        if actor.id in users:
            users.load([actor])
