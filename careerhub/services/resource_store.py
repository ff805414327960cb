"""
Resource Store - in-memory collections for users, companies, jobs, events, courses.

Stores are unconditional: permission checks, validation and the simulated
round trip live in resource_service.py. Unknown ids are signalled by return
value (None / False), never by raising.
"""

import itertools
import logging
import secrets
from datetime import datetime
from typing import Callable, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel

from careerhub.schemas.schemas import (
    Company, Course, Event, Job, ResourceKind, parse_actor
)

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=BaseModel)

# Fields that only the store may set
PROTECTED_FIELDS = {"id", "kind", "role", "posted_date"}


class ResourceStore(Generic[K]):
    """
    Ordered collection of one resource kind.

    Usage:
        store = ResourceStore(ResourceKind.job, Job)
        job = store.create({"title": "Engineer", ...})
        store.update(job.id, {"location": "Remote"})
    """

    def __init__(self, kind: ResourceKind, model: Type[K], factory: Callable[[dict], K] = None):
        self.kind = kind
        self.model = model
        self._factory = factory or model.model_validate
        self._items: Dict[str, K] = {}
        self._counter = itertools.count(1)
        self._subscribers: List[Callable[[str, K], None]] = []

    def subscribe(self, callback: Callable[[str, K], None]) -> None:
        """callback(event, item) with event in created/updated/deleted."""
        self._subscribers.append(callback)

    def _publish(self, event: str, item: K) -> None:
        for callback in self._subscribers:
            callback(event, item)

    def new_id(self) -> str:
        # Counter keeps ids unique in-session; the suffix keeps them unique across restarts
        return f"{self.kind.value}-{next(self._counter)}-{secrets.token_hex(3)}"

    def list(self) -> List[K]:
        return list(self._items.values())

    def get(self, item_id: str) -> Optional[K]:
        return self._items.get(item_id)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def load(self, items: Iterable[K]) -> None:
        """Insert ready-made records (seed data) keeping their ids."""
        for item in items:
            self._items[item.id] = item

    def create(self, draft: dict) -> K:
        data = {k: v for k, v in draft.items() if k not in PROTECTED_FIELDS}
        data["id"] = self.new_id()
        if self.kind is ResourceKind.job:
            data["posted_date"] = datetime.utcnow()
        if self.kind is ResourceKind.user:
            role = draft.get("role") or "student"
            data["role"] = getattr(role, "value", role)

        item = self._factory(data)
        self._items[item.id] = item
        logger.info("Created %s %s", self.kind.value, item.id)
        self._publish("created", item)
        return item

    def update(self, item_id: str, patch: dict) -> Optional[K]:
        current = self._items.get(item_id)
        if current is None:
            return None

        data = current.model_dump()
        data.update({k: v for k, v in patch.items() if k not in PROTECTED_FIELDS})
        item = self._factory(data)
        self._items[item_id] = item
        logger.info("Updated %s %s", self.kind.value, item_id)
        self._publish("updated", item)
        return item

    def delete(self, item_id: str) -> bool:
        item = self._items.pop(item_id, None)
        if item is None:
            return False
        logger.info("Deleted %s %s", self.kind.value, item_id)
        self._publish("deleted", item)
        return True


def create_stores() -> Dict[ResourceKind, ResourceStore]:
    """One empty store per resource kind."""
    return {
        ResourceKind.user: ResourceStore(ResourceKind.user, BaseModel, factory=parse_actor),
        ResourceKind.company: ResourceStore(ResourceKind.company, Company),
        ResourceKind.job: ResourceStore(ResourceKind.job, Job),
        ResourceKind.event: ResourceStore(ResourceKind.event, Event),
        ResourceKind.course: ResourceStore(ResourceKind.course, Course),
    }
