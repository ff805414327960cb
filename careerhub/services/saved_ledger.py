"""
Saved-Item Ledger and event registrations.

Saved items: one id set per kind (jobs, events, companies). toggle() is the
only mutator and writes through to the key-value store on every call.

Slots are keyed per actor ("savedJobs:<actor id>") so a second login on the
same store does not inherit the first user's bookmarks. With
scope_by_actor=False the shared "savedJobs" slot is used instead.
"""

import logging
from typing import List, Optional, Set

from careerhub.db.kv_store import REGISTERED_EVENTS_KEY, SAVED_KEYS, KeyValueStore
from careerhub.schemas.schemas import Event, SavedKind

logger = logging.getLogger(__name__)


class SavedItemLedger:

    def __init__(self, store: KeyValueStore, scope_by_actor: bool = True):
        self.store = store
        self.scope_by_actor = scope_by_actor
        self.owner_id: Optional[str] = None

    def bind(self, owner_id: Optional[str]) -> None:
        """Follow the current actor. Called by the session on login/logout."""
        self.owner_id = owner_id

    def slot(self, kind: SavedKind) -> str:
        base = SAVED_KEYS[SavedKind(kind).value]
        if self.scope_by_actor and self.owner_id:
            return f"{base}:{self.owner_id}"
        return base

    def list(self, kind: SavedKind) -> Set[str]:
        raw = self.store.get(self.slot(kind), [])
        if not isinstance(raw, list):
            logger.error("Slot %s does not hold a list; treating as empty", self.slot(kind))
            return set()
        return {str(item_id) for item_id in raw}

    def ordered(self, kind: SavedKind) -> List[str]:
        """Saved ids in the order they were saved."""
        raw = self.store.get(self.slot(kind), [])
        return [str(item_id) for item_id in raw] if isinstance(raw, list) else []

    def is_saved(self, kind: SavedKind, item_id: str) -> bool:
        return item_id in self.list(kind)

    def toggle(self, kind: SavedKind, item_id: str) -> bool:
        """Flip membership, persist immediately, return the new state."""
        ids = self.ordered(kind)
        if item_id in ids:
            ids.remove(item_id)
            saved = False
        else:
            ids.append(item_id)
            saved = True
        self.store.set(self.slot(kind), ids)
        logger.info("%s %s in %s", "Saved" if saved else "Unsaved", item_id, self.slot(kind))
        return saved

    def snapshot(self) -> dict:
        """All three sets, as lists, for the student's denormalized view."""
        return {kind.value: self.ordered(kind) for kind in SavedKind}


class EventRegistrations:
    """
    Events the student registered for, stored as full Event objects in the
    registeredEvents slot. Scoped per actor like the saved-item slots.
    """

    def __init__(self, store: KeyValueStore, scope_by_actor: bool = True):
        self.store = store
        self.scope_by_actor = scope_by_actor
        self.owner_id: Optional[str] = None

    def bind(self, owner_id: Optional[str]) -> None:
        self.owner_id = owner_id

    @property
    def slot(self) -> str:
        if self.scope_by_actor and self.owner_id:
            return f"{REGISTERED_EVENTS_KEY}:{self.owner_id}"
        return REGISTERED_EVENTS_KEY

    def list(self) -> List[Event]:
        raw = self.store.get(self.slot, [])
        events = []
        for data in raw if isinstance(raw, list) else []:
            try:
                events.append(Event.model_validate(data))
            except ValueError as e:
                logger.error("Skipping unreadable registered event: %s", e)
        return events

    def is_registered(self, event_id: str) -> bool:
        return any(e.id == event_id for e in self.list())

    def register(self, event: Event) -> bool:
        """Add the event. Returns False (and writes nothing) if already registered."""
        events = self.list()
        if any(e.id == event.id for e in events):
            return False
        events.append(event)
        self._write(events)
        return True

    def unregister(self, event_id: str) -> bool:
        events = self.list()
        remaining = [e for e in events if e.id != event_id]
        self._write(remaining)
        return len(remaining) != len(events)

    def _write(self, events: List[Event]) -> None:
        self.store.set(self.slot, [e.model_dump(mode="json") for e in events])
