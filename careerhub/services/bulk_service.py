"""
Bulk Operation Coordinator - one operation over the admin's selected ids.

A bulk call either finishes the whole selection (one success notification)
or fails as a whole (one error notification); there is no per-item report.
The selection is cleared afterwards no matter what happened.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

from careerhub.core.errors import PortalError
from careerhub.schemas.schemas import (
    Action, BulkOperation, BulkResult, ResourceKind, UserStatus
)
from careerhub.services.notifications import Notifier
from careerhub.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


class SelectionSet:
    """Ids ticked in one admin table."""

    def __init__(self):
        self.ids: Set[str] = set()

    def toggle(self, item_id: str) -> bool:
        if item_id in self.ids:
            self.ids.discard(item_id)
            return False
        self.ids.add(item_id)
        return True

    def select_all(self, visible_ids: Iterable[str]) -> None:
        """Select every visible row, or clear when all of them are already selected."""
        visible = set(visible_ids)
        if visible and self.ids == visible:
            self.ids = set()
        else:
            self.ids = visible

    def replace(self, ids: Iterable[str]) -> None:
        self.ids = set(ids)

    def clear(self) -> None:
        self.ids = set()

    def __len__(self) -> int:
        return len(self.ids)


class BulkOperationCoordinator:

    def __init__(self, resources: ResourceService, notifier: Notifier):
        self.resources = resources
        self.notifier = notifier
        self.selections: Dict[ResourceKind, SelectionSet] = {kind: SelectionSet() for kind in ResourceKind}

    def selection(self, kind: ResourceKind) -> SelectionSet:
        return self.selections[kind]

    def clear_all(self) -> None:
        for selection in self.selections.values():
            selection.clear()

    async def apply_bulk(self, operation: BulkOperation, kind: ResourceKind,
                         selected_ids: Optional[Iterable[str]] = None) -> BulkResult:
        """
        Apply operation to the selection of kind.

        Activate/Deactivate only change users; for other kinds they are a
        no-op that still reports success. Failures are returned as an error
        notification, never raised.
        """
        selection = self.selections[kind]
        if selected_ids is not None:
            selection.replace(selected_ids)
        ids = set(selection.ids)
        store = self.resources.store(kind)

        try:
            if not ids:
                return BulkResult(succeeded=0, items=self._rows(store.list()),
                                  notification=self.notifier.error("No items selected"))

            action = Action.delete if operation == BulkOperation.delete else Action.edit
            self.resources.session.require(action, kind, message="You do not have permission to perform this bulk action")

            succeeded = await self.resources.transport.round_trip(
                kind, lambda: self._apply(operation, kind, ids)
            )
            logger.info("Bulk %s on %d %s", operation.value, succeeded, kind.plural)
            return BulkResult(
                succeeded=succeeded,
                items=self._rows(store.list()),
                notification=self.notifier.success(self._message(operation, kind, succeeded)),
            )
        except PortalError as e:
            logger.warning("Bulk %s on %s failed: %s", operation.value, kind.plural, e.message)
            return BulkResult(
                succeeded=0,
                items=self._rows(store.list()),
                notification=self.notifier.error(f"Bulk action failed: {e.message}"),
            )
        finally:
            selection.clear()

    def _apply(self, operation: BulkOperation, kind: ResourceKind, ids: Set[str]) -> int:
        store = self.resources.store(kind)
        targets = [item.id for item in store.list() if item.id in ids]

        if operation == BulkOperation.delete:
            for item_id in targets:
                store.delete(item_id)
            return len(targets)

        if kind is not ResourceKind.user:
            return 0

        status = UserStatus.active if operation == BulkOperation.activate else UserStatus.inactive
        for item_id in targets:
            store.update(item_id, {"status": status})
        return len(targets)

    @staticmethod
    def _message(operation: BulkOperation, kind: ResourceKind, count: int) -> str:
        if operation == BulkOperation.delete:
            return f"{count} items deleted successfully"
        if kind is not ResourceKind.user:
            return f"Nothing to change: only users can be {operation.value}d"
        if operation == BulkOperation.activate:
            return f"{count} users activated"
        return f"{count} users deactivated"

    @staticmethod
    def _rows(items: List) -> List[dict]:
        return [item.model_dump(mode="json") for item in items]
