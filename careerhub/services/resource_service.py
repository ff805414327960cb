"""
Resource Service - permission-gated CRUD over the resource stores.

Order of every mutation:
1. permission check (PermissionDenied, nothing touched)
2. draft validation (ValidationFailure, nothing created)
3. simulated round trip (ResourceBusy / SimulatedTransportFailure)
4. store call (NotFound when the id is gone)
"""

import logging
from typing import Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from careerhub.core.errors import NotFound, ValidationFailure
from careerhub.core.session import Session
from careerhub.schemas.schemas import Action, ResourceKind, Role, UserStatus
from careerhub.services.resource_store import ResourceStore
from careerhub.services.transport import SimulatedTransport
from careerhub.services.validation import validate_draft

logger = logging.getLogger(__name__)


class ResourceService:

    def __init__(self, session: Session, stores: Dict[ResourceKind, ResourceStore], transport: SimulatedTransport):
        self.session = session
        self.stores = stores
        self.transport = transport

    def store(self, kind: ResourceKind) -> ResourceStore:
        return self.stores[kind]

    # ---------- reads ----------

    def list(self, kind: ResourceKind) -> List:
        self.session.require(Action.read, kind)
        return self.stores[kind].list()

    def get(self, kind: ResourceKind, item_id: str):
        self.session.require(Action.read, kind, item_id)
        item = self.stores[kind].get(item_id)
        if item is None:
            raise NotFound(f"{kind.value.capitalize()} not found")
        return item

    def company_for(self, job) -> Optional[object]:
        """Resolve a job's company. None once the company has been deleted."""
        if not job.company_id:
            return None
        return self.stores[ResourceKind.company].get(job.company_id)

    # ---------- mutations ----------

    async def create(self, kind: ResourceKind, draft: dict):
        self.session.require(Action.create, kind)

        draft = self._complete_draft(kind, dict(draft))
        errors = validate_draft(kind, draft)
        if errors:
            logger.warning("Rejected %s draft: %s", kind.value, ", ".join(sorted(errors)))
            raise ValidationFailure(errors)

        store = self.stores[kind]
        try:
            item = await self.transport.round_trip(kind, lambda: store.create(draft))
        except PydanticValidationError as e:
            raise ValidationFailure(field_errors(e))
        self._record_ownership(kind, item)
        return item

    async def update(self, kind: ResourceKind, item_id: str, patch: dict):
        self.session.require(Action.edit, kind, item_id)

        store = self.stores[kind]
        current = store.get(item_id)
        if current is None:
            raise NotFound(f"{kind.value.capitalize()} not found")

        merged = current.model_dump()
        merged.update(patch)
        errors = validate_draft(kind, merged)
        if errors:
            logger.warning("Rejected %s %s update: %s", kind.value, item_id, ", ".join(sorted(errors)))
            raise ValidationFailure(errors)

        try:
            item = await self.transport.round_trip(kind, lambda: store.update(item_id, patch))
        except PydanticValidationError as e:
            raise ValidationFailure(field_errors(e))
        if item is None:
            raise NotFound(f"{kind.value.capitalize()} not found")
        self._sync_current_actor(kind, item)
        return item

    async def delete(self, kind: ResourceKind, item_id: str) -> None:
        """Unconditional once called; confirmation belongs to the caller."""
        self.session.require(Action.delete, kind, item_id)

        store = self.stores[kind]
        deleted = await self.transport.round_trip(kind, lambda: store.delete(item_id))
        if not deleted:
            raise NotFound(f"{kind.value.capitalize()} not found")

    async def set_user_status(self, user_id: str, status: UserStatus):
        # Only admins pass an edit check on users
        self.session.require(Action.edit, ResourceKind.user, user_id,
                             message="You do not have permission to change user status")
        return await self.update(ResourceKind.user, user_id, {"status": UserStatus(status)})

    # ---------- helpers ----------

    def _complete_draft(self, kind: ResourceKind, draft: dict) -> dict:
        actor = self.session.actor

        if kind is ResourceKind.job:
            companies = self.stores[ResourceKind.company]
            # An employer registered with only a company name has no company record
            if not draft.get("company_id") and actor.role == Role.employer.value and actor.company_id in companies:
                draft["company_id"] = actor.company_id
            company = companies.get(draft.get("company_id") or "")
            if company is not None:
                draft["company_name"] = company.name
            elif draft.get("company_id"):
                raise ValidationFailure({"company": "Company does not exist"})
            elif not draft.get("company_name") and actor.role == Role.employer.value:
                draft["company_name"] = actor.company
            draft["tags"] = [r for r in draft.get("requirements") or [] if r and r.strip()]

        elif kind is ResourceKind.event:
            draft.setdefault("organizer", actor.name)
            if not draft.get("host"):
                draft["host"] = actor.name

        return draft

    def _record_ownership(self, kind: ResourceKind, item) -> None:
        """Employers may edit what they create."""
        actor = self.session.actor
        if actor is None or actor.role != Role.employer.value:
            return

        if kind is ResourceKind.job:
            actor.managed_items.job_ids.append(item.id)
        elif kind is ResourceKind.event:
            actor.managed_items.event_ids.append(item.id)
        elif kind is ResourceKind.company and not actor.company_id:
            actor.company_id = item.id
            actor.company = item.name
        else:
            return
        self.session.replace_actor(actor)

    def _sync_current_actor(self, kind: ResourceKind, item) -> None:
        actor = self.session.actor
        if kind is ResourceKind.user and actor is not None and actor.id == item.id:
            self.session.replace_actor(item)


def field_errors(error: PydanticValidationError) -> Dict[str, str]:
    """Flatten pydantic errors into {field: message}."""
    errors = {}
    for item in error.errors():
        field = ".".join(str(part) for part in item.get("loc", ())) or "record"
        errors.setdefault(field, item.get("msg", "Invalid value"))
    return errors
