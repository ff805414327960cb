"""
Session - the single current actor.

The actor lives in the `user` slot of the key-value store so it survives a
restart. This is a stand-in for real authentication: passwords are accepted
and ignored, and the demo accounts below are the only known identities.
"""

import logging
import time
import uuid
from typing import Callable, List, Optional

from pydantic import ValidationError

from careerhub.core.errors import NotFound, PermissionDenied, ValidationFailure
from careerhub.core.permissions import check_permission, has_role
from careerhub.db.kv_store import USER_KEY, KeyValueStore
from careerhub.schemas.schemas import (
    AdminActor, EmployerActor, ManagedItems, Role, StudentActor, UserStatus, parse_actor
)

logger = logging.getLogger(__name__)


def demo_accounts() -> dict:
    """Accounts recognised by login(), keyed by email."""
    return {
        "g6@gmail.com": AdminActor(
            id="admin-1", name="G6 Admin", email="g6@gmail.com", permissions=["all"],
        ),
        "employer@demo.com": EmployerActor(
            id="employer-1", name="Employer User", email="employer@demo.com",
            company_id="company-1", company="Demo Company",
        ),
        "student@demo.com": StudentActor(
            id="student-1", name="Student User", email="student@demo.com",
            major="Computer Science", graduation_year=2024,
        ),
    }


def _new_id() -> str:
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"


class Session:
    """
    Holds the current actor and mirrors it into the `user` slot.

    Listeners are called with the new actor (or None) after every change,
    so per-actor state such as the saved-item ledger can follow logins.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.actor = None
        self._listeners: List[Callable] = []

    def subscribe(self, listener: Callable) -> None:
        self._listeners.append(listener)

    def restore(self):
        """Load the actor persisted by a previous run, if any."""
        data = self.store.get(USER_KEY)
        if data:
            try:
                self.actor = parse_actor(data)
            except ValidationError as e:
                logger.error("Ignoring unreadable stored user: %s", e)
                self.actor = None
        self._notify()
        return self.actor

    # ---------- identity ----------

    @property
    def is_authenticated(self) -> bool:
        return self.actor is not None

    def has_role(self, role) -> bool:
        return has_role(self.actor, role)

    def check_permission(self, action, resource_type, resource_id: Optional[str] = None) -> bool:
        return check_permission(self.actor, action, resource_type, resource_id)

    def require(self, action, resource_type, resource_id: Optional[str] = None, message: str = None) -> None:
        """Raise PermissionDenied unless the current actor may do this."""
        if not self.check_permission(action, resource_type, resource_id):
            action_name = getattr(action, "value", action)
            type_name = getattr(resource_type, "value", resource_type)
            logger.warning(
                "Denied %s on %s %s for %s", action_name, type_name, resource_id or "",
                self.actor.id if self.actor else "anonymous",
            )
            raise PermissionDenied(message or f"You do not have permission to {action_name} this {type_name}")

    # ---------- lifecycle ----------

    def login(self, email: str):
        """Resolve a demo account, or sign in as a fresh student."""
        actor = demo_accounts().get(email)
        if actor is None:
            actor = StudentActor(id=_new_id(), name="New Student", email=email)

        if actor.status != UserStatus.active:
            raise PermissionDenied("Account is not active")

        self._set(actor)
        logger.info("Logged in %s as %s", actor.email, actor.role)
        return actor

    def register(self, name: str, email: str, role: Role, company: Optional[str] = None):
        role = Role(role)
        if role == Role.employer:
            actor = EmployerActor(
                id=_new_id(), name=name, email=email,
                company_id=f"company-{_new_id()}" if company else None,
                company=company,
                managed_items=ManagedItems(),
            )
        elif role == Role.student:
            actor = StudentActor(id=_new_id(), name=name, email=email)
        else:
            raise ValidationFailure({"role": "Invalid role"}, message="Invalid role")

        self._set(actor)
        logger.info("Registered %s as %s", email, role.value)
        return actor

    def update_user(self, patch: dict):
        """Merge profile fields into the current actor. Role and id never change."""
        if self.actor is None:
            raise NotFound("No user logged in")

        patch = {k: v for k, v in patch.items() if k not in ("id", "role", "kind")}
        data = self.actor.model_dump()
        data.update(patch)
        try:
            actor = parse_actor(data)
        except ValidationError as e:
            errors = {".".join(str(p) for p in err["loc"][1:]) or "user": err["msg"] for err in e.errors()}
            raise ValidationFailure(errors) from e

        self._set(actor)
        return actor

    def replace_actor(self, actor) -> None:
        """Store a server-side change to the current actor (e.g. managed items)."""
        self._set(actor)

    def logout(self) -> None:
        if self.actor is not None:
            logger.info("Logged out %s", self.actor.email)
        self.actor = None
        self.store.delete(USER_KEY)
        self._notify()

    def _set(self, actor) -> None:
        self.store.set(USER_KEY, actor.model_dump(mode="json"))
        self.actor = actor
        self._notify()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self.actor)
