"""
Permission Engine - answers "can this actor do this to that resource".

Pure predicates over the actor passed in. Nothing here raises: missing
actors, unknown actions and unknown resource types all come back False.
"""

from typing import Optional

from careerhub.schemas.schemas import Action, ResourceKind, Role

EMPLOYER_CREATABLE = {ResourceKind.company, ResourceKind.event, ResourceKind.job}


def has_role(actor, role) -> bool:
    """True when there is an actor and it has the given role."""
    if actor is None:
        return False
    return getattr(actor, "role", None) == getattr(role, "value", role)


def check_permission(actor, action, resource_type, resource_id: Optional[str] = None) -> bool:
    """
    Role policy:
    - no actor: nothing
    - admin: everything
    - employer: create company/event/job; edit/delete its own company and
      the jobs/events listed in managed_items; read and save anything
    - student: read and save only
    """
    try:
        if actor is None:
            return False

        action = getattr(action, "value", action)
        role = getattr(actor, "role", None)

        if role == Role.admin.value:
            return True

        if role == Role.employer.value:
            kind = _parse_kind(resource_type)

            if action == Action.create.value:
                return kind in EMPLOYER_CREATABLE

            if action in (Action.edit.value, Action.delete.value):
                if not resource_id:
                    return False
                if kind is ResourceKind.company:
                    return actor.company_id is not None and actor.company_id == resource_id
                if kind is ResourceKind.job:
                    return resource_id in actor.managed_items.job_ids
                if kind is ResourceKind.event:
                    return resource_id in actor.managed_items.event_ids
                return False

            return action in (Action.read.value, Action.save.value)

        if role == Role.student.value:
            return action in (Action.read.value, Action.save.value)

        return False
    except (AttributeError, TypeError):
        return False


def _parse_kind(resource_type) -> Optional[ResourceKind]:
    if isinstance(resource_type, ResourceKind):
        return resource_type
    if isinstance(resource_type, str):
        return ResourceKind.parse(resource_type)
    return None
