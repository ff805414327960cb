"""
Saved Item Routes

GET /saved - All saved ids, per kind
GET /saved/{kind} - Saved records of one kind (jobs, events, companies)
POST /saved/{kind}/{item_id}/toggle - Save or unsave; returns the new state
"""

from fastapi import APIRouter, Depends

from careerhub.core.auth import get_current_user, get_portal
from careerhub.core.state import PortalState
from careerhub.schemas.schemas import (
    Action, ListResponse, ResourceKind, SavedKind, SavedToggleResponse
)

router = APIRouter(prefix="/saved", tags=["Saved Items"])

RESOURCE_KINDS = {
    SavedKind.jobs: ResourceKind.job,
    SavedKind.events: ResourceKind.event,
    SavedKind.companies: ResourceKind.company,
}


@router.get("")
async def list_saved(user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    return portal.ledger.snapshot()


@router.get("/{kind}", response_model=ListResponse)
async def list_saved_items(kind: SavedKind, user=Depends(get_current_user),
                           portal: PortalState = Depends(get_portal)):
    """Saved records still present in the store, in the order they were saved."""
    store = portal.resources.store(RESOURCE_KINDS[kind])
    items = [store.get(item_id) for item_id in portal.ledger.ordered(kind)]
    rows = [dict(item.model_dump(mode="json"), saved=True) for item in items if item is not None]
    return ListResponse(items=rows, total=len(rows))


@router.post("/{kind}/{item_id}/toggle", response_model=SavedToggleResponse)
async def toggle_saved(kind: SavedKind, item_id: str, user=Depends(get_current_user),
                       portal: PortalState = Depends(get_portal)):
    resource_kind = RESOURCE_KINDS[kind]
    portal.session.require(Action.save, resource_kind, item_id)

    saved = portal.ledger.toggle(kind, item_id)
    portal.sync_saved_items()

    noun = resource_kind.value.capitalize()
    message = f"{noun} saved successfully" if saved else f"{noun} removed from saved items"
    return SavedToggleResponse(kind=kind, id=item_id, saved=saved,
                               notification=portal.notifier.success(message))
