"""
Shared resource endpoints.

GET    /{kind}         - List with search + filters (saved flag where it applies)
GET    /{kind}/{id}    - Get one record
POST   /{kind}         - Create (permission + validation gated)
PUT    /{kind}/{id}    - Update
DELETE /{kind}/{id}    - Delete (the client confirms first)
"""

from typing import Optional, Type

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from careerhub.core.auth import get_current_user, get_portal
from careerhub.core.state import PortalState
from careerhub.schemas.schemas import (
    DateFilter, FieldFilters, ItemResponse, ListResponse, MessageResponse,
    ResourceKind, SavedKind
)
from careerhub.services.query_engine import annotate_saved, filter_items

SAVED_KINDS = {
    ResourceKind.job: SavedKind.jobs,
    ResourceKind.event: SavedKind.events,
    ResourceKind.company: SavedKind.companies,
}


def get_filters(
    status: str = Query("all", description="User status (users only)"),
    date: DateFilter = Query(DateFilter.all, description="week | month | all"),
    type: Optional[str] = Query(None, description="Job or event type"),
    virtual_only: bool = Query(False),
    company: Optional[str] = Query(None, description="Exact company name (jobs)"),
    industry: Optional[str] = Query(None, description="Industry (companies)"),
) -> FieldFilters:
    return FieldFilters(
        status=status, date=date, type=type, virtual_only=virtual_only,
        company=company, industry=industry,
    )


def label(kind: ResourceKind) -> str:
    return kind.value.capitalize()


def add_resource_routes(router: APIRouter, kind: ResourceKind,
                        create_model: Type[BaseModel], update_model: Type[BaseModel]) -> APIRouter:
    """Attach the CRUD endpoints for one kind to router."""

    @router.get("", response_model=ListResponse)
    async def list_items(
        q: str = Query("", description="Free-text search"),
        filters: FieldFilters = Depends(get_filters),
        user=Depends(get_current_user),
        portal: PortalState = Depends(get_portal),
    ):
        items = filter_items(portal.resources.list(kind), q, filters)
        rows = annotate_saved(items, portal.ledger, SAVED_KINDS.get(kind))
        return ListResponse(items=rows, total=len(rows))

    @router.get("/{item_id}", response_model=ItemResponse)
    async def get_item(item_id: str, user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
        item = portal.resources.get(kind, item_id)
        return ItemResponse(item=annotate_saved([item], portal.ledger, SAVED_KINDS.get(kind))[0])

    @router.post("", response_model=ItemResponse, status_code=201)
    async def create_item(draft: create_model, user=Depends(get_current_user),
                          portal: PortalState = Depends(get_portal)):
        item = await portal.resources.create(kind, draft.model_dump())
        return ItemResponse(
            item=item.model_dump(mode="json"),
            notification=portal.notifier.success(f"{label(kind)} created successfully"),
        )

    @router.put("/{item_id}", response_model=ItemResponse)
    async def update_item(item_id: str, patch: update_model, user=Depends(get_current_user),
                          portal: PortalState = Depends(get_portal)):
        item = await portal.resources.update(kind, item_id, patch.model_dump(exclude_unset=True))
        return ItemResponse(
            item=item.model_dump(mode="json"),
            notification=portal.notifier.success(f"{label(kind)} updated successfully"),
        )

    @router.delete("/{item_id}", response_model=MessageResponse)
    async def delete_item(item_id: str, user=Depends(get_current_user),
                          portal: PortalState = Depends(get_portal)):
        await portal.resources.delete(kind, item_id)
        message = f"{label(kind)} deleted successfully"
        return MessageResponse(message=message, notification=portal.notifier.success(message))

    return router
