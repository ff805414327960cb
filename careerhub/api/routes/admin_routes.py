"""
Admin Routes

GET /admin/dashboard - Dashboard statistics
GET /admin/loading - Per-kind loading flags
GET /admin/{kind}/selection - Currently selected ids
POST /admin/{kind}/selection/{item_id} - Toggle one row
POST /admin/{kind}/selection/all - Select every visible row (or clear)
DELETE /admin/{kind}/selection - Clear the selection
POST /admin/bulk - Delete / activate / deactivate the selection
GET /admin/{kind}/export - CSV of the currently filtered list
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from careerhub.core.auth import get_current_admin, get_portal
from careerhub.core.errors import NotFound
from careerhub.core.state import PortalState
from careerhub.schemas.schemas import (
    BulkRequest, BulkResult, DashboardStats, FieldFilters, ResourceKind
)
from careerhub.api.routes.resource_routes import get_filters
from careerhub.services.dashboard_service import dashboard_stats
from careerhub.services.query_engine import filter_items
from careerhub.utils.csv_export import export_filename, to_csv

router = APIRouter(prefix="/admin", tags=["Admin"])


def resolve_kind(kind: str) -> ResourceKind:
    """Accept singular or plural kind names in the path."""
    resource_kind = ResourceKind.parse(kind)
    if resource_kind is None:
        raise NotFound(f"Unknown resource kind: {kind}")
    return resource_kind


def selection_payload(portal: PortalState, kind: ResourceKind) -> dict:
    selected = sorted(portal.bulk.selection(kind).ids)
    return {"kind": kind.value, "selected_ids": selected, "count": len(selected)}


@router.get("/dashboard", response_model=DashboardStats)
async def get_dashboard(admin=Depends(get_current_admin), portal: PortalState = Depends(get_portal)):
    return dashboard_stats(portal.stores)


@router.get("/loading")
async def get_loading_flags(admin=Depends(get_current_admin), portal: PortalState = Depends(get_portal)):
    """Which resource kinds have a mutation in flight."""
    return portal.transport.loading_flags()


@router.get("/{kind}/selection")
async def get_selection(kind: str, admin=Depends(get_current_admin),
                        portal: PortalState = Depends(get_portal)):
    return selection_payload(portal, resolve_kind(kind))


@router.post("/{kind}/selection/all")
async def select_all(
    kind: str,
    q: str = Query(""),
    filters: FieldFilters = Depends(get_filters),
    admin=Depends(get_current_admin),
    portal: PortalState = Depends(get_portal),
):
    """Select all rows of the filtered view; a second call clears them."""
    resource_kind = resolve_kind(kind)
    visible = filter_items(portal.resources.list(resource_kind), q, filters)
    portal.bulk.selection(resource_kind).select_all(item.id for item in visible)
    return selection_payload(portal, resource_kind)


@router.post("/{kind}/selection/{item_id}")
async def toggle_selection(kind: str, item_id: str, admin=Depends(get_current_admin),
                           portal: PortalState = Depends(get_portal)):
    resource_kind = resolve_kind(kind)
    portal.bulk.selection(resource_kind).toggle(item_id)
    return selection_payload(portal, resource_kind)


@router.delete("/{kind}/selection")
async def clear_selection(kind: str, admin=Depends(get_current_admin),
                          portal: PortalState = Depends(get_portal)):
    resource_kind = resolve_kind(kind)
    portal.bulk.selection(resource_kind).clear()
    return selection_payload(portal, resource_kind)


@router.post("/bulk", response_model=BulkResult)
async def bulk_action(request: BulkRequest, admin=Depends(get_current_admin),
                      portal: PortalState = Depends(get_portal)):
    """
    Apply one operation to the selection.

    Failures come back as an error notification with succeeded=0;
    the selection is cleared either way.
    """
    return await portal.bulk.apply_bulk(request.operation, request.kind, request.selected_ids)


@router.get("/{kind}/export")
async def export_csv(
    kind: str,
    q: str = Query(""),
    filters: FieldFilters = Depends(get_filters),
    admin=Depends(get_current_admin),
    portal: PortalState = Depends(get_portal),
):
    resource_kind = resolve_kind(kind)
    items = filter_items(portal.resources.list(resource_kind), q, filters)
    filename = export_filename(resource_kind)
    return Response(
        content=to_csv(resource_kind, items),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
