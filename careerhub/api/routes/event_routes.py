"""
Event Routes

GET /events - List events (q, date=week|month for upcoming, type, virtual_only)
GET /events/registered - Events the current student registered for
GET /events/{event_id} - Get event details
POST /events - Create event (employer or admin)
PUT /events/{event_id} - Update event (owning employer or admin)
DELETE /events/{event_id} - Delete event (owning employer or admin)
POST /events/{event_id}/register - Register for an event (students)
DELETE /events/{event_id}/register - Cancel a registration
"""

from fastapi import APIRouter, Depends

from careerhub.core.auth import get_current_student, get_portal
from careerhub.core.state import PortalState
from careerhub.schemas.schemas import (
    EventCreate, EventUpdate, ListResponse, MessageResponse, ResourceKind
)
from careerhub.api.routes.resource_routes import add_resource_routes

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("/registered", response_model=ListResponse)
async def list_registered(student=Depends(get_current_student), portal: PortalState = Depends(get_portal)):
    events = portal.registrations.list()
    return ListResponse(items=[e.model_dump(mode="json") for e in events], total=len(events))


@router.post("/{event_id}/register", response_model=MessageResponse)
async def register_for_event(event_id: str, student=Depends(get_current_student),
                             portal: PortalState = Depends(get_portal)):
    """Register once; repeating the call changes nothing."""
    event = portal.resources.get(ResourceKind.event, event_id)
    if not portal.registrations.register(event):
        return MessageResponse(message=f"Already registered for {event.title}")

    message = (
        f"You're registered for {event.title} on {event.date.isoformat()}. "
        "We'll send you a reminder before the event."
    )
    return MessageResponse(message=message, notification=portal.notifier.success(message))


@router.delete("/{event_id}/register", response_model=MessageResponse)
async def unregister_from_event(event_id: str, student=Depends(get_current_student),
                                portal: PortalState = Depends(get_portal)):
    removed = portal.registrations.unregister(event_id)
    message = "Registration cancelled" if removed else "You were not registered for this event"
    return MessageResponse(message=message, success=removed,
                           notification=portal.notifier.success(message) if removed else None)


add_resource_routes(router, ResourceKind.event, EventCreate, EventUpdate)
