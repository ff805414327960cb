"""
User Routes (admin console)

GET /users - List users (q, status)
GET /users/{user_id} - Get user
POST /users - Create user (admin)
PUT /users/{user_id} - Update user (admin)
PUT /users/{user_id}/status - Change status (admin)
DELETE /users/{user_id} - Delete user (admin)
"""

from fastapi import APIRouter, Depends

from careerhub.core.auth import get_current_user, get_portal
from careerhub.core.state import PortalState
from careerhub.schemas.schemas import ItemResponse, ResourceKind, StatusUpdate, UserCreate, UserUpdate
from careerhub.api.routes.resource_routes import add_resource_routes

router = APIRouter(prefix="/users", tags=["Users"])


@router.put("/{user_id}/status", response_model=ItemResponse)
async def change_status(user_id: str, update: StatusUpdate, user=Depends(get_current_user),
                        portal: PortalState = Depends(get_portal)):
    """Activate, deactivate or mark a user pending."""
    item = await portal.resources.set_user_status(user_id, update.status)
    return ItemResponse(
        item=item.model_dump(mode="json"),
        notification=portal.notifier.success("User status updated successfully"),
    )


add_resource_routes(router, ResourceKind.user, UserCreate, UserUpdate)
