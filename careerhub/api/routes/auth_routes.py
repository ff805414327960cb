"""
Authentication Routes

POST /auth/login - Log in (demo accounts; password ignored)
POST /auth/register - Register a student or employer and log in
POST /auth/logout - Log out
GET /auth/me - Get current user info
PUT /auth/me - Update the current user's profile
GET /auth/permissions - Ask whether the current user may perform an action
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from careerhub.core.auth import get_current_user, get_portal
from careerhub.core.state import PortalState
from careerhub.schemas.schemas import (
    ItemResponse, LoginRequest, MessageResponse, RegisterRequest, UserUpdate
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=ItemResponse)
async def login(request: LoginRequest, portal: PortalState = Depends(get_portal)):
    """
    Log in as one of the demo accounts:
    g6@gmail.com (admin), employer@demo.com, student@demo.com.
    Any other email signs in as a new student.
    """
    actor = portal.session.login(request.email)
    return ItemResponse(
        item=actor.model_dump(mode="json"),
        notification=portal.notifier.success(f"Welcome back, {actor.name}"),
    )


@router.post("/register", response_model=ItemResponse, status_code=201)
async def register(request: RegisterRequest, portal: PortalState = Depends(get_portal)):
    """Register a new student or employer account. Admins cannot self-register."""
    actor = portal.session.register(request.name, request.email, request.role, request.company)
    return ItemResponse(
        item=actor.model_dump(mode="json"),
        notification=portal.notifier.success(f"Registered successfully as {actor.role}"),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(portal: PortalState = Depends(get_portal)):
    portal.teardown()
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=ItemResponse)
async def get_me(user=Depends(get_current_user)):
    """Get current user's info."""
    return ItemResponse(item=user.model_dump(mode="json"))


@router.put("/me", response_model=ItemResponse)
async def update_me(update: UserUpdate, user=Depends(get_current_user),
                    portal: PortalState = Depends(get_portal)):
    """Update profile fields. Status changes are reserved for admins."""
    patch = update.model_dump(exclude_unset=True)
    patch.pop("status", None)
    actor = portal.session.update_user(patch)
    return ItemResponse(
        item=actor.model_dump(mode="json"),
        notification=portal.notifier.success("Profile updated successfully"),
    )


@router.get("/permissions")
async def check_permission(
    action: str = Query(...),
    resource_type: str = Query(...),
    resource_id: Optional[str] = Query(None),
    portal: PortalState = Depends(get_portal),
):
    """Used by clients to render controls enabled or disabled."""
    return {
        "action": action,
        "resource_type": resource_type,
        "resource_id": resource_id,
        "allowed": portal.session.check_permission(action, resource_type, resource_id),
    }
