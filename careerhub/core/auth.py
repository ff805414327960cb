"""
Authentication Utility - FastAPI dependencies around the portal session.

Provides:
- access to the PortalState attached to the app
- the current actor (401 when nobody is logged in)
- role guards for admin-only and student-only routes

There are no tokens: the portal runs one session per process and the actor
is whatever the last login left in the `user` slot.
"""

from fastapi import Depends, HTTPException, Request, status

from careerhub.core.state import PortalState
from careerhub.schemas.schemas import Role


def get_portal(request: Request) -> PortalState:
    """
    FastAPI dependency - the application state container.

    Usage:
        @router.get("/things")
        async def route(portal: PortalState = Depends(get_portal)):
            ...
    """
    return request.app.state.portal


async def get_current_user(portal: PortalState = Depends(get_portal)):
    """Dependency - the logged-in actor."""
    if portal.session.actor is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return portal.session.actor


async def get_current_admin(user=Depends(get_current_user)):
    """Dependency - Require admin role."""
    if user.role != Role.admin.value:
        raise HTTPException(status_code=403, detail="Admins only")
    return user


async def get_current_student(user=Depends(get_current_user)):
    """Dependency - Require student role."""
    if user.role != Role.student.value:
        raise HTTPException(status_code=403, detail="Students only")
    return user
