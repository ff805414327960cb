"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from careerhub.api.routes.auth_routes import router as auth_router
from careerhub.api.routes.user_routes import router as user_router
from careerhub.api.routes.company_routes import router as company_router
from careerhub.api.routes.job_routes import router as job_router
from careerhub.api.routes.event_routes import router as event_router
from careerhub.api.routes.course_routes import router as course_router
from careerhub.api.routes.saved_routes import router as saved_router
from careerhub.api.routes.admin_routes import router as admin_router
from careerhub.api.routes.resume_routes import router as resume_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(user_router)
api_router.include_router(company_router)
api_router.include_router(job_router)
api_router.include_router(event_router)
api_router.include_router(course_router)
api_router.include_router(saved_router)
api_router.include_router(admin_router)
api_router.include_router(resume_router)
