"""
Career Hub - Main Application

FastAPI backend with:
- Role-based access for students, employers and admins
- In-memory resource stores seeded with demo data
- A persistent key-value store (JSON files or MongoDB) for the session,
  saved items and event registrations
- Jinja2-rendered resume documents

Run: uvicorn careerhub.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from careerhub.api.routes import api_router
from careerhub.core.config import Settings, get_settings
from careerhub.core.errors import PortalError, ValidationFailure
from careerhub.core.state import PortalState
from careerhub.db.kv_store import KeyValueStore
from careerhub.schemas.schemas import ErrorResponse

logger = logging.getLogger(__name__)

# Documented shape of every PortalError response
ERROR_RESPONSES = {
    code: {"model": ErrorResponse} for code in (403, 404, 409, 422, 502)
}


def create_app(settings: Optional[Settings] = None, kv_store: Optional[KeyValueStore] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Career Hub",
        description="""
        University career-services portal.

        ## Features
        - **Authentication**: demo accounts for students, employers and admins
        - **Jobs, Companies, Events, Courses**: search, filter, save, manage
        - **Admin**: dashboard, bulk actions, CSV export
        - **Resumes**: builder flow, completeness score, printable templates
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS middleware (allow all for development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.portal = PortalState.bootstrap(settings, kv_store)

    @app.exception_handler(PortalError)
    async def portal_error_handler(request: Request, exc: PortalError):
        """Every service failure becomes an error notification."""
        portal: PortalState = request.app.state.portal
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
        field_errors = exc.field_errors if isinstance(exc, ValidationFailure) else {}
        body = ErrorResponse(notification=portal.notifier.error(exc.message), field_errors=field_errors)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json"))

    app.include_router(api_router, prefix="/api", responses=ERROR_RESPONSES)

    @app.get("/api/notifications/current", tags=["Notifications"])
    async def current_notification(request: Request):
        """The latest notification until it auto-dismisses."""
        notification = request.app.state.portal.notifier.current()
        return {"notification": notification.model_dump(mode="json") if notification else None}

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """Detailed health check."""
        portal: PortalState = request.app.state.portal
        health = {
            "status": "healthy",
            "storage": settings.storage_backend,
            "logged_in": portal.session.is_authenticated,
        }
        if settings.storage_backend == "mongo":
            from careerhub.db.mongodb import test_mongo_connection
            health["mongodb"] = "connected" if test_mongo_connection() else "disconnected"
        return health

    return app


app = create_app()
