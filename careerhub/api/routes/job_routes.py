"""
Job Routes

GET /jobs - List jobs (q, date=week|month, type, company)
GET /jobs/{job_id} - Get job details
POST /jobs - Create job posting (employer or admin)
PUT /jobs/{job_id} - Update job (owning employer or admin)
DELETE /jobs/{job_id} - Delete job (owning employer or admin)
GET /jobs/{job_id}/company - Resolve the posting company
"""

from fastapi import APIRouter, Depends

from careerhub.core.auth import get_current_user, get_portal
from careerhub.core.errors import NotFound
from careerhub.core.state import PortalState
from careerhub.schemas.schemas import ItemResponse, JobCreate, JobUpdate, ResourceKind
from careerhub.api.routes.resource_routes import add_resource_routes

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("/{job_id}/company", response_model=ItemResponse)
async def get_job_company(job_id: str, user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    """The job's company. 404 once the company has been deleted; the job itself stays."""
    job = portal.resources.get(ResourceKind.job, job_id)
    company = portal.resources.company_for(job)
    if company is None:
        raise NotFound(f"Company for {job.title} no longer exists")
    return ItemResponse(item=company.model_dump(mode="json"))


add_resource_routes(router, ResourceKind.job, JobCreate, JobUpdate)
