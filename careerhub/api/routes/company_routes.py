"""
Company Routes

GET /companies - List companies (q, industry)
GET /companies/{company_id} - Get company details
POST /companies - Create company (employer or admin)
PUT /companies/{company_id} - Update company (its employer or admin)
DELETE /companies/{company_id} - Delete company (its jobs are kept)
"""

from fastapi import APIRouter

from careerhub.schemas.schemas import CompanyCreate, CompanyUpdate, ResourceKind
from careerhub.api.routes.resource_routes import add_resource_routes

router = APIRouter(prefix="/companies", tags=["Companies"])

add_resource_routes(router, ResourceKind.company, CompanyCreate, CompanyUpdate)
