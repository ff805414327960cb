"""
Resume Routes

GET /resumes - My resumes (a default one is created on first access)
POST /resumes - Create a resume
GET /resumes/{resume_id} - Get one resume with its score
PUT /resumes/{resume_id} - Rename
DELETE /resumes/{resume_id} - Delete
PUT /resumes/{resume_id}/personal - Update personal info (and summary)
PUT /resumes/{resume_id}/summary - Update summary
PUT /resumes/{resume_id}/template - Select a template
POST /resumes/{resume_id}/sections/{section} - Add an entry
PUT /resumes/{resume_id}/sections/{section}/{index} - Update an entry
DELETE /resumes/{resume_id}/sections/{section}/{index} - Remove an entry
GET /resumes/{resume_id}/score - Completeness score
GET /resumes/{resume_id}/builder - Builder position
POST /resumes/{resume_id}/builder/next|previous|goto/{section} - Move through the builder
GET /resumes/{resume_id}/preview - Rendered HTML
POST /resumes/{resume_id}/preview - Rendered HTML with unsaved personal info
GET /resumes/{resume_id}/print - Rendered HTML that opens the print dialog
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from careerhub.core.auth import get_current_user, get_portal
from careerhub.core.state import PortalState
from careerhub.schemas.schemas import (
    BuilderSection, BuilderState, EntryPayload, ItemResponse, ListResponse,
    MessageResponse, PersonalInfo, PersonalInfoUpdate, RenderMode, ResumeCreate,
    ResumeSection, ScoreResponse, SummaryUpdate, TemplateName, TemplateUpdate
)
from careerhub.services.resume_renderer import render

router = APIRouter(prefix="/resumes", tags=["Resumes"])


def resume_payload(portal: PortalState, resume, user) -> dict:
    data = resume.model_dump(mode="json")
    data["score"] = portal.resumes.score(resume, user.role)
    return data


def own_resume(portal: PortalState, resume_id: str, user):
    """The resume, if it belongs to the current user (404 otherwise)."""
    return portal.resumes.get(resume_id, owner_id=user.id)


def updated(portal: PortalState, resume, user, message: Optional[str] = None) -> ItemResponse:
    notification = portal.notifier.success(message) if message else None
    return ItemResponse(item=resume_payload(portal, resume, user), notification=notification)


@router.get("", response_model=ListResponse)
async def list_resumes(user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    rows = [resume_payload(portal, r, user) for r in portal.resumes.list_for(user.id)]
    return ListResponse(items=rows, total=len(rows))


@router.post("", response_model=ItemResponse, status_code=201)
async def create_resume(request: ResumeCreate, user=Depends(get_current_user),
                        portal: PortalState = Depends(get_portal)):
    resume = portal.resumes.create(user.id, request.title, request.template)
    return updated(portal, resume, user, "Resume created successfully")


@router.get("/{resume_id}", response_model=ItemResponse)
async def get_resume(resume_id: str, user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    return updated(portal, own_resume(portal, resume_id, user), user)


@router.put("/{resume_id}", response_model=ItemResponse)
async def rename_resume(resume_id: str, request: ResumeCreate, user=Depends(get_current_user),
                        portal: PortalState = Depends(get_portal)):
    own_resume(portal, resume_id, user)
    return updated(portal, portal.resumes.rename(resume_id, request.title), user, "Resume renamed")


@router.delete("/{resume_id}", response_model=MessageResponse)
async def delete_resume(resume_id: str, user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    portal.resumes.delete(resume_id, owner_id=user.id)
    return MessageResponse(message="Resume deleted",
                           notification=portal.notifier.success("Resume deleted successfully"))


# ============================================================
# CONTENT
# ============================================================

@router.put("/{resume_id}/personal", response_model=ItemResponse)
async def update_personal(resume_id: str, request: PersonalInfoUpdate, user=Depends(get_current_user),
                          portal: PortalState = Depends(get_portal)):
    own_resume(portal, resume_id, user)
    resume = portal.resumes.update_personal_info(resume_id, request.model_dump(exclude_unset=True))
    return updated(portal, resume, user)


@router.put("/{resume_id}/summary", response_model=ItemResponse)
async def update_summary(resume_id: str, request: SummaryUpdate, user=Depends(get_current_user),
                         portal: PortalState = Depends(get_portal)):
    own_resume(portal, resume_id, user)
    return updated(portal, portal.resumes.update_summary(resume_id, request.summary), user)


@router.put("/{resume_id}/template", response_model=ItemResponse)
async def set_template(resume_id: str, request: TemplateUpdate, user=Depends(get_current_user),
                       portal: PortalState = Depends(get_portal)):
    own_resume(portal, resume_id, user)
    resume = portal.resumes.set_template(resume_id, request.template)
    return updated(portal, resume, user, f"Template changed to {request.template.value}")


@router.post("/{resume_id}/sections/{section}", response_model=ItemResponse, status_code=201)
async def add_entry(resume_id: str, section: ResumeSection, request: EntryPayload,
                    user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    own_resume(portal, resume_id, user)
    return updated(portal, portal.resumes.add_entry(resume_id, section, request.entry), user)


@router.put("/{resume_id}/sections/{section}/{index}", response_model=ItemResponse)
async def update_entry(resume_id: str, section: ResumeSection, index: int, request: EntryPayload,
                       user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    own_resume(portal, resume_id, user)
    return updated(portal, portal.resumes.update_entry(resume_id, section, index, request.entry), user)


@router.delete("/{resume_id}/sections/{section}/{index}", response_model=ItemResponse)
async def remove_entry(resume_id: str, section: ResumeSection, index: int,
                       user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    own_resume(portal, resume_id, user)
    return updated(portal, portal.resumes.remove_entry(resume_id, section, index), user)


@router.get("/{resume_id}/score", response_model=ScoreResponse)
async def get_score(resume_id: str, user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    resume = own_resume(portal, resume_id, user)
    return ScoreResponse(resume_id=resume.id, score=portal.resumes.score(resume, user.role))


# ============================================================
# BUILDER FLOW
# ============================================================

@router.get("/{resume_id}/builder", response_model=BuilderState)
async def get_builder(resume_id: str, user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    own_resume(portal, resume_id, user)
    return portal.resumes.builder_state(resume_id, user.role)


@router.post("/{resume_id}/builder/next", response_model=BuilderState)
async def builder_next(resume_id: str, user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    """Advance; on the last section the resume is saved and finished is true."""
    own_resume(portal, resume_id, user)
    state = portal.resumes.next(resume_id, user.role)
    if state.finished:
        portal.notifier.success("Resume saved successfully")
    return state


@router.post("/{resume_id}/builder/previous", response_model=BuilderState)
async def builder_previous(resume_id: str, user=Depends(get_current_user),
                           portal: PortalState = Depends(get_portal)):
    own_resume(portal, resume_id, user)
    return portal.resumes.previous(resume_id, user.role)


@router.post("/{resume_id}/builder/goto/{section}", response_model=BuilderState)
async def builder_goto(resume_id: str, section: BuilderSection, user=Depends(get_current_user),
                       portal: PortalState = Depends(get_portal)):
    own_resume(portal, resume_id, user)
    return portal.resumes.goto(resume_id, user.role, section)


# ============================================================
# RENDERING
# ============================================================

@router.get("/{resume_id}/preview", response_class=HTMLResponse)
async def preview(resume_id: str, template: Optional[TemplateName] = Query(None),
                  user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    document = render(own_resume(portal, resume_id, user), template=template, mode=RenderMode.preview)
    return HTMLResponse(document.html)


@router.post("/{resume_id}/preview", response_class=HTMLResponse)
async def preview_draft(resume_id: str, personal: PersonalInfo, template: Optional[TemplateName] = Query(None),
                        user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    """Preview with personal info that has not been saved yet."""
    document = render(own_resume(portal, resume_id, user), personal=personal,
                      template=template, mode=RenderMode.preview)
    return HTMLResponse(document.html)


@router.get("/{resume_id}/print", response_class=HTMLResponse)
async def print_resume(resume_id: str, template: Optional[TemplateName] = Query(None),
                       user=Depends(get_current_user), portal: PortalState = Depends(get_portal)):
    document = render(own_resume(portal, resume_id, user), template=template, mode=RenderMode.print)
    return HTMLResponse(document.html)
