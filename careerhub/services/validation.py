"""
Draft validation - required-field rules for resource forms.

Each validator returns {field: message}; an empty dict means the draft is
acceptable. Nothing is created while any error remains.
"""

from typing import Dict

from careerhub.schemas.schemas import ResourceKind

JOB_TITLE_MIN = 3
JOB_DESCRIPTION_MIN = 50


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_job(draft: dict) -> Dict[str, str]:
    errors = {}
    if len(draft.get("title") or "") < JOB_TITLE_MIN:
        errors["title"] = f"Title must be at least {JOB_TITLE_MIN} characters long"
    if len(draft.get("description") or "") < JOB_DESCRIPTION_MIN:
        errors["description"] = f"Description must be at least {JOB_DESCRIPTION_MIN} characters long"
    if _blank(draft.get("location")):
        errors["location"] = "Location is required"
    if _blank(draft.get("salary")):
        errors["salary"] = "Salary is required"
    requirements = draft.get("requirements") or []
    if not requirements or _blank(requirements[0]):
        errors["requirements"] = "At least one requirement is needed"
    if not draft.get("deadline"):
        errors["deadline"] = "Deadline is required"
    if not [s for s in draft.get("skills") or [] if not _blank(s)]:
        errors["skills"] = "At least one skill is required"
    # company_name is resolved from company_id before validation
    if _blank(draft.get("company_name")):
        errors["company"] = "Company is required"
    return errors


def validate_event(draft: dict) -> Dict[str, str]:
    errors = {}
    for field, label in (("title", "Title"), ("start_time", "Start time"),
                         ("end_time", "End time"), ("location", "Location")):
        if _blank(draft.get(field)):
            errors[field] = f"{label} is required"
    if not draft.get("date"):
        errors["date"] = "Date is required"
    return errors


def validate_company(draft: dict) -> Dict[str, str]:
    errors = {}
    if _blank(draft.get("name")):
        errors["name"] = "Company name is required"
    if _blank(draft.get("description")):
        errors["description"] = "Description is required"
    return errors


def validate_course(draft: dict) -> Dict[str, str]:
    if _blank(draft.get("title")):
        return {"title": "Title is required"}
    return {}


def validate_user(draft: dict) -> Dict[str, str]:
    errors = {}
    if _blank(draft.get("name")):
        errors["name"] = "Name is required"
    if _blank(draft.get("email")) or "@" not in (draft.get("email") or ""):
        errors["email"] = "A valid email is required"
    return errors


VALIDATORS = {
    ResourceKind.job: validate_job,
    ResourceKind.event: validate_event,
    ResourceKind.company: validate_company,
    ResourceKind.course: validate_course,
    ResourceKind.user: validate_user,
}


def validate_draft(kind: ResourceKind, draft: dict) -> Dict[str, str]:
    return VALIDATORS[kind](draft)
