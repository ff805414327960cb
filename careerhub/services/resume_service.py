"""
Resume Service - resume documents, their entries, completeness score and
the section-by-section builder flow.

Entries (education, experience, projects, certifications, skills) have no
ids of their own: they are addressed by their index in the parent list.

SCORING:
Each criterion adds to a numerator and a denominator; the score is
round(min(100, 100 * numerator / denominator)).
- personal info   2 (name+email+phone) | 1 (name+email) | 0      of 2
- experience      2 (position+company+start) | 1 (any) | 0       of 2
- education       weight 2 for students, 1 otherwise; full weight for
                  institution+degree, half (floored) for any entry
- skills          2 (3 or more) | 1 (1-2) | 0                      of 2
- projects        only for students or the tech template:
                  2 (title+description) | 1 (any) | 0             of 2
- template        1 of 1 (one is always selected)
- summary         1 of 1, only when longer than 50 characters
"""

import logging
import math
import secrets
from datetime import datetime
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from careerhub.core.errors import NotFound, ValidationFailure
from careerhub.schemas.schemas import (
    BuilderSection, BuilderState, Certification, Education, Experience,
    PersonalInfo, Project, Resume, ResumeSection, Role, TemplateName
)

logger = logging.getLogger(__name__)

SUMMARY_BONUS_LENGTH = 50

ENTRY_MODELS = {
    ResumeSection.education: Education,
    ResumeSection.experience: Experience,
    ResumeSection.projects: Project,
    ResumeSection.certifications: Certification,
}

STUDENT_SECTIONS = [
    BuilderSection.personal, BuilderSection.education, BuilderSection.projects,
    BuilderSection.experience, BuilderSection.skills,
]
EMPLOYER_SECTIONS = [
    BuilderSection.personal, BuilderSection.experience, BuilderSection.education,
    BuilderSection.skills, BuilderSection.achievements,
]
DEFAULT_SECTIONS = [
    BuilderSection.personal, BuilderSection.experience, BuilderSection.education,
    BuilderSection.skills, BuilderSection.projects,
]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_resume(resume: Resume, role, template: Optional[TemplateName] = None) -> int:
    """Completeness score 0..100. Cheap; callers recompute on every read."""
    role = getattr(role, "value", role)
    template = TemplateName(template or resume.template)
    numerator = 0
    denominator = 0

    personal = resume.personal
    if personal.full_name and personal.email and personal.phone:
        numerator += 2
    elif personal.full_name and personal.email:
        numerator += 1
    denominator += 2

    if any(e.position and e.company and e.start_date for e in resume.experience):
        numerator += 2
    elif resume.experience:
        numerator += 1
    denominator += 2

    education_weight = 2 if role == Role.student.value else 1
    if any(e.institution and e.degree for e in resume.education):
        numerator += education_weight
    elif resume.education:
        numerator += education_weight // 2
    denominator += education_weight

    skills = [s for s in resume.skills if s]
    if len(skills) >= 3:
        numerator += 2
    elif skills:
        numerator += 1
    denominator += 2

    if role == Role.student.value or template == TemplateName.tech:
        if any(p.title and p.description for p in resume.projects):
            numerator += 2
        elif resume.projects:
            numerator += 1
        denominator += 2

    # A template is always selected
    numerator += 1
    denominator += 1

    if len(resume.summary or "") > SUMMARY_BONUS_LENGTH:
        numerator += 1
        denominator += 1

    return _round_half_up(min(100.0, 100.0 * numerator / denominator))


def sections_for(role) -> List[BuilderSection]:
    role = getattr(role, "value", role)
    if role == Role.student.value:
        return list(STUDENT_SECTIONS)
    if role == Role.employer.value:
        return list(EMPLOYER_SECTIONS)
    return list(DEFAULT_SECTIONS)


class ResumeService:
    """
    In-memory resume documents for all users.

    Every mutation refreshes updated_at.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.utcnow):
        self._clock = clock
        self._resumes: Dict[str, Resume] = {}
        self._builder: Dict[str, BuilderSection] = {}

    # ---------- documents ----------

    def list_for(self, owner_id: str) -> List[Resume]:
        """The owner's resumes; creates the default one on first access."""
        resumes = [r for r in self._resumes.values() if r.owner_id == owner_id]
        if not resumes:
            resumes = [self.create(owner_id)]
        return resumes

    def get(self, resume_id: str, owner_id: Optional[str] = None) -> Resume:
        resume = self._resumes.get(resume_id)
        if resume is None or (owner_id is not None and resume.owner_id != owner_id):
            raise NotFound("Resume not found")
        return resume

    def create(self, owner_id: str, title: str = "Untitled Resume",
               template: TemplateName = TemplateName.modern) -> Resume:
        now = self._clock()
        resume = Resume(
            id=f"resume-{secrets.token_hex(4)}", owner_id=owner_id, title=title,
            template=template, created_at=now, updated_at=now,
        )
        self._resumes[resume.id] = resume
        logger.info("Created resume %s for %s", resume.id, owner_id)
        return resume

    def delete(self, resume_id: str, owner_id: Optional[str] = None) -> None:
        resume = self.get(resume_id, owner_id)
        del self._resumes[resume.id]
        self._builder.pop(resume.id, None)

    def rename(self, resume_id: str, title: str) -> Resume:
        resume = self.get(resume_id)
        resume.title = title or "Untitled Resume"
        return self._touch(resume)

    # ---------- entries ----------

    def add_entry(self, resume_id: str, section: ResumeSection, entry) -> Resume:
        resume = self.get(resume_id)
        section = ResumeSection(section)
        getattr(resume, section.value).append(self._coerce(section, entry))
        return self._touch(resume)

    def update_entry(self, resume_id: str, section: ResumeSection, index: int, patch) -> Resume:
        resume = self.get(resume_id)
        section = ResumeSection(section)
        entries = getattr(resume, section.value)
        self._check_index(section, entries, index)

        if section == ResumeSection.skills:
            entries[index] = self._coerce(section, patch)
        else:
            if isinstance(patch, BaseModel):
                patch = patch.model_dump(exclude_unset=True)
            if not isinstance(patch, dict):
                raise ValidationFailure({section.value: "Entry must be an object"})
            data = entries[index].model_dump()
            data.update(patch)
            entries[index] = self._coerce(section, data)
        return self._touch(resume)

    def remove_entry(self, resume_id: str, section: ResumeSection, index: int) -> Resume:
        resume = self.get(resume_id)
        section = ResumeSection(section)
        entries = getattr(resume, section.value)
        self._check_index(section, entries, index)
        del entries[index]
        return self._touch(resume)

    def update_personal_info(self, resume_id: str, patch) -> Resume:
        resume = self.get(resume_id)
        if isinstance(patch, BaseModel):
            patch = patch.model_dump(exclude_unset=True)
        patch = dict(patch)
        summary = patch.pop("summary", None)

        data = resume.personal.model_dump()
        data.update(patch)
        resume.personal = PersonalInfo.model_validate(data)
        if summary is not None:
            resume.summary = summary
        return self._touch(resume)

    def update_summary(self, resume_id: str, summary: str) -> Resume:
        resume = self.get(resume_id)
        resume.summary = summary or ""
        return self._touch(resume)

    def set_template(self, resume_id: str, template: TemplateName) -> Resume:
        resume = self.get(resume_id)
        resume.template = TemplateName(template)
        return self._touch(resume)

    def score(self, resume: Resume, role) -> int:
        return score_resume(resume, role)

    # ---------- builder flow ----------

    def builder_state(self, resume_id: str, role) -> BuilderState:
        resume = self.get(resume_id)
        sections = sections_for(role)
        section = self._builder.get(resume.id, sections[0])
        if section not in sections:
            section = sections[0]
        return BuilderState(resume_id=resume.id, section=section, sections=sections)

    def goto(self, resume_id: str, role, section: BuilderSection) -> BuilderState:
        sections = sections_for(role)
        section = BuilderSection(section)
        if section not in sections:
            raise ValidationFailure({"section": f"{section.value} is not part of this builder"})
        self._builder[self.get(resume_id).id] = section
        return self.builder_state(resume_id, role)

    def next(self, resume_id: str, role) -> BuilderState:
        """Advance one section; on the last section save and finish instead."""
        state = self.builder_state(resume_id, role)
        index = state.sections.index(state.section)
        if index == len(state.sections) - 1:
            self.save_and_finish(resume_id)
            state.finished = True
            return state
        self._builder[resume_id] = state.sections[index + 1]
        return self.builder_state(resume_id, role)

    def previous(self, resume_id: str, role) -> BuilderState:
        state = self.builder_state(resume_id, role)
        index = state.sections.index(state.section)
        if index > 0:
            self._builder[resume_id] = state.sections[index - 1]
        return self.builder_state(resume_id, role)

    def save_and_finish(self, resume_id: str) -> Resume:
        resume = self.get(resume_id)
        resume.title = resume.personal.full_name or "Untitled Resume"
        logger.info("Saved resume %s", resume.id)
        return self._touch(resume)

    # ---------- helpers ----------

    def _touch(self, resume: Resume) -> Resume:
        resume.updated_at = self._clock()
        return resume

    @staticmethod
    def _check_index(section: ResumeSection, entries: list, index: int) -> None:
        if not 0 <= index < len(entries):
            raise NotFound(f"No {section.value} entry at position {index}")

    @staticmethod
    def _coerce(section: ResumeSection, entry):
        if section == ResumeSection.skills:
            if not isinstance(entry, str) or not entry.strip():
                raise ValidationFailure({"skills": "Skill must be a non-empty string"})
            return entry.strip()
        model = ENTRY_MODELS[section]
        if isinstance(entry, model):
            return entry
        if not isinstance(entry, dict):
            raise ValidationFailure({section.value: "Entry must be an object"})
        try:
            return model.model_validate(entry)
        except ValidationError as e:
            errors = {".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()}
            raise ValidationFailure(errors) from e
