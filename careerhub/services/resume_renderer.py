"""
Resume Renderer - resume + template -> printable HTML document.

Sections are projected in a fixed order and only when they have content:
header (always), summary, experience, education, skills, projects.
Preview and print share one Jinja2 template; print mode only adds the
print trigger.
"""

import logging
from typing import Dict, List, Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from pydantic import BaseModel

from careerhub.schemas.schemas import (
    PersonalInfo, RenderedDocument, RenderMode, Resume, TemplateName
)

logger = logging.getLogger(__name__)


class TemplateColors(BaseModel):
    primary: str
    secondary: str
    accent: str
    background: str
    text: str


class ResumeTemplate(BaseModel):
    name: TemplateName
    label: str
    colors: TemplateColors
    heading_weight: int
    body_font_family: str


TEMPLATES: Dict[TemplateName, ResumeTemplate] = {
    TemplateName.modern: ResumeTemplate(
        name=TemplateName.modern, label="Modern",
        colors=TemplateColors(primary="#2563eb", secondary="#64748b", accent="#0ea5e9",
                              background="#ffffff", text="#1e293b"),
        heading_weight=700, body_font_family="'Inter', 'Helvetica Neue', Arial, sans-serif",
    ),
    TemplateName.classic: ResumeTemplate(
        name=TemplateName.classic, label="Classic",
        colors=TemplateColors(primary="#1f2937", secondary="#4b5563", accent="#92400e",
                              background="#fffdf7", text="#111827"),
        heading_weight=600, body_font_family="Georgia, 'Times New Roman', serif",
    ),
    TemplateName.creative: ResumeTemplate(
        name=TemplateName.creative, label="Creative",
        colors=TemplateColors(primary="#9333ea", secondary="#db2777", accent="#f59e0b",
                              background="#fdf4ff", text="#3b0764"),
        heading_weight=800, body_font_family="'Poppins', 'Segoe UI', sans-serif",
    ),
    TemplateName.minimal: ResumeTemplate(
        name=TemplateName.minimal, label="Minimal",
        colors=TemplateColors(primary="#374151", secondary="#9ca3af", accent="#6b7280",
                              background="#ffffff", text="#374151"),
        heading_weight=400, body_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    ),
    TemplateName.corporate: ResumeTemplate(
        name=TemplateName.corporate, label="Corporate",
        colors=TemplateColors(primary="#1e3a8a", secondary="#475569", accent="#0f766e",
                              background="#f8fafc", text="#0f172a"),
        heading_weight=600, body_font_family="Calibri, 'Segoe UI', Arial, sans-serif",
    ),
    TemplateName.tech: ResumeTemplate(
        name=TemplateName.tech, label="Tech",
        colors=TemplateColors(primary="#059669", secondary="#0f172a", accent="#22d3ee",
                              background="#f0fdf4", text="#0f172a"),
        heading_weight=700, body_font_family="'JetBrains Mono', 'Fira Code', Consolas, monospace",
    ),
}


def get_template(name) -> ResumeTemplate:
    return TEMPLATES[TemplateName(name)]


_env: Optional[Environment] = None


def get_environment() -> Environment:
    """Jinja2 environment loading careerhub/templates (singleton)."""
    global _env
    if _env is None:
        _env = Environment(
            loader=PackageLoader("careerhub", "templates"),
            autoescape=select_autoescape(["html", "j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
    return _env


def visible_sections(resume: Resume) -> List[str]:
    """Sections that will appear, in render order."""
    sections = ["header"]
    if (resume.summary or "").strip():
        sections.append("summary")
    if resume.experience:
        sections.append("experience")
    if resume.education:
        sections.append("education")
    if [s for s in resume.skills if s]:
        sections.append("skills")
    if resume.projects:
        sections.append("projects")
    return sections


def render(resume: Resume, personal: Optional[PersonalInfo] = None, template=None,
           mode: RenderMode = RenderMode.preview) -> RenderedDocument:
    """
    Render a resume.

    Args:
        resume: the document to project
        personal: header data; defaults to the resume's own personal info
        template: template name; defaults to the resume's selected template
        mode: preview or print (print adds the print trigger only)
    """
    personal = personal or resume.personal
    style = get_template(template or resume.template)
    mode = RenderMode(mode)
    sections = visible_sections(resume)

    contact = [value for value in (personal.email, personal.phone, personal.location) if value]
    html = get_environment().get_template("resume.html.j2").render(
        resume=resume,
        personal=personal,
        contact=contact,
        skills=[s for s in resume.skills if s],
        style=style,
        sections=sections,
        print_mode=mode == RenderMode.print,
    )
    logger.debug("Rendered resume %s with %s (%s)", resume.id, style.name.value, mode.value)
    return RenderedDocument(
        resume_id=resume.id, template=style.name, mode=mode, sections=sections, html=html,
    )
