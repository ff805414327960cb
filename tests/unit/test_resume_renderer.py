"""Tests for the resume renderer: section projection, templates, print mode."""

import re
from datetime import datetime

import pytest

from careerhub.schemas.schemas import (
    Education, Experience, PersonalInfo, Project, RenderMode, Resume, TemplateName
)
from careerhub.services.resume_renderer import TEMPLATES, get_template, render, visible_sections

T0 = datetime(2026, 1, 1)


def make_resume(**kwargs) -> Resume:
    kwargs.setdefault("personal", PersonalInfo(full_name="Ada Lovelace", title="Engineer",
                                               email="ada@example.com", phone="555-0100"))
    return Resume(id="r1", owner_id="u1", created_at=T0, updated_at=T0, **kwargs)


def full_resume() -> Resume:
    return make_resume(
        summary="Engineer who likes engines.",
        experience=[Experience(company="Acme", position="Developer", start_date="2020", current=True,
                               description=["Built things", "Fixed things"])],
        education=[Education(institution="State University", degree="BSc", field="Mathematics")],
        skills=["Python", "", "SQL"],
        projects=[Project(title="Analytical Engine", description="Mechanical computer",
                          technologies=["brass", "steam"])],
    )


def rendered_sections(html: str):
    return re.findall(r'data-section="([a-z]+)"', html)


# ---------------------------------------------------------------------------
# TestSections
# ---------------------------------------------------------------------------


class TestSections:

    def test_full_order(self) -> None:
        document = render(full_resume())
        expected = ["header", "summary", "experience", "education", "skills", "projects"]
        assert document.sections == expected
        assert rendered_sections(document.html) == expected

    def test_header_only(self) -> None:
        document = render(make_resume())
        assert document.sections == ["header"]
        assert rendered_sections(document.html) == ["header"]
        assert "Experience</h2>" not in document.html

    def test_empty_sections_are_skipped_in_place(self) -> None:
        resume = make_resume(summary="   ", education=[Education(institution="State")], skills=[""])
        assert visible_sections(resume) == ["header", "education"]

    def test_blank_skills_are_not_rendered(self) -> None:
        html = render(full_resume()).html
        assert html.count('class="skill"') == 2

    def test_content_is_escaped(self) -> None:
        resume = make_resume(summary="<script>alert(1)</script> and more text")
        html = render(resume).html
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_personal_override(self) -> None:
        document = render(make_resume(), personal=PersonalInfo(full_name="Grace Hopper"))
        assert "Grace Hopper" in document.html
        assert "Ada Lovelace" not in document.html

    def test_current_role_says_present(self) -> None:
        assert "2020 - Present" in render(full_resume()).html


# ---------------------------------------------------------------------------
# TestTemplates
# ---------------------------------------------------------------------------


class TestTemplates:

    def test_six_distinct_presets(self) -> None:
        assert set(TEMPLATES) == set(TemplateName)
        combos = {(t.colors.primary, t.heading_weight) for t in TEMPLATES.values()}
        assert len(combos) == 6

    @pytest.mark.parametrize("name", list(TemplateName))
    def test_headings_use_primary_color(self, name: TemplateName) -> None:
        document = render(full_resume(), template=name)
        primary = get_template(name).colors.primary
        assert document.template == name
        assert f"section h2 {{ color: {primary}" in document.html
        assert f"border-bottom: 2px solid {primary}" in document.html

    def test_defaults_to_resume_template(self) -> None:
        document = render(make_resume(template=TemplateName.classic))
        assert document.template == TemplateName.classic


# ---------------------------------------------------------------------------
# TestModes
# ---------------------------------------------------------------------------


class TestModes:

    def test_print_only_adds_trigger(self) -> None:
        resume = full_resume()
        preview = render(resume, mode=RenderMode.preview)
        printed = render(resume, mode=RenderMode.print)

        assert "window.print()" not in preview.html
        assert "window.print()" in printed.html
        assert preview.sections == printed.sections
        assert rendered_sections(preview.html) == rendered_sections(printed.html)

    def test_mode_accepts_string(self) -> None:
        assert render(make_resume(), mode="print").mode == RenderMode.print
