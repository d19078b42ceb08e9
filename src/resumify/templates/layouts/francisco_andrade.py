"""Francisco Andrade layout.

A dark blue header band spans the page; below it a light gray sidebar holds
contact details, skills and references while the main column carries the
career history.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RecordView, RenderSession, ResumeTemplate

__all__ = ["FranciscoAndradeTemplate"]

_EXAMPLES = {
    "experience": (
        {
            "title": "Product Designer",
            "company": "Borcelle Studio",
            "startDate": "2020",
            "current": True,
            "description": "Design end-to-end flows for the studio's mobile apps.",
        },
    ),
    "education": (
        {
            "degree": "School of business",
            "institution": "Wardiere University",
            "year": 2019,
            "gpa": "3.8 / 4.0",
        },
    ),
    "references": (
        {"name": "Estelle Darcy", "company": "Wardiere Inc.", "title": "CTO", "phone": "123-456-7890"},
    ),
}


class FranciscoAndradeTemplate(ResumeTemplate):
    layout_id = "francisco-andrade"
    display_name = "Francisco Andrade"
    description = "Light gray sidebar with dark blue header"
    year_offset = 2
    present_label = "PRESENT"
    uppercase_headings = True
    featured_sections = ("education", "experience", "skills", "projects", "references")
    example_sections = frozenset({"experience", "education", "references"})
    examples = _EXAMPLES
    palette = {
        "header-bg": "#1E3A8A",
        "header-text": "#FFFFFF",
        "sidebar-bg": "#F1F5F9",
        "accent": "#1E3A8A",
        "muted": "#334155",
        "heading-spacing": "1px",
    }
    extra_css = (
        ".resume--francisco-andrade .r-header .r-name{color:#fff}"
        ".resume--francisco-andrade .r-header .r-role{color:#BFDBFE}"
    )

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.contact(document, session),
            self.section(document, session, "skills", self.skill_block),
            self.section(document, session, "references", self._reference),
        ]
        main = [
            self.summary(document, session, title="Profile"),
            self.section(document, session, "experience", self.experience_block),
            self.section(document, session, "projects", self.project_block),
            self.section(document, session, "education", self._education),
            self.additional_sections(document, session),
        ]
        return self.masthead(document, session) + self.two_column(sidebar, main)

    def _education(self, view: RecordView) -> Markup:
        parts = [view.field("institution", "University"), view.education_year()]
        if view.has("gpa") or view.editable:
            parts.append(Markup("GPA: {}").format(view.field("gpa", "GPA")))
        return Markup('<div class="r-record__title">{}</div><div class="r-record__subtitle">{}</div>').format(
            view.field("degree", "Degree"),
            Markup(" | ").join(p for p in parts if p),
        )

    def _reference(self, view: RecordView) -> Markup:
        return Markup('<div class="r-record__title">{}</div><div class="r-record__meta">{} / {}</div>').format(
            view.field("name", "Reference Name"),
            view.field("company", "Company"),
            view.field("title", "Title"),
        )
