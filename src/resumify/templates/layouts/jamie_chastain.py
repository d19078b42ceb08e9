"""Jamie Chastain layout: black sidebar with a clean white body."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RenderSession, ResumeTemplate

__all__ = ["JamieChastainTemplate"]

_EXAMPLES = {
    "experience": (
        {
            "title": "Sales Representative",
            "company": "Arowwai Industries",
            "startDate": "2016",
            "endDate": "2018",
            "description": "Grew the regional client base by a third in two years.",
        },
        {
            "title": "Account Manager",
            "company": "Ginyard International Co.",
            "startDate": "2018",
            "current": True,
            "description": "Own renewals for the company's largest accounts.",
        },
    ),
}


class JamieChastainTemplate(ResumeTemplate):
    layout_id = "jamie-chastain"
    display_name = "Jamie Chastain"
    description = "Professional black sidebar with clean white layout"
    year_offset = 2
    uppercase_headings = True
    example_sections = frozenset({"experience"})
    examples = _EXAMPLES
    palette = {
        "sidebar-bg": "#111111",
        "sidebar-text": "#FFFFFF",
        "accent": "#111111",
        "muted": "#4B5563",
        "heading-spacing": "1px",
        "heading-rule": "1px solid #111111",
    }
    extra_css = (
        ".resume--jamie-chastain .r-sidebar .r-heading{color:#fff;border-color:#fff}"
        ".resume--jamie-chastain .r-sidebar .r-record__subtitle,"
        ".resume--jamie-chastain .r-sidebar .r-dates{color:#d4d4d4}"
    )

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.contact(document, session),
            self.section(document, session, "education", self.education_block),
            self.section(document, session, "skills", self.skill_block),
        ]
        main = [
            self.masthead(document, session),
            self.summary(document, session, title="Profile"),
            self.section(document, session, "experience", self.experience_block),
            self.section(document, session, "projects", self.project_block),
            self.additional_sections(document, session),
        ]
        return self.two_column(sidebar, main)
