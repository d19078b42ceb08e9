"""Juliana Silva layout: warm peach sidebar, lower-case "present" label."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RenderSession, ResumeTemplate

__all__ = ["JulianaSilvaTemplate"]

_EXAMPLES = {
    "experience": (
        {
            "title": "Content Strategist",
            "company": "Fauget",
            "startDate": "Oct 2019",
            "current": True,
            "description": "Shape the editorial calendar across web and social.",
        },
    ),
}


class JulianaSilvaTemplate(ResumeTemplate):
    layout_id = "juliana-silva"
    display_name = "Juliana Silva"
    description = "Elegant two-column with light peach/beige sidebar"
    year_offset = 2
    present_label = "present"
    uppercase_headings = True
    featured_sections = ("education", "experience", "skills", "projects", "languages")
    example_sections = frozenset({"experience"})
    examples = _EXAMPLES
    palette = {
        "sidebar-bg": "#FBE3D2",
        "accent": "#7C4A2D",
        "muted": "#8D6E63",
        "heading-spacing": "2px",
    }

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.masthead(document, session),
            self.contact(document, session),
            self.section(document, session, "skills", self.skill_block),
            self.section(document, session, "languages"),
        ]
        main = [
            self.summary(document, session, title="Profile"),
            self.section(document, session, "experience", self.experience_block),
            self.section(document, session, "education", self.education_block),
            self.section(document, session, "projects", self.project_block),
            self.additional_sections(document, session),
        ]
        return self.two_column(sidebar, main)
