"""Claudia Alves layout: dark brown sidebar, light beige main column."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RenderSession, ResumeTemplate

__all__ = ["ClaudiaAlvesTemplate"]


class ClaudiaAlvesTemplate(ResumeTemplate):
    layout_id = "claudia-alves"
    display_name = "Claudia Alves"
    description = "Dark brown sidebar with light beige main"
    year_offset = 4
    present_label = "Present"
    uppercase_headings = True
    featured_sections = ("education", "experience", "skills", "projects", "languages")
    palette = {
        "paper": "#F7F1E8",
        "sidebar-bg": "#4E342E",
        "sidebar-text": "#F7F1E8",
        "accent": "#4E342E",
        "muted": "#6D4C41",
        "heading-spacing": "1px",
    }
    extra_css = (
        ".resume--claudia-alves .r-sidebar .r-heading{color:#F7F1E8}"
        ".resume--claudia-alves .r-sidebar .r-record__subtitle,"
        ".resume--claudia-alves .r-sidebar .r-dates{color:#E0D3C3}"
    )

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.contact(document, session),
            self.section(document, session, "education", self.education_block),
            self.section(document, session, "skills", self.skill_block),
            self.section(document, session, "languages"),
        ]
        main = [
            self.masthead(document, session),
            self.summary(document, session, title="Profile"),
            self.section(document, session, "experience", self.experience_block),
            self.section(document, session, "projects", self.project_block),
            self.additional_sections(document, session),
        ]
        return self.two_column(sidebar, main)
