"""Korina Villanueva layout.

Elegant two-column page: a light beige sidebar carrying contact details,
education and skills (rated with dots), and a white main column with the
header, experience, projects and languages.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RecordView, RenderSession, ResumeTemplate

__all__ = ["KorinaVillanuevaTemplate"]


class KorinaVillanuevaTemplate(ResumeTemplate):
    """Two-column layout with a light beige sidebar."""

    layout_id = "korina-villanueva"
    display_name = "Korina Villanueva"
    description = "Elegant two-column with light beige sidebar"
    year_offset = 2
    present_label = "Present"
    featured_sections = ("education", "experience", "skills", "projects", "languages")
    headings = {"languages": "Language"}
    palette = {
        "sidebar-bg": "#F5F0E8",
        "accent": "#6B4E3D",
        "text": "#4A3728",
        "muted": "#6B4E3D",
    }
    extra_css = ".resume--korina-villanueva .r-name{font-family:Georgia,serif;font-weight:400;font-size:34px}"

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.contact(document, session),
            self.section(document, session, "education", self.education_block),
            self.section(document, session, "skills", self._skill),
        ]
        main = [
            self.masthead(document, session),
            self.summary(document, session, title="About Me"),
            self.section(document, session, "experience", self.experience_block),
            self.section(document, session, "projects", self.project_block),
            self.section(document, session, "languages"),
            self.additional_sections(document, session),
        ]
        return self.two_column(sidebar, main)

    def _skill(self, view: RecordView) -> Markup:
        return Markup('<span class="r-skill__name">{}</span>{}').format(
            view.field("name", "Skill"), view.skill_dots()
        )
