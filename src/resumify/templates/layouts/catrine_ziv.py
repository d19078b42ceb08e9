"""Catrine Ziv layout: professional two-column with a dark green-grey sidebar."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RecordView, RenderSession, ResumeTemplate

__all__ = ["CatrineZivTemplate"]


class CatrineZivTemplate(ResumeTemplate):
    layout_id = "catrine-ziv"
    display_name = "Catrine Ziv"
    description = "Professional two-column with dark green-grey sidebar"
    year_offset = 1
    present_label = "present"
    palette = {
        "sidebar-bg": "#34423D",
        "sidebar-text": "#EEF2EF",
        "accent": "#34423D",
        "muted": "#5B6B65",
        "heading-rule": "2px solid #34423D",
    }
    extra_css = ".resume--catrine-ziv .r-sidebar .r-heading{color:#EEF2EF;border-color:#9FB3AB}"

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.contact(document, session),
            self.section(document, session, "skills", self._skill),
            self.section(document, session, "education", self.education_block),
        ]
        main = [
            self.masthead(document, session),
            self.summary(document, session, title="Profile"),
            self.section(document, session, "experience", self.experience_block),
            self.section(document, session, "projects", self.project_block),
            self.additional_sections(document, session),
        ]
        return self.two_column(sidebar, main)

    def _skill(self, view: RecordView) -> Markup:
        return Markup('<span class="r-skill__name">{}</span>{}').format(
            view.field("name", "Skill"), view.skill_dots()
        )
