"""Adora Montminy layout.

Creative full-width charcoal banner with a light pink accent, followed by a
narrow details column and a wide career column.  Headings are set in
spaced capitals.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RecordView, RenderSession, ResumeTemplate

__all__ = ["AdoraMontminyTemplate"]

_EXAMPLES = {
    "experience": (
        {
            "title": "Marketing Assistant",
            "company": "Borcelle",
            "startDate": "2011",
            "endDate": "2012",
            "description": "Supported campaign planning and weekly reporting.",
        },
        {
            "title": "Marketing Manager",
            "company": "Borcelle",
            "startDate": "2012",
            "current": True,
            "description": "Lead a team of five across brand and digital channels.",
        },
    ),
}


class AdoraMontminyTemplate(ResumeTemplate):
    """Charcoal banner, pink accent, two columns below."""

    layout_id = "adora-montminy"
    display_name = "Adora Montminy"
    description = "Creative dark charcoal with light pink accent"
    year_offset = 4
    present_label = "Present"
    uppercase_headings = True
    example_sections = frozenset({"experience"})
    examples = _EXAMPLES
    headings = {"experience": "Work Experience"}
    palette = {
        "header-bg": "#2F2F2F",
        "header-text": "#F8E1E7",
        "sidebar-bg": "#FFFFFF",
        "accent": "#1A1A1A",
        "muted": "#555555",
        "heading-spacing": "1px",
        "heading-rule": "2px solid #F4C6D3",
    }
    extra_css = ".resume--adora-montminy .r-header .r-name{color:#F8E1E7;letter-spacing:4px}"

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.contact(document, session),
            self.section(document, session, "education", self.education_block),
            self.section(document, session, "skills", self.skill_block),
        ]
        main = [
            self.summary(document, session, title="Profile"),
            self.section(document, session, "experience", self._experience),
            self.section(document, session, "projects", self.project_block),
            self.additional_sections(document, session),
        ]
        return self.masthead(document, session) + self.two_column(sidebar, main)

    def _experience(self, view: RecordView) -> Markup:
        return Markup(
            '<div class="r-record__title">{}</div><div class="r-record__subtitle">{} | {}</div>'
            '<div class="r-record__body">{}</div>'
        ).format(
            view.field("title", "Job Title"),
            view.field("company", "Company"),
            view.date_range(),
            view.field("description", "Key achievements", multiline=True),
        )
