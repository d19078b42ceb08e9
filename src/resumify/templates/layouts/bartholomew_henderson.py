"""Bartholomew Henderson layout: dark blue sidebar, white main column."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RecordView, RenderSession, ResumeTemplate

__all__ = ["BartholomewHendersonTemplate"]


class BartholomewHendersonTemplate(ResumeTemplate):
    layout_id = "bartholomew-henderson"
    display_name = "Bartholomew Henderson"
    description = "Dark blue sidebar with white main"
    year_offset = 2
    present_label = "Present"
    uppercase_headings = True
    palette = {
        "sidebar-bg": "#172554",
        "sidebar-text": "#FFFFFF",
        "accent": "#172554",
        "muted": "#475569",
        "heading-spacing": "1px",
        "heading-rule": "1px solid #172554",
    }
    extra_css = (
        ".resume--bartholomew-henderson .r-sidebar .r-heading{color:#fff;border-color:#93C5FD}"
        ".resume--bartholomew-henderson .r-sidebar .r-dates{color:#BFDBFE}"
    )

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.contact(document, session),
            self.section(document, session, "education", self._education),
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

    def _education(self, view: RecordView) -> Markup:
        # Years first, then institution and degree.
        gpa = Markup("")
        if view.has("gpa") or view.editable:
            gpa = Markup('<div class="r-record__meta">GPA: {}</div>').format(view.field("gpa", "GPA"))
        return Markup(
            '<div class="r-record__meta">{}</div><div class="r-record__title">{}</div>'
            '<div class="r-record__subtitle">{}</div>{}'
        ).format(
            view.education_year(),
            view.field("institution", "University"),
            view.field("degree", "Degree"),
            gpa,
        )
