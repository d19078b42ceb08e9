"""Riaan Chandran layout: dark theme with orange accents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RecordView, RenderSession, ResumeTemplate

__all__ = ["RiaanChandranTemplate"]


class RiaanChandranTemplate(ResumeTemplate):
    layout_id = "riaan-chandran"
    display_name = "Riaan Chandran"
    description = "Modern dark theme with orange accents"
    year_offset = 2
    headings = {"experience": "Work Experience"}
    palette = {
        "sidebar-bg": "#1F1F1F",
        "sidebar-text": "#F2F2F2",
        "accent": "#F97316",
        "muted": "#9CA3AF",
        "sidebar-width": "40%",
    }
    extra_css = (
        ".resume--riaan-chandran .r-sidebar .r-record__subtitle{color:#d1d5db}"
        ".resume--riaan-chandran .r-heading{text-transform:none;border-bottom:2px solid #F97316}"
    )

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.summary(document, session, title="About Me"),
            self.section(document, session, "education", self.education_block),
            self.section(document, session, "skills", self.skill_block),
            self.section(document, session, "projects", self.project_block),
        ]
        main = [
            self.masthead(document, session, extra=self._contact_line(document, session)),
            self.section(document, session, "experience", self._experience),
            self.additional_sections(document, session),
        ]
        return self.two_column(sidebar, main)

    def _contact_line(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        items = self.contact_items(document, session)
        if not items:
            return Markup("")
        return Markup('<ul class="r-contact-list r-contact-list--inline">{}</ul>').format(items)

    def _experience(self, view: RecordView) -> Markup:
        # Dates sit on their own line above the role.
        return Markup(
            '<div class="r-record__meta">{}</div><div class="r-record__title">{}</div>'
            '<div class="r-record__subtitle">{}</div><div class="r-record__body">{}</div>'
        ).format(
            view.date_range(),
            view.field("title", "Job Title"),
            view.field("company", "Company"),
            view.field("description", "Describe your responsibilities and achievements", multiline=True),
        )
