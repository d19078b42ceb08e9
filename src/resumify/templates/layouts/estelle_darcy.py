"""Estelle Darcy layout: clean two columns with a light grey sidebar."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RecordView, RenderSession, ResumeTemplate

__all__ = ["EstelleDarcyTemplate"]

_EXAMPLES = {
    "experience": (
        {
            "title": "Operations Lead",
            "company": "Ginyard International Co.",
            "startDate": "2021",
            "current": True,
            "description": "Coordinate logistics for three regional offices.",
        },
    ),
    "education": (
        {"degree": "Bachelor of Business Administration", "institution": "Rimberio University", "year": "Graduated May 2018"},
    ),
    "awards": (
        {"name": "Employee of the Year", "organization": "Arowwai Industries", "year": "June 2019"},
    ),
}


class EstelleDarcyTemplate(ResumeTemplate):
    layout_id = "estelle-darcy"
    display_name = "Estelle Darcy"
    description = "Clean two-column with light grey sidebar"
    year_offset = 4
    present_label = "Present"
    featured_sections = ("education", "experience", "skills", "projects", "awards")
    example_sections = frozenset({"experience", "education", "awards"})
    examples = _EXAMPLES
    palette = {
        "sidebar-bg": "#EFEFEF",
        "accent": "#2B2B2B",
        "muted": "#666666",
        "heading-rule": "1px solid #BDBDBD",
    }

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.contact(document, session),
            self.section(document, session, "skills", self.skill_block),
        ]
        main = [
            self.masthead(document, session),
            self.summary(document, session, title="Summary"),
            self.section(document, session, "experience", self._experience),
            self.section(document, session, "education", self._education),
            self.section(document, session, "projects", self.project_block),
            self.section(document, session, "awards", self._award),
            self.additional_sections(document, session),
        ]
        return self.two_column(sidebar, main)

    def _experience(self, view: RecordView) -> Markup:
        return Markup(
            '<div class="r-record__title">{}</div><div class="r-record__subtitle">{} | {}</div>'
            '<div class="r-record__body">{}</div>'
        ).format(
            view.field("title", "Job Title"),
            view.field("company", "Ginyard International Co."),
            view.date_range(),
            view.field("description", "Describe your responsibilities and achievements", multiline=True),
        )

    def _education(self, view: RecordView) -> Markup:
        return Markup('<div class="r-record__title">{}</div><div class="r-record__subtitle">{}, {}</div>').format(
            view.field("degree", "Degree"),
            view.field("institution", "Rimberio University"),
            view.education_year(),
        )

    def _award(self, view: RecordView) -> Markup:
        return Markup('<div class="r-record__title">{}</div><div class="r-record__subtitle">{}, {}</div>').format(
            view.field("name", "Award"),
            view.field("organization", "Organization"),
            view.field("year", "Year"),
        )
