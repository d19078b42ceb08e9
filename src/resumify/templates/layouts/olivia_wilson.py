"""Olivia Wilson layout.

Elegant two-column page with a light peach sidebar.  An experience entry
with no end date shows only its start date rather than a "Present" label,
and empty education, experience and reference sections show sample entries
in read mode.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RecordView, RenderSession, ResumeTemplate

__all__ = ["OliviaWilsonTemplate"]

_EXAMPLES = {
    "education": (
        {"degree": "Bachelor of Design", "institution": "Borcelle University", "year": 2019},
        {"degree": "Master of Design", "institution": "Borcelle University", "year": 2021},
    ),
    "experience": (
        {
            "title": "Junior Designer",
            "company": "Arowwai Industries",
            "startDate": "2017",
            "endDate": "2019",
            "description": "Produced layouts for print and web campaigns.",
        },
        {
            "title": "Designer",
            "company": "Arowwai Industries",
            "startDate": "2019",
            "endDate": "2021",
            "description": "Led the refresh of the company style guide.",
        },
        {
            "title": "Senior Designer",
            "company": "Arowwai Industries",
            "startDate": "2021",
            "current": True,
            "description": "Mentor junior designers and own the design system.",
        },
    ),
    "references": (
        {"name": "Harumi Kobayashi", "company": "Wardiere Inc.", "title": "CEO", "phone": "123-456-7890"},
        {"name": "Bailey Dupont", "company": "Wardiere Inc.", "title": "CEO", "phone": "123-456-7890"},
    ),
}


class OliviaWilsonTemplate(ResumeTemplate):
    """Peach sidebar; an open-ended job shows its start date only."""

    layout_id = "olivia-wilson"
    display_name = "Olivia Wilson"
    description = "Elegant two-column with light peach/beige sidebar"
    year_offset = 3
    present_label = "Present"
    open_end_is_present = False
    featured_sections = ("education", "experience", "skills", "projects", "references")
    example_sections = frozenset({"education", "experience", "references"})
    examples = _EXAMPLES
    palette = {
        "sidebar-bg": "#F6E7DC",
        "accent": "#3F3A36",
        "muted": "#6B625B",
        "font": "Georgia, serif",
    }
    extra_css = ".resume--olivia-wilson .r-name{font-weight:400;letter-spacing:2px}"

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.contact(document, session),
            self.summary(document, session, title="About Me"),
            self.section(document, session, "skills", self.skill_block),
        ]
        main = [
            self.masthead(document, session),
            self.section(document, session, "education", self.education_block),
            self.section(document, session, "experience", self._experience),
            self.section(document, session, "projects", self.project_block),
            self.section(document, session, "references", self._reference),
            self.additional_sections(document, session),
        ]
        return self.two_column(sidebar, main)

    def _experience(self, view: RecordView) -> Markup:
        return Markup(
            '<div class="r-record__meta">{}</div><div class="r-record__subtitle">{}</div>'
            '<div class="r-record__title">{}</div><div class="r-record__body">{}</div>'
        ).format(
            view.date_range(),
            view.field("company", "Arowwai Industries"),
            view.field("title", "Job Title"),
            view.field("description", "Describe your responsibilities and achievements", multiline=True),
        )

    def _reference(self, view: RecordView) -> Markup:
        return Markup(
            '<div class="r-record__title">{}</div><div class="r-record__meta">{} / {}</div>'
            '<div class="r-record__meta">{}</div>'
        ).format(
            view.field("name", "Reference Name"),
            view.field("company", "Company"),
            view.field("title", "Title"),
            view.field("phone", "Phone"),
        )
