"""Richard Sanchez layout: light gray page with blue accents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RecordView, RenderSession, ResumeTemplate

__all__ = ["RichardSanchezNewTemplate"]

_EXAMPLES = {
    "education": (
        {"degree": "Master of Business Management", "institution": "Wardiere University", "year": 2029},
        {"degree": "Bachelor of Business", "institution": "Wardiere University", "year": 2025},
    ),
    "experience": (
        {
            "title": "Marketing Manager",
            "company": "Borcelle Studio",
            "startDate": "2030",
            "current": True,
            "description": "Plan and run multi-channel campaigns for new products.",
        },
    ),
}


class RichardSanchezNewTemplate(ResumeTemplate):
    layout_id = "richard-sanchez-new"
    display_name = "Richard Sanchez"
    description = "Modern light gray with blue accents"
    year_offset = 1
    present_label = "PRESENT"
    uppercase_headings = True
    featured_sections = ("education", "experience", "skills", "projects", "languages")
    example_sections = frozenset({"education", "experience"})
    examples = _EXAMPLES
    palette = {
        "paper": "#F3F4F6",
        "sidebar-bg": "#E5E7EB",
        "accent": "#1D4ED8",
        "muted": "#374151",
        "heading-rule": "2px solid #1D4ED8",
    }

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.contact(document, session),
            self.section(document, session, "education", self.education_block),
            self.section(document, session, "skills", self.skill_block),
            self.section(document, session, "languages"),
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
            '<div class="r-record__title">{} | {}</div><div class="r-record__meta">{}</div>'
            '<div class="r-record__body">{}</div>'
        ).format(
            view.field("title", "Job Title"),
            view.field("company", "Company"),
            view.date_range(),
            view.field("description", "Describe your responsibilities and achievements", multiline=True),
        )
