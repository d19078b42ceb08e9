"""Donna Stroupe layout.

Light gray sidebar and centred section headings.  Empty education and
reference sections show sample entries in read mode.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RecordView, RenderSession, ResumeTemplate

__all__ = ["DonnaStroupeTemplate"]

_EXAMPLES = {
    "education": (
        {"degree": "Master of Business Management", "institution": "Wardiere University", "year": 2020},
        {"degree": "Bachelor of Business", "institution": "Wardiere University", "year": 2016},
    ),
    "references": (
        {"name": "Harumi Kobayashi", "company": "Wardiere Inc.", "title": "CEO", "phone": "123-456-7890"},
        {"name": "Bailey Dupont", "company": "Wardiere Inc.", "title": "CEO", "phone": "123-456-7890"},
    ),
}


class DonnaStroupeTemplate(ResumeTemplate):
    layout_id = "donna-stroupe"
    display_name = "Donna Stroupe"
    description = "Light gray sidebar with centered sections"
    year_offset = 4
    present_label = "present"
    uppercase_headings = True
    featured_sections = ("education", "experience", "skills", "projects", "references")
    example_sections = frozenset({"education", "references"})
    examples = _EXAMPLES
    palette = {
        "sidebar-bg": "#EDEDED",
        "accent": "#333333",
        "muted": "#5F5F5F",
        "heading-spacing": "1px",
    }
    extra_css = (
        ".resume--donna-stroupe .r-heading{text-align:center}"
        ".resume--donna-stroupe .r-header{text-align:center}"
    )

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [
            self.contact(document, session),
            self.section(document, session, "education", self.education_block),
            self.section(document, session, "skills", self.skill_block),
        ]
        main = [
            self.masthead(document, session),
            self.summary(document, session, title="About Me"),
            self.section(document, session, "experience", self.experience_block),
            self.section(document, session, "projects", self.project_block),
            self.section(document, session, "references", self._reference),
            self.additional_sections(document, session),
        ]
        return self.two_column(sidebar, main)

    def _reference(self, view: RecordView) -> Markup:
        return Markup(
            '<div class="r-record__title">{}</div><div class="r-record__subtitle">{} / {}</div>'
            '<div class="r-record__meta">{}</div>'
        ).format(
            view.field("name", "Reference Name"),
            view.field("company", "Company"),
            view.field("title", "Title"),
            view.field("phone", "Phone"),
        )
