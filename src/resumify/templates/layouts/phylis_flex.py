"""Phylis Flex layout: clean single column under a light gray header band."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RenderSession, ResumeTemplate

__all__ = ["PhylisFlexTemplate"]

_EXAMPLES = {
    "education": (
        {"degree": "Diploma in Graphic Design", "institution": "Fauget Academy", "year": 2016},
        {"degree": "Bachelor of Fine Arts", "institution": "Borcelle Academy", "year": 2020},
    ),
}


class PhylisFlexTemplate(ResumeTemplate):
    layout_id = "phylis-flex"
    display_name = "Phylis Flex"
    description = "Clean design with light gray header"
    year_offset = 2
    present_label = "Present"
    uppercase_headings = True
    example_sections = frozenset({"education"})
    examples = _EXAMPLES
    palette = {
        "header-bg": "#E5E5E5",
        "accent": "#262626",
        "muted": "#525252",
        "heading-spacing": "2px",
        "heading-rule": "1px solid #262626",
    }
    extra_css = ".resume--phylis-flex .r-contact-list{display:flex;gap:16px;flex-wrap:wrap;margin-top:8px}"

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        contact = self.contact_items(document, session)
        header = self.masthead(
            document,
            session,
            extra=Markup('<ul class="r-contact-list">{}</ul>').format(contact) if contact else "",
        )
        return self.single_column(
            header,
            [
                self.summary(document, session, title="Profile"),
                self.section(document, session, "experience", self.experience_block),
                self.section(document, session, "education", self.education_block),
                self.section(document, session, "skills", self.skill_block),
                self.section(document, session, "projects", self.project_block),
                self.additional_sections(document, session),
            ],
        )
