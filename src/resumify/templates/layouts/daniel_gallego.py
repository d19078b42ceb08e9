"""Daniel Gallego layout.

Single column.  Every section heading sits on a full-width grey bar and the
contact details run in one line under the name.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from resumify.templates.base import RenderSession, ResumeTemplate

__all__ = ["DanielGallegoTemplate"]


class DanielGallegoTemplate(ResumeTemplate):
    layout_id = "daniel-gallego"
    display_name = "Daniel Gallego"
    description = "Single column with grey header bars"
    year_offset = 2
    present_label = "Present"
    uppercase_headings = True
    featured_sections = ("education", "experience", "skills", "projects", "languages")
    palette = {
        "accent": "#2D2D2D",
        "muted": "#555555",
        "heading-spacing": "2px",
    }
    extra_css = (
        ".resume--daniel-gallego .r-heading{background:#D9D9D9;padding:4px 10px}"
        ".resume--daniel-gallego .r-header{text-align:center}"
        ".resume--daniel-gallego .r-contact-list{display:flex;justify-content:center;gap:14px;flex-wrap:wrap}"
    )

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
                self.section(document, session, "languages"),
                self.additional_sections(document, session),
            ],
        )
