"""Olivia Wilson Dark Blue layout.

Dark blue-grey sidebar with the core sections, and a main column that lays
out every section of the document, including the extended ones
(certifications, patents, mentoring, ...).  Extended sections render
nothing when empty unless the page is being edited.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from markupsafe import Markup

from resumify.constants import SECTIONS
from resumify.templates.base import RecordView, RenderSession, ResumeTemplate

__all__ = ["OliviaWilsonDarkBlueTemplate"]

_SIDEBAR_SECTIONS = ("education", "skills", "languages")
_MAIN_SECTIONS = ("experience", "projects")

_EXAMPLES = {
    "education": (
        {"degree": "Bachelor of Arts", "institution": "Wardiere University", "year": 2018},
        {"degree": "Master of Arts", "institution": "Wardiere University", "year": 2020},
    ),
    "references": (
        {"name": "Harumi Kobayashi", "company": "Wardiere Inc.", "title": "CEO", "phone": "123-456-7890"},
        {"name": "Bailey Dupont", "company": "Wardiere Inc.", "title": "CEO", "phone": "123-456-7890"},
    ),
}


class OliviaWilsonDarkBlueTemplate(ResumeTemplate):
    layout_id = "olivia-wilson-dark-blue"
    display_name = "Olivia Wilson Dark Blue"
    description = "Professional two-column with dark blue-grey sidebar"
    year_offset = 4
    present_label = "present"
    featured_sections = SECTIONS
    example_sections = frozenset({"education", "references"})
    examples = _EXAMPLES
    palette = {
        "sidebar-bg": "#2E3A4B",
        "sidebar-text": "#FFFFFF",
        "accent": "#2E3A4B",
        "muted": "#5A6677",
    }
    extra_css = ".resume--olivia-wilson-dark-blue .r-sidebar .r-heading{color:#fff}"

    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        sidebar = [self.contact(document, session)]
        sidebar += [self.section(document, session, key, self._block(key)) for key in _SIDEBAR_SECTIONS]

        main = [self.masthead(document, session), self.summary(document, session, title="Profile")]
        main += [self.section(document, session, key, self._block(key)) for key in _MAIN_SECTIONS]
        main += [
            self.section(document, session, key, self._block(key))
            for key in SECTIONS
            if key not in _SIDEBAR_SECTIONS and key not in _MAIN_SECTIONS
        ]
        main.append(self.additional_sections(document, session))
        return self.two_column(sidebar, main)

    def _block(self, key: str) -> Callable[[RecordView], Markup]:
        return {
            "education": self.education_block,
            "experience": self.experience_block,
            "skills": self.skill_block,
            "projects": self.project_block,
            "references": self._reference,
        }.get(key, self.generic_block)

    def _reference(self, view: RecordView) -> Markup:
        return Markup('<div class="r-record__title">{}</div><div class="r-record__meta">{} / {}</div>').format(
            view.field("name", "Reference Name"),
            view.field("company", "Company"),
            view.field("title", "Title"),
        )
