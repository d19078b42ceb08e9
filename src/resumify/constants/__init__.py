from __future__ import annotations

from resumify.constants.sections import (
    SCALAR_FIELDS,
    SECTION_FIELDS,
    SECTION_TITLES,
    SECTIONS,
    SOCIAL_MEDIA_KEYS,
    Section,
)

__all__ = [
    "Section",
    "SECTIONS",
    "SCALAR_FIELDS",
    "SECTION_FIELDS",
    "SECTION_TITLES",
    "SOCIAL_MEDIA_KEYS",
]
