"""Services"""

from resumify.services.formatting import (
    display_text,
    format_date_range,
    format_education_year,
    format_technologies,
    skill_level_dots,
)
from resumify.services.path_mutator import PathError, get_value, mutate, parse_path
from resumify.services.resume_data import coerce_document, empty_document, to_save_payload

__all__ = [
    "PathError",
    "coerce_document",
    "display_text",
    "empty_document",
    "format_date_range",
    "format_education_year",
    "format_technologies",
    "get_value",
    "mutate",
    "parse_path",
    "skill_level_dots",
    "to_save_payload",
]
