"""Derived display strings shared by every layout.

All helpers are pure and read-only: they never write derived text back into
the document.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = [
    "SKILL_LEVELS",
    "display_text",
    "format_date_range",
    "format_education_year",
    "format_technologies",
    "is_empty",
    "skill_level_dots",
]

SKILL_LEVELS: dict[str, int] = {
    "Expert": 5,
    "Advanced": 4,
    "Intermediate": 3,
    "Beginner": 2,
}
_DEFAULT_SKILL_DOTS = 3


def display_text(value: Any) -> str:
    """Return *value* as display text; ``None`` becomes ``""``."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else ""
    if isinstance(value, (list, tuple)):
        return format_technologies(value)
    return str(value)


def is_empty(value: Any) -> bool:
    """True for ``None``, blank strings, empty containers and ``False``."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def format_date_range(
    record: Mapping[str, Any],
    present: str = "Present",
    open_end_is_present: bool = True,
) -> str:
    """Return ``"<startDate> - <endDate>"`` for a dated record.

    ``current`` wins over ``endDate`` and shows the *present* label, whose
    casing each layout chooses.  A missing end date reads as *present* when
    *open_end_is_present* is set; otherwise the range collapses to the start
    date alone.

    >>> format_date_range({"startDate": "Jan 2020", "current": True})
    'Jan 2020 - Present'
    >>> format_date_range({"startDate": "2019", "endDate": "2021"}, present="present")
    '2019 - 2021'
    """
    start = display_text(record.get("startDate")).strip()
    if record.get("current"):
        end = present
    else:
        end = display_text(record.get("endDate")).strip()
        if not end and start and open_end_is_present:
            end = present

    if start and end:
        return f"{start} - {end}"
    return start or end


def format_education_year(record: Mapping[str, Any], offset: int, fallback: str = "") -> str:
    """Return the display year range of an education record.

    A string already containing ``-`` is passed through; a single year ``y``
    (number or numeric string) becomes ``"<y - offset> - <y>"``.  Layouts
    pick their own *offset*.

    >>> format_education_year({"year": 2020}, offset=4)
    '2016 - 2020'
    >>> format_education_year({"year": "2012 - 2016"}, offset=2)
    '2012 - 2016'
    """
    year = record.get("year")
    if year is None or year == "" or isinstance(year, bool):
        return fallback
    if isinstance(year, str):
        stripped = year.strip()
        if "-" in stripped or not stripped.isdigit():
            return stripped or fallback
        year = int(stripped)
    if isinstance(year, float) and year.is_integer():
        year = int(year)
    if isinstance(year, int):
        return f"{year - offset} - {year}"
    return str(year)


def skill_level_dots(level: Any) -> int:
    """Number of filled dots (out of five) for a skill *level*."""
    return SKILL_LEVELS.get(str(level or ""), _DEFAULT_SKILL_DOTS)


def format_technologies(value: Any) -> str:
    """Join a technology list with ``", "``; strings pass through."""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value if not is_empty(item))
    return display_text(value)
