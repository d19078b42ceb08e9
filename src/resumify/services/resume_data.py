"""Data contracts for the canonical résumé document.

These TypedDicts describe the shape every layout renders from.  They are
documentation for readers and type checkers only: at runtime a document is a
plain ``dict`` whose section records may miss any field or carry extra ones.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypedDict

from resumify.constants import SCALAR_FIELDS, SECTIONS

__all__ = [
    "ResumeDocument",
    "ResumeEducationEntry",
    "ResumeExperienceEntry",
    "ResumeProjectEntry",
    "ResumeSkillEntry",
    "SectionRecord",
    "SocialMedia",
    "coerce_document",
    "empty_document",
    "to_save_payload",
]

SectionRecord = dict[str, Any]


class SocialMedia(TypedDict, total=False):
    """Profile links keyed by network."""

    linkedin: str
    github: str
    twitter: str
    portfolio: str
    website: str
    blog: str
    behance: str
    dribbble: str
    medium: str
    stackoverflow: str


class ResumeEducationEntry(TypedDict, total=False):
    """A single education record."""

    degree: str
    institution: str
    year: int | str  # graduation year or a preformatted "2016 - 2020"
    gpa: str


class ResumeExperienceEntry(TypedDict, total=False):
    """A single work-experience record."""

    title: str
    company: str
    startDate: str
    endDate: str | None
    current: bool
    description: str


class ResumeSkillEntry(TypedDict, total=False):
    """A single skill with an optional proficiency level."""

    name: str
    level: str


class ResumeProjectEntry(TypedDict, total=False):
    """A single project record."""

    name: str
    description: str
    technologies: list[str] | str
    url: str
    github: str


class ResumeDocument(TypedDict, total=False):
    """Top-level document handed to every layout's ``render()`` method."""

    name: str
    email: str
    phone: str
    summary: str
    location: str
    role: str
    additionalInfo: str
    template: str
    socialMedia: SocialMedia
    education: list[ResumeEducationEntry]
    experience: list[ResumeExperienceEntry]
    skills: list[ResumeSkillEntry]
    projects: list[ResumeProjectEntry]
    certifications: list[SectionRecord]
    trainings: list[SectionRecord]
    awards: list[SectionRecord]
    languages: list[SectionRecord]
    publications: list[SectionRecord]
    patents: list[SectionRecord]
    volunteerWork: list[SectionRecord]
    professionalMemberships: list[SectionRecord]
    conferences: list[SectionRecord]
    speakingEngagements: list[SectionRecord]
    teachingExperience: list[SectionRecord]
    mentoring: list[SectionRecord]
    leadershipRoles: list[SectionRecord]
    internships: list[SectionRecord]
    licenses: list[SectionRecord]
    references: list[SectionRecord]
    hobbies: list[SectionRecord]
    interests: list[SectionRecord]
    openSourceContributions: list[SectionRecord]


def empty_document() -> ResumeDocument:
    """Return a blank document: empty scalars, no links, empty sections."""
    document: dict[str, Any] = {field: "" for field in SCALAR_FIELDS}
    document["socialMedia"] = {}
    for section in SECTIONS:
        document[section] = []
    return document  # type: ignore[return-value]


def _coerce_record(item: Any) -> Any:
    """Wrap bare strings (the backend stores hobbies/interests that way)."""
    if isinstance(item, str):
        return {"name": item}
    return item


def coerce_document(raw: Mapping[str, Any] | None) -> ResumeDocument:
    """Normalize an externally supplied mapping into a well-formed document.

    Missing sections become empty lists, a bare record sitting in a section
    slot is wrapped in a list, bare strings inside a section become
    ``{"name": ...}`` records and ``socialMedia`` defaults to ``{}``.  Keys
    the document model does not know about (``_id``, ``template``, …) are
    kept untouched.

    Args:
        raw: Decoded JSON object, or ``None`` for a blank document.

    Returns:
        A new document; ``raw`` is not modified.
    """
    document: dict[str, Any] = dict(empty_document())
    if not raw:
        return document  # type: ignore[return-value]

    for key, value in raw.items():
        if key in SECTIONS:
            if value is None:
                value = []
            elif isinstance(value, Mapping):
                value = [dict(value)]
            elif isinstance(value, (list, tuple)):
                value = [_coerce_record(item) for item in value]
            else:
                value = [_coerce_record(value)]
        elif key == "socialMedia":
            value = dict(value) if isinstance(value, Mapping) else {}
        elif key in SCALAR_FIELDS and value is None:
            value = ""
        document[key] = value
    return document  # type: ignore[return-value]


def _split_technologies(value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        return [str(t).strip() for t in value if str(t).strip()]
    if isinstance(value, str):
        return [t.strip() for t in value.split(",") if t.strip()]
    return []


def to_save_payload(document: Mapping[str, Any]) -> dict[str, Any]:
    """Shape a document for the external save endpoint.

    The editor stores ``projects.N.technologies`` as whatever the user typed
    (usually a comma-separated string); the backend expects a list.  An
    experience marked ``current`` is saved with a ``null`` end date and
    skills are reduced to ``name``/``level``.  Every other key is passed
    through as-is.
    """
    payload = dict(document)

    payload["experience"] = [
        {
            **exp,
            "title": exp.get("title") or "",
            "company": exp.get("company") or "",
            "startDate": exp.get("startDate") or "",
            "endDate": None if exp.get("current") else (exp.get("endDate") or ""),
            "description": exp.get("description") or "",
            "current": bool(exp.get("current")),
        }
        for exp in document.get("experience") or []
        if isinstance(exp, Mapping)
    ]

    payload["skills"] = [
        {"name": skill.get("name") or "", **({"level": skill["level"]} if skill.get("level") else {})}
        for skill in document.get("skills") or []
        if isinstance(skill, Mapping)
    ]

    projects = []
    for proj in document.get("projects") or []:
        if not isinstance(proj, Mapping):
            continue
        entry = {
            "name": proj.get("name") or "",
            "description": proj.get("description") or "",
            "technologies": _split_technologies(proj.get("technologies")),
        }
        if proj.get("url"):
            entry["url"] = proj["url"]
        if proj.get("github"):
            entry["github"] = proj["github"]
        projects.append(entry)
    payload["projects"] = projects

    return payload
