"""Field taxonomy of the canonical résumé document.

The field lists below describe what each section *usually* carries.  They
drive display order and section headings; they are never used to reject or
strip data, since every record may be missing any field or carry extra ones.
"""

from __future__ import annotations

from enum import StrEnum

__all__ = [
    "SCALAR_FIELDS",
    "SECTION_FIELDS",
    "SECTION_TITLES",
    "SOCIAL_MEDIA_KEYS",
    "Section",
    "SECTIONS",
]


class Section(StrEnum):
    """Repeated-section keys of a résumé document."""

    EDUCATION = "education"
    EXPERIENCE = "experience"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    TRAININGS = "trainings"
    AWARDS = "awards"
    LANGUAGES = "languages"
    PUBLICATIONS = "publications"
    PATENTS = "patents"
    VOLUNTEER_WORK = "volunteerWork"
    PROFESSIONAL_MEMBERSHIPS = "professionalMemberships"
    CONFERENCES = "conferences"
    SPEAKING_ENGAGEMENTS = "speakingEngagements"
    TEACHING_EXPERIENCE = "teachingExperience"
    MENTORING = "mentoring"
    LEADERSHIP_ROLES = "leadershipRoles"
    INTERNSHIPS = "internships"
    LICENSES = "licenses"
    REFERENCES = "references"
    HOBBIES = "hobbies"
    INTERESTS = "interests"
    OPEN_SOURCE_CONTRIBUTIONS = "openSourceContributions"


# Display order of sections; also the order of the shared "additional" block.
SECTIONS: tuple[str, ...] = tuple(section.value for section in Section)

SCALAR_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "phone",
    "summary",
    "location",
    "role",
    "additionalInfo",
)

SOCIAL_MEDIA_KEYS: tuple[str, ...] = (
    "linkedin",
    "github",
    "twitter",
    "portfolio",
    "website",
    "blog",
    "behance",
    "dribbble",
    "medium",
    "stackoverflow",
)

# Usual fields per section, most prominent first.
SECTION_FIELDS: dict[str, tuple[str, ...]] = {
    Section.EDUCATION: ("degree", "institution", "year", "gpa"),
    Section.EXPERIENCE: ("title", "company", "startDate", "endDate", "current", "description"),
    Section.SKILLS: ("name", "level"),
    Section.PROJECTS: ("name", "description", "technologies", "url", "github"),
    Section.CERTIFICATIONS: ("name", "issuer", "date", "expiryDate", "credentialId", "url"),
    Section.TRAININGS: ("name", "institution", "date", "duration", "description"),
    Section.AWARDS: ("name", "organization", "year", "description"),
    Section.LANGUAGES: ("name", "proficiency"),
    Section.PUBLICATIONS: ("title", "authors", "journal", "year", "doi", "url", "type"),
    Section.PATENTS: (
        "title",
        "patentNumber",
        "issuedDate",
        "inventors",
        "description",
        "url",
    ),
    Section.VOLUNTEER_WORK: (
        "organization",
        "role",
        "startDate",
        "endDate",
        "current",
        "description",
        "hoursPerWeek",
    ),
    Section.PROFESSIONAL_MEMBERSHIPS: (
        "organization",
        "role",
        "startDate",
        "endDate",
        "current",
        "description",
    ),
    Section.CONFERENCES: ("name", "location", "date", "type", "description"),
    Section.SPEAKING_ENGAGEMENTS: ("title", "event", "location", "date", "description", "url"),
    Section.TEACHING_EXPERIENCE: (
        "course",
        "institution",
        "startDate",
        "endDate",
        "current",
        "description",
        "level",
    ),
    Section.MENTORING: (
        "menteeName",
        "organization",
        "startDate",
        "endDate",
        "current",
        "description",
        "focus",
    ),
    Section.LEADERSHIP_ROLES: (
        "title",
        "organization",
        "startDate",
        "endDate",
        "current",
        "description",
    ),
    Section.INTERNSHIPS: ("title", "company", "startDate", "endDate", "description"),
    Section.LICENSES: (
        "name",
        "issuingOrganization",
        "licenseNumber",
        "issueDate",
        "expiryDate",
        "state",
    ),
    Section.REFERENCES: ("name", "title", "company", "email", "phone", "relationship"),
    Section.HOBBIES: ("name", "description"),
    Section.INTERESTS: ("name", "description"),
    Section.OPEN_SOURCE_CONTRIBUTIONS: ("project", "url", "description", "contributions"),
}

SECTION_TITLES: dict[str, str] = {
    Section.EDUCATION: "Education",
    Section.EXPERIENCE: "Experience",
    Section.SKILLS: "Skills",
    Section.PROJECTS: "Projects",
    Section.CERTIFICATIONS: "Certifications",
    Section.TRAININGS: "Trainings",
    Section.AWARDS: "Awards",
    Section.LANGUAGES: "Languages",
    Section.PUBLICATIONS: "Publications",
    Section.PATENTS: "Patents",
    Section.VOLUNTEER_WORK: "Volunteer Work",
    Section.PROFESSIONAL_MEMBERSHIPS: "Professional Memberships",
    Section.CONFERENCES: "Conferences",
    Section.SPEAKING_ENGAGEMENTS: "Speaking Engagements",
    Section.TEACHING_EXPERIENCE: "Teaching Experience",
    Section.MENTORING: "Mentoring",
    Section.LEADERSHIP_ROLES: "Leadership Roles",
    Section.INTERNSHIPS: "Internships",
    Section.LICENSES: "Licenses",
    Section.REFERENCES: "References",
    Section.HOBBIES: "Hobbies",
    Section.INTERESTS: "Interests",
    Section.OPEN_SOURCE_CONTRIBUTIONS: "Open Source Contributions",
}
