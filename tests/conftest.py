from __future__ import annotations

import copy
from typing import Any

import pytest

SAMPLE_DOCUMENT: dict[str, Any] = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "phone": "555-0100",
    "summary": "Backend engineer focused on APIs",
    "location": "Toronto",
    "role": "Platform Engineer",
    "additionalInfo": "Open to relocation",
    "socialMedia": {"linkedin": "linkedin.com/in/janedoe", "github": "github.com/janedoe"},
    "education": [
        {"degree": "BSc Computer Science", "institution": "Kelowna University", "year": 2020, "gpa": "3.9"},
    ],
    "experience": [
        {
            "title": "Software Engineer",
            "company": "Acme",
            "startDate": "Jan 2021",
            "endDate": "Dec 2023",
            "current": False,
            "description": "Built billing services",
        },
        {
            "title": "Senior Engineer",
            "company": "Globex",
            "startDate": "Jan 2024",
            "current": True,
            "description": "Leads the payments team",
        },
    ],
    "skills": [{"name": "Python", "level": "Expert"}, {"name": "SQL"}],
    "projects": [
        {
            "name": "Ledger",
            "description": "Double-entry bookkeeping library",
            "technologies": ["Python", "FastAPI"],
            "url": "ledger.dev",
        },
    ],
    "certifications": [
        {"name": "AWS Solutions Architect", "issuer": "Amazon", "date": "2022", "credentialId": "ABC123"},
    ],
    "languages": [{"name": "French", "proficiency": "Fluent"}],
    "volunteerWork": [
        {
            "organization": "Code Club",
            "role": "Mentor",
            "startDate": "2019",
            "endDate": "2020",
            "description": "Taught kids Python",
        },
    ],
    "hobbies": [{"name": "Climbing"}],
}

# Every section populated, plus keys no layout places by name.
FULL_DOCUMENT: dict[str, Any] = {
    **SAMPLE_DOCUMENT,
    "socialMedia": {
        "linkedin": "linkedin.com/in/janedoe",
        "github": "github.com/janedoe",
        "mastodon": "hachyderm.io/@janedoe",
    },
    "trainings": [
        {
            "name": "Kubernetes Fundamentals",
            "institution": "Linux Foundation",
            "date": "Mar 2022",
            "duration": "40 hours",
            "description": "Cluster operations",
        },
    ],
    "awards": [
        {"name": "Hackathon Winner", "organization": "DevWeek", "year": "2021", "description": "Best fintech demo"},
    ],
    "publications": [
        {
            "title": "Scaling Ledgers",
            "authors": ["Jane Doe", "Sam Lee"],
            "journal": "Systems Quarterly",
            "year": "2023",
            "doi": "10.1000/ledger",
            "url": "systems.example.com/ledger",
            "type": "Journal Article",
        },
    ],
    "patents": [
        {
            "title": "Streaming Reconciliation",
            "patentNumber": "US-1234567",
            "issuedDate": "Jun 2023",
            "inventors": "Jane Doe",
            "description": "Reconciles payments in flight",
            "url": "patents.example.com/1234567",
        },
    ],
    "professionalMemberships": [
        {
            "organization": "ACM",
            "role": "Member",
            "startDate": "2018",
            "endDate": "2024",
            "description": "Local chapter",
        },
    ],
    "conferences": [
        {
            "name": "PyCon",
            "location": "Pittsburgh",
            "date": "May 2023",
            "type": "Attendee",
            "description": "Typing track",
        },
    ],
    "speakingEngagements": [
        {
            "title": "Idempotent Payments",
            "event": "PyData Toronto",
            "location": "Toronto",
            "date": "Oct 2023",
            "description": "Retries without double charges",
            "url": "talks.example.com/idempotent",
        },
    ],
    "teachingExperience": [
        {
            "course": "Distributed Systems",
            "institution": "Kelowna University",
            "startDate": "Sep 2020",
            "endDate": "Apr 2021",
            "description": "Teaching assistant",
            "level": "Undergraduate",
        },
    ],
    "mentoring": [
        {
            "menteeName": "Alex Kim",
            "organization": "Women in Tech",
            "startDate": "2022",
            "endDate": "2023",
            "description": "Weekly pairing sessions",
            "focus": "Career growth",
        },
    ],
    "leadershipRoles": [
        {
            "title": "Guild Lead",
            "organization": "Globex",
            "startDate": "Feb 2024",
            "endDate": "Aug 2024",
            "description": "Ran the backend guild",
        },
    ],
    "internships": [
        {
            "title": "Engineering Intern",
            "company": "Initech",
            "startDate": "May 2019",
            "endDate": "Aug 2019",
            "description": "Wrote report exporters",
        },
    ],
    "licenses": [
        {
            "name": "Professional Engineer",
            "issuingOrganization": "PEO",
            "licenseNumber": "PE-998877",
            "issueDate": "Jan 2023",
            "expiryDate": "Jan 2026",
            "state": "Ontario",
        },
    ],
    "references": [
        {
            "name": "Morgan Reyes",
            "title": "Engineering Manager",
            "company": "Acme",
            "email": "morgan@example.com",
            "phone": "555-0199",
            "relationship": "Former manager",
        },
    ],
    "hobbies": [{"name": "Climbing", "description": "Bouldering twice a week", "since": "2015"}],
    "interests": [{"name": "Open data", "description": "Civic datasets"}],
    "openSourceContributions": [
        {
            "project": "httpx",
            "url": "github.com/encode/httpx",
            "description": "Transport fixes",
            "contributions": "12 merged pull requests",
        },
    ],
}


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """A typical document; each test gets its own copy."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def full_document() -> dict[str, Any]:
    """A document with every section filled in."""
    return copy.deepcopy(FULL_DOCUMENT)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's .env or shell settings out of the tests."""
    for name in (
        "RESUMIFY_API_ROOT",
        "RESUMIFY_GENERATE_TIMEOUT",
        "RESUMIFY_REQUEST_TIMEOUT",
        "RESUMIFY_RETRIES",
        "RESUMIFY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
