"""Pydantic schemas for stored resume endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ResumeSummaryResponse(BaseModel):
    """One stored resume, as listed on the dashboard."""

    id: str = Field(description="Backend resume ID")
    name: str = Field("", description="Name on the resume")
    layout_id: str = Field(description="Layout the resume is shown with")
    updated_at: str | None = Field(None, description="Last update reported by the backend")


class ResumeDeletedResponse(BaseModel):
    """Result of deleting a stored resume."""

    deleted_id: str
