"""Pydantic schemas for document editing endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class NotificationResponse(BaseModel):
    """Transient message produced by a backend call."""

    level: str
    message: str
    category: str = ""


class DocumentResponse(BaseModel):
    """Current state of an editor session."""

    id: str = Field(description="Editor session ID")
    layout_id: str = Field(description="Active layout")
    document: dict[str, Any] = Field(description="Canonical resume document")
    notifications: list[NotificationResponse] = Field(default_factory=list)


class DocumentCreateRequest(BaseModel):
    """Request schema for opening an editor session."""

    document: dict[str, Any] | None = Field(None, description="Initial document; blank when omitted")
    layout_id: str | None = Field(None, description="Layout ID; defaults to the document's template")


class DocumentReplaceRequest(BaseModel):
    """Request schema for replacing the whole document."""

    document: dict[str, Any] = Field(..., description="New document")


class DocumentEditRequest(BaseModel):
    """Request schema for a single leaf edit."""

    path: str = Field(..., min_length=1, description="Dotted path, e.g. experience.0.title")
    value: Any = Field(None, description="New leaf value")


class LeafCommitRequest(BaseModel):
    """Value committed from an editable leaf of the last render."""

    value: Any = Field(None, description="New leaf value")


class LayoutSelectRequest(BaseModel):
    """Request schema for switching layout."""

    layout_id: str | None = Field(None, description="Layout ID; unknown IDs use the default")


class GenerateRequest(BaseModel):
    """Request schema for AI generation."""

    prompt: str = Field(..., description="Free-text description (at least 50 characters)")


class ReviseRequest(BaseModel):
    """Request schema for an AI revision of the saved resume."""

    prompt: str = Field(..., description='What to change, e.g. "tighten the summary"')


class OpenRequest(BaseModel):
    """Request schema for loading a stored resume into the session."""

    resume_id: str = Field(..., min_length=1, description="Backend resume ID")


class SaveRequest(BaseModel):
    """Request schema for saving through the external backend."""

    resume_id: str | None = Field(
        None,
        min_length=1,
        description="Backend resume ID; defaults to the document's _id, else a new resume is created",
    )
