"""Pydantic schemas for layout gallery endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LayoutResponse(BaseModel):
    """Gallery entry for one layout."""

    id: str = Field(description="Stable kebab-case layout ID")
    name: str
    description: str
