"""Liveness probe."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from resumify.templates import template_ids

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, Any]:
    """Report that the editor is up and how many layouts it serves."""
    return {"status": "healthy", "layouts": len(template_ids())}
