"""Layout gallery routes."""

from __future__ import annotations

from fastapi import APIRouter

from resumify.api.schemas.layouts import LayoutResponse
from resumify.templates import list_templates

router = APIRouter(prefix="/layouts", tags=["layouts"])


@router.get("", response_model=list[LayoutResponse])
def list_layouts() -> list[LayoutResponse]:
    """List every registered layout in gallery order."""
    return [LayoutResponse(**meta) for meta in list_templates()]
