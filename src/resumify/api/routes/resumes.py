"""Routes for resumes stored by the external backend."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from resumify.api.dependencies import get_backend
from resumify.api.routes.generation import backend_failure, invalid_request
from resumify.api.schemas.resumes import ResumeDeletedResponse, ResumeSummaryResponse
from resumify.services.resume_backend import BackendError, ResumeBackendClient, ValidationError
from resumify.templates import get_template

router = APIRouter(prefix="/resumes", tags=["resumes"])


@router.get(
    "",
    response_model=list[ResumeSummaryResponse],
    responses={502: {"description": "Backend failed"}},
)
def list_resumes(backend: Annotated[ResumeBackendClient, Depends(get_backend)]) -> list[ResumeSummaryResponse]:
    """List the resumes stored by the backend."""
    try:
        resumes = backend.list_resumes()
    except BackendError as exc:
        raise backend_failure(exc) from exc
    return [
        ResumeSummaryResponse(
            id=str(resume["_id"]),
            name=str(resume.get("name") or ""),
            layout_id=get_template(resume.get("template")).layout_id,
            updated_at=str(resume["updatedAt"]) if resume.get("updatedAt") else None,
        )
        for resume in resumes
        if resume.get("_id")
    ]


@router.delete(
    "/{resume_id}",
    response_model=ResumeDeletedResponse,
    responses={
        404: {"description": "No stored resume has that ID"},
        422: {"description": "Malformed resume ID; nothing was sent"},
        502: {"description": "Backend failed"},
    },
)
def delete_resume(
    resume_id: Annotated[str, Path(description="Backend resume ID")],
    backend: Annotated[ResumeBackendClient, Depends(get_backend)],
) -> ResumeDeletedResponse:
    """Delete a stored resume."""
    try:
        deleted_id = backend.delete(resume_id)
    except ValidationError as exc:
        raise invalid_request(exc) from exc
    except BackendError as exc:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        raise backend_failure(exc) from exc
    return ResumeDeletedResponse(deleted_id=deleted_id)
