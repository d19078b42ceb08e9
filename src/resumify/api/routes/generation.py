"""Routes that proxy to the external résumé backend."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, Path, UploadFile, status
from starlette.concurrency import run_in_threadpool

from resumify.api.dependencies import get_controller
from resumify.api.routes.documents import busy_conflict, document_response
from resumify.api.schemas.documents import DocumentResponse, GenerateRequest, OpenRequest, ReviseRequest, SaveRequest
from resumify.services.document_controller import ControllerBusyError, DocumentController
from resumify.services.resume_backend import BackendError, ValidationError

router = APIRouter(prefix="/documents", tags=["generation"])

_BACKEND_RESPONSES = {
    409: {"description": "Another backend request is in progress"},
    422: {"description": "Request failed validation; nothing was sent"},
    502: {"description": "Backend failed; the previous document is kept"},
}


def backend_failure(exc: BackendError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail={"message": str(exc), "category": exc.category},
    )


def invalid_request(exc: ValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))


@router.post(
    "/{document_id}/generate",
    response_model=DocumentResponse,
    responses=_BACKEND_RESPONSES,
)
def generate_document(
    document_id: Annotated[str, Path(description="Editor session ID")],
    data: GenerateRequest,
    controller: Annotated[DocumentController, Depends(get_controller)],
) -> DocumentResponse:
    """Replace the document with one generated from a text prompt."""
    try:
        controller.generate(data.prompt)
    except ValidationError as exc:
        raise invalid_request(exc) from exc
    except BackendError as exc:
        raise backend_failure(exc) from exc
    except ControllerBusyError as exc:
        raise busy_conflict(exc) from exc
    return document_response(document_id, controller)


@router.post(
    "/{document_id}/upload",
    response_model=DocumentResponse,
    responses=_BACKEND_RESPONSES,
)
async def upload_document(
    document_id: Annotated[str, Path(description="Editor session ID")],
    file: Annotated[UploadFile, File(description="PDF or image of an existing resume")],
    controller: Annotated[DocumentController, Depends(get_controller)],
) -> DocumentResponse:
    """Replace the document with one extracted from an uploaded file."""
    content = await file.read()
    try:
        await run_in_threadpool(controller.extract, file.filename or "", content)
    except ValidationError as exc:
        raise invalid_request(exc) from exc
    except BackendError as exc:
        raise backend_failure(exc) from exc
    except ControllerBusyError as exc:
        raise busy_conflict(exc) from exc
    return document_response(document_id, controller)


@router.post(
    "/{document_id}/save",
    response_model=DocumentResponse,
    responses=_BACKEND_RESPONSES,
)
def save_document(
    document_id: Annotated[str, Path(description="Editor session ID")],
    data: SaveRequest,
    controller: Annotated[DocumentController, Depends(get_controller)],
) -> DocumentResponse:
    """Persist the document through the external backend."""
    try:
        controller.save(data.resume_id)
    except ValidationError as exc:
        raise invalid_request(exc) from exc
    except BackendError as exc:
        raise backend_failure(exc) from exc
    except ControllerBusyError as exc:
        raise busy_conflict(exc) from exc
    return document_response(document_id, controller)


@router.post(
    "/{document_id}/open",
    response_model=DocumentResponse,
    responses=_BACKEND_RESPONSES,
)
def open_document(
    document_id: Annotated[str, Path(description="Editor session ID")],
    data: OpenRequest,
    controller: Annotated[DocumentController, Depends(get_controller)],
) -> DocumentResponse:
    """Replace the document with a resume stored by the backend."""
    try:
        controller.open(data.resume_id)
    except ValidationError as exc:
        raise invalid_request(exc) from exc
    except BackendError as exc:
        raise backend_failure(exc) from exc
    except ControllerBusyError as exc:
        raise busy_conflict(exc) from exc
    return document_response(document_id, controller)


@router.post(
    "/{document_id}/revise",
    response_model=DocumentResponse,
    responses=_BACKEND_RESPONSES,
)
def revise_document(
    document_id: Annotated[str, Path(description="Editor session ID")],
    data: ReviseRequest,
    controller: Annotated[DocumentController, Depends(get_controller)],
) -> DocumentResponse:
    """Replace the saved document with an AI revision guided by a prompt."""
    try:
        controller.revise(data.prompt)
    except ValidationError as exc:
        raise invalid_request(exc) from exc
    except BackendError as exc:
        raise backend_failure(exc) from exc
    except ControllerBusyError as exc:
        raise busy_conflict(exc) from exc
    return document_response(document_id, controller)
