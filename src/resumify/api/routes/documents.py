"""Document editing routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from fastapi.responses import HTMLResponse

from resumify.api.dependencies import DocumentStore, get_controller, get_document_store
from resumify.api.schemas.documents import (
    DocumentCreateRequest,
    DocumentEditRequest,
    DocumentReplaceRequest,
    DocumentResponse,
    LayoutSelectRequest,
    LeafCommitRequest,
    NotificationResponse,
)
from resumify.services.document_controller import ControllerBusyError, DocumentController
from resumify.templates.page import HANDLE_PLACEHOLDER, render_page

router = APIRouter(prefix="/documents", tags=["documents"])


def document_response(document_id: str, controller: DocumentController) -> DocumentResponse:
    """Build the response schema for an editor session."""
    return DocumentResponse(
        id=document_id,
        layout_id=controller.layout_id,
        document=dict(controller.document),
        notifications=[
            NotificationResponse(level=n.level, message=n.message, category=n.category)
            for n in controller.pop_notifications()
        ],
    )


def busy_conflict(exc: ControllerBusyError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.post(
    "",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_document(
    data: DocumentCreateRequest,
    store: Annotated[DocumentStore, Depends(get_document_store)],
) -> DocumentResponse:
    """Open an editor session, optionally seeded with a document."""
    document_id, controller = store.create(data.document, data.layout_id)
    return document_response(document_id, controller)


@router.get("/{document_id}", response_model=DocumentResponse)
def get_document(
    document_id: Annotated[str, Path(description="Editor session ID")],
    controller: Annotated[DocumentController, Depends(get_controller)],
) -> DocumentResponse:
    """Return the current document of a session."""
    return document_response(document_id, controller)


@router.put("/{document_id}", response_model=DocumentResponse)
def replace_document(
    document_id: Annotated[str, Path(description="Editor session ID")],
    data: DocumentReplaceRequest,
    controller: Annotated[DocumentController, Depends(get_controller)],
) -> DocumentResponse:
    """Replace the whole document."""
    try:
        controller.load(data.document)
    except ControllerBusyError as exc:
        raise busy_conflict(exc) from exc
    return document_response(document_id, controller)


@router.patch(
    "/{document_id}",
    response_model=DocumentResponse,
    responses={422: {"description": "Path does not fit the document shape"}},
)
def edit_document(
    document_id: Annotated[str, Path(description="Editor session ID")],
    data: DocumentEditRequest,
    controller: Annotated[DocumentController, Depends(get_controller)],
) -> DocumentResponse:
    """Set one leaf of the document by its dotted path."""
    try:
        applied = controller.on_change(data.path, data.value)
    except ControllerBusyError as exc:
        raise busy_conflict(exc) from exc
    if not applied:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(controller.last_error),
        )
    return document_response(document_id, controller)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
def close_document(
    document_id: Annotated[str, Path(description="Editor session ID")],
    store: Annotated[DocumentStore, Depends(get_document_store)],
) -> Response:
    """Close an editor session."""
    if not store.delete(document_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Document {document_id} not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{document_id}/layout", response_model=DocumentResponse)
def select_layout(
    document_id: Annotated[str, Path(description="Editor session ID")],
    data: LayoutSelectRequest,
    controller: Annotated[DocumentController, Depends(get_controller)],
) -> DocumentResponse:
    """Switch the active layout; the document is left untouched."""
    controller.select_layout(data.layout_id)
    return document_response(document_id, controller)


@router.get("/{document_id}/render", response_class=HTMLResponse)
def render_document(
    document_id: Annotated[str, Path(description="Editor session ID")],
    controller: Annotated[DocumentController, Depends(get_controller)],
    editable: Annotated[bool, Query(description="Render editable fields")] = False,
) -> HTMLResponse:
    """Render the document with the active layout as an HTML page."""
    rendered = controller.render(editable=editable)
    commit_url = f"/api/documents/{document_id}/leaves/{HANDLE_PLACEHOLDER}" if editable else None
    title = controller.document.get("name") or "Resume"
    return HTMLResponse(render_page(rendered, title=title, commit_url=commit_url))


@router.post(
    "/{document_id}/leaves/{handle}",
    response_model=DocumentResponse,
    responses={
        404: {"description": "No editable render or unknown leaf"},
        422: {"description": "Edit rejected"},
    },
)
def commit_leaf(
    document_id: Annotated[str, Path(description="Editor session ID")],
    handle: Annotated[int, Path(description="data-leaf handle from the last editable render")],
    data: LeafCommitRequest,
    controller: Annotated[DocumentController, Depends(get_controller)],
) -> DocumentResponse:
    """Commit a value typed into an editable leaf."""
    try:
        applied = controller.commit_leaf(handle, data.value)
    except ControllerBusyError as exc:
        raise busy_conflict(exc) from exc
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    if not applied:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(controller.last_error),
        )
    return document_response(document_id, controller)


@router.get("/{document_id}/export")
def export_document(
    document_id: Annotated[str, Path(description="Editor session ID")],
    controller: Annotated[DocumentController, Depends(get_controller)],
) -> Response:
    """Return the read-only page as a standalone HTML download."""
    rendered = controller.render(editable=False)
    title = controller.document.get("name") or "Resume"
    body = render_page(rendered, title=title).encode("utf-8")
    return Response(
        content=body,
        media_type="text/html; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="resume-{controller.layout_id}.html"'},
    )
