"""Shared dependencies for API routes."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping
from typing import Annotated, Any

from fastapi import Depends, HTTPException, Path, status

from resumify.services.document_controller import DocumentController
from resumify.services.resume_backend import ResumeBackendClient

logger = logging.getLogger(__name__)


class DocumentStore:
    """In-memory editor sessions, one controller per open document.

    Documents are not persisted here; saving is delegated to the external
    backend.
    """

    def __init__(self, backend_factory: Callable[[], ResumeBackendClient] = ResumeBackendClient) -> None:
        self._backend_factory = backend_factory
        self._sessions: dict[str, DocumentController] = {}

    def create(
        self,
        document: Mapping[str, Any] | None = None,
        layout_id: str | None = None,
    ) -> tuple[str, DocumentController]:
        document_id = uuid.uuid4().hex
        controller = DocumentController(document, layout_id, backend=self._backend_factory())
        self._sessions[document_id] = controller
        logger.info("Opened editor session %s with layout %s", document_id, controller.layout_id)
        return document_id, controller

    def backend(self) -> ResumeBackendClient:
        """A backend client for requests that are not tied to a session."""
        return self._backend_factory()

    def get(self, document_id: str) -> DocumentController | None:
        return self._sessions.get(document_id)

    def delete(self, document_id: str) -> bool:
        return self._sessions.pop(document_id, None) is not None

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


_store = DocumentStore()


def get_document_store() -> DocumentStore:
    """Return the process-wide session store."""
    return _store


def get_backend(store: Annotated[DocumentStore, Depends(get_document_store)]) -> ResumeBackendClient:
    """Return a client for the external backend."""
    return store.backend()


def get_controller(
    document_id: Annotated[str, Path(description="Editor session ID")],
    store: Annotated[DocumentStore, Depends(get_document_store)],
) -> DocumentController:
    """Resolve the controller of an open editor session.

    Raises:
        HTTPException: If no session has that ID (404).
    """
    controller = store.get(document_id)
    if controller is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Document {document_id} not found",
        )
    return controller
