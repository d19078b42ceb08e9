"""Owner of the canonical résumé document during an editing session.

The controller holds the one document every layout renders from.  Edits
arrive as ``on_change(path, value)`` calls from editable leaves and go
through :func:`~resumify.services.path_mutator.mutate`; each accepted edit
replaces the document with a new top-level value.  Switching layout never
touches the document.

A controller may be shared between threads (the API serves requests from a
thread pool).  Edits are serialized by a re-entrant lock, and at most one
backend request runs at a time.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from resumify.services.path_mutator import PathError, mutate
from resumify.services.resume_backend import BackendError, ResumeBackendClient, ValidationError
from resumify.services.resume_data import ResumeDocument, coerce_document
from resumify.templates import RenderedResume, ResumeTemplate, get_template

logger = logging.getLogger(__name__)

__all__ = ["ControllerBusyError", "DocumentController", "Notification"]

_BUSY_MESSAGE = "A backend request is in progress; try again when it finishes"


class ControllerBusyError(RuntimeError):
    """Raised when the document is changed while a backend call is running."""


@dataclass(frozen=True, slots=True)
class Notification:
    """Transient message for the user (a toast in the web UI)."""

    level: str
    message: str
    category: str = ""


class DocumentController:
    """Single-writer owner of one résumé document.

    Args:
        document: Initial document; normalized with
            :func:`~resumify.services.resume_data.coerce_document`.
        layout_id: Active layout; defaults to the document's ``template``
            key, then to the registry default.
        backend: Client used for generation, extraction and saving.
    """

    def __init__(
        self,
        document: Mapping[str, Any] | None = None,
        layout_id: str | None = None,
        backend: ResumeBackendClient | None = None,
    ) -> None:
        self._document: ResumeDocument = coerce_document(document)
        self._layout_id = get_template(layout_id or self._document.get("template")).layout_id
        self._backend = backend
        self._rendered: RenderedResume | None = None
        self._lock = threading.RLock()
        self._backend_lock = threading.Lock()
        self.busy = False
        self.last_error: PathError | None = None
        self.notifications: list[Notification] = []

    # ------------------------------------------------------------------
    # state
    # ------------------------------------------------------------------

    @property
    def document(self) -> ResumeDocument:
        return self._document

    @property
    def layout_id(self) -> str:
        return self._layout_id

    @property
    def template(self) -> ResumeTemplate:
        return get_template(self._layout_id)

    @property
    def resume_id(self) -> str | None:
        """Id of the stored copy of this document, once it has one."""
        resume_id = self._document.get("_id")
        return str(resume_id) if resume_id else None

    @property
    def backend(self) -> ResumeBackendClient:
        if self._backend is None:
            self._backend = ResumeBackendClient()
        return self._backend

    # ------------------------------------------------------------------
    # editing
    # ------------------------------------------------------------------

    def on_change(self, path: str, value: Any) -> bool:
        """Apply one leaf edit.

        A path that conflicts with the document shape is logged and
        rejected; the previous document stays active.

        Returns:
            ``True`` if the edit was applied.

        Raises:
            ControllerBusyError: If a backend call is in flight.
        """
        with self._lock:
            self._ensure_idle()
            try:
                updated = mutate(self._document, path, value)
            except PathError as exc:
                logger.warning("Rejected edit at %r: %s", path, exc)
                self.last_error = exc
                return False

            self._document = updated  # type: ignore[assignment]
            self.last_error = None
        logger.debug("Applied edit at %r", path)
        return True

    def render(self, editable: bool = False) -> RenderedResume:
        """Render the document with the active layout.

        The leaf table of an editable render is kept so that
        :meth:`commit_leaf` can route browser commits back to it.
        """
        with self._lock:
            rendered = self.template.render(self._document, editable=editable, on_change=self.on_change)
            if editable:
                self._rendered = rendered
        return rendered

    def commit_leaf(self, handle: int, value: Any) -> bool:
        """Commit *value* through leaf *handle* of the last editable render.

        Raises:
            LookupError: If there is no editable render or no such handle.
            ControllerBusyError: If a backend call is in flight.
        """
        with self._lock:
            if self._rendered is None:
                raise LookupError("Render the document in edit mode before committing leaves")
            self._ensure_idle()
            self.last_error = None
            self._rendered.commit(handle, value)
            return self.last_error is None

    def select_layout(self, layout_id: str | None) -> str:
        """Switch to another layout; unknown ids resolve to the default."""
        with self._lock:
            self._layout_id = get_template(layout_id).layout_id
            self._rendered = None
            return self._layout_id

    def load(self, document: Mapping[str, Any] | None) -> ResumeDocument:
        """Replace the whole document, discarding the previous leaf table."""
        with self._lock:
            self._ensure_idle()
            return self._replace(coerce_document(document))

    # ------------------------------------------------------------------
    # backend
    # ------------------------------------------------------------------

    def generate(self, prompt: str) -> ResumeDocument:
        """Replace the document with an AI-generated résumé."""
        return self._replace_from_backend(lambda backend: backend.generate(prompt, self._layout_id))

    def extract(self, filename: str, content: bytes) -> ResumeDocument:
        """Replace the document with one extracted from an uploaded file."""
        return self._replace_from_backend(lambda backend: backend.extract(filename, content, self._layout_id))

    def open(self, resume_id: str) -> ResumeDocument:
        """Replace the document with the stored résumé *resume_id*."""
        return self._replace_from_backend(lambda backend: backend.fetch(resume_id), "Resume loaded for {name}!")

    def revise(self, prompt: str) -> ResumeDocument:
        """Replace the document with an AI revision of its stored copy.

        Raises:
            ValidationError: If the document has never been saved.
        """
        resume_id = self.resume_id
        if not resume_id:
            raise ValidationError("Save the resume before asking the AI to update it")
        return self._replace_from_backend(
            lambda backend: backend.update_with_ai(resume_id, prompt, self._layout_id),
            "Resume updated for {name}!",
        )

    def save(self, resume_id: str | None = None) -> ResumeDocument:
        """Hand the document to the backend for persistence.

        The document is stored under *resume_id*, else under its own
        ``_id``; a document with neither is created and takes the id the
        backend assigns.
        """
        target = resume_id or self.resume_id
        if target:
            stored = self._call_backend(lambda backend: backend.save(target, self._document))
        else:
            stored = self._call_backend(lambda backend: backend.create(self._document))
            new_id = stored.get("_id")
            if new_id:
                with self._lock:
                    self._document = {**self._document, "_id": new_id}  # type: ignore[assignment]
        self.notifications.append(Notification("success", "Resume saved"))
        return stored

    def pop_notifications(self) -> list[Notification]:
        with self._lock:
            pending, self.notifications = self.notifications, []
        return pending

    def _replace(self, document: ResumeDocument) -> ResumeDocument:
        self._document = document
        self._rendered = None
        self.last_error = None
        return document

    def _replace_from_backend(
        self,
        call: Callable[[ResumeBackendClient], ResumeDocument],
        message: str = "Resume created for {name}!",
    ) -> ResumeDocument:
        document = self._call_backend(call, replace=True)
        name = document.get("name") or "your resume"
        self.notifications.append(Notification("success", message.format(name=name)))
        return document

    def _call_backend(self, call: Callable[[ResumeBackendClient], Any], replace: bool = False) -> Any:
        """Run one backend request with the document frozen.

        Only one request runs at a time; edits and other requests made
        meanwhile raise :class:`ControllerBusyError`.  With *replace* the
        result becomes the new document before edits are accepted again.
        """
        if not self._backend_lock.acquire(blocking=False):
            raise ControllerBusyError(_BUSY_MESSAGE)
        try:
            with self._lock:
                self._ensure_idle()
                self.busy = True
            try:
                result = call(self.backend)
                if replace:
                    with self._lock:
                        result = self._replace(coerce_document(result))
                return result
            except BackendError as exc:
                logger.warning("Backend call failed (%s): %s", exc.category, exc)
                self.notifications.append(Notification("error", str(exc), exc.category))
                raise
            finally:
                self.busy = False
        finally:
            self._backend_lock.release()

    def _ensure_idle(self) -> None:
        if self.busy:
            raise ControllerBusyError(_BUSY_MESSAGE)
