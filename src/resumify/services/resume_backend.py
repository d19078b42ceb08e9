"""Client for the external résumé backend.

The backend owns AI generation, OCR extraction of uploaded files and
persistence.  This module only knows its HTTP boundary: it validates
requests before any network call, retries transient network failures, and
turns every failure into a :class:`BackendError` carrying a category and a
message that can be shown to the user as-is.
"""

from __future__ import annotations

import logging
import mimetypes
import re
import time
from collections.abc import Callable, Mapping
from pathlib import PurePath
from typing import Any
from urllib.parse import quote

import httpx

from resumify.config import get_api_root, get_generate_timeout, get_request_timeout, get_retries
from resumify.services.resume_data import ResumeDocument, coerce_document, to_save_payload

logger = logging.getLogger(__name__)

__all__ = [
    "ALLOWED_UPLOAD_EXTENSIONS",
    "BackendError",
    "MAX_UPLOAD_BYTES",
    "MIN_PROMPT_LENGTH",
    "ResumeBackendClient",
    "USER_MESSAGES",
    "ValidationError",
    "classify_failure",
    "validate_prompt",
    "validate_resume_id",
    "validate_upload",
]

MIN_PROMPT_LENGTH = 50
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
ALLOWED_UPLOAD_EXTENSIONS = frozenset({"pdf", "jpg", "jpeg", "png", "gif", "bmp", "tiff"})

# Stored résumés are keyed by MongoDB ObjectIds.
_RESUME_ID = re.compile(r"[a-fA-F0-9]{24}")

EMPTY_PROMPT = "empty_prompt"
SERVICE_UNAVAILABLE = "service_unavailable"
INCOMPLETE_DATA = "incomplete_data"
NETWORK = "network"
UNKNOWN = "unknown"

USER_MESSAGES: dict[str, str] = {
    EMPTY_PROMPT: "Please provide a description to generate your resume.",
    SERVICE_UNAVAILABLE: "AI service is temporarily unavailable. Please try again in a moment.",
    INCOMPLETE_DATA: "Please provide more details about your experience, education, or skills.",
    NETWORK: "Network error. Please check your connection and ensure the backend is running.",
    UNKNOWN: "Failed to generate resume. Please try again.",
}


class ValidationError(ValueError):
    """Raised when a request fails a pre-flight check; nothing was sent."""


class BackendError(RuntimeError):
    """Raised when the backend cannot produce a result.

    Attributes:
        category: One of ``empty_prompt``, ``service_unavailable``,
            ``incomplete_data``, ``network`` or ``unknown``.
        detail: The raw message reported by the backend, if any.
        status_code: HTTP status of the failed response; ``None`` when no
            response arrived.
    """

    def __init__(self, message: str, category: str = UNKNOWN, detail: str = "", status_code: int | None = None):
        self.category = category
        self.detail = detail
        self.status_code = status_code
        super().__init__(message)


def classify_failure(message: str) -> str:
    """Map a backend error message to a user-facing category."""
    if "Prompt is required" in message:
        return EMPTY_PROMPT
    if "Failed to generate resume with AI" in message or "quota" in message:
        return SERVICE_UNAVAILABLE
    if "complete resume data" in message:
        return INCOMPLETE_DATA
    if any(word in message for word in ("Network", "fetch", "connect")):
        return NETWORK
    return UNKNOWN


def validate_prompt(prompt: str | None, layout_id: str | None) -> str:
    """Return the trimmed prompt or raise :class:`ValidationError`."""
    text = (prompt or "").strip()
    if len(text) < MIN_PROMPT_LENGTH:
        raise ValidationError(
            f"Please provide at least {MIN_PROMPT_LENGTH} characters describing yourself, "
            "your experience, education, and skills."
        )
    if not layout_id:
        raise ValidationError("Please select a template before generating your resume.")
    return text


def validate_resume_id(resume_id: str | None) -> str:
    """Return *resume_id* if it looks like a stored résumé id (24 hex digits)."""
    if not isinstance(resume_id, str) or not _RESUME_ID.fullmatch(resume_id):
        raise ValidationError("Invalid resume ID format. Must be 24 character hex string.")
    return resume_id


def validate_upload(filename: str, content: bytes) -> None:
    """Check the extension and size of an uploaded file."""
    extension = PurePath(filename or "").suffix.lower().lstrip(".")
    if extension not in ALLOWED_UPLOAD_EXTENSIONS:
        raise ValidationError("Invalid file type. Allowed types: PDF, JPG, JPEG, PNG, GIF, BMP, TIFF")
    if len(content) > MAX_UPLOAD_BYTES:
        raise ValidationError("File size exceeds the 10MB limit")
    if not content:
        raise ValidationError("The uploaded file is empty")


def _resume_path(resume_id: str) -> str:
    return f"/api/resumes/{quote(str(resume_id), safe='')}"


class ResumeBackendClient:
    """Synchronous HTTP client for the résumé backend.

    Args:
        api_root: Backend base URL; defaults to ``RESUMIFY_API_ROOT``.
        transport: Optional ``httpx`` transport (tests pass a
            ``httpx.MockTransport``).
        retries: Extra attempts after a network failure.
        backoff: Seconds to wait before the first retry; grows linearly.
        sleep: Function used to wait between attempts.
    """

    def __init__(
        self,
        api_root: str | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        retries: int | None = None,
        backoff: float = 0.4,
        request_timeout: float | None = None,
        generate_timeout: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.api_root = (api_root or get_api_root()).rstrip("/")
        self.retries = get_retries() if retries is None else max(0, retries)
        self.backoff = backoff
        self.request_timeout = request_timeout or get_request_timeout()
        self.generate_timeout = generate_timeout or get_generate_timeout()
        self._transport = transport
        self._sleep = sleep

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def generate(self, prompt: str, layout_id: str) -> ResumeDocument:
        """Ask the AI backend for a résumé built from *prompt*."""
        text = validate_prompt(prompt, layout_id)
        response = self._request(
            "POST",
            "/api/ai/generate-resume",
            timeout=self.generate_timeout,
            json={"prompt": text, "template": layout_id},
        )
        return self._resume(self._payload(response, "Failed to generate resume"))

    def extract(self, filename: str, content: bytes, layout_id: str) -> ResumeDocument:
        """Upload a PDF or image for OCR extraction into a résumé."""
        validate_upload(filename, content)
        mimetype = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        response = self._request(
            "POST",
            "/api/ocr/file",
            timeout=self.generate_timeout,
            files={"file": (PurePath(filename).name, content, mimetype)},
            data={"template": layout_id},
        )
        return self._resume(self._payload(response, "Failed to process file"))

    def update_with_ai(self, resume_id: str, prompt: str, layout_id: str | None = None) -> ResumeDocument:
        """Ask the AI backend to revise the stored résumé *resume_id*."""
        validate_resume_id(resume_id)
        text = (prompt or "").strip() if isinstance(prompt, str) else ""
        if not text:
            raise ValidationError("Prompt is required and must be a non-empty string")
        body: dict[str, Any] = {"prompt": text}
        if layout_id:
            body["template"] = layout_id
        response = self._request(
            "PUT",
            f"/api/ai/update-resume/{resume_id}",
            timeout=self.generate_timeout,
            json=body,
        )
        return self._resume(self._payload(response, "Failed to update resume with AI"))

    def save(self, resume_id: str, document: Mapping[str, Any]) -> ResumeDocument:
        """Persist *document* under *resume_id* and return the stored copy."""
        if not resume_id:
            raise ValidationError("A resume id is required to save")
        response = self._request(
            "PUT",
            _resume_path(resume_id),
            timeout=self.request_timeout,
            json=to_save_payload(document),
        )
        return self._resume(self._payload(response, "Failed to update resume", classify=False))

    def create(self, document: Mapping[str, Any]) -> ResumeDocument:
        """Store *document* as a new résumé; the copy returned carries its ``_id``."""
        response = self._request(
            "POST",
            "/api/resumes",
            timeout=self.request_timeout,
            json=to_save_payload(document),
        )
        return self._resume(self._payload(response, "Failed to create resume", classify=False))

    def fetch(self, resume_id: str) -> ResumeDocument:
        """Load the stored résumé *resume_id*."""
        if not resume_id:
            raise ValidationError("A resume id is required to load a resume")
        response = self._request("GET", _resume_path(resume_id), timeout=self.request_timeout)
        return self._resume(self._payload(response, "Failed to fetch resume", classify=False))

    def list_resumes(self) -> list[ResumeDocument]:
        """Return every stored résumé, newest first as the backend sorts them."""
        response = self._request("GET", "/api/resumes", timeout=self.request_timeout)
        data = self._payload(response, "Failed to fetch resumes", classify=False)
        body = data.get("data")
        resumes = body.get("resumes") if isinstance(body, Mapping) else None
        if not isinstance(resumes, list):
            raise BackendError("Failed to fetch resumes", detail="No resume list in response")
        return [coerce_document(resume) for resume in resumes if isinstance(resume, Mapping)]

    def delete(self, resume_id: str) -> str:
        """Delete the stored résumé *resume_id* and return the deleted id."""
        validate_resume_id(resume_id)
        response = self._request("DELETE", _resume_path(resume_id), timeout=self.request_timeout)
        if response.status_code == 404:
            raise BackendError("Resume not found (already deleted?)", status_code=404)
        if response.status_code == 400:
            detail = str(self._json(response).get("message") or "Invalid resume ID")
            raise BackendError(detail, detail=detail, status_code=400)
        if response.status_code >= 500:
            raise BackendError("Server error. Try again later.", status_code=response.status_code)

        data = self._payload(response, "Delete failed", classify=False)
        body = data.get("data")
        deleted = body.get("deletedId") if isinstance(body, Mapping) else None
        logger.info("Deleted resume %s", deleted or resume_id)
        return str(deleted or resume_id)

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, *, timeout: float, **kwargs: Any) -> httpx.Response:
        attempt = 0
        while True:
            try:
                with httpx.Client(base_url=self.api_root, timeout=timeout, transport=self._transport) as client:
                    return client.request(method, path, **kwargs)
            except httpx.TransportError as exc:
                if attempt >= self.retries:
                    logger.warning("%s %s failed after %d attempt(s): %s", method, path, attempt + 1, exc)
                    raise BackendError(USER_MESSAGES[NETWORK], NETWORK, detail=str(exc)) from exc
                attempt += 1
                logger.info("%s %s failed (%s), retrying", method, path, exc)
                self._sleep(self.backoff * attempt)

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    @classmethod
    def _payload(cls, response: httpx.Response, default_message: str, classify: bool = True) -> dict[str, Any]:
        """Return the decoded body of a successful response.

        Generation failures are classified into user-facing categories;
        persistence failures (``classify=False``) keep the backend's own
        message under the ``unknown`` category.
        """
        data = cls._json(response)
        if response.is_error or not data.get("success"):
            detail = str(data.get("message") or data.get("error") or default_message)
            category = classify_failure(detail) if classify else UNKNOWN
            message = detail if category == UNKNOWN else USER_MESSAGES[category]
            logger.warning("Backend error (%s, HTTP %s): %s", category, response.status_code, detail)
            raise BackendError(message, category, detail=detail, status_code=response.status_code)
        return data

    @staticmethod
    def _resume(data: Mapping[str, Any]) -> ResumeDocument:
        body = data.get("data")
        resume = body.get("resume") if isinstance(body, Mapping) else None
        if not isinstance(resume, Mapping):
            raise BackendError(USER_MESSAGES[INCOMPLETE_DATA], INCOMPLETE_DATA, detail="No resume in response")
        return coerce_document(resume)
