"""Standalone HTML page around a rendered résumé."""

from __future__ import annotations

from functools import lru_cache

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from resumify.templates.base import RenderedResume

__all__ = ["HANDLE_PLACEHOLDER", "render_page"]

# Replaced client-side by the ``data-leaf`` handle of the edited field.
HANDLE_PLACEHOLDER = "__HANDLE__"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=PackageLoader("resumify", "templates/html"),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_page(rendered: RenderedResume, title: str = "Resume", commit_url: str | None = None) -> str:
    """Wrap *rendered* in a complete HTML document.

    Args:
        rendered: Output of a layout's ``render()``.
        title: Document title.
        commit_url: URL template containing :data:`HANDLE_PLACEHOLDER`; when
            given for an editable render, leaf edits are posted there on blur.
    """
    template = _environment().get_template("page.html.jinja")
    return template.render(
        title=title or "Resume",
        resume=rendered.html,
        stylesheet=Markup(rendered.stylesheet),
        editable=rendered.editable,
        commit_url=commit_url,
    )
