"""Single-field editing primitive used by every layout.

An :class:`EditableText` is bound to one value and one callback.  The
callback is a closure prepared by the layout (``lambda v: on_change(path,
v)``), so the leaf never learns the document shape or its own path: it just
forwards the scalar the user typed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from markupsafe import Markup, escape

from resumify.services.formatting import display_text

__all__ = ["EditableText"]


@dataclass(frozen=True, slots=True)
class EditableText:
    """One editable (or static) text region of a rendered résumé.

    Attributes:
        value: Current leaf value; ``None`` and ``""`` count as empty.
        placeholder: Hint shown while the value is empty in edit mode.
        editable: Render a ``contenteditable`` region instead of static text.
        on_change: Pre-bound callback receiving the committed value.
        multiline: Preserve line breaks instead of collapsing them.
        css_class: Extra class names for the wrapping element.
        show_placeholder: In read mode, show the placeholder (dimmed) for an
            empty value instead of rendering nothing.
    """

    value: Any
    placeholder: str
    editable: bool
    on_change: Callable[[str], None] | None = None
    multiline: bool = False
    css_class: str = ""
    show_placeholder: bool = False

    @property
    def text(self) -> str:
        return display_text(self.value)

    def render(self, handle: int | None = None) -> Markup:
        """Return the HTML for this leaf.

        Args:
            handle: Per-render identifier written to ``data-leaf`` so the
                browser can route a commit back to this leaf.
        """
        text = self.text
        classes = " ".join(c for c in ("leaf", self.css_class) if c)

        if not self.editable:
            if not text:
                if self.show_placeholder and self.placeholder:
                    return Markup('<span class="{} leaf--placeholder">{}</span>').format(
                        classes, self.placeholder
                    )
                return Markup("")
            if self.multiline:
                lines = Markup("").join(
                    Markup("<div>{}</div>").format(line) for line in text.split("\n")
                )
                return Markup('<div class="{}">{}</div>').format(classes, lines)
            return Markup('<span class="{}">{}</span>').format(classes, text)

        tag = "div" if self.multiline else "span"
        attrs = Markup(' contenteditable="true" data-placeholder="{}"').format(self.placeholder)
        if handle is not None:
            attrs += Markup(' data-leaf="{}"').format(handle)
        if self.multiline:
            attrs += Markup(' data-multiline="true"')
        if not text:
            classes += " leaf--empty"
        return Markup("<{tag} class=\"{cls}\"{attrs}>{body}</{tag}>").format(
            tag=Markup(tag), cls=classes, attrs=attrs, body=escape(text)
        )

    def commit(self, new_value: Any) -> None:
        """Forward a committed edit to the bound callback.

        Single-line leaves collapse embedded line breaks to spaces.
        """
        if self.on_change is None:
            return
        if isinstance(new_value, str) and not self.multiline:
            new_value = " ".join(new_value.splitlines())
        self.on_change(new_value)
