"""Abstract base class for pluggable résumé layouts.

A layout turns ``(document, editable, on_change)`` into HTML.  Rendering is
pure: the same inputs always give the same markup, and the only state a
render touches is the :class:`RenderSession` created for that call.  Every
editable field is an :class:`~resumify.templates.editable.EditableText`
bound to ``on_change(path, value)`` through a closure, where ``path`` is
``"<section>.<index>.<field>"`` for section records.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from functools import partial
from typing import Any, ClassVar

from markupsafe import Markup

from resumify.constants import SECTION_FIELDS, SECTION_TITLES, SECTIONS, SOCIAL_MEDIA_KEYS
from resumify.services.formatting import (
    display_text,
    format_date_range,
    format_education_year,
    format_technologies,
    is_empty,
    skill_level_dots,
)
from resumify.templates.editable import EditableText

__all__ = [
    "OnChange",
    "RecordView",
    "RenderSession",
    "RenderedResume",
    "ResumeTemplate",
]

OnChange = Callable[[str, Any], None]

_DATE_FIELDS = frozenset({"startDate", "endDate", "current"})
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")

# Links shown in edit mode even when empty, so users can fill them in.
_EDITABLE_SOCIAL_KEYS = ("linkedin", "github", "portfolio")


def _ignore_change(path: str, value: Any) -> None:
    """Default callback for read-only renders."""


def humanize(name: str) -> str:
    """``"credentialId"`` -> ``"Credential Id"``."""
    return _CAMEL_BOUNDARY.sub(" ", name).title()


def _join(parts: Iterable[Markup | str]) -> Markup:
    return Markup("").join(p for p in parts if p)


@dataclass(slots=True)
class RenderSession:
    """Per-render state: the edit flag, the callback and the leaf table."""

    editable: bool
    on_change: OnChange
    leaves: list[EditableText] = field(default_factory=list)

    def leaf(
        self,
        path: str,
        value: Any,
        placeholder: str = "",
        *,
        multiline: bool = False,
        css_class: str = "",
    ) -> Markup:
        """Render an editable leaf bound to *path*.

        In read mode the leaf is static text and nothing is registered.
        """
        if not self.editable:
            return EditableText(value, placeholder, False, None, multiline, css_class).render()

        leaf = EditableText(
            value,
            placeholder,
            True,
            partial(self.on_change, path),
            multiline,
            css_class,
        )
        self.leaves.append(leaf)
        return leaf.render(handle=len(self.leaves) - 1)

    @staticmethod
    def static(value: Any, css_class: str = "", multiline: bool = False) -> Markup:
        """Render read-only text that is not bound to the document."""
        return EditableText(value, "", False, None, multiline, css_class).render()


@dataclass(frozen=True, slots=True)
class RenderedResume:
    """Output of :meth:`ResumeTemplate.render`.

    Attributes:
        layout_id: Id of the layout that produced the markup.
        html: The résumé markup (an ``<article>`` element).
        leaves: Editable leaves in registration order; a leaf's index is the
            ``data-leaf`` handle written into the markup.
        editable: Whether the render was made in edit mode.
        stylesheet: CSS for this layout.
    """

    layout_id: str
    html: Markup
    leaves: tuple[EditableText, ...]
    editable: bool
    stylesheet: str

    def commit(self, handle: int, value: Any) -> None:
        """Commit *value* through the leaf registered under *handle*.

        Raises:
            IndexError: If no leaf has that handle.
        """
        if not 0 <= handle < len(self.leaves):
            raise IndexError(f"No editable leaf with handle {handle}")
        self.leaves[handle].commit(value)


class RecordView:
    """One record of a section as seen by a layout while rendering.

    Tracks which fields the layout placed so that :meth:`rest` can append
    every other non-empty field; switching layouts never hides data.
    """

    def __init__(
        self,
        template: ResumeTemplate,
        session: RenderSession,
        section: str,
        index: int,
        record: Any,
        example: bool = False,
    ) -> None:
        self.template = template
        self.session = session
        self.section = section
        self.index = index
        self.record = record
        self.example = example
        self.used: set[str] = set()

    @property
    def prefix(self) -> str:
        return f"{self.section}.{self.index}"

    @property
    def is_mapping(self) -> bool:
        return isinstance(self.record, Mapping)

    @property
    def editable(self) -> bool:
        return self.session.editable and not self.example

    def get(self, name: str, default: Any = None) -> Any:
        if not self.is_mapping:
            return default
        return self.record.get(name, default)

    def has(self, name: str) -> bool:
        return not is_empty(self.get(name))

    def field(
        self,
        name: str,
        placeholder: str = "",
        *,
        multiline: bool = False,
        css_class: str = "",
    ) -> Markup:
        """Render field *name* of this record as a leaf."""
        self.used.add(name)
        value = self.get(name)
        if isinstance(value, (list, tuple)):
            value = format_technologies(value)
        if not self.editable:
            return self.session.static(value, css_class, multiline)
        return self.session.leaf(
            f"{self.prefix}.{name}",
            value,
            placeholder,
            multiline=multiline,
            css_class=css_class,
        )

    def date_range(
        self,
        start_placeholder: str = "Start Date",
        end_placeholder: str = "End Date",
        css_class: str = "r-dates",
    ) -> Markup:
        """Render ``startDate - endDate`` with the layout's present label."""
        self.used.update(_DATE_FIELDS)
        tpl = self.template
        if not self.editable:
            text = format_date_range(self.record if self.is_mapping else {}, tpl.present_label, tpl.open_end_is_present)
            return self.session.static(text, css_class)

        start = self.session.leaf(f"{self.prefix}.startDate", self.get("startDate"), start_placeholder)
        if self.get("current"):
            end = Markup('<span class="r-present">{}</span>').format(tpl.present_label)
        else:
            end = self.session.leaf(f"{self.prefix}.endDate", self.get("endDate"), end_placeholder)
        return Markup('<span class="{}">{} - {}</span>').format(css_class, start, end)

    def education_year(self, placeholder: str = "Year", css_class: str = "r-dates") -> Markup:
        """Render the education year, synthesizing a range in read mode."""
        self.used.add("year")
        if not self.editable:
            text = format_education_year(self.record if self.is_mapping else {}, self.template.year_offset)
            return self.session.static(text, css_class)
        return self.session.leaf(
            f"{self.prefix}.year",
            display_text(self.get("year")),
            placeholder,
            css_class=css_class,
        )

    def skill_dots(self, css_class: str = "r-dots") -> Markup:
        """Five dots, the first ``skill_level_dots(level)`` filled."""
        self.used.add("level")
        level = display_text(self.get("level")) or "Intermediate"
        filled = skill_level_dots(level)
        dots = _join(
            Markup('<i class="r-dot{}"></i>').format(" r-dot--filled" if i <= filled else "")
            for i in range(1, 6)
        )
        if self.editable:
            label = self.session.leaf(f"{self.prefix}.level", self.get("level"), "Level", css_class="r-skill__level")
        elif self.has("level"):
            label = Markup('<span class="sr-only">{}</span>').format(display_text(self.get("level")))
        else:
            label = Markup("")
        return Markup('<span class="{}" title="{}">{}{}</span>').format(css_class, level, dots, label)

    def rest(self) -> Markup:
        """Render every non-empty field the layout has not placed yet."""
        if self.example:
            return Markup("")
        if not self.is_mapping:
            if is_empty(self.record) or isinstance(self.record, (list, tuple)):
                return Markup("")
            return self.session.leaf(self.prefix, self.record, css_class="r-record__title")

        known = SECTION_FIELDS.get(self.section, ())
        names = [n for n in known if n in self.record]
        names += [n for n in self.record if n not in known]

        details = []
        for name in names:
            if name in self.used:
                continue
            value = self.record[name]
            if is_empty(value) or isinstance(value, Mapping):
                continue
            if name in _DATE_FIELDS:
                details.append(self.date_range())
                continue
            details.append(
                Markup('<div class="r-detail"><span class="r-detail__label">{}:</span> {}</div>').format(
                    humanize(name), self.field(name, humanize(name))
                )
            )
        return _join(details)


class ResumeTemplate(ABC):
    """Interface that every résumé layout must implement.

    Subclasses set the class attributes below and implement :meth:`build`,
    composing the shared block helpers into their own visual arrangement.
    """

    layout_id: ClassVar[str] = ""
    display_name: ClassVar[str] = ""
    description: ClassVar[str] = ""

    # Education records storing a single graduation year are shown as
    # "<year - year_offset> - <year>".
    year_offset: ClassVar[int] = 2
    present_label: ClassVar[str] = "Present"
    open_end_is_present: ClassVar[bool] = True

    featured_sections: ClassVar[tuple[str, ...]] = ("education", "experience", "skills", "projects")
    # Sections that show illustrative content when empty in read mode; every
    # other empty section renders nothing.
    example_sections: ClassVar[frozenset[str]] = frozenset()
    examples: ClassVar[Mapping[str, Sequence[Mapping[str, Any]]]] = {}

    headings: ClassVar[Mapping[str, str]] = {}
    uppercase_headings: ClassVar[bool] = False
    palette: ClassVar[Mapping[str, str]] = {}
    extra_css: ClassVar[str] = ""

    @property
    def name(self) -> str:
        """Human-readable layout name shown in the gallery."""
        return self.display_name

    def render(
        self,
        document: Mapping[str, Any],
        editable: bool = False,
        on_change: OnChange | None = None,
    ) -> RenderedResume:
        """Render *document* into a full visual résumé."""
        session = RenderSession(editable=editable, on_change=on_change or _ignore_change)
        body = self.build(document, session)
        html = Markup('<article class="resume resume--{}{}">{}</article>').format(
            self.layout_id, " resume--editing" if editable else "", body
        )
        return RenderedResume(
            layout_id=self.layout_id,
            html=html,
            leaves=tuple(session.leaves),
            editable=editable,
            stylesheet=self.stylesheet(),
        )

    @abstractmethod
    def build(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        """Compose the résumé body from the shared blocks."""

    # ------------------------------------------------------------------
    # Shared helpers available to all layouts
    # ------------------------------------------------------------------

    def stylesheet(self) -> str:
        """CSS custom properties from :attr:`palette` plus :attr:`extra_css`."""
        props = "".join(f"--{key}:{value};" for key, value in self.palette.items())
        return f".resume--{self.layout_id}{{{props}}}\n{self.extra_css}".strip()

    def title(self, section: str) -> str:
        text = self.headings.get(section) or SECTION_TITLES.get(section) or humanize(section)
        return text.upper() if self.uppercase_headings else text

    @staticmethod
    def records(document: Mapping[str, Any], section: str) -> list[Any]:
        value = document.get(section)
        if isinstance(value, (list, tuple)):
            return list(value)
        if isinstance(value, Mapping):
            return [value]
        return []

    def views(self, document: Mapping[str, Any], session: RenderSession, section: str) -> list[RecordView]:
        """Record views to render for *section*.

        Stored records in stored order; one blank input group when the
        section is empty in edit mode; the layout's illustrative records
        when empty in read mode and listed in :attr:`example_sections`.
        """
        records = self.records(document, section)
        if records:
            return [RecordView(self, session, section, i, r) for i, r in enumerate(records)]
        if session.editable:
            return [RecordView(self, session, section, 0, {})]
        if section in self.example_sections:
            return [
                RecordView(self, session, section, i, r, example=True)
                for i, r in enumerate(self.examples.get(section, ()))
            ]
        return []

    def section_block(
        self,
        key: str,
        body: Markup | str,
        title: str | None = None,
        css_class: str = "",
    ) -> Markup:
        """Wrap *body* in a titled ``<section>``; nothing when *body* is empty."""
        if not body:
            return Markup("")
        classes = " ".join(c for c in ("r-section", f"r-section--{key}", css_class) if c)
        return Markup('<section class="{}"><h3 class="r-heading">{}</h3>{}</section>').format(
            classes, title if title is not None else self.title(key), body
        )

    def render_records(
        self,
        document: Mapping[str, Any],
        session: RenderSession,
        section: str,
        block: Callable[[RecordView], Markup] | None = None,
        css_class: str = "r-record",
    ) -> Markup:
        """Render each record of *section* with *block* followed by its leftovers."""
        block = block or self.generic_block
        parts = []
        for view in self.views(document, session, section):
            inner = _join((block(view), view.rest()))
            modifier = " r-record--example" if view.example else ""
            parts.append(Markup('<div class="{}{}">{}</div>').format(css_class, modifier, inner))
        return _join(parts)

    def section(
        self,
        document: Mapping[str, Any],
        session: RenderSession,
        section: str,
        block: Callable[[RecordView], Markup] | None = None,
        title: str | None = None,
        css_class: str = "",
    ) -> Markup:
        return self.section_block(
            section,
            self.render_records(document, session, section, block),
            title=title,
            css_class=css_class,
        )

    # -- default record blocks --------------------------------------------

    def education_block(self, view: RecordView) -> Markup:
        gpa = Markup("")
        if view.has("gpa") or view.editable:
            gpa = Markup('<span class="r-gpa">GPA: {}</span>').format(view.field("gpa", "GPA"))
        return Markup(
            '<div class="r-record__title">{}</div><div class="r-record__subtitle">{}</div>'
            '<div class="r-record__meta">{} {}</div>'
        ).format(
            view.field("degree", "Degree"),
            view.field("institution", "University"),
            view.education_year(),
            gpa,
        )

    def experience_block(self, view: RecordView) -> Markup:
        return Markup(
            '<div class="r-record__title">{}</div><div class="r-record__subtitle">{} | {}</div>'
            '<div class="r-record__body">{}</div>'
        ).format(
            view.field("title", "Job Title"),
            view.field("company", "Company"),
            view.date_range(),
            view.field("description", "Describe your responsibilities and achievements", multiline=True),
        )

    def skill_block(self, view: RecordView) -> Markup:
        level = view.field("level", "Level", css_class="r-skill__level") if view.has("level") else ""
        return Markup('<span class="r-skill__name">{}</span> {}').format(view.field("name", "Skill"), level)

    def project_block(self, view: RecordView) -> Markup:
        tech = Markup("")
        if view.has("technologies") or view.editable:
            tech = Markup('<div class="r-record__meta">{}</div>').format(
                view.field("technologies", "Technologies (comma separated)")
            )
        return Markup('<div class="r-record__title">{}</div><div class="r-record__body">{}</div>{}').format(
            view.field("name", "Project Name"),
            view.field("description", "Project description", multiline=True),
            tech,
        )

    def generic_block(self, view: RecordView) -> Markup:
        """Title, subtitle and dates for sections without a dedicated block."""
        if not view.is_mapping:
            return Markup("")
        fields = SECTION_FIELDS.get(view.section, ())
        parts = []
        if fields:
            parts.append(
                Markup('<div class="r-record__title">{}</div>').format(view.field(fields[0], humanize(fields[0])))
            )
        if len(fields) > 1 and fields[1] not in _DATE_FIELDS:
            parts.append(
                Markup('<div class="r-record__subtitle">{}</div>').format(view.field(fields[1], humanize(fields[1])))
            )
        if "startDate" in fields and (view.editable or any(view.has(f) for f in _DATE_FIELDS)):
            parts.append(view.date_range())
        return _join(parts)

    # -- document-level blocks --------------------------------------------

    def name_leaf(self, document: Mapping[str, Any], session: RenderSession, css_class: str = "r-name") -> Markup:
        return session.leaf("name", document.get("name"), "Your Name", css_class=css_class)

    def derived_role(self, document: Mapping[str, Any]) -> str:
        """The stored role, else the first experience title (never stored)."""
        role = display_text(document.get("role")).strip()
        if role:
            return role
        for record in self.records(document, "experience"):
            if isinstance(record, Mapping) and not is_empty(record.get("title")):
                return display_text(record["title"])
        return ""

    def role_leaf(self, document: Mapping[str, Any], session: RenderSession, css_class: str = "r-role") -> Markup:
        if session.editable:
            return session.leaf(
                "role",
                document.get("role"),
                self.derived_role(document) or "Professional Title",
                css_class=css_class,
            )
        return session.static(self.derived_role(document), css_class)

    def masthead(
        self,
        document: Mapping[str, Any],
        session: RenderSession,
        extra: Markup | str = "",
        css_class: str = "r-header",
    ) -> Markup:
        """``<header>`` with the name, the role line and optional *extra* markup."""
        return Markup('<header class="{}">{}{}{}</header>').format(
            css_class, self.name_leaf(document, session), self.role_leaf(document, session), extra
        )

    def scalar(
        self,
        document: Mapping[str, Any],
        session: RenderSession,
        key: str,
        placeholder: str,
        css_class: str = "",
        multiline: bool = False,
    ) -> Markup:
        """A top-level scalar leaf, omitted in read mode when empty."""
        if not session.editable and is_empty(document.get(key)):
            return Markup("")
        return session.leaf(key, document.get(key), placeholder, multiline=multiline, css_class=css_class)

    def summary(self, document: Mapping[str, Any], session: RenderSession, title: str = "Profile") -> Markup:
        body = self.scalar(
            document,
            session,
            "summary",
            "Write a short professional summary",
            css_class="r-summary",
            multiline=True,
        )
        return self.section_block("summary", body, title=title.upper() if self.uppercase_headings else title)

    def contact_items(
        self,
        document: Mapping[str, Any],
        session: RenderSession,
        fields: Sequence[tuple[str, str, str]] = (
            ("phone", "Phone", "+123-456-7890"),
            ("email", "Email", "email@example.com"),
            ("location", "Location", "City, Country"),
        ),
    ) -> Markup:
        """``<li>`` items for contact scalars and social links."""
        items = []
        for key, label, placeholder in fields:
            leaf = self.scalar(document, session, key, placeholder)
            if leaf:
                items.append(
                    Markup('<li class="r-contact r-contact--{}"><span class="r-contact__label">{}</span> {}</li>').format(
                        key, label, leaf
                    )
                )
        items.append(self.social_items(document, session))
        return _join(items)

    def social_items(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        links = document.get("socialMedia")
        links = links if isinstance(links, Mapping) else {}
        keys = [k for k in SOCIAL_MEDIA_KEYS if k in links]
        keys += [k for k in links if k not in SOCIAL_MEDIA_KEYS]
        if session.editable:
            keys = list(dict.fromkeys([*_EDITABLE_SOCIAL_KEYS, *keys]))

        items = []
        for key in keys:
            value = links.get(key)
            if isinstance(value, Mapping) or (not session.editable and is_empty(value)):
                continue
            items.append(
                Markup('<li class="r-contact r-contact--{}"><span class="r-contact__label">{}</span> {}</li>').format(
                    key, humanize(key), session.leaf(f"socialMedia.{key}", value, humanize(key))
                )
            )
        return _join(items)

    def contact(self, document: Mapping[str, Any], session: RenderSession, title: str = "Contact") -> Markup:
        items = self.contact_items(document, session)
        body = Markup('<ul class="r-contact-list">{}</ul>').format(items) if items else ""
        return self.section_block("contact", body, title=title.upper() if self.uppercase_headings else title)

    def additional_info(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        body = self.scalar(
            document,
            session,
            "additionalInfo",
            "Additional information",
            css_class="r-additional-info",
            multiline=True,
        )
        title = "Additional Information"
        return self.section_block("additional-info", body, title=title.upper() if self.uppercase_headings else title)

    def additional_sections(self, document: Mapping[str, Any], session: RenderSession) -> Markup:
        """Every non-empty section this layout does not place itself."""
        parts = []
        for key in SECTIONS:
            if key in self.featured_sections or not self.records(document, key):
                continue
            parts.append(self.section(document, session, key))
        parts.append(self.additional_info(document, session))
        return _join(parts)

    # -- page frames --------------------------------------------------------

    @staticmethod
    def two_column(sidebar: Iterable[Markup], main: Iterable[Markup], sidebar_side: str = "left") -> Markup:
        aside = Markup('<aside class="r-sidebar">{}</aside>').format(_join(sidebar))
        body = Markup('<div class="r-main">{}</div>').format(_join(main))
        inner = aside + body if sidebar_side == "left" else body + aside
        return Markup('<div class="r-columns r-columns--{}">{}</div>').format(sidebar_side, inner)

    @staticmethod
    def single_column(header: Markup, sections: Iterable[Markup]) -> Markup:
        return header + Markup('<div class="r-main">{}</div>').format(_join(sections))

    @staticmethod
    def join(parts: Iterable[Markup | str]) -> Markup:
        return _join(parts)
