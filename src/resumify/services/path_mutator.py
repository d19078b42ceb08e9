"""Copy-on-write updates of a résumé document addressed by dotted paths.

A path is ``segment(.segment)*``.  A segment made only of digits selects a
list index, any other segment selects a mapping key::

    mutate(doc, "experience.0.title", "Engineer")
    mutate(doc, "socialMedia.github", "https://github.com/jane")

The mutator knows nothing about résumé sections.  It only understands the
generic map / list / leaf shape, so every layout can share it unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableSequence, Sequence
from typing import Any

__all__ = [
    "PathError",
    "get_value",
    "mutate",
    "parse_path",
]

Segment = str | int


class PathError(ValueError):
    """Raised when a path does not fit the current shape of the document.

    Attributes:
        path: The full path that was requested.
        segment: The segment at which the conflict was detected.
        found: Name of the type found at that position, if any.
    """

    def __init__(self, message: str, path: str, segment: Segment | None = None, found: str = ""):
        self.path = path
        self.segment = segment
        self.found = found
        super().__init__(message)


def parse_path(path: str) -> tuple[Segment, ...]:
    """Split *path* into key (``str``) and index (``int``) segments.

    Raises:
        PathError: If the path or any of its segments is empty.
    """
    if not isinstance(path, str) or not path:
        raise PathError("Path must be a non-empty string", str(path))

    segments: list[Segment] = []
    for raw in path.split("."):
        if raw == "":
            raise PathError(f"Empty segment in path {path!r}", path, raw)
        # str.isdecimal() rejects "-1" and "+1"; those stay map keys.
        segments.append(int(raw) if raw.isdecimal() and raw.isascii() else raw)
    return tuple(segments)


def _is_sequence(node: Any) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def _type_name(node: Any) -> str:
    if isinstance(node, Mapping):
        return "map"
    if _is_sequence(node):
        return "sequence"
    return type(node).__name__


def _check_container(node: Any, segment: Segment, path: str) -> None:
    """Make sure *node* can be addressed by *segment*."""
    if isinstance(segment, int):
        if not _is_sequence(node):
            raise PathError(
                f"Segment {segment!r} of {path!r} expects a sequence, found {_type_name(node)}",
                path,
                segment,
                _type_name(node),
            )
    elif not isinstance(node, Mapping):
        raise PathError(
            f"Segment {segment!r} of {path!r} expects a map, found {_type_name(node)}",
            path,
            segment,
            _type_name(node),
        )


def _empty_for(segment: Segment) -> Any:
    return [] if isinstance(segment, int) else {}


def _set(node: Any, segments: tuple[Segment, ...], value: Any, path: str) -> Any:
    """Return a shallow copy of *node* with *value* written below it.

    Only the containers on the root-to-leaf chain are copied; every sibling
    is shared with the original.
    """
    head, rest = segments[0], segments[1:]
    _check_container(node, head, path)

    if isinstance(head, int):
        items: MutableSequence[Any] = list(node)
        padded = head >= len(items)
        if padded:
            # Pad with empty records so layouts can bind to rows that do not
            # exist yet (e.g. the first project).
            items.extend({} for _ in range(head + 1 - len(items)))
        if rest:
            child = items[head]
            if child is None or padded:
                # The addressed row takes the shape its next segment needs.
                child = _empty_for(rest[0])
            items[head] = _set(child, rest, value, path)
        else:
            items[head] = value
        return items

    mapping = dict(node)
    if rest:
        child = mapping.get(head)
        if child is None:
            child = _empty_for(rest[0])
        mapping[head] = _set(child, rest, value, path)
    else:
        mapping[head] = value
    return mapping


def mutate(document: Mapping[str, Any], path: str, value: Any) -> dict[str, Any]:
    """Return a new document with the leaf at *path* replaced by *value*.

    Missing list rows are filled with empty records before the addressed
    index; the addressed row itself becomes a list when the next segment is
    an index (``"grid.0.0"``) and a record otherwise.  Missing map keys are
    created on the way down.  The input document is never modified.

    Args:
        document: The current document.
        path: Dotted path to the leaf, e.g. ``"education.1.degree"``.
        value: The new leaf value.

    Returns:
        The updated document.

    Raises:
        PathError: If a segment conflicts with the existing shape (an index
            where a map is stored or a key where a list is stored).  The
            caller's document is left as it was.
    """
    segments = parse_path(path)
    return _set(document, segments, value, path)


def get_value(document: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Read the leaf at *path*, or *default* when any step is missing.

    Raises:
        PathError: If a segment conflicts with the existing shape.
    """
    node: Any = document
    for segment in parse_path(path):
        if node is None:
            return default
        _check_container(node, segment, path)
        if isinstance(segment, int):
            if segment >= len(node):
                return default
            node = node[segment]
        else:
            if segment not in node:
                return default
            node = node[segment]
    return default if node is None else node
