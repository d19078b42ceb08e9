"""Command-line interface: render, edit and serve résumé documents."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from resumify.logging_config import configure_logging
from resumify.services.path_mutator import PathError, mutate
from resumify.services.resume_data import coerce_document
from resumify.templates import get_template, is_registered, list_templates
from resumify.templates.page import render_page


def _load_document(source: str) -> dict[str, Any]:
    """Read a JSON document from *source* (``-`` for stdin)."""
    text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    raw = json.loads(text)
    if not isinstance(raw, dict):
        raise ValueError("The input must be a JSON object")
    return dict(coerce_document(raw))


def _write(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
        print(f"✅ Wrote {output}")
    else:
        print(text)


def cmd_layouts(args: argparse.Namespace) -> int:
    for meta in list_templates():
        print(f"{meta['id']:<26} {meta['name']:<24} {meta['description']}")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    document = _load_document(args.input)
    layout_id = args.layout or document.get("template")
    if layout_id and not is_registered(layout_id):
        print(f"⚠️  Unknown layout {layout_id!r}; using the default layout.", file=sys.stderr)
    template = get_template(layout_id)
    rendered = template.render(document, editable=args.editable)
    _write(render_page(rendered, title=document.get("name") or "Resume"), args.output)
    return 0


def cmd_set(args: argparse.Namespace) -> int:
    document = _load_document(args.input)
    value: Any = json.loads(args.value) if args.json else args.value
    try:
        updated = mutate(document, args.path, value)
    except PathError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1
    _write(json.dumps(updated, indent=2, ensure_ascii=False), args.output)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from resumify.api.main import main as serve

    serve(host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resumify",
        description="Edit one resume document through interchangeable layouts.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: RESUMIFY_LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    layouts = sub.add_parser("layouts", help="List the available layouts")
    layouts.set_defaults(func=cmd_layouts)

    render = sub.add_parser("render", help="Render a JSON document to HTML")
    render.add_argument("input", help="Path to a JSON document, or - for stdin")
    render.add_argument("--layout", help="Layout ID (defaults to the document's template)")
    render.add_argument("--editable", action="store_true", help="Render editable fields")
    render.add_argument("-o", "--output", help="Write the page here instead of stdout")
    render.set_defaults(func=cmd_render)

    set_ = sub.add_parser("set", help="Set one leaf of a JSON document")
    set_.add_argument("input", help="Path to a JSON document, or - for stdin")
    set_.add_argument("path", help="Dotted path, e.g. experience.0.company")
    set_.add_argument("value", help="New value")
    set_.add_argument("--json", action="store_true", help="Parse VALUE as JSON (numbers, true/false, null)")
    set_.add_argument("-o", "--output", help="Write the document here instead of stdout")
    set_.set_defaults(func=cmd_set)

    serve = sub.add_parser("serve", help="Start the editor API server")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130
    except (OSError, ValueError) as exc:
        print(f"❌ Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
