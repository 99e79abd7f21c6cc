#!/usr/bin/env python3
"""Schema diagram CLI - render, validate and serve GraphQL schema diagrams."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .core import LayoutConfig, SchemaDiagramError, validate_document, validation_summary
from .renderers import FORMATS, render
from .schema import load_schema


def _json_out(data, code=0):
    print(json.dumps(data))
    sys.exit(code)


def _error_out(message):
    _json_out({"status": "error", "error": message}, code=1)


# ── Commands ─────────────────────────────────────────────────────────────────

def cmd_render(args):
    try:
        document = load_schema(args.schema)
        config = LayoutConfig.from_env(
            seed=args.seed,
            iterations=args.iterations,
            canvas_width=args.width,
            canvas_height=args.height,
        )
        output = render(document, args.format, config)
    except OSError as e:
        _error_out(f"Cannot read schema: {e}")
    except ValidationError as e:
        _error_out(f"Invalid layout options: {e.errors()[0]['msg']}")
    except SchemaDiagramError as e:
        _error_out(str(e))

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        _json_out({"status": "ok", "format": args.format, "output": args.output})
    sys.stdout.write(output)
    if not output.endswith("\n"):
        sys.stdout.write("\n")
    sys.exit(0)


def cmd_validate(args):
    try:
        document = load_schema(args.schema)
    except OSError as e:
        _error_out(f"Cannot read schema: {e}")
    except SchemaDiagramError as e:
        _error_out(str(e))

    issues = validate_document(document)
    summary = validation_summary(issues)
    _json_out(
        {"status": "ok", "issues": [i.to_dict() for i in issues], "summary": summary},
        code=0 if summary["valid"] else 1,
    )


def cmd_serve(args):
    from .backend import run
    run(host=args.host, port=args.port)


# ── Main ─────────────────────────────────────────────────────────────────────

def build_parser():
    parser = argparse.ArgumentParser(prog="schema-diagram", description="GraphQL schema diagrams")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("render")
    p.add_argument("schema", help="Path to a GraphQL SDL file")
    p.add_argument("--format", choices=FORMATS, default="mermaid")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--iterations", type=int, default=None)
    p.add_argument("--width", type=float, default=None)
    p.add_argument("--height", type=float, default=None)
    p.add_argument("-o", "--output", default=None)

    p = sub.add_parser("validate")
    p.add_argument("schema")

    p = sub.add_parser("serve")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8765)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cmd_map = {
        "render": cmd_render,
        "validate": cmd_validate,
        "serve": cmd_serve,
    }
    cmd_map[args.command](args)


if __name__ == "__main__":
    main()
