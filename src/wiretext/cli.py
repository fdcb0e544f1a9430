"""Command-line entry point: compile a WireText file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from wiretext.compiler import CompileOptions, compile_wiretext
from wiretext.config import WIRETEXT_DEFAULT_WIDTH
from wiretext.exceptions import WiretextError
from wiretext.html_utils import collect_markup_stats

logger = logging.getLogger(__name__)

FORMATS = ("ascii", "html", "json", "stats")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wiretext",
        description="Compile a WireText wireframe into ASCII, HTML or a JSON tree.",
    )
    parser.add_argument("source", help="WireText file path, or '-' to read stdin")
    parser.add_argument(
        "--width",
        type=int,
        default=WIRETEXT_DEFAULT_WIDTH,
        help=f"ASCII layout width (default {WIRETEXT_DEFAULT_WIDTH}, minimum 60)",
    )
    parser.add_argument("--format", choices=FORMATS, default="ascii", help="Output format")
    parser.add_argument("--pretty", action="store_true", help="Re-indent HTML output")
    parser.add_argument("--output", help="Write output to this file instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = read_source(args.source)
        result = compile_wiretext(
            source, CompileOptions(width=args.width, pretty_html=args.pretty)
        )
    except (OSError, UnicodeDecodeError) as exc:
        print(f"wiretext: cannot read {args.source}: {exc}", file=sys.stderr)
        return 1
    except WiretextError as exc:
        print(f"wiretext: {exc}", file=sys.stderr)
        return 1

    if args.format == "html":
        output = result.html
    elif args.format == "json":
        output = result.tree_json
    elif args.format == "stats":
        output = format_stats(result.html)
    else:
        output = result.ascii

    if args.output:
        try:
            Path(args.output).write_text(output + "\n", encoding="utf-8")
        except OSError as exc:
            print(f"wiretext: cannot write {args.output}: {exc}", file=sys.stderr)
            return 1
        logger.info("Wrote %s output to %s", args.format, args.output)
    else:
        print(output)
    return 0


def read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def format_stats(html: str) -> str:
    tags, classes = collect_markup_stats(html)
    lines = ["Tags:"]
    lines.extend(f"{name}: {count}" for name, count in tags.most_common())
    lines.append("")
    lines.append("Classes:")
    lines.extend(f"{name}: {count}" for name, count in classes.most_common())
    return "\n".join(lines)


if __name__ == "__main__":
    sys.exit(main())
