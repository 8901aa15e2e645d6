"""Command-line entry point for the line tracer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .api import dump_graph, dump_mermaid, dump_steps, trace_source, visualize_source
from .formatter import format_source
from .languages import SUPPORTED_LANGUAGES, get_template, language_for_extension
from .run import run
from .run_types import AnalyzerConfig
from .validators import check_syntax, validate_code
from . import constants

logger = logging.getLogger(__name__)


def _print_header(title: str):
    print(f"═══ {title} ═══")


def _read_source(path: str | None, language: str) -> str:
    if not path:
        source = get_template(language)
        print("No file provided. Using built-in demo:\n")
        print(source)
        return source
    return Path(path).read_text(encoding="utf-8")


def _resolve_language(args) -> str:
    if args.language:
        return args.language
    if args.file:
        guessed = language_for_extension(Path(args.file).suffix)
        if guessed:
            return guessed
    return constants.DEFAULT_LANGUAGE


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linetrace",
        description="Heuristic line tracer: synthesize display steps and a sequential graph",
    )
    parser.add_argument("file", nargs="?", help="Source file to analyze")
    parser.add_argument(
        "--language",
        "-l",
        default=None,
        choices=list(SUPPORTED_LANGUAGES),
        help="Source language (default: from file extension, else javascript)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable logging and print classified lines and statistics",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--steps-only", action="store_true", help="Only print the steps")
    mode.add_argument("--graph-only", action="store_true", help="Only print the graph")
    mode.add_argument("--mermaid", action="store_true", help="Print a Mermaid flowchart")
    mode.add_argument("--trace", action="store_true", help="Print the tracer payload as JSON")
    mode.add_argument(
        "--json", action="store_true", help="Print the visualizer payload as JSON"
    )
    mode.add_argument("--format", action="store_true", help="Print re-indented source")
    mode.add_argument("--check", action="store_true", help="Validate and syntax-check")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    language = _resolve_language(args)
    source = _read_source(args.file, language)

    if args.steps_only:
        _print_header("Steps")
        print(dump_steps(source))
        return 0

    if args.graph_only:
        _print_header("Graph")
        print(dump_graph(source))
        return 0

    if args.mermaid:
        print(dump_mermaid(source))
        return 0

    if args.trace:
        print(json.dumps(trace_source(source, language).to_dict(), indent=2))
        return 0

    if args.json:
        print(json.dumps(visualize_source(source, language).to_dict(), indent=2))
        return 0

    if args.format:
        print(format_source(source))
        return 0

    if args.check:
        result = validate_code(source, language)
        print(result.message)
        if not result.valid:
            return 1
        report = check_syntax(source, language)
        if report.ok:
            print("No syntax errors")
            return 0
        print(f"Syntax errors on lines: {', '.join(map(str, report.error_lines))}")
        return 1

    result, stats = run(source, AnalyzerConfig(language=language, verbose=args.verbose))
    _print_header("Steps")
    for step in result.steps:
        print(f"  {step}")
    print()
    _print_header("Graph")
    print(result.graph)
    if not args.verbose:
        print()
        print(stats.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
