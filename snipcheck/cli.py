# snipcheck/cli.py
from __future__ import annotations

import argparse
import os
import sys
import threading
from typing import List, Sequence

from ._logging import configure_cli_logging
from .config import DEFAULT_TIMEOUT_MS, CheckConfig
from .core import check_document
from .errors import NotFound, SnipcheckError
from .models import Report
from .report import exit_code, render_report, render_summary
from .utils.discover import discover_documents

EXIT_ERROR = 2


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snipcheck",
        description="Compile or run every fenced code snippet of a markdown tutorial.",
    )
    parser.add_argument("path", help="Markdown document, or a directory of them")
    parser.add_argument(
        "--timeout-ms",
        type=_positive_int,
        default=DEFAULT_TIMEOUT_MS,
        help=f"Wall-clock limit per snippet in milliseconds (default {DEFAULT_TIMEOUT_MS})",
    )
    parser.add_argument(
        "--jobs",
        type=_positive_int,
        default=os.cpu_count() or 1,
        help="Number of snippets validated concurrently (default: CPU count)",
    )
    parser.add_argument(
        "--lang",
        default=None,
        help="Subject language tag (default: the most common fence tag)",
    )
    parser.add_argument(
        "--tool",
        default=None,
        help="Command run as '<tool> <snippet-file>'; '{file}' marks a custom position",
    )
    parser.add_argument(
        "--no-preamble",
        dest="implicit_preamble",
        action="store_false",
        help="Only use a block marked 'check=preamble' as the preamble",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="gitignore-style pattern, relative to a directory PATH, to leave out (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging and full tool output")
    return parser


def run(
    config: CheckConfig,
    path: str,
    cancel_event: threading.Event,
    exclude: Sequence[str] = (),
) -> List[Report]:
    if not os.path.exists(path):
        raise NotFound(path)
    documents = discover_documents(path, exclude=exclude)
    single = os.path.isfile(path)
    reports: List[Report] = []
    for doc_path in documents:
        if cancel_event.is_set():
            break
        report = check_document(doc_path, config, cancel_event=cancel_event)
        reports.append(report)
        sys.stdout.write(render_report(report, verbose=config.verbose, summary=single))
        sys.stdout.flush()
    if not single:
        print(render_summary(reports))
    return reports


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_cli_logging(args.verbose)

    cancel_event = threading.Event()
    try:
        config = CheckConfig(
            timeout_ms=args.timeout_ms,
            jobs=args.jobs,
            language=args.lang,
            tool=args.tool,
            implicit_preamble=args.implicit_preamble,
            verbose=args.verbose,
        ).validate()
        reports = run(config, args.path, cancel_event, exclude=args.exclude)
    except SnipcheckError as e:
        print(f"snipcheck: error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        cancel_event.set()
        print("snipcheck: interrupted", file=sys.stderr)
        return EXIT_ERROR
    return exit_code(reports)


if __name__ == "__main__":
    raise SystemExit(main())
