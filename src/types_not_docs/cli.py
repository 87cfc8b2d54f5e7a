"""Generate Markdown API documentation from TypeScript types.

Usage:
    types-not-docs "./src/**/*.ts"
    types-not-docs "./src/**/*.ts" -o docs.md -t "My SDK Reference"
    types-not-docs "./src/**/*.ts" --exclude "**/__tests__/**"
"""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from types_not_docs.build_docs import build_docs
from types_not_docs.discover_files import discover_files
from types_not_docs.errors import EmptyResultError, OutputError, TypesNotDocsError
from types_not_docs.load_config import generator_options, load_config

logger = logging.getLogger(__name__)


def _package_version() -> str:
    try:
        return version("types-not-docs")
    except PackageNotFoundError:
        return "0.0.0+unknown"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    ap = argparse.ArgumentParser(
        prog="types-not-docs",
        description="Generate markdown documentation from TypeScript types",
        epilog=__doc__.split("\n\n", 1)[1],
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument(
        "patterns",
        nargs="+",
        metavar="GLOB",
        help="Glob pattern(s) for TypeScript files (e.g., ./src/**/*.ts)",
    )
    ap.add_argument("-o", "--output", type=Path, help="Output file (default: stdout)")
    ap.add_argument("-t", "--title", help="Document title (default: API Reference)")
    ap.add_argument(
        "--exclude",
        nargs="+",
        metavar="GLOB",
        help="Glob patterns to exclude (replaces the configured list)",
    )
    ap.add_argument("--config", type=Path, help="Path to a YAML configuration file")
    ap.add_argument(
        "-j",
        "--jobs",
        type=int,
        help="Number of files to parse in parallel (default: 1)",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Report progress on stderr (-vv for debug output)",
    )
    ap.add_argument("--version", action="version", version=_package_version())
    return ap.parse_args(argv)


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level, format="%(levelname)s: %(message)s", stream=sys.stderr
    )


def run(args: argparse.Namespace) -> int:
    """Discover, extract and render; write the result to a file or stdout."""
    config = load_config(
        args.config,
        overrides={"title": args.title, "exclude": args.exclude, "jobs": args.jobs},
    )

    files = discover_files(args.patterns, config["exclude"])
    if not files:
        msg = f"No files found matching pattern: {' '.join(args.patterns)}"
        raise EmptyResultError(msg)
    logger.info("Found %d file(s)", len(files))

    markdown = build_docs(files, generator_options(config), jobs=config["jobs"])

    if args.output:
        try:
            args.output.write_text(markdown, encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot write {args.output}: {exc.strerror or exc}"
            raise OutputError(msg) from exc
        logger.info("Wrote documentation to %s", args.output)
    else:
        print(markdown)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command-line interface."""
    args = parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return run(args)
    except TypesNotDocsError as exc:
        logger.error("Error: %s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
