"""Command-line interface for html2json."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from html2json.batch import batch_process_csv
from html2json.config import HTML2JSON_DEFAULT_COLUMN
from html2json.converter import html_to_json_string
from html2json.csv_processor import process_csv, stream_csv
from html2json.exceptions import Html2JsonError, InputNotFoundError
from html2json.tag_stats import collect_stats, format_stats, load_column
from html2json.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html2json",
        description="Convert HTML stored in CSV cells into a JSON document tree.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Run with verbose logging")
    subparsers = parser.add_subparsers(dest="command", metavar="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert an HTML string or file to JSON")
    convert.add_argument("--html", help="HTML string to convert")
    convert.add_argument("-i", "--input", help="Input HTML file")
    convert.add_argument("-o", "--output", help="Output JSON file (stdout if not specified)")
    convert.set_defaults(handler=_run_convert)

    csv = subparsers.add_parser("csv", help="Process a CSV file with HTML content")
    csv.add_argument("-i", "--input", required=True, help="Input CSV file")
    csv.add_argument("-o", "--output", required=True, help="Output CSV file")
    csv.add_argument("-c", "--column", default=HTML2JSON_DEFAULT_COLUMN, help="HTML column name")
    csv.add_argument("-s", "--stream", action="store_true", help="Use streaming for large files")
    csv.set_defaults(handler=_run_csv)

    batch = subparsers.add_parser("batch", help="Process multiple CSV files")
    batch.add_argument("-p", "--pattern", required=True, help="Glob pattern for input files")
    batch.add_argument("-d", "--output-dir", required=True, help="Output directory")
    batch.add_argument("-c", "--column", default=HTML2JSON_DEFAULT_COLUMN, help="HTML column name")
    batch.set_defaults(handler=_run_batch)

    inspect = subparsers.add_parser("inspect", help="Count the HTML tags used in a CSV column")
    inspect.add_argument("-i", "--input", required=True, help="Input CSV file")
    inspect.add_argument("-c", "--column", default=HTML2JSON_DEFAULT_COLUMN, help="HTML column name")
    inspect.add_argument(
        "--unrecognized-only",
        action="store_true",
        help="Show only tags the converter does not turn into nodes",
    )
    inspect.set_defaults(handler=_run_inspect)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "convert" and not args.html and not args.input:
        parser.error("Either --html or --input must be specified")

    configure_logging(verbose=args.verbose)

    try:
        return args.handler(args)
    except (Html2JsonError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _run_convert(args: argparse.Namespace) -> int:
    if args.html:
        html = args.html
    else:
        path = Path(args.input)
        if not path.is_file():
            raise InputNotFoundError(f"Input file not found: {path}")
        html = path.read_text(encoding="utf-8")

    output = html_to_json_string(html)
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        logger.info("Output written to %s", args.output)
    else:
        print(output)
    return 0


def _run_csv(args: argparse.Namespace) -> int:
    if args.stream:
        result = stream_csv(args.input, args.output, args.column)
    else:
        result = process_csv(args.input, args.output, args.column)
    if result.warnings:
        logger.warning("%d rows kept their original HTML", len(result.warnings))
    return 0


def _run_batch(args: argparse.Namespace) -> int:
    result = batch_process_csv(args.pattern, args.output_dir, args.column)
    return 0 if result.succeeded == result.total else 1


def _run_inspect(args: argparse.Namespace) -> int:
    tags, attrs = collect_stats(load_column(args.input, args.column))
    print(format_stats(tags, attrs, unrecognized_only=args.unrecognized_only))
    return 0
