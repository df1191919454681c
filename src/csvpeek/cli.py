"""
Command-line entry point.

Examples:
    csvpeek data.csv --info                 general info of the file
    csvpeek data.csv                        first 10 rows
    csvpeek data.csv --cols c,a             selected columns, in that order
    csvpeek data.csv -n 5 --offset 20       rows 21 to 25
    csvpeek data.csv --filter STATUS=ok     rows whose STATUS is exactly "ok"

Exit codes: 0 on success, 1 on any reported error, 2 on bad usage.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO

from csvpeek import __version__
from csvpeek.config import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_LIMIT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OFFSET,
    LOG_FORMAT,
    LOG_LEVEL_ENV_VAR,
    LOG_LEVELS,
)
from csvpeek.errors import CsvPeekError
from csvpeek.evaluator import RowStreamEvaluator
from csvpeek.formatting import format_header
from csvpeek.info import collect_source_info, format_info
from csvpeek.query import compile_query
from csvpeek.reader import CsvSource
from csvpeek.schema import SchemaIndex
from csvpeek.serialization import RENDERERS

log = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def _delimiter(value: str) -> str:
    if value == "\\t":
        return "\t"
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"delimiter must be a single character, got '{value}'")
    return value


def _default_log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csvpeek",
        description="Inspect a delimited file: print its info or a filtered view of its rows",
    )
    parser.add_argument("file", help="Input file to process (first record is the header)")
    parser.add_argument("-c", "--cols", help="Columns to display, comma separated, in output order")
    parser.add_argument("-f", "--filter", help="Row filters, comma separated, e.g. NAME=value,OTHER=x")
    parser.add_argument("-n", "--limit", type=_non_negative_int, default=DEFAULT_LIMIT,
                        help=f"Max rows to display (default: {DEFAULT_LIMIT})")
    parser.add_argument("-o", "--offset", type=_non_negative_int, default=DEFAULT_OFFSET,
                        help="Rows to skip before filtering (default: 0)")
    parser.add_argument("-i", "--info", action="store_true",
                        help="Display header names, column count and row count")
    parser.add_argument("-d", "--delimiter", type=_delimiter, default=DEFAULT_DELIMITER,
                        help="Field delimiter, a single character; '\\t' for tab (default: ',')")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING, help=f"File encoding (default: {DEFAULT_ENCODING})")
    parser.add_argument("--format", choices=["text", "json", "yaml"], default="text",
                        help="Output format for --info (default: text)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=_default_log_level(),
                        help=f"Diagnostics level on stderr (env: {LOG_LEVEL_ENV_VAR})")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def run_info(args: argparse.Namespace, out: TextIO) -> None:
    """Print header names and counts; query options are ignored."""
    with CsvSource(args.file, delimiter=args.delimiter, encoding=args.encoding) as source:
        info = collect_source_info(source)

    if args.format == "text":
        for line in format_info(info):
            print(line, file=out)
    else:
        text = RENDERERS[args.format](info)
        print(text, end="" if text.endswith("\n") else "\n", file=out)


def run_query(args: argparse.Namespace, out: TextIO) -> None:
    """Compile the query against the header, then stream matching rows."""
    with CsvSource(args.file, delimiter=args.delimiter, encoding=args.encoding) as source:
        schema = SchemaIndex.from_header(source.header)
        query = compile_query(
            schema,
            cols=args.cols,
            filters=args.filter,
            offset=args.offset,
            limit=args.limit,
        )

        if query.projection:
            print(format_header(query.projected_columns), file=out)

        evaluator = RowStreamEvaluator(query)
        for line in evaluator.run(source.records()):
            print(line, file=out)

    log.info("Emitted %d rows", evaluator.stats.rows_emitted)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.info:
            run_info(args, sys.stdout)
        else:
            run_query(args, sys.stdout)
    except CsvPeekError as e:
        print(f"Error reading or processing CSV: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
