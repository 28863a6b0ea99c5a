"""Command-line entry point: summarize the listings of one worksheet.

Reads the listings worksheet of an Excel export, classifies every row as
sale, rent, sale-and-rent or unclassified, and prints either the full JSON
report or a condensed tab-separated line.

Environment variables (LISTING_FILE, LISTING_SHEET, LOG_LEVEL, ...) provide
defaults that command-line flags override.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from listing_stats.config import ReportConfig
from listing_stats.exceptions import ListingStatsError
from listing_stats.logging import setup_logging
from listing_stats.sinks import ConsoleSink, JsonFileSink
from listing_stats.sources.workbook import read_listings
from listing_stats.stats.report import ListingReport, build_report

logger = logging.getLogger(__name__)


REPORT_KEYS_NOTE = """\
JSON report keys use English status names. Earlier exports used the
Portuguese ones; rename when migrating consumers:
  total_ativo -> total_active        total_locado -> total_rented
  total_cancelado -> total_canceled  total_provisorio -> total_provisional
  total_ficha -> total_draft         total_suspenso -> total_suspended
  total_vendido -> total_sold
"""


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="listing-stats",
        description="Classify property listings from an Excel worksheet and count them",
        epilog=REPORT_KEYS_NOTE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-f", "--file-path", type=Path, help="Excel workbook (.xlsx, .xlsm or .xls)")
    parser.add_argument(
        "-p",
        "--page-name",
        help="Worksheet name (default: Imoveis)",
    )
    parser.add_argument(
        "--short-output",
        action="store_true",
        default=None,
        help="Print the condensed tab-separated line instead of the JSON report",
    )
    parser.add_argument(
        "--no-quote",
        action="store_true",
        help="Do not wrap the condensed line in double quotes",
    )
    parser.add_argument("-o", "--output", type=Path, help="Write the JSON report to this file")
    parser.add_argument("--header-rows", type=int, help="Rows to skip before data (default: 1)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        help="Log format (default: standard)",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> ReportConfig:
    """Merge command-line flags over the environment configuration."""
    config = ReportConfig.from_env()

    if args.file_path is not None:
        config.file_path = args.file_path
    if args.page_name is not None:
        config.sheet_name = args.page_name
    if args.short_output is not None:
        config.short_output = args.short_output
    if args.no_quote:
        config.quote_short = False
    if args.output is not None:
        config.output_path = args.output
    if args.header_rows is not None:
        config.header_rows = args.header_rows
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format

    config.validate()
    return config


def run(config: ReportConfig) -> ListingReport:
    """Build the report for ``config`` and send it to the configured sinks."""
    logger.info("Reading %s [%s]", config.file_path, config.sheet_name)
    records = read_listings(
        config.file_path,
        sheet_name=config.sheet_name,
        layout=config.layout,
        header_rows=config.header_rows,
    )
    report = build_report(records)

    if config.output_path is not None:
        JsonFileSink(config.output_path).write_report(report)

    console = ConsoleSink(quote_short=config.quote_short)
    if config.short_output:
        console.write_short(report)
    elif config.output_path is None:
        console.write_report(report)

    return report


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level or "INFO", format_type=args.log_format or "standard")

    try:
        config = resolve_config(args)
        setup_logging(level=config.log_level, format_type=config.log_format)
        run(config)
    except ListingStatsError as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
