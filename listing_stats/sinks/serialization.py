"""Serialization of listing reports for the sinks."""

from dataclasses import fields
from typing import Any

from listing_stats.stats.accumulator import CategoryStats
from listing_stats.stats.report import ListingReport

# Fields that never leave the process
SKIPPED_FIELDS = frozenset({"ids"})

SHORT_SEPARATOR = "\t"


def stats_to_dict(stats: CategoryStats) -> dict[str, Any]:
    """Convert an accumulator to a dict, leaving out the raw id list."""
    return {
        f.name: getattr(stats, f.name)
        for f in fields(stats)
        if f.name not in SKIPPED_FIELDS
    }


def report_to_list(report: ListingReport) -> list[dict[str, Any]]:
    """Serialize a report as total, sale, rent, unclassified, sale-and-rent."""
    ordered = [
        report.total,
        report.sale,
        report.rent,
        report.unclassified,
        report.sale_and_rent,
    ]
    return [stats_to_dict(stats) for stats in ordered]


def format_short_line(report: ListingReport) -> str:
    """Render the condensed tab-separated summary line.

    Fields: raw sale, raw rent, raw unclassified, raw sale-and-rent, total
    duplicates, an empty placeholder, total active.
    """
    values = [
        report.sale.total_raw,
        report.rent.total_raw,
        report.unclassified.total_raw,
        report.sale_and_rent.total_raw,
        report.total.total_duplicates,
        "",
        report.total.total_active,
    ]
    return SHORT_SEPARATOR.join(str(value) for value in values)
