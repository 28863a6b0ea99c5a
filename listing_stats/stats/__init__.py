"""Classification and aggregation of listing statistics."""

from listing_stats.stats.accumulator import CategoryStats, merge_stats
from listing_stats.stats.classifier import classify
from listing_stats.stats.report import ListingReport, build_report

__all__ = ["CategoryStats", "ListingReport", "build_report", "classify", "merge_stats"]
