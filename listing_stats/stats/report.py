"""Aggregation pass: decoded listings in, five accumulators out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from listing_stats.models.enums import Category
from listing_stats.models.listing import ListingRecord
from listing_stats.stats.accumulator import CategoryStats, merge_stats
from listing_stats.stats.classifier import classify

logger = logging.getLogger(__name__)

# Order in which categories are merged into the total
MERGE_ORDER = (
    Category.SALE,
    Category.RENT,
    Category.SALE_AND_RENT,
    Category.UNCLASSIFIED,
)


@dataclass
class ListingReport:
    """The four category accumulators plus their merged total."""

    sale: CategoryStats = field(default_factory=lambda: CategoryStats(name=Category.SALE.value))
    rent: CategoryStats = field(default_factory=lambda: CategoryStats(name=Category.RENT.value))
    sale_and_rent: CategoryStats = field(
        default_factory=lambda: CategoryStats(name=Category.SALE_AND_RENT.value)
    )
    unclassified: CategoryStats = field(
        default_factory=lambda: CategoryStats(name=Category.UNCLASSIFIED.value)
    )
    total: CategoryStats = field(default_factory=CategoryStats)

    def for_category(self, category: Category) -> CategoryStats:
        """Return the accumulator that collects ``category`` listings."""
        by_category = {
            Category.SALE: self.sale,
            Category.RENT: self.rent,
            Category.SALE_AND_RENT: self.sale_and_rent,
            Category.UNCLASSIFIED: self.unclassified,
        }
        return by_category[category]

    def categories(self) -> list[CategoryStats]:
        """Return the category accumulators in merge order."""
        return [self.for_category(category) for category in MERGE_ORDER]

    def global_duplicates(self) -> int:
        """Count duplicate ids across all categories combined.

        Diagnostic only: ``total.total_duplicates`` stays the sum of the
        per-category counts.
        """
        ids = [listing_id for stats in self.categories() for listing_id in stats.ids]
        return len(ids) - len(set(ids))


def build_report(records: Iterable[ListingRecord]) -> ListingReport:
    """Classify every record, finalize each category and merge the total.

    Parameters
    ----------
    records : Iterable[ListingRecord]
        Decoded listings, header already skipped.

    Returns
    -------
    ListingReport
        Finalized accumulators and the merged total.
    """
    report = ListingReport()

    for record in records:
        category = classify(record.sale_price, record.rent_price)
        report.for_category(category).add_record(record)

    for stats in report.categories():
        stats.finalize()

    report.total = merge_stats(report.categories())

    logger.info(
        "Classified %d listings: sale=%d rent=%d sale_and_rent=%d unclassified=%d",
        report.total.total_raw,
        report.sale.total_raw,
        report.rent.total_raw,
        report.sale_and_rent.total_raw,
        report.unclassified.total_raw,
    )
    if report.total.total_duplicates:
        logger.warning("Found %d duplicate listing ids", report.total.total_duplicates)

    return report
