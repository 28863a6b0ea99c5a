"""Per-category statistics accumulator and the merge into a grand total."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from listing_stats.models.enums import ListingStatus
from listing_stats.models.listing import ListingRecord

NAME_SEPARATOR = "_"

# Counter field on CategoryStats for each recognized status
STATUS_FIELDS: dict[ListingStatus, str] = {
    ListingStatus.ACTIVE: "total_active",
    ListingStatus.CANCELED: "total_canceled",
    ListingStatus.DRAFT: "total_draft",
    ListingStatus.RENTED: "total_rented",
    ListingStatus.PROVISIONAL: "total_provisional",
    ListingStatus.SUSPENDED: "total_suspended",
    ListingStatus.SOLD: "total_sold",
}

TOTAL_FIELDS = ("total_raw", "total_unique", "total_duplicates")


@dataclass
class CategoryStats:
    """Running tally of listing ids and statuses for one category.

    ``ids`` keeps every id in input order, duplicates included. The
    ``total_*`` id counts are only meaningful after :meth:`finalize`.
    """

    name: str = ""
    ids: list[int] = field(default_factory=list)
    total_raw: int = 0
    total_unique: int = 0
    total_duplicates: int = 0
    total_active: int = 0
    total_canceled: int = 0
    total_draft: int = 0
    total_rented: int = 0
    total_provisional: int = 0
    total_suspended: int = 0
    total_sold: int = 0

    def add_id(self, listing_id: int) -> None:
        """Append a listing id."""
        self.ids.append(listing_id)

    def add_status(self, label: str) -> None:
        """Count a status label; unrecognized labels are ignored."""
        status = ListingStatus.from_label(label)
        if status is None:
            return
        attr = STATUS_FIELDS[status]
        setattr(self, attr, getattr(self, attr) + 1)

    def add_record(self, record: ListingRecord) -> None:
        """Ingest a decoded listing."""
        self.add_id(record.listing_id)
        self.add_status(record.status)

    def finalize(self) -> CategoryStats:
        """Derive raw, unique and duplicate counts from ``ids``.

        Safe to call more than once; ``ids`` is left untouched.
        """
        self.total_raw = len(self.ids)
        self.total_unique = len(set(self.ids))
        self.total_duplicates = self.total_raw - self.total_unique
        return self

    def status_counts(self) -> dict[ListingStatus, int]:
        """Return the counter for every recognized status."""
        return {status: getattr(self, attr) for status, attr in STATUS_FIELDS.items()}


def merge_stats(items: Sequence[CategoryStats]) -> CategoryStats:
    """Combine finalized accumulators into a grand total.

    Names are joined with ``_`` and ids concatenated in input order. Every
    count is the plain sum of the inputs' counts; uniqueness is not
    recomputed across categories, so an id listed in two categories is
    counted as unique in both.

    Parameters
    ----------
    items : Sequence[CategoryStats]
        Accumulators that have already been finalized.

    Returns
    -------
    CategoryStats
        The merged accumulator. It is not finalized again.
    """
    output = CategoryStats()
    for item in items:
        output.ids.extend(item.ids)

        if output.name == "":
            output.name = item.name
        else:
            output.name = f"{output.name}{NAME_SEPARATOR}{item.name}"

        for attr in TOTAL_FIELDS + tuple(STATUS_FIELDS.values()):
            setattr(output, attr, getattr(output, attr) + getattr(item, attr))
    return output
