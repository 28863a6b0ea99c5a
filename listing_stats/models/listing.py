"""Listing record decoded from one worksheet row."""

from dataclasses import dataclass

MISSING_STATUS = "n/a"


@dataclass
class ListingRecord:
    """One property listing with its defaults already applied."""

    listing_id: int = 0
    sale_price: float = 0.0
    rent_price: float = 0.0
    status: str = MISSING_STATUS
