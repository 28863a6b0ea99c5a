"""Domain models for listing statistics."""

from listing_stats.models.enums import Category, ListingStatus
from listing_stats.models.listing import MISSING_STATUS, ListingRecord

__all__ = ["Category", "ListingRecord", "ListingStatus", "MISSING_STATUS"]
