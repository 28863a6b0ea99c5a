"""Sample data generators."""

from listing_stats.generators.listing import ListingGenerator, build_header

__all__ = ["ListingGenerator", "build_header"]
