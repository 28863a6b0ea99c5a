"""Input sources for listing rows."""

from listing_stats.sources.workbook import (
    decode_row,
    encode_row,
    open_worksheet_rows,
    read_listings,
    write_workbook,
)

__all__ = ["decode_row", "encode_row", "open_worksheet_rows", "read_listings", "write_workbook"]
