"""Output sinks for listing reports."""

from listing_stats.sinks.console import ConsoleSink
from listing_stats.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
