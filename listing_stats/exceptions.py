"""Custom exception hierarchy for listing-stats."""


class ListingStatsError(Exception):
    """Base exception for all listing-stats errors."""


class WorkbookReadError(ListingStatsError):
    """Raised when a workbook file cannot be opened or read."""


class WorksheetNotFoundError(WorkbookReadError):
    """Raised when the requested worksheet does not exist in the workbook."""


class ConfigurationError(ListingStatsError):
    """Raised when configuration is invalid or missing."""


class SinkError(ListingStatsError):
    """Raised when a sink operation fails."""
