"""JSON file sink for saving reports."""

import json
import logging
from pathlib import Path

from listing_stats.exceptions import SinkError
from listing_stats.sinks.serialization import report_to_list
from listing_stats.stats.report import ListingReport

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Write a listing report to a JSON file."""

    def __init__(self, path: str | Path, pretty: bool = True) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        path : str | Path
            Destination file. Parent directories are created on write.
        pretty : bool
            Pretty-print JSON output.
        """
        self.path = Path(path)
        self.pretty = pretty

    def write_report(self, report: ListingReport) -> Path:
        """Write the full report and return the file path."""
        data = report_to_list(report)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as exc:
            raise SinkError(f"Cannot write report to {self.path}: {exc}") from exc

        logger.info("Report written to %s", self.path)
        return self.path
