"""Console sink for printing reports to stdout."""

import json

from listing_stats.sinks.serialization import format_short_line, report_to_list
from listing_stats.stats.report import ListingReport


class ConsoleSink:
    """Print a listing report to stdout."""

    def __init__(self, pretty: bool = True, quote_short: bool = True) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        quote_short : bool
            Wrap the condensed line in double quotes so it pastes into a
            single spreadsheet cell.
        """
        self.pretty = pretty
        self.quote_short = quote_short

    def write_report(self, report: ListingReport) -> None:
        """Print the full report as a JSON array."""
        data = report_to_list(report)
        if self.pretty:
            print(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            print(json.dumps(data, ensure_ascii=False))

    def write_short(self, report: ListingReport) -> None:
        """Print the condensed summary line."""
        line = format_short_line(report)
        print(f'"{line}"' if self.quote_short else line)
