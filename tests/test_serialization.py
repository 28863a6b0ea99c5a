"""Tests for report serialization."""

from listing_stats.models.listing import ListingRecord
from listing_stats.sinks.serialization import (
    format_short_line,
    report_to_list,
    stats_to_dict,
)
from listing_stats.stats.accumulator import CategoryStats
from listing_stats.stats.report import build_report


class TestStatsToDict:
    """Tests for stats_to_dict."""

    def test_ids_skipped(self) -> None:
        stats = CategoryStats(name="sale", ids=[1, 2])

        assert "ids" not in stats_to_dict(stats)

    def test_plain_values(self) -> None:
        stats = CategoryStats(name="sale", ids=[1, 1]).finalize()

        data = stats_to_dict(stats)

        assert data["name"] == "sale"
        assert data["total_duplicates"] == 1
        assert all(type(value) in (int, str) for value in data.values())

    def test_field_order(self) -> None:
        keys = list(stats_to_dict(CategoryStats()))

        assert keys == [
            "name",
            "total_raw",
            "total_unique",
            "total_duplicates",
            "total_active",
            "total_canceled",
            "total_draft",
            "total_rented",
            "total_provisional",
            "total_suspended",
            "total_sold",
        ]


class TestReportToList:
    """Tests for report_to_list."""

    def test_order(self, scenario_records: list[ListingRecord]) -> None:
        data = report_to_list(build_report(scenario_records))

        assert [item["name"] for item in data] == [
            "sale_rent_rent-sale_error",
            "sale",
            "rent",
            "error",
            "rent-sale",
        ]

    def test_total_values(self, scenario_records: list[ListingRecord]) -> None:
        total = report_to_list(build_report(scenario_records))[0]

        assert total["total_raw"] == 4
        assert total["total_unique"] == 4
        assert total["total_duplicates"] == 0
        assert total["total_active"] == 2
        assert total["total_sold"] == 1


class TestFormatShortLine:
    """Tests for format_short_line."""

    def test_scenario(self, scenario_records: list[ListingRecord]) -> None:
        assert format_short_line(build_report(scenario_records)) == "1\t1\t1\t1\t0\t\t2"

    def test_field_positions(self) -> None:
        records = (
            [ListingRecord(listing_id=1, sale_price=1.0, status="Ativo")] * 3
            + [ListingRecord(listing_id=2, rent_price=1.0)] * 2
            + [ListingRecord(listing_id=3, sale_price=1.0, rent_price=1.0)] * 5
            + [ListingRecord(listing_id=4)]
        )

        fields = format_short_line(build_report(records)).split("\t")

        assert fields == ["3", "2", "1", "5", str(2 + 1 + 4), "", "3"]

    def test_empty_report(self) -> None:
        assert format_short_line(build_report([])) == "0\t0\t0\t0\t0\t\t0"
