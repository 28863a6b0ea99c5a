"""Tests for the aggregation pass."""

import logging

import pytest

from listing_stats.models.enums import Category
from listing_stats.models.listing import ListingRecord
from listing_stats.stats.report import ListingReport, build_report


class TestListingReport:
    """Tests for ListingReport."""

    def test_default_names(self) -> None:
        report = ListingReport()

        assert report.sale.name == "sale"
        assert report.rent.name == "rent"
        assert report.sale_and_rent.name == "rent-sale"
        assert report.unclassified.name == "error"

    def test_for_category_covers_every_member(self) -> None:
        report = ListingReport()

        for category in Category:
            assert report.for_category(category).name == category.value

    def test_categories_order(self) -> None:
        names = [stats.name for stats in ListingReport().categories()]
        assert names == ["sale", "rent", "rent-sale", "error"]


class TestBuildReport:
    """Tests for build_report."""

    def test_scenario(self, scenario_records: list[ListingRecord]) -> None:
        report = build_report(scenario_records)

        assert report.sale.ids == [1]
        assert report.sale.total_raw == 1
        assert report.sale.total_sold == 1

        assert report.rent.ids == [2]
        assert report.rent.total_raw == 1
        assert report.rent.total_active == 1

        assert report.sale_and_rent.ids == [3]
        assert report.sale_and_rent.total_raw == 1
        assert report.sale_and_rent.total_active == 1

        assert report.unclassified.ids == [4]
        assert report.unclassified.total_raw == 1
        assert sum(report.unclassified.status_counts().values()) == 0

        assert report.total.total_raw == 4
        assert report.total.total_unique == 4
        assert report.total.total_duplicates == 0
        assert report.total.total_active == 2
        assert report.total.total_sold == 1
        assert report.total.name == "sale_rent_rent-sale_error"

    def test_duplicates_within_category(self) -> None:
        records = [ListingRecord(listing_id=i, sale_price=1.0) for i in [1, 2, 2, 3]]

        report = build_report(records)

        assert report.sale.total_raw == 4
        assert report.sale.total_unique == 3
        assert report.sale.total_duplicates == 1
        assert report.total.total_duplicates == 1

    def test_duplicates_across_categories(self) -> None:
        records = [
            ListingRecord(listing_id=7, sale_price=1.0),
            ListingRecord(listing_id=7, rent_price=1.0),
        ]

        report = build_report(records)

        assert report.total.total_duplicates == 0
        assert report.global_duplicates() == 1

    def test_empty_input(self) -> None:
        report = build_report([])

        assert report.total.total_raw == 0
        assert report.total.name == "sale_rent_rent-sale_error"

    def test_accepts_generator(self, scenario_records: list[ListingRecord]) -> None:
        report = build_report(record for record in scenario_records)
        assert report.total.total_raw == 4

    def test_logs_summary(
        self, scenario_records: list[ListingRecord], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="listing_stats"):
            build_report(scenario_records)

        assert "Classified 4 listings" in caplog.text

    def test_warns_on_duplicates(self, caplog: pytest.LogCaptureFixture) -> None:
        records = [ListingRecord(listing_id=1, rent_price=5.0)] * 2

        with caplog.at_level(logging.WARNING, logger="listing_stats"):
            build_report(records)

        assert "1 duplicate listing ids" in caplog.text
