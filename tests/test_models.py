"""Tests for domain models."""

from listing_stats.models import MISSING_STATUS, Category, ListingRecord, ListingStatus


class TestListingRecord:
    """Tests for ListingRecord defaults."""

    def test_defaults(self) -> None:
        record = ListingRecord()

        assert record.listing_id == 0
        assert record.sale_price == 0.0
        assert record.rent_price == 0.0
        assert record.status == MISSING_STATUS == "n/a"


class TestCategory:
    """Tests for Category."""

    def test_exactly_four_categories(self) -> None:
        assert len(Category) == 4

    def test_values_are_report_names(self) -> None:
        assert Category.SALE.value == "sale"
        assert Category.RENT.value == "rent"
        assert Category.SALE_AND_RENT.value == "rent-sale"
        assert Category.UNCLASSIFIED.value == "error"


class TestListingStatus:
    """Tests for ListingStatus."""

    def test_seven_labels(self) -> None:
        assert len(ListingStatus) == 7

    def test_from_label_exact(self) -> None:
        assert ListingStatus.from_label("Ativo") == ListingStatus.ACTIVE
        assert ListingStatus.from_label("Provisório") == ListingStatus.PROVISIONAL

    def test_from_label_is_case_and_accent_sensitive(self) -> None:
        assert ListingStatus.from_label("ativo") is None
        assert ListingStatus.from_label("Provisorio") is None
        assert ListingStatus.from_label("Vendido ") is None

    def test_from_label_unknown(self) -> None:
        assert ListingStatus.from_label("n/a") is None
        assert ListingStatus.from_label("") is None
