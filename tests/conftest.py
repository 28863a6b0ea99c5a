"""Pytest configuration and fixtures."""

import logging
from pathlib import Path
from typing import Iterator

import pytest
import xlwt

from listing_stats.generators import build_header
from listing_stats.models.listing import ListingRecord
from listing_stats.sources.workbook import encode_row, write_workbook


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def scenario_records() -> list[ListingRecord]:
    """One listing per category."""
    return [
        ListingRecord(listing_id=1, sale_price=100.0, rent_price=0.0, status="Vendido"),
        ListingRecord(listing_id=2, sale_price=0.0, rent_price=50.0, status="Ativo"),
        ListingRecord(listing_id=3, sale_price=100.0, rent_price=50.0, status="Ativo"),
        ListingRecord(listing_id=4, sale_price=0.0, rent_price=0.0, status="n/a"),
    ]


@pytest.fixture
def scenario_workbook(tmp_path: Path, scenario_records: list[ListingRecord]) -> Path:
    """Workbook holding the scenario listings under a header row."""
    rows = [encode_row(record) for record in scenario_records]
    return write_workbook(tmp_path / "listings.xlsx", rows, header=build_header())


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration env vars from leaking into tests."""
    for name in (
        "LISTING_FILE",
        "LISTING_SHEET",
        "LISTING_SHORT_OUTPUT",
        "LISTING_HEADER_ROWS",
        "LISTING_ID_COLUMN",
        "LISTING_SALE_COLUMN",
        "LISTING_RENT_COLUMN",
        "LISTING_STATUS_COLUMN",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging_handlers() -> Iterator[None]:
    """Drop console handlers installed by setup_logging during a test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)


@pytest.fixture
def scenario_xls(tmp_path: Path, scenario_records: list[ListingRecord]) -> Path:
    """Legacy .xls export holding the scenario listings under a header row."""
    book = xlwt.Workbook(encoding="utf-8")
    sheet = book.add_sheet("Imoveis")
    rows = [build_header()] + [encode_row(record) for record in scenario_records]
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if value is not None:
                sheet.write(r, c, value)
    path = tmp_path / "listings.xls"
    book.save(str(path))
    return path
