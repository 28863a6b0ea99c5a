"""Generate synthetic listing exports for manual runs and tests."""

from __future__ import annotations

import random
from typing import Any

from listing_stats.config import ColumnLayout
from listing_stats.generators.base import BaseGenerator
from listing_stats.models.enums import Category, ListingStatus
from listing_stats.models.listing import MISSING_STATUS, ListingRecord
from listing_stats.sources.workbook import encode_row

# Labels seen in real exports that are not counted
UNKNOWN_STATUSES = ["Reservado", "ativo", "Vendido ", MISSING_STATUS]

# Descriptive columns of the export, keyed by index
FILLER_COLUMNS = {
    1: "Título",
    2: "Tipo",
    3: "Endereço",
    4: "Bairro",
    5: "Cidade",
    6: "UF",
    7: "CEP",
    8: "Dormitórios",
    9: "Banheiros",
    10: "Vagas",
}

PROPERTY_TYPES = ["Apartamento", "Casa", "Sala Comercial", "Terreno", "Cobertura"]


def build_header(layout: ColumnLayout | None = None) -> list[str]:
    """Return header names for a worksheet in ``layout``."""
    layout = layout or ColumnLayout()
    header = [f"Campo {i + 1}" for i in range(max(layout.width, max(FILLER_COLUMNS) + 1))]
    for index, name in FILLER_COLUMNS.items():
        header[index] = name
    header[layout.id_column] = "Código"
    header[layout.sale_price_column] = "Valor Venda"
    header[layout.rent_price_column] = "Valor Locação"
    header[layout.status_column] = "Status"
    return header


class ListingGenerator(BaseGenerator):
    """Generate synthetic property listings."""

    DEFAULT_WEIGHTS = {
        Category.SALE: 0.50,
        Category.RENT: 0.30,
        Category.SALE_AND_RENT: 0.15,
        Category.UNCLASSIFIED: 0.05,
    }

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "pt_BR",
        category_weights: dict[Category, float] | None = None,
        duplicate_rate: float = 0.02,
        unknown_status_rate: float = 0.05,
    ) -> None:
        """Initialize listing generator.

        Parameters
        ----------
        seed : int | None
            Random seed for reproducibility.
        locale : str
            Faker locale for the descriptive columns; must provide
            ``bairro`` and ``estado_sigla`` (pt_BR does).
        category_weights : dict[Category, float] | None
            Relative weight of each category (do not need to sum to 1.0).
        duplicate_rate : float
            Probability that a listing reuses an id already issued.
        unknown_status_rate : float
            Probability of a status label that is not counted.
        """
        super().__init__(seed, locale)
        self.category_weights = category_weights or dict(self.DEFAULT_WEIGHTS)
        self.duplicate_rate = duplicate_rate
        self.unknown_status_rate = unknown_status_rate
        self._issued: list[int] = []
        self._next_id = 1

    def generate(self, category: Category | None = None) -> ListingRecord:
        """Generate a listing.

        Parameters
        ----------
        category : Category | None
            Force the listing's category; drawn from the weights otherwise.

        Returns
        -------
        ListingRecord
            Generated listing.
        """
        if category is None:
            categories = list(self.category_weights)
            weights = [self.category_weights[c] for c in categories]
            category = random.choices(categories, weights=weights)[0]

        sale_price, rent_price = self._prices(category)

        return ListingRecord(
            listing_id=self._listing_id(),
            sale_price=sale_price,
            rent_price=rent_price,
            status=self._status(category),
        )

    def generate_many(self, count: int) -> list[ListingRecord]:
        """Generate ``count`` listings."""
        return [self.generate() for _ in range(count)]

    def generate_rows(self, count: int, layout: ColumnLayout | None = None) -> list[list[Any]]:
        """Generate full-width worksheet rows, without header."""
        return [encode_row(record, layout, self._filler()) for record in self.generate_many(count)]

    def _listing_id(self) -> int:
        if self._issued and random.random() < self.duplicate_rate:
            return random.choice(self._issued)
        listing_id = self._next_id
        self._next_id += 1
        self._issued.append(listing_id)
        return listing_id

    def _prices(self, category: Category) -> tuple[float, float]:
        sale = float(random.randint(150, 2000) * 1000)
        rent = float(random.randint(8, 150) * 100)
        if category == Category.SALE:
            return sale, 0.0
        if category == Category.RENT:
            return 0.0, rent
        if category == Category.SALE_AND_RENT:
            return sale, rent
        return 0.0, 0.0

    def _status(self, category: Category) -> str:
        if random.random() < self.unknown_status_rate:
            return random.choice(UNKNOWN_STATUSES)
        if category == Category.SALE:
            candidates = [ListingStatus.ACTIVE, ListingStatus.SOLD, ListingStatus.SUSPENDED]
        elif category == Category.RENT:
            candidates = [ListingStatus.ACTIVE, ListingStatus.RENTED, ListingStatus.SUSPENDED]
        else:
            candidates = list(ListingStatus)
        return random.choice(candidates).value

    def _filler(self) -> dict[int, Any]:
        return {
            1: self.fake.sentence(nb_words=4).rstrip("."),
            2: random.choice(PROPERTY_TYPES),
            3: f"{self.fake.street_name()}, {random.randint(1, 9999)}",
            4: self.fake.bairro(),
            5: self.fake.city(),
            6: self.fake.estado_sigla(),
            7: self.fake.postcode(),
            8: random.randint(0, 5),
            9: random.randint(1, 4),
            10: random.randint(0, 3),
        }
