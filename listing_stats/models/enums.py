"""Enumeration types for listing classification."""

from enum import Enum


class Category(str, Enum):
    """Commercial type of a listing, derived from its prices.

    Values double as the accumulator names used in reports.
    """

    SALE = "sale"
    RENT = "rent"
    SALE_AND_RENT = "rent-sale"
    UNCLASSIFIED = "error"


class ListingStatus(str, Enum):
    """Recognized listing status labels, as written in the source export."""

    ACTIVE = "Ativo"
    CANCELED = "Cancelado"
    DRAFT = "Ficha"
    RENTED = "Locado"
    PROVISIONAL = "Provisório"
    SUSPENDED = "Suspenso"
    SOLD = "Vendido"

    @classmethod
    def from_label(cls, label: str) -> "ListingStatus | None":
        """Return the status matching ``label`` verbatim, or None."""
        try:
            return cls(label)
        except ValueError:
            return None
