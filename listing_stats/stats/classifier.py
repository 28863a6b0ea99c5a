"""Classify a listing by its sale and rent prices."""

from listing_stats.models.enums import Category


def classify(sale_price: float, rent_price: float) -> Category:
    """Return the commercial category for a pair of prices.

    A price counts as present only when it is strictly positive, so zero,
    negative and NaN prices all behave as absent.

    Parameters
    ----------
    sale_price : float
        Asking sale price.
    rent_price : float
        Asking monthly rent.

    Returns
    -------
    Category
        Never raises; listings with neither price are ``UNCLASSIFIED``.
    """
    for_sale = sale_price > 0.0
    for_rent = rent_price > 0.0

    if not for_sale and for_rent:
        return Category.RENT
    if for_sale and not for_rent:
        return Category.SALE
    if for_sale and for_rent:
        return Category.SALE_AND_RENT
    return Category.UNCLASSIFIED
