"""Stock classification.

Derives a product's restocking urgency from its quantity and its alert
threshold. The status is never stored; it is recomputed on demand.
"""

from enum import Enum

from stockview.domain.entities import Product

# Quantities below this (and above the alert threshold) are "average"
AVERAGE_STOCK_CEILING = 50


class StockStatus(str, Enum):
    """Restocking urgency of a product.

    Precedence:
        quantity == 0                  -> OUT
        quantity <= min_quantity       -> LOW
        quantity < AVERAGE_STOCK_CEILING -> AVERAGE
        otherwise                      -> HEALTHY
    """

    OUT = "out"
    LOW = "low"
    AVERAGE = "average"
    HEALTHY = "healthy"


STOCK_MESSAGES: dict[StockStatus, str] = {
    StockStatus.OUT: "Out of stock",
    StockStatus.LOW: "Low stock - Reorder now",
    StockStatus.AVERAGE: "Average stock - Consider restocking",
    StockStatus.HEALTHY: "In stock",
}

STOCK_ADVISORIES: dict[StockStatus, tuple[str, str]] = {
    StockStatus.OUT: (
        "This product is out of stock!",
        "Consider ordering more inventory from the supplier.",
    ),
    StockStatus.LOW: (
        "This product is running low on stock!",
        "You should reorder soon to avoid stockouts.",
    ),
    StockStatus.AVERAGE: (
        "This product has average stock levels",
        "Monitor this product to ensure adequate stock levels.",
    ),
}


def classify(product: Product) -> StockStatus:
    """Classify a product's stock level.

    An out-of-stock product is always reported as OUT. An unreadable
    alert configuration otherwise degrades to HEALTHY so malformed
    metadata never blocks the view.

    Args:
        product: Product to classify.

    Returns:
        The product's stock status.
    """
    if product.quantity == 0:
        return StockStatus.OUT

    min_quantity = product.min_quantity
    if min_quantity is None:
        return StockStatus.HEALTHY

    if product.quantity <= min_quantity:
        return StockStatus.LOW
    if product.quantity < AVERAGE_STOCK_CEILING:
        return StockStatus.AVERAGE
    return StockStatus.HEALTHY


def stock_message(status: StockStatus) -> str:
    """Short badge text for a stock status."""
    return STOCK_MESSAGES[status]


def stock_advisory(status: StockStatus) -> tuple[str, str] | None:
    """Headline and advice shown when inspecting a product.

    Returns:
        (headline, advice), or None for healthy stock.
    """
    return STOCK_ADVISORIES.get(status)
