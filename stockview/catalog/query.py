"""Search and filter pipeline.

Narrows a catalog to the products matching the operator's search term
and filters. Every stage is a pure predicate, so the result is always an
order-preserving subsequence of the input.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Self

from stockview.domain.entities import Product
from stockview.domain.exceptions import InvalidStockFilterError
from stockview.domain.stock import AVERAGE_STOCK_CEILING, StockStatus, classify

ALL = "all"


class StockFilter(str, Enum):
    """Stock level filter choices."""

    ALL = "all"
    OUT = "out"
    LOW = "low"
    AVERAGE = "average"

    @classmethod
    def parse(cls, value: "str | StockFilter") -> "StockFilter":
        """Convert user input to a StockFilter.

        Raises:
            InvalidStockFilterError: If the value is not a known filter.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidStockFilterError(
                str(value), [member.value for member in cls]
            ) from None


@dataclass(frozen=True)
class QueryCriteria:
    """Search term and filter set applied to the catalog.

    Attributes:
        search_term: Free text matched against name, description,
            supplier and product index.
        stock: Stock level filter.
        category: Exact category, or "all".
        supplier: Exact supplier name, or "all".
    """

    search_term: str = ""
    stock: StockFilter = StockFilter.ALL
    category: str = ALL
    supplier: str = ALL

    def __post_init__(self) -> None:
        object.__setattr__(self, "stock", StockFilter.parse(self.stock))

    @property
    def is_default(self) -> bool:
        """True when nothing narrows the catalog."""
        return self == QueryCriteria()

    def with_search_term(self, search_term: str) -> Self:
        return replace(self, search_term=search_term)

    def with_filters(
        self,
        stock: str | StockFilter | None = None,
        category: str | None = None,
        supplier: str | None = None,
    ) -> Self:
        """Return criteria with the given filters changed, others kept."""
        return replace(
            self,
            stock=StockFilter.parse(stock) if stock is not None else self.stock,
            category=category if category is not None else self.category,
            supplier=supplier if supplier is not None else self.supplier,
        )

    @classmethod
    def cleared(cls) -> Self:
        """Criteria with no search term and every filter set to all."""
        return cls()


# ============================================================================
# Predicates
# ============================================================================


def _contains(value: str | None, lowered_term: str) -> bool:
    return bool(value) and lowered_term in value.lower()


def matches_search(product: Product, search_term: str) -> bool:
    """Check a product against a free-text search term.

    Name, description and supplier match case-insensitively. The product
    index is compared as text against the term as typed.
    """
    if not search_term:
        return True
    lowered = search_term.lower()
    if _contains(product.name, lowered):
        return True
    if product.product_index is not None and product.product_index != "":
        if search_term in str(product.product_index):
            return True
    if _contains(product.description, lowered):
        return True
    return _contains(product.supplier_name, lowered)


def matches_stock(product: Product, stock: StockFilter) -> bool:
    """Check a product against a stock level filter.

    The average band is 0 < quantity < 50 regardless of the alert
    threshold, so low stock products also appear under it.
    """
    if stock is StockFilter.ALL:
        return True
    if stock is StockFilter.OUT:
        return product.quantity == 0
    if stock is StockFilter.LOW:
        return classify(product) is StockStatus.LOW
    return 0 < product.quantity < AVERAGE_STOCK_CEILING


# ============================================================================
# Pipeline
# ============================================================================


def apply_criteria(catalog: Iterable[Product], criteria: QueryCriteria) -> list[Product]:
    """Filter a catalog by search term, stock, category and supplier.

    Args:
        catalog: Products in catalog order.
        criteria: Search term and filters to apply.

    Returns:
        Matching products, in catalog order.
    """
    result = list(catalog)

    if criteria.search_term:
        result = [p for p in result if matches_search(p, criteria.search_term)]

    if criteria.stock is not StockFilter.ALL:
        result = [p for p in result if matches_stock(p, criteria.stock)]

    if criteria.category and criteria.category != ALL:
        result = [p for p in result if p.category == criteria.category]

    if criteria.supplier and criteria.supplier != ALL:
        result = [p for p in result if p.supplier_name == criteria.supplier]

    return result


# ============================================================================
# Facets
# ============================================================================


def _distinct(values: Iterable[str | None]) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return list(seen)


def category_options(catalog: Sequence[Product]) -> list[str]:
    """Distinct non-empty categories, in first-seen order."""
    return _distinct(p.category for p in catalog)


def supplier_options(catalog: Sequence[Product]) -> list[str]:
    """Distinct non-empty supplier names, in first-seen order."""
    return _distinct(p.supplier_name for p in catalog)
