"""Catalog derivation.

Pure functions that turn the in-memory catalog plus query criteria into
the filtered sequence and the page the operator sees.
"""

from stockview.catalog.pagination import Page, page_window, paginate
from stockview.catalog.query import (
    ALL,
    QueryCriteria,
    StockFilter,
    apply_criteria,
    category_options,
    matches_search,
    matches_stock,
    supplier_options,
)

__all__ = [
    # Query
    "ALL",
    "QueryCriteria",
    "StockFilter",
    "apply_criteria",
    "category_options",
    "matches_search",
    "matches_stock",
    "supplier_options",
    # Pagination
    "Page",
    "page_window",
    "paginate",
]
