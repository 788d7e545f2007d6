"""Stockview inventory catalog engine.

Loads a product catalog from a remote Product Store and derives the
searchable, filterable, paginated view an operator works with.

This package provides:
- Stock classification of products (out, low, average, healthy)
- Search and filter pipeline over the in-memory catalog
- Page slicing and page-button window selection
- Catalog state management with create/update/delete reconciled
  against the remote store
"""

__version__ = "1.0.0"
