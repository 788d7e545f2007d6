"""Domain layer - Entities, value objects, stock classification.

This module exports the core domain building blocks:

- **Entities**: Product, identified by the store-assigned id
- **Drafts**: ProductDraft and EditDraft, operator input awaiting confirmation
- **Value Objects**: the alert threshold sum type
- **Stock**: StockStatus and the classifier
- **Exceptions**: Domain-specific errors

Example usage:
    from stockview.domain import Product, StockStatus, classify

    product = Product.from_api_response(
        {"id": 7, "name": "Cement 50kg", "quantity": 3,
         "alert_config": '{"min_quantity": 5}'}
    )
    assert classify(product) is StockStatus.LOW
"""

# Base classes
from stockview.domain.base import Entity, ValueObject

# Entities
from stockview.domain.entities import EDITABLE_FIELDS, EditDraft, Product, ProductDraft

# Exceptions
from stockview.domain.exceptions import (
    CatalogError,
    DomainError,
    InvalidPageSizeError,
    InvalidStockFilterError,
    LoadFailureError,
    MalformedProductError,
    MutationFailureError,
    ProductNotFoundError,
)

# Stock classification
from stockview.domain.stock import (
    AVERAGE_STOCK_CEILING,
    StockStatus,
    classify,
    stock_advisory,
    stock_message,
)

# Value Objects
from stockview.domain.value_objects import (
    DEFAULT_MIN_QUANTITY,
    AbsentAlert,
    AlertConfig,
    RawAlert,
    StructuredAlert,
    coerce_amount,
    decode_alert_config,
    format_amount,
)

__all__ = [
    # Base
    "Entity",
    "ValueObject",
    # Entities
    "EDITABLE_FIELDS",
    "EditDraft",
    "Product",
    "ProductDraft",
    # Exceptions
    "CatalogError",
    "DomainError",
    "InvalidPageSizeError",
    "InvalidStockFilterError",
    "LoadFailureError",
    "MalformedProductError",
    "MutationFailureError",
    "ProductNotFoundError",
    # Stock
    "AVERAGE_STOCK_CEILING",
    "StockStatus",
    "classify",
    "stock_advisory",
    "stock_message",
    # Value Objects
    "DEFAULT_MIN_QUANTITY",
    "AbsentAlert",
    "AlertConfig",
    "RawAlert",
    "StructuredAlert",
    "coerce_amount",
    "decode_alert_config",
    "format_amount",
]
