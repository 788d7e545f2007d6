"""Pytest configuration and shared fixtures."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from stockview.application.catalog_state import CatalogStateManager
from stockview.application.sync_gateway import RemoteSyncGateway
from stockview.domain import Product
from stockview.infrastructure.product_store_client import ProductStoreClient


def make_record(product_id: Any = 1, **overrides: Any) -> dict[str, Any]:
    """Create a Product Store record as it arrives over the wire."""
    record = {
        "id": product_id,
        "product_index": f"P-{product_id:03d}" if isinstance(product_id, int) else "P-X",
        "name": f"Product {product_id}",
        "buying_price": "100.00",
        "selling_price": "150.00",
        "quantity": 20,
        "alert_config": {"min_quantity": 5},
        "description": None,
        "supplier_name": None,
        "category": None,
    }
    record.update(overrides)
    return record


def make_product(product_id: Any = 1, **overrides: Any) -> Product:
    """Create a Product from a wire record."""
    return Product.from_api_response(make_record(product_id, **overrides))


def make_catalog(count: int, **overrides: Any) -> list[Product]:
    """Create count products with ids 1..count."""
    return [make_product(i, **overrides) for i in range(1, count + 1)]


@pytest.fixture
def mock_store() -> MagicMock:
    """Create a mock Product Store client."""
    store = MagicMock(spec=ProductStoreClient)
    store.base_url = "http://store.test/api"

    store.list_products = AsyncMock(return_value=[])
    store.create_product = AsyncMock()
    store.update_product = AsyncMock()
    store.delete_product = AsyncMock(return_value=None)
    store.close = AsyncMock()

    return store


@pytest.fixture
def gateway(mock_store: MagicMock) -> RemoteSyncGateway:
    """Create a gateway over the mock store."""
    return RemoteSyncGateway(mock_store)


@pytest.fixture
def manager(gateway: RemoteSyncGateway) -> CatalogStateManager:
    """Create a state manager with the default page size."""
    return CatalogStateManager(gateway, page_size=10)
