"""Remote sync gateway.

Translates load/create/update/delete intents into Product Store calls
and reports the store's canonical records back. Nothing is applied
optimistically: the caller reconciles local state only after this
gateway returns.

Mutations of the same product are serialized: an update or delete for a
product waits for any in-flight mutation of that product to finish.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog

from stockview.domain.entities import Product, ProductDraft
from stockview.domain.exceptions import LoadFailureError, MutationFailureError
from stockview.infrastructure.product_store_client import (
    ProductStoreClient,
    ProductStoreError,
)

logger = structlog.get_logger()


class RemoteSyncGateway:
    """Single round-trip operations against the Product Store."""

    def __init__(self, store: ProductStoreClient) -> None:
        """Initialize gateway.

        Args:
            store: Product Store client.
        """
        self.store = store
        self._locks: dict[str, asyncio.Lock] = {}
        self._pending: dict[str, int] = {}

    @asynccontextmanager
    async def _serialized(self, product_id: str) -> AsyncIterator[None]:
        """Hold the product's lock; drop it once no mutation holds or awaits it."""
        lock = self._locks.setdefault(product_id, asyncio.Lock())
        self._pending[product_id] = self._pending.get(product_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._pending[product_id] -= 1
            if not self._pending[product_id]:
                del self._pending[product_id]
                del self._locks[product_id]

    def is_busy(self, product_id: str) -> bool:
        """Check whether a mutation of the product is in flight."""
        lock = self._locks.get(product_id)
        return lock is not None and lock.locked()

    async def load(self) -> list[Product]:
        """Fetch the full catalog.

        Raises:
            LoadFailureError: If the store call fails for any reason.
        """
        try:
            products = await self.store.list_products()
        except ProductStoreError as e:
            logger.error(
                "Catalog load failed",
                error=e.message,
                error_code=e.error_code,
                status_code=e.status_code,
            )
            raise LoadFailureError(e.message, e.status_code) from e

        logger.info("Catalog loaded", product_count=len(products))
        return products

    async def create(self, draft: ProductDraft) -> Product:
        """Create a product from a draft.

        Returns:
            The canonical record assigned by the store.

        Raises:
            MutationFailureError: If the store call fails.
        """
        try:
            product = await self.store.create_product(draft.to_payload())
        except ProductStoreError as e:
            logger.warning("Product create failed", error=e.message, status_code=e.status_code)
            raise MutationFailureError("create", e.message, status_code=e.status_code) from e

        logger.info("Product created", product_id=product.id)
        return product

    async def update(self, product_id: str, patch: dict[str, Any]) -> Product:
        """Send changed fields for a product.

        Returns:
            The canonical record after the update.

        Raises:
            MutationFailureError: If the store call fails.
        """
        async with self._serialized(product_id):
            try:
                product = await self.store.update_product(product_id, patch)
            except ProductStoreError as e:
                logger.warning(
                    "Product update failed",
                    product_id=product_id,
                    error=e.message,
                    status_code=e.status_code,
                )
                raise MutationFailureError(
                    "update", e.message, product_id, e.status_code
                ) from e

        logger.info("Product updated", product_id=product_id, fields=sorted(patch))
        return product

    async def delete(self, product_id: str) -> None:
        """Delete a product.

        Raises:
            MutationFailureError: If the store call fails.
        """
        async with self._serialized(product_id):
            try:
                await self.store.delete_product(product_id)
            except ProductStoreError as e:
                logger.warning(
                    "Product delete failed",
                    product_id=product_id,
                    error=e.message,
                    status_code=e.status_code,
                )
                raise MutationFailureError(
                    "delete", e.message, product_id, e.status_code
                ) from e

        logger.info("Product deleted", product_id=product_id)
