"""Catalog session wiring.

Builds the Product Store client, gateway and state manager from
settings, performs the initial load and closes the HTTP client when the
session ends.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog

from stockview.application.catalog_state import CatalogStateManager
from stockview.application.sync_gateway import RemoteSyncGateway
from stockview.infrastructure.config import Settings, settings as default_settings
from stockview.infrastructure.logconfig import configure_logging
from stockview.infrastructure.product_store_client import ProductStoreClient

logger = structlog.get_logger()


@asynccontextmanager
async def open_catalog(
    settings: Settings | None = None,
    store: ProductStoreClient | None = None,
) -> AsyncGenerator[CatalogStateManager, None]:
    """Open a catalog session and load the catalog.

    A failed load does not raise: the manager is yielded with its
    ``error`` set so the caller can show it and retry ``load()``.

    Args:
        settings: Settings to use (module settings if not provided).
        store: Product Store client (built from settings if not provided).

    Yields:
        The loaded CatalogStateManager.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    store = store or ProductStoreClient(
        settings.product_store_url,
        timeout=settings.request_timeout,
    )
    manager = CatalogStateManager(
        RemoteSyncGateway(store),
        page_size=settings.page_size,
        currency_label=settings.currency_label,
    )

    logger.info(
        "Opening catalog session",
        product_store_url=store.base_url,
        page_size=settings.page_size,
    )
    try:
        await manager.load()
        yield manager
    finally:
        await store.close()
        logger.info("Catalog session closed")
