"""Application layer module.

Contains the catalog state manager and the gateway that keeps it in
sync with the Product Store.
"""

from stockview.application.catalog_state import (
    CatalogStateManager,
    MutationResult,
    ViewStatus,
)
from stockview.application.session import open_catalog
from stockview.application.sync_gateway import RemoteSyncGateway

__all__ = [
    "CatalogStateManager",
    "MutationResult",
    "RemoteSyncGateway",
    "ViewStatus",
    "open_catalog",
]
