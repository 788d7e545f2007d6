"""Tests for catalog session wiring."""

from unittest.mock import AsyncMock, patch

import pytest

from stockview.application import ViewStatus, open_catalog
from stockview.infrastructure.config import Settings
from stockview.infrastructure.product_store_client import ProductStoreError
from tests.conftest import make_catalog


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment."""
    return Settings(
        _env_file=None,
        product_store_url="http://store.test/api",
        page_size=4,
        currency_label="USD",
        log_level="WARNING",
    )


class TestOpenCatalog:
    """Tests for open_catalog."""

    @pytest.mark.asyncio
    async def test_session_loads_and_closes(self, settings, mock_store) -> None:
        """The catalog is loaded on entry and the client closed on exit."""
        mock_store.list_products.return_value = make_catalog(6)

        with patch("stockview.application.session.configure_logging") as configure:
            async with open_catalog(settings, store=mock_store) as manager:
                assert manager.status is ViewStatus.READY
                assert manager.page_size == 4
                assert manager.currency_label == "USD"
                assert manager.page.total_pages == 2

        configure.assert_called_once_with("WARNING")
        mock_store.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_session_yields_on_load_failure(self, settings, mock_store) -> None:
        """A failed load is reported on the manager, not raised."""
        mock_store.list_products.side_effect = ProductStoreError("down")

        with patch("stockview.application.session.configure_logging"):
            async with open_catalog(settings, store=mock_store) as manager:
                assert manager.status is ViewStatus.LOAD_FAILED

        mock_store.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_session_builds_client_from_settings(self, settings) -> None:
        """Without a store the client is built from settings."""
        with (
            patch("stockview.application.session.configure_logging"),
            patch("stockview.application.session.ProductStoreClient") as client_cls,
        ):
            store = client_cls.return_value
            store.base_url = settings.product_store_url
            store.list_products = AsyncMock(return_value=[])
            store.close = AsyncMock()

            async with open_catalog(settings) as manager:
                assert manager.status is ViewStatus.EMPTY

        client_cls.assert_called_once_with("http://store.test/api", timeout=30.0)
