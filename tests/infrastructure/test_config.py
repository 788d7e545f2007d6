"""Tests for settings."""

import pytest
from pydantic import ValidationError

from stockview.infrastructure.config import Settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch) -> None:
        """Defaults point at the hosted store with 10 products per page."""
        for name in ("PRODUCT_STORE_URL", "PAGE_SIZE", "REQUEST_TIMEOUT", "CURRENCY_LABEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.product_store_url == "https://inventorymanager-uigs.onrender.com/api"
        assert settings.page_size == 10
        assert settings.request_timeout == 30.0
        assert settings.currency_label == "Ksh"

    def test_environment_overrides(self, monkeypatch) -> None:
        """Environment variables override defaults."""
        monkeypatch.setenv("PRODUCT_STORE_URL", "http://localhost:9000/api")
        monkeypatch.setenv("PAGE_SIZE", "25")

        settings = Settings(_env_file=None)

        assert settings.product_store_url == "http://localhost:9000/api"
        assert settings.page_size == 25

    def test_page_size_must_be_positive(self, monkeypatch) -> None:
        """A page size below one is rejected."""
        monkeypatch.setenv("PAGE_SIZE", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
