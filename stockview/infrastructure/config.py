"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Product Store
    product_store_url: str = Field(
        default="https://inventorymanager-uigs.onrender.com/api",
        description="Product Store API base URL",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds",
    )

    # View
    page_size: int = Field(
        default=10,
        ge=1,
        description="Products per page",
    )
    currency_label: str = Field(
        default="Ksh",
        description="Label prefixed to formatted prices",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
