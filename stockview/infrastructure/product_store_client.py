"""Product Store HTTP client.

Thin async client for the remote Product Store collection resource.
Every call is a single request/response round-trip; there are no
retries. Any transport error, non-2xx status or malformed envelope is
raised as ProductStoreError.
"""

from typing import Any

import httpx
import structlog

from stockview.domain.entities import Product
from stockview.domain.exceptions import MalformedProductError

logger = structlog.get_logger()

PRODUCTS_PATH = "/products/"


class ProductStoreError(Exception):
    """Error from a Product Store call."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: str = "REQUEST_ERROR",
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(message)


class ProductStoreClient:
    """HTTP client for the Product Store API.

    Single-product and list responses are expected to wrap their payload
    under a ``data`` field.

    Example usage:
        async with ProductStoreClient("https://store.example/api") as store:
            products = await store.list_products()
    """

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        """Initialize the client.

        Args:
            base_url: Product Store API base URL.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ProductStoreClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Context manager exit."""
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        parse_body: bool = True,
    ) -> Any:
        """Make a request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            json: Request body.
            parse_body: Decode the response body. When False, a 2xx status
                alone means success and the body is ignored.

        Returns:
            Decoded body, or None for an empty or unparsed 2xx response.

        Raises:
            ProductStoreError: On transport error, non-2xx status or
                a body that is not JSON.
        """
        client = await self._get_client()

        try:
            logger.debug(
                "Making Product Store request",
                method=method,
                path=path,
                has_body=json is not None,
            )
            response = await client.request(method=method, url=path, json=json)
        except httpx.TimeoutException as e:
            logger.error("Product Store request timeout", path=path, error=str(e))
            raise ProductStoreError(
                f"Request timed out: {method} {path}", error_code="TIMEOUT"
            ) from e
        except httpx.RequestError as e:
            logger.error("Product Store request failed", path=path, error=str(e))
            raise ProductStoreError(f"Request failed: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            logger.warning(
                "Product Store rejected request",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise ProductStoreError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                error_code="HTTP_ERROR",
            )

        # Handle empty responses (204 No Content)
        if not parse_body or response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ProductStoreError(
                f"{method} {path} returned a non-JSON body",
                status_code=response.status_code,
                error_code="MALFORMED_RESPONSE",
            ) from e

    @staticmethod
    def _unwrap(body: Any, path: str) -> Any:
        """Extract the ``data`` field of a response envelope."""
        if not isinstance(body, dict) or "data" not in body:
            raise ProductStoreError(
                f"Response from {path} has no 'data' field",
                error_code="MALFORMED_RESPONSE",
            )
        return body["data"]

    @staticmethod
    def _to_product(record: Any) -> Product:
        try:
            return Product.from_api_response(record)
        except MalformedProductError as e:
            raise ProductStoreError(e.message, error_code="MALFORMED_RESPONSE") from e

    # =========================================================================
    # Product Endpoints
    # =========================================================================

    async def list_products(self) -> list[Product]:
        """Fetch the full product collection.

        Returns:
            Products in server order.

        Raises:
            ProductStoreError: On any failure, including a malformed record.
        """
        records = self._unwrap(await self._request("GET", PRODUCTS_PATH), PRODUCTS_PATH)
        if not isinstance(records, list):
            raise ProductStoreError(
                "Product list payload is not an array",
                error_code="MALFORMED_RESPONSE",
            )
        return [self._to_product(record) for record in records]

    async def create_product(self, payload: dict[str, Any]) -> Product:
        """Create a product.

        Args:
            payload: Draft fields.

        Returns:
            The canonical record assigned by the store.
        """
        body = await self._request("POST", PRODUCTS_PATH, json=payload)
        return self._to_product(self._unwrap(body, PRODUCTS_PATH))

    async def update_product(self, product_id: str, patch: dict[str, Any]) -> Product:
        """Update a product.

        Args:
            product_id: Product identifier.
            patch: Changed fields.

        Returns:
            The canonical record after the update.
        """
        path = f"{PRODUCTS_PATH}{product_id}"
        body = await self._request("PUT", path, json=patch)
        return self._to_product(self._unwrap(body, path))

    async def delete_product(self, product_id: str) -> None:
        """Delete a product.

        The store confirms a delete by status code; whatever body it sends
        back is not read.

        Args:
            product_id: Product identifier.
        """
        await self._request("DELETE", f"{PRODUCTS_PATH}{product_id}", parse_body=False)
