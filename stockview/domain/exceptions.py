"""Domain exceptions.

All domain-level errors raised by the catalog engine. Network and
payload problems are reported by the infrastructure layer and
translated into these errors at the application boundary.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Base class for catalog-related errors."""

    pass


class LoadFailureError(CatalogError):
    """Raised when the initial catalog fetch fails.

    A load failure blocks the whole view until ``load()`` is retried.
    """

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        """Initialize load failure error.

        Args:
            reason: Why the catalog could not be loaded.
            status_code: HTTP status code, if the store answered.
        """
        super().__init__(
            "Failed to load products. Please try again later.",
            details={"reason": reason, "status_code": status_code},
        )
        self.reason = reason
        self.status_code = status_code


class MutationFailureError(CatalogError):
    """Raised when a create, update or delete is rejected or fails.

    The catalog is left untouched and in-progress input is preserved.
    """

    def __init__(
        self,
        operation: str,
        reason: str,
        product_id: str | None = None,
        status_code: int | None = None,
    ) -> None:
        """Initialize mutation failure error.

        Args:
            operation: One of "create", "update" or "delete".
            reason: Why the store did not accept the mutation.
            product_id: Target product, if the operation has one.
            status_code: HTTP status code, if the store answered.
        """
        super().__init__(
            f"Failed to {operation} product",
            details={
                "operation": operation,
                "reason": reason,
                "product_id": product_id,
                "status_code": status_code,
            },
        )
        self.operation = operation
        self.reason = reason
        self.product_id = product_id
        self.status_code = status_code


class ProductNotFoundError(CatalogError):
    """Raised when a product id is not present in the local catalog."""

    def __init__(self, product_id: str) -> None:
        """Initialize product not found error.

        Args:
            product_id: The missing product id.
        """
        super().__init__(
            f"Product {product_id} not found in catalog",
            details={"product_id": product_id},
        )
        self.product_id = product_id


class MalformedProductError(CatalogError):
    """Raised when a product record cannot be read from a payload."""

    def __init__(self, reason: str, record: Any = None) -> None:
        """Initialize malformed product error.

        Args:
            reason: What is wrong with the record.
            record: The offending record, for diagnostics.
        """
        super().__init__(
            f"Malformed product record: {reason}",
            details={"reason": reason, "record": record},
        )


# ============================================================================
# View Errors
# ============================================================================


class InvalidPageSizeError(CatalogError):
    """Raised when a page size below one is requested."""

    def __init__(self, page_size: int) -> None:
        """Initialize invalid page size error.

        Args:
            page_size: The rejected page size.
        """
        super().__init__(
            f"Page size must be at least 1, got {page_size}",
            details={"page_size": page_size},
        )


class InvalidStockFilterError(CatalogError):
    """Raised when an unknown stock filter value is supplied."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        """Initialize invalid stock filter error.

        Args:
            value: The rejected filter value.
            allowed: Accepted filter values.
        """
        super().__init__(
            f"Unknown stock filter '{value}'. Allowed values: {allowed}",
            details={"value": value, "allowed": allowed},
        )
