"""Catalog state manager.

Owns the in-memory catalog, the query criteria, the current page and
the load/error status, plus the create and edit drafts. The filtered
sequence is recomputed synchronously after every change to the catalog,
the search term or the filters, and the current page is reset to 1.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

import structlog

from stockview.application.sync_gateway import RemoteSyncGateway
from stockview.catalog.pagination import Page, clamp_page, paginate, total_pages_for
from stockview.catalog.query import (
    QueryCriteria,
    StockFilter,
    apply_criteria,
    category_options,
    supplier_options,
)
from stockview.domain.entities import EditDraft, Product, ProductDraft
from stockview.domain.exceptions import (
    CatalogError,
    InvalidPageSizeError,
    LoadFailureError,
    MutationFailureError,
    ProductNotFoundError,
)
from stockview.domain.value_objects import format_amount

logger = structlog.get_logger()


class ViewStatus(str, Enum):
    """What the view should present."""

    LOADING = "loading"
    LOAD_FAILED = "load_failed"
    EMPTY = "empty"
    NO_MATCHES = "no_matches"
    READY = "ready"


# ============================================================================
# Service Result Types
# ============================================================================


@dataclass
class MutationResult:
    """Result of a create, update or delete."""

    product: Product | None = None
    success: bool = True
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def failed(cls, error: MutationFailureError) -> "MutationResult":
        return cls(
            success=False,
            error=error.message,
            error_code=f"{error.operation.upper()}_FAILED",
        )


# ============================================================================
# Catalog State Manager
# ============================================================================


class CatalogStateManager:
    """Stateful catalog view for one operator session.

    Example usage:
        manager = CatalogStateManager(RemoteSyncGateway(store), page_size=10)
        await manager.load()
        manager.set_search_term("cement")
        manager.set_filters(stock="low")
        for product in manager.page.items:
            ...
    """

    def __init__(
        self,
        gateway: RemoteSyncGateway,
        page_size: int = 10,
        currency_label: str = "Ksh",
    ) -> None:
        """Initialize an empty catalog.

        Args:
            gateway: Gateway to the Product Store.
            page_size: Products per page for the whole session.
            currency_label: Label prefixed to formatted prices.

        Raises:
            InvalidPageSizeError: If page_size is below 1.
        """
        if page_size < 1:
            raise InvalidPageSizeError(page_size)
        self._gateway = gateway
        self.page_size = page_size
        self.currency_label = currency_label

        self._catalog: list[Product] = []
        self._criteria = QueryCriteria()
        self._filtered: list[Product] = []
        self._current_page = 1

        self.loading = False
        self.error: CatalogError | None = None

        self.draft = ProductDraft()
        self.creating = False
        self.edit_draft: EditDraft | None = None
        self.viewing_id: str | None = None

    # =========================================================================
    # Derived state
    # =========================================================================

    @property
    def catalog(self) -> tuple[Product, ...]:
        return tuple(self._catalog)

    @property
    def criteria(self) -> QueryCriteria:
        return self._criteria

    @property
    def filtered(self) -> tuple[Product, ...]:
        return tuple(self._filtered)

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_pages(self) -> int:
        return total_pages_for(len(self._filtered), self.page_size)

    @property
    def page(self) -> Page[Product]:
        """The slice of the filtered sequence currently shown."""
        return paginate(self._filtered, self.page_size, self._current_page)

    @property
    def status(self) -> ViewStatus:
        """Which of the mutually exclusive view states applies.

        A load failure takes precedence over any catalog content; an
        empty filter result is reported separately from an empty catalog.
        """
        if self.loading:
            return ViewStatus.LOADING
        if isinstance(self.error, LoadFailureError):
            return ViewStatus.LOAD_FAILED
        if not self._catalog:
            return ViewStatus.EMPTY
        if not self._filtered:
            return ViewStatus.NO_MATCHES
        return ViewStatus.READY

    @property
    def category_options(self) -> list[str]:
        return category_options(self._catalog)

    @property
    def supplier_options(self) -> list[str]:
        return supplier_options(self._catalog)

    @property
    def viewing(self) -> Product | None:
        """The product being inspected, if it is still in the catalog."""
        if self.viewing_id is None:
            return None
        return self.get(self.viewing_id)

    def format_price(self, amount: Decimal | None) -> str:
        return format_amount(amount, self.currency_label)

    def get(self, product_id: str) -> Product | None:
        """Look up a product in the local catalog."""
        for product in self._catalog:
            if product.id == product_id:
                return product
        return None

    def _require(self, product_id: str) -> Product:
        product = self.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def _recompute(self) -> None:
        self._filtered = apply_criteria(self._catalog, self._criteria)
        self._current_page = 1

    # =========================================================================
    # Query criteria and paging
    # =========================================================================

    def set_search_term(self, search_term: str) -> None:
        self._criteria = self._criteria.with_search_term(search_term)
        self._recompute()

    def set_filters(
        self,
        stock: str | StockFilter | None = None,
        category: str | None = None,
        supplier: str | None = None,
    ) -> None:
        """Change one or more filters; unspecified filters are kept.

        Raises:
            InvalidStockFilterError: If stock is not a known filter value.
        """
        self._criteria = self._criteria.with_filters(
            stock=stock, category=category, supplier=supplier
        )
        self._recompute()

    def clear_filters(self) -> None:
        """Drop the search term and reset every filter to all."""
        self._criteria = QueryCriteria.cleared()
        self._recompute()

    def set_page(self, page: int) -> None:
        """Go to a page, clamped into the valid range."""
        self._current_page = clamp_page(page, self.total_pages)

    def next_page(self) -> None:
        self.set_page(self._current_page + 1)

    def previous_page(self) -> None:
        self.set_page(self._current_page - 1)

    # =========================================================================
    # Drafts and inspection
    # =========================================================================

    def begin_create(self) -> None:
        self.creating = True

    def cancel_create(self) -> None:
        """Close the creation form, keeping what was typed."""
        self.creating = False

    def reset_draft(self) -> None:
        self.draft = ProductDraft()

    def begin_edit(self, product_id: str) -> EditDraft:
        """Start editing a product from its current values.

        Raises:
            ProductNotFoundError: If the product is not in the catalog.
        """
        self.edit_draft = EditDraft.from_product(self._require(product_id))
        return self.edit_draft

    def change_edit(self, **changes: Any) -> EditDraft:
        """Change fields of the edit in progress.

        Raises:
            ValueError: If no edit is in progress or a field is not editable.
        """
        if self.edit_draft is None:
            raise ValueError("No edit in progress")
        self.edit_draft = self.edit_draft.with_changes(**changes)
        return self.edit_draft

    def cancel_edit(self) -> None:
        self.edit_draft = None

    def inspect(self, product_id: str) -> Product:
        """Open a product's detail view.

        Raises:
            ProductNotFoundError: If the product is not in the catalog.
        """
        product = self._require(product_id)
        self.viewing_id = product_id
        return product

    def close_inspect(self) -> None:
        self.viewing_id = None

    def clear_error(self) -> None:
        self.error = None

    # =========================================================================
    # Remote operations
    # =========================================================================

    async def load(self) -> None:
        """Fetch the catalog, replacing whatever is held locally.

        On failure the catalog is emptied and a LoadFailureError is kept
        in ``error``.
        """
        self.loading = True
        self.error = None
        try:
            products = await self._gateway.load()
        except LoadFailureError as e:
            self.error = e
            self._catalog = []
            logger.warning("Catalog unavailable", reason=e.reason)
        else:
            self._catalog = self._dedupe(products)
        finally:
            self.loading = False
        self._recompute()

    @staticmethod
    def _dedupe(products: list[Product]) -> list[Product]:
        seen: set[str] = set()
        unique = []
        for product in products:
            if product.id in seen:
                logger.warning("Duplicate product id in catalog", product_id=product.id)
                continue
            seen.add(product.id)
            unique.append(product)
        return unique

    async def create(self, draft: ProductDraft | None = None) -> MutationResult:
        """Create a product and prepend the store's record.

        Args:
            draft: Draft to send; defaults to the creation form's draft.

        Returns:
            MutationResult with the canonical product on success. On
            failure the draft and the creation form stay as they were.
        """
        draft = draft if draft is not None else self.draft
        try:
            product = await self._gateway.create(draft)
        except MutationFailureError as e:
            self.error = e
            return MutationResult.failed(e)

        self._catalog = [product] + [p for p in self._catalog if p.id != product.id]
        self.draft = ProductDraft()
        self.creating = False
        self._recompute()
        return MutationResult(product=product)

    async def update(
        self,
        product_id: str,
        patch: dict[str, Any] | None = None,
    ) -> MutationResult:
        """Update a product and replace it with the store's record.

        Args:
            product_id: Product to update.
            patch: Changed fields; defaults to the edit draft for this product.

        Returns:
            MutationResult with the canonical product on success. The edit
            draft is discarded only on success.

        Raises:
            ProductNotFoundError: If the product is not in the catalog.
            ValueError: If no patch is given and no edit of this product
                is in progress.
        """
        self._require(product_id)
        if patch is None:
            if self.edit_draft is None or self.edit_draft.product_id != product_id:
                raise ValueError(f"No edit in progress for product {product_id}")
            patch = self.edit_draft.to_patch()

        try:
            product = await self._gateway.update(product_id, patch)
        except MutationFailureError as e:
            self.error = e
            return MutationResult.failed(e)

        self._catalog = [product if p.id == product_id else p for p in self._catalog]
        if self.edit_draft is not None and self.edit_draft.product_id == product_id:
            self.edit_draft = None
        self._recompute()
        return MutationResult(product=product)

    async def delete(self, product_id: str) -> MutationResult:
        """Delete a product; it is removed locally only once the store confirms.

        Confirmation with the operator is the caller's job.
        """
        try:
            await self._gateway.delete(product_id)
        except MutationFailureError as e:
            self.error = e
            return MutationResult.failed(e)

        self._catalog = [p for p in self._catalog if p.id != product_id]
        if self.edit_draft is not None and self.edit_draft.product_id == product_id:
            self.edit_draft = None
        if self.viewing_id == product_id:
            self.viewing_id = None
        self._recompute()
        return MutationResult()
