"""Domain entities.

Product is the only entity: its identity is the id assigned by the
Product Store. Drafts carry operator input for the create and edit
workflows until the store confirms them.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, Self

from stockview.domain.base import Entity
from stockview.domain.exceptions import MalformedProductError
from stockview.domain.value_objects import (
    DEFAULT_MIN_QUANTITY,
    AbsentAlert,
    AlertConfig,
    StructuredAlert,
    coerce_amount,
    coerce_int,
    decode_alert_config,
)

# Fields an inline edit sends back to the store
EDITABLE_FIELDS = (
    "name",
    "buying_price",
    "selling_price",
    "quantity",
    "category",
    "supplier_name",
)


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text or None


def _json_safe(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    return value


# ============================================================================
# Product
# ============================================================================


@dataclass(eq=False)
class Product(Entity[str]):
    """A catalog entry mirrored from the Product Store.

    Attributes:
        id: Store-assigned identifier.
        product_index: Human-facing product code (text or number).
        name: Display name.
        quantity: Units in stock.
        buying_price: Cost amount, None if the store value is not numeric.
        selling_price: Sale amount, None if the store value is not numeric.
        alert_config: Low-stock threshold configuration.
        description: Optional free text.
        supplier_name: Optional supplier, used as a filter dimension.
        category: Optional category, used as a filter dimension.
    """

    product_index: str | int | None = None
    name: str = ""
    quantity: int = 0
    buying_price: Decimal | None = None
    selling_price: Decimal | None = None
    alert_config: AlertConfig = field(default_factory=AbsentAlert)
    description: str | None = None
    supplier_name: str | None = None
    category: str | None = None

    @property
    def min_quantity(self) -> int | Decimal | None:
        """Effective low-stock threshold, None if the config is unreadable."""
        if isinstance(self.alert_config, StructuredAlert):
            return self.alert_config.min_quantity
        if isinstance(self.alert_config, AbsentAlert):
            return DEFAULT_MIN_QUANTITY
        return None

    @classmethod
    def from_api_response(cls, data: Any) -> Self:
        """Create from a Product Store record.

        Args:
            data: A single product record (already unwrapped from ``data``).

        Returns:
            Product instance.

        Raises:
            MalformedProductError: If the record has no id or no usable quantity.
        """
        if not isinstance(data, dict):
            raise MalformedProductError("record is not an object", data)
        if data.get("id") is None:
            raise MalformedProductError("missing id", data)

        quantity = coerce_int(data.get("quantity"))
        if quantity is None or quantity < 0:
            raise MalformedProductError(
                f"invalid quantity {data.get('quantity')!r}", data
            )

        return cls(
            id=str(data["id"]),
            product_index=data.get("product_index"),
            name=str(data.get("name") or ""),
            quantity=quantity,
            buying_price=coerce_amount(data.get("buying_price")),
            selling_price=coerce_amount(data.get("selling_price")),
            alert_config=decode_alert_config(data.get("alert_config")),
            description=_optional_text(data.get("description")),
            supplier_name=_optional_text(data.get("supplier_name")),
            category=_optional_text(data.get("category")),
        )


# ============================================================================
# Drafts
# ============================================================================


@dataclass
class ProductDraft:
    """Operator input for a product that does not exist yet.

    Values are kept as entered; the store performs normalization and
    returns the canonical record.
    """

    product_index: str | int = ""
    name: str = ""
    buying_price: str | int | float | Decimal = ""
    selling_price: str | int | float | Decimal = ""
    quantity: str | int = ""
    min_quantity: int = DEFAULT_MIN_QUANTITY
    description: str = ""
    supplier_name: str = ""
    category: str = ""

    def to_payload(self) -> dict[str, Any]:
        """Build the create request body."""
        quantity = coerce_int(self.quantity)
        return {
            "product_index": self.product_index,
            "name": self.name,
            "buying_price": _json_safe(self.buying_price),
            "selling_price": _json_safe(self.selling_price),
            "quantity": quantity if quantity is not None else self.quantity,
            "alert_config": {"min_quantity": self.min_quantity},
            "description": self.description,
            "supplier_name": self.supplier_name,
            "category": self.category,
        }


@dataclass
class EditDraft:
    """An in-progress inline edit of one product."""

    product_id: str
    name: str = ""
    buying_price: str | int | float | Decimal | None = None
    selling_price: str | int | float | Decimal | None = None
    quantity: str | int = 0
    category: str | None = None
    supplier_name: str | None = None

    @classmethod
    def from_product(cls, product: Product) -> Self:
        """Start an edit from the product's current values."""
        return cls(
            product_id=product.id,
            name=product.name,
            buying_price=product.buying_price,
            selling_price=product.selling_price,
            quantity=product.quantity,
            category=product.category,
            supplier_name=product.supplier_name,
        )

    def with_changes(self, **changes: Any) -> Self:
        """Return a copy with the given editable fields changed.

        Raises:
            ValueError: If a field is not editable.
        """
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Not editable: {sorted(unknown)}")
        return replace(self, **changes)

    def to_patch(self) -> dict[str, Any]:
        """Build the update request body."""
        patch = {name: _json_safe(getattr(self, name)) for name in EDITABLE_FIELDS}
        quantity = coerce_int(self.quantity)
        if quantity is not None:
            patch["quantity"] = quantity
        return patch
