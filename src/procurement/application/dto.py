"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemSpec:
    """Input: one line the caller wants on the order.

    ``product_id=None`` asks for a freshly generated ProductId.
    """

    product_id: str | None
    quantity: int
    unit_price: str  # decimal text, e.g. "45.99"


@dataclass(frozen=True)
class PurchaseOrderItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    quantity: int
    unit_price: str  # formatted, e.g. "USD 45.99"
    subtotal: str


@dataclass(frozen=True)
class PurchaseOrderDTO:
    """Output: a complete purchase order as displayed to the user."""

    id: str
    supplier_id: str
    currency: str
    order_date: str
    status: str
    items: list[PurchaseOrderItemDTO]
    total: str | None  # None while the order has no items


@dataclass(frozen=True)
class SupplierDTO:
    id: str
    name: str
    contact_email: str | None
