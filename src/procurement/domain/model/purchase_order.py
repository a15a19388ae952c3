"""PurchaseOrder aggregate — the core of the procurement domain.

The PurchaseOrder is an aggregate root that owns its line items and its
lifecycle state. All business invariants are enforced here; callers only
ever see read-only views of what it owns.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime

from procurement.domain.exceptions import ValidationError
from procurement.domain.model.purchase_order_state import (
    PurchaseOrderEvent,
    PurchaseOrderState,
    PurchaseOrderStatus,
    transition,
)
from procurement.domain.model.value_objects import (
    Currency,
    Money,
    OrderDate,
    ProductId,
    SupplierId,
    to_decimal,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_ITEMS = 50
MAX_ITEM_QUANTITY = 1000


@dataclass(frozen=True)
class PurchaseOrderItem:
    """A single line of a purchase order.

    Created by ``PurchaseOrder.add_item`` only; the unit price is already
    expressed in the order's currency.
    """

    order_id: str
    product_id: ProductId
    quantity: int
    unit_price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.order_id, str) or not self.order_id:
            raise ValidationError("Order ID is required for PurchaseOrderItem")
        if not isinstance(self.product_id, ProductId):
            raise ValidationError("ProductId must be a valid ProductId object")
        if (
            isinstance(self.quantity, bool)
            or not isinstance(self.quantity, int)
            or not 1 <= self.quantity <= MAX_ITEM_QUANTITY
        ):
            raise ValidationError(
                f"Quantity must be a positive integer not exceeding {MAX_ITEM_QUANTITY}"
            )
        if not isinstance(self.unit_price, Money):
            raise ValidationError("Unit price must be a valid Money object")

    def calculate_subtotal(self) -> Money:
        return self.unit_price.multiply(self.quantity)


class PurchaseOrder:
    """Aggregate root for purchase orders.

    A new order starts in Draft with no items. Items can be added only
    while it is Draft; afterwards the order moves through
    submit -> approve -> ship -> complete, or is canceled.
    """

    def __init__(
        self,
        supplier_id: SupplierId,
        currency: Currency,
        order_date: OrderDate | datetime | None = None,
    ) -> None:
        if not isinstance(supplier_id, SupplierId):
            raise ValidationError("SupplierId is required for PurchaseOrder")
        if not isinstance(currency, Currency):
            raise ValidationError("Currency must be a valid Currency object")
        if order_date is None:
            order_date = OrderDate.now()
        elif not isinstance(order_date, OrderDate):
            order_date = OrderDate(order_date)

        self._id = str(uuid.uuid4())
        self._supplier_id = supplier_id
        self._currency = currency
        self._order_date = order_date
        self._items: list[PurchaseOrderItem] = []
        self._state = PurchaseOrderState()

    # --- Items ----------------------------------------------------------------

    def add_item(
        self,
        product_id: ProductId,
        quantity: int,
        unit_price: int | float,
    ) -> PurchaseOrderItem:
        """Append a line item priced in the order's currency.

        Raises ValidationError if the order is no longer Draft, already
        holds ``MAX_ITEMS`` items, or the price/quantity/product is invalid.
        Nothing is appended on failure.
        """
        if not self._state.is_draft():
            raise ValidationError("Items can only be added to a PurchaseOrder in Draft state")
        if len(self._items) >= MAX_ITEMS:
            raise ValidationError(f"PurchaseOrder cannot have more than {MAX_ITEMS} items")
        price = to_decimal(unit_price)
        if price is None or price < 0:
            raise ValidationError("Unit price amount must be a non-negative number")

        item = PurchaseOrderItem(
            order_id=self._id,
            product_id=product_id,
            quantity=quantity,
            unit_price=Money(price, self._currency),
        )
        self._items.append(item)
        logger.debug(
            "Added %d x %s at %s to purchase order %s",
            quantity, product_id, item.unit_price, self._id,
        )
        return item

    def calculate_total_price(self) -> Money:
        if not self._items:
            raise ValidationError("Cannot calculate total price for an empty purchase order")
        total = Money.zero(self._currency)
        for item in self._items:
            total = total.add(item.calculate_subtotal())
        return total

    # --- State transitions ----------------------------------------------------

    def submit(self) -> None:
        """Transition Draft -> Submitted."""
        self._apply(PurchaseOrderEvent.SUBMIT)

    def approve(self) -> None:
        """Transition Submitted -> Approved."""
        self._apply(PurchaseOrderEvent.APPROVE)

    def ship(self) -> None:
        """Transition Approved -> Shipped."""
        self._apply(PurchaseOrderEvent.SHIP)

    def complete(self) -> None:
        """Transition Shipped -> Completed."""
        self._apply(PurchaseOrderEvent.COMPLETE)

    def cancel(self) -> None:
        """Transition any non-terminal state -> Canceled."""
        self._apply(PurchaseOrderEvent.CANCEL)

    # --- Accessors ------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def supplier_id(self) -> SupplierId:
        return self._supplier_id

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def order_date(self) -> OrderDate:
        return self._order_date

    @property
    def items(self) -> tuple[PurchaseOrderItem, ...]:
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def state(self) -> PurchaseOrderStatus:
        return self._state.status

    def __repr__(self) -> str:
        return (
            f"PurchaseOrder(id={self._id!r}, supplier_id={self._supplier_id.value!r}, "
            f"currency={self._currency.code}, state={self._state.value}, "
            f"items={len(self._items)})"
        )

    # --- Internal helpers -----------------------------------------------------

    def _apply(self, event: PurchaseOrderEvent) -> None:
        # a rejected event raises before assignment
        self._state = transition(self._state, event)
        logger.info("Purchase order %s is now %s", self._id, self._state.value)
