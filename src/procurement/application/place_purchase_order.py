"""Application service: Place Purchase Order use case.

Builds a PurchaseOrder from raw caller input, adds its items while it is
still Draft, then walks the lifecycle up to the requested status. Nothing
is stored; the finished order is returned as a DTO.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from procurement.application.dto import ItemSpec, PurchaseOrderDTO, PurchaseOrderItemDTO
from procurement.domain.exceptions import ValidationError
from procurement.domain.model.purchase_order import PurchaseOrder
from procurement.domain.model.purchase_order_state import (
    PurchaseOrderState,
    PurchaseOrderStatus,
)
from procurement.domain.model.value_objects import (
    Currency,
    OrderDate,
    ProductId,
    SupplierId,
)

logger = logging.getLogger(__name__)

# Draft -> Submitted -> Approved -> Shipped -> Completed
_HAPPY_PATH = (
    PurchaseOrder.submit,
    PurchaseOrder.approve,
    PurchaseOrder.ship,
    PurchaseOrder.complete,
)


class PlacePurchaseOrderHandler:

    def handle(
        self,
        supplier_id: str | None,
        currency: str,
        item_specs: list[ItemSpec],
        advance_to: str = PurchaseOrderStatus.DRAFT.value,
        order_date: str | None = None,
    ) -> PurchaseOrderDTO:
        """Place a purchase order.

        Steps:
        1. Parse the supplier id (generated when omitted), currency,
           target status and order date.
        2. Add every item while the order is Draft.
        3. Submit/approve/ship/complete until the target status is reached,
           or cancel the draft when the target is Canceled.
        """
        supplier = SupplierId(supplier_id) if supplier_id else SupplierId.generate()
        target = PurchaseOrderState.of(advance_to).status
        order = PurchaseOrder(
            supplier_id=supplier,
            currency=Currency.of(currency),
            order_date=OrderDate(order_date) if order_date else None,
        )

        for spec in item_specs:
            product = ProductId(spec.product_id) if spec.product_id else ProductId.generate()
            order.add_item(product, spec.quantity, _parse_price(spec.unit_price))

        _advance(order, target)
        logger.info(
            "Placed purchase order %s with %d item(s), status %s",
            order.id, order.item_count, order.state.value,
        )
        return self._to_dto(order)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: PurchaseOrder) -> PurchaseOrderDTO:
        return PurchaseOrderDTO(
            id=order.id,
            supplier_id=order.supplier_id.value,
            currency=order.currency.code,
            order_date=str(order.order_date),
            status=order.state.value,
            items=[
                PurchaseOrderItemDTO(
                    product_id=item.product_id.value,
                    quantity=item.quantity,
                    unit_price=str(item.unit_price),
                    subtotal=str(item.calculate_subtotal()),
                )
                for item in order.items
            ],
            total=str(order.calculate_total_price()) if order.items else None,
        )


def _advance(order: PurchaseOrder, target: PurchaseOrderStatus) -> None:
    if target == PurchaseOrderStatus.CANCELED:
        order.cancel()
        return
    for step in _HAPPY_PATH:
        if order.state == target:
            return
        step(order)


def _parse_price(raw: str) -> Decimal:
    try:
        return Decimal(raw.strip())
    except (InvalidOperation, AttributeError) as exc:
        raise ValidationError(f"Invalid unit price: {raw!r}") from exc
