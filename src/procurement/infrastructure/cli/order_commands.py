"""CLI commands for the PurchaseOrder aggregate."""

from __future__ import annotations

import click

from procurement.application.dto import ItemSpec, PurchaseOrderDTO
from procurement.application.place_purchase_order import PlacePurchaseOrderHandler
from procurement.domain.exceptions import DomainException
from procurement.domain.model.purchase_order_state import PurchaseOrderStatus
from procurement.infrastructure.config import Settings


def _parse_item(raw: str) -> ItemSpec:
    """Parse 'PRODUCT:QTY:PRICE' into an ItemSpec ('-' generates a product id)."""
    parts = [part.strip() for part in raw.split(":")]
    if len(parts) != 3:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'Product:Quantity:UnitPrice'."
        )
    product, qty_str, price = parts
    try:
        qty = int(qty_str)
    except ValueError:
        raise click.BadParameter(
            f"Invalid quantity '{qty_str}' for product '{product}'."
        )
    return ItemSpec(
        product_id=None if product in ("", "-") else product,
        quantity=qty,
        unit_price=price,
    )


def _display_order(dto: PurchaseOrderDTO) -> None:
    click.echo(f"Purchase order {dto.id}  (status={dto.status})")
    click.echo(f"Supplier: {dto.supplier_id}")
    click.echo(f"Placed:   {dto.order_date}")
    click.echo()

    if not dto.items:
        click.echo("  No items.")
        return

    click.echo(f"  {'Product':<36} {'Qty':>5} {'Price':>14} {'Subtotal':>14}")
    click.echo(f"  {'-'*72}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<36} {item.quantity:>5} {item.unit_price:>14} {item.subtotal:>14}"
        )
    click.echo(f"  {'-'*72}")
    click.echo(f"  {'Order Total':<42} {dto.total:>30}")


@click.command("place")
@click.option("--supplier", "supplier_id", default=None, help="Supplier UUID (generated if omitted).")
@click.option("--currency", default=None, help="Currency code: USD, EUR, GBP or JPY.")
@click.option(
    "--item", "items", multiple=True,
    help="Line item as 'Product:Qty:UnitPrice'; use '-' as Product to generate an id.",
)
@click.option(
    "--advance-to",
    type=click.Choice([status.value for status in PurchaseOrderStatus]),
    default=PurchaseOrderStatus.DRAFT.value,
    show_default=True,
    help="Lifecycle status to drive the order to.",
)
@click.option("--date", "order_date", default=None, help="Order date as ISO-8601 (defaults to now).")
@click.pass_obj
def order_place(
    config: Settings,
    supplier_id: str | None,
    currency: str | None,
    items: tuple[str, ...],
    advance_to: str,
    order_date: str | None,
) -> None:
    """Place a purchase order and drive it through its lifecycle."""
    specs = [_parse_item(raw) for raw in items]

    handler = PlacePurchaseOrderHandler()

    try:
        dto = handler.handle(
            supplier_id=supplier_id,
            currency=currency or config.default_currency,
            item_specs=specs,
            advance_to=advance_to,
            order_date=order_date,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
