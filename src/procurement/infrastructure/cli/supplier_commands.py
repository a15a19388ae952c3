"""CLI commands for suppliers."""

from __future__ import annotations

import click

from procurement.application.register_supplier import RegisterSupplierHandler
from procurement.domain.exceptions import DomainException


@click.command("register")
@click.option("--name", required=True, help="Supplier name (2-100 characters).")
@click.option("--email", default=None, help="Contact email address.")
def supplier_register(name: str, email: str | None) -> None:
    """Register a supplier and print its generated id."""
    handler = RegisterSupplierHandler()

    try:
        dto = handler.handle(name=name, contact_email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier '{dto.name}' registered with id {dto.id}")
    if dto.contact_email:
        click.echo(f"Contact: {dto.contact_email}")
