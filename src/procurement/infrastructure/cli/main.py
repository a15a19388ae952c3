import click

from procurement.infrastructure.bootstrap import configure_logging, settings
from procurement.infrastructure.cli.order_commands import order_place
from procurement.infrastructure.cli.supplier_commands import supplier_register


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Procurement — purchase orders and their approval lifecycle"""
    config = settings()
    configure_logging(config, verbose=verbose)
    ctx.obj = config


@cli.group()
def order() -> None:
    """Manage purchase orders."""


@cli.group()
def supplier() -> None:
    """Manage suppliers."""


# Register subcommands
order.add_command(order_place)
supplier.add_command(supplier_register)
