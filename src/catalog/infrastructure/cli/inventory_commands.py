"""CLI commands for inventory management."""

from __future__ import annotations

import click

from catalog.application.record_backorder import RecordBackorderHandler
from catalog.application.sell_units import SellUnitsHandler
from catalog.application.set_inventory import SetInventoryHandler
from catalog.application.show_inventory import ShowInventoryHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import unit_of_work


@click.command("set")
@click.option("--product", "product_ref", default=None, help="Product ID or permalink.")
@click.option("--variant", "variant_id", default=None, help="Variant ID.")
@click.option("--quantity", required=True, type=int, help="Target on-hand quantity.")
def inventory_set(product_ref: str | None, variant_id: str | None, quantity: int) -> None:
    """Set the on-hand level of a product without variants, or of one variant."""
    if not product_ref and not variant_id:
        raise click.ClickException("Either --product or --variant is required")

    handler = SetInventoryHandler(uow=unit_of_work())

    try:
        dto, adjustment = handler.handle(
            quantity, product_ref=product_ref, variant_id=variant_id
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if adjustment is not None and adjustment.changed:
        click.echo(
            f"Filled {adjustment.backorders_filled} backorder(s), "
            f"created {adjustment.units_created}, destroyed {adjustment.units_destroyed} unit(s)."
        )
    click.echo(f"'{dto.name}' now has {dto.on_hand} on hand")


@click.command("backorder")
@click.option("--variant", "variant_id", required=True, help="Variant ID.")
@click.option("--count", required=True, type=int, help="Units to backorder.")
def inventory_backorder(variant_id: str, count: int) -> None:
    """Record backordered units for a variant."""
    handler = RecordBackorderHandler(uow=unit_of_work())

    try:
        dto = handler.handle(variant_id, count)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant {dto.id} has {dto.backordered} backordered unit(s)")


@click.command("sell")
@click.option("--variant", "variant_id", required=True, help="Variant ID.")
@click.option("--count", required=True, type=int, help="Units sold.")
def inventory_sell(variant_id: str, count: int) -> None:
    """Mark on-hand units of a variant as sold."""
    handler = SellUnitsHandler(uow=unit_of_work())

    try:
        dto = handler.handle(variant_id, count)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant {dto.id} has {dto.on_hand} on hand")


@click.command("show")
def inventory_show() -> None:
    """Show current inventory levels."""
    handler = ShowInventoryHandler(uow=unit_of_work())
    lines = handler.handle()

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'Product':<20} {'Variant':<20} {'On hand':>8} {'Backordered':>12}")
    click.echo("-" * 63)
    for line in lines:
        click.echo(
            f"{line.product_name:<20} {line.variant:<20} {line.on_hand:>8} {line.backordered:>12}"
        )
