"""CLI commands for variants."""

from __future__ import annotations

import click

from catalog.application.add_variant import AddVariantHandler
from catalog.application.remove_variant import RemoveVariantHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.value_objects import Dimensions
from catalog.infrastructure.bootstrap import unit_of_work
from catalog.infrastructure.cli.options import parse_pairs


@click.command("add")
@click.option("--product", "product_ref", required=True, help="Product ID or permalink.")
@click.option("--options", default=None, help="Option values as 'Size:M,Color:Red'.")
@click.option("--price", default=None, help="Price (defaults to the master price).")
@click.option("--sku", default="", help="Variant SKU.")
@click.option("--on-hand", "on_hand", type=int, default=None, help="Initial on-hand quantity.")
@click.option("--weight", default=None)
@click.option("--height", default=None)
@click.option("--width", default=None)
@click.option("--depth", default=None)
def variant_add(
    product_ref: str,
    options: str | None,
    price: str | None,
    sku: str,
    on_hand: int | None,
    weight: str | None,
    height: str | None,
    width: str | None,
    depth: str | None,
) -> None:
    """Add a variant to a product (the master's stock drops to zero)."""
    handler = AddVariantHandler(uow=unit_of_work())
    dims = None

    try:
        if any(d is not None for d in (weight, height, width, depth)):
            dims = Dimensions.of(weight, height, width, depth)
        dto = handler.handle(
            product_ref,
            option_values=parse_pairs(options),
            price=price,
            sku=sku,
            on_hand=on_hand,
            dimensions=dims,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant {dto.id} ({dto.options}) added at {dto.price}, on hand {dto.on_hand}")


@click.command("remove")
@click.option("--variant", "variant_id", required=True, help="Variant ID.")
def variant_remove(variant_id: str) -> None:
    """Remove a non-master variant and its inventory units."""
    handler = RemoveVariantHandler(uow=unit_of_work())

    try:
        dto = handler.handle(variant_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant {variant_id} removed from {dto.name}, on hand {dto.on_hand}")
