"""CLI commands for the Product aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ProductDTO
from catalog.application.list_products import ListProductsHandler, ProductScope
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.value_objects import Dimensions
from catalog.infrastructure.bootstrap import unit_of_work
from catalog.infrastructure.cli.options import as_utc, parse_pairs

_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%d %H:%M"]


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Master price (e.g. 19.99).")
@click.option("--sku", default="", help="Master SKU.")
@click.option("--on-hand", "on_hand", type=int, default=None, help="Initial on-hand quantity.")
@click.option("--prototype", "prototype_id", default=None, help="Prototype ID to copy from.")
@click.option("--available-on", type=click.DateTime(_DATE_FORMATS), default=None)
@click.option("--tax-category", "tax_category_id", default=None, help="Tax category ID.")
@click.option("--shipping-category", "shipping_category_id", default=None, help="Shipping category ID.")
@click.option("--weight", default=None)
@click.option("--height", default=None)
@click.option("--width", default=None)
@click.option("--depth", default=None)
def product_add(
    name: str,
    price: str,
    sku: str,
    on_hand: int | None,
    prototype_id: str | None,
    available_on: datetime | None,
    tax_category_id: str | None,
    shipping_category_id: str | None,
    weight: str | None,
    height: str | None,
    width: str | None,
    depth: str | None,
) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(uow=unit_of_work())

    try:
        dto = handler.handle(
            name=name,
            price=price,
            sku=sku,
            on_hand=on_hand,
            prototype_id=prototype_id,
            available_on=as_utc(available_on),
            dimensions=Dimensions.of(weight, height, width, depth),
            tax_category_id=tax_category_id,
            shipping_category_id=shipping_category_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{dto.id} '{dto.name}' ({dto.permalink}) added at {dto.price}, "
        f"on hand {dto.on_hand}"
    )


@click.command("list")
@click.option(
    "--scope",
    type=click.Choice([s.value for s in ProductScope]),
    default=ProductScope.NOT_DELETED.value,
    show_default=True,
)
@click.option("--property", "property_value", default=None, help="Filter as 'Name:Value'.")
def product_list(scope: str, property_value: str | None) -> None:
    """List products in the catalog."""
    pairs = parse_pairs(property_value)
    if len(pairs) > 1:
        raise click.BadParameter("Only one property filter is supported.")
    handler = ListProductsHandler(uow=unit_of_work())
    products = handler.handle(
        scope=ProductScope(scope),
        property_value=next(iter(pairs.items()), None),
    )

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Permalink':<20} {'Price':>10} {'On hand':>8}")
    click.echo("-" * 68)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.permalink:<20} {p.price:>10} {p.on_hand:>8}"
        )


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}  {dto.name}  ({dto.permalink})")
    click.echo(f"Price:     {dto.price}")
    click.echo(f"SKU:       {dto.sku or '-'}")
    click.echo(f"Available: {dto.available_on or 'never'}")
    if dto.tax_category_id or dto.shipping_category_id:
        click.echo(f"Tax cat.:  {dto.tax_category_id or '-'}  Shipping cat.: {dto.shipping_category_id or '-'}")
    if dto.deleted:
        click.echo("Deleted:   yes")
    click.echo(f"On hand:   {dto.on_hand}  (in stock: {'yes' if dto.has_stock else 'no'})")
    for name, value in dto.properties.items():
        click.echo(f"  {name}: {value}")
    click.echo()

    click.echo(f"  {'Variant':<32} {'Options':<20} {'Price':>10} {'On hand':>8} {'Backord.':>9}")
    click.echo(f"  {'-'*82}")
    for v in [dto.master, *dto.variants]:
        click.echo(
            f"  {v.id:<32} {v.options:<20} {v.price:>10} {v.on_hand:>8} {v.backordered:>9}"
        )


@click.command("show")
@click.option("--id", "product_ref", required=True, help="Product ID or permalink.")
def product_show(product_ref: str) -> None:
    """Show a product with its variants."""
    handler = ShowProductHandler(uow=unit_of_work())

    try:
        dto = handler.handle(product_ref)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_ref", required=True, help="Product ID or permalink.")
@click.option("--name", default=None, help="New name (permalink is kept).")
@click.option("--price", default=None, help="New master price.")
@click.option("--sku", default=None, help="New master SKU.")
@click.option("--available-on", type=click.DateTime(_DATE_FORMATS), default=None)
@click.option("--property", "properties", default=None, help="Set as 'Name:Value,...'.")
@click.option("--tax-category", "tax_category_id", default=None, help="Tax category ID (empty clears it).")
@click.option("--shipping-category", "shipping_category_id", default=None, help="Shipping category ID (empty clears it).")
@click.option("--weight", default=None)
@click.option("--height", default=None)
@click.option("--width", default=None)
@click.option("--depth", default=None)
def product_update(
    product_ref: str,
    name: str | None,
    price: str | None,
    sku: str | None,
    available_on: datetime | None,
    properties: str | None,
    tax_category_id: str | None,
    shipping_category_id: str | None,
    weight: str | None,
    height: str | None,
    width: str | None,
    depth: str | None,
) -> None:
    """Update a product's attributes."""
    handler = UpdateProductHandler(uow=unit_of_work())

    try:
        dto = handler.handle(
            product_ref,
            name=name,
            price=price,
            sku=sku,
            available_on=as_utc(available_on),
            properties=parse_pairs(properties),
            tax_category_id=tax_category_id,
            shipping_category_id=shipping_category_id,
            weight=weight,
            height=height,
            width=width,
            depth=depth,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} updated.")


@click.command("delete")
@click.option("--id", "product_ref", required=True, help="Product ID or permalink.")
@click.option("--destroy", is_flag=True, default=False, help="Remove instead of soft-deleting.")
def product_delete(product_ref: str, destroy: bool) -> None:
    """Soft-delete a product (or destroy it with its variants)."""
    handler = DeleteProductHandler(uow=unit_of_work())

    try:
        handler.handle(product_ref, destroy=destroy)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product_ref}' {'destroyed' if destroy else 'deleted'}.")
