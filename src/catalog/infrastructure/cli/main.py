import logging

import click

from catalog.infrastructure import bootstrap
from catalog.infrastructure.cli.inventory_commands import (
    inventory_backorder,
    inventory_sell,
    inventory_set,
    inventory_show,
)
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.prototype_commands import prototype_add, prototype_list
from catalog.infrastructure.cli.variant_commands import variant_add, variant_remove


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    envvar=bootstrap.DATA_DIR_ENV,
    help="Directory holding the JSON data files.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
def cli(data_dir: str | None, verbose: bool) -> None:
    """Catalog — products, variants and inventory"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    bootstrap.configure(data_dir)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def variant() -> None:
    """Manage variants."""


@cli.group()
def inventory() -> None:
    """Manage inventory."""


@cli.group()
def prototype() -> None:
    """Manage prototypes."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
variant.add_command(variant_add)
variant.add_command(variant_remove)
inventory.add_command(inventory_backorder)
inventory.add_command(inventory_sell)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
prototype.add_command(prototype_add)
prototype.add_command(prototype_list)
