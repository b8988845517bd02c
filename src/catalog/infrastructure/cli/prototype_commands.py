"""CLI commands for prototypes."""

from __future__ import annotations

import click

from catalog.application.create_prototype import CreatePrototypeHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import unit_of_work
from catalog.infrastructure.cli.options import parse_names


@click.command("add")
@click.option("--name", required=True, help="Prototype name.")
@click.option("--properties", default=None, help="Property names as 'Material,Origin'.")
@click.option("--option-types", default=None, help="Option types as 'Size,Color'.")
def prototype_add(name: str, properties: str | None, option_types: str | None) -> None:
    """Add a prototype that new products can be created from."""
    handler = CreatePrototypeHandler(uow=unit_of_work())

    try:
        prototype = handler.handle(
            name=name,
            properties=parse_names(properties),
            option_types=parse_names(option_types),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Prototype #{prototype.id} '{prototype.name}' added")


@click.command("list")
def prototype_list() -> None:
    """List all prototypes."""
    uow = unit_of_work()
    with uow:
        prototypes = uow.prototypes.list_all()

    if not prototypes:
        click.echo("No prototypes found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Properties':<25} {'Option types':<25}")
    click.echo("-" * 79)
    for p in prototypes:
        click.echo(
            f"{p.id:<6} {p.name:<20} {', '.join(p.properties):<25} {', '.join(p.option_types):<25}"
        )
