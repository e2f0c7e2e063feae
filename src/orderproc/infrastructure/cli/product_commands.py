"""CLI commands for the Product aggregate."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from orderproc.application.add_product import AddProductHandler
from orderproc.application.dto import ProductDTO
from orderproc.domain.exceptions import DomainException
from orderproc.domain.model.product import ProductType
from orderproc.infrastructure.bootstrap import product_repository

_DATE = click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"])


def _utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option(
    "--type",
    "product_type",
    type=click.Choice([t.value for t in ProductType], case_sensitive=False),
    default=ProductType.NORMAL.value,
    show_default=True,
    help="Product category.",
)
@click.option("--available", default=0, type=click.IntRange(min=0), help="Units in stock.")
@click.option("--lead-time", default=0, type=click.IntRange(min=0), help="Restock lead time in days.")
@click.option("--expiry-date", type=_DATE, default=None, help="Expiry date (EXPIRABLE).")
@click.option("--season-start", type=_DATE, default=None, help="Season start (SEASONAL).")
@click.option("--season-end", type=_DATE, default=None, help="Season end (SEASONAL).")
def product_add(
    name: str,
    product_type: str,
    available: int,
    lead_time: int,
    expiry_date: datetime | None,
    season_start: datetime | None,
    season_end: datetime | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            product_type=ProductType.parse(product_type),
            available=available,
            lead_time=lead_time,
            expiry_date=_utc(expiry_date),
            season_start_date=_utc(season_start),
            season_end_date=_utc(season_end),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added ({product.type.value})")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    try:
        products = [ProductDTO.from_domain(p) for p in repo.list_all()]
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Type':<10} {'Available':>10} {'Lead':>6}  Dates")
    click.echo("-" * 70)
    for p in products:
        dates = p.expiry_date or " .. ".join(
            d for d in (p.season_start_date, p.season_end_date) if d
        )
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.type:<10} {p.available:>10} {p.lead_time:>6}  {dates}"
        )
