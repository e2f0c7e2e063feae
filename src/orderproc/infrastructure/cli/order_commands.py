"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from orderproc.application.create_order import CreateOrderHandler
from orderproc.application.dto import OrderDTO
from orderproc.application.show_order import ShowOrderHandler
from orderproc.domain.exceptions import DomainException
from orderproc.infrastructure.bootstrap import (
    order_repository,
    process_order_handler,
    product_repository,
)


def _parse_product_ids(raw: str) -> list[str]:
    """Parse '1,2,3' into a list of product IDs."""
    return [part.strip() for part in raw.split(",") if part.strip()]


@click.command("create")
@click.option("--products", "products_str", default="", help="Product IDs as '1,2,3'.")
def order_create(products_str: str) -> None:
    """Create a new order referencing catalog products."""
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(_parse_product_ids(products_str))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created with {len(dto.products)} product(s)")


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()

    if not dto.products:
        click.echo("  No products.")
        return

    click.echo(f"  {'ID':<6} {'Name':<20} {'Type':<10} {'Available':>10} {'Lead':>6}")
    click.echo(f"  {'-'*56}")
    for p in dto.products:
        click.echo(
            f"  {p.id:<6} {p.name:<20} {p.type:<10} {p.available:>10} {p.lead_time:>6}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show an order with the current state of its products."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("process")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to process.")
def order_process(order_id: int) -> None:
    """Process an order (applies stock rules to every product)."""
    handler = process_order_handler()

    try:
        result = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{result.order_id} processed.")
