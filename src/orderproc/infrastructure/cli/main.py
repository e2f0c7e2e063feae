import click

from orderproc.infrastructure.cli.order_commands import (
    order_create,
    order_process,
    order_show,
)
from orderproc.infrastructure.cli.product_commands import product_add, product_list
from orderproc.infrastructure.config import get_settings
from orderproc.infrastructure.logging_config import setup_logging


@click.group()
def cli() -> None:
    """orderproc: category-aware order processing"""
    setup_logging(get_settings())


@cli.group()
def order() -> None:
    """Manage and process orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_process)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
