import logging

import click

from coffeeshop.infrastructure.cli.order_commands import (
    order_receipt,
    order_summary,
    sample,
)
from coffeeshop.infrastructure.logs import setup_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Coffee Shop: order receipts and item descriptions"""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@cli.group()
def order() -> None:
    """Format orders."""


# Register subcommands
cli.add_command(sample)
order.add_command(order_receipt)
order.add_command(order_summary)
