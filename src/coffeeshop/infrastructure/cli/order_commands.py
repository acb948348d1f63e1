"""CLI commands for orders."""

from __future__ import annotations

import click

from coffeeshop.application.dto import ItemSpec, OrderSummaryDTO
from coffeeshop.domain.exceptions import DomainException
from coffeeshop.infrastructure.bootstrap import sample_order, summarize_order_handler


def _parse_items(raw_items: tuple[str, ...]) -> list[ItemSpec]:
    """Parse ('cookie:CHOCOLATE_CHIP:2.50', 'americano') into ItemSpec list."""
    specs: list[ItemSpec] = []
    for raw in raw_items:
        kind, *fields = raw.split(":")
        if not kind.strip():
            raise click.BadParameter(
                f"Invalid item format '{raw}'. Expected 'kind:field:...'.",
                param_hint="--item",
            )
        specs.append(ItemSpec(kind=kind.strip(), fields=tuple(fields)))
    return specs


def _summarize(customer: str, items: tuple[str, ...]) -> OrderSummaryDTO:
    specs = _parse_items(items)
    handler = summarize_order_handler()

    try:
        return handler.handle(customer_name=customer, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _display_summary(dto: OrderSummaryDTO) -> None:
    """Shared formatting for displaying an order summary."""
    click.echo(f"Customer: {dto.customer_name}")
    click.echo()
    click.echo("Receipt")
    click.echo("-" * 40)
    click.echo(dto.receipt)
    click.echo()
    click.echo("Food")
    click.echo("-" * 40)
    for description in dto.food_items or ["(none)"]:
        click.echo(f"  {description}")
    click.echo()
    click.echo("Drinks")
    click.echo("-" * 40)
    for description in dto.drinks or ["(none)"]:
        click.echo(f"  {description}")


_customer_option = click.option("--customer", required=True, help="Customer name.")
_item_option = click.option(
    "--item",
    "items",
    multiple=True,
    help="Item as 'kind:field:...', e.g. 'bagel:EVERYTHING:PLAIN_CREAM_CHEESE:3.00'. Repeatable.",
)


@click.command("summary")
@_customer_option
@_item_option
def order_summary(customer: str, items: tuple[str, ...]) -> None:
    """Print receipt, food items and drinks for an order."""
    _display_summary(_summarize(customer, items))


@click.command("receipt")
@_customer_option
@_item_option
def order_receipt(customer: str, items: tuple[str, ...]) -> None:
    """Print only the food receipt for an order."""
    click.echo(_summarize(customer, items).receipt)


@click.command("sample")
def sample() -> None:
    """Print the summary of the built-in demo order."""
    dto = summarize_order_handler().summarize(sample_order())
    _display_summary(dto)
