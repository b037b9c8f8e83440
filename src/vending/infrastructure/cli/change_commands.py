"""CLI command for breaking an amount into coins."""

from __future__ import annotations

import click

from vending.application.make_change import MakeChangeHandler
from vending.domain.exceptions import DomainException
from vending.infrastructure.bootstrap import DEFAULT_DENOMINATIONS


def _parse_coins(raw: str) -> list[str]:
    """Parse '2,1,0.5' into a list of denominations."""
    coins = [part.strip() for part in raw.split(",") if part.strip()]
    if not coins:
        raise click.BadParameter("At least one coin denomination is required.")
    return coins


@click.command("change")
@click.argument("amount")
@click.option(
    "--coins",
    default=",".join(DEFAULT_DENOMINATIONS),
    show_default=True,
    help="Denominations, largest first, as 'Coin,Coin,...'.",
)
def change(amount: str, coins: str) -> None:
    """Break AMOUNT into coins."""
    handler = MakeChangeHandler()

    try:
        dto = handler.handle(amount, _parse_coins(coins))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.exact:
        raise click.ClickException(f"{dto.amount}$ cannot be expressed in coins {coins}")
    click.echo(f"{dto.amount}$ in coins {dto.coins}")
