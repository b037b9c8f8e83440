"""CLI command that runs a purchase scenario and prints the report."""

from __future__ import annotations

from pathlib import Path

import click

from vending.application.dto import ChangeDTO, PurchaseLineDTO
from vending.application.run_scenario import RunScenarioHandler
from vending.domain.exceptions import DomainException
from vending.infrastructure.bootstrap import scenario


def _currency_line(label: str, change: ChangeDTO) -> str:
    coins = f"in coins {change.coins}" if change.exact else "not expressible in coins"
    return f"{label}: {change.amount}$ {coins}"


def _purchase_line(line: PurchaseLineDTO) -> str:
    if line.succeeded:
        return f"Bought: {line.quantity}x {line.item_name}"
    reason = line.status.replace("_", " ").lower()
    return f"Rejected: {line.quantity}x {line.selector} ({reason})"


@click.command("demo")
@click.option(
    "--scenario",
    "scenario_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON scenario file (defaults to the built-in demo).",
)
def demo(scenario_path: Path | None) -> None:
    """Load the machine, run the purchases and show what is left."""
    handler = RunScenarioHandler()

    try:
        report = handler.handle(scenario(scenario_path))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Vending Machine: {report.machine_before}")
    click.echo(_currency_line("Available Currency", report.balance_before))
    click.echo()
    for line in report.purchases:
        click.echo(_purchase_line(line))
    click.echo()
    click.echo(f"Remaining in Machine: {report.machine_after}")
    click.echo(_currency_line("Remaining Currency", report.balance_after))
