import click

from vending.infrastructure.cli.change_commands import change
from vending.infrastructure.cli.demo_commands import demo
from vending.infrastructure.logging_config import setup_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log verbosity (defaults to $LOG_LEVEL or WARNING).",
)
def cli(log_level: str | None) -> None:
    """Vending machine simulator"""
    setup_logging(log_level)


# Register subcommands
cli.add_command(change)
cli.add_command(demo)
