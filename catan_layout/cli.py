from __future__ import annotations

import json
import logging
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from catan_layout import __version__
from catan_layout.domain.board import (
    BOARD_CONFIGS,
    PRODUCTION_RESOURCES,
    BoardConfigError,
    BoardSize,
)
from catan_layout.domain.seeding import random_friendly_name
from catan_layout.generator import BoardLayout, generate_layout

LOG_LEVELS = ("debug", "info", "warning", "error")
RED_STYLE = "bold red"

console = Console()


def _layout_table(layout: BoardLayout) -> Table:
    table = Table(title=f"{layout.board_size} board - seed {escape(layout.seed_text)}")
    table.add_column("Slot", justify="right")
    table.add_column("Row", justify="right")
    table.add_column("Col", justify="right")
    table.add_column("Resource")
    table.add_column("Number", justify="right")
    table.add_column("Pips")
    for tile in layout.tiles:
        if tile.token is None:
            number, pips = "-", ""
        else:
            number = str(tile.token.value)
            if tile.token.is_high_frequency:
                number = f"[{RED_STYLE}]{number}[/{RED_STYLE}]"
            pips = tile.token.pips
        table.add_row(
            str(tile.slot),
            str(tile.position.row),
            str(tile.position.col),
            tile.resource.label,
            number,
            pips,
        )
    return table


def _balance_table(layout: BoardLayout) -> Table:
    table = Table(title=f"CIBI {layout.cibi_score}/100")
    for resource in PRODUCTION_RESOURCES:
        table.add_column(resource.label, justify="right")
    table.add_row(*(str(layout.pip_totals[resource]) for resource in PRODUCTION_RESOURCES))
    return table


@click.group()
@click.version_option(__version__, prog_name="catan-layout")
@click.option(
    "--loglevel",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="warning",
    show_default=True,
    help="Logging level.",
)
def main(loglevel: str) -> None:
    """Seeded, balance-checked Catan board layouts."""
    logging.basicConfig(
        level=getattr(logging, loglevel.upper()),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


@main.command()
@click.option("--seed", "seed_text", default=None, help="Seed text; a friendly name is generated when omitted.")
@click.option(
    "--board-size",
    type=click.Choice([size.value for size in BoardSize]),
    default=BoardSize.FIVE_SIX_PLAYER.value,
    show_default=True,
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the layout as JSON.")
def generate(seed_text: Optional[str], board_size: str, as_json: bool) -> None:
    """Generate a board layout."""
    try:
        layout = generate_layout(seed_text, board_size)
    except BoardConfigError as exc:
        raise click.BadParameter(str(exc), param_hint="--board-size") from exc

    if as_json:
        click.echo(json.dumps(layout.to_dict(), indent=2))
        return

    console.print(_layout_table(layout))
    console.print(_balance_table(layout))
    console.print(f"Seed: [green]{escape(layout.seed_text)}[/green] ({layout.numeric_seed})")
    if not layout.balanced:
        console.print(
            f"[yellow]No placement met every rule after {layout.attempts} attempts; "
            "showing the last candidate.[/yellow]"
        )


@main.command()
def boards() -> None:
    """List supported board sizes."""
    table = Table(title="Board sizes")
    table.add_column("Board size")
    table.add_column("Tiles", justify="right")
    table.add_column("Deserts", justify="right")
    table.add_column("Edge tiles", justify="right")
    table.add_column("Tokens", justify="right")
    for size, config in BOARD_CONFIGS.items():
        table.add_row(
            size.value,
            str(config.tile_count),
            str(config.desert_count),
            str(len(config.edge_indices())),
            str(len(config.number_tokens)),
        )
    console.print(table)


@main.command()
def name() -> None:
    """Print a fresh friendly seed name."""
    click.echo(random_friendly_name())


if __name__ == "__main__":
    main()
