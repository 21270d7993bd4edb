"""Typer command line interface for browsing hand histories."""

import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.logging import RichHandler

from handparser import config

app = typer.Typer(
    name="handparser",
    help="PokerStars hand history parser and player stats",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v",
                                 help="Log every skipped hand"),
):
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    logging.basicConfig(level=level, format="%(message)s",
                        handlers=[RichHandler(console=console, show_path=False)])


def _load_hands(path: Path) -> List:
    from handparser.parser.stars_parser import PokerStarsParser

    parser = PokerStarsParser()
    try:
        if path.is_dir():
            hands = parser.parse_folder(path)
        else:
            hands = parser.parse_file(path)
    except OSError as e:
        console.print(f"[red]Error reading {path}:[/red] {e}")
        raise typer.Exit(1)

    if not hands:
        console.print("[yellow]No hands found.[/yellow]")
        raise typer.Exit(1)
    return hands


@app.command()
def hands(
    path: Path = typer.Argument(..., help="Hand history file or folder",
                                exists=True, readable=True),
    limit: int = typer.Option(20, "--limit", "-n", help="Max hands to show"),
):
    """List parsed hands."""
    from handparser.formatters.table import TableFormatter

    all_hands = _load_hands(path)
    fmt = TableFormatter(console)
    fmt.print_hands_list(all_hands[:limit])

    if len(all_hands) > limit:
        console.print(f"\n[dim]Showing {limit} of {len(all_hands)} hands. "
                      f"Use --limit to see more.[/dim]")


@app.command()
def show(
    path: Path = typer.Argument(..., help="Hand history file or folder",
                                exists=True, readable=True),
    index: int = typer.Argument(..., help="Hand number, as listed by 'hands'"),
):
    """Show a single hand in detail."""
    from handparser.formatters.table import TableFormatter

    all_hands = _load_hands(path)
    if not 1 <= index <= len(all_hands):
        console.print(f"[red]Hand {index} not found ({len(all_hands)} hands).[/red]")
        raise typer.Exit(1)

    TableFormatter(console).print_hand(all_hands[index - 1], index)


@app.command()
def players(
    path: Path = typer.Argument(..., help="Hand history file or folder",
                                exists=True, readable=True),
):
    """List players and how many hands each played."""
    from handparser.analysis.calculator import player_involved_hands, player_names
    from handparser.formatters.table import TableFormatter

    all_hands = _load_hands(path)
    counts = [(name, len(player_involved_hands(name, all_hands)))
              for name in player_names(all_hands)]
    TableFormatter(console).print_players(counts)


@app.command()
def profit(
    player: str = typer.Argument(..., help="Exact player name"),
    path: Path = typer.Argument(..., help="Hand history file or folder",
                                exists=True, readable=True),
    graph: bool = typer.Option(False, "--graph", help="Show cumulative result per hand"),
):
    """Show a player's net result and VPIP."""
    from handparser.analysis.calculator import (
        create_graph_points, player_involved_hands, player_results, vpip,
    )
    from handparser.formatters.table import TableFormatter

    all_hands = _load_hands(path)
    involved = player_involved_hands(player, all_hands)
    if not involved:
        console.print(f"[yellow]{player} is not in any hand.[/yellow]")
        raise typer.Exit(1)

    results = player_results(player, involved)
    fmt = TableFormatter(console)
    fmt.print_profit(player, results, vpip(player, involved))
    if graph:
        console.print()
        fmt.print_graph_points(create_graph_points(results))


@app.command()
def cards(
    player: str = typer.Argument(..., help="Exact player name"),
    path: Path = typer.Argument(..., help="Hand history file or folder",
                                exists=True, readable=True),
):
    """Show the hole cards a player revealed."""
    from handparser.analysis.calculator import player_cards
    from handparser.formatters.table import TableFormatter

    all_hands = _load_hands(path)
    shown = []
    for i, hand in enumerate(all_hands, 1):
        if not hand.has_player(player):
            continue
        hole = player_cards(player, hand)
        if hole.is_known:
            shown.append((i, hole))
    TableFormatter(console).print_cards(player, shown)


if __name__ == "__main__":
    app()
