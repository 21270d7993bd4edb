"""Rich table formatting for terminal output."""

from decimal import Decimal
from typing import List, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from handparser.models.card import HoleCards
from handparser.models.hand import HandHistory


def _money(amount: Decimal) -> str:
    style = "green" if amount > 0 else "red" if amount < 0 else "dim"
    return f"[{style}]{amount:+.2f}[/{style}]"


class TableFormatter:
    """Format parsed hands and player stats as Rich tables."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_hands_list(self, hands: Sequence[HandHistory]) -> None:
        """Print a compact list of hands."""
        if not hands:
            self.console.print("[dim]No hands found.[/dim]")
            return

        table = Table(title=f"Hand History ({len(hands)} hands)")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Site", style="cyan")
        table.add_column("Table")
        table.add_column("Stakes")
        table.add_column("Players", justify="right")
        table.add_column("Streets")
        table.add_column("Pot", justify="right")
        table.add_column("Rake", justify="right")

        for i, hand in enumerate(hands, 1):
            streets = ", ".join(s.street_type.value for s in hand.streets)
            table.add_row(
                str(i),
                hand.meta_data.site,
                hand.meta_data.table_name,
                str(hand.meta_data.stake),
                str(len(hand.players)),
                streets,
                f"${hand.result.pot:.2f}",
                f"${hand.result.rake:.2f}",
            )

        self.console.print(table)

    def print_hand(self, hand: HandHistory, index: int) -> None:
        """Print a single hand as a Rich panel."""
        from handparser.formatters.text import TextFormatter
        content = TextFormatter().format_hand(hand)
        self.console.print(Panel(content, title=f"Hand {index}"))

    def print_players(self, counts: List[Tuple[str, int]]) -> None:
        """Print player names with the number of hands each played."""
        if not counts:
            self.console.print("[dim]No players found.[/dim]")
            return

        table = Table(title="Players")
        table.add_column("Player", style="cyan")
        table.add_column("Hands", justify="right")
        for name, count in counts:
            table.add_row(name, str(count))

        self.console.print(table)

    def print_profit(self, player_name: str, results: Sequence[Decimal],
                     vpip: float) -> None:
        """Print a player's net result and VPIP."""
        total = sum(results, Decimal("0"))
        table = Table(title=f"Player Stats: {player_name}")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("Hands", str(len(results)))
        table.add_row("Profit", _money(total))
        table.add_row("VPIP", f"{vpip:.1f}%")

        self.console.print(table)

    def print_graph_points(self, points: Sequence[Decimal]) -> None:
        """Print the cumulative result after each hand."""
        table = Table(title="Cumulative Result")
        table.add_column("Hand", justify="right", style="dim")
        table.add_column("Total", justify="right")
        for i, point in enumerate(points, 1):
            table.add_row(str(i), _money(point))

        self.console.print(table)

    def print_cards(self, player_name: str,
                    shown: Sequence[Tuple[int, HoleCards]]) -> None:
        """Print the hole cards a player revealed, hand by hand."""
        if not shown:
            self.console.print(f"[dim]{player_name} never showed cards.[/dim]")
            return

        table = Table(title=f"Cards shown by {player_name}")
        table.add_column("Hand", justify="right", style="dim")
        table.add_column("Cards", style="cyan")
        for index, cards in shown:
            table.add_row(str(index), str(cards))

        self.console.print(table)
