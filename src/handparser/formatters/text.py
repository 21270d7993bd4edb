"""Plain text formatting for terminal output."""

from handparser.models.hand import HandHistory


class TextFormatter:
    """Format parsed hands as plain text for terminal display."""

    def format_hand(self, hand: HandHistory) -> str:
        """Format a single hand for display."""
        meta = hand.meta_data
        lines = []
        lines.append(f"=== {meta.site} | Table '{meta.table_name}' ===")
        lines.append(f"Blinds: {meta.stake}  |  "
                     f"Pot: ${hand.result.pot}  |  Rake: ${hand.result.rake}")

        lines.append("")
        for player in hand.players:
            lines.append(f"  {player}")

        for street in hand.streets:
            lines.append(f"\n  [{street.street_type.value.upper()}]")
            for a in street.actions:
                lines.append(f"    {a}")

        return "\n".join(lines)
