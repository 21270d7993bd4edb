"""Statistics over parsed hands."""

from handparser.analysis.calculator import (
    action_in_sample, create_graph_points, money_difference, player_cards,
    player_involved_hands, player_results, vpip,
)

__all__ = [
    "action_in_sample", "create_graph_points", "money_difference", "player_cards",
    "player_involved_hands", "player_results", "vpip",
]
