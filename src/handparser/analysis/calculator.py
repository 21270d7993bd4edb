"""Statistics computed from parsed hand histories."""

from decimal import Decimal, ROUND_HALF_EVEN
from itertools import accumulate
from typing import Callable, List, Sequence

from handparser.models.action import ActionType, PlayerAction, Street
from handparser.models.card import HoleCards
from handparser.models.hand import HandHistory

CENT = Decimal("0.01")

ActionPredicate = Callable[[PlayerAction], bool]
HandPredicate = Callable[[HandHistory], bool]


def _committed(actions: Sequence[PlayerAction]) -> Decimal:
    total = sum((a.action.committed for a in actions), Decimal("0"))
    return total.quantize(CENT, rounding=ROUND_HALF_EVEN)


def money_difference(player_name: str, hand: HandHistory) -> Decimal:
    """Net amount a player won or lost in a hand.

    A player whose summary line shows a win gets everything the other players
    put in, less the rake. Anyone else loses what they put in. Raises
    ValueError if the player is not in the hand.
    """
    player = hand.player(player_name)
    if player is None:
        raise ValueError(f"{player_name!r} is not in this hand")

    summary = hand.street(Street.SUMMARY)
    outcome = None
    if summary is not None:
        outcome = next((a for a in summary.actions if a.player == player), None)
    if outcome is None:
        raise ValueError(f"{player_name!r} has no summary line in this hand")

    if outcome.action_type.is_win:
        others = [a for a in hand.actions if a.player != player]
        return _committed(others) - hand.result.rake
    return -_committed(hand.actions_of(player_name))


def player_cards(player_name: str, hand: HandHistory) -> HoleCards:
    """The hole cards a player revealed, or the unknown pair if they never did."""
    for action in hand.actions_of(player_name):
        if action.action_type.reveals_cards:
            return action.action.cards
    return HoleCards.unknown()


def player_involved_hands(player_name: str,
                          hands: Sequence[HandHistory]) -> List[HandHistory]:
    """Hands with a seat for exactly this (case-sensitive) name."""
    return [hand for hand in hands if hand.has_player(player_name)]


def create_graph_points(results: Sequence[Decimal]) -> List[Decimal]:
    """Running total of per-hand results, one point per hand."""
    return list(accumulate(results))


def is_not_fold(action: PlayerAction) -> bool:
    return action.action_type != ActionType.FOLD


def player_hands_matching(player_name: str,
                          predicate: ActionPredicate) -> HandPredicate:
    """Hand filter: true when the player has at least one matching action."""
    def matches(hand: HandHistory) -> bool:
        return any(predicate(a) for a in hand.actions_of(player_name))
    return matches


def action_in_sample(hands: Sequence[HandHistory],
                     hand_predicate: HandPredicate) -> float:
    """Percentage of the given hands for which the predicate holds."""
    if not hands:
        return 0.0
    matching = sum(1 for hand in hands if hand_predicate(hand))
    return matching / len(hands) * 100


def vpip(player_name: str, hands: Sequence[HandHistory]) -> float:
    """Percentage of hands in which the player did anything but fold."""
    return action_in_sample(hands, player_hands_matching(player_name, is_not_fold))


def player_results(player_name: str,
                   hands: Sequence[HandHistory]) -> List[Decimal]:
    """Money difference for each hand the player sat in, in order."""
    return [money_difference(player_name, hand)
            for hand in player_involved_hands(player_name, hands)]


def player_names(hands: Sequence[HandHistory]) -> List[str]:
    """Every player name seen, in order of first appearance."""
    seen = {}
    for hand in hands:
        for player in hand.players:
            seen.setdefault(player.name, None)
    return list(seen)
