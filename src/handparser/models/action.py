"""Action and Street models."""

from enum import Enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

from handparser.models.card import HoleCards
from handparser.models.player import Player


class Street(str, Enum):
    """Sections of a hand, in the order they appear in the log."""
    METADATA = "metadata"
    PLAYERS = "players"
    BLINDS = "blinds"
    HERO = "hero"
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"
    SHOWDOWN = "showdown"
    SUMMARY = "summary"

    @property
    def order(self) -> int:
        return list(Street).index(self)


# Streets whose lines are "name: action" style betting actions.
ACTION_STREETS = (
    Street.BLINDS,
    Street.PREFLOP,
    Street.FLOP,
    Street.TURN,
    Street.RIVER,
    Street.SHOWDOWN,
)


class ActionType(str, Enum):
    DOESNT_SHOW = "doesnt_show"
    TIMED_OUT = "timed_out"
    MUCKS = "mucks"
    MUCKS_AND_SHOWS = "mucks_and_shows"
    SHOWS = "shows"
    SHOWED_AND_WON = "showed_and_won"
    CHECK = "check"
    FOLD = "fold"
    CALL = "call"
    BET = "bet"
    RAISE = "raise"
    COLLECT_UNCALLED = "collect_uncalled"
    COLLECT_FROM_POT = "collect_from_pot"
    POSTS = "posts"
    SHOWED_AND_LOST = "showed_and_lost"

    @property
    def reveals_cards(self) -> bool:
        return self in (ActionType.SHOWS, ActionType.SHOWED_AND_WON,
                        ActionType.SHOWED_AND_LOST, ActionType.MUCKS_AND_SHOWS)

    @property
    def puts_money_in(self) -> bool:
        return self in (ActionType.POSTS, ActionType.BET,
                        ActionType.CALL, ActionType.RAISE)

    @property
    def is_win(self) -> bool:
        return self in (ActionType.COLLECT_FROM_POT, ActionType.COLLECT_UNCALLED,
                        ActionType.SHOWED_AND_WON)


@dataclass(frozen=True)
class Action:
    """One parsed action.

    Payload by type: Call, Bet, Posts, CollectUncalled and CollectFromPot
    carry ``amount``; Raise carries ``amount`` (the raise) and ``to_amount``
    (the new total); Shows, MucksAndShows and ShowedAndLost carry ``cards``;
    ShowedAndWon carries both ``cards`` and ``amount``.
    """
    action_type: ActionType
    amount: Optional[Decimal] = None
    to_amount: Optional[Decimal] = None
    cards: Optional[HoleCards] = None

    @property
    def committed(self) -> Decimal:
        """Money this action puts into the pot, as counted for results."""
        if self.action_type == ActionType.RAISE:
            return self.to_amount
        if self.action_type.puts_money_in:
            return self.amount
        return Decimal("0")

    def __str__(self) -> str:
        name = self.action_type.value.replace("_", " ")
        if self.action_type == ActionType.RAISE:
            return f"raise ${self.amount} to ${self.to_amount}"
        parts = [name]
        if self.cards is not None:
            parts.append(f"[{self.cards}]")
        if self.amount is not None:
            parts.append(f"${self.amount}")
        return " ".join(parts)


@dataclass(frozen=True)
class PlayerAction:
    """A single action attributed to a player."""
    player: Player
    action: Action

    @property
    def action_type(self) -> ActionType:
        return self.action.action_type

    def __str__(self) -> str:
        return f"{self.player.name}: {self.action}"


@dataclass(frozen=True)
class StreetActions:
    """The ordered actions taken on one street of a hand."""
    street_type: Street
    actions: Tuple[PlayerAction, ...] = ()
