"""HandHistory - the core data structure for a single poker hand."""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

from handparser.models.action import PlayerAction, Street, StreetActions
from handparser.models.card import HoleCards
from handparser.models.player import Player


@dataclass(frozen=True)
class Stake:
    small_blind: Decimal
    big_blind: Decimal

    def __str__(self) -> str:
        return f"${self.small_blind}/${self.big_blind}"


@dataclass(frozen=True)
class MetaData:
    site: str
    table_name: str
    stake: Stake


@dataclass(frozen=True)
class Result:
    """Total pot and the rake taken from it."""
    pot: Decimal
    rake: Decimal


@dataclass(frozen=True)
class Hero:
    """The player whose hole cards are dealt face up in the log."""
    player: Player
    hand: HoleCards


@dataclass(frozen=True)
class HandHistory:
    """Complete record of a single poker hand."""

    meta_data: MetaData
    players: Tuple[Player, ...]
    # Only streets with at least one action, in log order
    streets: Tuple[StreetActions, ...]
    result: Result

    @property
    def actions(self) -> List[PlayerAction]:
        return [a for street in self.streets for a in street.actions]

    def street(self, street_type: Street) -> Optional[StreetActions]:
        for street in self.streets:
            if street.street_type == street_type:
                return street
        return None

    def player(self, name: str) -> Optional[Player]:
        for player in self.players:
            if player.name == name:
                return player
        return None

    def has_player(self, name: str) -> bool:
        return self.player(name) is not None

    def actions_of(self, name: str) -> List[PlayerAction]:
        return [a for a in self.actions if a.player.name == name]
