"""Parsers for the individual sections of a hand.

Each parser takes the lines tagged with its street and raises InvalidHand
when a line does not fit the grammar.
"""

from typing import List, Sequence

from handparser.errors import InvalidHand
from handparser.models.action import PlayerAction, Street, StreetActions
from handparser.models.card import HoleCards
from handparser.models.hand import Hero, MetaData, Result, Stake
from handparser.models.player import Player
from handparser.parser import patterns


def find_player(players: Sequence[Player], name: str) -> Player:
    """Look up a player of this hand by exact name."""
    matches = [p for p in players if p.name == name]
    if len(matches) != 1:
        raise InvalidHand(f"Unknown player: {name!r}")
    return matches[0]


def parse_meta_data(lines: List[str]) -> MetaData:
    """Parse the header line and the table line."""
    if len(lines) < 2:
        raise InvalidHand("Hand is missing its header lines")

    header = patterns.META_DATA.search(lines[0])
    if header is None:
        raise InvalidHand(f"Unrecognised hand header: {lines[0]!r}")
    table = patterns.TABLE.search(lines[1])
    if table is None:
        raise InvalidHand(f"Unrecognised table line: {lines[1]!r}")

    stake = Stake(
        small_blind=patterns.to_money(header.group("sb")),
        big_blind=patterns.to_money(header.group("bb")),
    )
    return MetaData(site=header.group("site"), table_name=table.group("table"),
                    stake=stake)


def parse_players(lines: List[str]) -> List[Player]:
    """Parse the seat list, keeping seat order."""
    players = []
    for line in lines:
        match = patterns.PLAYER_SEAT.search(line)
        if match is None:
            continue
        players.append(Player(match.group("name"),
                              patterns.to_money(match.group("stack"))))

    names = [p.name for p in players]
    if len(set(names)) != len(names):
        raise InvalidHand("Duplicate player names in seat list")
    return players


def parse_hero(lines: List[str], players: Sequence[Player]) -> Hero:
    """Find the single "Dealt to" line and resolve the hero."""
    dealt = [line for line in lines if line.startswith("Dealt to ")]
    if len(dealt) != 1:
        raise InvalidHand(f"Expected one 'Dealt to' line, found {len(dealt)}")

    match = patterns.HERO.search(dealt[0])
    if match is None:
        raise InvalidHand(f"Unrecognised hole cards line: {dealt[0]!r}")
    cards = HoleCards(match.group("left"), match.group("right"))
    return Hero(player=find_player(players, match.group("hero")), hand=cards)


def _parse_actions(lines: List[str], players: Sequence[Player],
                   shapes, phrases) -> List[PlayerAction]:
    actions = []
    for line in lines:
        split = patterns.first_shape(shapes, line)
        if split is None:
            raise InvalidHand(f"Unrecognised line: {line!r}")
        name, phrase = split
        player = find_player(players, name)

        action = patterns.first_phrase(phrases, phrase)
        if action is None:
            raise InvalidHand(f"Unrecognised action: {phrase!r}")
        actions.append(PlayerAction(player=player, action=action))
    return actions


def parse_street(street_type: Street, lines: List[str],
                 players: Sequence[Player]) -> StreetActions:
    """Parse the betting actions of one street."""
    actions = _parse_actions(lines, players, patterns.LINE_SHAPES,
                             patterns.ACTION_PHRASES)
    return StreetActions(street_type=street_type, actions=tuple(actions))


def parse_summary(lines: List[str], players: Sequence[Player]) -> StreetActions:
    """Parse the per-seat outcome lines of the summary."""
    actions = _parse_actions(lines, players, patterns.SUMMARY_SHAPES,
                             patterns.SUMMARY_PHRASES)
    return StreetActions(street_type=Street.SUMMARY, actions=tuple(actions))


def parse_result(lines: List[str]) -> Result:
    """Parse the "Total pot $X | Rake $Y" line from the summary."""
    for line in lines:
        match = patterns.TOTAL_POT.search(line)
        if match:
            return Result(pot=patterns.to_money(match.group("pot")),
                          rake=patterns.to_money(match.group("rake")))
    raise InvalidHand("Hand has no total pot line")
