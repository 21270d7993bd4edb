"""All regex patterns for PokerStars hand history parsing.

Line classification is table driven: each stage walks an ordered tuple of
rules top to bottom and the first pattern that matches wins.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Callable, NamedTuple, Optional, Pattern

from handparser.errors import InvalidHand
from handparser.models.action import Action, ActionType
from handparser.models.card import HoleCards

MONEY = r"\d+(?:\.\d{2})?"
CARD = r"\S{2}"


def to_money(text: str) -> Decimal:
    """Parse a dollar amount like '0.25' or '10'."""
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise InvalidHand(f"Invalid money amount: {text!r}")
    if not value.is_finite() or value < 0:
        raise InvalidHand(f"Invalid money amount: {text!r}")
    return value


class LineShape(NamedTuple):
    """Splits a raw line into a player name and an action phrase."""
    name: str
    pattern: Pattern

    def split(self, line: str) -> Optional[tuple]:
        match = self.pattern.search(line)
        if match is None:
            return None
        return match.group("name"), match.group("action")


class PhraseRule(NamedTuple):
    """Turns an action phrase into an Action."""
    name: str
    pattern: Pattern
    build: Callable[[re.Match], Action]


# Header
# PokerStars Game #27738502010: Hold'em No Limit ($0.05/$0.10 USD) - 2009/05/06 1:09:11 ET
META_DATA = re.compile(
    r"(?P<site>\S+)\s(?:Game|Zoom\sHand|Hand)\s\#\d+:\s+(?P<game>.+)\s"
    r"\(\$(?P<sb>" + MONEY + r")/\$(?P<bb>" + MONEY + r")(?:\sUSD)?\)"
)
# Table 'Thalia III' 6-max Seat #4 is the button
TABLE = re.compile(r"Table\s'(?P<table>.+)'")

# Seat 3: BaronMcCool ($10.05 in chips)
PLAYER_SEAT = re.compile(
    r"Seat\s\d+:\s(?P<name>.+)\s\(\$(?P<stack>" + MONEY + r")\sin\schips\)"
)
SMALL_BLIND = re.compile(r"posts\ssmall\sblind")
HERO = re.compile(
    r"Dealt\sto\s(?P<hero>.+)\s\[(?P<left>" + CARD + r")\s(?P<right>" + CARD + r")\]"
)

# Section banners
HOLE_CARDS = re.compile(r"\*\*\*\sHOLE\sCARDS\s\*\*\*")
FLOP = re.compile(r"\*\*\*\sFLOP\s\*\*\*")
TURN = re.compile(r"\*\*\*\sTURN\s\*\*\*")
RIVER = re.compile(r"\*\*\*\sRIVER\s\*\*\*")
SHOW_DOWN = re.compile(r"\*\*\*\sSHOW\sDOWN\s\*\*\*")
SUMMARY = re.compile(r"\*\*\*\sSUMMARY\s\*\*\*")

# Total pot $0.90 | Rake $0.04
# Total pot $5.60 Main pot $3.20. Side pot $2.40. | Rake $0.25
TOTAL_POT = re.compile(
    r"Total\spot\s\$(?P<pot>" + MONEY + r")(?:\s.*?)?\s\|\sRake\s\$(?P<rake>" + MONEY + r")"
)

# Lines with nothing to parse once the street is known
NOISE = (
    re.compile(r".+\sleaves\sthe\stable"),
    re.compile(r".+\sjoins\sthe\stable"),
    re.compile(r"sits\sout"),
    re.compile(r"\sis\ssitting\sout"),
    re.compile(r"\sis\s(?:dis)?connected"),
    re.compile(r'^.+\ssaid,\s"'),
    re.compile(r"^Board\s\["),
    re.compile(r"^Total\spot\s"),
    HOLE_CARDS,
    FLOP,
    TURN,
    RIVER,
    SHOW_DOWN,
    SUMMARY,
)


def _cards(match: re.Match) -> HoleCards:
    return HoleCards(match.group("left"), match.group("right"))


def _amount(match: re.Match, group: str = "amount") -> Decimal:
    return to_money(match.group(group))


# Street actions: "name: action" first, then the lines that put the name
# somewhere else.
LINE_SHAPES = (
    LineShape("standard", re.compile(r"(?P<name>.+):\s(?P<action>.+)")),
    LineShape("uncalled", re.compile(
        r"(?P<action>Uncalled\sbet\s\(\$" + MONEY + r"\)\sreturned\sto\s)(?P<name>.+)")),
    LineShape("collected", re.compile(r"(?P<name>.+)\s(?P<action>collected.+)")),
    LineShape("timed_out", re.compile(r"(?P<name>.+)\s(?P<action>has\stimed\sout)")),
    LineShape("posts", re.compile(r"(?P<name>.+):\s(?P<action>posts.+)")),
)

ACTION_PHRASES = (
    PhraseRule("checks", re.compile(r"checks"),
               lambda m: Action(ActionType.CHECK)),
    PhraseRule("folds", re.compile(r"folds"),
               lambda m: Action(ActionType.FOLD)),
    PhraseRule("calls", re.compile(r"calls\s\$(?P<amount>" + MONEY + r")"),
               lambda m: Action(ActionType.CALL, amount=_amount(m))),
    PhraseRule("bets", re.compile(r"bets\s\$(?P<amount>" + MONEY + r")"),
               lambda m: Action(ActionType.BET, amount=_amount(m))),
    PhraseRule("raises", re.compile(
        r"raises\s\$(?P<amount>" + MONEY + r")\sto\s\$(?P<to>" + MONEY + r")"),
               lambda m: Action(ActionType.RAISE, amount=_amount(m),
                                to_amount=_amount(m, "to"))),
    PhraseRule("collect_uncalled", re.compile(
        r"Uncalled\sbet\s\(\$(?P<amount>" + MONEY + r")\)\sreturned\sto"),
               lambda m: Action(ActionType.COLLECT_UNCALLED, amount=_amount(m))),
    PhraseRule("collect_from_pot", re.compile(r"collected\s\$(?P<amount>" + MONEY + r")"),
               lambda m: Action(ActionType.COLLECT_FROM_POT, amount=_amount(m))),
    PhraseRule("timed_out", re.compile(r"has\stimed\sout"),
               lambda m: Action(ActionType.TIMED_OUT)),
    PhraseRule("doesnt_show", re.compile(r"doesn't\sshow\shand"),
               lambda m: Action(ActionType.DOESNT_SHOW)),
    PhraseRule("shows", re.compile(
        r"shows\s\[(?P<left>" + CARD + r")\s(?P<right>" + CARD + r")\]"),
               lambda m: Action(ActionType.SHOWS, cards=_cards(m))),
    PhraseRule("mucks", re.compile(r"mucks\shand"),
               lambda m: Action(ActionType.MUCKS)),
    PhraseRule("posts", re.compile(
        r"(?:blinds?|ante)\s\$(?P<amount>" + MONEY + r")"),
               lambda m: Action(ActionType.POSTS, amount=_amount(m))),
)

# Summary lines: "Seat N: name [(role) ...] outcome"
_SEAT_ROLE = r"(?:\((?:big\sblind|small\sblind|button)\)\s)*"


def _summary_shape(name: str, action: str) -> LineShape:
    return LineShape(name, re.compile(
        r"Seat\s\d+:\s(?P<name>.+?)\s" + _SEAT_ROLE + r"(?P<action>" + action + r")"))


SHOWED_AND_WON = (
    r"showed\s\[(?P<left>" + CARD + r")\s(?P<right>" + CARD + r")\]"
    r"\sand\swon\s\(\$(?P<amount>" + MONEY + r")\)"
)

SUMMARY_SHAPES = (
    _summary_shape("folded", r"folded"),
    _summary_shape("showed_and_won", SHOWED_AND_WON),
    _summary_shape("showed", r"showed.+"),
    _summary_shape("mucked", r"mucked\s\[" + CARD + r"\s" + CARD + r"\]"),
    _summary_shape("collected", r"collected.+"),
)

SUMMARY_PHRASES = (
    PhraseRule("collected", re.compile(r"collected\s\(\$(?P<amount>" + MONEY + r")\)"),
               lambda m: Action(ActionType.COLLECT_FROM_POT, amount=_amount(m))),
    PhraseRule("folded", re.compile(r"folded"),
               lambda m: Action(ActionType.FOLD)),
    PhraseRule("showed_and_won", re.compile(SHOWED_AND_WON),
               lambda m: Action(ActionType.SHOWED_AND_WON, cards=_cards(m),
                                amount=_amount(m))),
    PhraseRule("showed_and_lost", re.compile(
        r"showed\s\[(?P<left>" + CARD + r")\s(?P<right>" + CARD + r")\]\sand\slost"),
               lambda m: Action(ActionType.SHOWED_AND_LOST, cards=_cards(m))),
    PhraseRule("mucked", re.compile(
        r"mucked\s\[(?P<left>" + CARD + r")\s(?P<right>" + CARD + r")\]"),
               lambda m: Action(ActionType.MUCKS_AND_SHOWS, cards=_cards(m))),
)


def first_phrase(rules, phrase: str) -> Optional[Action]:
    """Build an Action from the first rule whose pattern matches the phrase."""
    for rule in rules:
        match = rule.pattern.search(phrase)
        if match:
            return rule.build(match)
    return None


def first_shape(shapes, line: str) -> Optional[tuple]:
    """Split a line with the first shape that matches it."""
    for shape in shapes:
        split = shape.split(line)
        if split is not None:
            return split
    return None
