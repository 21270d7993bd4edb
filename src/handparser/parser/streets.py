"""Splitting a log into hands and tagging each line with its street."""

from typing import Iterable, Iterator, List, Tuple

from handparser.models.action import Street
from handparser.parser import patterns

# Banner lines that move the cursor to a later street.
_BANNERS = (
    (patterns.FLOP, Street.FLOP),
    (patterns.TURN, Street.TURN),
    (patterns.RIVER, Street.RIVER),
    (patterns.SHOW_DOWN, Street.SHOWDOWN),
    (patterns.SUMMARY, Street.SUMMARY),
)


def split_hands(lines: Iterable[str]) -> Iterator[List[str]]:
    """Yield each run of non-blank lines as one hand.

    Blank lines only separate hands; they never appear in a group and a
    group is never empty.
    """
    group: List[str] = []
    for line in lines:
        if line.strip():
            group.append(line)
        elif group:
            yield group
            group = []
    if group:
        yield group


def next_street(state: Street, line: str) -> Street:
    """Return the street a line belongs to, given the street before it.

    The line after "Dealt to" always starts preflop, even when it is a
    banner, because that check comes before the banner checks. The cursor
    only moves forward; a marker for an earlier street is ignored.
    """
    street = _marked_street(state, line)
    if street.order >= state.order:
        return street
    return Street.PREFLOP if state == Street.HERO else state


def _marked_street(state: Street, line: str) -> Street:
    if patterns.PLAYER_SEAT.search(line):
        return Street.PLAYERS
    if patterns.SMALL_BLIND.search(line):
        return Street.BLINDS
    if state == Street.HERO:
        return Street.PREFLOP
    if patterns.HERO.search(line):
        return Street.HERO
    for pattern, street in _BANNERS:
        if pattern.search(line):
            return street
    return state


def classify_lines(lines: Iterable[str]) -> List[Tuple[Street, str]]:
    """Pair every line of a hand with the street active when it was read."""
    state = Street.METADATA
    tagged = []
    for line in lines:
        state = next_street(state, line)
        tagged.append((state, line))
    return tagged


def is_actionable(line: str) -> bool:
    """False for lines that carry nothing to parse (banners, table chatter)."""
    return not any(pattern.search(line) for pattern in patterns.NOISE)


def lines_on(tagged: Iterable[Tuple[Street, str]], street: Street) -> List[str]:
    return [line for line_street, line in tagged if line_street == street]
