"""PokerStars hand history parser."""

from handparser.errors import InvalidHand
from handparser.parser.stars_parser import PokerStarsParser, parse_file, parse_folder

__all__ = ["InvalidHand", "PokerStarsParser", "parse_file", "parse_folder"]
