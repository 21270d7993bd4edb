"""Main parser for PokerStars hand history files."""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from handparser import config
from handparser.errors import InvalidHand
from handparser.models.action import ACTION_STREETS, Street
from handparser.models.hand import HandHistory
from handparser.parser import sections
from handparser.parser.streets import classify_lines, is_actionable, lines_on, split_hands

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class PokerStarsParser:
    """Parse PokerStars hand history logs into HandHistory objects."""

    def __init__(self, encoding: Optional[str] = None,
                 errors: Optional[str] = None,
                 file_glob: Optional[str] = None):
        self.encoding = encoding or config.FILE_ENCODING
        self.errors = errors or config.FILE_ENCODING_ERRORS
        self.file_glob = file_glob or config.FILE_GLOB

    def parse_file(self, filepath: PathLike) -> List[HandHistory]:
        """Parse a log file and return its valid hands.

        Raises OSError if the file is missing or unreadable.
        """
        with open(filepath, "r", encoding=self.encoding, errors=self.errors) as f:
            lines = f.read().splitlines()
        hands = self.parse_lines(lines)
        logger.info("Parsed %d hands from %s", len(hands), filepath)
        return hands

    def parse_text(self, text: str) -> List[HandHistory]:
        return self.parse_lines(text.splitlines())

    def parse_lines(self, lines: Iterable[str]) -> List[HandHistory]:
        hands = []
        for group in split_hands(lines):
            hand = self.try_parse_hand(group)
            if hand is not None:
                hands.append(hand)
        return hands

    def parse_folder(self, folder: PathLike) -> List[HandHistory]:
        """Parse every matching file under a folder, subfolders included."""
        hands: List[HandHistory] = []
        for path in self._walk(Path(folder)):
            hands.extend(self.parse_file(path))
        return hands

    def _walk(self, directory: Path) -> Iterator[Path]:
        yield from sorted(p for p in directory.glob(self.file_glob) if p.is_file())
        for subdir in sorted(p for p in directory.iterdir() if p.is_dir()):
            yield from self._walk(subdir)

    def try_parse_hand(self, lines: List[str]) -> Optional[HandHistory]:
        """Parse one hand, or return None if it is not a valid hand."""
        try:
            return self.parse_hand(lines)
        except InvalidHand as e:
            logger.debug("Skipping hand starting %r: %s", lines[0] if lines else "", e)
            return None

    def parse_hand(self, lines: List[str]) -> HandHistory:
        """Parse the lines of a single hand into a HandHistory.

        Raises InvalidHand if any section does not parse.
        """
        tagged = classify_lines(lines)

        # The pot line is read before filtering drops it.
        result = sections.parse_result(lines_on(tagged, Street.SUMMARY))
        filtered = [(street, line) for street, line in tagged if is_actionable(line)]

        meta_data = sections.parse_meta_data(lines_on(filtered, Street.METADATA))
        players = sections.parse_players(lines_on(filtered, Street.PLAYERS))
        # Not kept on the record; parsed so a hand without a valid hero is rejected.
        sections.parse_hero(lines_on(filtered, Street.HERO), players)

        streets = [
            sections.parse_street(street, lines_on(filtered, street), players)
            for street in ACTION_STREETS
        ]
        streets.append(sections.parse_summary(lines_on(filtered, Street.SUMMARY), players))

        return HandHistory(
            meta_data=meta_data,
            players=tuple(players),
            streets=tuple(s for s in streets if s.actions),
            result=result,
        )


def parse_file(filepath: PathLike) -> List[HandHistory]:
    """Parse a hand history file with default settings."""
    return PokerStarsParser().parse_file(filepath)


def parse_folder(folder: PathLike) -> List[HandHistory]:
    """Parse every hand history file under a folder with default settings."""
    return PokerStarsParser().parse_folder(folder)
