import os

import pytest

from handparser.parser.stars_parser import PokerStarsParser

FIXTURE_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def parser():
    return PokerStarsParser()


@pytest.fixture
def load_hand(parser):
    """Parse a file under fixtures/hands and return its only hand."""
    def load(name):
        hands = parser.parse_file(os.path.join(FIXTURE_DIR, "hands", name))
        assert len(hands) == 1
        return hands[0]
    return load
