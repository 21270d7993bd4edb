"""Parser errors."""


class InvalidHand(ValueError):
    """Raised when a hand's text does not fit the hand history grammar.

    Caught per hand by the parser; a hand that raises it is left out of the
    results instead of aborting the rest of the file.
    """
