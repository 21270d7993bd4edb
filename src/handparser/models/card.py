"""Hole card models."""

from dataclasses import dataclass

# Placeholder for a card that was never revealed.
NO_CARD = "X"


@dataclass(frozen=True)
class HoleCards:
    """A player's two hole cards as written in the log, e.g. 'Ac', 'Td'."""
    left: str
    right: str

    @classmethod
    def unknown(cls) -> "HoleCards":
        return cls(NO_CARD, NO_CARD)

    @property
    def is_known(self) -> bool:
        return self.left != NO_CARD and self.right != NO_CARD

    def __str__(self) -> str:
        return f"{self.left} {self.right}"
