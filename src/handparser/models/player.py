"""Player model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Player:
    """A seated player and the stack they started the hand with."""
    name: str
    stack: Decimal

    def __str__(self) -> str:
        return f"{self.name} (${self.stack})"
