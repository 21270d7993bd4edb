"""Data models for parsed hand histories."""

from handparser.models.card import HoleCards, NO_CARD
from handparser.models.player import Player
from handparser.models.action import (
    ACTION_STREETS, Action, ActionType, PlayerAction, Street, StreetActions,
)
from handparser.models.hand import HandHistory, Hero, MetaData, Result, Stake

__all__ = [
    "HoleCards", "NO_CARD",
    "Player",
    "ACTION_STREETS", "Action", "ActionType", "PlayerAction", "Street", "StreetActions",
    "HandHistory", "Hero", "MetaData", "Result", "Stake",
]
