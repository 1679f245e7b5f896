"""Poker Showdown - five-card poker hand ranking.

Ranks five-card hands drawn from one or more standard decks and picks
the winning hand(s), returned in the caller's original format.
"""

__version__ = "0.1.0"
__author__ = "Poker Showdown Team"

from poker_showdown.engine import ShowdownConfig, best_hand, evaluate_hands, rank_hands
from poker_showdown.rules import (
    Category,
    Hand,
    HandParseError,
    InvalidHandLength,
    InvalidSuit,
    InvalidRank,
    FiveOfAKindError,
    DuplicateCardError,
)
from poker_showdown.utils.seeding import set_seed

__all__ = [
    "__version__",
    "ShowdownConfig",
    "best_hand",
    "evaluate_hands",
    "rank_hands",
    "Category",
    "Hand",
    "HandParseError",
    "InvalidHandLength",
    "InvalidSuit",
    "InvalidRank",
    "FiveOfAKindError",
    "DuplicateCardError",
    "set_seed",
]
