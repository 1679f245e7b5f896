"""Showdown engine.

This module provides:
- best_hand: Winning hand string(s) from a batch of hands
- rank_hands / evaluate_hands: Classified hands, ranked or in input order
- ShowdownConfig: Showdown options
- deal_hands / deal_card_lists / shuffled_shoe: Random dealing from N decks
"""

from .showdown import (
    ShowdownConfig,
    best_hand,
    evaluate_hands,
    rank_hands,
)
from .dealer import (
    shuffled_shoe,
    deal_card_lists,
    deal_hands,
)

__all__ = [
    "ShowdownConfig",
    "best_hand",
    "evaluate_hands",
    "rank_hands",
    "shuffled_shoe",
    "deal_card_lists",
    "deal_hands",
]
